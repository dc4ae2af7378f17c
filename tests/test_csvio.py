import io

import pytest

from cuddle.csvio import format_csv, format_value, print_csv, read_csv, write_csv
from cuddle.frame import Column, ColumnType, DataFrame, DataFrameError


def _write(tmp_path, text, name="data.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


SAMPLE = (
    "name,age,score,active,delta\n"
    "alice,30,1.50,true,-3\n"
    "bob,25,2.75,false,4\n"
    "carol,41,0.25,TRUE,0\n"
)


def test_read_csv_names_and_shape(tmp_path):
    df = read_csv(_write(tmp_path, SAMPLE))
    assert df.column_names == ["name", "age", "score", "active", "delta"]
    assert tuple(df.shape()) == (3, 5)
    assert df.separator == ","


def test_read_csv_infers_types(tmp_path):
    df = read_csv(_write(tmp_path, SAMPLE))
    assert [c.type for c in df.columns] == [
        ColumnType.STRING,
        ColumnType.UINT,
        ColumnType.FLOAT,
        ColumnType.BOOL,
        ColumnType.INT,
    ]


def test_read_csv_converts_values(tmp_path):
    df = read_csv(_write(tmp_path, SAMPLE))
    assert df.get_values("name") == ["alice", "bob", "carol"]
    assert df.get_values("age") == [30, 25, 41]
    assert df.get_values("score") == [1.5, 2.75, 0.25]
    assert df.get_values("active") == [True, False, True]
    assert df.get_values("delta") == [-3, 4, 0]


def test_read_csv_mixed_int_and_float_becomes_float(tmp_path):
    df = read_csv(_write(tmp_path, "x\n1\n2.5\n"))
    assert df.column("x").type is ColumnType.FLOAT
    assert df.get_values("x") == [1.0, 2.5]


def test_read_csv_mixed_with_text_becomes_string(tmp_path):
    df = read_csv(_write(tmp_path, "x\n1\nabc\n"))
    assert df.column("x").type is ColumnType.STRING
    assert df.get_values("x") == ["1", "abc"]


def test_read_csv_custom_separator_uses_first_character(tmp_path):
    df = read_csv(_write(tmp_path, "a;b\n1;x\n"), ";|")
    assert df.separator == ";"
    assert df.column_names == ["a", "b"]
    assert df.get_value(0, "b") == "x"


def test_read_csv_empty_fields_are_skipped(tmp_path):
    df = read_csv(_write(tmp_path, "a,b,c\n1,,3\n"))
    assert df.get_values("a") == [1]
    assert df.get_values("b") == [3]
    assert df.get_values("c") == [None]
    assert df.column("c").type is ColumnType.STRING


def test_read_csv_header_only(tmp_path):
    df = read_csv(_write(tmp_path, "a,b\n"))
    assert tuple(df.shape()) == (0, 2)
    assert [c.type for c in df.columns] == [ColumnType.STRING, ColumnType.STRING]


def test_read_csv_blank_line_counts_as_row(tmp_path):
    df = read_csv(_write(tmp_path, "a,b\n1,x\n\n"))
    assert df.nb_rows == 2
    assert df.column("a").type is ColumnType.UINT
    assert df.get_values("a") == [1, 0]
    assert df.get_values("b") == ["x", None]


def test_read_csv_empty_file(tmp_path):
    df = read_csv(_write(tmp_path, ""))
    assert tuple(df.shape()) == (0, 0)


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(DataFrameError):
        read_csv(str(tmp_path / "missing.csv"))


def test_format_csv_pinned_output():
    df = DataFrame(
        [
            Column("x", ColumnType.INT, [1, -2]),
            Column("y", ColumnType.FLOAT, [0.5, 2.0]),
            Column("z", ColumnType.BOOL, [True, False]),
        ]
    )
    assert format_csv(df) == "x,y,z\n1,0.50,true\n-2,2.00,false\n"


def test_format_value_uint_wraps_negative():
    assert format_value(-1, ColumnType.UINT) == "4294967295"


def test_format_value_undefined_type():
    assert format_value(None, ColumnType.UNDEFINED) == "UNKNOWN"


def test_format_value_missing_raises():
    with pytest.raises(DataFrameError):
        format_value(None, ColumnType.INT)


def test_round_trip_through_file(tmp_path):
    source = _write(tmp_path, SAMPLE)
    first = read_csv(source)
    target = str(tmp_path / "out.csv")
    write_csv(first, target)
    second = read_csv(target)
    assert second.column_names == first.column_names
    assert [c.type for c in second.columns] == [c.type for c in first.columns]
    assert [c.data for c in second.columns] == [c.data for c in first.columns]


def test_write_csv_matches_format_csv(tmp_path):
    df = read_csv(_write(tmp_path, SAMPLE))
    target = tmp_path / "out.csv"
    write_csv(df, str(target))
    assert target.read_text(encoding="utf-8") == format_csv(df)


def test_write_csv_keeps_separator(tmp_path):
    df = read_csv(_write(tmp_path, "a;b\n1;2\n"), ";")
    target = tmp_path / "out.csv"
    write_csv(df, str(target))
    assert target.read_text(encoding="utf-8").splitlines()[0] == "a;b"


def test_write_csv_unwritable_path(tmp_path):
    df = read_csv(_write(tmp_path, SAMPLE))
    with pytest.raises(DataFrameError):
        write_csv(df, str(tmp_path / "no" / "such" / "dir.csv"))


def test_write_csv_missing_value_raises(tmp_path):
    df = read_csv(_write(tmp_path, "a,b\n1\n"))
    with pytest.raises(DataFrameError):
        write_csv(df, str(tmp_path / "out.csv"))


def test_print_csv_writes_formatted_text(tmp_path):
    df = read_csv(_write(tmp_path, SAMPLE))
    stream = io.StringIO()
    print_csv(df, stream)
    assert stream.getvalue() == format_csv(df)


def test_print_csv_defaults_to_stdout(tmp_path, capsys):
    df = read_csv(_write(tmp_path, SAMPLE))
    print_csv(df)
    assert capsys.readouterr().out == format_csv(df)