import pytest

from cuddle.frame import Column, ColumnType, DataFrame, DataFrameError
from cuddle.transform import apply, filter_rows, sort_rows


def make_frame():
    return DataFrame(
        [
            Column("name", ColumnType.STRING, ["carol", "alice", "bob", "dave"]),
            Column("age", ColumnType.INT, [35, 22, 35, 18]),
            Column("score", ColumnType.FLOAT, [1.5, None, 3.25, 0.5]),
        ],
        ";",
    )


def test_filter_keeps_matching_rows_in_order():
    frame = make_frame()
    result = filter_rows(frame, "age", lambda v: v > 20)
    assert result.get_values("name") == ["carol", "alice", "bob"]
    assert result.get_values("age") == [35, 22, 35]
    assert result.separator == ";"
    assert result.column_names == frame.column_names


def test_filter_skips_missing_values():
    frame = make_frame()
    seen = []

    def predicate(value):
        seen.append(value)
        return True

    result = filter_rows(frame, "score", predicate)
    assert None not in seen
    assert result.get_values("name") == ["carol", "bob", "dave"]


def test_filter_without_match_raises():
    with pytest.raises(DataFrameError):
        filter_rows(make_frame(), "age", lambda v: v > 100)


def test_filter_unknown_column_raises():
    with pytest.raises(DataFrameError):
        filter_rows(make_frame(), "missing", lambda v: True)


def test_filter_leaves_source_untouched():
    frame = make_frame()
    before = frame.copy()
    filter_rows(frame, "age", lambda v: v < 30)
    assert frame == before


def test_sort_ascending_orders_column():
    frame = make_frame()
    result = sort_rows(frame, "name", lambda a, b: a > b)
    assert result.get_values("name") == sorted(frame.get_values("name"))


def test_sort_moves_whole_rows():
    frame = make_frame()
    result = sort_rows(frame, "name", lambda a, b: a > b)
    original = dict(zip(frame.get_values("name"), frame.get_values("age")))
    assert dict(zip(result.get_values("name"), result.get_values("age"))) == original
    assert result.shape() == frame.shape()


def test_sort_is_stable_for_equal_keys():
    frame = make_frame()
    result = sort_rows(frame, "age", lambda a, b: a < b)
    assert result.get_values("age") == sorted(frame.get_values("age"), reverse=True)
    assert result.get_values("name")[:2] == ["carol", "bob"]


def test_sort_never_swapping_keeps_order():
    frame = make_frame()
    assert sort_rows(frame, "age", lambda a, b: False) == frame


def test_sort_unknown_column_raises():
    with pytest.raises(DataFrameError):
        sort_rows(make_frame(), "missing", lambda a, b: a > b)


def test_apply_identity_returns_equal_frame():
    frame = make_frame()
    result = apply(frame, "age", lambda v: v)
    assert result == frame
    assert result is not frame


def test_apply_changes_only_target_column():
    frame = make_frame()
    result = apply(frame, "name", str.upper)
    assert result.get_values("name") == [n.upper() for n in frame.get_values("name")]
    assert result.get_values("age") == frame.get_values("age")
    assert result.column("name").type is ColumnType.STRING
    assert frame.get_values("name")[0] == "carol"


def test_apply_preserves_missing_values():
    frame = make_frame()
    calls = []

    def func(value):
        calls.append(value)
        return value

    result = apply(frame, "score", func)
    assert result.get_value(1, "score") is None
    assert None not in calls
    assert len(calls) == 3


def test_apply_unknown_column_raises():
    with pytest.raises(DataFrameError):
        apply(make_frame(), "missing", lambda v: v)