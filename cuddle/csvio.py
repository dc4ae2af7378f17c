"""Reading dataframes from and writing them to delimited text files."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from cuddle.frame import Column, ColumnType, DataFrame, DataFrameError
from cuddle.parsing import clean_token, convert_token, infer_type, merge_type, split_line


def _split_lines(text: str) -> list[str]:
    """Split text into lines that keep their trailing newline."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def read_csv(filename: str, separator: str | None = None) -> DataFrame:
    """Load a delimited file, inferring a type for every column."""
    sep = "," if separator is None else separator[:1]
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise DataFrameError(f"cannot read {filename!r}") from exc
    lines = _split_lines(text)
    if not lines:
        return DataFrame([], sep)

    names = split_line(lines[0], sep)
    if not names:
        raise DataFrameError("header line holds no column names")
    names[-1] = names[-1][:-1]
    width = len(names)

    records = [split_line(line, sep)[:width] for line in lines[1:]]

    types = [ColumnType.UNDEFINED] * width
    for record in records:
        for index, token in enumerate(record):
            types[index] = merge_type(types[index], infer_type(clean_token(token)))
    types = [
        ColumnType.STRING if column_type is ColumnType.UNDEFINED else column_type
        for column_type in types
    ]

    columns = [
        Column(
            name,
            column_type,
            [
                convert_token(record[index], column_type) if index < len(record) else None
                for record in records
            ],
        )
        for index, (name, column_type) in enumerate(zip(names, types))
    ]
    return DataFrame(columns, sep)


def format_value(value: Any, column_type: ColumnType) -> str:
    """Render one cell the way it is written to a file."""
    if column_type is ColumnType.UNDEFINED:
        return "UNKNOWN"
    if value is None:
        raise DataFrameError("cannot write a missing value")
    if column_type is ColumnType.BOOL:
        return "true" if value else "false"
    if column_type is ColumnType.INT:
        return str(int(value))
    if column_type is ColumnType.UINT:
        return str(int(value) % 2**32)
    if column_type is ColumnType.FLOAT:
        return f"{float(value):.2f}"
    return str(value)


def format_csv(dataframe: DataFrame) -> str:
    """Render a whole dataframe as delimited text with a header line."""
    sep = dataframe.separator
    lines = [sep.join(dataframe.column_names)]
    for row in range(dataframe.nb_rows):
        lines.append(
            sep.join(
                format_value(column.data[row], column.type)
                for column in dataframe.columns
            )
        )
    return "\n".join(lines) + "\n"


def write_csv(dataframe: DataFrame, filename: str) -> None:
    """Write a dataframe to a file."""
    text = format_csv(dataframe)
    try:
        with open(filename, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as exc:
        raise DataFrameError(f"cannot write {filename!r}") from exc


def print_csv(dataframe: DataFrame, file: TextIO | None = None) -> None:
    """Write a dataframe as delimited text to a stream, standard output by default."""
    out = file if file is not None else sys.stdout
    out.write(format_csv(dataframe))