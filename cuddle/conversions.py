"""Per-value type converters and whole-column type conversion for dataframes."""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Optional

from cuddle.frame import Column, ColumnType, DataFrame, DataFrameError

Converter = Callable[[Any], Any]

_SPACE = "[ \t\n\v\f\r]"
_INT_PREFIX_RE = re.compile(rf"{_SPACE}*([+-]?)([0-9]+)")
_DECIMAL = r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_HEX = (
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"(?:[pP][+-]?[0-9]+)?"
)
_FLOAT_PREFIX_RE = re.compile(
    rf"{_SPACE}*([+-]?)(?:(infinity|inf|nan)|({_HEX})|({_DECIMAL}))",
    re.IGNORECASE,
)
_TRUE_WORDS = ("true", "yes", "y")
_BOOL_WORDS = {True: "true", False: "false"}


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def string_to_int(value: str) -> int:
    """Read the leading integer of a string, or 0 when it has none."""
    match = _INT_PREFIX_RE.match(value)
    if not match:
        return 0
    number = int(match.group(2))
    return _wrap_int32(-number if match.group(1) == "-" else number)


def string_to_float(value: str) -> float:
    """Read the leading floating-point number of a string, or 0.0 when it has none."""
    match = _FLOAT_PREFIX_RE.match(value)
    if not match:
        return 0.0
    sign, special, hex_part, decimal_part = match.groups()
    if special:
        number = float(special)
    elif hex_part:
        number = float.fromhex(hex_part)
    else:
        number = float(decimal_part)
    return -number if sign == "-" else number


def string_to_bool(value: str) -> bool:
    """True for "true", "yes", "y" in any case, and for "1"."""
    return value == "1" or value.lower() in _TRUE_WORDS


def int_to_string(value: int) -> str:
    return str(int(value))


def int_to_float(value: int) -> float:
    return float(value)


def int_to_bool(value: int) -> bool:
    return value != 0


def float_to_string(value: float) -> str:
    """Render with two decimals."""
    return f"{float(value):.2f}"


def float_to_int(value: float) -> int:
    """Truncate toward zero."""
    if math.isnan(value) or math.isinf(value):
        raise DataFrameError(f"cannot convert {value!r} to an integer")
    return _wrap_int32(int(value))


def float_to_bool(value: float) -> bool:
    return value != 0.0


def bool_to_string(value: bool) -> str:
    """Render a boolean as "true" or "false"."""
    truth = bool(value)
    return _BOOL_WORDS[truth]


def bool_to_int(value: bool) -> int:
    """Map a boolean to 1 or 0."""
    truth = bool(value)
    return int(truth)


def bool_to_float(value: bool) -> float:
    """Map a boolean to 1.0 or 0.0."""
    truth = bool(value)
    return float(truth)


_CONVERTERS: dict[tuple[ColumnType, ColumnType], Converter] = {
    (ColumnType.STRING, ColumnType.INT): string_to_int,
    (ColumnType.STRING, ColumnType.FLOAT): string_to_float,
    (ColumnType.STRING, ColumnType.BOOL): string_to_bool,
    (ColumnType.INT, ColumnType.STRING): int_to_string,
    (ColumnType.INT, ColumnType.FLOAT): int_to_float,
    (ColumnType.INT, ColumnType.BOOL): int_to_bool,
    (ColumnType.FLOAT, ColumnType.STRING): float_to_string,
    (ColumnType.FLOAT, ColumnType.INT): float_to_int,
    (ColumnType.FLOAT, ColumnType.BOOL): float_to_bool,
    (ColumnType.BOOL, ColumnType.STRING): bool_to_string,
    (ColumnType.BOOL, ColumnType.INT): bool_to_int,
    (ColumnType.BOOL, ColumnType.FLOAT): bool_to_float,
}


def get_converter(src_type: ColumnType, dst_type: ColumnType) -> Optional[Converter]:
    """Return the converter between two types, or None when there is none."""
    if src_type is dst_type:
        return None
    return _CONVERTERS.get((src_type, dst_type))


def convert_value(value: Any, src_type: ColumnType, dst_type: ColumnType) -> Any:
    """Convert one value; values with no converter for the pair are kept as they are."""
    if value is None or src_type is dst_type:
        return value
    converter = get_converter(src_type, dst_type)
    return converter(value) if converter is not None else value


def _is_valid_type(column_type: ColumnType) -> bool:
    return column_type is not ColumnType.UNDEFINED


def to_type(dataframe: DataFrame, column: str, downcast: ColumnType) -> DataFrame:
    """Return a copy of the dataframe with one column converted to ``downcast``.

    Raises DataFrameError for an unknown column, an invalid target type, or a
    missing value anywhere in the dataframe.
    """
    if not isinstance(downcast, ColumnType) or not _is_valid_type(downcast):
        raise DataFrameError(f"invalid target type {downcast!r}")
    target = dataframe.column_index(column)
    columns = []
    for index, source in enumerate(dataframe.columns):
        if any(value is None for value in source.data):
            raise DataFrameError(f"column {source.name!r} holds a missing value")
        if index == target:
            data = [convert_value(v, source.type, downcast) for v in source.data]
            columns.append(Column(source.name, downcast, data))
        else:
            columns.append(Column(source.name, source.type, list(source.data)))
    return DataFrame(columns, dataframe.separator)