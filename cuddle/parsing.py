"""Token cleaning, splitting, type inference and conversion for CSV input."""

from __future__ import annotations

import re
from typing import Any

from cuddle.frame import ColumnType

_SPACE = "[ \t\n\v\f\r]"
_TERMINATOR = r"(?:[\r\n].*)?"
_DECIMAL = r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_HEX = (
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"(?:[pP][+-]?[0-9]+)?"
)

_NEWLINE_RE = re.compile(r"[\r\n]")
_FLOAT_TOKEN_RE = re.compile(
    rf"(?:{_SPACE}*[+-]?(?:{_HEX}|{_DECIMAL}))?{_TERMINATOR}", re.DOTALL
)
_INT_TOKEN_RE = re.compile(rf"(?:{_SPACE}*[+-]?[0-9]+)?{_TERMINATOR}", re.DOTALL)

_INT_PREFIX_RE = re.compile(rf"{_SPACE}*([+-]?)([0-9]+)")
_FLOAT_PREFIX_RE = re.compile(
    rf"{_SPACE}*([+-]?)(?:(infinity|inf|nan)|({_HEX})|({_DECIMAL}))",
    re.IGNORECASE,
)

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_ULONG_MAX = 2**64 - 1


def clean_token(token: str) -> str:
    """Cut a token at its first line break, or drop its trailing spaces if it has none."""
    newline = _NEWLINE_RE.search(token)
    if newline:
        return token[: newline.start()]
    return token.rstrip(" ")


def split_line(line: str, separator: str) -> list[str]:
    """Split a line on any of the separator characters, dropping empty fields."""
    if not separator:
        return [line] if line else []
    pattern = "[" + "".join(re.escape(char) for char in separator) + "]"
    return [token for token in re.split(pattern, line) if token]


def infer_type(token: str) -> ColumnType:
    """Guess the column type a single token belongs to."""
    if clean_token(token).lower() in ("true", "false"):
        return ColumnType.BOOL
    if token.count(".") == 1 and _FLOAT_TOKEN_RE.fullmatch(token):
        return ColumnType.FLOAT
    if "." not in token and _INT_TOKEN_RE.fullmatch(token):
        return ColumnType.INT if token.startswith("-") else ColumnType.UINT
    return ColumnType.STRING


def merge_type(current: ColumnType, new: ColumnType) -> ColumnType:
    """Combine the type seen so far for a column with the type of a new token."""
    result = current
    if result is ColumnType.UNDEFINED or result is new:
        result = new
    if result is ColumnType.BOOL:
        result = new
    if result is ColumnType.UINT and new in (ColumnType.INT, ColumnType.FLOAT):
        result = new
    if result in (ColumnType.INT, ColumnType.UINT) and new is ColumnType.FLOAT:
        result = ColumnType.FLOAT
    if new is ColumnType.STRING:
        result = ColumnType.STRING
    return result


def _leading_integer(text: str) -> tuple[bool, int]:
    match = _INT_PREFIX_RE.match(text)
    if not match:
        return False, 0
    return match.group(1) == "-", int(match.group(2))


def _to_int32(text: str) -> int:
    negative, magnitude = _leading_integer(text)
    value = -magnitude if negative else magnitude
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    return (value + 2**31) % 2**32 - 2**31


def _to_uint32(text: str) -> int:
    negative, magnitude = _leading_integer(text)
    if magnitude > _ULONG_MAX:
        value = _ULONG_MAX
    else:
        value = (-magnitude if negative else magnitude) % 2**64
    return value % 2**32


def _to_float(text: str) -> float:
    match = _FLOAT_PREFIX_RE.match(text)
    if not match:
        return 0.0
    sign, special, hex_part, decimal_part = match.groups()
    if special:
        value = float(special)
    elif hex_part:
        value = float.fromhex(hex_part)
    else:
        value = float(decimal_part)
    return -value if sign == "-" else value


def convert_token(token: str, column_type: ColumnType) -> Any:
    """Turn a raw token into a value of the given column type."""
    cleaned = clean_token(token)
    if column_type is ColumnType.BOOL:
        return cleaned.lower() == "true"
    if column_type is ColumnType.INT:
        return _to_int32(cleaned)
    if column_type is ColumnType.UINT:
        return _to_uint32(cleaned)
    if column_type is ColumnType.FLOAT:
        return _to_float(cleaned)
    return cleaned