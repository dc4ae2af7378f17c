"""Core dataframe types: columns, shape, row subsets, value lookup and summaries."""

from __future__ import annotations

import enum
import math
import sys
from dataclasses import dataclass, field
from typing import Any, NamedTuple, TextIO


class DataFrameError(Exception):
    """Raised when a dataframe operation cannot be carried out."""


class ColumnType(enum.Enum):
    """The type of the values held by a column."""

    BOOL = "bool"
    INT = "int"
    UINT = "unsigned int"
    FLOAT = "float"
    STRING = "string"
    UNDEFINED = "undefined"

    @property
    def label(self) -> str:
        """Human-readable name of the type."""
        return self.value

    @property
    def is_numeric(self) -> bool:
        """True for the integer and floating-point types."""
        return self in (ColumnType.INT, ColumnType.UINT, ColumnType.FLOAT)


@dataclass
class Column:
    """A named, typed sequence of values."""

    name: str
    type: ColumnType
    data: list[Any] = field(default_factory=list)

    def copy(self) -> Column:
        return Column(self.name, self.type, list(self.data))


class Shape(NamedTuple):
    """Number of rows and columns of a dataframe."""

    nb_rows: int
    nb_columns: int


@dataclass
class DataFrame:
    """A table of equally long typed columns."""

    columns: list[Column] = field(default_factory=list)
    separator: str = ","

    def __post_init__(self) -> None:
        lengths = {len(column.data) for column in self.columns}
        if len(lengths) > 1:
            raise DataFrameError("all columns must have the same number of rows")

    @property
    def nb_rows(self) -> int:
        return len(self.columns[0].data) if self.columns else 0

    @property
    def nb_columns(self) -> int:
        return len(self.columns)

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    def column_index(self, name: str) -> int:
        """Return the position of the first column called ``name``."""
        for index, column in enumerate(self.columns):
            if column.name == name:
                return index
        raise DataFrameError(f"no column named {name!r}")

    def column(self, name: str) -> Column:
        """Return the column called ``name``."""
        return self.columns[self.column_index(name)]

    def copy(self) -> DataFrame:
        """Return an independent copy of this dataframe."""
        return DataFrame([column.copy() for column in self.columns], self.separator)

    def shape(self) -> Shape:
        return Shape(self.nb_rows, self.nb_columns)

    def _subset(self, start_row: int, nb_rows: int) -> DataFrame:
        if start_row < 0 or start_row >= self.nb_rows:
            raise DataFrameError("dataframe has no rows to take")
        stop = start_row + min(self.nb_rows - start_row, nb_rows)
        return DataFrame(
            [Column(c.name, c.type, c.data[start_row:stop]) for c in self.columns],
            self.separator,
        )

    def head(self, nb_rows: int) -> DataFrame:
        """Return a new dataframe holding the first ``nb_rows`` rows."""
        if nb_rows <= 0:
            raise DataFrameError("number of rows must be positive")
        return self._subset(0, nb_rows)

    def tail(self, nb_rows: int) -> DataFrame:
        """Return a new dataframe holding the last ``nb_rows`` rows."""
        if nb_rows <= 0:
            raise DataFrameError("number of rows must be positive")
        return self._subset(max(self.nb_rows - nb_rows, 0), nb_rows)

    def get_value(self, row: int, column: str) -> Any:
        """Return the value at ``row`` in the named column."""
        if not 0 <= row < self.nb_rows:
            raise DataFrameError(f"row {row} out of range")
        return self.column(column).data[row]

    def get_values(self, column: str) -> list[Any]:
        """Return all values of the named column."""
        return list(self.column(column).data)

    def get_unique_values(self, column: str) -> list[Any]:
        """Return the distinct non-missing values of a column, in first-seen order."""
        unique: list[Any] = []
        for value in self.column(column).data:
            if value is not None and value not in unique:
                unique.append(value)
        return unique

    def info(self, file: TextIO | None = None) -> None:
        """Write the column names and types."""
        out = file if file is not None else sys.stdout
        out.write(f"{self.nb_columns} columns:\n")
        for column in self.columns:
            out.write(f"- {column.name}: {column.type.label}\n")

    def describe(self, file: TextIO | None = None) -> None:
        """Write count, mean, standard deviation, min and max of numeric columns."""
        out = file if file is not None else sys.stdout
        count = self.nb_rows
        for column in self.columns:
            if not column.type.is_numeric:
                continue
            values = [float(v) for v in column.data if v is not None]
            if not values:
                continue
            mean = sum(values) / len(values)
            std = math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))
            out.write(f"Column: {column.name}\n")
            out.write(f"Count: {count}\n")
            out.write(f"Mean: {mean:.2f}\n")
            out.write(f"Std: {std:.2f}\n")
            out.write(f"Min: {min(values):.2f}\n")
            out.write(f"Max: {max(values):.2f}\n")