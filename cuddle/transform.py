"""Row filtering, sorting and column transformation for dataframes."""

from __future__ import annotations

from typing import Any, Callable

from cuddle.frame import Column, DataFrame, DataFrameError


def _take_rows(dataframe: DataFrame, rows: list[int]) -> DataFrame:
    """Build a new dataframe from the given source rows, in the given order."""
    return DataFrame(
        [
            Column(column.name, column.type, [column.data[row] for row in rows])
            for column in dataframe.columns
        ],
        dataframe.separator,
    )


def filter_rows(
    dataframe: DataFrame, column: str, predicate: Callable[[Any], bool]
) -> DataFrame:
    """Return the rows whose value in ``column`` is present and satisfies ``predicate``.

    Raises DataFrameError when the column does not exist or no row matches.
    """
    values = dataframe.column(column).data
    matching = [
        row
        for row, value in enumerate(values)
        if value is not None and predicate(value)
    ]
    if not matching:
        raise DataFrameError(f"no row of column {column!r} matches the filter")
    return _take_rows(dataframe, matching)


def sort_rows(
    dataframe: DataFrame, column: str, should_swap: Callable[[Any, Any], bool]
) -> DataFrame:
    """Return the rows reordered by a bubble sort on ``column``.

    Two neighbouring rows are exchanged whenever ``should_swap(first, second)``
    is true, so ``lambda a, b: a > b`` sorts in ascending order. Rows that are
    never exchanged keep their relative order.
    """
    values = dataframe.column(column).data
    pairs = list(enumerate(values))
    count = len(pairs)
    for done in range(count - 1):
        for j in range(count - done - 1):
            if should_swap(pairs[j][1], pairs[j + 1][1]):
                pairs[j], pairs[j + 1] = pairs[j + 1], pairs[j]
    return _take_rows(dataframe, [row for row, _ in pairs])


def apply(dataframe: DataFrame, column: str, func: Callable[[Any], Any]) -> DataFrame:
    """Return a copy of the dataframe with ``func`` applied to every present value of ``column``.

    Missing values are left missing; the column keeps its declared type.
    """
    target = dataframe.column_index(column)
    result = dataframe.copy()
    result.columns[target].data = [
        func(value) if value is not None else None
        for value in dataframe.columns[target].data
    ]
    return result