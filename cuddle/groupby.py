"""Grouping dataframe rows by a key column and aggregating the grouped values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from cuddle.frame import Column, ColumnType, DataFrame, DataFrameError

Aggregator = Callable[[list[Any]], Any]

_GROUPABLE_TYPES = (
    ColumnType.BOOL,
    ColumnType.INT,
    ColumnType.FLOAT,
    ColumnType.STRING,
)


@dataclass
class Group:
    """One distinct key and the values collected for it."""

    key: Any
    values: list[Any] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.values)


def _find_group(groups: list[Group], key: Any) -> Group:
    if key is not None:
        for group in groups:
            if group.key == key:
                return group
    raise DataFrameError(f"no group for key {key!r}")


def build_groups(
    dataframe: DataFrame, key_column: str, value_columns: Sequence[str]
) -> list[Group]:
    """Collect the values of ``value_columns`` for each distinct key.

    Groups come in the order their keys first appear. The values of every
    listed column are appended to the same group, column after column.
    Raises DataFrameError for an unknown column, a key column whose type
    cannot be compared, or a missing key or value.
    """
    key_col = dataframe.column(key_column)
    if key_col.type not in _GROUPABLE_TYPES:
        raise DataFrameError(
            f"cannot group by column {key_column!r} of type {key_col.type.label}"
        )
    value_cols = [dataframe.column(name) for name in value_columns]
    groups = [Group(key) for key in dataframe.get_unique_values(key_column)]
    for value_col in value_cols:
        for key, value in zip(key_col.data, value_col.data):
            group = _find_group(groups, key)
            if value is None:
                raise DataFrameError(
                    f"column {value_col.name!r} holds a missing value"
                )
            group.values.append(value)
    return groups


def groupby(
    dataframe: DataFrame,
    aggregate_by: str,
    to_aggregate: Sequence[str],
    agg_func: Aggregator,
) -> DataFrame:
    """Return one row per distinct key of ``aggregate_by``.

    The first column holds the keys; each column named in ``to_aggregate``
    follows, with its original name and type, holding ``agg_func`` applied
    to the values collected for that key.
    """
    if agg_func is None:
        raise DataFrameError("an aggregation function is required")
    names = list(to_aggregate)
    if not names:
        raise DataFrameError("no column to aggregate")
    key_source = dataframe.column(aggregate_by)
    agg_sources = [dataframe.column(name) for name in names]
    groups = build_groups(dataframe, aggregate_by, names)
    columns = [Column(key_source.name, key_source.type, [g.key for g in groups])]
    for source in agg_sources:
        columns.append(
            Column(source.name, source.type, [agg_func(list(g.values)) for g in groups])
        )
    return DataFrame(columns, dataframe.separator)