# cuddle

A small dataframe library with typed columns. It reads delimited text
files and works out a type for each column: bool, int, unsigned int, float
or string. It can then select, sort, transform, convert and group rows. It
needs nothing beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `cuddle.frame`: `DataFrame`, `Column`, `ColumnType`, `Shape` and `DataFrameError`.
- `cuddle.parsing`: token helpers used when reading: `clean_token`, `split_line`, `infer_type`, `merge_type`, `convert_token`.
- `cuddle.csvio`: `read_csv`, `write_csv`, `print_csv`, `format_csv`, `format_value`.
- `cuddle.transform`: `filter_rows`, `sort_rows`, `apply`.
- `cuddle.conversions`: per-value converters, `get_converter`, `convert_value`, `to_type`.
- `cuddle.groupby`: `Group`, `build_groups`, `groupby`.

## Reading and writing

```python
from cuddle.csvio import read_csv, write_csv, print_csv, format_csv

df = read_csv("people.csv", ",")
print_csv(df)              # to standard output, or print_csv(df, stream)
write_csv(df, "copy.csv")
text = format_csv(df)
```

Only the first character of the separator is used. If you pass `None`, a
comma is used. The first line holds the column names. The last character
of that line is dropped as its line ending. Fields are split on the
separator and empty fields are skipped. There is no quoting. A row with
fewer fields than the header gets `None` for the missing cells. An empty
file gives a dataframe with no columns.

Column types are worked out from every data row:

- `true` / `false`, in any case, is `BOOL`.
- A number with exactly one dot is `FLOAT`.
- A whole number with no leading minus is `UINT`. With a leading minus it is `INT`.
- Anything else is `STRING`.

When the rows disagree, the column moves to a more general type. For
example, `UINT` and `INT` become `INT`, and a number type mixed with
`FLOAT` becomes `FLOAT`. A single string token makes the whole column
`STRING`. A column with no data is `STRING`.

When the data is written out, floats get two decimals and booleans come
out as `true` or `false`. A missing cell cannot be written and raises
`DataFrameError`.

## Inspecting

```python
df.shape()                     # Shape(nb_rows=..., nb_columns=...)
df.column_names
df.column("age")               # the Column object
df.info()                      # names and types, to stdout or a given stream
df.describe()                  # count, mean, std, min, max of numeric columns
df.head(5)
df.tail(5)
df.get_value(0, "age")
df.get_values("age")
df.get_unique_values("city")   # distinct non-missing values, first-seen order
df.copy()
```

`head` and `tail` raise `DataFrameError` when the count is not positive or
the dataframe has no rows.

## Transforming

```python
from cuddle.transform import filter_rows, sort_rows, apply

adults = filter_rows(df, "age", lambda age: age >= 18)
by_age = sort_rows(df, "age", lambda a, b: a > b)   # should_swap(a, b)
shout = apply(df, "name", str.upper)
```

- `filter_rows` keeps the rows whose value is present and passes the
  predicate. It raises `DataFrameError` if no row matches.
- `sort_rows` takes a function that returns `True` when two neighbouring
  values are out of order. The rows are then ordered with a stable bubble
  sort.
- `apply` calls the function on every present value of the column and
  leaves missing values as `None`. The column keeps its declared type.

## Converting types

```python
from cuddle.conversions import to_type
from cuddle.frame import ColumnType

df2 = to_type(df, "age", ColumnType.FLOAT)
```

The following pairs have converters: `STRING`, `INT`, `FLOAT` and `BOOL`,
each to and from the others. Strings become booleans when they are `true`,
`yes`, `y` (in any case) or `1`. Floats become strings with two decimals.
For any other pair, for example from `UINT`, the values are kept as they
are but the column takes the new type.

`to_type` raises `DataFrameError` in three cases: the column is unknown,
the target is `UNDEFINED`, or any cell of the dataframe is missing.

## Grouping

```python
from cuddle.groupby import groupby

totals = groupby(df, "city", ["amount"], sum)
```

The result has one row for each distinct key, in the order the keys first
appear. The key column comes first. One column follows for each name in
`to_aggregate`, with its original name and type, and holds
`agg_func(values)` for each group. `build_groups` returns the `Group`
objects (key and collected values) without aggregating them.

The key column must be `BOOL`, `INT`, `FLOAT` or `STRING`. Whole numbers
that are never negative are read as `UINT`, so to group by such a column,
convert it first, for example with `to_type(df, "id", ColumnType.INT)`.
A missing key or value raises `DataFrameError`.

## Errors

Operations that fail raise `cuddle.frame.DataFrameError`. Examples are an
unknown column, a row index out of range, a file that cannot be read or
written, or a filter that matches no rows.

## What it does not do

The package is a library only. It has no command-line tool. It does not
handle quoted fields, escaped separators or multi-line cells in delimited
files.