"""Typed in-memory dataframes with delimited-text input and output, filtering, sorting, conversion and grouping."""

__version__ = "0.1.0"
__all__ = ["frame", "parsing", "csvio", "transform", "conversions", "groupby"]