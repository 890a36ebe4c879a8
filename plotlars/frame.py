"""Column access helpers for the data frames that feed the plots."""

from __future__ import annotations

import pandas as pd


def _column(data: pd.DataFrame, column: str) -> pd.Series:
    if column not in data.columns:
        raise KeyError(f"column {column!r} not found in data")
    return data[column]


def string_column(data: pd.DataFrame, column: str) -> list[str | None]:
    """Return the column's values as strings, with None for missing values."""
    return [None if pd.isna(value) else str(value) for value in _column(data, column)]


def numeric_column(data: pd.DataFrame, column: str) -> list[float | None]:
    """Return the column's values as floats.

    Missing values and values that cannot be read as numbers become None.
    """
    numbers = pd.to_numeric(_column(data, column), errors="coerce")
    return [None if pd.isna(value) else float(value) for value in numbers]


def unique_groups(data: pd.DataFrame, column: str) -> list[str]:
    """Return the distinct values of a column as strings, in order of first appearance."""
    values = string_column(data, column)
    if any(value is None for value in values):
        raise ValueError(f"group column {column!r} holds missing values")
    return list(dict.fromkeys(values))


def filter_by_group(data: pd.DataFrame, column: str, group: str) -> pd.DataFrame:
    """Return the rows whose value in ``column``, read as a string, equals ``group``."""
    mask = [value == group for value in string_column(data, column)]
    return data.loc[mask].reset_index(drop=True)