"""Partitioning utilities for fuel economy record sets."""

import pandas as pd
from typing import Dict, Tuple

from .data.records import YEAR_COLUMN


def split_by_year(
    df: pd.DataFrame, year_column: str = YEAR_COLUMN
) -> Dict[int, pd.DataFrame]:
    """
    Split a record set into one record set per model year.

    Args:
        df: `pandas.DataFrame` with a year column
        year_column: Name of year column (default: 'YEAR')

    Returns:
        Dictionary mapping year to a copy of that year's records, in original
        row order with a fresh index. Keys are sorted.
    """
    return {
        int(year): group.reset_index(drop=True)
        for year, group in df.groupby(year_column, sort=True)
    }


def train_test_split(
    df: pd.DataFrame,
    train_year: int,
    test_year: int,
    year_column: str = YEAR_COLUMN,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Split a record set into training and test sets by model year.

    Args:
        df: `pandas.DataFrame` with a year column
        train_year: Model year used for training
        test_year: Model year used for testing
        year_column: Name of year column (default: 'YEAR')

    Returns:
        df_train: Training set
        df_test: Test set
    """
    partitions = split_by_year(df, year_column)
    for year in (train_year, test_year):
        if year not in partitions:
            raise ValueError(
                f"No records for year {year}. Available years: {sorted(partitions)}."
            )
    return partitions[train_year], partitions[test_year]
