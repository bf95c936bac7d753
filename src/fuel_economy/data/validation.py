"""
Data validation functions for fuel economy record sets.

This module checks that a record set has the expected columns and that the
values in them are physically sensible before any model is fitted.
"""

import numpy as np
import pandas as pd
from typing import List, Tuple

from .records import (
    PREDICTOR_COLUMN,
    CATEGORY_COLUMN,
    RESPONSE_COLUMN,
    RECORD_COLUMNS,
)


def find_missing_columns(
    df: pd.DataFrame, required_columns: List[str] = RECORD_COLUMNS
) -> List[str]:
    """
    Return the required columns absent from a dataframe.

    Args:
        df: pandas.DataFrame
        required_columns: Column names to look for. Default: all record columns.

    Returns:
        List of missing column names, in the order given
    """
    return [col for col in required_columns if col not in df.columns]


def find_missing_values(df: pd.DataFrame) -> List[Tuple[str, int]]:
    """
    Find record columns containing missing values.

    Returns:
        List of tuples: (column, number_of_missing_values)
    """
    missing = []
    for col in RECORD_COLUMNS:
        if col in df.columns:
            n_missing = int(df[col].isna().sum())
            if n_missing > 0:
                missing.append((col, n_missing))
    return missing


def validate_value_ranges(df: pd.DataFrame) -> Tuple[bool, List[str]]:
    """
    Validate that values lie in physically sensible ranges.

    Checks:
    1. Displacement is strictly positive
    2. Cylinder counts are positive whole numbers
    3. Highway fuel economy is non-negative

    Args:
        df: DataFrame with record columns

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    errors = []

    if PREDICTOR_COLUMN in df.columns:
        n_bad = int((df[PREDICTOR_COLUMN] <= 0).sum())
        if n_bad > 0:
            errors.append(f"Found {n_bad} records with non-positive {PREDICTOR_COLUMN}")

    if CATEGORY_COLUMN in df.columns:
        cyl = df[CATEGORY_COLUMN].dropna().to_numpy(dtype=float)
        n_bad = int(np.sum((cyl <= 0) | (cyl != np.round(cyl))))
        if n_bad > 0:
            errors.append(
                f"Found {n_bad} records where {CATEGORY_COLUMN} is not a positive integer"
            )

    if RESPONSE_COLUMN in df.columns:
        n_bad = int((df[RESPONSE_COLUMN] < 0).sum())
        if n_bad > 0:
            errors.append(f"Found {n_bad} records with negative {RESPONSE_COLUMN}")

    return len(errors) == 0, errors


def validate_record_set(
    df: pd.DataFrame, verbose: bool = False
) -> Tuple[bool, List[str]]:
    """
    Validate that a dataframe is a well-formed record set.

    Checks:
    1. All record columns (DISPL, CYL, HWY, YEAR) are present
    2. No missing values in record columns
    3. Values lie in sensible ranges (see `validate_value_ranges`)

    Args:
        df: DataFrame with fuel economy records
        verbose: If True, print validation results

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    errors = []

    missing_columns = find_missing_columns(df)
    if missing_columns:
        errors.append(f"Missing required columns: {missing_columns}")

    for col, n_missing in find_missing_values(df):
        errors.append(f"Found {n_missing} missing values in column {col}")

    is_valid_ranges, range_errors = validate_value_ranges(df)
    if not is_valid_ranges:
        errors.extend(range_errors)

    is_valid = len(errors) == 0

    if verbose:
        if is_valid:
            print("All validation checks passed")
        else:
            print(f"Validation failed with {len(errors)} error(s):")
            for error in errors:
                print(f"  {error}")

    return is_valid, errors
