"""
Data loading functions for fuel economy records.

This module reads vehicle fuel economy data from CSV files and standardises
it into record sets (one row per vehicle, columns DISPL, CYL, HWY, YEAR).
"""

import numpy as np
import pandas as pd

from .records import (
    PREDICTOR_COLUMN,
    CATEGORY_COLUMN,
    RESPONSE_COLUMN,
    YEAR_COLUMN,
    RECORD_COLUMNS,
)
from .validation import validate_record_set

# Source column names as they appear in the usual fuel economy tables
SOURCE_COLUMNS = {
    "displ": PREDICTOR_COLUMN,
    "cyl": CATEGORY_COLUMN,
    "hwy": RESPONSE_COLUMN,
    "year": YEAR_COLUMN,
}


def standardise_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename source columns to the standard upper-case record column names.

    Column matching is case-insensitive. Returns a copy.
    """
    renames = {}
    for col in df.columns:
        key = str(col).strip().lower()
        if key in SOURCE_COLUMNS:
            renames[col] = SOURCE_COLUMNS[key]
    return df.rename(columns=renames)


def load_fuel_economy_data(
    file_path: str, validate: bool = True, verbose: bool = False
) -> pd.DataFrame:
    """
    Load fuel economy records from CSV.

    Args:
        file_path: Path to CSV file with (at least) displ, cyl, hwy and year columns.
        validate: Whether to validate the loaded records. Default: True.
        verbose: Print progress messages. Default: False.

    Returns:
        pandas.DataFrame with the record columns only
    """
    if verbose:
        print(f"Loading fuel economy data from {file_path}...")

    df = pd.read_csv(file_path)
    df = standardise_columns(df)

    missing = [col for col in RECORD_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"{file_path} is missing required columns: {missing}")

    df = df[RECORD_COLUMNS]

    if verbose:
        print(f"  Loaded {len(df)} rows")

    n_rows = len(df)
    df = df.dropna().reset_index(drop=True)
    if verbose and len(df) < n_rows:
        print(f"  Dropped {n_rows - len(df)} rows with missing values")

    if validate:
        if verbose:
            print("  Validating data...")
        is_valid, errors = validate_record_set(df, verbose=verbose)
        if not is_valid and verbose:
            print(f"  Warning: Validation found {len(errors)} issue(s)")

    for col in (CATEGORY_COLUMN, YEAR_COLUMN):
        values = df[col].to_numpy(dtype=float)
        n_fractional = int(np.sum(values != np.round(values)))
        if n_fractional > 0:
            raise ValueError(
                f"{file_path}: {n_fractional} values in column {col} are not whole numbers."
            )

    return df.astype(
        {
            PREDICTOR_COLUMN: float,
            CATEGORY_COLUMN: int,
            RESPONSE_COLUMN: float,
            YEAR_COLUMN: int,
        }
    )
