"""Feature creation utilities for fuel economy regression."""

import numpy as np
import pandas as pd

from .data.records import PREDICTOR_COLUMN, DERIVED_COLUMN

# Feature specifications used by the linear and quadratic models
LINEAR_FEATURES = (PREDICTOR_COLUMN,)
QUADRATIC_FEATURES = (PREDICTOR_COLUMN, DERIVED_COLUMN)

FEATURE_SETS = {
    "linear": LINEAR_FEATURES,
    "quadratic": QUADRATIC_FEATURES,
}


def add_quadratic_feature(
    df: pd.DataFrame,
    predictor_column: str = PREDICTOR_COLUMN,
    derived_column: str = DERIVED_COLUMN,
) -> pd.DataFrame:
    """
    Add a column holding the square of the predictor.

    Args:
        df: `pandas.DataFrame` record set
        predictor_column: Name of predictor column (default: 'DISPL')
        derived_column: Name of new column (default: 'DISPL_SQ')

    Returns:
        Copy of `df` with the derived column added. Row order and all other
        columns are unchanged.
    """
    df = df.copy()
    df[derived_column] = np.square(df[predictor_column].to_numpy(dtype=float))
    return df


def add_intercept(
    df: pd.DataFrame, column_name="intercept", inplace=False
) -> pd.DataFrame:
    """
    Add a column of ones to a dataframe

    Args:
        df: `pandas.DataFrame`
        column_name: Name of new column (default: 'intercept')
        inplace: If True, modifies dataframe in place. If False, returns a copy.

    Returns:
        DataFrame with intercept column added
    """
    if not inplace:
        df = df.copy()
    df[column_name] = np.ones(len(df))
    return df


def requires_derived_feature(
    feature_set, derived_column: str = DERIVED_COLUMN
) -> bool:
    """Return True if a feature set uses the squared predictor."""
    return derived_column in feature_set
