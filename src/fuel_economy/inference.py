"""Coefficient inference for OLS fits."""

import pandas as pd
import statsmodels.api as sm
from typing import Sequence

from .data.records import RESPONSE_COLUMN
from .models.ols import check_columns, check_identifiable


def coefficient_table(
    df: pd.DataFrame,
    feature_set: Sequence[str],
    response_column: str = RESPONSE_COLUMN,
) -> pd.DataFrame:
    """
    Summarise an OLS fit: coefficients, standard errors, t statistics and p-values.

    The fit includes an intercept. R^2 and adjusted R^2 are stored in
    `table.attrs['r_squared']` and `table.attrs['adj_r_squared']`.

    Args:
        df: Training record set
        feature_set: Feature column names
        response_column: Name of response column. Default: 'HWY'.

    Returns:
        `pandas.DataFrame` indexed by 'intercept' followed by the feature names,
        with columns 'coef', 'std_err', 't' and 'p_value'.
    """
    features = list(feature_set)
    check_columns(df, features + [response_column], "fitting")

    X = df[features].astype(float)
    check_identifiable(X)
    y = df[response_column].astype(float)

    X = sm.add_constant(X, has_constant="add").rename(columns={"const": "intercept"})
    fitted = sm.OLS(y, X).fit()

    table = pd.DataFrame(
        {
            "coef": fitted.params,
            "std_err": fitted.bse,
            "t": fitted.tvalues,
            "p_value": fitted.pvalues,
        }
    )
    table.attrs["r_squared"] = float(fitted.rsquared)
    table.attrs["adj_r_squared"] = float(fitted.rsquared_adj)
    return table
