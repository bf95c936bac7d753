"""Ordinary least squares regression on record set columns."""

import numpy as np
import pandas as pd
from .base import RegressionModel
from ..data.records import RESPONSE_COLUMN
from ..exceptions import DegenerateDataError, SchemaMismatchError
from ..features import LINEAR_FEATURES, add_intercept
from sklearn.linear_model import LinearRegression
from typing import Sequence


def check_columns(df: pd.DataFrame, columns: Sequence[str], purpose: str) -> None:
    """Raise `SchemaMismatchError` if any of `columns` is absent from `df`."""
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise SchemaMismatchError(
            f"Record set is missing column(s) {missing} required for {purpose}. "
            f"Available columns: {list(df.columns)}."
        )


def check_identifiable(features: pd.DataFrame, fit_intercept: bool = True) -> None:
    """
    Raise `DegenerateDataError` if OLS cannot be solved uniquely.

    Args:
        features: Feature matrix of shape (n_samples, n_features), no intercept column
        fit_intercept: Whether the fit includes an intercept. Default: True.
    """
    n_samples, n_features = features.shape
    n_params = n_features + 1 if fit_intercept else n_features
    terms = "plus an intercept" if fit_intercept else "without an intercept"

    if n_samples < n_params:
        raise DegenerateDataError(
            f"Need at least {n_params} records to fit {n_features} feature(s) "
            f"{terms}, got {n_samples}."
        )

    design = add_intercept(features) if fit_intercept else features
    rank = np.linalg.matrix_rank(design.to_numpy(dtype=float))
    if rank < n_params:
        raise DegenerateDataError(
            f"Feature matrix is rank-deficient (rank {rank} < {n_params}); "
            f"columns {list(features.columns)} are collinear ({terms})."
        )


class OLSModel(RegressionModel):
    """
    Linear regression of a response column on one or more feature columns.

    Attributes:
        features: Names of the feature columns (e.g., ['DISPL'] or ['DISPL', 'DISPL_SQ'])
        response: Name of the response column
        regressor: Underlying regression model (default: LinearRegression)
    """

    def __init__(
        self,
        features: Sequence[str] = LINEAR_FEATURES,
        response: str = RESPONSE_COLUMN,
        regressor=None,
    ):
        """
        Create an `OLSModel` instance.

        Args:
            features: Feature column names. Default: `('DISPL',)`.
            response: Response column name. Default: `'HWY'`.
            regressor: Scikit-learn compatible regression model. Must implement
                fit(X, y) and predict(X) methods with coef_ and intercept_
                attributes. Default: LinearRegression(fit_intercept=True).
        """
        if len(features) == 0:
            raise ValueError("At least one feature column is required.")
        self.features = list(features)
        self.response = response
        self.regressor = regressor if regressor is not None else LinearRegression(fit_intercept=True)
        self._fitted = False  # indicate whether parameters have been fitted yet

    def fit(self, df: pd.DataFrame) -> "OLSModel":
        """
        Fit model parameters to a training record set.
        Returns the fitted model.

        Args:
            df: Training record set with the feature and response columns.
        """
        check_columns(df, self.features + [self.response], "fitting")

        features = df[self.features].astype(float)
        check_identifiable(features, fit_intercept=getattr(self.regressor, "fit_intercept", True))

        targets = df[self.response].to_numpy(dtype=float)
        self.regressor.fit(features.to_numpy(), targets)
        self._fitted = True

        return self

    def predict(self, df: pd.DataFrame) -> np.ndarray:
        """
        Predict the response for every record of `df`.

        Args:
            df: Record set with the feature columns the model was fitted on.

        Returns:
            predictions: Array of shape (len(df),), in row order
        """
        if not self._fitted:
            raise ValueError("Model must be fitted before calling predict(). Call fit() first.")

        check_columns(df, self.features, "prediction")

        if len(df) == 0:
            return np.zeros(0)

        features = df[self.features].to_numpy(dtype=float)
        return np.asarray(self.regressor.predict(features), dtype=float)

    def get_params(self):
        """
        Get model parameters from the underlying regressor.

        Returns:
            coef_: Regression coefficients (numpy array), one per feature
            intercept_: Intercept term (float)
        """
        if not self._fitted:
            raise ValueError("Model must be fitted before calling get_params(). Call fit() first.")
        return np.asarray(self.regressor.coef_), float(self.regressor.intercept_)

    @property
    def is_fitted(self) -> bool:
        return self._fitted

    def __repr__(self):
        return f"OLSModel(features={self.features}, response={self.response!r}, regressor={self.regressor})"
