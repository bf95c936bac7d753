"""Evaluation of predictions against observed values."""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Optional

from .exceptions import AlignmentError


@dataclass(frozen=True)
class PredictionResult:
    """
    Per-record comparison of observed and predicted responses.

    All arrays are aligned by record index and have the same length.

    Attributes:
        observed: Observed response values
        predictor: Predictor value of each record (NaN if not supplied)
        predicted: Predicted response values
        residual: observed - predicted
        error_metric: sqrt(|residual|), a per-record diagnostic. This is not the
            aggregate RMSE; use the `rmse` property for that.
    """

    observed: np.ndarray
    predictor: np.ndarray
    predicted: np.ndarray
    residual: np.ndarray
    error_metric: np.ndarray

    def __len__(self):
        return len(self.observed)

    @property
    def rmse(self) -> float:
        """Aggregate root mean square error over all records."""
        return rmse(self.observed, self.predicted)

    @property
    def mae(self) -> float:
        return mae(self.observed, self.predicted)

    def to_frame(self) -> pd.DataFrame:
        """Return the result as a `pandas.DataFrame`, one row per record."""
        return pd.DataFrame(
            {
                "observed": self.observed,
                "predictor": self.predictor,
                "predicted": self.predicted,
                "residual": self.residual,
                "error_metric": self.error_metric,
            }
        )


def evaluate(observed, predicted, predictor=None) -> PredictionResult:
    """
    Compute residuals and per-record error metrics.

    For each record i:
        residual[i] = observed[i] - predicted[i]
        error_metric[i] = sqrt(|residual[i]|)

    Args:
        observed: Observed values, shape (n,)
        predicted: Predicted values, shape (n,)
        predictor: Optional predictor values for each record, shape (n,).
            Carried through for plotting.

    Returns:
        `PredictionResult`
    """
    observed = np.asarray(observed, dtype=float).ravel()
    predicted = np.asarray(predicted, dtype=float).ravel()

    if len(observed) != len(predicted):
        raise AlignmentError(
            f"Lengths of observed ({len(observed)}) and predicted ({len(predicted)}) do not match."
        )

    if predictor is None:
        predictor = np.full(len(observed), np.nan)
    else:
        predictor = np.asarray(predictor, dtype=float).ravel()
        if len(predictor) != len(observed):
            raise AlignmentError(
                f"Lengths of predictor ({len(predictor)}) and observed ({len(observed)}) do not match."
            )

    residual = observed - predicted
    error_metric = np.sqrt(np.abs(residual))

    return PredictionResult(
        observed=observed,
        predictor=predictor,
        predicted=predicted,
        residual=residual,
        error_metric=error_metric,
    )


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate the root mean square error (RMSE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        rmse: Root mean square error
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    return float(np.sqrt(np.mean((y_pred - y_true)**2)))


def mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate mean absolute error (MAE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        mae: Mean absolute error
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    return float(np.mean(np.abs(y_pred - y_true)))


def r2_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Coefficient of determination of a set of predictions.

    Returns NaN when the true values have zero variance (including a single value).

    Args:
        y_true: True values
        y_pred: Predicted values
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    sum_e = np.sum((y_true - y_pred)**2)
    sum_s = np.sum((y_true - np.mean(y_true))**2)
    if len(y_true) < 2 or np.isclose(sum_s, 0):
        return float("nan")
    return float(1.0 - sum_e / sum_s)
