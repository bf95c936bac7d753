"""
Model fitting with optional k-fold cross-validation.

A single entry point, `fit_model`, fits an ordinary least squares model on a
training record set. When a resampling configuration is supplied, the training
set is also split into k folds to estimate out-of-sample error. The model
returned for prediction is always refit on the full training set.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Optional, Tuple
from sklearn.model_selection import KFold

from .data.records import RESPONSE_COLUMN
from .evaluation import rmse, mae, r2_score
from .exceptions import DegenerateDataError
from .features import LINEAR_FEATURES
from .models import OLSModel

FIT_STRATEGIES = ("ols",)


@dataclass(frozen=True)
class KFoldResampling:
    """
    K-fold cross-validation settings.

    Attributes:
        k: Number of folds (at least 2)
        shuffle: Shuffle records before splitting into folds
        seed: Seed for the shuffle, so fold assignment is reproducible
    """

    k: int = 10
    shuffle: bool = True
    seed: int = 0

    def __post_init__(self):
        if int(self.k) != self.k or self.k < 2:
            raise ValueError(f"k-fold resampling needs an integer k >= 2, got k={self.k}.")

    @property
    def method(self) -> str:
        return "k-fold"


@dataclass(frozen=True)
class FitConfig:
    """
    What to fit and how.

    Attributes:
        feature_set: Feature column names
        resampling: Optional cross-validation settings. None means fit directly
            on the full training set.
        strategy: Fitting strategy. Only 'ols' is supported.
    """

    feature_set: Tuple[str, ...] = LINEAR_FEATURES
    resampling: Optional[KFoldResampling] = None
    strategy: str = "ols"

    def __post_init__(self):
        object.__setattr__(self, "feature_set", tuple(self.feature_set))
        if len(self.feature_set) == 0:
            raise ValueError("feature_set must contain at least one column.")
        if self.strategy not in FIT_STRATEGIES:
            raise ValueError(
                f"Unknown fit strategy {self.strategy!r}. Expected one of {FIT_STRATEGIES}."
            )


def _nanmean(values: np.ndarray) -> float:
    """Mean ignoring NaN; NaN if every value is NaN."""
    if np.all(np.isnan(values)):
        return float("nan")
    return float(np.nanmean(values))


@dataclass(frozen=True)
class CrossValidationResult:
    """
    Held-out performance of the per-fold models.

    Attributes:
        fold_rmse: RMSE on each held-out fold
        fold_mae: MAE on each held-out fold
        fold_r2: R^2 on each held-out fold (NaN where undefined)
        fold_sizes: Number of records in each held-out fold
    """

    fold_rmse: np.ndarray
    fold_mae: np.ndarray
    fold_r2: np.ndarray
    fold_sizes: np.ndarray

    @property
    def k(self) -> int:
        return len(self.fold_sizes)

    @property
    def rmse(self) -> float:
        return _nanmean(self.fold_rmse)

    @property
    def mae(self) -> float:
        return _nanmean(self.fold_mae)

    @property
    def r2(self) -> float:
        return _nanmean(self.fold_r2)

    def to_frame(self) -> pd.DataFrame:
        """Per-fold metrics as a `pandas.DataFrame`."""
        return pd.DataFrame(
            {
                "n_records": self.fold_sizes,
                "rmse": self.fold_rmse,
                "mae": self.fold_mae,
                "r2": self.fold_r2,
            },
            index=pd.RangeIndex(1, self.k + 1, name="fold"),
        )


@dataclass(frozen=True)
class FitResult:
    """A model fitted on the full training set, with its cross-validation estimate if requested."""

    model: OLSModel
    cross_validation: Optional[CrossValidationResult] = None


def make_model(config: FitConfig, response_column: str = RESPONSE_COLUMN) -> OLSModel:
    """Create an unfitted model for a fit configuration."""
    if config.strategy == "ols":
        return OLSModel(features=config.feature_set, response=response_column)
    raise ValueError(f"Unknown fit strategy {config.strategy!r}.")


def cross_validate(
    df: pd.DataFrame,
    config: FitConfig,
    resampling: KFoldResampling,
    response_column: str = RESPONSE_COLUMN,
    verbose: bool = False,
) -> CrossValidationResult:
    """
    Estimate out-of-sample error by k-fold cross-validation.

    The records are split into k disjoint folds of near-equal size. For each
    fold a model is fitted on the other k-1 folds and evaluated on the held-out
    fold. The fold models are discarded. A fold whose training slice cannot be
    fitted (e.g. a constant predictor) gets NaN metrics and is left out of the
    mean metrics.

    Args:
        df: Training record set
        config: Fit configuration (feature set and strategy)
        resampling: K-fold settings
        response_column: Name of response column. Default: 'HWY'.
        verbose: If True, print per-fold results

    Returns:
        `CrossValidationResult`
    """
    if resampling.k > len(df):
        raise DegenerateDataError(
            f"Cannot split {len(df)} records into k={resampling.k} folds."
        )

    kf = KFold(
        n_splits=resampling.k,
        shuffle=resampling.shuffle,
        random_state=resampling.seed if resampling.shuffle else None,
    )

    fold_rmse, fold_mae, fold_r2, fold_sizes = [], [], [], []
    for i, (train_idx, test_idx) in enumerate(kf.split(df)):
        df_train = df.iloc[train_idx]
        df_test = df.iloc[test_idx]

        fold_sizes.append(len(test_idx))

        try:
            model = make_model(config, response_column).fit(df_train)
        except DegenerateDataError as e:
            # Fold cannot be fitted; the full training set already was
            fold_rmse.append(np.nan)
            fold_mae.append(np.nan)
            fold_r2.append(np.nan)
            if verbose:
                print(f"  Fold {i + 1}/{resampling.k}: n={len(test_idx)}, skipped ({e})")
            continue

        predictions = model.predict(df_test)
        y_true = df_test[response_column].to_numpy(dtype=float)

        fold_rmse.append(rmse(y_true, predictions))
        fold_mae.append(mae(y_true, predictions))
        fold_r2.append(r2_score(y_true, predictions))

        if verbose:
            print(f"  Fold {i + 1}/{resampling.k}: n={len(test_idx)}, RMSE={fold_rmse[-1]:.3f}")

    return CrossValidationResult(
        fold_rmse=np.array(fold_rmse),
        fold_mae=np.array(fold_mae),
        fold_r2=np.array(fold_r2),
        fold_sizes=np.array(fold_sizes),
    )


def fit_model(
    df: pd.DataFrame,
    config: Optional[FitConfig] = None,
    response_column: str = RESPONSE_COLUMN,
    verbose: bool = False,
) -> FitResult:
    """
    Fit a regression model on a training record set.

    Args:
        df: Training record set containing the feature and response columns
        config: Fit configuration. Default: linear features, no resampling.
        response_column: Name of response column. Default: 'HWY'.
        verbose: If True, print progress messages

    Returns:
        `FitResult` holding the model fitted on all of `df` and, if resampling
        was requested, the cross-validation estimate.

    Example:
        config = FitConfig(QUADRATIC_FEATURES, resampling=KFoldResampling(k=10))
        result = fit_model(add_quadratic_feature(df_2010), config)
        predictions = result.model.predict(add_quadratic_feature(df_2011))
    """
    if config is None:
        config = FitConfig()

    if verbose:
        print(f"Fitting {config.strategy} model on {list(config.feature_set)} ({len(df)} records)...")

    # Full-data fit first so that schema and degeneracy errors surface before resampling
    model = make_model(config, response_column).fit(df)

    cv_result = None
    if config.resampling is not None:
        if verbose:
            print(f"  Running {config.resampling.k}-fold cross-validation...")
        cv_result = cross_validate(
            df, config, config.resampling, response_column=response_column, verbose=verbose
        )
        if verbose:
            print(f"  Cross-validated RMSE: {cv_result.rmse:.3f}")

    if verbose:
        coef, intercept = model.get_params()
        print(f"  Coefficients: {coef}, intercept: {intercept:.4f}")

    return FitResult(model=model, cross_validation=cv_result)
