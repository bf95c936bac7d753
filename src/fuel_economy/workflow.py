"""
Train on one model year, predict another.

This module chains feature derivation, fitting, prediction and evaluation for
the linear and quadratic highway fuel economy models.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .data.records import PREDICTOR_COLUMN, RESPONSE_COLUMN
from .evaluation import PredictionResult, evaluate, r2_score
from .features import FEATURE_SETS, add_quadratic_feature, requires_derived_feature
from .fitting import FitConfig, FitResult, KFoldResampling, fit_model


@dataclass(frozen=True)
class ExperimentResult:
    """Outcome of fitting on a training set and evaluating on a test set."""

    config: FitConfig
    fit: FitResult
    prediction: PredictionResult


def prepare_features(df: pd.DataFrame, config: FitConfig) -> pd.DataFrame:
    """Return `df` with any derived columns the feature set needs (a copy if added)."""
    if requires_derived_feature(config.feature_set):
        return add_quadratic_feature(df)
    return df


def run_experiment(
    df_train: pd.DataFrame,
    df_test: pd.DataFrame,
    config: FitConfig,
    response_column: str = RESPONSE_COLUMN,
    verbose: bool = False,
) -> ExperimentResult:
    """
    Fit on `df_train`, predict `df_test` and evaluate the predictions.

    Args:
        df_train: Training record set
        df_test: Test record set
        config: Fit configuration
        response_column: Name of response column. Default: 'HWY'.
        verbose: If True, print progress messages

    Returns:
        `ExperimentResult`
    """
    df_train = prepare_features(df_train, config)
    df_test = prepare_features(df_test, config)

    fit = fit_model(df_train, config, response_column=response_column, verbose=verbose)

    print(f"Predicting {len(df_test)} test records...") if verbose else None
    predictions = fit.model.predict(df_test)

    predictor = df_test[PREDICTOR_COLUMN] if PREDICTOR_COLUMN in df_test.columns else None
    prediction = evaluate(df_test[response_column], predictions, predictor=predictor)

    print(f"  Test RMSE: {prediction.rmse:.3f}") if verbose else None

    return ExperimentResult(config=config, fit=fit, prediction=prediction)


def compare_models(
    df_train: pd.DataFrame,
    df_test: pd.DataFrame,
    resampling: Optional[KFoldResampling] = None,
    feature_sets: Optional[Dict[str, Tuple[str, ...]]] = None,
    response_column: str = RESPONSE_COLUMN,
    verbose: bool = False,
) -> Tuple[Dict[str, ExperimentResult], pd.DataFrame]:
    """
    Run one experiment per feature set and tabulate the results.

    Args:
        df_train: Training record set
        df_test: Test record set
        resampling: Optional cross-validation settings applied to every model
        feature_sets: Mapping of model name to feature set.
            Default: linear and quadratic displacement models.
        response_column: Name of response column. Default: 'HWY'.
        verbose: If True, print progress messages

    Returns:
        results: Dictionary mapping model name to `ExperimentResult`
        summary: `pandas.DataFrame` indexed by model name with the intercept,
            coefficients, test RMSE/MAE/R^2 and cross-validated RMSE (NaN if
            no resampling)
    """
    if feature_sets is None:
        feature_sets = FEATURE_SETS

    results = {}
    rows = []
    for name, feature_set in feature_sets.items():
        print(f"\n=== {name} model ===") if verbose else None
        config = FitConfig(feature_set=feature_set, resampling=resampling)
        result = run_experiment(
            df_train, df_test, config, response_column=response_column, verbose=verbose
        )
        results[name] = result

        coef, intercept = result.fit.model.get_params()
        cv = result.fit.cross_validation
        row = {"model": name, "intercept": intercept}
        row.update({f"coef_{feature}": c for feature, c in zip(feature_set, coef)})
        row.update(
            {
                "test_rmse": result.prediction.rmse,
                "test_mae": result.prediction.mae,
                "test_r2": r2_score(result.prediction.observed, result.prediction.predicted),
                "cv_rmse": cv.rmse if cv is not None else np.nan,
            }
        )
        rows.append(row)

    summary = pd.DataFrame(rows).set_index("model")
    return results, summary
