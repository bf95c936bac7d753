"""Regression of highway fuel economy on engine displacement."""

__version__ = "0.1.0"

from .exceptions import (
    FuelEconomyError,
    DegenerateDataError,
    SchemaMismatchError,
    AlignmentError,
)

from .data import Record, make_record_set, load_fuel_economy_data, validate_record_set

from .features import (
    add_quadratic_feature,
    FEATURE_SETS,
    LINEAR_FEATURES,
    QUADRATIC_FEATURES,
)

from .models import OLSModel

from .fitting import (
    FitConfig,
    KFoldResampling,
    FitResult,
    CrossValidationResult,
    fit_model,
)

from .evaluation import PredictionResult, evaluate, rmse, mae, r2_score

from .workflow import ExperimentResult, run_experiment, compare_models

from .utils import split_by_year, train_test_split

__all__ = [
    # Errors
    "FuelEconomyError",
    "DegenerateDataError",
    "SchemaMismatchError",
    "AlignmentError",

    # Data
    "Record",
    "make_record_set",
    "load_fuel_economy_data",
    "validate_record_set",
    "split_by_year",
    "train_test_split",

    # Features
    "add_quadratic_feature",
    "FEATURE_SETS",
    "LINEAR_FEATURES",
    "QUADRATIC_FEATURES",

    # Fitting and prediction
    "OLSModel",
    "FitConfig",
    "KFoldResampling",
    "FitResult",
    "CrossValidationResult",
    "fit_model",

    # Evaluation
    "PredictionResult",
    "evaluate",
    "rmse",
    "mae",
    "r2_score",

    # Workflow
    "ExperimentResult",
    "run_experiment",
    "compare_models",
]
