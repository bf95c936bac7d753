"""Loading, validating and partitioning fuel economy records."""

from .records import (
    Record,
    make_record_set,
    iter_records,
    PREDICTOR_COLUMN,
    CATEGORY_COLUMN,
    RESPONSE_COLUMN,
    YEAR_COLUMN,
    DERIVED_COLUMN,
    RECORD_COLUMNS,
)
from .loading import load_fuel_economy_data, standardise_columns
from .validation import validate_record_set

__all__ = [
    "Record",
    "make_record_set",
    "iter_records",
    "PREDICTOR_COLUMN",
    "CATEGORY_COLUMN",
    "RESPONSE_COLUMN",
    "YEAR_COLUMN",
    "DERIVED_COLUMN",
    "RECORD_COLUMNS",
    "load_fuel_economy_data",
    "standardise_columns",
    "validate_record_set",
]
