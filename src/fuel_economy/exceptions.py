"""Errors raised by the fuel economy regression workflow."""


class FuelEconomyError(ValueError):
    """Base class for all errors raised by this package."""


class DegenerateDataError(FuelEconomyError):
    """
    Training data cannot identify the model parameters.

    Raised when there are fewer records than features + 1, or when the
    design matrix (features plus intercept) is rank-deficient.
    """


class SchemaMismatchError(FuelEconomyError):
    """A record set is missing a column the model or operation requires."""


class AlignmentError(FuelEconomyError):
    """Observed and predicted sequences have different lengths."""
