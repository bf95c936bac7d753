"""Regression models."""

from .base import RegressionModel
from .ols import OLSModel

__all__ = ["RegressionModel", "OLSModel"]
