"""Base interface for regression models."""

from abc import ABC, abstractmethod
import numpy as np
import pandas as pd


class RegressionModel(ABC):
    """
    Base class for regression models fitted on record sets.
    """

    @abstractmethod
    def fit(self, df: pd.DataFrame) -> "RegressionModel":
        """
        Fit model parameters to observed data.

        Args:
            df: Training record set. `pandas.DataFrame` containing the model's
                feature columns and the response column.

        Returns:
            self: The fitted model
        """
        pass

    @abstractmethod
    def predict(self, df: pd.DataFrame) -> np.ndarray:
        """
        Predict the response for every record.

        Args:
            df: Record set containing the feature columns the model was fitted on.

        Returns:
            predictions: Predicted values of shape (len(df),), in row order

        Example:
            model.fit(df_2010)
            predictions = model.predict(df_2011)
        """
        pass
