"""Base interface for fitted regression models."""

from abc import ABC, abstractmethod
import numpy as np


class RegressionModel(ABC):
    """
    Base class for fitted regression models.
    """

    @abstractmethod
    def predict(self, features) -> float:
        """
        Predict the target for a single feature row.

        Args:
            features: Feature values of shape (n_features,), without bias term

        Returns:
            prediction: Predicted target value
        """
        pass

    @abstractmethod
    def get_params(self) -> np.ndarray:
        """
        Get the fitted parameters.

        Returns:
            params: Copy of the parameter array. Changing it does not affect
                the model.
        """
        pass
