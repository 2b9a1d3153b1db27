"""Linear model with a bias term."""

import numpy as np

from .base import RegressionModel
from ..exceptions import DimensionMismatch


class LinearModel(RegressionModel):
    """
    Fitted linear model y = θ₀ + θ₁x₁ + ... + θₙxₙ.

    Instances are immutable: the parameters are copied on construction and
    cannot be reassigned afterwards.

    Attributes:
        n_features: Number of features expected by `predict`

    Example:
        >>> model = LinearModel([0.0, 2.0])
        >>> model.predict([3.5])
        7.0
        >>> model.get_params()
        array([0., 2.])
    """

    __slots__ = ("_params",)

    def __init__(self, theta):
        """
        Create a `LinearModel` from fitted parameters.

        Args:
            theta: Parameters of shape (n_features + 1,) or (n_features + 1, 1),
                bias term first
        """
        params = np.array(theta, dtype=float).reshape(-1)
        if params.size == 0:
            raise ValueError("theta must contain at least the bias term.")
        params.flags.writeable = False
        object.__setattr__(self, "_params", params)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    @property
    def n_features(self) -> int:
        return self._params.size - 1

    @property
    def intercept(self) -> float:
        return float(self._params[0])

    @property
    def coefficients(self) -> np.ndarray:
        return self._params[1:].copy()

    def predict(self, features) -> float:
        """
        Predict the target for a single feature row.

        Args:
            features: Feature values of shape (n_features,) or (1, n_features),
                without bias term

        Returns:
            prediction: θ · [1, features]
        """
        row = np.atleast_1d(np.asarray(features, dtype=float))
        if row.ndim == 2 and row.shape[0] == 1:
            row = row[0]
        if row.ndim != 1:
            raise DimensionMismatch(
                f"predict() accepts a single feature row, got shape {np.shape(features)}."
            )
        if row.shape[0] != self.n_features:
            raise DimensionMismatch(
                f"Expected {self.n_features} feature(s), got {row.shape[0]}."
            )
        x = np.concatenate([[1.0], row])
        return float(x @ self._params)

    def get_params(self) -> np.ndarray:
        """
        Get the fitted parameters.

        Returns:
            params: Copy of the parameters of shape (n_features + 1,), bias first
        """
        return self._params.copy()

    def __eq__(self, other):
        if not isinstance(other, LinearModel):
            return NotImplemented
        return np.array_equal(self._params, other._params)

    def __hash__(self):
        return hash(self._params.tobytes())

    def __repr__(self):
        return f"LinearModel(theta={self._params.tolist()})"
