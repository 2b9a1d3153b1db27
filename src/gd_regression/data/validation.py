"""
Shape validation for training data.

Gradient descent only needs a 2-D feature matrix and a column of targets
with the same number of rows. These checks run before fitting so that a
mismatch fails with a clear message instead of a matrix multiplication error.
"""

import numpy as np
from typing import Tuple

from ..exceptions import DimensionMismatch
from ..utils import as_column


def validate_features(X) -> np.ndarray:
    """
    Return `X` as a 2-D float array.

    A 1-D input is treated as a single feature, one value per sample.

    Args:
        X: Feature matrix of shape (n_samples, n_features) or (n_samples,)

    Returns:
        Feature matrix of shape (n_samples, n_features)
    """
    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2:
        raise DimensionMismatch(
            f"Features must be a 2-D array, got {X.ndim} dimensions."
        )
    return X


def validate_targets(y) -> np.ndarray:
    """
    Return `y` as a float column vector.

    Args:
        y: Targets of shape (n_samples,) or (n_samples, 1)

    Returns:
        Targets of shape (n_samples, 1)
    """
    y_arr = np.asarray(y, dtype=float)
    if y_arr.ndim > 2 or (y_arr.ndim == 2 and y_arr.shape[1] != 1):
        raise DimensionMismatch(
            f"Targets must be a single column, got shape {y_arr.shape}."
        )
    return as_column(y_arr)


def validate_training_data(X, y) -> Tuple[np.ndarray, np.ndarray]:
    """
    Validate and coerce a feature matrix and target vector for fitting.

    Args:
        X: Feature matrix of shape (n_samples, n_features), without bias column
        y: Targets of shape (n_samples,) or (n_samples, 1)

    Returns:
        X: Float array of shape (n_samples, n_features)
        y: Float array of shape (n_samples, 1)
    """
    X = validate_features(X)
    y = validate_targets(y)

    if X.shape[0] != y.shape[0]:
        raise DimensionMismatch(
            f"Number of samples in X ({X.shape[0]}) and y ({y.shape[0]}) do not match."
        )
    if X.shape[0] == 0:
        raise ValueError("Training data must contain at least one sample.")

    return X, y
