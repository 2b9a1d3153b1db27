"""Array helpers shared by the solver and the model."""

import numpy as np


def add_intercept(X: np.ndarray) -> np.ndarray:
    """
    Prepend a column of ones to a feature matrix.

    Args:
        X: Feature matrix of shape (n_samples, n_features)

    Returns:
        Design matrix of shape (n_samples, n_features + 1) with the bias
        column first
    """
    ones = np.ones((X.shape[0], 1))
    return np.hstack([ones, X])


def as_column(values) -> np.ndarray:
    """
    Return `values` as a float column vector of shape (n, 1).

    Accepts 1-D sequences and arrays already shaped (n, 1).
    """
    column = np.asarray(values, dtype=float)
    if column.ndim == 2 and column.shape[1] == 1:
        return column
    return column.reshape(-1, 1)
