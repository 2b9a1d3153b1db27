"""Mean squared error cost and its gradient for linear models."""

import numpy as np


def cost(theta: np.ndarray, X: np.ndarray, y: np.ndarray) -> float:
    """
    Calculate the mean squared error variant used by gradient descent.

        J(θ) = 1/(2m) * Σ(Xθ - y)²

    Args:
        theta: Parameters of shape (n_columns, 1)
        X: Design matrix of shape (m, n_columns), bias column included
        y: Targets of shape (m, 1)

    Returns:
        cost: Non-negative scalar, zero when Xθ matches y exactly
    """
    m = len(y)
    errors = X @ theta - y
    return float((errors.T @ errors).item() / (2 * m))


def gradient(X: np.ndarray, y: np.ndarray, alpha: float, theta: np.ndarray) -> np.ndarray:
    """
    Calculate one gradient descent step, scaled by the learning rate.

        Δθ = α/m * Xᵀ(Xθ - y)

    Args:
        X: Design matrix of shape (m, n_columns), bias column included
        y: Targets of shape (m, 1)
        alpha: Learning rate
        theta: Current parameters of shape (n_columns, 1)

    Returns:
        step: Amount to subtract from `theta`, same shape as `theta`
    """
    m = len(y)
    errors = X @ theta - y
    return (alpha / m) * (X.T @ errors)
