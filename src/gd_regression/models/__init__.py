"""Fitted regression models."""

from .base import RegressionModel
from .linear import LinearModel

__all__ = ["RegressionModel", "LinearModel"]
