"""Linear regression fitted by batch gradient descent."""

__version__ = "0.1.0"

from .cost import cost, gradient

from .solver import descend, solve_iterations, solve_threshold

from .stopping import StoppingPolicy, FixedIterations, CostThreshold

from .models import RegressionModel, LinearModel

from .observers import ProgressReporter, CostHistory

from .data import Dataset, load_dataset

from .exceptions import DimensionMismatch, DivergenceError

__all__ = [
    # Cost and gradient
    "cost",
    "gradient",

    # Solvers
    "descend",
    "solve_iterations",
    "solve_threshold",

    # Stopping policies
    "StoppingPolicy",
    "FixedIterations",
    "CostThreshold",

    # Models
    "RegressionModel",
    "LinearModel",

    # Observers
    "ProgressReporter",
    "CostHistory",

    # Data
    "Dataset",
    "load_dataset",

    # Errors
    "DimensionMismatch",
    "DivergenceError",
]
