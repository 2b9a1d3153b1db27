"""
Per-iteration observers for gradient descent.

An observer is any callable accepting `(iteration, theta, cost)`. The solver
calls each observer after every update, with `iteration` counting updates
from 1. Observers only read the parameters and never change the fit.
"""

from typing import Callable, List

import numpy as np


class ProgressReporter:
    """
    Report fitting progress at a fixed interval.

    Messages go through `emit`, which defaults to `print`. Pass e.g.
    `logging.getLogger(__name__).debug` to route them to a logger.

    Attributes:
        every: Report on the first update and every `every` updates after it
        emit: Function receiving each formatted message
    """

    def __init__(self, every: int = 100, emit: Callable[[str], None] = print):
        self.every = max(1, every)
        self.emit = emit

    def __call__(self, iteration: int, theta: np.ndarray, cost: float):
        if (iteration - 1) % self.every == 0:
            self.emit(
                f"Iteration {iteration}: Parameters = {theta.ravel()}, Cost = {cost}"
            )

    def summary(self, iterations: int, cost: float):
        """Report the total number of updates and the final cost."""
        self.emit(
            f"Performed {iterations} iterations of gradient descent. Final cost {cost}"
        )


class CostHistory:
    """Record the cost after every update."""

    def __init__(self):
        self.costs: List[float] = []

    def __call__(self, iteration: int, theta: np.ndarray, cost: float):
        self.costs.append(cost)

    def __len__(self):
        return len(self.costs)
