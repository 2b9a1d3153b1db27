"""Stopping policies for gradient descent."""

from abc import ABC, abstractmethod
from typing import Optional

from .exceptions import DivergenceError


class StoppingPolicy(ABC):
    """
    Decide whether gradient descent performs another update.

    The policy is consulted before every update. `iteration` is the number of
    updates performed so far; before the first update both costs equal the
    cost of the initial parameters.
    """

    @abstractmethod
    def should_continue(self, iteration: int, prev_cost: float, new_cost: float) -> bool:
        """
        Return True to perform another update.

        Args:
            iteration: Number of updates already performed
            prev_cost: Cost before the most recent update
            new_cost: Cost after the most recent update
        """
        pass

    def report_every(self) -> int:
        """Default progress reporting interval for this policy."""
        return 100


class FixedIterations(StoppingPolicy):
    """Stop after exactly `iterations` updates."""

    def __init__(self, iterations: int):
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}.")
        self.iterations = iterations

    def should_continue(self, iteration, prev_cost, new_cost):
        return iteration < self.iterations

    def report_every(self):
        return max(1, self.iterations // 10)

    def __repr__(self):
        return f"FixedIterations(iterations={self.iterations})"


class CostThreshold(StoppingPolicy):
    """
    Stop once an update improves the cost by no more than `threshold`.

    At least one update is always performed. An update that increases the
    cost gives a negative improvement, so a diverging run also stops here.
    If `divergence_tolerance` is set, an increase larger than the tolerance
    raises `DivergenceError` instead of returning the poor parameters.

    Attributes:
        threshold: Minimum cost improvement required to keep iterating
        divergence_tolerance: Maximum tolerated cost increase, or None to
            disable the check
    """

    def __init__(self, threshold: float, divergence_tolerance: Optional[float] = None):
        self.threshold = threshold
        self.divergence_tolerance = divergence_tolerance

    def should_continue(self, iteration, prev_cost, new_cost):
        if iteration == 0:
            return True
        if (
            self.divergence_tolerance is not None
            and new_cost - prev_cost > self.divergence_tolerance
        ):
            raise DivergenceError(iteration, prev_cost, new_cost)
        return prev_cost - new_cost > self.threshold

    def __repr__(self):
        return (
            f"CostThreshold(threshold={self.threshold}, "
            f"divergence_tolerance={self.divergence_tolerance})"
        )
