"""Exceptions raised by the regression package."""


class DimensionMismatch(ValueError):
    """Raised when the shapes of features, targets or parameters disagree."""


class DivergenceError(ArithmeticError):
    """
    Raised when gradient descent increases the cost by more than a tolerance.

    Attributes:
        iteration: Number of updates performed when divergence was detected
        prev_cost: Cost before the offending update
        new_cost: Cost after the offending update
    """

    def __init__(self, iteration: int, prev_cost: float, new_cost: float):
        self.iteration = iteration
        self.prev_cost = prev_cost
        self.new_cost = new_cost
        super().__init__(
            f"Cost increased from {prev_cost} to {new_cost} at iteration {iteration}. "
            f"Try a smaller learning rate."
        )
