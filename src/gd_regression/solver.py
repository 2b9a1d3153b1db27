"""
Batch gradient descent for linear regression.

Both solvers prepend a bias column to the features, start from all-zero
parameters and repeatedly apply

    θ ← θ - α/m * Xᵀ(Xθ - y)

until their stopping policy says otherwise. The learning rate is not
validated: a rate that is too large makes the cost diverge, and the result
is a poor model rather than an error.
"""

import numpy as np
from typing import Callable, Iterable, Optional

from .cost import cost, gradient
from .data.validation import validate_training_data
from .models import LinearModel
from .observers import ProgressReporter
from .stopping import CostThreshold, FixedIterations, StoppingPolicy
from .utils import add_intercept

Observer = Callable[[int, np.ndarray, float], None]


def descend(
    X,
    y,
    alpha: float,
    policy: StoppingPolicy,
    observers: Iterable[Observer] = (),
    verbose: bool = False,
) -> LinearModel:
    """
    Fit a linear model by gradient descent under a stopping policy.

    Args:
        X: Feature matrix of shape (n_samples, n_features), without bias column
        y: Targets of shape (n_samples,) or (n_samples, 1)
        alpha: Learning rate
        policy: Decides before each update whether to continue
        observers: Callables invoked as `observer(iteration, theta, cost)`
            after every update. `theta` is a read-only view.
        verbose: Print progress messages. Default: False.

    Returns:
        model: `LinearModel` holding the final parameters
    """
    X, y = validate_training_data(X, y)
    X = add_intercept(X)

    theta = np.zeros((X.shape[1], 1))
    theta_view = theta.view()
    theta_view.flags.writeable = False

    observers = list(observers)
    reporter = None
    if verbose:
        reporter = ProgressReporter(every=policy.report_every())
        observers.append(reporter)

    iteration = 0
    new_cost = cost(theta, X, y)
    prev_cost = new_cost

    while policy.should_continue(iteration, prev_cost, new_cost):
        prev_cost = new_cost
        theta -= gradient(X, y, alpha, theta)
        new_cost = cost(theta, X, y)
        iteration += 1
        for observer in observers:
            observer(iteration, theta_view, new_cost)

    if reporter is not None:
        reporter.summary(iteration, new_cost)

    return LinearModel(theta)


def solve_iterations(
    X,
    y,
    alpha: float,
    iterations: int,
    observers: Iterable[Observer] = (),
    verbose: bool = False,
) -> LinearModel:
    """
    Fit a linear model with a fixed number of gradient descent updates.

    There is no early exit. With `iterations=0` the returned parameters are
    all zero.

    Args:
        X: Feature matrix of shape (n_samples, n_features), without bias column
        y: Targets of shape (n_samples,) or (n_samples, 1)
        alpha: Learning rate
        iterations: Number of updates to perform
        observers: Per-update callbacks, see `descend`
        verbose: Print progress every tenth of the run. Default: False.

    Returns:
        model: Fitted `LinearModel`

    Example:
        >>> model = solve_iterations([[2], [3]], [4, 6], alpha=0.01, iterations=20_000)
        >>> round(model.predict([3.5]), 1)
        7.0
    """
    return descend(
        X, y, alpha, FixedIterations(iterations), observers=observers, verbose=verbose
    )


def solve_threshold(
    X,
    y,
    alpha: float,
    threshold: float,
    divergence_tolerance: Optional[float] = None,
    observers: Iterable[Observer] = (),
    verbose: bool = False,
) -> LinearModel:
    """
    Fit a linear model, stopping once an update improves the cost by at most
    `threshold`.

    At least one update is performed. If the cost increases, the improvement
    is negative and the loop stops straight away, returning the diverged
    parameters. Set `divergence_tolerance` to raise `DivergenceError` instead.

    Termination is not guaranteed for every learning rate. Callers that need
    a hard bound should pass their own `StoppingPolicy` to `descend`.

    Args:
        X: Feature matrix of shape (n_samples, n_features), without bias column
        y: Targets of shape (n_samples,) or (n_samples, 1)
        alpha: Learning rate
        threshold: Minimum cost improvement per update to keep iterating
        divergence_tolerance: Maximum tolerated cost increase per update.
            Default: None (no check).
        observers: Per-update callbacks, see `descend`
        verbose: Print progress every 100 updates. Default: False.

    Returns:
        model: Fitted `LinearModel`
    """
    policy = CostThreshold(threshold, divergence_tolerance=divergence_tolerance)
    return descend(X, y, alpha, policy, observers=observers, verbose=verbose)
