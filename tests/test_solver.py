import numpy as np
import pytest
from sklearn.linear_model import LinearRegression

from gd_regression.cost import cost
from gd_regression.exceptions import DimensionMismatch, DivergenceError
from gd_regression.models import LinearModel
from gd_regression.observers import CostHistory
from gd_regression.solver import descend, solve_iterations, solve_threshold
from gd_regression.stopping import FixedIterations
from gd_regression.utils import add_intercept


@pytest.fixture
def two_feature_data():
    """Noisy samples from y = 1 + 2 x1 - 3 x2."""
    rng = np.random.default_rng(seed=1)
    X = rng.uniform(size=(50, 2))
    y = 1.0 + 2.0 * X[:, 0] - 3.0 * X[:, 1] + rng.normal(scale=0.05, size=50)
    return X, y


def sklearn_params(X, y):
    regressor = LinearRegression(fit_intercept=True)
    regressor.fit(X, y)
    return np.concatenate([[regressor.intercept_], regressor.coef_])


class TestSolveIterations:
    def test_simple_linear_regression(self):
        """The line through (2, 4) and (3, 6) is y = 2x."""
        model = solve_iterations([[2], [3]], [[4], [6]], 0.01, 20_000)
        assert isinstance(model, LinearModel)
        np.testing.assert_allclose(model.get_params(), [0.0, 2.0], atol=0.05)
        assert model.predict([3.5]) == pytest.approx(7.0, abs=0.1)

    def test_zero_iterations_returns_zero_parameters(self):
        model = solve_iterations([[1.0, 2.0], [3.0, 4.0]], [1.0, 2.0], 0.01, 0)
        np.testing.assert_array_equal(model.get_params(), np.zeros(3))

    def test_performs_exact_number_of_updates(self):
        history = CostHistory()
        solve_iterations([[1], [2], [3]], [2, 4, 6], 0.01, 250, observers=[history])
        assert len(history) == 250

    def test_no_early_exit_after_convergence(self):
        """Updates continue even when the cost no longer changes."""
        history = CostHistory()
        solve_iterations([[1], [2]], [1, 1], 0.5, 2_000, observers=[history])
        assert len(history) == 2_000
        assert history.costs[-1] == pytest.approx(0.0, abs=1e-12)

    def test_cost_non_increasing_for_small_alpha(self):
        history = CostHistory()
        solve_iterations(
            [[1], [2], [3], [4]], [3, 5, 7, 9], 0.01, 1_000, observers=[history]
        )
        assert np.all(np.diff(history.costs) <= 1e-12)

    def test_multivariate_matches_least_squares(self, two_feature_data):
        X, y = two_feature_data
        model = solve_iterations(X, y, 0.1, 20_000)
        np.testing.assert_allclose(
            model.get_params(), sklearn_params(X, y), atol=1e-4
        )

    def test_accepts_one_dimensional_targets(self):
        column = solve_iterations([[2], [3]], [[4], [6]], 0.01, 100)
        flat = solve_iterations([[2], [3]], [4, 6], 0.01, 100)
        np.testing.assert_array_equal(column.get_params(), flat.get_params())

    def test_mismatched_rows(self):
        with pytest.raises(DimensionMismatch):
            solve_iterations([[1], [2], [3]], [1, 2], 0.01, 10)

    def test_does_not_modify_inputs(self):
        X = np.array([[2.0], [3.0]])
        y = np.array([4.0, 6.0])
        solve_iterations(X, y, 0.01, 10)
        np.testing.assert_array_equal(X, [[2.0], [3.0]])
        np.testing.assert_array_equal(y, [4.0, 6.0])

    def test_verbose_prints_progress(self, capsys):
        solve_iterations([[2], [3]], [4, 6], 0.01, 20, verbose=True)
        out = capsys.readouterr().out
        assert "Iteration 1:" in out
        assert "Iteration 3:" in out
        assert "Iteration 2:" not in out
        assert "Performed 20 iterations of gradient descent" in out


class TestSolveThreshold:
    def test_simple_threshold_linear_regression(self):
        model = solve_threshold([[1], [2], [3]], [[2], [4], [6]], 0.01, 1.0e-9)
        assert model.predict([4]) == pytest.approx(8.0, abs=0.1)

    def test_at_least_one_update_for_large_threshold(self):
        history = CostHistory()
        model = solve_threshold(
            [[1], [2], [3]], [2, 4, 6], 0.01, 1e9, observers=[history]
        )
        assert len(history) == 1
        assert np.any(model.get_params() != 0.0)

    def test_stops_on_divergence(self):
        """A learning rate that overshoots ends the run after the first update."""
        history = CostHistory()
        solve_threshold([[1], [2], [3]], [2, 4, 6], 1.0, 1e-9, observers=[history])
        assert len(history) == 1

    def test_divergence_tolerance_raises(self):
        with pytest.raises(DivergenceError):
            solve_threshold(
                [[1], [2], [3]], [2, 4, 6], 1.0, 1e-9, divergence_tolerance=0.0
            )

    def test_divergence_tolerance_does_not_affect_converging_fit(self):
        plain = solve_threshold([[1], [2], [3]], [2, 4, 6], 0.01, 1e-6)
        checked = solve_threshold(
            [[1], [2], [3]], [2, 4, 6], 0.01, 1e-6, divergence_tolerance=0.0
        )
        assert plain == checked

    def test_multivariate_matches_least_squares(self, two_feature_data):
        X, y = two_feature_data
        model = solve_threshold(X, y, 0.1, 1e-12)
        np.testing.assert_allclose(
            model.get_params(), sklearn_params(X, y), atol=1e-3
        )

    def test_mismatched_rows(self):
        with pytest.raises(DimensionMismatch):
            solve_threshold([[1], [2]], [1, 2, 3], 0.01, 1e-9)


class TestDescend:
    def test_observer_sees_read_only_parameters(self):
        def tamper(iteration, theta, cost):
            theta[0, 0] = 100.0

        with pytest.raises(ValueError):
            descend([[2], [3]], [4, 6], 0.01, FixedIterations(1), observers=[tamper])

    def test_observer_receives_current_cost(self):
        X = np.array([[2.0], [3.0]])
        y = np.array([[4.0], [6.0]])
        seen = []

        def record(iteration, theta, new_cost):
            seen.append((iteration, new_cost, cost(theta, add_intercept(X), y)))

        descend(X, y, 0.01, FixedIterations(3), observers=[record])
        assert [s[0] for s in seen] == [1, 2, 3]
        for _, reported, recomputed in seen:
            assert reported == pytest.approx(recomputed)

    def test_independent_fits(self):
        """Each fit starts from zero parameters."""
        first = solve_iterations([[2], [3]], [4, 6], 0.01, 500)
        second = solve_iterations([[2], [3]], [4, 6], 0.01, 500)
        assert first == second
        assert first is not second
