"""
Tests for one-dimensional steepest descent.

Reference problem: f(x) = ½((x - 5)² + 2), f'(x) = x - 5, x0 = 9,
η = 0.5. Each step halves the distance to 5, so |f'| drops below 1e-4
at the 17th evaluated point.
"""

import math

import numpy as np
import pytest

from pydescent.core.exceptions import InvalidHyperparameterError
from pydescent.descent import ScalarDescentSolution, ScalarStep, steepest_descent


def f(x):
    return 0.5 * ((x - 5) * (x - 5) + 2)


def grad(x):
    return x - 5


class TestReferenceProblem:

    def test_converges_to_minimum(self):
        sol = steepest_descent(f, grad, x0=9, eta=0.5, epsilon=1e-4)
        assert isinstance(sol, ScalarDescentSolution)
        assert sol.converged
        assert sol.x == pytest.approx(5.0, abs=1e-3)
        assert sol.warnings == ()

    def test_iteration_count(self):
        sol = steepest_descent(f, grad, x0=9, eta=0.5)
        assert sol.n_iter == 17
        assert sol.x == 5.0 + 4.0 / 2 ** 16

    def test_history(self):
        sol = steepest_descent(f, grad, x0=9, eta=0.5)
        first = sol.history[0]
        assert first == ScalarStep(iteration=1, x=9.0, value=9.0, gradient=4.0)
        assert [s.iteration for s in sol.history] == list(range(1, 18))
        assert sol.history[-1].x == sol.x
        assert abs(sol.history[-1].gradient) < 1e-4

    def test_values_non_increasing(self):
        sol = steepest_descent(f, grad, x0=9, eta=0.5)
        assert np.all(np.diff(sol.values) <= 0)
        assert sol.values[-1] == pytest.approx(1.0)

    def test_step_size(self):
        sol = steepest_descent(f, grad, x0=9, eta=0.5)
        assert sol.step_size(sol.history[0]) == 2.0
        np.testing.assert_allclose(
            sol.xs[1:], sol.xs[:-1] - [sol.step_size(s) for s in sol.history[:-1]]
        )

    def test_start_at_minimum(self):
        sol = steepest_descent(f, grad, x0=5.0, eta=0.5)
        assert sol.converged
        assert sol.n_iter == 1
        assert sol.x == 5.0

    def test_defaults(self):
        sol = steepest_descent(lambda x: x * x, lambda x: 2 * x, x0=1.0)
        assert sol.converged
        assert sol.eta == 0.01
        assert sol.epsilon == 1e-4


class TestFailureModes:

    def test_iteration_cap(self):
        with pytest.warns(RuntimeWarning, match="Steepest descent did not converge"):
            sol = steepest_descent(f, grad, x0=9, eta=0.1, max_iter=10)
        assert not sol.converged
        assert sol.n_iter == 10
        assert sol.x == sol.history[-1].x
        assert len(sol.warnings) == 1

    def test_divergence(self):
        with pytest.warns(RuntimeWarning, match="diverged"):
            sol = steepest_descent(f, grad, x0=9, eta=3.0)
        assert sol.diverged
        assert not sol.converged
        assert math.isfinite(sol.x)
        assert sol.x == sol.history[-1].x
        assert len(sol.warnings) == 1
        assert "learning rate 3.000e+00" in sol.warnings[0]
        distances = [abs(step.x - 5) for step in sol.history]
        assert distances == sorted(distances)

    def test_converged_run_not_diverged(self):
        sol = steepest_descent(f, grad, x0=9, eta=0.5)
        assert not sol.diverged

    @pytest.mark.parametrize("kwargs", [
        {'eta': 0.0},
        {'epsilon': -1e-4},
        {'max_iter': 0},
    ])
    def test_invalid_hyperparameters(self, kwargs):
        with pytest.raises(InvalidHyperparameterError):
            steepest_descent(f, grad, x0=9, **kwargs)
