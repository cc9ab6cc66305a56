"""
Tests for TrajectoryRecord, Trajectory and the recorder used by the
iterative backends.
"""

import numpy as np
import pytest

from pydescent.descent._common import TrajectoryRecorder, diverged_message, is_finite_step
from pydescent.descent.trajectory import Trajectory, snapshot


@pytest.fixture
def X_y(four_point_design):
    return four_point_design


class TestSnapshot:

    def test_fields(self, X_y):
        X, y = X_y
        w = np.array([1.0, 0.5])
        record = snapshot(3, w, X, y, 2.0, 0.001)
        residuals = X @ w - y
        assert record.epoch == 3
        np.testing.assert_array_equal(record.predictions, X @ w)
        np.testing.assert_allclose(record.gradient, 2.0 * X.T @ residuals)
        assert record.gradient_norm == pytest.approx(np.sum(np.abs(record.gradient)))
        assert record.loss == pytest.approx(np.mean(residuals ** 2))
        assert record.learning_rate == 0.001
        assert record.intercept == 1.0
        assert record.slope == 0.5

    def test_weights_copied(self, X_y):
        X, y = X_y
        w = np.array([1.0, 0.5])
        record = snapshot(0, w, X, y, 2.0, 0.0)
        w[0] = 99.0
        assert record.weights[0] == 1.0

    def test_arrays_read_only(self, X_y):
        X, y = X_y
        record = snapshot(2, np.array([1.0, 0.5]), X, y, 2.0, 0.01)
        for arr in (record.weights, record.predictions, record.gradient):
            assert not arr.flags.writeable
        with pytest.raises(ValueError):
            record.weights[0] = 5.0
        with pytest.raises(ValueError):
            record.gradient[:] = 0.0


class TestTrajectory:

    def _records(self, X, y, epochs):
        return tuple(snapshot(e, np.full(2, float(e)), X, y, 2.0, 0.01) for e in epochs)

    def test_sequence_protocol(self, X_y):
        X, y = X_y
        trajectory = Trajectory(records=self._records(X, y, [0, 5, 10]), converged=True)
        assert len(trajectory) == 3
        assert trajectory[1].epoch == 5
        assert [r.epoch for r in trajectory] == [0, 5, 10]
        assert trajectory.initial.epoch == 0
        assert trajectory.final.epoch == 10
        assert len(trajectory[1:]) == 2

    def test_stacked_views(self, X_y):
        X, y = X_y
        trajectory = Trajectory(records=self._records(X, y, [0, 1, 2]), converged=False)
        assert trajectory.weights.shape == (3, 2)
        np.testing.assert_array_equal(trajectory.epochs, [0, 1, 2])
        assert trajectory.losses.shape == (3,)
        assert trajectory.gradient_norms.shape == (3,)
        np.testing.assert_array_equal(trajectory.learning_rates, [0.01] * 3)

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            Trajectory(records=(), converged=False)

    def test_rejects_non_increasing_epochs(self, X_y):
        X, y = X_y
        with pytest.raises(ValueError, match="strictly increasing"):
            Trajectory(records=self._records(X, y, [0, 3, 3]), converged=False)


class TestRecorder:

    def test_period_and_terminal_state(self, X_y):
        X, y = X_y
        recorder = TrajectoryRecorder(X, y, 2.0, 4, np.zeros(2))
        w = np.zeros(2)
        for t in range(1, 11):
            w = w + 0.01
            recorder.maybe_record(t, w, 0.001)
        trajectory = recorder.close(10, w, 0.001, converged=False)
        np.testing.assert_array_equal(trajectory.epochs, [0, 4, 8, 10])
        np.testing.assert_allclose(trajectory.final.weights, w)
        assert not trajectory.converged

    def test_terminal_not_duplicated(self, X_y):
        X, y = X_y
        recorder = TrajectoryRecorder(X, y, 2.0, 5, np.zeros(2))
        recorder.maybe_record(5, np.ones(2), 0.1)
        trajectory = recorder.close(5, np.ones(2), 0.1, converged=True)
        np.testing.assert_array_equal(trajectory.epochs, [0, 5])


class TestFiniteStep:

    def test_finite_weights(self):
        assert is_finite_step(np.array([1.0, -2.0]))

    @pytest.mark.parametrize("bad", [np.inf, -np.inf, np.nan])
    def test_non_finite_weights(self, bad):
        assert not is_finite_step(np.array([0.0, bad]))

    def test_message_names_iteration_and_rate(self):
        msg = diverged_message('SGD', 7, 0.5)
        assert msg.startswith("SGD diverged at iteration 7")
        assert "5.000e-01" in msg
