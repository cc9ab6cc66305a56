"""
Shared helpers for the gradient-descent backends.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydescent.descent.trajectory import Trajectory, TrajectoryRecord, snapshot


class TrajectoryRecorder:
    """
    Append-only collector of TrajectoryRecord.

    Always holds the initial state; adds a record every `record_period`
    updates; close() appends the terminal state unless it was already
    recorded.
    """

    def __init__(
        self,
        X: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        gradient_scale: float,
        record_period: int,
        initial_weights: NDArray[np.floating[Any]],
    ):
        self._X = X
        self._y = y
        self._scale = gradient_scale
        self._period = record_period
        self._records: list[TrajectoryRecord] = [
            snapshot(0, initial_weights, X, y, gradient_scale, 0.0)
        ]

    def maybe_record(self, epoch: int, weights: NDArray, learning_rate: float) -> None:
        if epoch % self._period == 0:
            self._append(epoch, weights, learning_rate)

    def close(self, epoch: int, weights: NDArray, learning_rate: float, converged: bool) -> Trajectory:
        if self._records[-1].epoch != epoch:
            self._append(epoch, weights, learning_rate)
        return Trajectory(records=tuple(self._records), converged=converged)

    def _append(self, epoch: int, weights: NDArray, learning_rate: float) -> None:
        self._records.append(
            snapshot(epoch, weights, self._X, self._y, self._scale, learning_rate)
        )


def is_finite_step(weights: NDArray[np.floating[Any]]) -> bool:
    """True if an update left every weight finite."""
    return bool(np.all(np.isfinite(weights)))


def diverged_message(method: str, iteration: int, learning_rate: float) -> str:
    return (
        f"{method} diverged at iteration {iteration} "
        f"(learning rate {learning_rate:.3e}): the update overflowed; "
        f"returning the last finite weights. Lower the step size for the scale of X"
    )


def l1_norm(g: NDArray[np.floating[Any]]) -> float:
    return float(np.sum(np.abs(g)))


def not_converged_message(method: str, n_iter: int, gradient_norm: float, epsilon: float) -> str:
    return (
        f"{method} did not converge after {n_iter} iterations "
        f"(final |gradient|_1: {gradient_norm:.2e}, epsilon: {epsilon:.2e}); "
        f"returning the last weights"
    )
