"""
Trajectory records for the iterative solvers.

A trajectory is the ordered, append-only sequence of solver states that
a plotting or animation layer replays. Every record has the same fixed
fields; there are no optional keys to probe for.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence, overload

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, eq=False)
class TrajectoryRecord:
    """
    Snapshot of an iterative solver after `epoch` updates.

    Attributes:
        epoch: Number of updates applied (0 for the initial state)
        weights: Weight vector w at this point, column order of X
        predictions: Full prediction vector X @ w
        gradient: Full-batch gradient at w, in the solver's convention
        gradient_norm: L1 norm of gradient
        learning_rate: Step size of the update that produced w
            (0.0 for the initial state)
        loss: Mean squared residual over all samples at w
    """
    epoch: int
    weights: NDArray[np.floating[Any]]
    predictions: NDArray[np.floating[Any]]
    gradient: NDArray[np.floating[Any]]
    gradient_norm: float
    learning_rate: float
    loss: float

    @property
    def slope(self) -> float:
        """w[1] of a [1, x] design."""
        return float(self.weights[1])

    @property
    def intercept(self) -> float:
        """w[0] of a [1, x] design."""
        return float(self.weights[0])


def snapshot(
    epoch: int,
    weights: NDArray[np.floating[Any]],
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    gradient_scale: float,
    learning_rate: float,
) -> TrajectoryRecord:
    """
    Build a record for weights w, evaluating the full-batch state.

    The gradient is gradient_scale * X'(Xw - y); gradient_scale is 2 for
    the summed-loss convention and 2/N for the mean-loss convention.
    The stored arrays are read-only.
    """
    w = weights.copy()
    predictions = X @ w
    residuals = predictions - y
    gradient = gradient_scale * (X.T @ residuals)
    gradient_norm = float(np.sum(np.abs(gradient)))
    for arr in (w, predictions, gradient):
        arr.setflags(write=False)
    return TrajectoryRecord(
        epoch=int(epoch),
        weights=w,
        predictions=predictions,
        gradient=gradient,
        gradient_norm=gradient_norm,
        learning_rate=float(learning_rate),
        loss=float(np.mean(residuals ** 2)),
    )


@dataclass(frozen=True, eq=False)
class Trajectory(Sequence[TrajectoryRecord]):
    """
    Immutable sequence of TrajectoryRecord with strictly increasing epochs.

    The first record is always the initial state (epoch 0, w = 0); the
    last is always the state the solver stopped in. `converged` carries
    the solver's termination status alongside the records.
    """
    records: tuple[TrajectoryRecord, ...]
    converged: bool

    def __post_init__(self):
        if not self.records:
            raise ValueError("Trajectory needs at least the initial record")
        epochs = [r.epoch for r in self.records]
        if any(b <= a for a, b in zip(epochs, epochs[1:])):
            raise ValueError(f"Trajectory epochs must be strictly increasing, got {epochs}")

    @overload
    def __getitem__(self, index: int) -> TrajectoryRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TrajectoryRecord, ...]: ...

    def __getitem__(self, index):
        return self.records[index]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[TrajectoryRecord]:
        return iter(self.records)

    @property
    def initial(self) -> TrajectoryRecord:
        return self.records[0]

    @property
    def final(self) -> TrajectoryRecord:
        return self.records[-1]

    @property
    def epochs(self) -> NDArray[np.integer[Any]]:
        return np.array([r.epoch for r in self.records], dtype=np.int64)

    @property
    def weights(self) -> NDArray[np.floating[Any]]:
        """Stacked weights, shape (len(self), p)."""
        return np.vstack([r.weights for r in self.records])

    @property
    def losses(self) -> NDArray[np.floating[Any]]:
        return np.array([r.loss for r in self.records])

    @property
    def gradient_norms(self) -> NDArray[np.floating[Any]]:
        return np.array([r.gradient_norm for r in self.records])

    @property
    def learning_rates(self) -> NDArray[np.floating[Any]]:
        return np.array([r.learning_rate for r in self.records])
