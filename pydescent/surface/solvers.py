"""
Loss-surface evaluation for simple linear regression.

Everything here concerns the model ŷ = a·x + b on a SampleSet D and its
squared-residual loss

    L(a, b) = mean_i (y_i - (a·x_i + b))².

Public API:
    loss_surface(D, A, B, floor) -> LossSurface
    exact_minimizer(D) -> (a*, b*)
    average_loss(D, a, b) -> float
    slope_minimizer(D, b) -> float
    loss_profile(D, A, b) -> per-instance losses along A
    trajectory_losses(D, trajectory) -> losses at recorded (a, b)
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.core.exceptions import DimensionError, SingularMatrixError
from pydescent.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_min_samples,
    check_non_negative,
)
from pydescent.descent.trajectory import Trajectory
from pydescent.surface.design import SampleSet
from pydescent.surface.solution import LossSurface


Reduction = Literal['mean', 'sum']


def _axis(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(values, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)
    check_finite(arr, name)
    check_min_samples(arr, 1, name)
    return np.array(arr, dtype=np.float64)


def loss_surface(
    D: SampleSet | ArrayLike,
    A: ArrayLike,
    B: ArrayLike,
    floor: float = 1e-6,
    *,
    reduction: Reduction = 'mean',
) -> LossSurface:
    """
    Evaluate the squared-residual loss over a (slope, intercept) grid.

    For every sample i and grid cell (a, b):

        per_instance[i, ia, ib] = (y_i - (a·x_i + b))² + floor

    and the aggregate grid reduces over i: the mean by default, so each
    cell is the mean squared residual plus floor, or the sum for
    reduction='sum'. Every value is >= floor, so the grids can be drawn
    on a logarithmic colour scale.

    Args:
        D: SampleSet or (N, 2) table of (x, y) pairs
        A: Candidate slopes (M_a,)
        B: Candidate intercepts (M_b,)
        floor: Non-negative constant added to every cell
        reduction: 'mean' or 'sum'

    Returns:
        LossSurface; unpacks as (aggregate, per_instance)

    Raises:
        InvalidHyperparameterError: If floor < 0
        ValidationError / DimensionError: On malformed D, A or B
    """
    D = SampleSet.coerce(D)
    slopes = _axis(A, 'A')
    intercepts = _axis(B, 'B')
    floor = check_non_negative(floor, 'floor')
    if reduction not in ('mean', 'sum'):
        raise ValueError(f"Unknown reduction: {reduction!r}. Valid reductions: mean, sum")

    x = D.x[:, None, None]
    y = D.y[:, None, None]
    predictions = slopes[None, :, None] * x + intercepts[None, None, :]
    per_instance = (y - predictions) ** 2 + floor

    if reduction == 'mean':
        aggregate = per_instance.mean(axis=0)
    else:
        # Each instance carries its own floor, as in a sum of floored grids
        aggregate = per_instance.sum(axis=0)

    per_instance.setflags(write=False)
    aggregate.setflags(write=False)
    slopes.setflags(write=False)
    intercepts.setflags(write=False)

    return LossSurface(
        aggregate=aggregate,
        per_instance=per_instance,
        slopes=slopes,
        intercepts=intercepts,
        floor=floor,
        reduction=reduction,
    )


def exact_minimizer(D: SampleSet | ArrayLike) -> tuple[float, float]:
    """
    Exact least-squares line through D.

        a* = Cov(x, y) / Var(x)
        b* = mean(y) - a*·mean(x)

    Covariance and variance are population moments (divide by N, not
    N - 1).

    Raises:
        SingularMatrixError: If all x are equal (Var(x) = 0)
    """
    D = SampleSet.coerce(D)
    x, y = D.x, D.y
    if np.ptp(x) == 0:
        raise SingularMatrixError(
            f"Var(x) is zero: all {D.n} samples share x={x[0]}; "
            f"the slope is not identifiable.",
            matrix_name='Var(x)',
            rank=1,
            expected_rank=2,
        )
    cov = np.cov(x, y, bias=True)
    a = cov[0, 1] / cov[0, 0]
    b = np.mean(y) - a * np.mean(x)
    return float(a), float(b)


def average_loss(D: SampleSet | ArrayLike, a: float, b: float) -> float:
    """Mean squared residual of the line a·x + b on D."""
    D = SampleSet.coerce(D)
    r = D.y - (a * D.x + b)
    return float(np.mean(r ** 2))


def slope_minimizer(D: SampleSet | ArrayLike, b: float) -> float:
    """
    Best slope for a fixed intercept b.

        a*(b) = (mean(x·y) - mean(x)·b) / mean(x²)

    Raises:
        SingularMatrixError: If all x are zero
    """
    D = SampleSet.coerce(D)
    x, y = D.x, D.y
    x2 = float(np.mean(x ** 2))
    if x2 == 0:
        raise SingularMatrixError(
            "mean(x²) is zero: every x is 0, the slope is not identifiable.",
            matrix_name='mean(x²)',
        )
    return (float(np.mean(x * y)) - float(np.mean(x)) * b) / x2


def loss_profile(
    D: SampleSet | ArrayLike,
    A: ArrayLike,
    b: float = 0.0,
) -> NDArray[np.floating[Any]]:
    """
    Per-instance squared residual along the slope axis for a fixed b.

    Returns:
        (N, len(A)) array; row i is (y_i - (a·x_i + b))² over A. The
        mean over rows is minimized at slope_minimizer(D, b).
    """
    D = SampleSet.coerce(D)
    slopes = _axis(A, 'A')
    return (D.y[:, None] - (slopes[None, :] * D.x[:, None] + b)) ** 2


def trajectory_losses(
    D: SampleSet | ArrayLike,
    trajectory: Trajectory,
) -> NDArray[np.floating[Any]]:
    """
    Mean squared residual on D at every recorded state of a trajectory.

    The trajectory must come from a [1, x] design, so each record's
    weights are (b, a).

    Raises:
        DimensionError: If the recorded weights are not 2-vectors
    """
    D = SampleSet.coerce(D)
    losses = []
    for record in trajectory:
        if record.weights.shape != (2,):
            raise DimensionError(
                f"trajectory: expected (intercept, slope) weights, "
                f"got shape {record.weights.shape} at epoch {record.epoch}"
            )
        losses.append(average_loss(D, record.slope, record.intercept))
    return np.array(losses)
