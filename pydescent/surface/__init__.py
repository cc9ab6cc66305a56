"""
Loss-surface evaluation for simple linear regression.

Computes the squared-residual loss of ŷ = a·x + b over a grid of
(slope, intercept) pairs, both aggregated over the sample set and per
sample, together with the exact minimizer used as ground truth for the
iterative solvers.

Public API:
    loss_surface(D, A, B, floor) -> LossSurface
    exact_minimizer(D) -> (a*, b*)
    average_loss(D, a, b) -> float
    slope_minimizer(D, b) -> float
    loss_profile(D, A, b) -> per-instance losses along A
    trajectory_losses(D, trajectory) -> losses at recorded states

Example:
    >>> import numpy as np
    >>> from pydescent.surface import loss_surface, exact_minimizer
    >>> D = [(1, 3), (3, 6), (6, 5), (8, 7)]
    >>> A = B = np.linspace(-1, 7, 1024)
    >>> aggregate, per_instance = loss_surface(D, A, B, floor=1e-6)
    >>> a_star, b_star = exact_minimizer(D)
"""

from pydescent.surface.design import SampleSet
from pydescent.surface.solution import LossSurface
from pydescent.surface.solvers import (
    average_loss,
    exact_minimizer,
    loss_profile,
    loss_surface,
    slope_minimizer,
    trajectory_losses,
)

__all__ = [
    "loss_surface",
    "exact_minimizer",
    "average_loss",
    "slope_minimizer",
    "loss_profile",
    "trajectory_losses",
    "SampleSet",
    "LossSurface",
]
