"""
Iterative least-squares solvers.

Batch steepest descent and stochastic gradient descent for linear
regression, each producing a trajectory of recorded states, plus the
one-dimensional steepest-descent demonstration.

Public API:
    fit_gradient_descent(X, y, eta, epsilon, max_epochs) -> DescentSolution
    fit_sgd(X, y, eta0, epsilon, max_epochs, record_period, rng_seed) -> DescentSolution
    steepest_descent(f, grad, x0, eta, epsilon) -> ScalarDescentSolution

Example:
    >>> from pydescent.descent import fit_sgd
    >>> weights, trajectory, converged = fit_sgd(X, y, eta0=0.03, rng_seed=0)
    >>> [r.loss for r in trajectory]
"""

from pydescent.descent.schedules import (
    ConstantSchedule,
    InverseSqrtSchedule,
    Schedule,
    resolve_schedule,
)
from pydescent.descent.solution import (
    DescentParams,
    DescentSolution,
    ScalarDescentSolution,
    ScalarStep,
)
from pydescent.descent.solvers import fit_gradient_descent, fit_sgd, steepest_descent
from pydescent.descent.trajectory import Trajectory, TrajectoryRecord

__all__ = [
    "fit_gradient_descent",
    "fit_sgd",
    "steepest_descent",
    "DescentSolution",
    "DescentParams",
    "ScalarDescentSolution",
    "ScalarStep",
    "Trajectory",
    "TrajectoryRecord",
    "Schedule",
    "ConstantSchedule",
    "InverseSqrtSchedule",
    "resolve_schedule",
]
