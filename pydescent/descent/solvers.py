"""
Solver dispatch for the iterative solvers.

Public API:
    fit_gradient_descent(X, y, eta, ...) -> DescentSolution
    fit_sgd(X, y, eta0, ...) -> DescentSolution
    steepest_descent(f, grad, x0, eta, ...) -> ScalarDescentSolution
"""

from __future__ import annotations

from typing import Callable
import math
import warnings

import numpy as np
from numpy.typing import ArrayLike

from pydescent.core.validation import check_positive, check_positive_int
from pydescent.descent.backends.cpu_batch import CPUBatchGradientBackend
from pydescent.descent.backends.cpu_sgd import CPUStochasticGradientBackend, ConvergenceRule
from pydescent.descent.schedules import InverseSqrtSchedule, Schedule, resolve_schedule
from pydescent.descent.solution import DescentSolution, ScalarDescentSolution, ScalarStep
from pydescent.descent._common import diverged_message, not_converged_message
from pydescent.regression.design import RegressionDesign


def fit_gradient_descent(
    X: ArrayLike,
    y: ArrayLike,
    eta: float,
    epsilon: float = 1e-4,
    max_epochs: int = 10_000,
    *,
    record_period: int = 1,
    schedule: str | Schedule = 'constant',
    average_gradient: bool = False,
) -> DescentSolution:
    """
    Fit a linear model by batch steepest descent.

    Starting from w = 0, each epoch computes the full gradient of the
    squared error and steps against it:

        g = 2 X'(Xw - y)             (default, summed loss)
        g = (2/N) X'(Xw - y)         (average_gradient=True, mean loss)
        w ← w - η g

    The run stops when ||g||₁ < epsilon (converged) or after max_epochs
    epochs (not converged: a RuntimeWarning is issued and the last
    weights are returned). If eta is too large the weights overflow; the
    run then stops at the last finite weights with converged=False and
    diverged=True, again with a RuntimeWarning.

    Args:
        X: Design matrix (n x p), e.g. [1, x] or a polynomial expansion
        y: Response vector (n,)
        eta: Learning rate (> 0). With the summed convention it must stay
            below 2 / λ_max(2X'X) for the iteration to be stable.
        epsilon: Threshold on the L1 norm of the gradient
        max_epochs: Maximum number of epochs (>= 1)
        record_period: Record every this many epochs (1 = every epoch)
        schedule: 'constant' (plain steepest descent) or 'inverse_sqrt'
            (η/√t), or a Schedule instance
        average_gradient: Use the mean-loss gradient

    Returns:
        DescentSolution; unpacks as (weights, trajectory, converged)

    Raises:
        InvalidHyperparameterError: If eta, epsilon, max_epochs or
            record_period is out of range
    """
    design = RegressionDesign.from_arrays(X, y)
    epsilon = check_positive(epsilon, 'epsilon')
    max_epochs = check_positive_int(max_epochs, 'max_epochs')
    record_period = check_positive_int(record_period, 'record_period')
    if isinstance(schedule, str):
        check_positive(eta, 'eta')
    schedule_impl = resolve_schedule(schedule, eta)

    backend = CPUBatchGradientBackend(
        schedule_impl,
        epsilon=epsilon,
        max_epochs=max_epochs,
        record_period=record_period,
        average_gradient=bool(average_gradient),
    )
    result = backend.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return DescentSolution(_result=result, _design=design)


def fit_sgd(
    X: ArrayLike,
    y: ArrayLike,
    eta0: float,
    epsilon: float = 1e-4,
    max_epochs: int = 20_000,
    record_period: int = 200,
    rng_seed: int | None = None,
    *,
    rng: np.random.Generator | None = None,
    convergence: ConvergenceRule = 'sample',
    window: int | None = None,
) -> DescentSolution:
    """
    Fit a linear model by stochastic gradient descent.

    Starting from w = 0, iteration t draws one sample i uniformly and
    updates with that sample's gradient and a decaying step:

        η_t = η₀ / √t
        g = 2 (x_i·w - y_i) x_i
        w ← w - η_t g

    By default the run stops when the drawn sample's gradient has
    ||g||₁ < epsilon. That test looks at a single noisy estimate of the
    full gradient: on data no line fits exactly it almost never passes,
    and the run ends at max_epochs with converged=False. An eta0 too
    large for the scale of X stops the run at the last finite weights
    with diverged=True.
    convergence='smoothed' or 'batch' opt into steadier tests.

    Args:
        X: Design matrix (n x p)
        y: Response vector (n,)
        eta0: Initial learning rate (> 0). Must be tuned to the scale of
            X; it is never inferred.
        epsilon: Threshold on the L1 norm of the tested gradient
        max_epochs: Maximum number of iterations (>= 1)
        record_period: Record every this many iterations; the initial
            state (epoch 0, w = 0) and the final state are always kept
        rng_seed: Seed for a fresh numpy Generator, used when rng is None
        rng: Generator to draw sample indices from. Injected generators
            are advanced in place.
        convergence: 'sample' (default), 'smoothed' or 'batch'
        window: Gradients averaged by 'smoothed' (default n)

    Returns:
        DescentSolution; unpacks as (weights, trajectory, converged)

    Raises:
        InvalidHyperparameterError: If a hyperparameter is out of range
    """
    design = RegressionDesign.from_arrays(X, y)
    epsilon = check_positive(epsilon, 'epsilon')
    max_epochs = check_positive_int(max_epochs, 'max_epochs')
    record_period = check_positive_int(record_period, 'record_period')
    schedule = InverseSqrtSchedule(eta0)

    if convergence not in ('sample', 'smoothed', 'batch'):
        raise ValueError(
            f"Unknown convergence rule: {convergence!r}. "
            f"Valid rules: batch, sample, smoothed"
        )
    window = design.n if window is None else check_positive_int(window, 'window')

    if rng is None:
        rng = np.random.default_rng(rng_seed)
    elif not isinstance(rng, np.random.Generator):
        raise TypeError(f"rng must be numpy.random.Generator, got {type(rng).__name__}")

    backend = CPUStochasticGradientBackend(
        schedule,
        rng,
        epsilon=epsilon,
        max_epochs=max_epochs,
        record_period=record_period,
        convergence=convergence,
        window=window,
    )
    result = backend.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return DescentSolution(_result=result, _design=design)


def steepest_descent(
    f: Callable[[float], float],
    grad: Callable[[float], float],
    x0: float = 0.0,
    eta: float = 0.01,
    epsilon: float = 1e-4,
    max_iter: int = 10_000,
) -> ScalarDescentSolution:
    """
    Minimize a scalar function by steepest descent.

    Evaluates (x, f(x), f'(x)) at every point visited, stops when
    |f'(x)| < epsilon, otherwise steps x ← x - η f'(x).

    Example:
        >>> sol = steepest_descent(lambda x: 0.5 * ((x - 5) ** 2 + 2),
        ...                        lambda x: x - 5, x0=9, eta=0.5)
        >>> round(sol.x, 3), sol.converged
        (5.0, True)

    Args:
        f: Objective
        grad: Its derivative
        x0: Starting point
        eta: Learning rate (> 0)
        epsilon: Threshold on |f'(x)|
        max_iter: Maximum number of points evaluated

    Returns:
        ScalarDescentSolution with the full step history

    Raises:
        InvalidHyperparameterError: If eta, epsilon or max_iter is out of range
    """
    eta = check_positive(eta, 'eta')
    epsilon = check_positive(epsilon, 'epsilon')
    max_iter = check_positive_int(max_iter, 'max_iter')

    x = float(x0)
    history = []
    converged = False
    diverged = False
    for t in range(1, max_iter + 1):
        gx = float(grad(x))
        history.append(ScalarStep(iteration=t, x=x, value=float(f(x)), gradient=gx))
        if -epsilon < gx < epsilon:
            converged = True
            break
        x_next = x - eta * gx
        if not math.isfinite(x_next):
            diverged = True
            break
        x = x_next

    warnings_list = ()
    if not converged:
        if diverged:
            message = diverged_message('Steepest descent', len(history), eta)
        else:
            message = not_converged_message(
                'Steepest descent', max_iter, abs(history[-1].gradient), epsilon
            )
        warnings.warn(message, RuntimeWarning, stacklevel=2)
        warnings_list = (message,)

    return ScalarDescentSolution(
        x=history[-1].x,
        history=tuple(history),
        converged=converged,
        eta=eta,
        epsilon=epsilon,
        diverged=diverged,
        warnings=warnings_list,
    )
