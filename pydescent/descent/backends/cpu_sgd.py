"""
Stochastic gradient descent backend.

Each iteration t = 1, 2, ... draws one sample uniformly at random and
steps along that sample's gradient alone:

    η_t = η₀ / √t
    i  ~ Uniform{0, ..., N-1}
    g  = 2 (x_i·w - y_i) x_i
    w ← w - η_t g

Stopping rules (`convergence`):
    'sample'    ||g||₁ < ε on the drawn sample's gradient. This is the
                classic teaching rule. A single-sample gradient is a
                high-variance estimate of the full gradient, so on noisy
                data it rarely fires and the run usually ends at
                max_epochs; on data that a line fits exactly it fires as
                soon as the drawn sample is fitted.
    'smoothed'  ||mean of the last `window` sample gradients||₁ < ε,
                tested once the window is full.
    'batch'     ||(2/N) X'(Xw - y)||₁ < ε, the full mean-loss gradient.
"""

from collections import deque
from typing import Any, Literal
import numpy as np

from pydescent.core.result import Result
from pydescent.core.compute.timing import Timer
from pydescent.descent._common import (
    TrajectoryRecorder,
    diverged_message,
    is_finite_step,
    l1_norm,
    not_converged_message,
)
from pydescent.descent.schedules import Schedule
from pydescent.descent.solution import DescentParams
from pydescent.regression.design import RegressionDesign


ConvergenceRule = Literal['sample', 'smoothed', 'batch']


class CPUStochasticGradientBackend:
    """
    Single-sample SGD from w = 0 with an injected random generator.

    Trajectory records carry the full-batch mean-loss gradient (2/N)X'r
    at the recorded weights, which is the quantity the sample gradients
    estimate.

    Args:
        schedule: Learning-rate schedule (η₀/√t for standard SGD)
        rng: numpy Generator used for every sample draw
        epsilon: Threshold on the L1 norm of the tested gradient
        max_epochs: Maximum number of iterations
        record_period: Record the state every this many iterations
        convergence: Stopping rule, see module docstring
        window: Number of sample gradients averaged by 'smoothed'
    """

    def __init__(
        self,
        schedule: Schedule,
        rng: np.random.Generator,
        *,
        epsilon: float,
        max_epochs: int,
        record_period: int,
        convergence: ConvergenceRule = 'sample',
        window: int = 1,
    ):
        self._schedule = schedule
        self._rng = rng
        self._epsilon = epsilon
        self._max_epochs = max_epochs
        self._record_period = record_period
        self._convergence = convergence
        self._window = window

    @property
    def name(self) -> str:
        return 'cpu_sgd'

    def solve(self, design: RegressionDesign) -> Result[DescentParams]:
        """
        Run SGD.

        An update that overflows is discarded: the run stops with
        diverged=True and keeps the last finite weights.
        """
        timer = Timer()
        timer.start()
        warnings_list = []

        X = design.X
        y = design.y
        n = design.n
        batch_scale = 2.0 / n

        w = np.zeros(design.p)
        recorder = TrajectoryRecorder(X, y, batch_scale, self._record_period, w)
        recent: deque = deque(maxlen=self._window)

        converged = False
        n_updates = 0
        n_iter = 0
        diverged = False
        tested_norm = float('inf')

        with timer.section('iterations'), np.errstate(over='ignore', invalid='ignore'):
            for t in range(1, self._max_epochs + 1):
                n_iter = t
                eta_t = self._schedule(t)
                i = int(self._rng.integers(n))
                x_i = X[i]
                gradient = 2.0 * (x_i @ w - y[i]) * x_i

                if self._convergence == 'sample':
                    tested_norm = l1_norm(gradient)
                elif self._convergence == 'smoothed':
                    recent.append(gradient)
                    if len(recent) == self._window:
                        tested_norm = l1_norm(np.mean(recent, axis=0))
                else:
                    tested_norm = l1_norm(batch_scale * (X.T @ (X @ w - y)))

                if tested_norm < self._epsilon:
                    converged = True
                    break

                w_next = w - eta_t * gradient
                if not is_finite_step(w_next):
                    diverged = True
                    warnings_list.append(diverged_message('SGD', t, eta_t))
                    break
                w = w_next
                n_updates = t

                recorder.maybe_record(t, w, eta_t)

        last_eta = self._schedule(n_updates) if n_updates > 0 else 0.0

        with timer.section('recording'), np.errstate(over='ignore', invalid='ignore'):
            trajectory = recorder.close(n_updates, w, last_eta, converged)
            if not converged and not diverged:
                warnings_list.append(
                    not_converged_message('SGD', n_iter, tested_norm, self._epsilon)
                )

        timer.stop()

        params = DescentParams(
            weights=w,
            trajectory=trajectory,
            converged=converged,
            diverged=diverged,
            n_iter=n_iter,
            final_gradient_norm=tested_norm,
        )

        info: dict[str, Any] = {
            'method': 'sgd',
            'schedule': self._schedule.name,
            'eta': self._schedule.initial_rate,
            'epsilon': self._epsilon,
            'max_epochs': self._max_epochs,
            'record_period': self._record_period,
            'gradient_convention': 'sample',
            'convergence_criterion': self._convergence,
            'window': self._window if self._convergence == 'smoothed' else None,
            'converged': converged,
            'diverged': diverged,
            'iterations': n_iter,
            'updates': n_updates,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
