"""
Batch steepest-descent backend.

Every epoch uses the full design matrix:

    ŷ = Xw
    g = 2 X'(ŷ - y)          (summed-loss convention, default)
    g = (2/N) X'(ŷ - y)      (mean-loss convention, average_gradient=True)
    w ← w - η_t g

The summed convention takes N times larger steps than the mean one for
the same η, so η must be tuned to the convention in use.
"""

from typing import Any
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


class CPUBatchGradientBackend:
    """
    Full-batch gradient descent from w = 0.

    Stops before updating as soon as ||g||₁ < epsilon, or after
    max_epochs updates. Running out of epochs, or an update that
    overflows, is reported through `converged=False` (with `diverged=True`
    for the overflow), never raised.

    Args:
        schedule: Learning-rate schedule (constant for plain steepest descent)
        epsilon: Threshold on the L1 norm of the gradient
        max_epochs: Maximum number of epochs
        record_period: Record the state every this many epochs
        average_gradient: Use the (2/N) mean-loss gradient
    """

    def __init__(
        self,
        schedule: Schedule,
        *,
        epsilon: float,
        max_epochs: int,
        record_period: int,
        average_gradient: bool,
    ):
        self._schedule = schedule
        self._epsilon = epsilon
        self._max_epochs = max_epochs
        self._record_period = record_period
        self._average = average_gradient

    @property
    def name(self) -> str:
        return 'cpu_batch_gd'

    def solve(self, design: RegressionDesign) -> Result[DescentParams]:
        """
        Run batch gradient descent.

        An update that overflows is discarded: the run stops with
        diverged=True and keeps the last finite weights.
        """
        timer = Timer()
        timer.start()
        warnings_list = []

        X = design.X
        y = design.y
        scale = 2.0 / design.n if self._average else 2.0

        w = np.zeros(design.p)
        recorder = TrajectoryRecorder(X, y, scale, self._record_period, w)

        converged = False
        n_updates = 0
        n_iter = 0
        diverged = False
        last_eta = 0.0
        gradient_norm = float('inf')

        with timer.section('iterations'), np.errstate(over='ignore', invalid='ignore'):
            for t in range(1, self._max_epochs + 1):
                n_iter = t
                gradient = scale * (X.T @ (X @ w - y))
                gradient_norm = l1_norm(gradient)
                if gradient_norm < self._epsilon:
                    converged = True
                    break

                eta_t = self._schedule(t)
                w_next = w - eta_t * gradient
                if not is_finite_step(w_next):
                    diverged = True
                    warnings_list.append(
                        diverged_message('Batch gradient descent', t, eta_t)
                    )
                    break
                w = w_next
                last_eta = eta_t
                n_updates = t

                recorder.maybe_record(t, w, eta_t)

        with timer.section('recording'), np.errstate(over='ignore', invalid='ignore'):
            trajectory = recorder.close(n_updates, w, last_eta, converged)
            if not converged and not diverged:
                warnings_list.append(
                    not_converged_message(
                        'Batch gradient descent', n_iter, gradient_norm, self._epsilon
                    )
                )

        timer.stop()

        params = DescentParams(
            weights=w,
            trajectory=trajectory,
            converged=converged,
            diverged=diverged,
            n_iter=n_iter,
            final_gradient_norm=gradient_norm,
        )

        info: dict[str, Any] = {
            'method': 'batch_gd',
            'schedule': self._schedule.name,
            'eta': self._schedule.initial_rate,
            'epsilon': self._epsilon,
            'max_epochs': self._max_epochs,
            'record_period': self._record_period,
            'gradient_convention': 'mean' if self._average else 'sum',
            'convergence_criterion': 'batch_gradient_l1',
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
