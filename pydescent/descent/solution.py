"""
Iterative solver solution types.

Contains the parameter payloads and user-facing solution wrappers for
batch steepest descent, SGD, and the scalar steepest-descent demo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pydescent.core.result import Result
from pydescent.descent.trajectory import Trajectory

if TYPE_CHECKING:
    from pydescent.regression.design import RegressionDesign


@dataclass(frozen=True, eq=False)
class DescentParams:
    """
    Parameter payload for gradient-descent regression.

    This is the immutable data computed by backends.
    """
    weights: NDArray[np.floating[Any]]
    trajectory: Trajectory
    converged: bool
    diverged: bool
    n_iter: int
    final_gradient_norm: float


@dataclass
class DescentSolution:
    """
    User-facing gradient-descent results.

    Unpacks as a (weights, trajectory, converged) triple, so both styles
    work:

        >>> result = fit_sgd(X, y, eta0=0.03, rng_seed=0)
        >>> result.weights
        >>> weights, trajectory, converged = fit_sgd(X, y, eta0=0.03, rng_seed=0)
    """
    _result: Result[DescentParams]
    _design: 'RegressionDesign'

    def __iter__(self) -> Iterator[Any]:
        return iter((self.weights, self.trajectory, self.converged))

    @property
    def weights(self) -> NDArray[np.floating[Any]]:
        return self._result.params.weights

    @property
    def trajectory(self) -> Trajectory:
        return self._result.params.trajectory

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def diverged(self) -> bool:
        """True if the run stopped because an update overflowed."""
        return self._result.params.diverged

    @property
    def n_iter(self) -> int:
        """Iterations run, including the one that met the threshold."""
        return self._result.params.n_iter

    @property
    def final_gradient_norm(self) -> float:
        """L1 norm of the last gradient tested against the threshold."""
        return self._result.params.final_gradient_norm

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._design.X @ self.weights

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._design.y - self.fitted_values

    @property
    def mse(self) -> float:
        r = self.residuals
        return float(r @ r) / self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary."""
        if self.converged:
            status = "converged"
        elif self.diverged:
            status = "DIVERGED"
        else:
            status = "did NOT converge"
        lines = [
            "Gradient Descent Results",
            "=" * 60,
            f"Method: {self.info.get('method')} ({self.info.get('schedule')} schedule)",
            f"Observations: {self._design.n}",
            f"Parameters: {self._design.p}",
            f"Status: {status} after {self.n_iter} iterations",
            f"Final |gradient|_1: {self.final_gradient_norm:.3e} "
            f"(epsilon={self.info.get('epsilon'):g})",
            f"MSE: {self.mse:.6f}",
            f"Recorded states: {len(self.trajectory)}",
            "",
            "Weights:",
            "-" * 60,
        ]
        for i, w in enumerate(self.weights):
            lines.append(f"  w[{i}]: {w:14.6f}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescentSolution(method={self.info.get('method')!r}, "
            f"n_iter={self.n_iter}, converged={self.converged})"
        )


@dataclass(frozen=True)
class ScalarStep:
    """One iteration of scalar steepest descent: (t, x, f(x), f'(x))."""
    iteration: int
    x: float
    value: float
    gradient: float


@dataclass(frozen=True)
class ScalarDescentSolution:
    """
    Result of steepest descent on a one-dimensional function.

    history holds one ScalarStep per evaluated point, starting at
    iteration 1 with x0; the last step is the point where |f'(x)| fell
    below the threshold (or the last point tried).
    diverged is True when a step left x non-finite; x is then the last
    finite point.
    """
    x: float
    history: tuple[ScalarStep, ...]
    converged: bool
    eta: float
    epsilon: float
    diverged: bool = False
    warnings: tuple[str, ...] = ()

    @property
    def n_iter(self) -> int:
        return len(self.history)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """f(x) at each step, for plotting the descent curve."""
        return np.array([s.value for s in self.history])

    @property
    def xs(self) -> NDArray[np.floating[Any]]:
        return np.array([s.x for s in self.history])

    def step_size(self, step: ScalarStep) -> float:
        """Distance moved from `step` to the next point, η·f'(x)."""
        return self.eta * step.gradient
