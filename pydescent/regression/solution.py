"""
Closed-form regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.core.result import Result

if TYPE_CHECKING:
    from pydescent.basis.polynomial import PolynomialBasis
    from pydescent.regression.design import RegressionDesign


@dataclass(frozen=True)
class ClosedFormParams:
    """
    Parameter payload for closed-form (OLS / ridge) regression.

    This is the immutable data computed by backends.
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int
    condition_number: float
    alpha: float


@dataclass
class ClosedFormSolution:
    """
    User-facing closed-form regression results.

    Wraps the backend Result and provides convenient accessors. When the
    fit came from fit_polynomial(), the basis is kept so predict() can be
    called on raw x values.
    """
    _result: Result[ClosedFormParams]
    _design: 'RegressionDesign'
    _basis: 'PolynomialBasis | None' = None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def weights(self) -> NDArray[np.floating[Any]]:
        """Alias of coefficients, matching the iterative solvers."""
        return self._result.params.coefficients

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def mse(self) -> float:
        """Mean squared residual, rss / n."""
        return self.rss / self._design.n

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def is_regularized(self) -> bool:
        return self.alpha > 0

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def condition_number(self) -> float:
        return self._result.params.condition_number

    @property
    def degree(self) -> int | None:
        """Polynomial degree, or None for a caller-supplied design."""
        return None if self._basis is None else self._basis.degree

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

    def predict(self, X: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Predict responses.

        Args:
            X: Raw x values when the solution came from fit_polynomial(),
               otherwise a design matrix with the same columns as the fit.
        """
        if self._basis is not None:
            return self._basis.evaluate(X, self.coefficients)
        X_arr = np.asarray(X, dtype=np.float64)
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(1, -1)
        return X_arr @ self.coefficients

    def summary(self) -> str:
        """Generate a plain-text summary."""
        method = self.info.get('method', 'ols')
        lines = [
            "Closed-Form Regression Results",
            "=" * 60,
            f"Method: {method}" + (f" (alpha={self.alpha:g})" if self.is_regularized else ""),
            f"Observations: {self._design.n}",
            f"Parameters: {self._design.p}",
        ]
        if self.degree is not None:
            lines.append(f"Polynomial degree: {self.degree}")
        lines.extend([
            f"Rank: {self.rank}",
            f"cond(X'X + alpha*I): {self.condition_number:.3e}",
            f"R-squared: {self.r_squared:.6f}",
            f"MSE: {self.mse:.6f}",
            "",
            "Coefficients:",
            "-" * 60,
        ])
        for i, coef in enumerate(self.coefficients):
            lines.append(f"  w[{i}]: {coef:14.6f}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ClosedFormSolution(n={self._design.n}, p={self._design.p}, "
            f"alpha={self.alpha:g}, r_squared={self.r_squared:.4f})"
        )
