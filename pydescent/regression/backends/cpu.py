"""
CPU backend for closed-form linear regression.

Solves the (optionally ridge-regularized) normal equations with a
Cholesky factorization via LAPACK (through SciPy). This is the
reference implementation the iterative solvers are validated against.
"""

from typing import Any
import numpy as np

from pydescent.core.result import Result
from pydescent.core.compute.timing import Timer
from pydescent.core.compute.linalg.normal_equations import normal_equations_solve
from pydescent.core.compute.tolerances import ILL_CONDITIONED_THRESHOLD
from pydescent.regression.design import RegressionDesign
from pydescent.regression.solution import ClosedFormParams


class CPUNormalEquationsBackend:
    """
    CPU backend using the normal equations.

    Implements the Backend protocol for RegressionDesign -> ClosedFormParams.

    Args:
        alpha: Ridge strength. 0.0 gives ordinary least squares. Always
            supplied by the caller; the backend never picks a value.
    """

    def __init__(self, alpha: float = 0.0):
        self._alpha = float(alpha)

    @property
    def name(self) -> str:
        return 'cpu_normal'

    @property
    def alpha(self) -> float:
        return self._alpha

    def solve(self, design: RegressionDesign) -> Result[ClosedFormParams]:
        """
        Solve least squares via the normal equations.

        Algorithm:
            1. Form A = X'X + αI and b = X'y
            2. Check rank(X) when α = 0
            3. Solve A w = b by Cholesky
            4. Compute residuals, fitted values, and diagnostics

        Raises:
            SingularMatrixError: If X'X + αI cannot be factorized
        """
        timer = Timer()
        timer.start()
        warnings_list = []

        X = design.X
        y = design.y

        with timer.section('solve'):
            ne = normal_equations_solve(X, y, self._alpha)

        with timer.section('residuals'):
            fitted_values = X @ ne.coefficients
            residuals = y - fitted_values

        with timer.section('statistics'):
            rss = float(residuals @ residuals)
            tss = float(np.sum((y - np.mean(y)) ** 2))

        if ne.condition_number > ILL_CONDITIONED_THRESHOLD:
            warnings_list.append(
                f"Normal equations are ill-conditioned "
                f"(cond={ne.condition_number:.3e}); coefficients may be inaccurate. "
                f"Consider a larger alpha or a lower degree."
            )

        timer.stop()

        params = ClosedFormParams(
            coefficients=ne.coefficients,
            residuals=residuals,
            fitted_values=fitted_values,
            rss=rss,
            tss=tss,
            rank=ne.rank,
            condition_number=ne.condition_number,
            alpha=self._alpha,
        )

        info: dict[str, Any] = {
            'method': 'ridge' if self._alpha > 0 else 'ols',
            'alpha': self._alpha,
            'rank': ne.rank,
            'condition_number': ne.condition_number,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
