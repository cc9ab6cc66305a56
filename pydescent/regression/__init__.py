"""
Closed-form linear regression.

Ordinary least squares and ridge regression through the normal
equations, plus polynomial curve fitting on top of the basis expansion.

Public API:
    fit_closed_form(X, y, alpha=None) -> ClosedFormSolution
    solve_ols(X, y) -> weights
    solve_ridge(X, y, alpha) -> weights
    fit_polynomial(x, y, degree, alpha=None) -> ClosedFormSolution
    ridge_path(X, y, alphas) -> list[ClosedFormSolution]

Example:
    >>> from pydescent.regression import fit_polynomial
    >>> result = fit_polynomial(x, y, degree=9, alpha=1e-6)
    >>> curve = result.predict(np.linspace(0, 1, 101))
"""

from pydescent.regression.design import RegressionDesign
from pydescent.regression.solution import ClosedFormSolution, ClosedFormParams
from pydescent.regression.solvers import (
    fit_closed_form,
    fit_polynomial,
    ridge_path,
    solve_ols,
    solve_ridge,
)

__all__ = [
    "fit_closed_form",
    "solve_ols",
    "solve_ridge",
    "fit_polynomial",
    "ridge_path",
    "RegressionDesign",
    "ClosedFormSolution",
    "ClosedFormParams",
]
