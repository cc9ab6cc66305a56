"""
Solver dispatch for closed-form regression.

This module provides the public API (fit_closed_form, solve_ols,
solve_ridge, fit_polynomial, ridge_path) and backend selection.
"""

from typing import Iterable, Literal
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.basis.polynomial import PolynomialBasis
from pydescent.core.protocols import Backend
from pydescent.core.validation import check_non_negative
from pydescent.regression.design import RegressionDesign
from pydescent.regression.solution import ClosedFormParams, ClosedFormSolution
from pydescent.regression.backends.cpu import CPUNormalEquationsBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_normal']


def fit_closed_form(
    X: ArrayLike,
    y: ArrayLike,
    alpha: float | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> ClosedFormSolution:
    """
    Fit a linear model in closed form.

    Solves
        min_w ||y - Xw||² + α||w||²
    through the normal equations w = (X'X + αI)⁻¹ X'y. With alpha=None
    (or 0) this is ordinary least squares.

    The identity matrix covers every column, bias included.

    Args:
        X: Design matrix (n x p), column 0 normally the bias.
        y: Response vector (n,).
        alpha: Ridge strength (>= 0), or None for OLS. The magnitude is a
            modelling choice left to the caller; a typical sweep is
            1e-9, 1e-6, 1e-3, 1.
        backend: 'auto', 'cpu' or 'cpu_normal' (all the same backend).

    Returns:
        ClosedFormSolution with coefficients and diagnostics

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If X and y have inconsistent dimensions
        InvalidHyperparameterError: If alpha < 0
        SingularMatrixError: If OLS is requested and X'X is not invertible
            (fewer samples than parameters, collinear columns), or if
            alpha > 0 is too small to lift X'X + αI off singularity in
            float64 (alpha below the rounding error of the largest
            diagonal entry of X'X)

    Example:
        >>> import numpy as np
        >>> from pydescent.regression import fit_closed_form
        >>> x = np.array([1.0, 3.0, 6.0, 8.0])
        >>> X = np.column_stack([np.ones(4), x])
        >>> fit_closed_form(X, [3.0, 6.0, 5.0, 7.0]).coefficients
        array([3.31034483, 0.43103448])
    """
    design = RegressionDesign.from_arrays(X, y)
    return _fit_design(design, alpha, backend=backend)


def _fit_design(
    design: RegressionDesign,
    alpha: float | None,
    *,
    backend: BackendChoice,
    basis: PolynomialBasis | None = None,
) -> ClosedFormSolution:
    alpha_value = 0.0 if alpha is None else check_non_negative(alpha, 'alpha')

    backend_impl = _get_backend(backend, alpha_value)
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=3)

    return ClosedFormSolution(_result=result, _design=design, _basis=basis)


def solve_ols(X: ArrayLike, y: ArrayLike) -> NDArray[np.floating]:
    """
    Ordinary least squares weights w = (X'X)⁻¹ X'y.

    Raises:
        SingularMatrixError: If X'X is not invertible. Callers should
            either reduce the degree or switch to solve_ridge().
    """
    return fit_closed_form(X, y).coefficients


def solve_ridge(X: ArrayLike, y: ArrayLike, alpha: float) -> NDArray[np.floating]:
    """
    Ridge weights w = (X'X + αI)⁻¹ X'y.

    α = 0 degenerates to OLS. Any α > 0 makes the system positive
    definite in exact arithmetic, but in float64 a tiny α on collinear or
    badly scaled columns is lost to rounding.

    Raises:
        InvalidHyperparameterError: If alpha < 0
        SingularMatrixError: If X'X + αI cannot be factorized, which
            happens for α = 0 with rank-deficient X and for α > 0 that
            is negligible next to the entries of X'X
    """
    alpha = check_non_negative(alpha, 'alpha')
    return fit_closed_form(X, y, alpha).coefficients


def fit_polynomial(
    x: ArrayLike,
    y: ArrayLike,
    degree: int,
    alpha: float | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> ClosedFormSolution:
    """
    Fit a polynomial curve of the given degree.

    Expands x to [1, x, ..., x^degree] and solves in closed form. The
    returned solution's predict() accepts raw x values, which is what a
    caller drawing the fitted curve on a dense grid needs.

    Args:
        x: Raw inputs (n,)
        y: Responses (n,)
        degree: Polynomial degree (>= 0)
        alpha: Ridge strength, or None for OLS

    Raises:
        InvalidDegreeError: If degree < 0
        SingularMatrixError: For OLS with degree + 1 > n
    """
    basis = PolynomialBasis(degree)
    design = RegressionDesign.from_arrays(basis.expand(x), y)
    return _fit_design(design, alpha, backend=backend, basis=basis)


def ridge_path(
    X: ArrayLike,
    y: ArrayLike,
    alphas: Iterable[float],
    *,
    backend: BackendChoice = 'auto',
) -> list[ClosedFormSolution]:
    """
    Fit one ridge solution per alpha, in the given order.

    The design is validated once and shared across fits.

    Returns:
        List of ClosedFormSolution, aligned with alphas
    """
    design = RegressionDesign.from_arrays(X, y)
    return [_fit_design(design, alpha, backend=backend) for alpha in alphas]


def _get_backend(choice: BackendChoice, alpha: float) -> Backend[ClosedFormParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_normal'):
        return CPUNormalEquationsBackend(alpha=alpha)

    raise ValueError(f"Unknown backend: {choice!r}")
