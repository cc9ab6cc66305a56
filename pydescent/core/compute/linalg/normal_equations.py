"""
Normal-equations least squares.

Solves (X'X + αI) w = X'y directly. This is the textbook closed form
rather than the numerically preferable QR route, because ridge
regularization is defined on X'X and the demonstrations compare against
exactly this formula.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import linalg as sp_linalg

from pydescent.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class NormalEquationsResult:
    """
    Result of a normal-equations solve.

    Attributes:
        coefficients: Weight vector w (p,)
        rank: Numerical rank of X (p when regularized)
        condition_number: 2-norm condition number of the system matrix
    """
    coefficients: NDArray[np.floating[Any]]
    rank: int
    condition_number: float


def gram_matrix(
    X: NDArray[np.floating[Any]],
    alpha: float = 0.0,
) -> NDArray[np.floating[Any]]:
    """Compute X'X + αI."""
    p = X.shape[1]
    return X.T @ X + alpha * np.eye(p)


def normal_equations_solve(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    alpha: float = 0.0,
) -> NormalEquationsResult:
    """
    Solve least squares via the (optionally regularized) normal equations.

    Computes:
        w = (X'X + αI)⁻¹ X'y

    With α = 0 this is ordinary least squares and requires X to have full
    column rank. With α > 0 the rank check is skipped; the system matrix
    is positive definite in exact arithmetic, but the factorization can
    still fail when α is below the rounding error of X'X.

    Args:
        X: Design matrix (n x p)
        y: Response vector (n,)
        alpha: Ridge strength, already validated as >= 0

    Returns:
        NormalEquationsResult with coefficients and diagnostics

    Raises:
        SingularMatrixError: If α = 0 and X'X is not invertible, or if the
            Cholesky factorization of X'X + αI fails
    """
    n, p = X.shape
    A = gram_matrix(X, alpha)
    b = X.T @ y

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        cond = float(np.linalg.cond(A))
    if not np.isfinite(cond):
        cond = float('inf')

    if alpha > 0:
        rank = p
    else:
        rank = int(np.linalg.matrix_rank(X))
        if rank < p:
            raise SingularMatrixError(
                f"X'X is singular: rank(X)={rank}, expected={p} "
                f"(n={n} samples for {p} parameters). "
                f"Lower the degree or use ridge regression with alpha > 0.",
                matrix_name="X'X",
                condition_number=cond,
                rank=rank,
                expected_rank=p,
            )

    try:
        coefficients = sp_linalg.solve(A, b, assume_a='pos')
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"X'X + alpha*I could not be factorized (alpha={alpha}, cond={cond:.3e}): {e}",
            matrix_name="X'X + alpha*I" if alpha > 0 else "X'X",
            condition_number=cond,
            rank=rank,
            expected_rank=p,
        ) from e

    return NormalEquationsResult(
        coefficients=np.asarray(coefficients, dtype=np.float64),
        rank=rank,
        condition_number=cond,
    )
