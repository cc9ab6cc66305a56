"""
Regression Design.

Design holds a validated design matrix X and response y for a single
solve call. It knows nothing about how X was built: a plain [1, x]
matrix, a polynomial expansion, or any caller-supplied features.

Shared by the closed-form solvers and the iterative solvers, which both
minimize ||y - Xw||² over the same inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.core.exceptions import DimensionError
from pydescent.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Regression design matrix specification.

    Immutable after construction. X and y are stored as read-only copies
    so no solver can mutate the caller's data.

    Construction:
        RegressionDesign.from_arrays(X, y)   # any array-likes
        RegressionDesign.build(X, y)         # already-checked float arrays

    Note that n >= p is NOT required here: fewer samples than parameters
    is a property of the normal equations (SingularMatrixError for OLS,
    well-posed for ridge), not of the inputs.
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int

    @classmethod
    def from_arrays(cls, X: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """Build Design directly from array-likes."""
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')
        return cls.build(X_arr, y_arr)

    @classmethod
    def build(cls, X: NDArray, y: NDArray) -> RegressionDesign:
        """Internal builder with validation."""
        X = np.array(X, dtype=np.float64)
        y = np.array(y, dtype=np.float64)

        # Ensure correct shapes
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()

        # Validate
        check_2d(X, 'X')
        check_1d(y, 'y')
        check_finite(X, 'X')
        check_finite(y, 'y')
        check_consistent_length(X, y, names=('X', 'y'))
        check_min_samples(X, 1, 'X')
        if X.shape[1] == 0:
            raise DimensionError("X: design matrix has no columns")

        X.setflags(write=False)
        y.setflags(write=False)

        n, p = X.shape
        return cls(_X=X, _y=y, _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p)."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of parameters (columns of X, bias included)."""
        return self._p
