"""
Polynomial basis expansion.

Maps a raw scalar feature onto the columns [1, x, x², ..., x^d]. Column 0
is always the bias term, so a degree-1 expansion is the usual [1, x]
simple-regression design.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.core.exceptions import DimensionError, InvalidDegreeError
from pydescent.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_degree,
)


def _as_feature(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    x_arr = check_array(x, name)
    if x_arr.ndim == 0:
        x_arr = x_arr.reshape(1)
    if x_arr.ndim == 2 and x_arr.shape[1] == 1:
        x_arr = x_arr.ravel()
    check_1d(x_arr, name)
    check_finite(x_arr, name)
    return x_arr


def expand_polynomial(x: ArrayLike, degree: int) -> NDArray[np.floating[Any]]:
    """
    Build the polynomial design matrix of x.

    Column j (0-indexed) holds x_i**j, so the result is N x (degree + 1).
    Degree 0 yields a single column of ones.

    Args:
        x: Raw scalar inputs, shape (N,). A scalar is treated as N = 1.
        degree: Non-negative polynomial degree

    Returns:
        Design matrix of shape (N, degree + 1)

    Raises:
        InvalidDegreeError: If degree is negative or not an integer
        ValidationError: If x is non-numeric or non-finite
        DimensionError: If x is not 1D

    Example:
        >>> expand_polynomial([1.0, 2.0, 3.0], 2)
        array([[1., 1., 1.],
               [1., 2., 4.],
               [1., 3., 9.]])
    """
    degree = check_degree(degree)
    x_arr = _as_feature(x, 'x')
    # Exact zeros in x give 0**0 == 1, keeping the bias column intact
    return np.power.outer(x_arr.astype(np.float64), np.arange(degree + 1))


def evaluate_polynomial(x: ArrayLike, weights: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Evaluate Σ_j w_j x^j at each x.

    Args:
        x: Points to evaluate at, shape (N,)
        weights: Coefficients ordered from the bias term upward, shape (d + 1,)

    Returns:
        Values of shape (N,)
    """
    w = check_array(weights, 'weights')
    check_1d(w, 'weights')
    check_finite(w, 'weights')
    if w.shape[0] == 0:
        raise InvalidDegreeError("weights: need at least one coefficient", degree=-1)
    return expand_polynomial(x, w.shape[0] - 1) @ w


@dataclass(frozen=True)
class PolynomialBasis:
    """
    A fixed-degree polynomial basis.

    Validates the degree once so repeated expansions (training data, then
    a dense grid for drawing the fitted curve) share it.

    Construction:
        PolynomialBasis(9)
    """
    degree: int

    def __post_init__(self):
        check_degree(self.degree)

    @property
    def n_params(self) -> int:
        """Number of weights, degree + 1."""
        return self.degree + 1

    def expand(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        return expand_polynomial(x, self.degree)

    def evaluate(self, x: ArrayLike, weights: ArrayLike) -> NDArray[np.floating[Any]]:
        w = np.asarray(weights, dtype=np.float64)
        if w.shape != (self.n_params,):
            raise DimensionError(
                f"weights: expected shape ({self.n_params},) for degree {self.degree}, "
                f"got {w.shape}"
            )
        return evaluate_polynomial(x, w)
