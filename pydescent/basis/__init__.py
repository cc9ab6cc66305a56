"""
Polynomial basis expansion.

Public API:
    expand_polynomial(x, degree) -> design matrix [1, x, ..., x^degree]
    evaluate_polynomial(x, weights) -> fitted curve values
    PolynomialBasis(degree) -> reusable validated basis

Example:
    >>> from pydescent.basis import expand_polynomial
    >>> X = expand_polynomial([1.0, 3.0, 6.0, 8.0], 1)   # [1, x]
"""

from pydescent.basis.polynomial import (
    PolynomialBasis,
    evaluate_polynomial,
    expand_polynomial,
)

__all__ = [
    "expand_polynomial",
    "evaluate_polynomial",
    "PolynomialBasis",
]
