"""
Input validation utilities for PyDescent.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pydescent.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidDegreeError,
    InvalidHyperparameterError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    # Ensure floating point for numerical stability
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_degree(degree: Any, name: str = 'degree') -> int:
    """
    Verify a polynomial degree is a non-negative integer.

    Booleans are rejected even though they subclass int.

    Returns:
        The degree as a plain int

    Raises:
        InvalidDegreeError: If degree is negative or not integral
    """
    if isinstance(degree, bool) or not isinstance(degree, numbers.Integral):
        raise InvalidDegreeError(
            f"{name}: expected a non-negative integer, got {degree!r}",
            degree=degree,
        )
    if degree < 0:
        raise InvalidDegreeError(
            f"{name}: must be >= 0, got {degree}",
            degree=degree,
        )
    return int(degree)


def _check_real(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidHyperparameterError(
            f"{name}: expected a real number, got {value!r}",
            name=name, value=value,
        )
    value = float(value)
    if not np.isfinite(value):
        raise InvalidHyperparameterError(
            f"{name}: must be finite, got {value}",
            name=name, value=value,
        )
    return value


def check_positive(value: Any, name: str) -> float:
    """
    Verify a hyperparameter is a finite real number > 0.

    Raises:
        InvalidHyperparameterError: If value is not strictly positive
    """
    value = _check_real(value, name)
    if value <= 0:
        raise InvalidHyperparameterError(
            f"{name}: must be > 0, got {value}",
            name=name, value=value,
        )
    return value


def check_non_negative(value: Any, name: str) -> float:
    """
    Verify a hyperparameter is a finite real number >= 0.

    Raises:
        InvalidHyperparameterError: If value is negative
    """
    value = _check_real(value, name)
    if value < 0:
        raise InvalidHyperparameterError(
            f"{name}: must be >= 0, got {value}",
            name=name, value=value,
        )
    return value


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify a count (epochs, record period, window) is an integer >= 1.

    Raises:
        InvalidHyperparameterError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidHyperparameterError(
            f"{name}: expected a positive integer, got {value!r}",
            name=name, value=value,
        )
    if value < 1:
        raise InvalidHyperparameterError(
            f"{name}: must be >= 1, got {value}",
            name=name, value=value,
        )
    return int(value)
