"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_degree: polynomial degree
    - check_positive / check_non_negative / check_positive_int: hyperparameters
"""

import numpy as np
import pytest

from pydescent.core.exceptions import (
    DimensionError,
    InvalidDegreeError,
    InvalidHyperparameterError,
    ValidationError,
)
from pydescent.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_degree,
    check_finite,
    check_min_samples,
    check_ndim,
    check_non_negative,
    check_positive,
    check_positive_int,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        arr = np.array([1, 2, 3], dtype=np.int32)
        result = check_array(arr, "X")
        assert np.issubdtype(result.dtype, np.floating)

    def test_float_array_passthrough(self):
        arr = np.array([1.0, 2.0, 3.0], dtype=np.float64)
        result = check_array(arr, "X")
        assert result.dtype == np.float64

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="real numeric"):
            check_array([1 + 2j, 3.0], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0, 3.0]), "X")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan, 3.0]), "X")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([1.0, -np.inf, 3.0]), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shapes
# ═══════════════════════════════════════════════════════════════════════


class TestShapes:

    def test_check_ndim(self):
        with pytest.raises(DimensionError, match="expected 3D"):
            check_ndim(np.zeros((2, 2)), 3, "T")

    def test_check_1d(self):
        check_1d(np.zeros(3), "y")
        with pytest.raises(DimensionError):
            check_1d(np.zeros((3, 1)), "y")

    def test_check_2d(self):
        check_2d(np.zeros((3, 2)), "X")
        with pytest.raises(DimensionError):
            check_2d(np.zeros(3), "X")

    def test_consistent_length(self):
        check_consistent_length(np.zeros((4, 2)), np.zeros(4), names=("X", "y"))
        with pytest.raises(DimensionError, match="X=4, y=3"):
            check_consistent_length(np.zeros((4, 2)), np.zeros(3), names=("X", "y"))

    def test_consistent_length_name_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("x",))

    def test_min_samples(self):
        check_min_samples(np.zeros(2), 2, "x")
        with pytest.raises(ValidationError, match="at least 1"):
            check_min_samples(np.zeros(0), 1, "x")


# ═══════════════════════════════════════════════════════════════════════
# Degrees and hyperparameters
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDegree:

    @pytest.mark.parametrize("degree", [0, 1, 9, np.int64(3)])
    def test_valid(self, degree):
        assert check_degree(degree) == int(degree)

    @pytest.mark.parametrize("degree", [-1, -10])
    def test_negative(self, degree):
        with pytest.raises(InvalidDegreeError, match=">= 0") as exc_info:
            check_degree(degree)
        assert exc_info.value.degree == degree

    @pytest.mark.parametrize("degree", [1.5, 2.0, "3", None, True])
    def test_non_integer(self, degree):
        with pytest.raises(InvalidDegreeError):
            check_degree(degree)


class TestHyperparameters:

    def test_positive(self):
        assert check_positive(0.5, "eta") == 0.5
        for bad in (0, -1e-3):
            with pytest.raises(InvalidHyperparameterError, match="eta"):
                check_positive(bad, "eta")

    def test_non_negative_accepts_zero(self):
        assert check_non_negative(0, "alpha") == 0.0

    def test_non_negative_rejects_negative(self):
        with pytest.raises(InvalidHyperparameterError) as exc_info:
            check_non_negative(-1.0, "alpha")
        assert exc_info.value.name == "alpha"
        assert exc_info.value.value == -1.0

    @pytest.mark.parametrize("bad", [np.nan, np.inf, "0.1", None])
    def test_rejects_non_finite_and_non_numeric(self, bad):
        with pytest.raises(InvalidHyperparameterError):
            check_positive(bad, "eta")

    def test_positive_int(self):
        assert check_positive_int(10_000, "max_epochs") == 10_000
        for bad in (0, -5, 2.5, True):
            with pytest.raises(InvalidHyperparameterError, match="max_epochs"):
                check_positive_int(bad, "max_epochs")
