"""
Core infrastructure for PyDescent.

This module provides shared abstractions and utilities used by all
domain-specific submodules (basis, regression, descent, surface).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra primitives
"""

from pydescent.core.protocols import Backend
from pydescent.core.result import Result
from pydescent.core.exceptions import (
    PyDescentError,
    ValidationError,
    DimensionError,
    InvalidDegreeError,
    InvalidHyperparameterError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyDescentError",
    "ValidationError",
    "DimensionError",
    "InvalidDegreeError",
    "InvalidHyperparameterError",
    "NumericalError",
    "SingularMatrixError",
]
