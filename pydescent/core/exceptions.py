"""
Exception hierarchy for PyDescent.

All exceptions inherit from PyDescentError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
    - Non-convergence or divergence of an iterative solver is a reported
      status, not an exception
"""


class PyDescentError(Exception):
    """Base exception for all PyDescent errors."""
    pass


class ValidationError(PyDescentError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class InvalidDegreeError(ValidationError):
    """
    Polynomial degree is negative or not an integer.

    Attributes:
        degree: The rejected degree value
    """

    def __init__(self, message: str, degree: object = None):
        super().__init__(message)
        self.degree = degree


class InvalidHyperparameterError(ValidationError):
    """
    A solver hyperparameter is outside its admissible range.

    Raised for negative learning rates, negative regularization strength,
    non-positive epoch counts or record periods, and negative loss floors.

    Attributes:
        name: Name of the offending hyperparameter (e.g. 'eta', 'alpha')
        value: The rejected value
    """

    def __init__(self, message: str, name: str | None = None, value: object = None):
        super().__init__(message)
        self.name = name
        self.value = value


class NumericalError(PyDescentError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when the normal-equations matrix X'X (or X'X + αI with α = 0)
    cannot be inverted. Callers typically recover by lowering the
    polynomial degree or switching to ridge regression with α > 0.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of parameters)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
