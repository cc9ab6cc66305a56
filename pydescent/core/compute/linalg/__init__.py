"""
Linear algebra kernels for PyDescent.

All functions follow these conventions:
    - CPU only, NumPy/SciPy (LAPACK under the hood)
    - Each operation returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    normal_equations: (Regularized) normal-equations least squares
"""

from pydescent.core.compute.linalg.normal_equations import (
    NormalEquationsResult,
    gram_matrix,
    normal_equations_solve,
)

__all__ = [
    "NormalEquationsResult",
    "gram_matrix",
    "normal_equations_solve",
]
