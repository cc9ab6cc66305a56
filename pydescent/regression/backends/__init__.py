"""
Closed-form regression backends.

Available backends:
    CPUNormalEquationsBackend: Cholesky solve of (X'X + αI) w = X'y
"""

from pydescent.regression.backends.cpu import CPUNormalEquationsBackend

__all__ = [
    "CPUNormalEquationsBackend",
]
