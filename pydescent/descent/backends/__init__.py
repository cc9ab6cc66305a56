"""
Gradient-descent backends.

Available backends:
    CPUBatchGradientBackend: Full-batch steepest descent
    CPUStochasticGradientBackend: Single-sample SGD with η₀/√t steps
"""

from pydescent.descent.backends.cpu_batch import CPUBatchGradientBackend
from pydescent.descent.backends.cpu_sgd import CPUStochasticGradientBackend

__all__ = [
    "CPUBatchGradientBackend",
    "CPUStochasticGradientBackend",
]
