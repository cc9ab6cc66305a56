"""
Shared compute infrastructure for PyDescent.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Named tolerance tiers
    linalg: Linear algebra kernels (normal equations)
"""

from pydescent.core.compute.timing import Timer

__all__ = [
    "Timer",
]
