"""
Generic result container for all PyDescent computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, warnings and
reproducibility while allowing domains to define their own parameter
structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for solver computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (weights, trajectory, etc.)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method (no convergence notion)
        >>> Result(
        ...     params=ClosedFormParams(coefficients=w, ...),
        ...     info={'method': 'ridge', 'alpha': 1e-6},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_normal'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=DescentParams(weights=w, trajectory=traj, ...),
        ...     info={'method': 'sgd', 'converged': False, 'iterations': 20000},
        ...     timing={'total_seconds': 0.5, 'iterations': 0.49},
        ...     backend_name='cpu_sgd'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
