"""
Core protocols for PyDescent.

These define structural interfaces that domain-specific implementations
must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so backends stay plain classes.
"""

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a domain-specific
    parameter payload wrapped in a Result. Hyperparameters are fixed at
    construction time, so solve() takes only the design.

    Type Parameters:
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_normal', 'cpu_batch_gd', 'cpu_sgd'
        """
        ...

    def solve(self, design) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent solution
                (singular normal equations, divergence)
        """
        ...
