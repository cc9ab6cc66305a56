"""
Tolerance tiers for numerical validation.

Defines precision expectations for different solver families:
- Closed form (normal equations): agrees with the covariance-based
  minimizer to near machine precision on well-conditioned problems
- Closed form, ill-conditioned: high-degree polynomial designs
- Iterative: gradient descent and SGD stopped by a gradient-norm test

Used by the test suite and by the closed-form backend's condition check.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Normal equations on a well-conditioned design
CLOSED_FORM = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='closed_form',
    description='Normal equations, double precision',
)

# Normal equations, cond(X'X) above ILL_CONDITIONED_THRESHOLD
CLOSED_FORM_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='closed_form_ill_conditioned',
    description='Normal equations, ill-conditioned X\'X',
)

# Gradient methods stopped at an L1 gradient threshold of ~1e-4
ITERATIVE = ToleranceTier(
    rtol=0.0,
    atol=1e-2,
    name='iterative',
    description='Steepest descent / SGD run to convergence',
)

# cond(X'X) past this is reported as a warning on closed-form fits.
# Polynomial designs of degree ~9 on [0, 1] land around here.
ILL_CONDITIONED_THRESHOLD = 1e12


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if backend_name in ('cpu_batch_gd', 'cpu_sgd'):
        return ITERATIVE
    if is_ill_conditioned:
        return CLOSED_FORM_ILL_CONDITIONED
    return CLOSED_FORM
