"""
Learning-rate schedules.

Each Schedule maps an iteration number t >= 1 to a step size η_t:

    ConstantSchedule     η_t = η              (batch steepest descent)
    InverseSqrtSchedule  η_t = η₀ / √t        (SGD's decaying step size)

The decaying schedule is the standard device for damping SGD's
oscillation around the optimum; its step sizes shrink monotonically but
sum to infinity, so the iterate can still travel arbitrarily far.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import math

from pydescent.core.validation import check_positive


class Schedule(ABC):
    """Abstract learning-rate schedule t ↦ η_t."""

    def __init__(self, eta: float):
        self._eta = check_positive(eta, 'eta')

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    def initial_rate(self) -> float:
        """η at t = 1."""
        return self._eta

    @abstractmethod
    def __call__(self, t: int) -> float:
        """Step size for iteration t (t >= 1)."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(eta={self._eta!r})"


class ConstantSchedule(Schedule):
    """Fixed step size: η_t = η."""

    @property
    def name(self) -> str:
        return 'constant'

    def __call__(self, t: int) -> float:
        return self._eta


class InverseSqrtSchedule(Schedule):
    """Decaying step size: η_t = η₀ / √t."""

    @property
    def name(self) -> str:
        return 'inverse_sqrt'

    def __call__(self, t: int) -> float:
        if t < 1:
            raise ValueError(f"iteration must be >= 1, got {t}")
        return self._eta / math.sqrt(t)


# =====================================================================
# Schedule name → class mapping + resolver
# =====================================================================

_SCHEDULE_CLASSES: dict[str, type[Schedule]] = {
    'constant': ConstantSchedule,
    'inverse_sqrt': InverseSqrtSchedule,
}


def resolve_schedule(schedule: str | Schedule, eta: float) -> Schedule:
    """Resolve a schedule argument to a Schedule instance.

    Args:
        schedule: Either a string name ('constant', 'inverse_sqrt') or a
                  Schedule instance (passed through, eta ignored).
        eta: Base learning rate for string names.

    Raises:
        ValueError: If string name is not recognized.
        TypeError: If argument is neither string nor Schedule.
        InvalidHyperparameterError: If eta is not > 0.
    """
    if isinstance(schedule, Schedule):
        return schedule
    if isinstance(schedule, str):
        cls = _SCHEDULE_CLASSES.get(schedule.lower())
        if cls is None:
            valid = ', '.join(sorted(_SCHEDULE_CLASSES))
            raise ValueError(
                f"Unknown schedule: {schedule!r}. Valid schedules: {valid}"
            )
        return cls(eta)
    raise TypeError(f"schedule must be str or Schedule, got {type(schedule).__name__}")
