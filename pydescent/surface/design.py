"""
Sample set design.

A SampleSet is the observed data D: an ordered sequence of N (x, y)
pairs for simple (one-feature) regression. It is always passed to the
loss-surface functions explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.core.exceptions import DimensionError
from pydescent.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True, eq=False)
class SampleSet:
    """
    Immutable sample set of (x, y) pairs.

    Construction:
        SampleSet.from_pairs([(1, 3), (3, 6), (6, 5), (8, 7)])
        SampleSet.from_pairs(table)          # (N, 2) array
        SampleSet.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]

    @classmethod
    def from_pairs(cls, pairs: ArrayLike) -> SampleSet:
        """Build from an (N, 2) table of (x, y) rows."""
        table = check_array(pairs, 'D')
        if table.ndim != 2 or table.shape[1] != 2:
            raise DimensionError(
                f"D: expected an (N, 2) table of (x, y) pairs, got shape {table.shape}"
            )
        return cls.from_arrays(table[:, 0], table[:, 1])

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> SampleSet:
        """Build from separate x and y vectors."""
        x_arr = np.array(check_array(x, 'x'), dtype=np.float64)
        y_arr = np.array(check_array(y, 'y'), dtype=np.float64)
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, 1, 'D')
        x_arr.setflags(write=False)
        y_arr.setflags(write=False)
        return cls(_x=x_arr, _y=y_arr)

    @classmethod
    def coerce(cls, D: SampleSet | ArrayLike) -> SampleSet:
        """Pass a SampleSet through, or build one from an (N, 2) table."""
        if isinstance(D, SampleSet):
            return D
        return cls.from_pairs(D)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def n(self) -> int:
        """Number of samples."""
        return self._x.shape[0]

    def design_matrix(self) -> NDArray[np.floating[Any]]:
        """The [1, x] design matrix, bias column first."""
        return np.column_stack([np.ones(self.n), self._x])

    def as_table(self) -> NDArray[np.floating[Any]]:
        """(N, 2) copy of the data."""
        return np.column_stack([self._x, self._y])

    def __len__(self) -> int:
        return self.n
