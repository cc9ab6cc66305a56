"""
Loss surface result type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, eq=False)
class LossSurface:
    """
    Squared-residual loss evaluated on a (slope, intercept) grid.

    All grids are indexed [a_index, b_index], i.e. rows follow the slope
    axis A and columns the intercept axis B. A heatmap with a on the
    horizontal axis needs the transpose.

    Unpacks as (aggregate, per_instance).

    Attributes:
        aggregate: (len(A), len(B)) mean (or sum) over instances, floor included
        per_instance: (N, len(A), len(B)) per-sample squared residual + floor
        slopes: Slope axis A
        intercepts: Intercept axis B
        floor: Constant added to every cell to keep log scales finite
        reduction: 'mean' or 'sum'
    """
    aggregate: NDArray[np.floating[Any]]
    per_instance: NDArray[np.floating[Any]]
    slopes: NDArray[np.floating[Any]]
    intercepts: NDArray[np.floating[Any]]
    floor: float
    reduction: str

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        return iter((self.aggregate, self.per_instance))

    @property
    def shape(self) -> tuple[int, int]:
        return self.aggregate.shape

    @property
    def n_instances(self) -> int:
        return self.per_instance.shape[0]

    def instance(self, i: int) -> NDArray[np.floating[Any]]:
        """Per-instance grid of sample i."""
        return self.per_instance[i]

    def argmin(self) -> tuple[tuple[int, int], tuple[float, float]]:
        """
        Location of the smallest aggregate cell.

        Returns:
            ((a_index, b_index), (a, b))
        """
        ia, ib = np.unravel_index(int(np.argmin(self.aggregate)), self.aggregate.shape)
        return (int(ia), int(ib)), (float(self.slopes[ia]), float(self.intercepts[ib]))

    def nearest_cell(self, a: float, b: float) -> tuple[int, int]:
        """Grid indices of the cell closest to (a, b) along each axis."""
        ia = int(np.argmin(np.abs(self.slopes - a)))
        ib = int(np.argmin(np.abs(self.intercepts - b)))
        return ia, ib
