"""
Reference datasets.

Small fixed tables used throughout the demonstrations. Each call returns
fresh arrays, so callers may modify them freely.
"""

import numpy as np

from pydescent.surface.design import SampleSet


def four_point_table() -> np.ndarray:
    """The (x, y) table [(1, 3), (3, 6), (6, 5), (8, 7)]."""
    return np.array([[1.0, 3.0], [3.0, 6.0], [6.0, 5.0], [8.0, 7.0]])


def four_point_sample() -> SampleSet:
    """four_point_table() as a SampleSet."""
    return SampleSet.from_pairs(four_point_table())


def sine_sample() -> tuple[np.ndarray, np.ndarray]:
    """
    Ten noisy samples of sin(2πx) on [0, 1] for polynomial curve fitting.

    Returns:
        (x, y) arrays of length 10
    """
    x = np.array([0.0, 0.16, 0.22, 0.34, 0.44, 0.5, 0.67, 0.73, 0.9, 1.0])
    y = np.array([-0.06, 0.94, 0.97, 0.85, 0.25, 0.09, -0.9, -0.93, -0.53, 0.08])
    return x, y
