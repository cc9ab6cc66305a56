"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydescent.datasets import four_point_table, sine_sample
from pydescent.surface import SampleSet


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def four_points():
    """The reference (x, y) table [(1,3), (3,6), (6,5), (8,7)]."""
    return four_point_table()


@pytest.fixture
def four_point_design(four_points):
    """[1, x] design matrix and y for the reference table."""
    x, y = four_points[:, 0], four_points[:, 1]
    X = np.column_stack([np.ones_like(x), x])
    return X, y


@pytest.fixture
def four_point_samples(four_points):
    return SampleSet.from_pairs(four_points)


@pytest.fixture
def exact_line_design():
    """Noise-free data on y = 2x + 1 with small x, for SGD convergence."""
    x = np.array([0.5, 1.0, 1.5, 2.0])
    X = np.column_stack([np.ones_like(x), x])
    y = 2.0 * x + 1.0
    return X, y


@pytest.fixture
def sine_data():
    """Ten noisy samples of sin(2πx) for polynomial curve fitting."""
    return sine_sample()


@pytest.fixture
def noisy_line(rng):
    """Linear data with Gaussian noise: y = 1.5 - 0.7 x + ε."""
    n = 50
    x = rng.uniform(-2.0, 3.0, n)
    y = 1.5 - 0.7 * x + rng.standard_normal(n) * 0.2
    return x, y
