"""
Tests for the reference datasets and the top-level package API.
"""

import numpy as np

import pydescent
from pydescent.datasets import four_point_sample, four_point_table, sine_sample


class TestDatasets:

    def test_four_point_table(self):
        table = four_point_table()
        assert table.shape == (4, 2)
        np.testing.assert_array_equal(table[:, 0], [1.0, 3.0, 6.0, 8.0])

    def test_fresh_copies(self):
        table = four_point_table()
        table[0, 0] = 100.0
        assert four_point_table()[0, 0] == 1.0

    def test_four_point_sample(self):
        D = four_point_sample()
        assert D.n == 4
        np.testing.assert_array_equal(D.y, [3.0, 6.0, 5.0, 7.0])

    def test_sine_sample(self):
        x, y = sine_sample()
        assert x.shape == y.shape == (10,)
        assert x[0] == 0.0 and x[-1] == 1.0


class TestPackageAPI:

    def test_version(self):
        assert pydescent.__version__ == "0.1.0"

    def test_end_to_end(self):
        D = four_point_sample()
        X = D.design_matrix()
        b_gd, a_gd = pydescent.fit_gradient_descent(X, D.y, eta=0.001).weights
        b_cf, a_cf = pydescent.fit_closed_form(X, D.y).coefficients
        a_star, b_star = pydescent.exact_minimizer(D)
        np.testing.assert_allclose([a_cf, b_cf], [a_star, b_star], atol=1e-9)
        np.testing.assert_allclose([a_gd, b_gd], [a_star, b_star], atol=1e-2)
