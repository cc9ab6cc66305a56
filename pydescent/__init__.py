"""
PyDescent: parameter estimation by gradient descent and its closed-form
alternatives.

A small numerical toolkit for teaching least-squares regression:
batch steepest descent and SGD with their trajectories, closed-form OLS
and ridge regression, polynomial basis expansion, and loss surfaces over
(slope, intercept) grids for visualization.

Submodules:
    basis: Polynomial basis expansion
    regression: Closed-form OLS / ridge and polynomial fitting
    descent: Batch gradient descent, SGD, scalar steepest descent
    surface: Loss surfaces and the exact least-squares minimizer
    datasets: Reference sample tables
"""

__version__ = "0.1.0"

from pydescent import basis
from pydescent import regression
from pydescent import descent
from pydescent import surface

from pydescent.basis import expand_polynomial, evaluate_polynomial
from pydescent.regression import fit_closed_form, fit_polynomial, ridge_path
from pydescent.descent import fit_gradient_descent, fit_sgd, steepest_descent
from pydescent.surface import (
    loss_surface,
    exact_minimizer,
    average_loss,
    slope_minimizer,
    loss_profile,
    trajectory_losses,
)

__all__ = [
    "__version__",
    "basis",
    "regression",
    "descent",
    "surface",
    "expand_polynomial",
    "evaluate_polynomial",
    "fit_closed_form",
    "fit_polynomial",
    "ridge_path",
    "fit_gradient_descent",
    "fit_sgd",
    "steepest_descent",
    "loss_surface",
    "exact_minimizer",
    "average_loss",
    "slope_minimizer",
    "loss_profile",
    "trajectory_losses",
]
