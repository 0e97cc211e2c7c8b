"""
Linear regression by ordinary least squares.

Public API:
    fit(X, y, ...) -> LinearSolution
    LinearRegression: stateful fit()/predict() model
    add_intercept(X): prepend a column of ones

Example:
    >>> from pyols.regression import fit, add_intercept
    >>> result = fit(add_intercept(X), y)
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from pyols.regression.design import RegressionDesign, add_intercept
from pyols.regression.solution import LinearSolution, LinearParams
from pyols.regression.solvers import fit
from pyols.regression.models import LinearRegression

__all__ = [
    "fit",
    "add_intercept",
    "LinearRegression",
    "RegressionDesign",
    "LinearSolution",
    "LinearParams",
]
