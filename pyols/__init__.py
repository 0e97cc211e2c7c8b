"""
pyols: ordinary least squares on a from-scratch dense linear algebra engine.

Fits linear models through the normal equations, with (X'X)⁻¹ obtained by
Gauss-Jordan elimination with partial pivoting, and reports standard
regression quality statistics.

Submodules:
    core: exceptions, validation, result envelope, matrix kernels
    regression: fit(), LinearRegression, add_intercept
    metrics: RegressionMetrics
"""

__version__ = "0.1.0"

from pyols import metrics
from pyols import regression
from pyols.core.exceptions import (
    ErrorKind,
    PyOLSError,
    ValidationError,
    NotFittedError,
    DimensionError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
    InvalidResultError,
)
from pyols.metrics import RegressionMetrics
from pyols.regression import LinearRegression, add_intercept, fit

__all__ = [
    "__version__",
    "metrics",
    "regression",
    "fit",
    "add_intercept",
    "LinearRegression",
    "RegressionMetrics",
    "ErrorKind",
    "PyOLSError",
    "ValidationError",
    "NotFittedError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
    "InvalidResultError",
]
