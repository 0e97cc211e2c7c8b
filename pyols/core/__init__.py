"""
Core infrastructure for pyols.

This module provides shared abstractions, utilities, and the numeric engine
used by the regression and metrics submodules.

Key components:
    protocols: Regressor, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra primitives
"""

from pyols.core.protocols import Regressor, Backend
from pyols.core.result import Result
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

__all__ = [
    # Protocols
    "Regressor",
    "Backend",
    # Result
    "Result",
    # Exceptions
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
