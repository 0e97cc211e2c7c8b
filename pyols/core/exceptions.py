"""
Exception hierarchy for pyols.

All exceptions inherit from PyOLSError to allow catching any
library-specific error. Each class carries an ErrorKind so callers can
dispatch on the failure category without walking the class hierarchy.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import Enum


class ErrorKind(Enum):
    """Failure categories raised by pyols."""
    INVALID_ARGUMENT = 'invalid_argument'
    DIMENSION_MISMATCH = 'dimension_mismatch'
    NOT_SQUARE = 'not_square'
    SINGULAR = 'singular'
    INVALID_RESULT = 'invalid_result'


class PyOLSError(Exception):
    """Base exception for all pyols errors."""
    kind: ErrorKind | None = None


class ValidationError(PyOLSError):
    """
    Input validation failed.

    Raised when user-provided inputs are missing, empty, non-numeric or
    otherwise malformed.
    """
    kind = ErrorKind.INVALID_ARGUMENT


class NotFittedError(ValidationError):
    """
    A model was used before a successful fit().
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when operands of a product have incompatible shapes.
    """
    kind = ErrorKind.DIMENSION_MISMATCH


class NotSquareError(DimensionError):
    """
    An operation that requires a square matrix received something else.

    Attributes:
        shape: Shape of the offending input, if it could be determined
    """
    kind = ErrorKind.NOT_SQUARE

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyOLSError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination meets a pivot whose magnitude falls below the
    singularity tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Column at which elimination broke down
        pivot_value: Best available pivot in that column
        tolerance: Threshold the pivot was compared against
        expected_rank: Expected rank (the matrix order)
    """
    kind = ErrorKind.SINGULAR

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        tolerance: float | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.tolerance = tolerance
        self.expected_rank = expected_rank


class InvalidResultError(NumericalError):
    """
    A computed statistic is NaN or infinite.

    Raised in strict mode when degenerate inputs (zero total variance,
    zero degrees of freedom, negative radicand) make a statistic undefined.

    Attributes:
        fields: Names of the statistics that came out non-finite
    """
    kind = ErrorKind.INVALID_RESULT

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.fields = fields
