"""
Regression Design.

Design holds a validated design matrix X and response y. It is the single
boundary where regression inputs are checked; backends trust it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_non_empty,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Validated regression design: X and y.

    Immutable after construction. Column 0 is used as-is: callers who want
    an intercept prepend a column of ones (see add_intercept()).

    Construction:
        RegressionDesign.build(X, y)
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int

    @classmethod
    def build(cls, X: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """
        Validate inputs and build a design.

        Args:
            X: Design matrix (n x p). A 1D array is treated as one column.
            y: Response vector (n,). An (n, 1) column is flattened.

        Returns:
            RegressionDesign ready for a backend

        Raises:
            ValidationError: If inputs are missing, empty, non-numeric or non-finite
            DimensionError: If shapes are wrong or X and y disagree in length
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_non_empty(X_arr, 'X')
        check_non_empty(y_arr, 'y')
        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))

        # check_array may hand back the caller's own buffers
        n, p = X_arr.shape
        return cls(_X=X_arr.copy(), _y=y_arr.copy(), _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p)."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of columns, including any intercept column."""
        return self._p

    @property
    def has_intercept(self) -> bool:
        """True if column 0 is a column of ones."""
        return bool(np.all(self._X[:, 0] == 1.0))


def add_intercept(X: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Prepend a column of ones to a feature matrix.

    Args:
        X: Feature matrix (n x k), or a single feature as (n,)

    Returns:
        Design matrix (n x (k + 1)) whose column 0 is all ones
    """
    X_arr = check_array(X, 'X')
    if X_arr.ndim == 1:
        X_arr = X_arr.reshape(-1, 1)
    check_2d(X_arr, 'X')
    return np.column_stack([np.ones(X_arr.shape[0]), X_arr])
