"""
Stateful regression models implementing the Regressor protocol.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.compute.tolerances import SINGULAR_PIVOT_TOLERANCE
from pyols.core.exceptions import NotFittedError, ValidationError
from pyols.core.validation import check_1d, check_2d, check_array, check_finite
from pyols.regression.solution import LinearSolution
from pyols.regression.solvers import fit as fit_ols


class LinearRegression:
    """
    Ordinary least squares via the normal equations.

    The model is unfitted until fit() succeeds; a failed fit leaves any
    previously fitted coefficients in place.

    Example:
        >>> model = LinearRegression().fit([[1, 1], [1, 2], [1, 3]], [2, 4, 6])
        >>> model.coefficients      # ≈ [0, 2]
        >>> model.predict([4])      # ≈ 8; no leading 1 in the feature vector
    """

    def __init__(self, tol: float = SINGULAR_PIVOT_TOLERANCE):
        """
        Args:
            tol: Pivot magnitude below which X'X is declared singular
        """
        self.tol = tol
        self._solution: LinearSolution | None = None

    def fit(self, X: ArrayLike, y: ArrayLike) -> LinearRegression:
        """
        Estimate β = (X'X)⁻¹X'y.

        X must already contain an intercept column if one is wanted.

        Returns:
            self, for chaining

        Raises:
            ValidationError: If inputs are invalid
            DimensionError: If X and y disagree in length
            SingularMatrixError: If X'X is not invertible
        """
        solution = fit_ols(X, y, tol=self.tol)
        self._solution = solution
        return self

    @property
    def is_fitted(self) -> bool:
        return self._solution is not None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]] | None:
        """Copy of the fitted coefficient vector, or None before fit()."""
        if self._solution is None:
            return None
        return self._solution.coefficients.copy()

    @property
    def solution(self) -> LinearSolution:
        """Full diagnostics of the last successful fit."""
        return self._require_fitted()

    def _require_fitted(self) -> LinearSolution:
        if self._solution is None:
            raise NotFittedError(
                "LinearRegression has not been fitted. Call fit() first."
            )
        return self._solution

    def predict(self, x: ArrayLike) -> float:
        """
        Predict the response for one observation.

        ŷ = β[0] + Σ_{j=1}^{p-1} x[j-1] β[j]

        Args:
            x: Feature vector WITHOUT the leading intercept entry; its
               length must be len(coefficients) - 1

        Returns:
            Predicted response

        Raises:
            NotFittedError: If called before fit()
            ValidationError: If x is malformed or has the wrong length
        """
        beta = self._require_fitted().coefficients
        features = check_array(x, 'x')
        check_1d(features, 'x')
        check_finite(features, 'x')

        if features.shape[0] != beta.shape[0] - 1:
            raise ValidationError(
                f"x: expected {beta.shape[0] - 1} features (coefficients minus "
                f"intercept), got {features.shape[0]}"
            )

        return float(beta[0] + features @ beta[1:])

    def predict_batch(self, rows: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Predict one response per row of a feature matrix.

        Args:
            rows: Feature matrix (m x (p - 1)), rows without intercept entries

        Returns:
            Predictions (m,)
        """
        beta = self._require_fitted().coefficients
        features = check_array(rows, 'rows')
        check_2d(features, 'rows')
        check_finite(features, 'rows')

        if features.shape[1] != beta.shape[0] - 1:
            raise ValidationError(
                f"rows: expected {beta.shape[0] - 1} feature columns, "
                f"got {features.shape[1]}"
            )

        return beta[0] + features @ beta[1:]

    def __repr__(self) -> str:
        state = 'fitted' if self.is_fitted else 'unfitted'
        return f"LinearRegression(tol={self.tol:g}, {state})"
