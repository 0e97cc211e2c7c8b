"""
Fit-quality statistics for regression predictions.

RegressionMetrics is a one-shot value object: every statistic is computed
once from (y_true, y_pred, n_features) and frozen.

Degenerate inputs do not raise by default. A constant y_true gives an
undefined R², n == n_features + 1 gives an undefined adjusted R², and a
negative radicand gives a NaN RSE. These come back as NaN or ±inf with a
RuntimeWarning, or raise InvalidResultError when strict=True.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, TextIO
import warnings

import numpy as np
from numpy.typing import ArrayLike

from pyols.core.exceptions import InvalidResultError
from pyols.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_non_empty,
    check_non_negative_int,
)

_STATISTICS = (
    'r_squared',
    'adjusted_r_squared',
    'mse',
    'rmse',
    'mae',
    'rse',
    'mean',
)

_REPORT_LABELS = (
    ('R²:', 'r_squared'),
    ('Adjusted R²:', 'adjusted_r_squared'),
    ('MSE:', 'mse'),
    ('RMSE:', 'rmse'),
    ('MAE:', 'mae'),
    ('RSE:', 'rse'),
)


@dataclass(frozen=True)
class RegressionMetrics:
    """
    Regression fit statistics.

    Attributes:
        r_squared: 1 - SSres/SStot (higher is better, max 1.0)
        adjusted_r_squared: R² penalized for n_features (higher is better)
        mse: Mean squared error (lower is better)
        rmse: Square root of MSE, in the units of y (lower is better)
        mae: Mean absolute error, robust to outliers (lower is better)
        rse: sqrt(mse - n_features - 1)
        mean: Mean of y_true
        n_observations: Number of (y_true, y_pred) pairs
        n_features: Number of predictors, not counting the intercept
        warnings: Names of statistics that came out NaN or infinite
    """
    r_squared: float
    adjusted_r_squared: float
    mse: float
    rmse: float
    mae: float
    rse: float
    mean: float
    n_observations: int
    n_features: int
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def compute(
        cls,
        y_true: ArrayLike,
        y_pred: ArrayLike,
        n_features: int,
        *,
        strict: bool = False,
    ) -> RegressionMetrics:
        """
        Compute all statistics from true and predicted responses.

        Args:
            y_true: Observed responses (n,)
            y_pred: Predicted responses (n,)
            n_features: Number of predictors used by the model (>= 0)
            strict: Raise instead of returning NaN/inf statistics

        Returns:
            RegressionMetrics

        Raises:
            ValidationError: If a vector is missing, empty or not 1D, or
                n_features is negative or not an integer
            DimensionError: If y_true and y_pred differ in length
            InvalidResultError: If strict and any statistic is non-finite
        """
        truth = check_array(y_true, 'y_true')
        pred = check_array(y_pred, 'y_pred')
        check_1d(truth, 'y_true')
        check_1d(pred, 'y_pred')
        check_consistent_length(truth, pred, names=('y_true', 'y_pred'))
        check_non_empty(truth, 'y_true')
        k = check_non_negative_int(n_features, 'n_features')

        n = truth.shape[0]
        errors = truth - pred

        with np.errstate(divide='ignore', invalid='ignore'):
            mean = np.mean(truth)
            mse = np.mean(errors ** 2)
            rmse = np.sqrt(mse)
            mae = np.mean(np.abs(errors))
            rse = np.sqrt(mse - k - 1)

            ss_res = np.sum(errors ** 2)
            ss_tot = np.sum((truth - mean) ** 2)
            r_squared = 1.0 - ss_res / ss_tot
            adjusted = 1.0 - (1.0 - r_squared) * (n - 1) / np.float64(n - k - 1)

        values = {
            'r_squared': float(r_squared),
            'adjusted_r_squared': float(adjusted),
            'mse': float(mse),
            'rmse': float(rmse),
            'mae': float(mae),
            'rse': float(rse),
            'mean': float(mean),
        }

        bad = tuple(name for name in _STATISTICS if not np.isfinite(values[name]))
        if bad:
            message = (
                f"Non-finite regression statistics: {', '.join(bad)} "
                f"(n={n}, n_features={k})"
            )
            if strict:
                raise InvalidResultError(message, fields=bad)
            warnings.warn(message, RuntimeWarning, stacklevel=2)

        return cls(**values, n_observations=n, n_features=k, warnings=bad)

    def to_dict(self) -> dict[str, float]:
        """The seven statistics keyed by name."""
        data: dict[str, Any] = asdict(self)
        return {name: data[name] for name in _STATISTICS}

    def report(self) -> str:
        """Fixed-width report, 4 decimal places."""
        lines = ["=== Regression Metrics ==="]
        for label, attr in _REPORT_LABELS:
            lines.append(f"{label:<15}{getattr(self, attr):.4f}")
        return "\n".join(lines)

    def print_report(self, file: TextIO | None = None) -> None:
        """Write report() to stdout, or to the given stream."""
        print(self.report(), file=file)
