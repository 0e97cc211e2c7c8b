"""
Regression quality statistics.

Public API:
    RegressionMetrics.compute(y_true, y_pred, n_features) -> RegressionMetrics
"""

from pyols.metrics.regression_metrics import RegressionMetrics

__all__ = [
    "RegressionMetrics",
]
