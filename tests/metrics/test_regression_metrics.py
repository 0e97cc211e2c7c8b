"""
Tests for RegressionMetrics.

Validates:
    - Each statistic against hand-computed values
    - Degenerate inputs produce NaN/inf with a RuntimeWarning, or raise in
      strict mode
    - Constructor validation
    - Report formatting
"""

import math
import warnings
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from pyols.core.exceptions import (
    DimensionError,
    ErrorKind,
    InvalidResultError,
    ValidationError,
)
from pyols.metrics import RegressionMetrics


@pytest.fixture
def finite_metrics():
    """errors of ±3 around a 10..40 ramp: every statistic is finite."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        return RegressionMetrics.compute([10, 20, 30, 40], [13, 17, 33, 37], 1)


# ═══════════════════════════════════════════════════════════════════════
# Values
# ═══════════════════════════════════════════════════════════════════════


class TestValues:

    def test_mean(self, finite_metrics):
        assert finite_metrics.mean == 25.0

    def test_mse_rmse_mae(self, finite_metrics):
        assert finite_metrics.mse == 9.0
        assert finite_metrics.rmse == 3.0
        assert finite_metrics.mae == 3.0

    def test_rse_formula(self, finite_metrics):
        # sqrt(mse - n_features - 1)
        assert finite_metrics.rse == pytest.approx(math.sqrt(7.0))

    def test_r_squared(self, finite_metrics):
        # SSres = 36, SStot = 500
        assert finite_metrics.r_squared == pytest.approx(0.928)

    def test_adjusted_r_squared(self, finite_metrics):
        assert finite_metrics.adjusted_r_squared == pytest.approx(1 - 0.072 * 3 / 2)

    def test_counts_and_no_warnings(self, finite_metrics):
        assert finite_metrics.n_observations == 4
        assert finite_metrics.n_features == 1
        assert finite_metrics.warnings == ()

    def test_perfect_prediction(self):
        with pytest.warns(RuntimeWarning, match="rse"):
            m = RegressionMetrics.compute([1, 2, 3, 4], [1, 2, 3, 4], 1)
        assert m.mse == 0.0
        assert m.rmse == 0.0
        assert m.mae == 0.0
        assert m.r_squared == 1.0
        assert m.adjusted_r_squared == 1.0
        assert math.isnan(m.rse)
        assert m.warnings == ('rse',)

    def test_accepts_numpy_arrays(self):
        y = np.array([10.0, 20.0, 30.0, 40.0])
        m = RegressionMetrics.compute(y, y + np.array([3, -3, 3, -3]), 0)
        assert m.mse == 9.0
        assert m.rse == pytest.approx(math.sqrt(8.0))


# ═══════════════════════════════════════════════════════════════════════
# Degenerate statistics
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerate:

    def test_constant_truth_gives_infinite_r_squared(self):
        with pytest.warns(RuntimeWarning, match="r_squared"):
            m = RegressionMetrics.compute([2, 2, 2], [1, 2, 3], 0)
        assert m.r_squared == -math.inf
        assert 'r_squared' in m.warnings
        assert 'adjusted_r_squared' in m.warnings

    def test_constant_truth_exact_prediction_is_nan(self):
        with pytest.warns(RuntimeWarning):
            m = RegressionMetrics.compute([2, 2, 2], [2, 2, 2], 0)
        assert math.isnan(m.r_squared)

    def test_zero_degrees_of_freedom(self):
        with pytest.warns(RuntimeWarning, match="adjusted_r_squared"):
            m = RegressionMetrics.compute([1, 2, 3], [1.1, 1.9, 3.2], 2)
        assert math.isinf(m.adjusted_r_squared)
        assert math.isfinite(m.r_squared)

    def test_strict_raises(self):
        with pytest.raises(InvalidResultError, match="rse") as exc_info:
            RegressionMetrics.compute([1, 2, 3, 4], [1, 2, 3, 4], 1, strict=True)
        assert exc_info.value.fields == ('rse',)
        assert exc_info.value.kind is ErrorKind.INVALID_RESULT

    def test_strict_passes_finite_statistics(self):
        m = RegressionMetrics.compute([10, 20, 30, 40], [13, 17, 33, 37], 1, strict=True)
        assert m.warnings == ()


# ═══════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    @pytest.mark.parametrize("y_true, y_pred", [(None, [1.0]), ([1.0], None)])
    def test_missing_vector(self, y_true, y_pred):
        with pytest.raises(ValidationError):
            RegressionMetrics.compute(y_true, y_pred, 0)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="y_true=3, y_pred=2") as exc_info:
            RegressionMetrics.compute([1, 2, 3], [1, 2], 0)
        assert isinstance(exc_info.value, ValidationError)

    def test_negative_features(self):
        with pytest.raises(ValidationError, match="n_features"):
            RegressionMetrics.compute([1, 2, 3], [1, 2, 3], -1)

    def test_non_integer_features(self):
        with pytest.raises(ValidationError, match="n_features"):
            RegressionMetrics.compute([1, 2, 3], [1, 2, 3], 1.5)

    def test_empty_vectors(self):
        with pytest.raises(ValidationError, match="non-empty"):
            RegressionMetrics.compute([], [], 0)

    def test_matrix_rejected(self):
        with pytest.raises(ValidationError):
            RegressionMetrics.compute([[1, 2]], [[1, 2]], 0)


# ═══════════════════════════════════════════════════════════════════════
# Immutability and output
# ═══════════════════════════════════════════════════════════════════════


class TestOutput:

    def test_frozen(self, finite_metrics):
        with pytest.raises(FrozenInstanceError):
            finite_metrics.mse = 0.0

    def test_to_dict(self, finite_metrics):
        d = finite_metrics.to_dict()
        assert list(d) == [
            'r_squared', 'adjusted_r_squared', 'mse', 'rmse', 'mae', 'rse', 'mean',
        ]
        assert d['mean'] == 25.0

    def test_report_lines(self, finite_metrics):
        lines = finite_metrics.report().splitlines()
        assert lines == [
            "=== Regression Metrics ===",
            "R²:            0.9280",
            "Adjusted R²:   0.8920",
            "MSE:           9.0000",
            "RMSE:          3.0000",
            "MAE:           3.0000",
            "RSE:           2.6458",
        ]

    def test_print_report_to_stdout(self, finite_metrics, capsys):
        finite_metrics.print_report()
        out = capsys.readouterr().out
        assert out == finite_metrics.report() + "\n"

    def test_report_shows_nan(self):
        with pytest.warns(RuntimeWarning):
            m = RegressionMetrics.compute([1, 2, 3, 4], [1, 2, 3, 4], 1)
        assert m.report().splitlines()[-1] == "RSE:           nan"
