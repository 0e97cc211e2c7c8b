"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pyols.core.result import Result
from pyols.metrics import RegressionMetrics

if TYPE_CHECKING:
    from pyols.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends.
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    XtX_inv: NDArray[np.floating[Any]]
    rss: float
    tss: float
    df_residual: int


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides convenient accessors
    for all regression outputs including standard errors and t-statistics.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign'

    # Cached computations
    _standard_errors: NDArray[np.floating[Any]] | None = None
    _t_statistics: NDArray[np.floating[Any]] | None = None
    _p_values: NDArray[np.floating[Any]] | None = None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def n_features(self) -> int:
        """Number of predictors, not counting an intercept column."""
        p = self._design.p
        return p - 1 if self._design.has_intercept else p

    @property
    def r_squared(self) -> float:
        """
        1 - RSS/TSS.

        Same arithmetic as RegressionMetrics: a constant response gives NaN
        or -inf rather than a substitute value.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(1.0 - np.float64(self.rss) / np.float64(self.tss))

    @property
    def adjusted_r_squared(self) -> float:
        """R² penalized for n_features; NaN or ±inf when n == n_features + 1."""
        n = self._design.n
        k = self.n_features
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(1.0 - (1.0 - self.r_squared) * (n - 1) / np.float64(n - k - 1))

    @property
    def residual_std_error(self) -> float:
        """sqrt(RSS / df), the estimate of the error standard deviation."""
        df = self.df_residual
        if df <= 0:
            return 0.0
        return float(np.sqrt(self.rss / df))

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Standard errors of coefficients.

        Computed as SE(β) = sqrt(diag(σ² (X'X)⁻¹)), reusing the inverse
        computed during the fit. NaN when there are no residual degrees
        of freedom.
        """
        if self._standard_errors is not None:
            return self._standard_errors

        df = self.df_residual
        p = len(self.coefficients)

        if df <= 0:
            self._standard_errors = np.full(p, np.nan, dtype=np.float64)
            return self._standard_errors

        sigma_sq = self.rss / df
        variances = sigma_sq * np.diag(self._result.params.XtX_inv)
        self._standard_errors = np.sqrt(np.clip(variances, 0.0, None))
        return self._standard_errors

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for coefficients."""
        if self._t_statistics is not None:
            return self._t_statistics

        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / se
            t = np.where(np.isfinite(t), t, np.nan)
        self._t_statistics = t
        return self._t_statistics

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from the Student t distribution on df_residual."""
        if self._p_values is not None:
            return self._p_values

        df = self.df_residual
        t = self.t_statistics
        if df <= 0:
            self._p_values = np.full_like(t, np.nan)
        else:
            self._p_values = 2.0 * sp_stats.t.sf(np.abs(t), df)
        return self._p_values

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def determinant(self) -> float:
        """Determinant of X'X, a by-product of the elimination."""
        return self._result.info['determinant']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def metrics(self, *, strict: bool = False) -> RegressionMetrics:
        """In-sample fit statistics for the training data."""
        return RegressionMetrics.compute(
            self._design.y, self.fitted_values, self.n_features, strict=strict,
        )

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "Linear Regression Results",
            "=" * 72,
            f"Observations: {self._design.n}",
            f"Predictors: {self.n_features}"
            + (" (+ intercept)" if self._design.has_intercept else ""),
            f"R-squared: {self.r_squared:.6f}",
            f"Adj. R-squared: {self.adjusted_r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 72,
            f"{'':<8} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>12}",
            "-" * 72,
        ]

        for i, (coef, se, t, pv) in enumerate(zip(
            self.coefficients, self.standard_errors, self.t_statistics, self.p_values
        )):
            se_str = f"{se:12.6f}" if not np.isnan(se) else f"{'NA':>12}"
            t_str = f"{t:10.3f}" if not np.isnan(t) else f"{'NA':>10}"
            pv_str = f"{pv:12.4g}" if not np.isnan(pv) else f"{'NA':>12}"
            lines.append(f"  β[{i}]: {coef:14.6f} {se_str} {t_str} {pv_str}")

        lines.append("-" * 72)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self._design.n}, p={self._design.p}, "
            f"r_squared={self.r_squared:.4f})"
        )
