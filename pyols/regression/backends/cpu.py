"""
CPU backend for linear regression.

Solves ordinary least squares through the normal equations using the
package's own dense kernels, with (X'X)⁻¹ obtained by Gauss-Jordan
elimination.
"""

from typing import Any
import numpy as np

from pyols.core.result import Result
from pyols.core.compute.timing import Timer
from pyols.core.compute.tolerances import SINGULAR_PIVOT_TOLERANCE
from pyols.core.compute.linalg import gauss_jordan, multiply, multiply_vector, transpose
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import LinearParams


class CPUNormalEquationBackend:
    """
    CPU backend using the normal equations.

    Implements the Backend protocol for RegressionDesign -> LinearParams.
    """

    def __init__(self, tol: float = SINGULAR_PIVOT_TOLERANCE):
        """
        Args:
            tol: Pivot magnitude below which X'X is declared singular
        """
        self._tol = tol

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve OLS via the normal equations.

        Algorithm:
            1. X' = transpose(X)
            2. X'X = X' X
            3. (X'X)⁻¹ by Gauss-Jordan elimination
            4. H = (X'X)⁻¹ X'
            5. β = H y
            6. Compute residuals, fitted values, and diagnostics

        Args:
            design: Validated regression design

        Returns:
            Result containing LinearParams

        Raises:
            SingularMatrixError: If X'X is not invertible (collinear columns,
                or more columns than observations)
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y
        n, p = design.n, design.p
        warnings: list[str] = []

        # === Normal Equations ===
        with timer.section('gram'):
            Xt = transpose(X, name='X')
            XtX = multiply(Xt, X, names=("X'", 'X'))

        with timer.section('invert'):
            inversion = gauss_jordan(XtX, tol=self._tol, name="X'X")

        with timer.section('coefficients'):
            hat = multiply(inversion.inverse, Xt, names=("(X'X)⁻¹", "X'"))
            coefficients = multiply_vector(hat, y, names=("(X'X)⁻¹X'", 'y'))

        # === Compute Residuals and Fitted Values ===
        with timer.section('residuals'):
            fitted_values = multiply_vector(X, coefficients, names=('X', 'β'))
            residuals = y - fitted_values

        # === Compute Summary Statistics ===
        with timer.section('statistics'):
            rss = float(residuals @ residuals)
            y_mean = np.mean(y)
            tss = float(np.sum((y - y_mean) ** 2))

        timer.stop()

        df_residual = n - p
        if df_residual == 0:
            warnings.append(
                f"Saturated fit: {n} observations for {p} coefficients leaves "
                f"no residual degrees of freedom"
            )

        params = LinearParams(
            coefficients=coefficients,
            residuals=residuals,
            fitted_values=fitted_values,
            XtX_inv=inversion.inverse,
            rss=rss,
            tss=tss,
            df_residual=df_residual,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'determinant': inversion.determinant,
            'row_swaps': inversion.n_swaps,
            'min_abs_pivot': inversion.min_abs_pivot,
            'tolerance': self._tol,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
