"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Literal
import warnings

from numpy.typing import ArrayLike

from pyols.core.compute.tolerances import SINGULAR_PIVOT_TOLERANCE
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import LinearSolution
from pyols.regression.backends.cpu import CPUNormalEquationBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_gauss_jordan']


def fit(
    X: ArrayLike,
    y: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
    tol: float = SINGULAR_PIVOT_TOLERANCE,
) -> LinearSolution:
    """
    Fit a linear regression model.

    Solves the ordinary least squares problem through the normal equations:
        β = (X'X)⁻¹ X'y

    Column 0 of X is used as-is; prepend a column of ones (add_intercept)
    if the model should have an intercept.

    Args:
        X: Design matrix (n x p). Can be any array-like.
        y: Response vector (n,). Can be any array-like.
        backend: Computational backend to use:
            - 'auto': Best available (currently the CPU Gauss-Jordan backend)
            - 'cpu' / 'cpu_gauss_jordan': Normal equations with Gauss-Jordan inversion
        tol: Pivot magnitude below which X'X is declared singular

    Returns:
        LinearSolution with coefficients, diagnostics, and summary methods

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If X and y have inconsistent dimensions
        SingularMatrixError: If X'X is not invertible

    Example:
        >>> import numpy as np
        >>> from pyols.regression import fit, add_intercept
        >>>
        >>> X = add_intercept(np.random.randn(100, 2))
        >>> y = X @ [1, 2, 3] + np.random.randn(100) * 0.1
        >>>
        >>> result = fit(X, y)
        >>> print(result.coefficients)
        >>> print(result.summary())
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    design = RegressionDesign.build(X, y)

    # === Select Backend ===
    backend_impl = _get_backend(backend, tol)

    # === Solve ===
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    return LinearSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice, tol: float) -> CPUNormalEquationBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_gauss_jordan'):
        return CPUNormalEquationBackend(tol=tol)

    raise ValueError(f"Unknown backend: {choice!r}")
