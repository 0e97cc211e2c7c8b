"""
Linear algebra kernels for pyols.

All functions follow these conventions:
    - Operands are validated before any arithmetic
    - Inputs are never modified; results are new float64 arrays
    - Errors are raised immediately with clear messages

Submodules:
    matrix_ops: transpose, products, Gauss-Jordan inversion
"""

from pyols.core.compute.linalg.matrix_ops import (
    GaussJordanResult,
    gauss_jordan,
    invert,
    multiply,
    multiply_vector,
    transpose,
)

__all__ = [
    "GaussJordanResult",
    "gauss_jordan",
    "invert",
    "multiply",
    "multiply_vector",
    "transpose",
]
