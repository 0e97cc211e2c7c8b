"""
Dense matrix primitives used by the normal-equation solver.

Every function validates its operands before computing and returns a fresh
array; inputs are never modified. Inversion is done by Gauss-Jordan
elimination with partial pivoting rather than LAPACK so that singularity is
decided by one explicit, documented tolerance.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.compute.tolerances import SINGULAR_PIVOT_TOLERANCE
from pyols.core.exceptions import DimensionError, NotSquareError, SingularMatrixError
from pyols.core.validation import check_1d, check_2d, check_array, check_non_empty


@dataclass(frozen=True)
class GaussJordanResult:
    """
    Result of Gauss-Jordan inversion.

    Attributes:
        inverse: Inverse matrix (N x N)
        determinant: Determinant of the input, from the pivots and row swaps
        n_swaps: Number of row interchanges performed by partial pivoting
        min_abs_pivot: Smallest pivot magnitude met during elimination
    """
    inverse: NDArray[np.floating[Any]]
    determinant: float
    n_swaps: int
    min_abs_pivot: float


def _as_matrix(M: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    A = check_array(M, name)
    check_non_empty(A, name)
    check_2d(A, name)
    return A


def transpose(M: ArrayLike, *, name: str = 'M') -> NDArray[np.floating[Any]]:
    """
    Transpose a matrix: B[j, i] = M[i, j].

    Args:
        M: Matrix (r x c)
        name: Parameter name for error messages

    Returns:
        New matrix (c x r)

    Raises:
        ValidationError: If M is missing, empty, ragged or not 2D
    """
    A = _as_matrix(M, name)
    return A.T.copy()


def multiply(
    A: ArrayLike,
    B: ArrayLike,
    *,
    names: tuple[str, str] = ('A', 'B'),
) -> NDArray[np.floating[Any]]:
    """
    Dense matrix product C = A B.

    Args:
        A: Left operand (r x k)
        B: Right operand (k x c)
        names: Parameter names for error messages

    Returns:
        Product matrix (r x c)

    Raises:
        ValidationError: If either operand is missing, empty or not 2D
        DimensionError: If columns(A) != rows(B)
    """
    left = _as_matrix(A, names[0])
    right = _as_matrix(B, names[1])

    if left.shape[1] != right.shape[0]:
        raise DimensionError(
            f"Incompatible matrix dimensions: {names[0]} is {left.shape[0]}x{left.shape[1]}, "
            f"{names[1]} is {right.shape[0]}x{right.shape[1]} "
            f"(columns of {names[0]} must equal rows of {names[1]})"
        )

    return left @ right


def multiply_vector(
    A: ArrayLike,
    v: ArrayLike,
    *,
    names: tuple[str, str] = ('A', 'v'),
) -> NDArray[np.floating[Any]]:
    """
    Matrix-vector product w = A v.

    Args:
        A: Matrix (r x k)
        v: Vector (k,)
        names: Parameter names for error messages

    Returns:
        Vector (r,)

    Raises:
        ValidationError: If A or v is missing or empty
        DimensionError: If v is not 1D or columns(A) != len(v)
    """
    matrix = _as_matrix(A, names[0])
    vector = check_array(v, names[1])
    check_non_empty(vector, names[1])
    check_1d(vector, names[1])

    if matrix.shape[1] != vector.shape[0]:
        raise DimensionError(
            f"Lengths of matrix and vector differ: {names[0]} has {matrix.shape[1]} columns, "
            f"{names[1]} has length {vector.shape[0]}"
        )

    return matrix @ vector


def gauss_jordan(
    M: ArrayLike,
    *,
    tol: float = SINGULAR_PIVOT_TOLERANCE,
    name: str = 'M',
) -> GaussJordanResult:
    """
    Invert a square matrix by Gauss-Jordan elimination with partial pivoting.

    Algorithm:
        1. Build the augmented matrix [M | I] (N x 2N)
        2. For each column i:
           a. Pick the row in [i, N) with the largest |value| in column i
              (first occurrence wins ties) and swap it into row i
           b. If that pivot's magnitude is below tol, M is singular
           c. Scale row i so the diagonal entry is exactly 1
           d. Subtract multiples of row i from every other row to zero column i
        3. The right half of the reduced matrix is M⁻¹

    Args:
        M: Square matrix (N x N)
        tol: Pivot magnitude below which M is declared singular
        name: Matrix name used in error messages and diagnostics

    Returns:
        GaussJordanResult with the inverse and elimination diagnostics

    Raises:
        ValidationError: If M is missing or non-numeric
        NotSquareError: If M is empty, not 2D, or not square
        SingularMatrixError: If a pivot falls below tol
    """
    A = check_array(M, name)
    if A.ndim != 2 or A.size == 0 or A.shape[0] != A.shape[1]:
        raise NotSquareError(
            f"{name}: matrix must be square and non-empty to be invertible, got shape {A.shape}",
            shape=A.shape,
        )

    n = A.shape[0]
    augmented = np.hstack([A, np.eye(n)])

    determinant = 1.0
    n_swaps = 0
    min_abs_pivot = np.inf

    for i in range(n):
        # argmax returns the first maximal entry, so ties keep the upper row
        pivot_row = i + int(np.argmax(np.abs(augmented[i:, i])))
        if pivot_row != i:
            augmented[[i, pivot_row]] = augmented[[pivot_row, i]]
            n_swaps += 1

        pivot = augmented[i, i]
        # written so that a NaN pivot also fails
        if not abs(pivot) >= tol:
            raise SingularMatrixError(
                f"{name} is singular and cannot be inverted: "
                f"pivot {abs(pivot):.3e} in column {i} is below tolerance {tol:.1e}",
                matrix_name=name,
                pivot_index=i,
                pivot_value=float(pivot),
                tolerance=tol,
                expected_rank=n,
            )

        determinant *= pivot
        min_abs_pivot = min(min_abs_pivot, abs(pivot))

        augmented[i] /= pivot

        factors = augmented[:, i].copy()
        factors[i] = 0.0
        augmented -= np.outer(factors, augmented[i])

    if n_swaps % 2:
        determinant = -determinant

    return GaussJordanResult(
        inverse=augmented[:, n:].copy(),
        determinant=float(determinant),
        n_swaps=n_swaps,
        min_abs_pivot=float(min_abs_pivot),
    )


def invert(
    M: ArrayLike,
    *,
    tol: float = SINGULAR_PIVOT_TOLERANCE,
    name: str = 'M',
) -> NDArray[np.floating[Any]]:
    """
    Inverse of a square matrix.

    Thin wrapper over gauss_jordan() for callers that need only the inverse.
    """
    return gauss_jordan(M, tol=tol, name=name).inverse
