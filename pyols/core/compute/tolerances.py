"""
Numerical tolerances for pyols.

SINGULAR_PIVOT_TOLERANCE is the one tolerance the engine itself applies:
Gauss-Jordan elimination declares a matrix singular when the best available
pivot in a column has magnitude below it.

The ToleranceTier constants name the comparison tolerances used by the test
suite when checking computed results against exact answers.
"""

from dataclasses import dataclass


# Pivot magnitude below which a matrix is treated as singular.
SINGULAR_PIVOT_TOLERANCE = 1e-10


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute and relative tolerance for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Pure index permutations (transpose) introduce no rounding at all
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise equality; no arithmetic performed',
)

# Round trips through the Gauss-Jordan inverse on well-conditioned input
INVERSION = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='inversion',
    description='M @ inv(M) vs I, inv(inv(M)) vs M',
)

# Normal-equation recovery of known coefficients from noise-free data
RECOVERY = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='recovery',
    description='Fitted coefficients vs generating coefficients',
)
