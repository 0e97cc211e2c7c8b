"""
Shared compute infrastructure for pyols.

IMPORTANT: This is NOT where model-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance constants
    linalg: Dense matrix kernels (transpose, products, inversion)
"""

from pyols.core.compute.timing import Timer, timed
from pyols.core.compute.tolerances import SINGULAR_PIVOT_TOLERANCE, ToleranceTier

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "SINGULAR_PIVOT_TOLERANCE",
    "ToleranceTier",
]
