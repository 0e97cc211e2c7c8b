"""
Generic result container for pyols computations.

The Result class provides a standardized envelope that backends return.
This enables shared tooling for timing, diagnostics and reproducibility
while allowing each model to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, determinant, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library and interpreter versions that produced a result."""
    from pyols import __version__

    return {
        'pyols_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The model-specific parameter payload type

    Attributes:
        params: Model-specific parameters (coefficients, residuals, etc.)
        info: Structured metadata (method, determinant, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the software that produced the result

    Examples:
        >>> Result(
        ...     params=LinearParams(...),
        ...     info={'method': 'normal_equations'},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
