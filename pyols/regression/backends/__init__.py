"""
Regression backends.

Available backends:
    CPUNormalEquationBackend: normal equations with Gauss-Jordan inversion
"""

from pyols.regression.backends.cpu import CPUNormalEquationBackend

__all__ = [
    "CPUNormalEquationBackend",
]
