"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned_matrix(rng):
    """Diagonally dominant 5x5 matrix, comfortably invertible."""
    return rng.standard_normal((5, 5)) + 5.0 * np.eye(5)


@pytest.fixture
def exact_regression_data(rng):
    """Noise-free data with an intercept column and known coefficients."""
    n = 50
    X = np.column_stack([np.ones(n), rng.standard_normal((n, 3))])
    beta_true = np.array([1.5, -2.0, 0.5, 3.0])
    y = X @ beta_true
    return X, y, beta_true


@pytest.fixture
def noisy_regression_data(rng):
    """Intercept design with Gaussian noise, for inference diagnostics."""
    n = 100
    X = np.column_stack([np.ones(n), rng.standard_normal((n, 2))])
    beta_true = np.array([1.0, 2.0, -0.5])
    y = X @ beta_true + rng.standard_normal(n) * 0.1
    return X, y, beta_true


@pytest.fixture
def collinear_data(rng):
    """Dataset with perfect collinearity (X'X is singular)."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1 + x2  # Perfect collinearity
    X = np.column_stack([np.ones(n), x1, x2, x3])
    y = rng.standard_normal(n)
    return X, y
