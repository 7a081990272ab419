"""Root conftest.py - Shared pytest fixtures for all tests."""

import matplotlib
import numpy as np
import pytest

matplotlib.use('Agg')

from pnumeric import Matrix, Vector, eye


@pytest.fixture
def rng():
    """Seeded random number generator for reproducibility."""
    return np.random.default_rng(42)


@pytest.fixture
def a3():
    """3x3 matrix whose inverse has integer entries."""
    return Matrix([[.2, .4, .2], [-.2, .2, .0], [.2, .2, -.2]])


@pytest.fixture
def constant_model():
    """Identity dynamics observing a 2D constant directly."""
    n_x = 2
    return {
        'F': eye(n_x),
        'Q': 1e-4 * eye(n_x),
        'H': eye(n_x),
        'R': 0.1 * eye(n_x),
        'truth': Vector([1.5, -0.5]),
    }


@pytest.fixture
def kf_system():
    """Constant-velocity system observing position only."""
    F = Matrix([[1.0, 0.1], [0.0, 1.0]])
    Q = Matrix([[1e-3, 0.0], [0.0, 1e-2]])
    H = Matrix([[1.0, 0.0]])
    R = Matrix([[0.05]])
    return F, Q, H, R


@pytest.fixture
def check_psd():
    """Return a predicate testing positive semi-definiteness of a Matrix."""
    def _check(matrix, tol=1e-10):
        return bool(np.all(np.linalg.eigvalsh(np.asarray(matrix)) >= -tol))
    return _check
