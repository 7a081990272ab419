"""
Numeric configuration defaults.

Tolerances are passed explicitly (``eps=`` keywords) to the containers and
the solver; the constants below are only their defaults.
"""
import math

# Absolute tolerance for Vector/Matrix equality
EPS = 1e-8

# Pivots smaller than this are treated as zero by the Gauss-Jordan solver
PIVOT_EPS = 1e-8

# Gain solvers accepted by KalmanFilter(solver=...)
SOLVERS = ('gauss-jordan', 'cholesky', 'lu')


def validate_eps(eps):
    """Return ``eps`` as a float, rejecting non-positive or non-finite values."""
    eps = float(eps)
    if not math.isfinite(eps) or eps <= 0.0:
        raise ValueError(f"tolerance must be a positive finite number, got {eps!r}")
    return eps
