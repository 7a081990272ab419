"""State Space Model simulators."""
from .linear_gaussian import linear_gaussian_ssm

__all__ = [
    'linear_gaussian_ssm',
]
