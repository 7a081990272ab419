"""Dense linear solvers operating on float ndarrays."""
from .gauss_jordan import gauss_jordan_inverse, gauss_determinant

__all__ = [
    'gauss_jordan_inverse',
    'gauss_determinant',
]
