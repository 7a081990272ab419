"""Vector and Matrix containers."""
from .vector import Vector, vrange
from .matrix import Matrix, zeros, ones, eye

__all__ = [
    'Vector',
    'vrange',
    'Matrix',
    'zeros',
    'ones',
    'eye',
]
