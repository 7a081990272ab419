"""Shared helpers for container arithmetic: scalar detection and epsilon comparison."""
import numbers

import numpy as np


def is_scalar(value):
    """True for real numbers (Python and numpy), False for containers."""
    return isinstance(value, numbers.Real)


def abs_equal(a, b, eps):
    """
    Epsilon equality of two float arrays.

    Parameters
    ----------
    a, b : ndarray
        Arrays to compare
    eps : float
        Absolute per-element tolerance

    Returns
    -------
    bool
        True if shapes match and every |a - b| < eps. NaN never compares equal.
    """
    if a.shape != b.shape:
        return False
    if a.size == 0:
        return True
    return bool(np.all(np.abs(a - b) < eps))


def format_number(value):
    """Format a float the way ``%g`` does."""
    return '%g' % value
