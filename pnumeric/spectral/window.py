"""
Window functions and simple signal statistics.

Symmetric windows over n = 0..N-1 (see
https://en.wikipedia.org/wiki/Window_function). A length-1 window is [1.0].
"""
import numpy as np

from ..core.vector import Vector, _as_array
from ..errors import ShapeError


def _check_length(N):
    if isinstance(N, bool) or int(N) != N or N < 1:
        raise ValueError(f"window length must be a positive integer, got {N!r}")
    return int(N)


def _cosine_window(N, a0, a1):
    """w[n] = a0 - a1 * cos(2*pi*n / (N-1))."""
    N = _check_length(N)
    if N == 1:
        return Vector([1.0])
    n = np.arange(N)
    return Vector(a0 - a1 * np.cos(2.0 * np.pi * n / (N - 1)))


def rect(N):
    """Rectangular window: N ones."""
    return Vector(np.ones(_check_length(N)))


def hann(N):
    """Hann window, zero at both ends for N > 1."""
    return _cosine_window(N, 0.5, 0.5)


def hamming(N):
    """Hamming window, 0.08 at both ends for N > 1."""
    return _cosine_window(N, 0.54, 0.46)


hanning = hann


def mean(v):
    """Arithmetic mean of the elements of v."""
    x = _as_array(v)
    if x.shape[0] == 0:
        raise ShapeError("mean of an empty vector is undefined")
    return float(np.mean(x))


def rms(v):
    """
    Root mean square, sqrt(mean(v[i]**2)).

    For a densely sampled full-period sine this is close to 1/sqrt(2).
    """
    x = _as_array(v)
    if x.shape[0] == 0:
        raise ShapeError("rms of an empty vector is undefined")
    return float(np.sqrt(np.mean(x * x)))
