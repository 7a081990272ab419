"""
Discrete Fourier transform of real Vectors.

Output convention: X[k] = sum_n x[n] * exp(-2j*pi*k*n/N), unnormalised, one
complex128 sample per input sample (same as numpy.fft.fft). Power-of-two
lengths use radix-2 decimation in time; other lengths fall back to the
direct O(N^2) sum.
"""
import logging

import numpy as np

from ..core.vector import Vector, _as_array
from ..errors import UnsupportedLengthError

logger = logging.getLogger(__name__)


def _is_power_of_two(n):
    return n > 0 and (n & (n - 1)) == 0


def _bit_reverse_indices(n):
    """Permutation taking index i to its log2(n)-bit reversal."""
    bits = n.bit_length() - 1
    idx = np.arange(n)
    rev = np.zeros(n, dtype=np.intp)
    for _ in range(bits):
        rev = (rev << 1) | (idx & 1)
        idx = idx >> 1
    return rev


def _radix2_fft(x):
    """Iterative Cooley-Tukey; len(x) must be a power of two."""
    n = x.shape[0]
    X = x[_bit_reverse_indices(n)].astype(np.complex128)

    half = 1
    while half < n:
        size = 2 * half
        twiddle = np.exp(-2j * np.pi * np.arange(half) / size)
        # Each row is one butterfly group; reshape is a view into X
        blocks = X.reshape(-1, size)
        even = blocks[:, :half].copy()
        odd = blocks[:, half:] * twiddle
        blocks[:, :half] = even + odd
        blocks[:, half:] = even - odd
        half = size

    return X


def _direct_dft(x):
    n = x.shape[0]
    k = np.arange(n)
    W = np.exp(-2j * np.pi * np.outer(k, k) / n)
    return W @ x.astype(np.complex128)


def fft(v):
    """
    Discrete Fourier transform of a real-valued Vector.

    Parameters
    ----------
    v : Vector or sequence of numbers
        Time-domain samples (not modified)

    Returns
    -------
    ndarray [N] complex128
        Frequency-domain samples. For real input X[N-k] == conj(X[k]); use
        X[:N // 2] for a one-sided spectrum.

    Raises
    ------
    UnsupportedLengthError
        If v is empty
    """
    x = _as_array(v)
    n = x.shape[0]
    if n == 0:
        raise UnsupportedLengthError("fft() needs at least one sample")

    if _is_power_of_two(n):
        logger.debug("fft: radix-2 transform, N=%d", n)
        return _radix2_fft(x)

    logger.debug("fft: N=%d is not a power of two, using direct DFT", n)
    return _direct_dft(x)


def magnitude(spectrum):
    """Vector of |X[k]| for a complex spectrum."""
    return Vector(np.abs(np.asarray(spectrum)))
