"""
One-dimensional float container.

A Vector owns (or, for matrix rows, views) a contiguous float64 numpy array.
Every element read returns a Python float and every slice returns a new
Vector holding copies, so integer-typed values never leak out.
"""
import logging
import math
from typing import Optional

import numpy as np

from ..config import EPS, validate_eps
from ..errors import ShapeError
from .compare import abs_equal, format_number, is_scalar

logger = logging.getLogger(__name__)


def _as_array(values):
    """Coerce a Vector or a sequence of numbers to a 1-D float64 array (copy)."""
    if isinstance(values, Vector):
        return values._data.copy()
    if not isinstance(values, (list, tuple, np.ndarray)):
        values = list(values)
    data = np.array(values, dtype=np.float64)
    if data.ndim != 1:
        raise ShapeError(f"Vector needs a flat sequence of numbers, got ndim={data.ndim}")
    return data


class Vector:
    """
    Fixed-length sequence of floats with epsilon equality.

    Parameters
    ----------
    values : iterable of numbers
        Elements, coerced to float
    eps : float
        Absolute tolerance used by ``==`` (default: config.EPS)

    Notes
    -----
    ``+``/``-`` need equal lengths or a scalar operand. ``*`` also accepts a
    length-1 Vector on either side, which is broadcast as a scalar.
    """

    # numpy operands defer to our reflected operators instead of iterating us
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, values=(), eps=EPS):
        self._data = _as_array(values)
        self._eps = validate_eps(eps)

    @classmethod
    def _wrap(cls, data, eps):
        """Build a Vector around ``data`` without copying (used for row views)."""
        vec = cls.__new__(cls)
        vec._data = data
        vec._eps = eps
        return vec

    def _new(self, data):
        return Vector._wrap(np.asarray(data, dtype=np.float64), self._eps)

    # Container protocol

    @property
    def shape(self) -> int:
        """Number of elements."""
        return self._data.shape[0]

    @property
    def eps(self) -> float:
        return self._eps

    def __len__(self):
        return self._data.shape[0]

    def __iter__(self):
        for value in self._data:
            yield float(value)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._new(self._data[key].copy())
        return float(self._data[key])

    def __setitem__(self, key, value):
        if isinstance(key, slice):
            target = self._data[key]
            if is_scalar(value):
                self._data[key] = float(value)
                return
            values = _as_array(value)
            if values.shape != target.shape:
                raise ShapeError(
                    f"cannot assign {values.shape[0]} values to a slice of length {target.shape[0]}"
                )
            self._data[key] = values
            return
        if not is_scalar(value):
            raise TypeError(f"Vector elements must be real numbers, got {type(value).__name__}")
        self._data[key] = float(value)

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)

    def tolist(self):
        return [float(v) for v in self._data]

    def copy(self):
        return self._new(self._data.copy())

    def _assign(self, other):
        """Overwrite every element in place with the elements of ``other``."""
        data = _as_array(other)
        if data.shape != self._data.shape:
            raise ShapeError(f"cannot assign length {data.shape[0]} to length {len(self)}")
        self._data[...] = data

    def __repr__(self):
        return 'Vector([' + ', '.join(format_number(v) for v in self._data) + '])'

    # Comparison

    def equals(self, other, eps=None):
        """Epsilon equality with an explicit tolerance (default: this Vector's eps)."""
        eps = self._eps if eps is None else validate_eps(eps)
        if not isinstance(other, Vector):
            other = Vector(other)
        return abs_equal(self._data, other._data, eps)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return abs_equal(self._data, other._data, self._eps)

    def __ne__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return not abs_equal(self._data, other._data, self._eps)

    # Arithmetic

    def _check_same_length(self, other, op):
        if len(self) != len(other):
            raise ShapeError(f"cannot {op} vectors of length {len(self)} and {len(other)}")

    def __add__(self, other):
        if is_scalar(other):
            return self._new(self._data + float(other))
        if isinstance(other, Vector):
            self._check_same_length(other, 'add')
            return self._new(self._data + other._data)
        return NotImplemented

    def __radd__(self, other):
        if is_scalar(other):
            return self._new(float(other) + self._data)
        return NotImplemented

    def __sub__(self, other):
        if is_scalar(other):
            return self._new(self._data - float(other))
        if isinstance(other, Vector):
            self._check_same_length(other, 'subtract')
            return self._new(self._data - other._data)
        return NotImplemented

    def __rsub__(self, other):
        # s - v == -(v - s)
        if is_scalar(other):
            return -(self - other)
        return NotImplemented

    def __mul__(self, other):
        if is_scalar(other):
            return self._new(self._data * float(other))
        if isinstance(other, Vector):
            n, m = len(self), len(other)
            if n != m and n != 1 and m != 1:
                raise ValueError(f"cannot multiply vectors of length {n} and {m}")
            # numpy broadcasts the length-1 operand as a scalar
            return self._new(self._data * other._data)
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return self._new(float(other) * self._data)
        return NotImplemented

    def __neg__(self):
        return self._new(-self._data)

    def __abs__(self):
        return self._new(np.abs(self._data))


def vrange(start, stop=None, step=1) -> Optional[Vector]:
    """
    Arithmetic sequence as a Vector.

    Works like ``range`` with float arguments: a single argument is ``stop``
    and ``start`` defaults to 0. Values are produced by repeated addition of
    ``step`` and the exclusive ``stop`` test is applied to the accumulated
    value, so rounding decides boundary cases exactly as summation does
    (``vrange(0.5, 1.1, 0.1)`` ends at 1.0999999999999999).

    Returns
    -------
    Vector or None
        None when the sequence is empty.

    Raises
    ------
    ValueError
        If an argument is not finite, step is zero, or adding step leaves
        the accumulated value unchanged before stop is reached
    """
    if stop is None:
        start, stop = 0.0, start
    start, stop, step = float(start), float(stop), float(step)
    if not (math.isfinite(start) and math.isfinite(stop) and math.isfinite(step)):
        raise ValueError("vrange() arguments must be finite")
    if step == 0.0:
        raise ValueError("vrange() step must not be zero")

    values = []
    value = start
    ascending = step > 0
    while (value < stop) if ascending else (value > stop):
        values.append(value)
        nxt = value + step
        if nxt == value:
            raise ValueError(
                f"vrange() step {step!r} is below the float resolution at {value!r}"
            )
        value = nxt

    if not values:
        logger.debug("vrange(%g, %g, %g) is empty", start, stop, step)
        return None
    return Vector(values)
