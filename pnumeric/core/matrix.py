"""
Two-dimensional float container.

A Matrix stores its rows in one float64 ndarray. ``m[i]`` returns a Vector
viewing row i, so writes through the row (``m[1][2] = 33``) land in ``m``.
"""
import numbers

import numpy as np

from ..config import EPS, PIVOT_EPS, validate_eps
from ..errors import ShapeError
from ..linalg.gauss_jordan import gauss_determinant, gauss_jordan_inverse
from .compare import abs_equal, format_number, is_scalar
from .vector import Vector, _as_array


def _as_array2d(rows):
    """Coerce a Matrix or a sequence of row sequences to a 2-D float64 array (copy)."""
    if isinstance(rows, Matrix):
        return rows._data.copy()
    converted = [_as_array(row) for row in rows]
    if not converted:
        return np.zeros((0, 0))
    width = converted[0].shape[0]
    for i, row in enumerate(converted):
        if row.shape[0] != width:
            raise ShapeError(
                f"row {i} has length {row.shape[0]}, expected {width}"
            )
    return np.vstack(converted)


def _row_index(key):
    """Validate a single-row key; lists, arrays and bools are rejected."""
    if isinstance(key, bool) or not isinstance(key, numbers.Integral):
        raise TypeError(f"row index must be an integer, got {type(key).__name__}")
    return int(key)


class Matrix:
    """
    Rectangular grid of floats with epsilon equality.

    Parameters
    ----------
    rows : iterable of iterables of numbers
        Row data; all rows must have the same length
    eps : float
        Absolute tolerance used by ``==`` (default: config.EPS)

    Notes
    -----
    ``*`` is the matrix product for Matrix operands, the matrix-vector
    product for Vector operands, and element scaling for scalars.
    """

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, rows=(), eps=EPS):
        self._data = _as_array2d(rows)
        self._eps = validate_eps(eps)

    @classmethod
    def _wrap(cls, data, eps):
        mat = cls.__new__(cls)
        mat._data = data
        mat._eps = eps
        return mat

    def _new(self, data):
        return Matrix._wrap(np.asarray(data, dtype=np.float64), self._eps)

    # Shape

    @property
    def shape(self):
        """(rows, cols)."""
        return self._data.shape

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def eps(self) -> float:
        return self._eps

    @property
    def T(self):
        """Transposed copy."""
        return self._new(self._data.T.copy())

    # Container protocol

    def __len__(self):
        return self._data.shape[0]

    def __iter__(self):
        for i in range(self.rows):
            yield self[i]

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return float(self._data[key])
        if isinstance(key, slice):
            return self._new(self._data[key].copy())
        return Vector._wrap(self._data[_row_index(key)], self._eps)

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            if not is_scalar(value):
                raise TypeError(f"Matrix elements must be real numbers, got {type(value).__name__}")
            self._data[key] = float(value)
            return
        row = _as_array(value)
        if row.shape[0] != self.cols:
            raise ShapeError(f"row of length {row.shape[0]} does not fit {self.cols} columns")
        self._data[_row_index(key)] = row

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)

    def tolist(self):
        return [[float(v) for v in row] for row in self._data]

    def copy(self):
        return self._new(self._data.copy())

    def _assign(self, other):
        """Overwrite every element in place with the elements of ``other``."""
        data = _as_array2d(other)
        if data.shape != self._data.shape:
            raise ShapeError(f"cannot assign shape {data.shape} to shape {self.shape}")
        self._data[...] = data

    def __repr__(self):
        rows = ', '.join(
            '[' + ', '.join(format_number(v) for v in row) + ']' for row in self._data
        )
        return f'Matrix([{rows}])'

    # Comparison

    def equals(self, other, eps=None):
        """Epsilon equality with an explicit tolerance (default: this Matrix's eps)."""
        eps = self._eps if eps is None else validate_eps(eps)
        if not isinstance(other, Matrix):
            other = Matrix(other)
        return abs_equal(self._data, other._data, eps)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return abs_equal(self._data, other._data, self._eps)

    def __ne__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return not abs_equal(self._data, other._data, self._eps)

    # Arithmetic

    def _check_same_shape(self, other, op):
        if self.shape != other.shape:
            raise ShapeError(f"cannot {op} matrices of shape {self.shape} and {other.shape}")

    def __add__(self, other):
        if is_scalar(other):
            return self._new(self._data + float(other))
        if isinstance(other, Matrix):
            self._check_same_shape(other, 'add')
            return self._new(self._data + other._data)
        return NotImplemented

    def __radd__(self, other):
        if is_scalar(other):
            return self._new(float(other) + self._data)
        return NotImplemented

    def __sub__(self, other):
        if is_scalar(other):
            return self._new(self._data - float(other))
        if isinstance(other, Matrix):
            self._check_same_shape(other, 'subtract')
            return self._new(self._data - other._data)
        return NotImplemented

    def __rsub__(self, other):
        if is_scalar(other):
            return -(self - other)
        return NotImplemented

    def __mul__(self, other):
        if is_scalar(other):
            return self._new(self._data * float(other))
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise ShapeError(
                    f"cannot multiply {self.shape} by {other.shape}: inner dimensions differ"
                )
            return self._new(self._data @ other._data)
        if isinstance(other, Vector):
            if self.cols != len(other):
                raise ShapeError(
                    f"cannot multiply {self.shape} matrix by vector of length {len(other)}"
                )
            return Vector._wrap(self._data @ other._data, self._eps)
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return self._new(float(other) * self._data)
        return NotImplemented

    def __neg__(self):
        return self._new(-self._data)

    def __abs__(self):
        return self._new(np.abs(self._data))

    # Linear algebra

    def inv(self, eps=PIVOT_EPS):
        """
        Inverse by Gauss-Jordan elimination with partial pivoting.

        Raises
        ------
        ShapeError
            If the matrix is not square
        SingularMatrixError
            If a column has no pivot with magnitude >= eps
        """
        return self._new(gauss_jordan_inverse(self._data, eps))

    def det(self, eps=PIVOT_EPS) -> float:
        """Determinant; 0.0 for (numerically) singular matrices."""
        return gauss_determinant(self._data, eps)

    def trace(self) -> float:
        if self.rows != self.cols:
            raise ShapeError(f"trace requires a square matrix, got shape {self.shape}")
        return float(np.trace(self._data))


def zeros(rows, cols=None, eps=EPS):
    """rows x cols Matrix of zeros (square when cols is omitted)."""
    cols = rows if cols is None else cols
    return Matrix._wrap(np.zeros((int(rows), int(cols))), validate_eps(eps))


def ones(rows, cols=None, eps=EPS):
    """rows x cols Matrix of ones (square when cols is omitted)."""
    cols = rows if cols is None else cols
    return Matrix._wrap(np.ones((int(rows), int(cols))), validate_eps(eps))


def eye(n, eps=EPS):
    """n x n identity Matrix."""
    return Matrix._wrap(np.eye(int(n)), validate_eps(eps))
