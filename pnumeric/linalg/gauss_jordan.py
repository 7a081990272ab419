"""
Gauss-Jordan matrix inversion with partial pivoting.

Works on plain float64 ndarrays so that the Matrix container can call it
without an import cycle; Matrix.inv() and Matrix.det() wrap the results.
"""
import logging

import numpy as np

from ..config import PIVOT_EPS
from ..errors import ShapeError, SingularMatrixError

logger = logging.getLogger(__name__)


def _check_square(A, name):
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ShapeError(f"{name} requires a square matrix, got shape {A.shape}")


def _pivot_row(aug, col):
    """Row index (>= col) holding the largest |value| in ``col``."""
    return col + int(np.argmax(np.abs(aug[col:, col])))


def gauss_jordan_inverse(A, eps=PIVOT_EPS):
    """
    Invert a square matrix by row-reducing [A | I] to [I | A^{-1}].

    Parameters
    ----------
    A : ndarray [n, n]
        Matrix to invert (not modified)
    eps : float
        Pivots with magnitude below eps are treated as zero

    Returns
    -------
    ndarray [n, n]
        Inverse of A

    Raises
    ------
    ShapeError
        If A is not square
    SingularMatrixError
        If no pivot of magnitude >= eps exists for some column
    """
    A = np.asarray(A, dtype=np.float64)
    _check_square(A, "inversion")
    n = A.shape[0]

    aug = np.hstack([A, np.eye(n)])

    for col in range(n):
        # Partial pivoting: bring the largest remaining entry to the diagonal
        p = _pivot_row(aug, col)
        pivot = aug[p, col]
        if abs(pivot) < eps:
            logger.debug("singular pivot %g in column %d", pivot, col)
            raise SingularMatrixError(
                f"matrix is singular: no pivot >= {eps:g} in column {col}"
            )
        if p != col:
            logger.debug("swap rows %d and %d", col, p)
            aug[[col, p]] = aug[[p, col]]

        aug[col] /= aug[col, col]

        # Eliminate the column from every other row
        factors = aug[:, col].copy()
        factors[col] = 0.0
        aug -= np.outer(factors, aug[col])

    return aug[:, n:].copy()


def gauss_determinant(A, eps=PIVOT_EPS):
    """
    Determinant by Gaussian elimination with partial pivoting.

    Returns 0.0 when a column has no pivot of magnitude >= eps.
    """
    U = np.array(A, dtype=np.float64)
    _check_square(U, "determinant")
    n = U.shape[0]
    det = 1.0

    for col in range(n):
        p = _pivot_row(U, col)
        if abs(U[p, col]) < eps:
            return 0.0
        if p != col:
            U[[col, p]] = U[[p, col]]
            det = -det
        det *= U[col, col]
        below = U[col + 1:, col] / U[col, col]
        U[col + 1:] -= np.outer(below, U[col])

    return float(det)
