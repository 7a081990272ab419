"""Exception types raised by pnumeric."""
import numpy as np


class ShapeError(ValueError):
    """Operand dimensions or lengths do not match."""


class SingularMatrixError(np.linalg.LinAlgError):
    """No usable pivot was found while inverting a matrix."""


class UnsupportedLengthError(ValueError):
    """The transform cannot process an input of this length."""
