"""
pnumeric: light matrix manipulation package with a Kalman filter.

This package contains implementations of:
- Vector and Matrix containers with epsilon equality
- Gauss-Jordan matrix inversion
- Fast Fourier transform, window functions and RMS
- Discrete-time linear Kalman filter
"""
import logging

from .config import EPS, PIVOT_EPS
from .errors import ShapeError, SingularMatrixError, UnsupportedLengthError
from .core import Vector, vrange, Matrix, zeros, ones, eye
from .spectral import fft, magnitude, rect, hann, hanning, hamming, mean, rms
from .filters import KalmanFilter, kalman_filter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '1.0.0'

__all__ = [
    # containers
    'Vector',
    'Matrix',
    'vrange',
    'zeros',
    'ones',
    'eye',
    # spectral
    'fft',
    'magnitude',
    'rect',
    'hann',
    'hanning',
    'hamming',
    'mean',
    'rms',
    # filtering
    'KalmanFilter',
    'kalman_filter',
    # errors
    'ShapeError',
    'SingularMatrixError',
    'UnsupportedLengthError',
    # configuration
    'EPS',
    'PIVOT_EPS',
]
