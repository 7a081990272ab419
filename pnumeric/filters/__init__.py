"""Filtering algorithm implementations."""
from .kf import KalmanFilter, kalman_filter
from .common import joseph_update, standard_update

__all__ = [
    # Main filter
    'KalmanFilter',
    'kalman_filter',
    # Utilities
    'joseph_update',
    'standard_update',
]
