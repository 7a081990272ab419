"""
Utility Functions.

This module contains utility functions for:
- Metrics computation
- Visualization
"""
from .metrics import compute_mse, compute_rmse, compute_nees, compute_min_eigenvalues
from .visualization import plot_kalman_filter, plot_spectrum

__all__ = [
    # metrics
    'compute_mse',
    'compute_rmse',
    'compute_nees',
    'compute_min_eigenvalues',
    # visualization
    'plot_kalman_filter',
    'plot_spectrum',
]
