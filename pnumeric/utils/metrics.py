"""
Metrics for evaluating filter performance.
"""
import numpy as np


def compute_mse(estimated, true):
    """
    Compute Mean Squared Error.

    Parameters
    ----------
    estimated : Matrix or Vector
        Estimated values
    true : Matrix or Vector
        True values

    Returns
    -------
    float
        Mean squared error
    """
    return float(np.mean((np.asarray(estimated) - np.asarray(true))**2))


def compute_rmse(estimated, true):
    """Root Mean Squared Error."""
    return float(np.sqrt(compute_mse(estimated, true)))


def compute_nees(x_filt, P_filt, xs, regularize=1e-8):
    """
    Compute Normalized Estimation Error Squared (NEES).

    NEES = (x - m)' * P^{-1} * (x - m)

    For a consistent filter, NEES should follow chi-squared(n_x) distribution.

    Parameters
    ----------
    x_filt : Matrix [T, n_x]
        Filtered means
    P_filt : list of Matrix [n_x, n_x]
        Filtered covariances
    xs : Matrix [T, n_x]
        True states
    regularize : float
        Small value added to diagonal for numerical stability

    Returns
    -------
    ndarray [T]
        NEES values at each time step
    """
    m = np.asarray(x_filt)
    x_true = np.asarray(xs)
    T, n_x = m.shape
    nees = np.zeros(T)

    for t in range(T):
        error = x_true[t] - m[t]
        P_reg = np.asarray(P_filt[t]) + regularize * np.eye(n_x)
        nees[t] = error @ np.linalg.solve(P_reg, error)

    return nees


def compute_min_eigenvalues(P_filt):
    """
    Compute minimum eigenvalue of P at each time step.

    Negative values indicate loss of positive semi-definiteness.

    Parameters
    ----------
    P_filt : list of Matrix [n_x, n_x]
        Covariance matrices

    Returns
    -------
    ndarray [T]
        Minimum eigenvalue at each time step
    """
    return np.array([np.linalg.eigvalsh(np.asarray(P)).min() for P in P_filt])
