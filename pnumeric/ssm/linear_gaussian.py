"""Linear Gaussian State Space Model (LGSSM)."""
import numpy as np

from ..core.matrix import Matrix


def linear_gaussian_ssm(F, Q, H, R, x0, T, rng):
    """
    Simulate Linear Gaussian SSM.

    x_t = F x_{t-1} + v_t,  v_t ~ N(0, Q)
    z_t = H x_t + w_t,      w_t ~ N(0, R)

    Parameters
    ----------
    F : Matrix [n_x, n_x]
        State transition matrix
    Q : Matrix [n_x, n_x]
        Process noise covariance
    H : Matrix [n_y, n_x]
        Measurement matrix
    R : Matrix [n_y, n_y]
        Measurement noise covariance
    x0 : Vector [n_x]
        Initial state
    T : int
        Number of time steps
    rng : numpy.random.Generator
        Random number generator

    Returns
    -------
    xs : Matrix [T, n_x]
        Latent states
    zs : Matrix [T, n_y]
        Measurements
    """
    F, Q, H, R = (np.asarray(M, dtype=np.float64) for M in (F, Q, H, R))
    n_x, n_y = F.shape[0], H.shape[0]

    x = np.asarray(x0, dtype=np.float64)

    xs = np.zeros((T, n_x))
    zs = np.zeros((T, n_y))

    for t in range(T):
        x = F @ x + rng.multivariate_normal(np.zeros(n_x), Q)
        z = H @ x + rng.multivariate_normal(np.zeros(n_y), R)
        xs[t], zs[t] = x, z

    return Matrix(xs), Matrix(zs)
