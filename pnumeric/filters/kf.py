"""Kalman Filter (KF) implementation."""
import logging

import numpy as np
from scipy import linalg as sla

from ..config import PIVOT_EPS, SOLVERS
from ..core.matrix import Matrix, eye, zeros
from ..core.vector import Vector
from ..errors import ShapeError, SingularMatrixError
from .common import joseph_update, standard_update

logger = logging.getLogger(__name__)


def _gain_gauss_jordan(PHt, S, eps):
    """K = P H^T S^{-1} with S inverted by Gauss-Jordan elimination."""
    return PHt * S.inv(eps)


def _gain_lu(PHt, S, eps):
    """K = P H^T S^{-1} by solving S^T K^T = (P H^T)^T with LU (np.linalg.solve)."""
    try:
        K = np.linalg.solve(np.asarray(S).T, np.asarray(PHt).T).T
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"innovation covariance is singular: {exc}") from exc
    return Matrix(K, eps=PHt.eps)


def _gain_cholesky(PHt, S, eps):
    """K = P H^T S^{-1} using a Cholesky factorization (assumes S is SPD)."""
    try:
        factor = sla.cho_factor(np.asarray(S), lower=True)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"innovation covariance is not positive definite: {exc}") from exc
    return Matrix(sla.cho_solve(factor, np.asarray(PHt).T).T, eps=PHt.eps)


_GAIN_SOLVERS = {
    'gauss-jordan': _gain_gauss_jordan,
    'lu': _gain_lu,
    'cholesky': _gain_cholesky,
}


class KalmanFilter:
    """
    Discrete-time linear Kalman filter.

    The filter owns copies of its state x, P and model F, Q, H, R. predict()
    and update() overwrite x and P in place, so references obtained from
    ``kf.x`` / ``kf.P`` follow the estimate. Model matrices can be replaced
    between cycles to describe time-varying systems; shapes are checked when
    they are used.

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
    x : Vector [n_x], optional
        Initial state estimate (default: zeros)
    P : Matrix [n_x, n_x], optional
        Initial error covariance (default: identity)
    solver : str
        Gain solver: 'gauss-jordan', 'cholesky' or 'lu' (default: 'gauss-jordan')
    joseph : bool
        Use Joseph stabilized covariance update (default: False)
    pivot_eps : float
        Singular-pivot threshold for the Gauss-Jordan solver
    """

    def __init__(self, F, Q, H, R, x=None, P=None, solver='gauss-jordan',
                 joseph=False, pivot_eps=PIVOT_EPS):
        if solver not in SOLVERS:
            raise ValueError(f"unknown solver {solver!r}, expected one of {SOLVERS}")

        self.F, self.Q, self.H, self.R = F, Q, H, R
        n_x = self._F.rows
        self._x = Vector(np.zeros(n_x)) if x is None else Vector(x)
        self._P = eye(n_x) if P is None else Matrix(P)

        self.solver = solver
        self.joseph = joseph
        self.pivot_eps = pivot_eps
        self._gain = _GAIN_SOLVERS[solver]

        self._check_predict()
        self._check_update(self._H.rows)
        logger.debug("KalmanFilter n_x=%d n_y=%d solver=%s joseph=%s",
                     n_x, self._H.rows, solver, joseph)

    # State and model

    @property
    def x(self):
        """State estimate (updated in place)."""
        return self._x

    @x.setter
    def x(self, value):
        self._x._assign(value)

    @property
    def P(self):
        """Error covariance (updated in place)."""
        return self._P

    @P.setter
    def P(self, value):
        self._P._assign(value)

    @property
    def F(self):
        return self._F

    @F.setter
    def F(self, value):
        self._F = Matrix(value)

    @property
    def Q(self):
        return self._Q

    @Q.setter
    def Q(self, value):
        self._Q = Matrix(value)

    @property
    def H(self):
        return self._H

    @H.setter
    def H(self, value):
        self._H = Matrix(value)

    @property
    def R(self):
        return self._R

    @R.setter
    def R(self, value):
        self._R = Matrix(value)

    def _check_predict(self):
        n_x = len(self._x)
        if self._F.shape != (n_x, n_x):
            raise ShapeError(f"F must be {n_x}x{n_x}, got {self._F.shape}")
        if self._P.shape != (n_x, n_x):
            raise ShapeError(f"P must be {n_x}x{n_x}, got {self._P.shape}")
        if self._Q.shape != (n_x, n_x):
            raise ShapeError(f"Q must be {n_x}x{n_x}, got {self._Q.shape}")

    def _check_update(self, n_z):
        n_x, n_y = len(self._x), self._H.rows
        if self._H.cols != n_x:
            raise ShapeError(f"H must have {n_x} columns, got {self._H.shape}")
        if self._R.shape != (n_y, n_y):
            raise ShapeError(f"R must be {n_y}x{n_y}, got {self._R.shape}")
        if self._P.shape != (n_x, n_x):
            raise ShapeError(f"P must be {n_x}x{n_x}, got {self._P.shape}")
        if n_z != n_y:
            raise ShapeError(f"measurement has length {n_z}, H expects {n_y}")

    # Filter steps

    def predict(self):
        """Time update: x <- F x, P <- F P F^T + Q."""
        self._check_predict()
        F = self._F
        x_pred = F * self._x
        P_pred = F * self._P * F.T + self._Q

        self._x._assign(x_pred)
        self._P._assign(P_pred)

    def update(self, z):
        """
        Measurement update.

        Parameters
        ----------
        z : Vector [n_y]
            Measurement

        Returns
        -------
        Vector [n_y]
            Innovation z - H x computed from the prior estimate

        Raises
        ------
        ShapeError
            If len(z) does not match the rows of H
        SingularMatrixError
            If the innovation covariance S cannot be inverted
        """
        z = z if isinstance(z, Vector) else Vector(z)
        self._check_update(len(z))
        H, P, R = self._H, self._P, self._R

        innov = z - H * self._x
        PHt = P * H.T
        S = H * PHt + R
        K = self._gain(PHt, S, self.pivot_eps)

        x_new = self._x + K * innov
        P_new = joseph_update(P, K, H, R) if self.joseph else standard_update(P, K, H)

        self._x._assign(x_new)
        self._P._assign(P_new)
        return innov

    def measurement_estimate(self):
        """Predicted measurement H x for the current estimate."""
        return self._H * self._x


def kalman_filter(kf, zs, model_update=None):
    """
    Run predict + update over a sequence of measurements.

    Parameters
    ----------
    kf : KalmanFilter
        Filter to drive; its state is advanced in place
    zs : iterable of Vector [n_y]
        Measurements, one per time step
    model_update : callable, optional
        Called as model_update(t, kf) after step t; may replace
        kf.F, kf.Q, kf.H, kf.R for time-varying systems

    Returns
    -------
    x_filt : Matrix [T, n_x]
        Filtered state estimates
    y_filt : Matrix [T, n_y]
        Measurement estimates H x after each update
    P_filt : list of Matrix [n_x, n_x]
        Filtered covariances
    """
    if model_update is not None and not callable(model_update):
        raise TypeError("model_update must be callable")

    x_rows, y_rows, P_filt = [], [], []
    for t, z in enumerate(zs):
        kf.predict()
        innov = kf.update(z)
        logger.debug("step %d: |innovation| = %g", t, float(np.linalg.norm(np.asarray(innov))))

        x_rows.append(kf.x.copy())
        y_rows.append(kf.measurement_estimate())
        P_filt.append(kf.P.copy())

        if model_update is not None:
            model_update(t, kf)

    if not x_rows:
        return zeros(0, len(kf.x)), zeros(0, kf.H.rows), P_filt
    return Matrix(x_rows), Matrix(y_rows), P_filt
