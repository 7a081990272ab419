"""Covariance update forms shared by the Kalman filter."""
from ..core.matrix import eye


def joseph_update(P_pred, K, H, R):
    """
    Compute Joseph-stabilized covariance update.

    Parameters
    ----------
    P_pred : Matrix [n_x, n_x]
        Predicted covariance
    K : Matrix [n_x, n_y]
        Kalman gain
    H : Matrix [n_y, n_x]
        Measurement matrix
    R : Matrix [n_y, n_y]
        Measurement noise covariance

    Returns
    -------
    Matrix [n_x, n_x]
        (I - K H) P_pred (I - K H)^T + K R K^T
    """
    IKH = eye(P_pred.rows, eps=P_pred.eps) - K * H
    return IKH * P_pred * IKH.T + K * R * K.T


def standard_update(P_pred, K, H):
    """
    Compute standard covariance update: P = (I - K H) P_pred.

    Parameters
    ----------
    P_pred : Matrix [n_x, n_x]
        Predicted covariance
    K : Matrix [n_x, n_y]
        Kalman gain
    H : Matrix [n_y, n_x]
        Measurement matrix

    Returns
    -------
    Matrix [n_x, n_x]
        Updated covariance
    """
    return (eye(P_pred.rows, eps=P_pred.eps) - K * H) * P_pred
