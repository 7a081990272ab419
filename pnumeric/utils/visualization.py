"""
Visualization functions for filter and spectrum results.
"""
import numpy as np
import matplotlib.pyplot as plt

from ..core.vector import Vector
from ..spectral.fft import fft


def _finish(fig, save_path):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
    else:
        plt.show()


def plot_kalman_filter(xs, zs, x_filt, P_filt, save_path=None, title="Kalman Filter"):
    """
    Plot Kalman filter results.

    Parameters
    ----------
    xs : Matrix [T, n_x] or None
        True states
    zs : Matrix [T, n_y]
        Measurements (drawn when n_y == n_x)
    x_filt : Matrix [T, n_x]
        Filtered means
    P_filt : list of Matrix [n_x, n_x]
        Filtered covariances
    save_path : str, optional
        Path to save figure
    title : str
        Plot title
    """
    m_filt = np.asarray(x_filt)
    T, n_x = m_filt.shape
    t = np.arange(T)
    P = np.array([np.asarray(Pt) for Pt in P_filt])
    zs = np.asarray(zs)

    fig, axes = plt.subplots(n_x, 1, figsize=(12, 4*n_x), squeeze=False)

    for i in range(n_x):
        ax = axes[i, 0]
        std_filt = np.sqrt(P[:, i, i])

        if zs.ndim == 2 and zs.shape[1] == n_x:
            ax.plot(t, zs[:, i], 'k.', markersize=3, label='Measurement', alpha=0.5)
        if xs is not None:
            ax.plot(t, np.asarray(xs)[:, i], 'k-', linewidth=2, label='True State', alpha=0.8)
        ax.plot(t, m_filt[:, i], 'b--', linewidth=1.5, label='Filter Mean', alpha=0.8)
        ax.fill_between(t, m_filt[:, i] - 2*std_filt, m_filt[:, i] + 2*std_filt,
                        alpha=0.2, color='blue', label='+/-2sigma')

        ax.set_xlabel('Time')
        ax.set_ylabel(f'State {i+1}')
        ax.set_title(f'{title} - State {i+1}')
        ax.legend()
        ax.grid(True, alpha=0.3)

    _finish(fig, save_path)
    return fig


def plot_spectrum(v, fs=1.0, window=None, save_path=None, title="Magnitude Spectrum"):
    """
    Plot the one-sided magnitude spectrum of a real signal.

    Parameters
    ----------
    v : Vector [N]
        Time-domain samples
    fs : float
        Sampling frequency used to label the frequency axis
    window : Vector [N], optional
        Window applied before the transform (e.g. hann(N))
    save_path : str, optional
        Path to save figure
    title : str
        Plot title
    """
    v = Vector(v)
    if window is not None:
        v = v * Vector(window)
    X = fft(v)
    n = len(X)
    half = max(n // 2, 1)
    freqs = np.arange(half) * fs / n

    fig, ax = plt.subplots(1, 1, figsize=(12, 4))
    ax.plot(freqs, np.abs(X[:half]), 'b-', linewidth=1.5)
    ax.set_xlabel('Frequency')
    ax.set_ylabel('|X(f)|')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)

    _finish(fig, save_path)
    return fig
