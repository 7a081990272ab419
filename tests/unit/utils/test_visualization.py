"""Unit tests for the plotting helpers."""

import matplotlib.pyplot as plt
import pytest

from pnumeric import KalmanFilter, Vector, hann, kalman_filter, vrange
from pnumeric.ssm import linear_gaussian_ssm
from pnumeric.utils import plot_kalman_filter, plot_spectrum


class TestPlotting:
    """Tests for figure creation and saving."""

    def test_plot_kalman_filter_saves(self, tmp_path, rng, kf_system):
        F, Q, H, R = kf_system
        xs, zs = linear_gaussian_ssm(F, Q, H, R, Vector([0.0, 1.0]), 20, rng)
        x_filt, _, P_filt = kalman_filter(KalmanFilter(F, Q, H, R), zs)
        path = tmp_path / "kf.png"

        fig = plot_kalman_filter(xs, zs, x_filt, P_filt, save_path=str(path))

        assert path.exists()
        assert len(fig.axes) == 2

    def test_plot_spectrum_saves(self, tmp_path):
        v = Vector([float(x % 8 < 4) for x in vrange(64)])
        path = tmp_path / "spectrum.png"

        fig = plot_spectrum(v, fs=8.0, window=hann(64), save_path=str(path))

        assert path.exists()
        assert len(fig.axes) == 1

    def test_plot_spectrum_window_mismatch(self, tmp_path):
        with pytest.raises(ValueError):
            plot_spectrum(Vector([1.0, 2.0, 3.0]), window=hann(4),
                          save_path=str(tmp_path / "x.png"))
        plt.close('all')
