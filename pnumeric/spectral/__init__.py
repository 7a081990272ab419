"""Spectral analysis: Fourier transform, windows and signal statistics."""
from .fft import fft, magnitude
from .window import rect, hann, hanning, hamming, mean, rms

__all__ = [
    # transform
    'fft',
    'magnitude',
    # windows
    'rect',
    'hann',
    'hanning',
    'hamming',
    # statistics
    'mean',
    'rms',
]
