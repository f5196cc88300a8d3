"""
Single-sided spectra and derived spectral metrics.

For a real signal of length N only bins k = 0..N//2 carry independent
information. Magnitudes are scaled by 2/N so a sine of amplitude A reads A
at its bin; DC and (for even N) Nyquist have no mirror bin and are scaled
by 1/N instead.
"""

import numpy as np
from typing import Sequence, Tuple
from dataclasses import dataclass

import config
from .transforms import FrequencyDomain, transform


@dataclass(frozen=True)
class Spectrum:
    """Parallel arrays indexed by frequency bin k = 0..N//2."""
    frequencies: np.ndarray
    magnitude: np.ndarray
    phase: np.ndarray
    num_samples: int

    def peak(self) -> Tuple[int, float, float]:
        """(bin, frequency, magnitude) of the largest magnitude."""
        k = int(np.argmax(self.magnitude))
        return k, float(self.frequencies[k]), float(self.magnitude[k])


@dataclass(frozen=True)
class SpectralMetrics:
    """Summary numbers shown next to the spectrum."""
    sampling_rate: float
    nyquist: float
    freq_resolution: float
    duration: float
    total_power: float
    rms_amplitude: float


def _is_nyquist_bin(k: int, num_samples: int) -> bool:
    return num_samples % 2 == 0 and k == num_samples // 2


def magnitude_spectrum(fd: FrequencyDomain) -> np.ndarray:
    """
    Single-sided magnitude 2|X[k]|/N for k = 0..N//2.

    DC and, when N is even, the Nyquist bin are halved back to |X[k]|/N.
    """
    N = len(fd)
    half = N // 2
    mags = 2 * np.hypot(fd.re[:half + 1], fd.im[:half + 1]) / N

    mags[0] /= 2
    if N % 2 == 0 and half > 0:
        mags[half] /= 2
    return mags


def phase_spectrum(fd: FrequencyDomain) -> np.ndarray:
    """Phase atan2(im, re) in degrees for k = 0..N//2."""
    half = len(fd) // 2
    return np.degrees(np.arctan2(fd.im[:half + 1], fd.re[:half + 1]))


def frequency_bins(num_samples: int, sampling_rate: float) -> np.ndarray:
    """Bin centre frequencies k * (sampling_rate / N) for k = 0..N//2."""
    return np.arange(num_samples // 2 + 1) * (sampling_rate / num_samples)


def total_power(magnitudes: np.ndarray, num_samples: int) -> float:
    """
    Parseval estimate from the single-sided magnitudes.

    P = Σ factor * mag²,  factor = 1 for DC / Nyquist, 0.5 otherwise.
    For a noise-free signal this approximates mean(x²).
    """
    factors = np.full(len(magnitudes), 0.5)
    factors[0] = 1.0
    last = len(magnitudes) - 1
    if last > 0 and _is_nyquist_bin(last, num_samples):
        factors[last] = 1.0
    return float(np.sum(factors * np.asarray(magnitudes) ** 2))


def rms_amplitude(signal: Sequence[float]) -> float:
    """sqrt(mean(x²))."""
    signal = np.asarray(signal, dtype=np.float64)
    if len(signal) == 0:
        return 0.0
    return float(np.sqrt(np.mean(signal ** 2)))


def spectral_metrics(signal: Sequence[float], magnitudes: np.ndarray,
                     sampling_rate: float = config.SAMPLING_RATE) -> SpectralMetrics:
    num_samples = len(signal)
    return SpectralMetrics(
        sampling_rate=sampling_rate,
        nyquist=sampling_rate / 2,
        freq_resolution=sampling_rate / num_samples,
        duration=num_samples / sampling_rate,
        total_power=total_power(magnitudes, num_samples),
        rms_amplitude=rms_amplitude(signal),
    )


def analyze_signal(signal: Sequence[float],
                   sampling_rate: float = config.SAMPLING_RATE) -> Spectrum:
    """Transform a signal and build its single-sided spectrum."""
    fd = transform(signal)
    return Spectrum(
        frequencies=frequency_bins(len(fd), sampling_rate),
        magnitude=magnitude_spectrum(fd),
        phase=phase_spectrum(fd),
        num_samples=len(fd),
    )


def band_limited(spectrum: Spectrum,
                 max_frequency: float = config.DISPLAY_MAX_FREQUENCY) -> Spectrum:
    """Keep only bins at or below max_frequency."""
    mask = spectrum.frequencies <= max_frequency
    return Spectrum(
        frequencies=spectrum.frequencies[mask],
        magnitude=spectrum.magnitude[mask],
        phase=spectrum.phase[mask],
        num_samples=spectrum.num_samples,
    )


def significant_phases(spectrum: Spectrum,
                       min_magnitude: float = config.PHASE_MAGNITUDE_THRESHOLD
                       ) -> Tuple[np.ndarray, np.ndarray]:
    """(frequencies, phases) of bins whose magnitude exceeds min_magnitude."""
    mask = spectrum.magnitude > min_magnitude
    return spectrum.frequencies[mask], spectrum.phase[mask]
