"""
Spectral Analysis - Fourier decomposition from scratch.

Signals:
- WaveComponent / generate_sine_wave / composite_signal

Transforms:
- FFTTransform: radix-2 Cooley-Tukey for power-of-two lengths
- DFTTransform: direct O(N²) fallback
- transform: picks the strategy from the signal length

Spectra:
- magnitude_spectrum / phase_spectrum (single-sided)
- spectral_metrics: Nyquist, resolution, Parseval power, RMS
"""

from .signals import WaveComponent, CompositeSignal, generate_sine_wave, composite_signal, time_axis
from .transforms import (
    FrequencyDomain,
    FFTTransform,
    DFTTransform,
    is_power_of_two,
    select_transform,
    transform,
    fft,
    dft,
)
from .spectrum import (
    Spectrum,
    SpectralMetrics,
    magnitude_spectrum,
    phase_spectrum,
    frequency_bins,
    total_power,
    rms_amplitude,
    spectral_metrics,
    analyze_signal,
    band_limited,
    significant_phases,
)

__all__ = [
    # Signals
    'WaveComponent',
    'CompositeSignal',
    'generate_sine_wave',
    'composite_signal',
    'time_axis',

    # Transforms
    'FrequencyDomain',
    'FFTTransform',
    'DFTTransform',
    'is_power_of_two',
    'select_transform',
    'transform',
    'fft',
    'dft',

    # Spectra
    'Spectrum',
    'SpectralMetrics',
    'magnitude_spectrum',
    'phase_spectrum',
    'frequency_bins',
    'total_power',
    'rms_amplitude',
    'spectral_metrics',
    'analyze_signal',
    'band_limited',
    'significant_phases',
]
