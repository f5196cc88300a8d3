"""
Fourier visualizer demo: four sine components in, spectra out.
"""

import numpy as np
from typing import Tuple
from dataclasses import dataclass, field, replace

import config
from spectral_analysis.signals import WaveComponent, CompositeSignal, composite_signal
from spectral_analysis.spectrum import (
    Spectrum,
    SpectralMetrics,
    analyze_signal,
    band_limited,
    significant_phases,
    spectral_metrics,
)


def _default_waves() -> Tuple[WaveComponent, ...]:
    return tuple(WaveComponent(f, a, p, enabled) for f, a, p, enabled in config.DEFAULT_WAVES)


@dataclass(frozen=True)
class FourierDemoState:
    """Wave sliders, sample count and noise toggle."""
    waves: Tuple[WaveComponent, ...] = field(default_factory=_default_waves)
    num_samples: int = config.DEFAULT_NUM_SAMPLES
    sampling_rate: float = config.SAMPLING_RATE
    add_noise: bool = False
    noise_level: float = config.DEFAULT_NOISE_LEVEL

    def __post_init__(self):
        if len(self.waves) > config.MAX_WAVES:
            raise ValueError(f"At most {config.MAX_WAVES} waves are supported")
        if not 1 <= self.num_samples <= config.MAX_SAMPLES_FOR_DFT:
            raise ValueError(f"num_samples must be in [1, {config.MAX_SAMPLES_FOR_DFT}], "
                             f"got {self.num_samples}")
        if self.noise_level < 0:
            raise ValueError(f"noise_level must be >= 0, got {self.noise_level}")

    def with_wave(self, index: int, **changes) -> 'FourierDemoState':
        """Copy of the state with wave `index` updated (frequency, amplitude, ...)."""
        waves = list(self.waves)
        waves[index] = replace(waves[index], **changes)
        return replace(self, waves=tuple(waves))


@dataclass(frozen=True)
class FourierDemoResult:
    signal: CompositeSignal
    spectrum: Spectrum
    display_spectrum: Spectrum
    phase_points: Tuple[np.ndarray, np.ndarray]
    metrics: SpectralMetrics


def run_fourier_demo(state: FourierDemoState = FourierDemoState(),
                     max_display_frequency: float = config.DISPLAY_MAX_FREQUENCY,
                     verbose: bool = False) -> FourierDemoResult:
    """Build the composite signal and its single-sided spectrum."""
    noise = state.noise_level if state.add_noise else None
    signal = composite_signal(state.waves, state.num_samples, state.sampling_rate, noise)

    spectrum = analyze_signal(signal.samples, state.sampling_rate)
    shown = band_limited(spectrum, min(max_display_frequency, state.sampling_rate / 2))
    metrics = spectral_metrics(signal.samples, spectrum.magnitude, state.sampling_rate)

    if verbose:
        k, freq, mag = spectrum.peak()
        print(f"Fourier demo: N={state.num_samples}, fs={state.sampling_rate:g} Hz, "
              f"{len(signal.waves)} active wave(s)")
        print(f"  peak bin {k} ({freq:.2f} Hz) magnitude {mag:.3f}, "
              f"total power {metrics.total_power:.3f}, RMS {metrics.rms_amplitude:.3f}")

    return FourierDemoResult(
        signal=signal,
        spectrum=spectrum,
        display_spectrum=shown,
        phase_points=significant_phases(shown),
        metrics=metrics,
    )
