"""
Signal generation: sine components and their additive composite.

x(t) = Σ A_i sin(2π f_i t + φ_i) + noise,  t = n / sampling_rate
"""

import numpy as np
from typing import List, Optional, Sequence
from dataclasses import dataclass, field

import config
from ml_from_scratch.random_gaussian import random_gaussian_array


@dataclass(frozen=True)
class WaveComponent:
    """One sine component of the composite signal."""
    frequency: float
    amplitude: float
    phase_degrees: float = 0.0
    enabled: bool = True

    def __post_init__(self):
        if self.frequency < 0:
            raise ValueError(f"frequency must be >= 0, got {self.frequency}")
        if self.amplitude < 0:
            raise ValueError(f"amplitude must be >= 0, got {self.amplitude}")

    @property
    def is_active(self) -> bool:
        """Enabled and audible (zero-amplitude waves are skipped)."""
        return self.enabled and self.amplitude > 0


@dataclass(frozen=True)
class CompositeSignal:
    """Sampled composite signal and the components that made it."""
    time: np.ndarray
    samples: np.ndarray
    sampling_rate: float
    waves: List[WaveComponent] = field(default_factory=list)
    components: List[np.ndarray] = field(default_factory=list)

    @property
    def num_samples(self) -> int:
        return len(self.samples)


def time_axis(num_samples: int, sampling_rate: float) -> np.ndarray:
    """Sample instants t = n / sampling_rate."""
    return np.arange(num_samples) / sampling_rate


def generate_sine_wave(frequency: float, amplitude: float, phase_degrees: float,
                       sampling_rate: float, num_samples: int) -> np.ndarray:
    """
    Sample amplitude * sin(2π f t + φ) at t = n / sampling_rate.

    Args:
        frequency: Frequency in Hz
        amplitude: Peak amplitude
        phase_degrees: Phase offset in degrees
        sampling_rate: Samples per second
        num_samples: Number of samples

    Returns:
        Array of shape (num_samples,)
    """
    if sampling_rate <= 0:
        raise ValueError(f"sampling_rate must be positive, got {sampling_rate}")
    if num_samples < 0:
        raise ValueError(f"num_samples must be >= 0, got {num_samples}")

    phase_rad = np.deg2rad(phase_degrees)
    t = time_axis(num_samples, sampling_rate)
    return amplitude * np.sin(2 * np.pi * frequency * t + phase_rad)


def composite_signal(waves: Sequence[WaveComponent], num_samples: int,
                     sampling_rate: float = config.SAMPLING_RATE,
                     noise_level: Optional[float] = None) -> CompositeSignal:
    """
    Sum the active waves sample-wise, optionally adding Gaussian noise.

    Args:
        waves: Up to config.MAX_WAVES components; disabled or zero-amplitude
               ones contribute nothing
        num_samples: Number of samples
        sampling_rate: Samples per second
        noise_level: Standard deviation of independent per-sample noise,
                     or None for a clean signal

    Returns:
        CompositeSignal
    """
    if len(waves) > config.MAX_WAVES:
        raise ValueError(f"At most {config.MAX_WAVES} waves are supported, got {len(waves)}")

    samples = np.zeros(num_samples, dtype=np.float64)
    active = []
    components = []

    for wave in waves:
        if not wave.is_active:
            continue
        data = generate_sine_wave(wave.frequency, wave.amplitude, wave.phase_degrees,
                                  sampling_rate, num_samples)
        samples += data
        active.append(wave)
        components.append(data)

    if noise_level is not None and noise_level > 0:
        samples += random_gaussian_array(0.0, noise_level, num_samples)

    return CompositeSignal(
        time=time_axis(num_samples, sampling_rate),
        samples=samples,
        sampling_rate=sampling_rate,
        waves=active,
        components=components,
    )
