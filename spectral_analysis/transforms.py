"""
Discrete Fourier transform strategies.

Implements:
- FFTTransform: iterative radix-2 Cooley-Tukey, O(N log N), N a power of 2
- DFTTransform: direct summation, O(N²), any N

X[k] = Σ_n x[n] e^{-2πi k n / N}

select_transform() picks the strategy from the signal length only, and
transform() is the single entry point used by the rest of the package.
"""

import numpy as np
from typing import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FrequencyDomain:
    """Complex spectrum split into real and imaginary parts (length N)."""
    re: np.ndarray
    im: np.ndarray

    def __len__(self) -> int:
        return len(self.re)

    @property
    def complex(self) -> np.ndarray:
        return self.re + 1j * self.im


def is_power_of_two(n: int) -> bool:
    """True for 1, 2, 4, 8, ..."""
    return n > 0 and (n & (n - 1)) == 0


def _as_signal(signal: Sequence[float]) -> np.ndarray:
    signal = np.asarray(signal, dtype=np.float64).ravel()
    if len(signal) == 0:
        raise ValueError("Cannot transform an empty signal")
    return signal


class DFTTransform:
    """Direct O(N²) discrete Fourier transform."""

    name = 'dft'

    def supports(self, n: int) -> bool:
        return n > 0

    def __call__(self, signal: Sequence[float]) -> FrequencyDomain:
        x = _as_signal(signal)
        N = len(x)

        n = np.arange(N)
        # (k * n) mod N keeps every angle in [0, 2π) for accurate sin/cos
        kn = np.outer(n, n) % N
        angle = -2 * np.pi * kn / N

        return FrequencyDomain(re=np.cos(angle) @ x, im=np.sin(angle) @ x)


class FFTTransform:
    """
    Iterative radix-2 Cooley-Tukey FFT.

    1. Permute the input into bit-reversed index order.
    2. For step = 2, 4, ..., N combine pairs of half-size transforms:
           even' = even + w * odd,  odd' = even - w * odd
       with twiddle w = e^{-2πi k / step}, k = 0..step/2 - 1.
    """

    name = 'fft'

    def supports(self, n: int) -> bool:
        return is_power_of_two(n)

    @staticmethod
    def bit_reversal_indices(N: int) -> np.ndarray:
        bits = N.bit_length() - 1
        indices = np.zeros(N, dtype=np.int64)
        for i in range(N):
            j = 0
            ii = i
            for _ in range(bits):
                j = (j << 1) | (ii & 1)
                ii >>= 1
            indices[j] = i
        return indices

    def __call__(self, signal: Sequence[float]) -> FrequencyDomain:
        x = _as_signal(signal)
        N = len(x)
        if not self.supports(N):
            raise ValueError(f"FFT requires a power-of-two length, got {N}")

        data = x[self.bit_reversal_indices(N)].astype(np.complex128)

        step = 2
        while step <= N:
            half = step // 2
            twiddle = np.exp(-2j * np.pi * np.arange(half) / step)

            groups = data.reshape(-1, step)
            even = groups[:, :half].copy()
            odd = groups[:, half:] * twiddle
            groups[:, :half] = even + odd
            groups[:, half:] = even - odd

            data = groups.reshape(-1)
            step *= 2

        return FrequencyDomain(re=data.real.copy(), im=data.imag.copy())


_FFT = FFTTransform()
_DFT = DFTTransform()


def select_transform(n: int):
    """FFT for power-of-two lengths, direct DFT otherwise."""
    return _FFT if _FFT.supports(n) else _DFT


def transform(signal: Sequence[float]) -> FrequencyDomain:
    """Frequency-domain representation of a real signal."""
    x = _as_signal(signal)
    return select_transform(len(x))(x)


def fft(signal: Sequence[float]) -> FrequencyDomain:
    return _FFT(signal)


def dft(signal: Sequence[float]) -> FrequencyDomain:
    return _DFT(signal)
