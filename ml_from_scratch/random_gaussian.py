"""
Gaussian random sampling from scratch (Box-Muller transform).

Two independent uniform variates U1, U2 in (0, 1) give a standard normal:
    Z = sqrt(-2 ln U1) * cos(2π U2)

Uniform variates come from NumPy's global generator, so results are not
reproducible unless the caller seeds it (tests do).
"""

import numpy as np
from typing import Tuple

import config


def _uniform_open() -> float:
    """Draw from (0, 1); a draw of exactly 0 would make log(U1) blow up."""
    u = 0.0
    while u == 0.0:
        u = np.random.random()
    return u


def random_gaussian(mean: float = 0.0, std_dev: float = 1.0) -> float:
    """
    Sample a normally distributed value.

    Args:
        mean: Distribution mean
        std_dev: Standard deviation

    Returns:
        One sample from N(mean, std_dev²)
    """
    u = _uniform_open()
    v = _uniform_open()
    z = np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
    return float(mean + std_dev * z)


def random_gaussian_array(mean: float, std_dev: float, size: int) -> np.ndarray:
    """Vectorised Box-Muller: `size` independent samples from N(mean, std_dev²)."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    u = np.random.random(size)
    v = np.random.random(size)

    # Redraw exact zeros
    zeros = u == 0.0
    while np.any(zeros):
        u[zeros] = np.random.random(np.count_nonzero(zeros))
        zeros = u == 0.0

    z = np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
    return mean + std_dev * z


def generate_two_class_data(separation: float, std_dev: float,
                            n_per_class: int = config.N_SAMPLES_PER_CLASS
                            ) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate two isotropic Gaussian clouds along the x axis.

    Class 0 is centred at (-separation/2, 0), class 1 at (+separation/2, 0).

    Args:
        separation: Distance between the two class centres
        std_dev: Standard deviation of both clouds (both features)
        n_per_class: Number of samples per class

    Returns:
        X of shape (2 * n_per_class, 2), y of shape (2 * n_per_class,)
        with the negative class first.
    """
    if n_per_class < 1:
        raise ValueError(f"n_per_class must be >= 1, got {n_per_class}")
    if std_dev <= 0:
        raise ValueError(f"std_dev must be positive, got {std_dev}")

    X0 = np.column_stack([
        random_gaussian_array(-separation / 2, std_dev, n_per_class),
        random_gaussian_array(0.0, std_dev, n_per_class),
    ])
    X1 = np.column_stack([
        random_gaussian_array(separation / 2, std_dev, n_per_class),
        random_gaussian_array(0.0, std_dev, n_per_class),
    ])

    X = np.vstack([X0, X1])
    y = np.array([0] * n_per_class + [1] * n_per_class, dtype=int)
    return X, y
