"""
School of Statistics - Global Configuration

This module contains all configuration constants for the statistics
teaching demos (classifier, inverse classifier, regression, Fourier).
"""

from dataclasses import dataclass, field
from typing import List, Tuple

# =============================================================================
# RANDOM DATA GENERATION
# =============================================================================
N_SAMPLES_PER_CLASS = 100  # Points per Gaussian cloud in the classifier demo
DEFAULT_SEPARATION = 3.0
DEFAULT_STD_DEV = 1.5
SEPARATION_RANGE = (0.0, 10.0)
STD_DEV_RANGE = (0.5, 5.0)

# =============================================================================
# NAIVE BAYES
# =============================================================================
VARIANCE_FLOOR = 1e-9  # Minimum per-feature variance (avoids division by zero)
CLASS_LABELS = (0, 1)  # Negative, positive

# =============================================================================
# CONFUSION MATRIX / ROC
# =============================================================================
DECISION_THRESHOLD = 0.5
METRIC_NAMES = ['AUC', 'Accuracy', 'Precision', 'Recall', 'Specificity', 'F1-Score']

# =============================================================================
# INVERSE CLASSIFIER
# =============================================================================
TOTAL_SAMPLES = 200  # Sum pinned by the total-preserving adjustment
DEFAULT_COUNTS = {'tp': 70, 'fp': 20, 'tn': 80, 'fn': 30}
COUNT_FIELDS = ('tp', 'fp', 'tn', 'fn')
SIMULATED_SCORE_STD = 0.15
HISTOGRAM_BINS = 20
MAX_LOCKED_FIELDS = 3  # At least one field must stay free to absorb edits

# =============================================================================
# POLYNOMIAL REGRESSION
# =============================================================================
DEFAULT_DEGREE = 1
DEGREE_RANGE = (1, 10)
CONFIDENCE_MULTIPLIER = 2.0  # Band is prediction +/- 2 sigma
CURVE_STEP = 0.2  # x spacing of the sampled regression curve
INITIAL_POINTS = 8

# Viewport
X_MIN = -10.0
X_MAX = 10.0
Y_MIN = -10.0
Y_MAX = 10.0
ZOOM_FACTOR = 0.1  # 10% per zoom step
VIEWPORT_PADDING_RATIO = 0.1
VIEWPORT_MIN_PADDING = 1.0
NEAREST_POINT_THRESHOLD = 1.0

# =============================================================================
# FOURIER TRANSFORM
# =============================================================================
SAMPLING_RATE = 256  # Hz
MAX_SAMPLES_FOR_DFT = 512
DEFAULT_NUM_SAMPLES = 256
MAX_WAVES = 4
DEFAULT_NOISE_LEVEL = 1.0
DISPLAY_MAX_FREQUENCY = 50.0  # Hz shown on the spectrum charts
PHASE_MAGNITUDE_THRESHOLD = 0.1  # Only show phase where the bin is significant

# (frequency Hz, amplitude, phase degrees, enabled)
DEFAULT_WAVES: List[Tuple[float, float, float, bool]] = [
    (5.0, 10.0, 0.0, True),
    (12.0, 5.0, 0.0, True),
    (20.0, 3.0, 0.0, False),
    (30.0, 2.0, 0.0, False),
]

# =============================================================================
# FILE PATHS
# =============================================================================
RESULTS_DIR = "results"
PLOTS_DIR = f"{RESULTS_DIR}/plots"

# =============================================================================
# DATACLASSES FOR CONFIGURATION
# =============================================================================

@dataclass
class ClassifierConfig:
    """Direct classifier demo configuration."""
    n_per_class: int = N_SAMPLES_PER_CLASS
    separation: float = DEFAULT_SEPARATION
    std_dev: float = DEFAULT_STD_DEV
    threshold: float = DECISION_THRESHOLD
    var_floor: float = VARIANCE_FLOOR


@dataclass
class InverseConfig:
    """Inverse classifier demo configuration."""
    total: int = TOTAL_SAMPLES
    counts: dict = field(default_factory=lambda: dict(DEFAULT_COUNTS))
    score_std: float = SIMULATED_SCORE_STD
    n_bins: int = HISTOGRAM_BINS


@dataclass
class RegressionConfig:
    """Polynomial regression playground configuration."""
    degree: int = DEFAULT_DEGREE
    confidence_multiplier: float = CONFIDENCE_MULTIPLIER
    curve_step: float = CURVE_STEP
    initial_points: int = INITIAL_POINTS


@dataclass
class SpectrumConfig:
    """Fourier visualizer configuration."""
    sampling_rate: int = SAMPLING_RATE
    num_samples: int = DEFAULT_NUM_SAMPLES
    noise_level: float = DEFAULT_NOISE_LEVEL
    max_display_frequency: float = DISPLAY_MAX_FREQUENCY


def get_default_config():
    """Get default configuration objects."""
    return {
        'classifier': ClassifierConfig(),
        'inverse': InverseConfig(),
        'regression': RegressionConfig(),
        'spectrum': SpectrumConfig(),
    }
