"""
Inverse-mode support: start from a confusion matrix, work back to scores.

- simulate_scores_from_counts: a plausible score distribution whose
  per-class means track TPR / TNR (illustrative, not a unique inverse)
- adjust_counts_to_total: edit one count while keeping the sum pinned
- score_histogram: per-class score counts on [0, 1] for the bar chart
"""

import numpy as np
from typing import Iterable, List, Tuple
from dataclasses import dataclass

import config
from ml_from_scratch.random_gaussian import random_gaussian_array
from .metrics import ConfusionCounts


def simulate_scores_from_counts(counts: ConfusionCounts,
                                std_dev: float = config.SIMULATED_SCORE_STD
                                ) -> Tuple[np.ndarray, np.ndarray]:
    """
    Draw scores whose class-conditional means follow the target rates.

        TPR = TP / (TP + FN),   TNR = TN / (TN + FP)
        mean_pos = 0.5 + (TPR - 0.5)
        mean_neg = 0.5 - (TNR - 0.5)

    Negatives (TN + FP of them) come first, then positives (TP + FN).
    If either class is empty, both arrays are empty.

    Returns:
        (scores, labels)
    """
    n_pos = counts.positives
    n_neg = counts.negatives
    if n_pos == 0 or n_neg == 0:
        return np.array([], dtype=np.float64), np.array([], dtype=int)

    tpr = counts.tp / n_pos
    tnr = counts.tn / n_neg
    mean_pos = 0.5 + (tpr - 0.5)
    mean_neg = 0.5 - (tnr - 0.5)

    scores = np.concatenate([
        random_gaussian_array(mean_neg, std_dev, n_neg),
        random_gaussian_array(mean_pos, std_dev, n_pos),
    ])
    labels = np.array([0] * n_neg + [1] * n_pos, dtype=int)
    return scores, labels


def adjust_counts_to_total(counts: ConfusionCounts, changed_field: str, new_value: int,
                           locked_fields: Iterable[str] = (),
                           total: int = config.TOTAL_SAMPLES
                           ) -> Tuple[ConfusionCounts, bool]:
    """
    Set one count and redistribute the difference over the unlocked others.

    While the sum differs from `total`:
    - too large: decrement the largest unlocked field that is > 0
    - too small: increment the smallest unlocked field that is < total
    The edited field and locked fields never move. If the sum cannot be
    brought back to `total`, nothing is applied.

    Args:
        counts: Current counts
        changed_field: One of 'tp', 'fp', 'tn', 'fn'
        new_value: Requested value for changed_field, in [0, total]
        locked_fields: Fields that must keep their value
        total: Sum to preserve

    Returns:
        (new_counts, accepted). When accepted is False, new_counts is the
        original `counts` object.
    """
    if changed_field not in config.COUNT_FIELDS:
        raise ValueError(f"Unknown field '{changed_field}', expected one of {config.COUNT_FIELDS}")
    if not 0 <= new_value <= total:
        raise ValueError(f"{changed_field} must be in [0, {total}], got {new_value}")

    locked = set(locked_fields)
    unknown = locked - set(config.COUNT_FIELDS)
    if unknown:
        raise ValueError(f"Unknown locked fields: {sorted(unknown)}")

    values = counts.as_dict()
    values[changed_field] = int(new_value)
    diff = sum(values.values()) - total

    unlocked = [f for f in config.COUNT_FIELDS if f != changed_field and f not in locked]

    while diff != 0 and unlocked:
        if diff > 0:
            candidates = [f for f in sorted(unlocked, key=lambda f: -values[f])
                          if values[f] > 0]
            step = -1
        else:
            candidates = [f for f in sorted(unlocked, key=lambda f: values[f])
                          if values[f] < total]
            step = 1

        if not candidates:
            break

        values[candidates[0]] += step
        diff += step

    if diff != 0:
        return counts, False

    return ConfusionCounts(**values), True


@dataclass(frozen=True)
class ScoreHistogram:
    """Stacked histogram of scores split by class."""
    bin_labels: List[str]
    positive: np.ndarray
    negative: np.ndarray


def score_histogram(scores: np.ndarray, labels: np.ndarray,
                    n_bins: int = config.HISTOGRAM_BINS) -> ScoreHistogram:
    """
    Bin scores on [0, 1] into n_bins equal bins, per class.

    Scores outside [0, 1) are clamped into the first or last bin.
    """
    if n_bins < 1:
        raise ValueError(f"n_bins must be >= 1, got {n_bins}")

    scores = np.asarray(scores, dtype=np.float64).ravel()
    labels = np.asarray(labels).ravel()

    indices = np.clip(np.floor(scores * n_bins).astype(int), 0, n_bins - 1)
    positive = np.bincount(indices[labels == 1], minlength=n_bins)
    negative = np.bincount(indices[labels != 1], minlength=n_bins)

    bin_labels = [f"{i / n_bins:.2f}" for i in range(n_bins)]
    return ScoreHistogram(bin_labels=bin_labels, positive=positive, negative=negative)
