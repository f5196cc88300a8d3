"""
Inverse classifier demo: the confusion matrix is the input.

The user edits TP / FP / TN / FN with the sum pinned to a fixed total and
may lock fields. Each accepted edit produces a new state; a rejected edit
leaves the previous state in place. Results are recomputed from the state.
"""

import numpy as np
from typing import FrozenSet
from dataclasses import dataclass, field, replace

import config
from evaluation.metrics import ConfusionCounts, ROCCurve, ClassificationMetrics
from evaluation.metrics import classification_metrics, roc_curve
from evaluation.inverse import (
    ScoreHistogram,
    adjust_counts_to_total,
    simulate_scores_from_counts,
    score_histogram,
)


@dataclass(frozen=True)
class InverseDemoState:
    """Counts, locks and the pinned total."""
    counts: ConfusionCounts = field(
        default_factory=lambda: ConfusionCounts(**config.DEFAULT_COUNTS))
    locked: FrozenSet[str] = frozenset()
    total: int = config.TOTAL_SAMPLES
    last_edit_accepted: bool = True

    def __post_init__(self):
        if self.counts.total != self.total:
            raise ValueError(f"Counts sum to {self.counts.total}, expected {self.total}")

    def is_editable(self, name: str) -> bool:
        """Locked fields, and every field once the lock limit is reached, are read-only."""
        return name not in self.locked and len(self.locked) < config.MAX_LOCKED_FIELDS

    def set_count(self, name: str, value: int) -> 'InverseDemoState':
        """
        Apply a slider edit.

        Returns a new state: either fully adjusted to the total, or the
        same counts with last_edit_accepted=False.
        """
        if not self.is_editable(name):
            return replace(self, last_edit_accepted=False)

        counts, accepted = adjust_counts_to_total(self.counts, name, value,
                                                  self.locked, self.total)
        return replace(self, counts=counts, last_edit_accepted=accepted)

    def toggle_lock(self, name: str) -> 'InverseDemoState':
        if name not in config.COUNT_FIELDS:
            raise ValueError(f"Unknown field '{name}'")
        locked = self.locked - {name} if name in self.locked else self.locked | {name}
        return replace(self, locked=frozenset(locked))


@dataclass(frozen=True)
class InverseDemoResult:
    counts: ConfusionCounts
    scores: np.ndarray
    labels: np.ndarray
    histogram: ScoreHistogram
    roc: ROCCurve
    metrics: ClassificationMetrics


def run_inverse_demo(state: InverseDemoState = InverseDemoState(),
                     score_std: float = config.SIMULATED_SCORE_STD,
                     n_bins: int = config.HISTOGRAM_BINS,
                     verbose: bool = False) -> InverseDemoResult:
    """Simulate scores for the current counts and compute the charts' data."""
    scores, labels = simulate_scores_from_counts(state.counts, score_std)
    roc = roc_curve(labels, scores)
    metrics = classification_metrics(state.counts, auc=roc.auc)

    if verbose:
        c = state.counts
        print(f"Inverse demo: TP={c.tp} FP={c.fp} TN={c.tn} FN={c.fn} "
              f"(locked: {sorted(state.locked) or 'none'})")
        print(f"  simulated AUC={roc.auc:.4f}  precision={metrics.precision:.4f}  "
              f"recall={metrics.recall:.4f}")

    return InverseDemoResult(
        counts=state.counts,
        scores=scores,
        labels=labels,
        histogram=score_histogram(scores, labels, n_bins),
        roc=roc,
        metrics=metrics,
    )
