"""
Direct classifier demo: two Gaussian clouds scored by Gaussian Naive Bayes.

Pipeline (recomputed from scratch on every parameter change):
    (separation, std_dev) -> samples -> GaussianNB -> scores
        -> ROC/AUC, confusion counts at 0.5, derived rates
"""

import numpy as np
from dataclasses import dataclass

import config
from ml_from_scratch.naive_bayes import GaussianNB
from ml_from_scratch.random_gaussian import generate_two_class_data
from evaluation.metrics import ConfusionCounts, ROCCurve, ClassificationMetrics, evaluate_scores


def _check_range(name: str, value: float, bounds) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


@dataclass(frozen=True)
class ClassifierDemoState:
    """Slider values of the classifier page."""
    separation: float = config.DEFAULT_SEPARATION
    std_dev: float = config.DEFAULT_STD_DEV
    n_per_class: int = config.N_SAMPLES_PER_CLASS
    threshold: float = config.DECISION_THRESHOLD

    def __post_init__(self):
        _check_range("separation", self.separation, config.SEPARATION_RANGE)
        _check_range("std_dev", self.std_dev, config.STD_DEV_RANGE)
        if self.n_per_class < 1:
            raise ValueError(f"n_per_class must be >= 1, got {self.n_per_class}")


@dataclass(frozen=True)
class ClassifierDemoResult:
    """Everything the charts need for one recomputation."""
    X: np.ndarray
    y: np.ndarray
    model_params: dict
    scores: np.ndarray
    counts: ConfusionCounts
    roc: ROCCurve
    metrics: ClassificationMetrics

    def points_by_class(self, label: int) -> np.ndarray:
        return self.X[self.y == label]


def run_classifier_demo(state: ClassifierDemoState = ClassifierDemoState(),
                        verbose: bool = False) -> ClassifierDemoResult:
    """Generate data, fit the classifier on it, and score the same points."""
    X, y = generate_two_class_data(state.separation, state.std_dev, state.n_per_class)

    model = GaussianNB(var_floor=config.VARIANCE_FLOOR).fit(X, y)
    scores = model.predict_probability(X)

    counts, roc, metrics = evaluate_scores(y, scores, state.threshold)

    if verbose:
        print(f"Classifier demo: separation={state.separation:.1f}, "
              f"std_dev={state.std_dev:.1f}, n={len(y)}")
        print(f"  AUC={roc.auc:.4f}  accuracy={metrics.accuracy:.4f}  F1={metrics.f1:.4f}")

    return ClassifierDemoResult(
        X=X,
        y=y,
        model_params=model.get_params(),
        scores=scores,
        counts=counts,
        roc=roc,
        metrics=metrics,
    )
