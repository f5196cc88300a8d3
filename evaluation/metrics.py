"""
Binary Classification Metrics - Implemented FROM SCRATCH.

This module provides the metrics shown by the classifier demos:

Confusion Matrix:
- TP / FP / TN / FN counts at a fixed decision threshold

Derived Rates:
- Accuracy, Precision, Recall, Specificity, F1-Score

ROC-AUC:
- ROC curve by threshold sweep over scores sorted in descending order
- AUC by the trapezoidal rule
"""

import numpy as np
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, asdict

import config


# =============================================================================
# CONFUSION MATRIX
# =============================================================================

@dataclass(frozen=True)
class ConfusionCounts:
    """Counts of the four binary outcomes. All counts are non-negative."""
    tp: int = 0
    fp: int = 0
    tn: int = 0
    fn: int = 0

    def __post_init__(self):
        for name in config.COUNT_FIELDS:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.tn + self.fn

    @property
    def positives(self) -> int:
        """Actual positives (tp + fn)."""
        return self.tp + self.fn

    @property
    def negatives(self) -> int:
        """Actual negatives (tn + fp)."""
        return self.tn + self.fp

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def replace(self, **changes) -> 'ConfusionCounts':
        values = self.as_dict()
        values.update(changes)
        return ConfusionCounts(**values)

    def as_matrix(self) -> np.ndarray:
        """2x2 matrix, rows = actual (neg, pos), columns = predicted (neg, pos)."""
        return np.array([[self.tn, self.fp],
                         [self.fn, self.tp]], dtype=np.int64)


def confusion_counts(labels: np.ndarray, scores: np.ndarray,
                     threshold: float = config.DECISION_THRESHOLD) -> ConfusionCounts:
    """
    Count outcomes with `score >= threshold` predicted positive.

    Parameters
    ----------
    labels : np.ndarray
        Ground truth labels (0 or 1).
    scores : np.ndarray
        Positive-class scores.
    threshold : float
        Decision threshold.

    Returns
    -------
    ConfusionCounts
        tp + fp + tn + fn == len(labels).

    Mathematical Definition
    -----------------------
    TP = |{i : y_i = 1 AND s_i >= t}|,  FP = |{i : y_i = 0 AND s_i >= t}|
    TN = |{i : y_i = 0 AND s_i <  t}|,  FN = |{i : y_i = 1 AND s_i <  t}|
    """
    labels = np.asarray(labels).ravel()
    scores = np.asarray(scores, dtype=np.float64).ravel()

    if len(labels) != len(scores):
        raise ValueError(f"labels has {len(labels)} entries but scores has {len(scores)}")

    predicted = scores >= threshold
    actual = labels == 1

    return ConfusionCounts(
        tp=int(np.sum(predicted & actual)),
        fp=int(np.sum(predicted & ~actual)),
        tn=int(np.sum(~predicted & ~actual)),
        fn=int(np.sum(~predicted & actual)),
    )


# =============================================================================
# DERIVED RATES
# =============================================================================

def _safe_divide(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


@dataclass(frozen=True)
class ClassificationMetrics:
    """Rates derived from a confusion matrix (plus AUC when known)."""
    accuracy: float
    precision: float
    recall: float
    specificity: float
    f1: float
    auc: Optional[float] = None

    def as_dict(self) -> Dict[str, float]:
        """Metrics keyed by display name, in chart order."""
        values = {
            'AUC': self.auc,
            'Accuracy': self.accuracy,
            'Precision': self.precision,
            'Recall': self.recall,
            'Specificity': self.specificity,
            'F1-Score': self.f1,
        }
        return {name: values[name] for name in config.METRIC_NAMES
                if values[name] is not None}


def classification_metrics(counts: ConfusionCounts,
                           auc: Optional[float] = None) -> ClassificationMetrics:
    """
    Compute derived rates from confusion counts.

    Every rate is 0 when its denominator is 0.

    Mathematical Definition
    -----------------------
    Precision   = TP / (TP + FP)
    Recall      = TP / (TP + FN)
    Specificity = TN / (TN + FP)
    F1          = 2 * Precision * Recall / (Precision + Recall)
    Accuracy    = (TP + TN) / (TP + TN + FP + FN)
    """
    precision = _safe_divide(counts.tp, counts.tp + counts.fp)
    recall = _safe_divide(counts.tp, counts.tp + counts.fn)
    specificity = _safe_divide(counts.tn, counts.tn + counts.fp)
    f1 = _safe_divide(2 * precision * recall, precision + recall)
    accuracy = _safe_divide(counts.tp + counts.tn, counts.total)

    return ClassificationMetrics(
        accuracy=accuracy,
        precision=precision,
        recall=recall,
        specificity=specificity,
        f1=f1,
        auc=auc,
    )


# =============================================================================
# ROC-AUC METRICS
# =============================================================================

@dataclass(frozen=True)
class ROCCurve:
    """ROC points ordered by decreasing threshold, and the area under them."""
    fpr: np.ndarray
    tpr: np.ndarray
    auc: float

    @property
    def points(self) -> List[Tuple[float, float]]:
        return [(float(f), float(t)) for f, t in zip(self.fpr, self.tpr)]


def chance_line() -> ROCCurve:
    """The diagonal of a random classifier."""
    return ROCCurve(fpr=np.array([0.0, 1.0]), tpr=np.array([0.0, 1.0]), auc=0.5)


def roc_curve(labels: np.ndarray, scores: np.ndarray) -> ROCCurve:
    """
    Compute the ROC curve and its AUC from scratch.

    Parameters
    ----------
    labels : np.ndarray
        Binary ground truth labels.
    scores : np.ndarray
        Scores for the positive class.

    Returns
    -------
    ROCCurve
        One point per sample after the (0, 0) origin. When only one class
        is present, the chance line with AUC 0.5.

    Mathematical Definition
    -----------------------
    Sort samples by decreasing score. Walking the sorted list, each sample
    lowers the threshold past itself:
        TPR_k = TP_k / P,  FPR_k = FP_k / N
    AUC = Σ (FPR_k - FPR_{k-1}) * (TPR_k + TPR_{k-1}) / 2
    """
    labels = np.asarray(labels).ravel()
    scores = np.asarray(scores, dtype=np.float64).ravel()

    if len(labels) != len(scores):
        raise ValueError(f"labels has {len(labels)} entries but scores has {len(scores)}")

    is_positive = labels == 1
    total_pos = int(np.sum(is_positive))
    total_neg = len(labels) - total_pos

    if total_pos == 0 or total_neg == 0:
        return chance_line()

    # Stable sort on the negated score keeps input order among ties
    order = np.argsort(-scores, kind='stable')
    sorted_pos = is_positive[order]

    tp = np.cumsum(sorted_pos)
    fp = np.cumsum(~sorted_pos)

    tpr = np.concatenate([[0.0], tp / total_pos])
    fpr = np.concatenate([[0.0], fp / total_neg])

    # Trapezoidal rule between consecutive points
    auc = 0.0
    for i in range(1, len(fpr)):
        auc += (fpr[i] - fpr[i - 1]) * (tpr[i] + tpr[i - 1]) / 2

    return ROCCurve(fpr=fpr, tpr=tpr, auc=float(auc))


def roc_auc_score(labels: np.ndarray, scores: np.ndarray) -> float:
    """Area under the ROC curve; 0.5 when only one class is present."""
    return roc_curve(labels, scores).auc


def evaluate_scores(labels: np.ndarray, scores: np.ndarray,
                    threshold: float = config.DECISION_THRESHOLD
                    ) -> Tuple[ConfusionCounts, ROCCurve, ClassificationMetrics]:
    """Confusion counts, ROC curve and derived metrics for one set of scores."""
    counts = confusion_counts(labels, scores, threshold)
    roc = roc_curve(labels, scores)
    return counts, roc, classification_metrics(counts, auc=roc.auc)
