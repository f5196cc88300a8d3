"""
Confusion Matrix and ROC-AUC Tests.

Tests for:
- Confusion counts at a threshold
- Derived rates (zero-denominator handling, F1 identity)
- ROC curve shape and trapezoidal AUC
- Degenerate single-class input
"""

import numpy as np
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from evaluation.metrics import (
    ConfusionCounts,
    classification_metrics,
    confusion_counts,
    evaluate_scores,
    roc_auc_score,
    roc_curve,
)


def test_confusion_counts():
    print("=" * 60)
    print("TEST: Confusion Counts")
    print("=" * 60)

    labels = np.array([1, 1, 1, 0, 0, 0, 1, 0])
    scores = np.array([0.9, 0.5, 0.2, 0.7, 0.1, 0.4, 0.6, 0.5])

    counts = confusion_counts(labels, scores, threshold=0.5)
    print(f"  {counts}")

    # score >= threshold counts as positive
    assert counts == ConfusionCounts(tp=3, fp=2, tn=2, fn=1)
    np.testing.assert_array_equal(counts.as_matrix(), [[2, 2], [1, 3]])


def test_confusion_identity_any_threshold():
    """tp + fp + tn + fn equals the number of samples at every threshold."""
    np.random.seed(3)
    labels = np.random.randint(0, 2, 300)
    scores = np.random.random(300)

    for threshold in [-1.0, 0.0, 0.25, 0.5, 0.75, 1.0, 2.0]:
        counts = confusion_counts(labels, scores, threshold)
        assert counts.total == 300
        assert counts.positives == int(labels.sum())


def test_counts_reject_negative():
    with pytest.raises(ValueError):
        ConfusionCounts(tp=-1, fp=0, tn=0, fn=0)


def test_derived_rates():
    counts = ConfusionCounts(tp=70, fp=20, tn=80, fn=30)
    m = classification_metrics(counts)

    assert m.accuracy == pytest.approx(150 / 200)
    assert m.precision == pytest.approx(70 / 90)
    assert m.recall == pytest.approx(70 / 100)
    assert m.specificity == pytest.approx(80 / 100)
    assert m.auc is None
    assert 'AUC' not in m.as_dict()


def test_zero_denominators():
    m = classification_metrics(ConfusionCounts(tp=0, fp=0, tn=0, fn=0))
    assert (m.accuracy, m.precision, m.recall, m.specificity, m.f1) == (0.0, 0.0, 0.0, 0.0, 0.0)

    m = classification_metrics(ConfusionCounts(tp=0, fp=0, tn=5, fn=5))
    assert m.precision == 0.0
    assert m.f1 == 0.0
    assert m.specificity == 1.0


def test_f1_identity():
    """F1 from precision/recall equals 2tp / (2tp + fp + fn)."""
    np.random.seed(11)
    for _ in range(200):
        tp, fp, tn, fn = (int(v) for v in np.random.randint(0, 50, 4))
        if tp + fp == 0 or tp + fn == 0:
            continue
        m = classification_metrics(ConfusionCounts(tp, fp, tn, fn))
        expected = 2 * tp / (2 * tp + fp + fn)
        assert m.f1 == pytest.approx(expected, abs=1e-12)


def test_roc_perfect_and_inverted():
    labels = np.array([0, 0, 1, 1])
    assert roc_auc_score(labels, np.array([0.1, 0.2, 0.8, 0.9])) == pytest.approx(1.0)
    assert roc_auc_score(labels, np.array([0.9, 0.8, 0.2, 0.1])) == pytest.approx(0.0)


def test_roc_known_value():
    """AUC equals the fraction of correctly ordered (pos, neg) pairs."""
    labels = np.array([1, 0, 1, 0, 1, 0])
    scores = np.array([0.9, 0.8, 0.7, 0.6, 0.5, 0.1])
    # Pairs: 0.9 beats all 3 negatives, 0.7 beats 2, 0.5 beats 1 -> 6 / 9
    assert roc_auc_score(labels, scores) == pytest.approx(6 / 9)


def test_roc_monotone_and_bounded():
    """Random inputs: curve starts at (0,0), ends at (1,1), never decreases."""
    print("\n" + "=" * 60)
    print("TEST: ROC Monotonicity")
    print("=" * 60)

    np.random.seed(5)
    for trial in range(50):
        n = np.random.randint(2, 200)
        labels = np.random.randint(0, 2, n)
        labels[0], labels[1] = 0, 1
        scores = np.round(np.random.random(n), 1)  # plenty of ties

        roc = roc_curve(labels, scores)
        assert roc.points[0] == (0.0, 0.0)
        assert roc.fpr[-1] == pytest.approx(1.0)
        assert roc.tpr[-1] == pytest.approx(1.0)
        assert np.all(np.diff(roc.fpr) >= 0)
        assert np.all(np.diff(roc.tpr) >= 0)
        assert len(roc.fpr) == n + 1
        assert 0.0 <= roc.auc <= 1.0

    print(f"  {trial + 1} random curves checked")


def test_roc_degenerate_single_class():
    """Only one class present: chance diagonal with AUC exactly 0.5."""
    for labels in (np.ones(5, dtype=int), np.zeros(5, dtype=int)):
        roc = roc_curve(labels, np.linspace(0, 1, 5))
        assert roc.auc == 0.5
        assert roc.points == [(0.0, 0.0), (1.0, 1.0)]


def test_evaluate_scores():
    labels = np.array([0, 0, 1, 1])
    scores = np.array([0.2, 0.6, 0.4, 0.9])

    counts, roc, metrics = evaluate_scores(labels, scores)
    assert counts == ConfusionCounts(tp=1, fp=1, tn=1, fn=1)
    assert roc.auc == pytest.approx(0.75)
    assert metrics.auc == roc.auc
    assert list(metrics.as_dict()) == ['AUC', 'Accuracy', 'Precision',
                                       'Recall', 'Specificity', 'F1-Score']


if __name__ == "__main__":
    test_confusion_counts()
    test_confusion_identity_any_threshold()
    test_counts_reject_negative()
    test_derived_rates()
    test_zero_denominators()
    test_f1_identity()
    test_roc_perfect_and_inverted()
    test_roc_known_value()
    test_roc_monotone_and_bounded()
    test_roc_degenerate_single_class()
    test_evaluate_scores()
    print("\nAll confusion metric tests passed!")
