"""
Inverse Classifier Tests.

Tests for:
- Total-preserving count adjustment (commit-or-reject)
- Score simulation from target counts
- Per-class score histogram
"""

import numpy as np
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from evaluation.metrics import ConfusionCounts
from evaluation.inverse import adjust_counts_to_total, simulate_scores_from_counts, score_histogram

START = ConfusionCounts(tp=70, fp=20, tn=80, fn=30)


def test_adjust_with_one_lock():
    """Raising TP with FN locked takes the surplus from the largest free field."""
    print("=" * 60)
    print("TEST: Count Adjustment")
    print("=" * 60)

    counts, accepted = adjust_counts_to_total(START, 'tp', 100, locked_fields={'fn'}, total=200)
    print(f"  {START} -> {counts} (accepted={accepted})")

    assert accepted
    assert counts == ConfusionCounts(tp=100, fp=20, tn=50, fn=30)
    assert counts.total == 200


def test_adjust_lowering_fills_smallest_first():
    counts, accepted = adjust_counts_to_total(START, 'tp', 0, locked_fields={'fn'}, total=200)

    assert accepted
    assert counts.tp == 0 and counts.fn == 30
    assert (counts.fp, counts.tn) == (85, 85)


def test_adjust_rejected_when_unsatisfiable():
    """If the free fields cannot absorb the change, nothing is applied."""
    print("\n" + "=" * 60)
    print("TEST: Rejected Adjustment")
    print("=" * 60)

    # FN alone can absorb at most 30
    counts, accepted = adjust_counts_to_total(START, 'tp', 150, locked_fields={'fp', 'tn'})
    print(f"  tp=150 with fp, tn locked: accepted={accepted}")
    assert not accepted
    assert counts is START

    # Everything else locked: no room at all
    counts, accepted = adjust_counts_to_total(START, 'tp', 71, locked_fields={'fp', 'tn', 'fn'})
    assert not accepted
    assert counts is START


def test_adjust_exactly_at_capacity():
    counts, accepted = adjust_counts_to_total(START, 'tp', 100, locked_fields={'fp', 'tn'})
    assert accepted
    assert counts == ConfusionCounts(tp=100, fp=20, tn=80, fn=0)


def test_adjust_result_is_all_or_nothing():
    """Every outcome sums to the total or is the untouched input."""
    np.random.seed(2)
    fields = ['tp', 'fp', 'tn', 'fn']
    for _ in range(300):
        field = fields[np.random.randint(4)]
        value = int(np.random.randint(0, 201))
        locked = {f for f in fields if f != field and np.random.random() < 0.4}

        counts, accepted = adjust_counts_to_total(START, field, value, locked, 200)
        if accepted:
            assert counts.total == 200
            assert getattr(counts, field) == value
            for name in locked:
                assert getattr(counts, name) == getattr(START, name)
        else:
            assert counts is START


def test_adjust_invalid_arguments():
    with pytest.raises(ValueError):
        adjust_counts_to_total(START, 'xx', 10)
    with pytest.raises(ValueError):
        adjust_counts_to_total(START, 'tp', 201)
    with pytest.raises(ValueError):
        adjust_counts_to_total(START, 'tp', -1)
    with pytest.raises(ValueError):
        adjust_counts_to_total(START, 'tp', 10, locked_fields={'bogus'})


def test_simulate_scores_from_counts():
    """Shapes, label order and class means tracking TPR / TNR."""
    print("\n" + "=" * 60)
    print("TEST: Score Simulation")
    print("=" * 60)

    np.random.seed(4)
    scores, labels = simulate_scores_from_counts(START, std_dev=0.15)

    assert scores.shape == (200,)
    assert np.all(labels[:100] == 0) and np.all(labels[100:] == 1)

    neg_mean = scores[labels == 0].mean()
    pos_mean = scores[labels == 1].mean()
    print(f"  negative mean={neg_mean:.3f} (target 0.2), positive mean={pos_mean:.3f} (target 0.7)")
    assert abs(neg_mean - 0.2) < 0.05
    assert abs(pos_mean - 0.7) < 0.05


def test_simulate_scores_empty_class():
    scores, labels = simulate_scores_from_counts(ConfusionCounts(tp=10, fp=0, tn=0, fn=5))
    assert len(scores) == 0 and len(labels) == 0


def test_score_histogram():
    scores = np.array([0.0, 0.12, 0.999, 1.0, 1.5, -0.2])
    labels = np.array([1, 0, 1, 0, 1, 0])

    hist = score_histogram(scores, labels, n_bins=20)

    assert len(hist.bin_labels) == 20
    assert hist.bin_labels[0] == "0.00" and hist.bin_labels[-1] == "0.95"
    assert hist.positive.sum() == 3 and hist.negative.sum() == 3
    assert hist.positive[0] == 1 and hist.positive[19] == 2
    assert hist.negative[0] == 1 and hist.negative[2] == 1 and hist.negative[19] == 1

    with pytest.raises(ValueError):
        score_histogram(scores, labels, n_bins=0)


if __name__ == "__main__":
    test_adjust_with_one_lock()
    test_adjust_lowering_fills_smallest_first()
    test_adjust_rejected_when_unsatisfiable()
    test_adjust_exactly_at_capacity()
    test_adjust_result_is_all_or_nothing()
    test_adjust_invalid_arguments()
    test_simulate_scores_from_counts()
    test_simulate_scores_empty_class()
    test_score_histogram()
    print("\nAll inverse classifier tests passed!")
