"""
Gaussian Naive Bayes Tests.

Tests for:
- Per-class priors, means and floored variances
- Log-space posteriors (normalisation, no underflow)
- Label validation and empty-class guard
- AUC on separated vs. overlapping clouds
"""

import numpy as np
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ml_from_scratch.naive_bayes import GaussianNB, gaussian_pdf
from ml_from_scratch.random_gaussian import generate_two_class_data
from evaluation.metrics import roc_auc_score


def test_fit_parameters():
    """Priors, means and population variances per class."""
    print("=" * 60)
    print("TEST: GaussianNB Parameters")
    print("=" * 60)

    X = np.array([[0.0, 1.0],
                  [2.0, 3.0],
                  [10.0, 10.0],
                  [12.0, 10.0],
                  [14.0, 10.0]])
    y = np.array([0, 0, 1, 1, 1])

    model = GaussianNB(var_floor=1e-9).fit(X, y)
    params = model.get_params()
    print(f"  params: {params}")

    assert params[0]['prior'] == pytest.approx(0.4)
    assert params[1]['prior'] == pytest.approx(0.6)
    assert params[0]['mean'] == pytest.approx([1.0, 2.0])
    assert params[1]['mean'] == pytest.approx([12.0, 10.0])
    assert params[0]['variance'] == pytest.approx([1.0, 1.0])
    # Constant feature is floored instead of becoming 0
    assert params[1]['variance'] == pytest.approx([8.0 / 3.0, 1e-9])


def test_posteriors_are_normalised():
    np.random.seed(1)
    X, y = generate_two_class_data(separation=3.0, std_dev=1.5, n_per_class=100)
    model = GaussianNB().fit(X, y)

    proba = model.predict_proba(X)
    assert proba.shape == (200, 2)
    np.testing.assert_allclose(proba.sum(axis=1), 1.0, atol=1e-12)

    p1 = model.predict_probability(X)
    assert p1.shape == (200,)
    assert np.all((p1 >= 0) & (p1 <= 1))
    np.testing.assert_array_equal(model.predict(X), (p1 >= 0.5).astype(int))


def test_far_points_do_not_underflow():
    """Points far from both classes still get finite, normalised posteriors."""
    # Equal variances, means at x = -1 and x = +1
    X = np.array([[-2.0, -1.0], [0.0, 1.0], [0.0, -1.0], [2.0, 1.0]])
    y = np.array([0, 0, 1, 1])
    model = GaussianNB().fit(X, y)

    far = np.array([[500.0, 0.0], [-500.0, 0.0]])
    proba = model.predict_proba(far)
    assert np.all(np.isfinite(proba))
    np.testing.assert_allclose(proba.sum(axis=1), 1.0)
    assert proba[0, 1] > 0.99
    assert proba[1, 0] > 0.99


def test_label_validation():
    X = np.zeros((4, 2))
    with pytest.raises(ValueError):
        GaussianNB().fit(X, np.array([0, 1, 2, 1]))

    # Only one class present
    with pytest.raises(ValueError):
        GaussianNB().fit(X + np.arange(4)[:, None], np.array([1, 1, 1, 1]))

    with pytest.raises(ValueError):
        GaussianNB().predict_proba(X)


def test_gaussian_pdf():
    assert gaussian_pdf(0.0, 0.0, 1.0) == pytest.approx(1 / np.sqrt(2 * np.pi))
    assert gaussian_pdf(2.0, 2.0, 4.0) == pytest.approx(1 / np.sqrt(8 * np.pi))


def test_auc_separated_vs_overlapping():
    """Well separated clouds give AUC near 1, identical clouds near 0.5."""
    print("\n" + "=" * 60)
    print("TEST: AUC vs. Class Overlap")
    print("=" * 60)

    np.random.seed(7)
    X, y = generate_two_class_data(separation=10.0, std_dev=1.0, n_per_class=100)
    auc_separated = roc_auc_score(y, GaussianNB().fit(X, y).predict_probability(X))
    print(f"  separation=10, std=1: AUC={auc_separated:.4f}")
    assert auc_separated > 0.99

    X, y = generate_two_class_data(separation=0.0, std_dev=5.0, n_per_class=500)
    auc_overlap = roc_auc_score(y, GaussianNB().fit(X, y).predict_probability(X))
    print(f"  separation=0,  std=5: AUC={auc_overlap:.4f}")
    assert 0.35 < auc_overlap < 0.7


if __name__ == "__main__":
    test_fit_parameters()
    test_posteriors_are_normalised()
    test_far_points_do_not_underflow()
    test_label_validation()
    test_gaussian_pdf()
    test_auc_separated_vs_overlapping()
    print("\nAll Naive Bayes tests passed!")
