"""
Linear Algebra and Sampling Tests.

Tests for:
- Box-Muller Gaussian sampling
- Vandermonde / transpose / multiply helpers
- Gaussian elimination with partial pivoting
"""

import numpy as np
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ml_from_scratch.random_gaussian import (
    random_gaussian,
    random_gaussian_array,
    generate_two_class_data,
)
from ml_from_scratch.linear_algebra import vandermonde, transpose, multiply, solve_linear_system


def test_random_gaussian_moments():
    """Sample mean and std of many draws match the requested parameters."""
    print("=" * 60)
    print("TEST: Box-Muller Sampling")
    print("=" * 60)

    np.random.seed(42)
    draws = np.array([random_gaussian(3.0, 2.0) for _ in range(20000)])
    print(f"  mean={draws.mean():.4f}  std={draws.std():.4f}")

    assert abs(draws.mean() - 3.0) < 0.1
    assert abs(draws.std() - 2.0) < 0.1

    vec = random_gaussian_array(-1.0, 0.5, 20000)
    assert vec.shape == (20000,)
    assert np.all(np.isfinite(vec))
    assert abs(vec.mean() + 1.0) < 0.05
    assert abs(vec.std() - 0.5) < 0.05


def test_random_gaussian_array_empty_and_invalid():
    assert random_gaussian_array(0.0, 1.0, 0).shape == (0,)
    with pytest.raises(ValueError):
        random_gaussian_array(0.0, 1.0, -1)


def test_generate_two_class_data():
    """Two clouds, negatives first, centred at -/+ separation/2."""
    print("\n" + "=" * 60)
    print("TEST: Two-Class Data Generation")
    print("=" * 60)

    np.random.seed(0)
    X, y = generate_two_class_data(separation=6.0, std_dev=1.0, n_per_class=500)

    assert X.shape == (1000, 2)
    assert y.shape == (1000,)
    assert np.all(y[:500] == 0) and np.all(y[500:] == 1)

    neg_mean = X[y == 0].mean(axis=0)
    pos_mean = X[y == 1].mean(axis=0)
    print(f"  class 0 mean: {neg_mean}")
    print(f"  class 1 mean: {pos_mean}")
    assert abs(neg_mean[0] + 3.0) < 0.2
    assert abs(pos_mean[0] - 3.0) < 0.2
    assert abs(neg_mean[1]) < 0.2 and abs(pos_mean[1]) < 0.2

    with pytest.raises(ValueError):
        generate_two_class_data(1.0, 1.0, n_per_class=0)


def test_vandermonde():
    V = vandermonde(np.array([1.0, 2.0, 3.0]), 2)
    expected = np.array([[1, 1, 1],
                         [1, 2, 4],
                         [1, 3, 9]], dtype=float)
    np.testing.assert_array_equal(V, expected)


def test_transpose_and_multiply():
    A = np.array([[1.0, 2.0, 3.0],
                  [4.0, 5.0, 6.0]])
    np.testing.assert_array_equal(transpose(A), A.T)

    B = np.array([[1.0, 0.0],
                  [0.0, 1.0],
                  [1.0, 1.0]])
    np.testing.assert_allclose(multiply(A, B), A @ B)

    v = np.array([1.0, -1.0, 2.0])
    result = multiply(A, v)
    assert result.shape == (2,)
    np.testing.assert_allclose(result, A @ v)

    with pytest.raises(ValueError):
        multiply(A, A)


def test_solve_linear_system():
    """Solution matches numpy on a system that needs row swaps."""
    print("\n" + "=" * 60)
    print("TEST: Gaussian Elimination")
    print("=" * 60)

    # Zero in the first pivot position forces a swap
    A = np.array([[0.0, 2.0, 1.0],
                  [1.0, -2.0, -3.0],
                  [-1.0, 1.0, 2.0]])
    b = np.array([-8.0, 0.0, 3.0])

    x = solve_linear_system(A, b)
    print(f"  x = {x}")
    np.testing.assert_allclose(x, np.linalg.solve(A, b), atol=1e-12)

    # Input arrays are left untouched
    assert A[0, 0] == 0.0
    assert b[0] == -8.0


def test_solve_singular_system():
    A = np.array([[1.0, 2.0],
                  [2.0, 4.0]])
    with pytest.raises(np.linalg.LinAlgError):
        solve_linear_system(A, np.array([1.0, 2.0]))


if __name__ == "__main__":
    test_random_gaussian_moments()
    test_random_gaussian_array_empty_and_invalid()
    test_generate_two_class_data()
    test_vandermonde()
    test_transpose_and_multiply()
    test_solve_linear_system()
    test_solve_singular_system()
    print("\nAll linear algebra tests passed!")
