"""
ML From Scratch - numeric building blocks implemented without sklearn/scipy.

Sampling:
- random_gaussian: Box-Muller normal sampling
- generate_two_class_data: two Gaussian clouds for binary classification

Linear Algebra:
- vandermonde, transpose, multiply
- solve_linear_system: Gaussian elimination with partial pivoting

Classifiers:
- GaussianNB: binary Gaussian Naive Bayes with log-space posteriors

Regressors:
- PolynomialRegression: least-squares polynomial fit via the normal equation
"""

# Sampling
from .random_gaussian import random_gaussian, random_gaussian_array, generate_two_class_data

# Linear algebra
from .linear_algebra import vandermonde, transpose, multiply, solve_linear_system

# Classifiers
from .naive_bayes import GaussianNB, gaussian_pdf

# Regressors
from .polynomial_regression import (
    PolynomialRegression,
    RegressionStatistics,
    ConfidenceBand,
    fit_polynomial,
    predict_polynomial,
    regression_statistics,
    confidence_band,
)

__all__ = [
    # Sampling
    'random_gaussian',
    'random_gaussian_array',
    'generate_two_class_data',

    # Linear algebra
    'vandermonde',
    'transpose',
    'multiply',
    'solve_linear_system',

    # Classifiers
    'GaussianNB',
    'gaussian_pdf',

    # Regressors
    'PolynomialRegression',
    'RegressionStatistics',
    'ConfidenceBand',
    'fit_polynomial',
    'predict_polynomial',
    'regression_statistics',
    'confidence_band',
]
