"""
Gaussian Naive Bayes classifier from scratch.

Implements:
- Binary Gaussian Naive Bayes over continuous features (labels 0 and 1)
- Class priors and per-class, per-feature mean/variance
- Log-space posteriors normalised with the log-sum-exp trick

Naive Bayes assumes features are conditionally independent given the class:
P(y|x1,...,xn) ∝ P(y) * ∏ P(xi|y)
"""

import numpy as np
from typing import Optional

import config


def gaussian_pdf(x, mean, variance):
    """
    Gaussian probability density.

    f(x) = (1 / sqrt(2π σ²)) * exp(-(x - μ)² / (2σ²))
    """
    x = np.asarray(x, dtype=np.float64)
    return np.exp(-(x - mean) ** 2 / (2 * variance)) / np.sqrt(2 * np.pi * variance)


class GaussianNB:
    """
    Gaussian Naive Bayes Classifier for two classes {0, 1}.

    Assumes features follow a Gaussian (normal) distribution within each class:
    P(xi|y) = (1 / sqrt(2π * σ²)) * exp(-(xi - μ)² / (2σ²))

    Prediction:
    P(y=1|x) = exp(L1 - m) / (exp(L0 - m) + exp(L1 - m))
    with Lc = log P(c) + Σ log P(xi|c) and m = max(L0, L1).
    """

    classes_ = np.array(config.CLASS_LABELS)

    def __init__(self, var_floor: float = config.VARIANCE_FLOOR):
        """
        Initialize Gaussian Naive Bayes.

        Args:
            var_floor: Lower bound applied to every per-class feature variance
        """
        self.var_floor = var_floor

        self.class_prior_: Optional[np.ndarray] = None
        self.class_count_: Optional[np.ndarray] = None
        self.theta_: Optional[np.ndarray] = None  # Mean of each feature per class
        self.var_: Optional[np.ndarray] = None    # Variance of each feature per class

    def fit(self, X: np.ndarray, y: np.ndarray) -> 'GaussianNB':
        """
        Fit Gaussian Naive Bayes model.

        Computes:
        - Class priors P(y) from class frequencies
        - Mean μ and population variance σ² of each feature per class,
          with σ² floored at var_floor

        Args:
            X: Training features (n_samples, n_features)
            y: Training labels (n_samples,), each 0 or 1

        Returns:
            self

        Raises:
            ValueError: On labels outside {0, 1} or a class with no samples
        """
        X = np.array(X, dtype=np.float64)
        y = np.array(y).ravel()

        if X.ndim != 2:
            raise ValueError(f"X must be 2-D, got shape {X.shape}")
        if len(X) != len(y):
            raise ValueError(f"X has {len(X)} samples but y has {len(y)}")

        unexpected = set(np.unique(y).tolist()) - set(config.CLASS_LABELS)
        if unexpected:
            raise ValueError(f"Labels must be 0 or 1, got {sorted(unexpected)}")

        n_classes = len(self.classes_)
        n_features = X.shape[1]

        self.class_count_ = np.zeros(n_classes, dtype=int)
        self.theta_ = np.zeros((n_classes, n_features))
        self.var_ = np.zeros((n_classes, n_features))

        for i, cls in enumerate(self.classes_):
            X_cls = X[y == cls]
            if len(X_cls) == 0:
                raise ValueError(f"Class {cls} has no samples; both classes are required")

            self.class_count_[i] = len(X_cls)
            self.theta_[i] = np.mean(X_cls, axis=0)
            self.var_[i] = np.maximum(np.var(X_cls, axis=0), self.var_floor)

        self.class_prior_ = self.class_count_ / len(y)

        return self

    def _check_fitted(self):
        if self.class_prior_ is None:
            raise ValueError("Model not fitted. Call fit() first.")

    def _log_likelihood(self, X: np.ndarray) -> np.ndarray:
        """
        Compute log-likelihood of each class for each sample.

        log P(xi|y) = -0.5 * [log(2π σ²) + (xi - μ)²/σ²]

        Args:
            X: Feature matrix (n_samples, n_features)

        Returns:
            Log-likelihood matrix (n_samples, 2)
        """
        log_likelihood = np.zeros((len(X), len(self.classes_)))

        for i in range(len(self.classes_)):
            mean = self.theta_[i]
            var = self.var_[i]

            log_prob = -0.5 * (np.log(2 * np.pi * var) + (X - mean) ** 2 / var)
            log_likelihood[:, i] = np.sum(log_prob, axis=1)

        return log_likelihood

    def predict_log_proba(self, X: np.ndarray) -> np.ndarray:
        """
        Predict normalised log probabilities.

        log P(y|X) = log P(y) + log P(X|y) - logsumexp

        Args:
            X: Feature matrix

        Returns:
            Log probability matrix (n_samples, 2)
        """
        self._check_fitted()
        X = np.atleast_2d(np.array(X, dtype=np.float64))

        log_posterior = np.log(self.class_prior_) + self._log_likelihood(X)

        # Subtract the max before exponentiating so exp() cannot underflow to 0/0
        max_log = np.max(log_posterior, axis=1, keepdims=True)
        log_sum = max_log + np.log(np.sum(np.exp(log_posterior - max_log),
                                          axis=1, keepdims=True))
        return log_posterior - log_sum

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """
        Predict class probabilities.

        Returns:
            Probability matrix (n_samples, 2); columns follow classes_
        """
        return np.exp(self.predict_log_proba(X))

    def predict_probability(self, X: np.ndarray) -> np.ndarray:
        """Probability of the positive class for each point, shape (n_samples,)."""
        return self.predict_proba(X)[:, 1]

    def predict(self, X: np.ndarray,
                threshold: float = config.DECISION_THRESHOLD) -> np.ndarray:
        """Predict labels: 1 where P(y=1|x) >= threshold."""
        return (self.predict_probability(X) >= threshold).astype(int)

    def score(self, X: np.ndarray, y: np.ndarray) -> float:
        """Calculate accuracy."""
        y_pred = self.predict(X)
        return float(np.mean(y_pred == np.asarray(y)))

    def get_params(self) -> dict:
        """Get model parameters, one record per class."""
        self._check_fitted()
        return {
            int(cls): {
                'prior': float(self.class_prior_[i]),
                'mean': self.theta_[i].tolist(),
                'variance': self.var_[i].tolist(),
            }
            for i, cls in enumerate(self.classes_)
        }
