"""
Polynomial Regression from scratch using the Normal Equation.

Fits y ≈ β0 + β1 x + ... + βd x^d by least squares:
    V = Vandermonde(X, d)
    (V^T V) β = V^T y

The system is solved with Gaussian elimination (partial pivoting), which is
adequate for degrees 1-10 and a few hundred points. It is not meant for
ill-conditioned or large-scale problems.
"""

import numpy as np
from typing import Optional, List
from dataclasses import dataclass

import config
from .linear_algebra import vandermonde, transpose, multiply, solve_linear_system


@dataclass(frozen=True)
class RegressionStatistics:
    """Goodness-of-fit statistics for a fitted polynomial."""
    r2: float
    adjusted_r2: float
    mse: float
    rmse: float
    mae: float
    residuals: np.ndarray

    def as_dict(self) -> dict:
        return {
            'r2': self.r2,
            'adjusted_r2': self.adjusted_r2,
            'mse': self.mse,
            'rmse': self.rmse,
            'mae': self.mae,
        }


@dataclass(frozen=True)
class ConfidenceBand:
    """Pointwise lower/upper band around the fitted curve."""
    lower: np.ndarray
    upper: np.ndarray

    def as_records(self) -> List[dict]:
        return [{'lower': float(lo), 'upper': float(up)}
                for lo, up in zip(self.lower, self.upper)]


def fit_polynomial(X: np.ndarray, y: np.ndarray, degree: int) -> Optional[np.ndarray]:
    """
    Fit polynomial coefficients [β0, β1, ..., βdegree].

    Args:
        X: Input values (n_samples,)
        y: Targets (n_samples,)
        degree: Polynomial degree

    Returns:
        Coefficient vector of length degree + 1, or None when there are
        fewer than degree + 1 points or the normal equations are singular.
    """
    X = np.asarray(X, dtype=np.float64).ravel()
    y = np.asarray(y, dtype=np.float64).ravel()

    if len(X) != len(y):
        raise ValueError(f"X has {len(X)} values but y has {len(y)}")
    if len(X) < degree + 1:
        return None

    V = vandermonde(X, degree)
    Vt = transpose(V)
    VtV = multiply(Vt, V)
    Vty = multiply(Vt, y)

    try:
        return solve_linear_system(VtV, Vty)
    except np.linalg.LinAlgError:
        return None


def predict_polynomial(X: np.ndarray, coefficients: Optional[np.ndarray]) -> np.ndarray:
    """
    Evaluate the polynomial at each x with Horner's scheme.

    Missing coefficients (no fit) evaluate to zeros.
    """
    X = np.asarray(X, dtype=np.float64).ravel()
    if coefficients is None:
        return np.zeros_like(X)

    y = np.zeros_like(X)
    for beta in reversed(np.asarray(coefficients, dtype=np.float64)):
        y = y * X + beta
    return y


def regression_statistics(y_true: np.ndarray, y_pred: np.ndarray,
                          n: int, degree: int) -> RegressionStatistics:
    """
    Calculate R², adjusted R², MSE, RMSE, MAE and residuals.

    R² = 1 - SS_res / SS_tot (0 when SS_tot = 0)
    Adjusted R² = 1 - (1 - R²)(n - 1)/(n - d - 1) when n > d + 1, else R²
    """
    y_true = np.asarray(y_true, dtype=np.float64).ravel()
    y_pred = np.asarray(y_pred, dtype=np.float64).ravel()

    if n <= 0 or len(y_true) == 0:
        return RegressionStatistics(0.0, 0.0, 0.0, 0.0, 0.0, np.array([]))

    residuals = y_true - y_pred
    ss_res = float(np.sum(residuals ** 2))
    ss_tot = float(np.sum((y_true - np.mean(y_true)) ** 2))

    r2 = 1 - ss_res / ss_tot if ss_tot > 0 else 0.0
    if n > degree + 1:
        adjusted_r2 = 1 - (1 - r2) * (n - 1) / (n - degree - 1)
    else:
        adjusted_r2 = r2

    mse = ss_res / n
    return RegressionStatistics(
        r2=float(r2),
        adjusted_r2=float(adjusted_r2),
        mse=mse,
        rmse=float(np.sqrt(mse)),
        mae=float(np.sum(np.abs(residuals)) / n),
        residuals=residuals,
    )


def confidence_band(X: np.ndarray, coefficients: Optional[np.ndarray],
                    residuals: np.ndarray,
                    multiplier: float = config.CONFIDENCE_MULTIPLIER) -> ConfidenceBand:
    """
    Approximate prediction band: predict(x) ± multiplier * σ.

    σ = sqrt(SS_res / max(1, n - degree - 1)), with n the number of residuals.
    This is a rough ±2σ band, not a t-distribution interval.
    """
    X = np.asarray(X, dtype=np.float64).ravel()
    if coefficients is None or len(X) == 0:
        zeros = np.zeros_like(X)
        return ConfidenceBand(lower=zeros, upper=zeros.copy())

    residuals = np.asarray(residuals, dtype=np.float64).ravel()
    n = len(residuals)
    degree = len(coefficients) - 1
    sigma = np.sqrt(np.sum(residuals ** 2) / max(1, n - degree - 1))

    y_pred = predict_polynomial(X, coefficients)
    return ConfidenceBand(lower=y_pred - multiplier * sigma,
                          upper=y_pred + multiplier * sigma)


class PolynomialRegression:
    """
    Single-input polynomial regression estimator.

    Wraps fit_polynomial / predict_polynomial / regression_statistics with
    a fit-then-predict interface. If there are not enough points,
    coefficients stay None and is_fitted is False.
    """

    def __init__(self, degree: int = config.DEFAULT_DEGREE):
        """
        Initialize Polynomial Regression.

        Args:
            degree: Polynomial degree, within config.DEGREE_RANGE
        """
        low, high = config.DEGREE_RANGE
        if not low <= degree <= high:
            raise ValueError(f"degree must be in [{low}, {high}], got {degree}")

        self.degree = degree
        self.coefficients: Optional[np.ndarray] = None
        self.n_samples: int = 0
        self._residuals: Optional[np.ndarray] = None

    @property
    def is_fitted(self) -> bool:
        return self.coefficients is not None

    def fit(self, X: np.ndarray, y: np.ndarray) -> 'PolynomialRegression':
        X = np.asarray(X, dtype=np.float64).ravel()
        y = np.asarray(y, dtype=np.float64).ravel()

        self.n_samples = len(X)
        self.coefficients = fit_polynomial(X, y, self.degree)
        self._residuals = y - self.predict(X) if self.is_fitted else None
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        if not self.is_fitted:
            raise ValueError("Model not fitted. Call fit() first.")
        return predict_polynomial(X, self.coefficients)

    def statistics(self, X: np.ndarray, y: np.ndarray) -> RegressionStatistics:
        y = np.asarray(y, dtype=np.float64).ravel()
        return regression_statistics(y, self.predict(X), len(y), self.degree)

    def score(self, X: np.ndarray, y: np.ndarray) -> float:
        """Calculate R² score."""
        return self.statistics(X, y).r2

    def confidence_band(self, X: np.ndarray,
                        multiplier: float = config.CONFIDENCE_MULTIPLIER) -> ConfidenceBand:
        """Band around the curve using the training residuals."""
        if not self.is_fitted:
            raise ValueError("Model not fitted. Call fit() first.")
        return confidence_band(X, self.coefficients, self._residuals, multiplier)
