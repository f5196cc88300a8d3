"""
Linear algebra primitives for least-squares fitting.

Implements:
- Vandermonde matrix construction
- Transpose and matrix product
- Gaussian elimination with partial pivoting + back substitution

These are enough to solve the normal equations (V^T V) β = V^T y for
polynomial regression without np.linalg.solve.
"""

import numpy as np


def vandermonde(X: np.ndarray, degree: int) -> np.ndarray:
    """
    Build the Vandermonde matrix V[i, j] = X[i] ** j for j = 0..degree.

    Args:
        X: Input values of shape (n_samples,)
        degree: Polynomial degree (>= 0)

    Returns:
        Matrix of shape (n_samples, degree + 1)
    """
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")

    X = np.asarray(X, dtype=np.float64).ravel()
    V = np.empty((len(X), degree + 1), dtype=np.float64)
    for j in range(degree + 1):
        V[:, j] = X ** j
    return V


def transpose(A: np.ndarray) -> np.ndarray:
    """Return A^T as a new 2-D array."""
    A = np.atleast_2d(np.asarray(A, dtype=np.float64))
    rows, cols = A.shape
    result = np.empty((cols, rows), dtype=np.float64)
    for i in range(rows):
        result[:, i] = A[i, :]
    return result


def multiply(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """
    Matrix product A @ B.

    B may be 1-D, in which case it is treated as a column vector and a
    1-D result is returned.
    """
    A = np.atleast_2d(np.asarray(A, dtype=np.float64))
    B = np.asarray(B, dtype=np.float64)
    vector = B.ndim == 1
    if vector:
        B = B.reshape(-1, 1)

    if A.shape[1] != B.shape[0]:
        raise ValueError(f"Shapes not aligned: {A.shape} @ {B.shape}")

    result = np.zeros((A.shape[0], B.shape[1]), dtype=np.float64)
    for i in range(A.shape[0]):
        for j in range(B.shape[1]):
            result[i, j] = np.dot(A[i, :], B[:, j])

    return result.ravel() if vector else result


def solve_linear_system(A: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Solve A x = b with Gaussian elimination and partial pivoting.

    At each step the row with the largest absolute value in the pivot
    column is swapped into the pivot row, then the entries below the
    pivot are eliminated. Back substitution recovers x.

    Args:
        A: Square matrix of shape (n, n)
        b: Right-hand side of shape (n,) or (n, 1)

    Returns:
        Solution vector of shape (n,)

    Raises:
        np.linalg.LinAlgError: If the matrix is singular
    """
    A = np.asarray(A, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64).ravel()
    n = A.shape[0]

    if A.ndim != 2 or A.shape[1] != n:
        raise ValueError(f"A must be square, got shape {A.shape}")
    if len(b) != n:
        raise ValueError(f"b has length {len(b)}, expected {n}")

    # Augmented matrix [A | b]
    M = np.hstack([A, b.reshape(-1, 1)])

    # Forward elimination
    for i in range(n):
        max_row = i + int(np.argmax(np.abs(M[i:, i])))
        if M[max_row, i] == 0.0 or not np.isfinite(M[max_row, i]):
            raise np.linalg.LinAlgError("Singular matrix")

        if max_row != i:
            M[[i, max_row]] = M[[max_row, i]]

        for k in range(i + 1, n):
            factor = M[k, i] / M[i, i]
            M[k, i:] -= factor * M[i, i:]

    # Back substitution
    x = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        x[i] = (M[i, n] - np.dot(M[i, i + 1:n], x[i + 1:n])) / M[i, i]

    if not np.all(np.isfinite(x)):
        raise np.linalg.LinAlgError("Singular matrix")

    return x
