"""Evaluation metrics: matrix residuals, sample moments, throughput, memory."""

import numpy as np
import psutil

from ..linalg.blas import rank1_update


def abs_residual(a: np.ndarray, b: np.ndarray) -> float:
    """Summed absolute elementwise difference between two arrays of equal shape.

    NaN in either input propagates to the result.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")
    return float(np.sum(np.abs(a - b)))


def is_orthogonal(Q: np.ndarray, tol: float = 1e-8) -> bool:
    """True if Q Q^T equals the identity within a summed absolute residual of tol."""
    Q = np.asarray(Q, dtype=np.float64)
    if Q.ndim != 2 or Q.shape[0] != Q.shape[1]:
        return False
    return abs_residual(Q @ Q.T, np.eye(Q.shape[0])) < tol


def is_symmetric(S: np.ndarray, tol: float = 1e-8) -> bool:
    S = np.asarray(S, dtype=np.float64)
    if S.ndim != 2 or S.shape[0] != S.shape[1]:
        return False
    return abs_residual(S, S.T) < tol


def has_finite_factor(L: np.ndarray) -> bool:
    """True if a Cholesky factor holds no NaN/inf entries."""
    return bool(np.all(np.isfinite(L)))


def sample_mean(X: np.ndarray) -> np.ndarray:
    """Mean of the rows of X, shape (n, d) -> (d,)."""
    X = np.asarray(X, dtype=np.float64)
    if X.shape[0] == 0:
        raise ValueError("Cannot compute statistics of an empty sample")
    return X.mean(axis=0)


def sample_second_moment(X: np.ndarray) -> np.ndarray:
    """Uncentered second moment (1/n) sum_i x_i x_i^T of the rows of X.

    For zero-mean samples this estimates the covariance.

    Args:
        X: Samples of shape (n, d).

    Returns:
        Array of shape (d, d).
    """
    X = np.asarray(X, dtype=np.float64)
    n, d = X.shape
    if n == 0:
        raise ValueError("Cannot compute statistics of an empty sample")
    M = np.zeros((d, d), dtype=np.float64, order="F")
    for i in range(n):
        M = rank1_update(1.0 / n, X[i], X[i], M)
    return np.ascontiguousarray(M)


def draws_per_second(n_draws: int, elapsed_seconds: float) -> float:
    """Compute sampler throughput.

    Args:
        n_draws: Number of samples drawn.
        elapsed_seconds: Wall-clock time in seconds.

    Returns:
        Draws per second.
    """
    if elapsed_seconds <= 0:
        return float("inf")
    return n_draws / elapsed_seconds


def memory_usage_bytes() -> int:
    """Return current process RSS memory in bytes."""
    return psutil.Process().memory_info().rss
