"""Multivariate normal sampling through a Cholesky factor.

Draws x ~ N(mean, S) by first drawing z ~ N(0, I), then transforming
x = L z + mean, where S = L L^T. Since Cov(L z) = L I L^T = S, the
factorization is done once per (mean, S) pair and every draw costs one
triangular matrix-vector product.
"""

import logging
import numbers

import numpy as np

from ..errors import DimensionMismatch, InvalidDimension
from ..linalg.blas import axpy, cholesky, trmv_lower
from ..rng.source import RandomSource, get_default_source

logger = logging.getLogger(__name__)


class GaussianSampler:
    """Repeatable sampler bound to one mean vector and one Cholesky factor.

    Args:
        mean: Mean vector of shape (d,).
        factor: Lower-triangular Cholesky factor of shape (d, d).
        rng: Source of the standard normal draws.
    """

    def __init__(self, mean: np.ndarray, factor: np.ndarray, rng: RandomSource):
        self._mean = np.asarray(mean, dtype=np.float64)
        self._L = np.asfortranarray(factor, dtype=np.float64)
        self.rng = rng

    @property
    def dim(self) -> int:
        return self._L.shape[0]

    @property
    def mean(self) -> np.ndarray:
        return self._mean.copy()

    @property
    def factor(self) -> np.ndarray:
        """Copy of the lower-triangular factor L (may hold NaN in legacy mode)."""
        return np.array(self._L)

    def sample(self) -> np.ndarray:
        """Draw one sample.

        Returns:
            float64 array of shape (d,).
        """
        z = self.rng.fill(self.dim)
        x = trmv_lower(self._L, z)
        x = axpy(self._mean, x)
        return x

    __call__ = sample

    def sample_n(self, n: int) -> np.ndarray:
        """Draw n consecutive samples.

        Returns:
            float64 array of shape (n, d); row i equals the i-th sample() call.
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 0:
            raise InvalidDimension(f"n must be a non-negative integer, got {n!r}")
        X = np.empty((n, self.dim), dtype=np.float64)
        for i in range(n):
            X[i] = self.sample()
        return X

    def __repr__(self) -> str:
        return f"GaussianSampler(dim={self.dim})"


def _mean_vector(mean, d: int) -> np.ndarray:
    if mean is None or (np.isscalar(mean) and mean == 0):
        return np.zeros(d, dtype=np.float64)
    if np.isscalar(mean):
        raise DimensionMismatch(f"Scalar mean must be 0, got {mean!r}")
    M = np.asarray(mean, dtype=np.float64).reshape(-1)
    if M.shape[0] != d:
        raise DimensionMismatch(
            f"Mean has length {M.shape[0]} but covariance is {d} x {d}"
        )
    return M


def mvnrnd(
    mean,
    covariance: np.ndarray,
    rng: RandomSource | None = None,
    strict: bool = True,
) -> GaussianSampler:
    """Build a sampler for N(mean, covariance).

    Args:
        mean: Mean vector of length d, or 0 / None for the zero mean.
        covariance: Symmetric matrix of shape (d, d).
        rng: Random source for the draws. Defaults to the thread's default source.
        strict: If True, raise NotPositiveSemiDefinite when the covariance
            cannot be factored. If False, the factor (and every sample) holds
            NaN instead, and checking for it is up to the caller.

    Returns:
        GaussianSampler; call it (or its sample() method) for each draw.
    """
    S = np.asarray(covariance, dtype=np.float64)
    if S.ndim != 2 or S.shape[0] != S.shape[1] or S.shape[0] == 0:
        raise InvalidDimension(f"Covariance must be a non-empty square matrix, got shape {S.shape}")
    d = S.shape[0]
    M = _mean_vector(mean, d)

    L = cholesky(S, strict=strict)
    if not strict and not np.all(np.isfinite(L)):
        logger.debug("Covariance of dimension %d is not factorable; samples will be NaN", d)
    return GaussianSampler(M, L, rng or get_default_source())
