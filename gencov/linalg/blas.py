"""Thin wrappers over the BLAS/LAPACK routines gencov builds on.

Covariance assembly and sampling only touch matrices through these calls:
  - rank1_update:  A += alpha * x y^T        (BLAS dger)
  - trmv_lower:    x = L x                   (BLAS dtrmv, lower triangle)
  - axpy:          y = alpha * x + y         (BLAS daxpy)
  - qr:            Z = Q R                   (numpy.linalg.qr)
  - cholesky:      S = L L^T                 (LAPACK dpotrf)

Matrices handed to BLAS are kept in Fortran order so repeated calls can work
in place without f2py copying them.
"""

import logging

import numpy as np
from scipy.linalg import blas, lapack

from ..errors import NotPositiveSemiDefinite

logger = logging.getLogger(__name__)


def rank1_update(alpha: float, x: np.ndarray, y: np.ndarray, A: np.ndarray) -> np.ndarray:
    """Return A + alpha * outer(x, y), updating A in place when it is Fortran-ordered.

    Args:
        alpha: Scalar weight.
        x: Vector of shape (m,).
        y: Vector of shape (n,).
        A: Matrix of shape (m, n), dtype float64.

    Returns:
        The updated matrix (A itself if no copy was needed).
    """
    return blas.dger(alpha, x, y, a=A, overwrite_a=1)


def trmv_lower(L: np.ndarray, x: np.ndarray) -> np.ndarray:
    """Return L @ x using only the lower triangle of L."""
    return blas.dtrmv(L, x, lower=1, overwrite_x=1)


def axpy(x: np.ndarray, y: np.ndarray, alpha: float = 1.0) -> np.ndarray:
    """Return alpha * x + y, overwriting y when possible."""
    return blas.daxpy(x, y, a=alpha)


def qr(Z: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Full QR factorization Z = Q R with Q orthogonal and R upper-triangular."""
    return np.linalg.qr(Z)


def cholesky(S: np.ndarray, strict: bool = True) -> np.ndarray:
    """Lower-triangular Cholesky factor L with S = L L^T.

    Args:
        S: Symmetric matrix of shape (d, d).
        strict: If True, raise NotPositiveSemiDefinite when S cannot be
            factored. If False, return a factor whose rows from the failing
            pivot onward are NaN, so anything computed from them is NaN too.

    Returns:
        Fortran-ordered float64 array of shape (d, d), zero above the diagonal.
    """
    S = np.asfortranarray(S, dtype=np.float64)
    c, info = lapack.dpotrf(S, lower=1, clean=1)
    if info < 0:
        raise ValueError(f"dpotrf: illegal value in argument {-info}")

    L = np.asfortranarray(np.tril(c))
    if info > 0:
        pivot = info - 1
        logger.debug("Cholesky failed at pivot %d of %d", pivot, S.shape[0])
        if strict:
            raise NotPositiveSemiDefinite(pivot)
        lower = np.tril(np.ones(L.shape, dtype=bool))
        lower[:pivot] = False
        L[lower] = np.nan
    return L
