"""Math utilities: dimension checks and random orthogonal matrix generation."""

import numbers

import numpy as np

from ..errors import InvalidDimension
from ..linalg.blas import qr
from ..rng.source import RandomSource, get_default_source


def check_dimension(d, name: str = "d") -> int:
    """Validate that d is a positive integer and return it as an int.

    Raises:
        InvalidDimension: if d is not an integer or is less than 1.
    """
    if isinstance(d, bool) or not isinstance(d, numbers.Integral):
        raise InvalidDimension(f"{name} must be a positive integer, got {d!r}")
    if d < 1:
        raise InvalidDimension(f"{name} must be a positive integer, got {d}")
    return int(d)


def random_orthogonal_matrix(d: int, rng: RandomSource | None = None) -> np.ndarray:
    """Generate a Haar-uniform random orthogonal matrix of size d x d.

    Uses QR decomposition of a standard normal matrix, with sign
    correction to ensure uniform distribution over O(d). Row i of the
    result is the i-th basis vector.

    Args:
        d: Matrix dimension.
        rng: Source of the normal draws. Defaults to the thread's default source.

    Returns:
        Orthogonal matrix of shape (d, d) with dtype float64.
    """
    d = check_dimension(d)
    rng = rng or get_default_source()
    Z = rng.fill((d, d))
    Q, R = qr(Z)
    # Ensure uniform distribution (Mezzadri 2007)
    sign = np.sign(np.diag(R))
    sign[sign == 0] = 1
    Q = Q * sign[np.newaxis, :]
    # Corrected columns become rows: row i is basis vector i
    return np.ascontiguousarray(Q.T)


def orthogonal(d: int, rng: RandomSource | None = None) -> np.ndarray:
    """Alias of random_orthogonal_matrix."""
    return random_orthogonal_matrix(d, rng=rng)
