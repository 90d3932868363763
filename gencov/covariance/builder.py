"""Random covariance matrices with a controlled eigenvalue spectrum.

The principal variances V are either given or drawn uniformly from
[min_var, max_var). A random orthogonal matrix Q supplies the principal axes
(row i of Q is the axis with variance V[i]) and the covariance is assembled
as a sum of rank-1 terms:

    S = sum_i V[i] * q_i q_i^T = Q^T diag(V) Q

Every term is symmetric, so S is exactly symmetric. S is positive
semi-definite iff all V[i] >= 0; negative variances are not rejected here,
they surface when the matrix is factored for sampling.
"""

from collections.abc import Sequence

import numpy as np

from ..defaults import MAX_VARIANCE, MIN_VARIANCE
from ..errors import InvalidDimension
from ..linalg.blas import rank1_update
from ..rng.source import RandomSource, get_default_source
from ..utils.math import check_dimension, random_orthogonal_matrix


def draw_variances(
    d: int,
    min_var: float = MIN_VARIANCE,
    max_var: float = MAX_VARIANCE,
    rng: RandomSource | None = None,
) -> np.ndarray:
    """Draw d principal variances uniformly from [min_var, max_var)."""
    d = check_dimension(d)
    rng = rng or get_default_source()
    return np.array([rng.uniform(min_var, max_var) for _ in range(d)], dtype=np.float64)


def _as_variances(size_or_variances, min_var, max_var, rng) -> np.ndarray:
    if isinstance(size_or_variances, (int, np.integer)) and not isinstance(size_or_variances, bool):
        return draw_variances(size_or_variances, min_var, max_var, rng=rng)
    if not isinstance(size_or_variances, (Sequence, np.ndarray)):
        raise InvalidDimension(
            f"Expected a dimension or a list of variances, got {size_or_variances!r}"
        )
    V = np.asarray(size_or_variances, dtype=np.float64)
    if V.ndim != 1 or V.shape[0] == 0:
        raise InvalidDimension(f"Variances must be a non-empty vector, got shape {V.shape}")
    return V


def gen_covariance(
    size_or_variances: int | Sequence[float] | np.ndarray,
    min_var: float = MIN_VARIANCE,
    max_var: float = MAX_VARIANCE,
    rng: RandomSource | None = None,
) -> np.ndarray:
    """Generate a random d x d covariance matrix.

    Args:
        size_or_variances: Either the dimension d (variances are drawn
            uniformly from [min_var, max_var)) or the principal variances
            themselves, in which case min_var and max_var are ignored.
        min_var: Lower bound of the variance range.
        max_var: Upper bound of the variance range.
        rng: Random source. Defaults to the thread's default source.

    Returns:
        Symmetric float64 array of shape (d, d).
    """
    rng = rng or get_default_source()
    V = _as_variances(size_or_variances, min_var, max_var, rng)
    d = V.shape[0]

    Q = random_orthogonal_matrix(d, rng=rng)
    S = np.zeros((d, d), dtype=np.float64, order="F")
    for i in range(d):
        S = rank1_update(V[i], Q[i], Q[i], S)
    return np.ascontiguousarray(S)


def gen_array(
    size_or_variances: int | Sequence[float] | np.ndarray,
    min_var: float = MIN_VARIANCE,
    max_var: float = MAX_VARIANCE,
    rng: RandomSource | None = None,
) -> list[list[float]]:
    """gen_covariance() returned as nested Python lists."""
    return gen_covariance(size_or_variances, min_var, max_var, rng=rng).tolist()


# Short alias
gen_s = gen_covariance
