"""Top-level operations bound to the thread's default random source.

Example:
    from gencov.api import gen_s, mvnrnd

    # 3-d covariance with principal variances drawn from [1, 10)
    S = gen_s(3)

    # 5-d covariance with the given principal variances
    S = gen_s([3, 2, 1, 0.5, 0.1])

    # ten draws from N([a, b, c], S)
    draw = mvnrnd([a, b, c], gen_s(3))
    X = [draw() for _ in range(10)]

Every operation also accepts an explicit RandomSource through rng=.
"""

from .covariance.builder import draw_variances, gen_array, gen_covariance, gen_s
from .linalg.blas import cholesky
from .rng.source import (
    RandomSource,
    get_default_source,
    normal,
    seed_default_source,
    uniform,
)
from .sampling.mvn import GaussianSampler, mvnrnd
from .utils.math import orthogonal, random_orthogonal_matrix

__all__ = [
    "GaussianSampler",
    "RandomSource",
    "cholesky",
    "draw_variances",
    "gen_array",
    "gen_covariance",
    "gen_s",
    "get_default_source",
    "mvnrnd",
    "normal",
    "orthogonal",
    "random_orthogonal_matrix",
    "seed_default_source",
    "uniform",
]
