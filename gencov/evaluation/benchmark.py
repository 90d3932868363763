"""Automated benchmark runner for covariance generation and sampling."""

import logging
from dataclasses import dataclass

import numpy as np
from tqdm import tqdm

from ..covariance.builder import gen_covariance
from ..defaults import BENCHMARK_DIMS, BENCHMARK_DRAWS, DEFAULT_SEED, MAX_VARIANCE, MIN_VARIANCE
from ..rng.source import RandomSource
from ..sampling.mvn import mvnrnd
from ..utils.timer import timer
from .metrics import abs_residual, memory_usage_bytes, sample_mean, sample_second_moment

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""

    dim: int
    n_draws: int
    build_time: float = 0.0
    setup_time: float = 0.0
    sample_time: float = 0.0
    draws_per_second: float = 0.0
    mean_error: float = 0.0
    covariance_error: float = 0.0
    memory_bytes: int = 0


def run_single_benchmark(
    d: int,
    n_draws: int = BENCHMARK_DRAWS,
    min_var: float = MIN_VARIANCE,
    max_var: float = MAX_VARIANCE,
    seed: int | None = DEFAULT_SEED,
) -> BenchmarkResult:
    """Build a random covariance, sample from it, and measure the recovery.

    Args:
        d: Dimension.
        n_draws: Number of samples to draw.
        min_var: Lower bound of the principal variances.
        max_var: Upper bound of the principal variances.
        seed: Seed for the random source.

    Returns:
        BenchmarkResult. Errors are summed absolute residuals divided by d,
        computed against the true mean (zero) and covariance.
    """
    rng = RandomSource(seed)
    result = BenchmarkResult(dim=d, n_draws=n_draws)

    with timer() as t_build:
        S = gen_covariance(d, min_var, max_var, rng=rng)
    result.build_time = t_build.elapsed

    with timer() as t_setup:
        sampler = mvnrnd(0, S, rng=rng)
    result.setup_time = t_setup.elapsed

    with timer(count=n_draws) as t_sample:
        X = sampler.sample_n(n_draws)
    result.sample_time = t_sample.elapsed
    result.draws_per_second = t_sample.rate
    result.memory_bytes = memory_usage_bytes()

    result.mean_error = abs_residual(sample_mean(X), np.zeros(d)) / d
    result.covariance_error = abs_residual(sample_second_moment(X), S) / d
    logger.debug("d=%d: %.0f draws/s, covariance error %.4f",
                 d, result.draws_per_second, result.covariance_error)
    return result


def run_benchmark_sweep(
    dims: list[int] | None = None,
    n_draws: int = BENCHMARK_DRAWS,
    min_var: float = MIN_VARIANCE,
    max_var: float = MAX_VARIANCE,
    seed: int | None = DEFAULT_SEED,
) -> list[BenchmarkResult]:
    """Run the benchmark over several dimensions.

    Args:
        dims: Dimensions to benchmark. Defaults to BENCHMARK_DIMS.
        n_draws: Samples drawn per dimension.
        min_var: Lower bound of the principal variances.
        max_var: Upper bound of the principal variances.
        seed: Seed for each run's random source.

    Returns:
        List of BenchmarkResults for the dimensions that completed.
    """
    if dims is None:
        dims = BENCHMARK_DIMS

    results = []
    for d in tqdm(dims, desc="Dimension sweep"):
        try:
            r = run_single_benchmark(d, n_draws, min_var, max_var, seed=seed)
            results.append(r)
            print(f"  d={d}: {r.draws_per_second:.0f} draws/s, "
                  f"mean err={r.mean_error:.4f}, cov err={r.covariance_error:.4f}")
        except Exception as e:
            print(f"  d={d}: FAILED - {e}")

    return results
