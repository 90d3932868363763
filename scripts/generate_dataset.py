#!/usr/bin/env python
"""Generate a random covariance matrix, draw samples from it, and save to HDF5."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from gencov.covariance.builder import draw_variances, gen_covariance
from gencov.datasets.store import dataset_stats, default_path, save_dataset
from gencov.defaults import DEFAULT_SEED, MAX_VARIANCE, MIN_VARIANCE
from gencov.errors import GencovError
from gencov.rng.source import RandomSource
from gencov.sampling.mvn import mvnrnd


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Generate a random Gaussian dataset")
    parser.add_argument("--name", default="gencov", help="Dataset name (file stem under data/)")
    parser.add_argument("--output", type=str, default=None, help="Explicit output file")
    parser.add_argument("--dim", type=int, default=3, help="Dimension, when --variances is not given")
    parser.add_argument("--variances", type=float, nargs="+", default=None, help="Principal variances")
    parser.add_argument("--min-var", type=float, default=MIN_VARIANCE, help="Lower variance bound")
    parser.add_argument("--max-var", type=float, default=MAX_VARIANCE, help="Upper variance bound")
    parser.add_argument("--mean", type=float, nargs="+", default=None, help="Mean vector (default zero)")
    parser.add_argument("--n-samples", type=int, default=1000, help="Number of samples")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")
    args = parser.parse_args()

    rng = RandomSource(args.seed)
    try:
        if args.variances is None:
            variances = draw_variances(args.dim, args.min_var, args.max_var, rng=rng)
        else:
            variances = args.variances
        S = gen_covariance(variances, rng=rng)
        sampler = mvnrnd(args.mean if args.mean is not None else 0, S, rng=rng)
        X = sampler.sample_n(args.n_samples)
    except GencovError as e:
        print(f"Error: {e}")
        sys.exit(1)

    path = Path(args.output) if args.output else default_path(args.name)
    save_dataset(path, S, samples=X, mean=sampler.mean, variances=variances)

    stats = dataset_stats(X)
    print(f"Saved {path}")
    print(f"  Covariance: {S.shape}")
    print(f"  Samples:    {X.shape}")
    print(f"  Mean norm:  {stats['mean_norm']:.2f}")
    print(f"  Std norm:   {stats['std_norm']:.2f}")


if __name__ == "__main__":
    main()
