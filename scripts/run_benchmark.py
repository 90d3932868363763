#!/usr/bin/env python
"""Benchmark covariance generation and multivariate normal sampling."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import json
from dataclasses import asdict

from gencov.defaults import BENCHMARK_DIMS, BENCHMARK_DRAWS, DEFAULT_SEED, MAX_VARIANCE, MIN_VARIANCE
from gencov.evaluation.benchmark import run_benchmark_sweep
from gencov.evaluation.plotting import plot_recovery_error, plot_throughput


def main():
    parser = argparse.ArgumentParser(description="Run gencov sampling benchmark")
    parser.add_argument("--dims", type=int, nargs="+", default=BENCHMARK_DIMS, help="Dimensions to sweep")
    parser.add_argument("--n-draws", type=int, default=BENCHMARK_DRAWS, help="Samples per dimension")
    parser.add_argument("--min-var", type=float, default=MIN_VARIANCE, help="Lower variance bound")
    parser.add_argument("--max-var", type=float, default=MAX_VARIANCE, help="Upper variance bound")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")
    parser.add_argument("--output-dir", type=str, default="results", help="Output directory")
    parser.add_argument("--no-plots", action="store_true", help="Skip figure generation")
    args = parser.parse_args()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"\nRunning benchmark: dims={args.dims}, n_draws={args.n_draws}")
    results = run_benchmark_sweep(
        dims=args.dims,
        n_draws=args.n_draws,
        min_var=args.min_var,
        max_var=args.max_var,
        seed=args.seed,
    )

    json_path = output_dir / "sampling_results.json"
    with open(json_path, "w") as f:
        json.dump([asdict(r) for r in results], f, indent=2)
    print(f"\nResults saved to {json_path}")

    if not args.no_plots and results:
        print("\nGenerating plots...")
        plot_throughput(results, save_path=output_dir / "throughput.png")
        plot_recovery_error(results, save_path=output_dir / "recovery_error.png")

    # Summary
    print(f"\n{'='*62}")
    print(f"Summary (n_draws={args.n_draws}, variances in [{args.min_var}, {args.max_var}))")
    print(f"{'='*62}")
    print(f"{'d':>6} {'Draws/s':>12} {'Setup (ms)':>12} {'Mean err':>12} {'Cov err':>12}")
    print(f"{'-'*6} {'-'*12} {'-'*12} {'-'*12} {'-'*12}")
    for r in results:
        print(f"{r.dim:>6} {r.draws_per_second:>12.0f} {r.setup_time * 1000:>12.3f} "
              f"{r.mean_error:>12.4f} {r.covariance_error:>12.4f}")


if __name__ == "__main__":
    main()
