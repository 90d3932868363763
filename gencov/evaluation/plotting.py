"""Plotting utilities for benchmark visualization."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from .benchmark import BenchmarkResult


def setup_style():
    """Set up consistent plot style."""
    sns.set_theme(style="whitegrid", font_scale=1.1)
    plt.rcParams["figure.figsize"] = (10, 6)
    plt.rcParams["figure.dpi"] = 100


def _finish(fig, save_path: Path | str | None):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, bbox_inches="tight")
        print(f"Saved: {save_path}")
    else:
        plt.show()
    plt.close(fig)


def plot_throughput(
    results: list[BenchmarkResult],
    save_path: Path | str | None = None,
    title: str | None = None,
):
    """Plot sampler draws per second against dimension.

    Args:
        results: List of benchmark results.
        save_path: Path to save figure. If None, shows interactively.
        title: Plot title.
    """
    setup_style()
    fig, ax = plt.subplots()

    results = sorted(results, key=lambda r: r.dim)
    dims = [r.dim for r in results]
    ax.plot(dims, [r.draws_per_second for r in results], "o-", color="steelblue")

    ax.set_xscale("log", base=2)
    ax.set_xlabel("Dimension (d)")
    ax.set_ylabel("Draws per Second")
    ax.set_title(title or "Sampler Throughput")
    _finish(fig, save_path)


def plot_recovery_error(
    results: list[BenchmarkResult],
    save_path: Path | str | None = None,
    title: str | None = None,
):
    """Plot mean and covariance recovery error against dimension.

    Args:
        results: List of benchmark results.
        save_path: Path to save figure.
        title: Plot title.
    """
    setup_style()
    fig, ax = plt.subplots()

    results = sorted(results, key=lambda r: r.dim)
    dims = [r.dim for r in results]
    ax.plot(dims, [r.mean_error for r in results], "s-", color="darkorange", label="Mean")
    ax.plot(dims, [r.covariance_error for r in results], "D-", color="red", label="Covariance")

    # Monte Carlo error of the estimates shrinks as O(1/sqrt(n))
    if results:
        n = results[0].n_draws
        ax.axhline(y=1 / np.sqrt(n), color="gray", linestyle="--", alpha=0.5,
                   label=r"$1/\sqrt{n}$ reference")

    ax.set_xscale("log", base=2)
    ax.set_xlabel("Dimension (d)")
    ax.set_ylabel("Summed Absolute Residual / d")
    ax.set_title(title or "Moment Recovery Error")
    ax.legend()
    _finish(fig, save_path)
