"""Default settings shared by the library and the command-line scripts."""

from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# Principal variances are drawn from [MIN_VARIANCE, MAX_VARIANCE) when not given
MIN_VARIANCE: float = 1.0
MAX_VARIANCE: float = 10.0

DEFAULT_SEED: int = 42

# Benchmark sweep
BENCHMARK_DIMS: list[int] = [2, 4, 8, 16, 32, 64]
BENCHMARK_DRAWS: int = 10000
