"""Wall-clock timing for the sampler benchmark."""

import time
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass
class TimingResult:
    """Elapsed seconds from a timing block, plus an optional event count."""

    elapsed: float = 0.0
    count: int = 0

    @property
    def rate(self) -> float:
        """Events per second (inf if nothing measurable elapsed)."""
        if self.elapsed <= 0:
            return float("inf")
        return self.count / self.elapsed


@contextmanager
def timer(count: int = 0):
    """Context manager that measures wall-clock time in seconds.

    Usage:
        with timer(count=n) as t:
            sampler.sample_n(n)
        print(f"{t.rate:.0f} draws/s")
    """
    result = TimingResult(count=count)
    start = time.perf_counter()
    try:
        yield result
    finally:
        result.elapsed = time.perf_counter() - start
