"""Scalar random generators: uniform and polar Box-Muller normal draws.

A RandomSource owns a NumPy Generator (the uniform source) and the one-slot
cache of the spare Box-Muller variate. Each polar-method acceptance yields two
independent standard normals: one is returned, the other is kept and handed
out by the next normal() call, rescaled by that call's own mean and sigma.

The module keeps one default source per thread, so single-threaded callers see
a single process-wide cache while threads never share one.
"""

import threading

import numpy as np


class RandomSource:
    """Uniform and normal scalar draws with a cached Box-Muller spare.

    Args:
        seed: Seed for the underlying NumPy Generator. None uses OS entropy.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._extra: float | None = None

    def random(self) -> float:
        """One draw from the uniform source, in [0, 1)."""
        return float(self._rng.random())

    def uniform(self, min: float = 0.0, max: float = 1.0) -> float:
        """Return a uniform sample from [min, max)."""
        return self.random() * (max - min) + min

    def normal(self, mean: float = 0.0, sigma: float = 1.0) -> float:
        """Return a Normal(mean, sigma) sample using the polar method."""
        if self._extra is not None:
            result = mean + sigma * self._extra
            self._extra = None
            return result

        while True:
            u = 2.0 * self.random() - 1.0
            v = 2.0 * self.random() - 1.0
            r = u * u + v * v
            if 0.0 < r < 1.0:
                break

        c = np.sqrt(-2.0 * np.log(r) / r)
        self._extra = float(u * c)
        return mean + sigma * float(v * c)

    def fill(self, shape: int | tuple[int, ...]) -> np.ndarray:
        """Array of standard normal draws, filled in row-major order.

        Equivalent to calling normal(0, 1) once per element.
        """
        out = np.empty(shape, dtype=np.float64)
        flat = out.reshape(-1)
        for i in range(flat.shape[0]):
            flat[i] = self.normal(0.0, 1.0)
        return out

    def reset_cache(self) -> None:
        """Drop a pending cached variate."""
        self._extra = None

    @property
    def has_cached(self) -> bool:
        return self._extra is not None


_local = threading.local()


def get_default_source() -> RandomSource:
    """Return the calling thread's default RandomSource, creating it on first use."""
    source = getattr(_local, "source", None)
    if source is None:
        source = RandomSource()
        _local.source = source
    return source


def seed_default_source(seed: int | None) -> RandomSource:
    """Replace the calling thread's default source with a freshly seeded one."""
    _local.source = RandomSource(seed)
    return _local.source


def uniform(min: float = 0.0, max: float = 1.0) -> float:
    return get_default_source().uniform(min, max)


def normal(mean: float = 0.0, sigma: float = 1.0) -> float:
    return get_default_source().normal(mean, sigma)
