"""Save and load generated covariance datasets in HDF5 format."""

import logging
from pathlib import Path

import h5py
import numpy as np

from ..defaults import DATA_DIR

logger = logging.getLogger(__name__)

# HDF5 dataset names
KEYS = ("covariance", "samples", "mean", "variances")


def default_path(name: str, data_dir: Path | None = None) -> Path:
    """Path of a named dataset file under data_dir (project data/ by default)."""
    data_dir = data_dir or DATA_DIR
    return data_dir / f"{name}.hdf5"


def save_dataset(
    path: Path | str,
    covariance: np.ndarray,
    samples: np.ndarray | None = None,
    mean: np.ndarray | None = None,
    variances: np.ndarray | None = None,
) -> Path:
    """Write a covariance matrix and optional samples to an HDF5 file.

    Args:
        path: Output file. Parent directories are created.
        covariance: Matrix of shape (d, d).
        samples: Draws of shape (n, d).
        mean: Mean vector of shape (d,). Defaults to zeros.
        variances: Principal variances used to build the covariance.

    Returns:
        Path to the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    covariance = np.asarray(covariance, dtype=np.float64)
    d = covariance.shape[0]
    mean = np.zeros(d) if mean is None else np.asarray(mean, dtype=np.float64)

    with h5py.File(path, "w") as f:
        f.create_dataset("covariance", data=covariance)
        f.create_dataset("mean", data=mean)
        if samples is not None:
            f.create_dataset("samples", data=np.asarray(samples, dtype=np.float64))
        if variances is not None:
            f.create_dataset("variances", data=np.asarray(variances, dtype=np.float64))
        f.attrs["dim"] = d

    logger.debug("Wrote dataset of dimension %d to %s", d, path)
    return path


def load_dataset(path: Path | str) -> dict:
    """Load a dataset written by save_dataset().

    Args:
        path: HDF5 file.

    Returns:
        Dict with keys:
          - covariance: float64 array (d, d)
          - mean: float64 array (d,)
          - samples: float64 array (n, d), or None
          - variances: float64 array (d,), or None
    """
    with h5py.File(path, "r") as f:
        if "covariance" not in f:
            raise RuntimeError(f"{path} has no 'covariance' dataset")
        data = {
            key: np.array(f[key], dtype=np.float64) if key in f else None
            for key in KEYS
        }
    if data["mean"] is None:
        data["mean"] = np.zeros(data["covariance"].shape[0])
    return data


def dataset_stats(samples: np.ndarray) -> dict:
    """Compute basic statistics for a sample matrix.

    Args:
        samples: Draws of shape (n, d).

    Returns:
        Dict with keys: n, d, mean_norm, std_norm, min_norm, max_norm.
    """
    norms = np.linalg.norm(samples, axis=1)
    return {
        "n": samples.shape[0],
        "d": samples.shape[1],
        "mean_norm": float(np.mean(norms)),
        "std_norm": float(np.std(norms)),
        "min_norm": float(np.min(norms)),
        "max_norm": float(np.max(norms)),
    }
