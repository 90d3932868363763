"""Tests for HDF5 dataset persistence."""

import h5py
import numpy as np
import pytest

from gencov.covariance.builder import gen_covariance
from gencov.datasets.store import dataset_stats, default_path, load_dataset, save_dataset
from gencov.rng.source import RandomSource
from gencov.sampling.mvn import mvnrnd


class TestStore:
    @pytest.fixture
    def dataset(self):
        rng = RandomSource(seed=8)
        V = np.array([1.0, 2.0, 3.0])
        S = gen_covariance(V, rng=rng)
        X = mvnrnd([1.0, 0.0, -1.0], S, rng=rng).sample_n(50)
        return S, X, V

    def test_round_trip(self, tmp_path, dataset):
        S, X, V = dataset
        path = save_dataset(tmp_path / "out" / "d.hdf5", S, samples=X,
                            mean=[1.0, 0.0, -1.0], variances=V)
        assert path.exists()
        data = load_dataset(path)
        np.testing.assert_array_equal(data["covariance"], S)
        np.testing.assert_array_equal(data["samples"], X)
        np.testing.assert_array_equal(data["mean"], [1.0, 0.0, -1.0])
        np.testing.assert_array_equal(data["variances"], V)

    def test_optional_fields(self, tmp_path, dataset):
        S, _, _ = dataset
        data = load_dataset(save_dataset(tmp_path / "cov.hdf5", S))
        assert data["samples"] is None
        assert data["variances"] is None
        np.testing.assert_array_equal(data["mean"], np.zeros(3))

    def test_missing_covariance(self, tmp_path):
        path = tmp_path / "bad.hdf5"
        with h5py.File(path, "w") as f:
            f.create_dataset("samples", data=np.zeros((2, 2)))
        with pytest.raises(RuntimeError, match="covariance"):
            load_dataset(path)

    def test_default_path(self, tmp_path):
        assert default_path("x", tmp_path) == tmp_path / "x.hdf5"

    def test_dataset_stats(self, dataset):
        _, X, _ = dataset
        stats = dataset_stats(X)
        assert stats["n"] == 50
        assert stats["d"] == 3
        assert stats["min_norm"] <= stats["mean_norm"] <= stats["max_norm"]
