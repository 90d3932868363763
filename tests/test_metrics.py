"""Tests for evaluation metrics."""

import numpy as np
import pytest

from gencov.evaluation.metrics import (
    abs_residual,
    draws_per_second,
    has_finite_factor,
    is_orthogonal,
    is_symmetric,
    memory_usage_bytes,
    sample_mean,
    sample_second_moment,
)


class TestResiduals:
    def test_abs_residual(self):
        assert abs_residual([[1, 2], [3, 4]], [[1, 1], [1, 4]]) == 3.0

    def test_abs_residual_nan_propagates(self):
        assert np.isnan(abs_residual([np.nan, 0.0], [0.0, 0.0]))

    def test_abs_residual_shape_mismatch(self):
        with pytest.raises(ValueError, match="Shape mismatch"):
            abs_residual(np.zeros(2), np.zeros(3))

    def test_is_orthogonal(self):
        c, s = np.cos(0.3), np.sin(0.3)
        assert is_orthogonal(np.array([[c, -s], [s, c]]))
        assert not is_orthogonal(np.array([[1.0, 1.0], [0.0, 1.0]]))
        assert not is_orthogonal(np.ones((2, 3)))

    def test_is_symmetric(self):
        assert is_symmetric(np.array([[2.0, 1.0], [1.0, 3.0]]))
        assert not is_symmetric(np.array([[2.0, 1.0], [0.0, 3.0]]))

    def test_has_finite_factor(self):
        assert has_finite_factor(np.eye(3))
        L = np.eye(3)
        L[2, 2] = np.nan
        assert not has_finite_factor(L)


class TestSampleMoments:
    def test_mean(self):
        X = np.array([[1.0, 2.0], [3.0, 6.0]])
        np.testing.assert_allclose(sample_mean(X), [2.0, 4.0])

    def test_second_moment(self):
        X = np.array([[1.0, 0.0], [0.0, 2.0], [1.0, 1.0]])
        np.testing.assert_allclose(sample_second_moment(X), X.T @ X / 3)

    def test_empty_sample(self):
        with pytest.raises(ValueError, match="empty"):
            sample_second_moment(np.zeros((0, 2)))
        with pytest.raises(ValueError, match="empty"):
            sample_mean(np.zeros((0, 2)))


class TestThroughput:
    def test_basic(self):
        assert draws_per_second(100, 1.0) == 100.0

    def test_zero_time(self):
        assert draws_per_second(100, 0.0) == float("inf")

    def test_memory_usage_positive(self):
        assert memory_usage_bytes() > 0
