"""Tests for the covariance matrix builder."""

import numpy as np
import pytest

from gencov.covariance.builder import draw_variances, gen_array, gen_covariance, gen_s
from gencov.errors import InvalidDimension
from gencov.linalg.blas import cholesky
from gencov.rng.source import RandomSource


@pytest.fixture
def rng():
    return RandomSource(seed=42)


class TestGenCovariance:
    def test_equal_variances_give_scaled_identity(self, rng):
        S = gen_covariance([1, 1, 1, 1, 1], rng=rng)
        assert np.sum(np.abs(S - np.eye(5))) < 1e-8

        S = gen_covariance([2.5] * 4, rng=rng)
        assert np.sum(np.abs(S - 2.5 * np.eye(4))) < 1e-8

    @pytest.mark.parametrize("bounds", [(1, 10), (0.1, 0.2), (5, 500)])
    def test_symmetric(self, rng, bounds):
        S = gen_covariance(5, *bounds, rng=rng)
        assert S.shape == (5, 5)
        assert np.sum(np.abs(S - S.T)) < 1e-8

    def test_eigenvalues_match_given_variances(self, rng):
        V = [3, 2, 1, 0.5, 0.1]
        S = gen_covariance(V, rng=rng)
        np.testing.assert_allclose(np.linalg.eigvalsh(S), sorted(V), atol=1e-10)

    def test_eigenvalues_within_drawn_range(self, rng):
        S = gen_covariance(6, 2.0, 4.0, rng=rng)
        eig = np.linalg.eigvalsh(S)
        assert np.all(eig >= 2.0 - 1e-10)
        assert np.all(eig < 4.0 + 1e-10)

    def test_trace_is_total_variance(self, rng):
        V = np.array([1.0, 2.0, 7.0])
        assert np.trace(gen_covariance(V, rng=rng)) == pytest.approx(V.sum())

    def test_positive_variances_factor(self, rng):
        S = gen_covariance([1, 2, 3, 4, 5], rng=rng)
        L = cholesky(S, strict=False)
        assert np.all(np.isfinite(L))

    def test_negative_variance_cant_be_factored(self, rng):
        S = gen_covariance([-1, 2, 3, 4, 5], rng=rng)
        L = cholesky(S, strict=False)
        assert np.isnan(np.sum(np.abs(L)))

    def test_one_dimensional(self, rng):
        S = gen_covariance([4.0], rng=rng)
        np.testing.assert_allclose(S, [[4.0]])

    def test_deterministic(self):
        S1 = gen_covariance(4, rng=RandomSource(7))
        S2 = gen_covariance(4, rng=RandomSource(7))
        np.testing.assert_array_equal(S1, S2)

    def test_alias(self):
        assert gen_s is gen_covariance

    @pytest.mark.parametrize("size_or_variances", [0, -2, [], np.zeros((2, 2)), 2.5])
    def test_invalid_spec(self, rng, size_or_variances):
        with pytest.raises(InvalidDimension):
            gen_covariance(size_or_variances, rng=rng)


class TestDrawVariances:
    def test_range_and_length(self, rng):
        V = draw_variances(100, 1.0, 10.0, rng=rng)
        assert V.shape == (100,)
        assert np.all((V >= 1.0) & (V < 10.0))


class TestGenArray:
    def test_array_version_of_gen_covariance(self, rng):
        S = gen_array([1, 1, 1, 1, 1], rng=rng)
        assert isinstance(S, list)
        assert isinstance(S[0], list)
        assert np.sum(np.abs(np.array(S) - np.eye(5))) < 1e-8

    def test_same_values_as_matrix(self):
        S = gen_covariance(4, rng=RandomSource(3))
        A = gen_array(4, rng=RandomSource(3))
        np.testing.assert_allclose(np.array(A), S, atol=1e-12)
