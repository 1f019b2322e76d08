"""Tests for the Cauchy cumulative distribution function."""

from __future__ import annotations

import numpy as np
import pytest
from scipy.stats import cauchy

from pycauchy import (
    NonFiniteError,
    NonPositiveError,
    NotANumberError,
    cauchy_cdf,
    cauchy_p,
)


class TestKnownValues:
    def test_median(self):
        assert cauchy_cdf(0, 0, 1) == 0.5

    def test_quartiles(self):
        assert cauchy_cdf(1, 0, 1) == 0.75
        assert cauchy_cdf(-1, 0, 1) == 0.25

    @pytest.mark.parametrize("mu,sigma", [(0.0, 1.0), (2.0, 3.0), (-7.5, 0.5)])
    def test_quartiles_location_scale(self, mu, sigma):
        np.testing.assert_allclose(cauchy_cdf(mu + sigma, mu, sigma), 0.75, rtol=1e-15)
        np.testing.assert_allclose(cauchy_cdf(mu - sigma, mu, sigma), 0.25, rtol=1e-15)
        assert cauchy_cdf(mu, mu, sigma) == 0.5

    def test_matches_scipy(self, grid):
        y, mu, sigma = np.meshgrid(grid["y"], grid["mu"], grid["sigma"], indexing="ij")
        np.testing.assert_allclose(
            cauchy_cdf(y, mu, sigma), cauchy.cdf(y, loc=mu, scale=sigma), atol=1e-15, rtol=1e-12
        )

    def test_infinite_variate(self):
        assert cauchy_cdf(np.inf, 0.0, 1.0) == 1.0
        assert cauchy_cdf(-np.inf, 0.0, 1.0) == 0.0

    def test_alias(self):
        assert cauchy_p is cauchy_cdf


class TestProperties:
    def test_in_unit_interval(self, grid):
        y, mu, sigma = np.meshgrid(grid["y"], grid["mu"], grid["sigma"], indexing="ij")
        p = cauchy_cdf(y, mu, sigma)
        assert np.all((p >= 0.0) & (p <= 1.0))

    def test_monotone_in_variate(self):
        ys = np.concatenate([[-1e300, -1e10], np.linspace(-50.0, 50.0, 2001), [1e10, 1e300]])
        p = cauchy_cdf(ys, 1.5, 0.7)
        assert np.all(np.diff(p) >= 0.0)

    def test_offset_sign_near_location(self):
        assert cauchy_cdf(1e-300, 0.0, 1.0) >= 0.5
        assert cauchy_cdf(-1e-300, 0.0, 1.0) <= 0.5

    def test_extreme_ratio(self):
        # y - mu overflows sigma by far; atan2 still saturates cleanly
        assert cauchy_cdf(1e308, 0.0, 1e-308) == 1.0
        assert cauchy_cdf(-1e308, 0.0, 1e-308) == 0.0

    def test_float32_result(self):
        p = cauchy_cdf(np.float32(1.0), np.float32(0.0), np.float32(1.0))
        assert p.dtype == np.float32
        np.testing.assert_allclose(p, 0.75, rtol=1e-6)


class TestValidation:
    def test_nan_variate(self):
        with pytest.raises(NotANumberError, match="pycauchy.cauchy_cdf"):
            cauchy_cdf(np.nan, 0.0, 1.0)

    def test_infinite_location(self):
        with pytest.raises(NonFiniteError):
            cauchy_cdf(0.0, -np.inf, 1.0)

    def test_infinite_scale(self):
        with pytest.raises(NonFiniteError):
            cauchy_cdf(0.0, 0.0, np.inf)

    def test_zero_scale(self):
        with pytest.raises(NonPositiveError):
            cauchy_cdf(0.0, 0.0, 0.0)

    def test_sentinel(self, sentinel_policy):
        assert np.isnan(cauchy_cdf(0.0, 0.0, -2.0, sentinel_policy))
