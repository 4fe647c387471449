"""Tests for Tracy-Widom normalisation and tail."""

import math

import pytest

from statfuncs.core.errors import DomainError
from statfuncs.core.statistics.tracy_widom import twnorm, twtail


class TestTwnorm:
    """Eigenvalue centring and scaling."""

    def test_formula(self):
        lam, m, n = 3.2, 100.0, 1000.0
        mu = (math.sqrt(n - 1) + math.sqrt(m)) ** 2 / n
        sigma = (math.sqrt(n - 1) + math.sqrt(m)) / n * (1 / math.sqrt(n - 1) + 1 / math.sqrt(m)) ** (1 / 3)
        assert twnorm(lam, m, n) == pytest.approx((lam - mu) / sigma, rel=1e-12)

    def test_centre_maps_to_zero(self):
        m, n = 50.0, 400.0
        mu = (math.sqrt(n - 1) + math.sqrt(m)) ** 2 / n
        assert twnorm(mu, m, n) == pytest.approx(0.0, abs=1e-12)

    def test_increasing_in_eigenvalue(self):
        assert twnorm(2.0, 80, 500) < twnorm(2.5, 80, 500)

    def test_domain(self):
        with pytest.raises(DomainError):
            twnorm(1.0, 1.0, 100.0)
        with pytest.raises(DomainError):
            twnorm(1.0, 100.0, 0.5)


class TestTwtail:
    """TW1 upper tail."""

    @pytest.mark.parametrize(
        "x, tail",
        [
            (0.4501, 0.10),
            (0.9793, 0.05),
            (2.0234, 0.01),
        ],
    )
    def test_published_quantiles(self, x, tail):
        assert twtail(x) == pytest.approx(tail, abs=3e-3)

    def test_below_support(self):
        assert twtail(-20.0) == 1.0

    def test_monotone(self):
        xs = [-6.0 + 0.25 * i for i in range(50)]
        tails = [twtail(x) for x in xs]
        assert all(b <= a for a, b in zip(tails, tails[1:]))
        assert tails[0] == pytest.approx(1.0, abs=1e-5)
        assert tails[-1] < 1e-4

    def test_nan(self):
        with pytest.raises(DomainError):
            twtail(float("nan"))
