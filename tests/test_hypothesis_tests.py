"""Tests for contingency, goodness-of-fit, Hardy-Weinberg, median and KS statistics."""

import math

import numpy as np
import pytest

from statfuncs.core.errors import DomainError
from statfuncs.core.statistics.distributions import rtlchsq
from statfuncs.core.statistics.tests import (
    conchi,
    chitest,
    hwstat,
    hwtest,
    medchi,
    ks2,
    probks,
)


# -----------------------------------------------------------------------------
# Contingency and goodness of fit
# -----------------------------------------------------------------------------

class TestContingency:
    """conchi and chitest."""

    def test_conchi_2x2(self):
        # expected [[12, 18], [28, 42]]
        table = [[10, 20], [30, 40]]
        expected = 4 / 12 + 4 / 18 + 4 / 28 + 4 / 42
        assert conchi(table) == pytest.approx(expected, rel=1e-12)
        assert conchi(table) == pytest.approx(0.7937, abs=5e-5)

    def test_conchi_flat_row_major(self):
        assert conchi([10, 20, 30, 40], 2, 2) == pytest.approx(conchi([[10, 20], [30, 40]]), rel=1e-15)

    def test_conchi_2x2_shortcut_formula(self):
        # chi2 = N (ad - bc)^2 / (row1 row2 col1 col2)
        a, b, c, d = 43.0, 17.0, 21.0, 39.0
        n = a + b + c + d
        shortcut = n * (a * d - b * c) ** 2 / ((a + b) * (c + d) * (a + c) * (b + d))
        assert conchi(np.array([[a, b], [c, d]])) == pytest.approx(shortcut, rel=1e-12)

    def test_conchi_independent_table_is_zero(self):
        assert conchi([[2, 4, 6], [3, 6, 9]]) == pytest.approx(0.0, abs=1e-12)

    def test_conchi_drops_empty_rows_and_columns(self):
        base = conchi([[10, 20], [30, 40]])
        assert conchi([[10, 0, 20], [0, 0, 0], [30, 0, 40]]) == pytest.approx(base, rel=1e-12)

    def test_conchi_invalid(self):
        with pytest.raises(DomainError):
            conchi([[0, 0], [0, 0]])
        with pytest.raises(DomainError):
            conchi([1, 2, 3])
        with pytest.raises(DomainError):
            conchi([[1, -2], [3, 4]])
        # flat table shorter than m x n
        with pytest.raises(DomainError):
            conchi([1, 2, 3], 2, 2)
        with pytest.raises(DomainError):
            conchi([1, 2, 3, 4], 0, 2)

    def test_chitest_uniform(self):
        assert chitest([10, 20, 30]) == pytest.approx(10.0, rel=1e-12)

    def test_chitest_proportions_are_rescaled(self):
        assert chitest([10, 20, 30], [1, 2, 3]) == pytest.approx(0.0, abs=1e-12)
        assert chitest([10, 20, 30], [0.1, 0.2, 0.7]) == pytest.approx(
            (10 - 6) ** 2 / 6 + (20 - 12) ** 2 / 12 + (30 - 42) ** 2 / 42, rel=1e-12
        )

    def test_chitest_first_n_cells(self):
        assert chitest([10, 30, 999], None, 2) == pytest.approx(100 / 20 + 100 / 20, rel=1e-12)

    def test_chitest_zero_expectation(self):
        assert chitest([5, 0, 5], [1, 0, 1]) == pytest.approx(0.0, abs=1e-12)
        with pytest.raises(DomainError):
            chitest([5, 1, 5], [1, 0, 1])

    def test_chitest_invalid(self):
        with pytest.raises(DomainError):
            chitest([], None)
        with pytest.raises(DomainError):
            chitest([1, 2], [1, 2, 3])
        with pytest.raises(DomainError):
            chitest([1, 2], [0, 0])


# -----------------------------------------------------------------------------
# Hardy-Weinberg
# -----------------------------------------------------------------------------

class TestHardyWeinberg:
    """hwstat and hwtest."""

    def test_equilibrium(self):
        assert hwstat([25, 50, 25]) == pytest.approx(0.0, abs=1e-12)

    def test_heterozygote_deficit_is_negative(self):
        assert hwstat([50, 0, 50]) == pytest.approx(-10.0, rel=1e-12)

    def test_heterozygote_excess_is_positive(self):
        assert hwstat([0, 100, 0]) == pytest.approx(10.0, rel=1e-12)

    def test_result_fields(self):
        res = hwtest([50, 0, 50])
        assert res.chi_square == pytest.approx(100.0, rel=1e-12)
        assert res.p_value == pytest.approx(rtlchsq(1, 100.0), rel=1e-12)
        assert res.allele_frequency == pytest.approx(0.5)
        assert res.expected == pytest.approx((25.0, 50.0, 25.0))
        assert res.to_dict()["z"] == pytest.approx(-10.0)

    def test_degenerate_samples(self):
        assert hwstat([0, 0, 0]) == 0.0
        assert hwstat([40, 0, 0]) == 0.0
        assert hwtest([0, 0, 0]).to_dict()["allele_frequency"] is None

    def test_invalid(self):
        with pytest.raises(DomainError):
            hwstat([1, 2])
        with pytest.raises(DomainError):
            hwstat([1, -2, 3])


# -----------------------------------------------------------------------------
# Median test and Kolmogorov-Smirnov
# -----------------------------------------------------------------------------

class TestTwoSample:
    """medchi, ks2 and probks."""

    def test_medchi_separated_classes(self):
        res = medchi([0, 0, 0, 0, 1, 1, 1, 1])
        assert res.statistic == pytest.approx(8.0, rel=1e-12)
        assert (res.n0, res.n1) == (4, 4)
        # P(chi2_1 > 8) = erfc(2)
        assert res.tail == pytest.approx(math.erfc(2.0), rel=1e-10)

    def test_medchi_balanced_classes(self):
        stat, n0, n1, tail = medchi([0, 1, 0, 1, 0, 1, 0, 1])
        assert stat == pytest.approx(0.0, abs=1e-12)
        assert tail == pytest.approx(1.0)
        assert n0 == n1 == 4

    def test_medchi_length_and_nonzero_labels(self):
        res = medchi([0, 0, 2, 2, 0, 0], length=4)
        assert (res.n0, res.n1) == (2, 2)
        assert res.statistic == pytest.approx(4.0, rel=1e-12)

    def test_ks2_separated_classes(self):
        res = ks2([0, 0, 0, 0, 1, 1, 1, 1])
        assert res.statistic == pytest.approx(1.0)
        en = math.sqrt(2.0)
        assert res.tail == pytest.approx(probks((en + 0.12 + 0.11 / en) * 1.0), rel=1e-12)
        assert res.tail < 0.05

    def test_ks2_interleaved_classes(self):
        res = ks2([0, 1] * 10)
        assert res.statistic == pytest.approx(0.1)
        assert res.tail > 0.9

    def test_single_class_rejected(self):
        with pytest.raises(DomainError):
            ks2([1, 1, 1])
        with pytest.raises(DomainError):
            medchi([0, 0, 0, 0])

    def test_probks_values(self):
        assert probks(0.0) == 1.0
        assert probks(10.0) == pytest.approx(0.0, abs=1e-80)
        assert probks(30.0) == 0.0
        expected = 2.0 * (math.exp(-2.0) - math.exp(-8.0) + math.exp(-18.0))
        assert probks(1.0) == pytest.approx(expected, abs=1e-8)

    def test_probks_monotone(self):
        lams = [0.3 + 0.05 * i for i in range(60)]
        vals = [probks(x) for x in lams]
        assert all(b <= a for a, b in zip(vals, vals[1:]))
        assert all(0.0 <= v <= 1.0 for v in vals)
