"""statfuncs.core.statistics.tests

Test statistics on counts and rank-ordered class labels.

Includes:
- Pearson chi-square for contingency tables and goodness of fit
- Hardy-Weinberg equilibrium statistic for genotype counts
- Median test and two-sample Kolmogorov-Smirnov on 0/1 label sequences
- Kolmogorov distribution tail
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from ..errors import DomainError
from ..results.results import HardyWeinbergResult, TwoSampleResult
from .distributions import rtlchsq


def conchi(a: Sequence[float], m: Optional[int] = None, n: Optional[int] = None) -> float:
    """Pearson chi-square statistic of an m x n contingency table.

    Expected cell count: row_total * col_total / grand_total. Rows and
    columns whose total is zero are dropped. No continuity correction.

    Args:
        a: table counts, either 2-D or flat row-major with m and n given
        m: number of rows
        n: number of columns

    Returns:
        chi-square statistic with (m'-1)(n'-1) degrees of freedom, where m', n'
        count the non-empty rows and columns
    """
    tab = np.asarray(a, dtype=float)
    if m is not None and n is not None:
        if m <= 0 or n <= 0:
            raise DomainError("m and n must be positive")
        if tab.size < m * n:
            raise DomainError(f"table has {tab.size} entries, fewer than m * n = {m * n}")
        tab = tab.reshape(-1)[: m * n].reshape(m, n)
    if tab.ndim != 2:
        raise DomainError("contingency table must be 2-D or given with m and n")
    if np.any(tab < 0.0):
        raise DomainError("contingency table counts must be non-negative")

    rows = tab.sum(axis=1)
    tab = tab[rows > 0.0, :]
    cols = tab.sum(axis=0)
    tab = tab[:, cols > 0.0]

    total = float(tab.sum())
    if total <= 0.0:
        raise DomainError("contingency table is empty")

    expected = np.outer(tab.sum(axis=1), tab.sum(axis=0)) / total
    return float(np.sum((tab - expected) ** 2 / expected))


def chitest(a: Sequence[float], p: Optional[Sequence[float]] = None, n: Optional[int] = None) -> float:
    """Goodness-of-fit chi-square of counts against expected proportions.

    Args:
        a: observed counts
        p: expected proportions or counts (rescaled to the total of a);
            None means uniform
        n: number of cells to use (default: all)

    Returns:
        sum over cells of (observed - expected)^2 / expected
    """
    obs = np.asarray(a, dtype=float).reshape(-1)
    if n is not None:
        obs = obs[:n]
    if obs.size == 0:
        raise DomainError("no cells to test")

    if p is None:
        weights = np.ones_like(obs)
    else:
        weights = np.asarray(p, dtype=float).reshape(-1)
        if n is not None:
            weights = weights[:n]
        if weights.size != obs.size:
            raise DomainError("p must have one entry per cell")
    if np.any(weights < 0.0) or float(weights.sum()) <= 0.0:
        raise DomainError("expected proportions must be non-negative with positive sum")

    expected = weights * (float(obs.sum()) / float(weights.sum()))

    empty = expected <= 0.0
    if np.any(obs[empty] > 0.0):
        raise DomainError("observed count in a cell with zero expectation")

    keep = ~empty
    return float(np.sum((obs[keep] - expected[keep]) ** 2 / expected[keep]))


def hwtest(x: Sequence[float]) -> HardyWeinbergResult:
    """Hardy-Weinberg goodness of fit for genotype counts.

    Args:
        x: (hom_ref, het, hom_alt) counts

    Returns:
        HardyWeinbergResult; z is negative for a heterozygote deficit
    """
    counts = np.asarray(x, dtype=float).reshape(-1)
    if counts.size < 3:
        raise DomainError("hwstat needs three genotype counts")
    counts = counts[:3]
    if np.any(counts < 0.0):
        raise DomainError("genotype counts must be non-negative")

    total = float(counts.sum())
    if total < 0.001:
        return HardyWeinbergResult(0.0, 0.0, 1.0, float("nan"), (0.0, 0.0, 0.0))

    p = (2.0 * counts[0] + counts[1]) / (2.0 * total)
    q = 1.0 - p
    expected = np.array([total * p * p, 2.0 * total * p * q, total * q * q])
    if p <= 0.0 or q <= 0.0:
        return HardyWeinbergResult(0.0, 0.0, 1.0, float(p), tuple(float(e) for e in expected))

    chisq = float(np.sum((counts - expected) ** 2 / expected))
    z = math.sqrt(chisq)
    if counts[1] < expected[1]:
        z = -z

    return HardyWeinbergResult(
        z=z,
        chi_square=chisq,
        p_value=rtlchsq(1, chisq),
        allele_frequency=float(p),
        expected=tuple(float(e) for e in expected),
    )


def hwstat(x: Sequence[float]) -> float:
    """Signed Hardy-Weinberg z-score for (hom_ref, het, hom_alt) counts."""
    return hwtest(x).z


def _labels(cls: Sequence[int], length: Optional[int]) -> np.ndarray:
    labels = np.asarray(cls).reshape(-1)
    if length is not None:
        labels = labels[:length]
    return (labels != 0).astype(int)


def _class_sizes(labels: np.ndarray):
    n1 = int(labels.sum())
    n0 = int(labels.size - n1)
    if n0 == 0 or n1 == 0:
        raise DomainError("both classes must be present")
    return n0, n1


def medchi(cls: Sequence[int], length: Optional[int] = None) -> TwoSampleResult:
    """Median test on a rank-ordered sequence of 0/1 labels.

    The sequence is split at length // 2 into a lower and an upper half and
    the 2x2 table (label x half) is tested with conchi.

    Args:
        cls: class labels in rank order (non-zero counts as 1)
        length: number of labels to use (default: all)

    Returns:
        TwoSampleResult(statistic, n0, n1, tail), tail = P(chi2_1 > statistic)
    """
    labels = _labels(cls, length)
    n0, n1 = _class_sizes(labels)

    half = labels.size // 2
    lower, upper = labels[:half], labels[half:]
    table = np.array([
        [lower.size - lower.sum(), upper.size - upper.sum()],
        [lower.sum(), upper.sum()],
    ], dtype=float)

    stat = conchi(table)
    return TwoSampleResult(statistic=stat, n0=n0, n1=n1, tail=rtlchsq(1, stat))


def ks2(cls: Sequence[int], length: Optional[int] = None) -> TwoSampleResult:
    """Two-sample Kolmogorov-Smirnov test on a rank-ordered 0/1 label sequence.

    D = max |F0 - F1| over the sequence, where F0 and F1 are the empirical
    distribution functions of the two classes. The tail uses the effective
    size ne = n0 n1 / (n0 + n1):
        lambda = (sqrt(ne) + 0.12 + 0.11 / sqrt(ne)) * D

    Returns:
        TwoSampleResult(D, n0, n1, probks(lambda))
    """
    labels = _labels(cls, length)
    n0, n1 = _class_sizes(labels)

    f1 = np.cumsum(labels) / float(n1)
    f0 = np.cumsum(1 - labels) / float(n0)
    d = float(np.max(np.abs(f0 - f1)))

    en = math.sqrt(n0 * n1 / float(n0 + n1))
    lam = (en + 0.12 + 0.11 / en) * d
    return TwoSampleResult(statistic=d, n0=n0, n1=n1, tail=probks(lam))


_KS_EPS1 = 0.001
_KS_EPS2 = 1.0e-8


def probks(lam: float) -> float:
    """Kolmogorov distribution tail Q(lam) = 2 sum_j (-1)^(j-1) exp(-2 j^2 lam^2).

    Returns 1.0 when the alternating series fails to converge (small lam).
    """
    a2 = -2.0 * lam * lam
    fac = 2.0
    total = 0.0
    termbf = 0.0
    for j in range(1, 101):
        term = fac * math.exp(a2 * j * j)
        total += term
        if abs(term) <= _KS_EPS1 * termbf or abs(term) <= _KS_EPS2 * total:
            return min(max(total, 0.0), 1.0)
        fac = -fac
        termbf = abs(term)
    return 1.0
