"""statfuncs.core.special.dilog

Dilogarithm.

li2(x) = -integral_0^x ln(1-t)/t dt   (Spence / polylog convention)
dilog(x) = -integral_1^x ln(t)/(t-1) dt = li2(1-x)   (Abramowitz & Stegun 27.7)

li2 maps its argument into [0, 1/2] with the identities

    x < -1:       Li2(x) = -pi^2/6 - ln^2(-x)/2 - Li2(1/x)
    -1 <= x < 0:  Li2(x) = -Li2(x/(x-1)) - ln^2(1-x)/2
    1/2 < x < 1:  Li2(x) = pi^2/6 - ln(x) ln(1-x) - Li2(1-x)

and sums the Bernoulli series Li2(x) = sum_n B_n u^(n+1)/(n+1)!,
u = -ln(1-x), which converges quickly for u <= ln 2.
"""

from __future__ import annotations

import math

from ..errors import DomainError
from .bernoulli import series_table

PI2_6 = math.pi * math.pi / 6.0


def _li2_series(x: float) -> float:
    u = -math.log1p(-x)
    bern = series_table()
    term = u  # u^(n+1) / (n+1)!
    total = 0.0
    for n in range(bern.max_index + 1):
        b = bern.number(n)
        if b:
            contrib = b * term
            total += contrib
            if abs(contrib) < 1e-17 * abs(total):
                break
        term *= u / (n + 2)
    return total


def li2(x: float) -> float:
    """Real dilogarithm Li2(x) for x <= 1."""
    x = float(x)
    if x > 1.0:
        raise DomainError("li2 is real only for x <= 1")
    if x == 1.0:
        return PI2_6
    if x == 0.0:
        return 0.0
    if x < -1.0:
        lm = math.log(-x)
        return -PI2_6 - 0.5 * lm * lm - li2(1.0 / x)
    if x < 0.0:
        l1 = math.log1p(-x)
        return -_li2_series(x / (x - 1.0)) - 0.5 * l1 * l1
    if x <= 0.5:
        return _li2_series(x)
    return PI2_6 - math.log(x) * math.log1p(-x) - _li2_series(1.0 - x)


def dilog(x: float) -> float:
    """Abramowitz-Stegun dilogarithm, -int_1^x ln t/(t-1) dt, for x >= 0."""
    if x < 0.0:
        raise DomainError("dilog requires x >= 0")
    return li2(1.0 - x)
