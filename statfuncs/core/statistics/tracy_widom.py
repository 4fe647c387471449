"""statfuncs.core.statistics.tracy_widom

Tracy-Widom (beta = 1) statistics for the leading eigenvalue of a sample
covariance matrix.

twnorm centres and scales an eigenvalue with Johnstone's constants in the
form used for genetic principal components (Patterson, Price & Reich 2006):

    mu    = (sqrt(n-1) + sqrt(m))^2 / n
    sigma = (sqrt(n-1) + sqrt(m)) / n * (1/sqrt(n-1) + 1/sqrt(m))^(1/3)

with m the number of samples and n the (effective) number of markers, and
the eigenvalue normalised so that the eigenvalues sum to m - 1.

twtail approximates the TW1 law by a shifted gamma distribution (Chiani 2014):

    TW1 ~ Gamma(k, theta) - alpha,  k = 46.446, theta = 0.186054, alpha = 9.84801
"""

from __future__ import annotations

import math

from ..errors import DomainError
from ..special.incomplete import gammainc_upper

TW_SHAPE = 46.446
TW_SCALE = 0.186054
TW_SHIFT = 9.84801


def twnorm(lam: float, m: float, n: float) -> float:
    """Normalise a leading eigenvalue to a Tracy-Widom statistic.

    Args:
        lam: leading eigenvalue (eigenvalues summing to m - 1)
        m: number of samples (>1)
        n: number of markers (>1)
    """
    if m <= 1.0 or n <= 1.0:
        raise DomainError("m and n must be greater than 1")
    root_n = math.sqrt(n - 1.0)
    root_m = math.sqrt(m)
    mu = (root_n + root_m) ** 2 / n
    sigma = (root_n + root_m) / n * (1.0 / root_n + 1.0 / root_m) ** (1.0 / 3.0)
    return (lam - mu) / sigma


def twtail(twstat: float) -> float:
    """Upper tail P(TW1 > twstat)."""
    if math.isnan(twstat):
        raise DomainError("twstat must be a number")
    y = (twstat + TW_SHIFT) / TW_SCALE
    if y <= 0.0:
        return 1.0
    return gammainc_upper(TW_SHAPE, y)
