"""statfuncs.core.statistics.binomial

Binomial tail probabilities.

genlogbin builds the full table of log probabilities log P(X = k) for
X ~ Bin(n, p); the tails are summed from it in log space so that
binlogtail stays finite where binomtail underflows to zero.
"""

from __future__ import annotations

import math

import numpy as np

from ..errors import DomainError

UPPER = "+"
LOWER = "-"


def _check(n: int, p: float) -> None:
    if n < 0:
        raise DomainError("n must be non-negative")
    if not (0.0 <= p <= 1.0):
        raise DomainError("p must be in [0,1]")


def genlogbin(n: int, p: float) -> np.ndarray:
    """Log binomial probabilities.

    Args:
        n: number of trials (>=0)
        p: success probability in [0, 1]

    Returns:
        array a of length n+1 with a[k] = log P(X = k); -inf where P(X = k) = 0
    """
    _check(n, p)
    k = np.arange(n + 1, dtype=float)

    log_coef = np.zeros(n + 1, dtype=float)
    if n > 0:
        j = np.arange(1, n + 1, dtype=float)
        log_coef[1:] = np.cumsum(np.log(n - j + 1.0) - np.log(j))

    succ = np.where(k > 0, k * math.log(p) if p > 0.0 else -np.inf, 0.0)
    fail = np.where(k < n, (n - k) * math.log1p(-p) if p < 1.0 else -np.inf, 0.0)
    return log_coef + succ + fail


def _logsumexp(values: np.ndarray) -> float:
    if values.size == 0:
        return -math.inf
    top = float(np.max(values))
    if math.isinf(top):
        return top
    return top + math.log(float(np.sum(np.exp(values - top))))


def binlogtail(n: int, t: int, p: float, c: str) -> float:
    """Natural log of a binomial tail probability.

    Args:
        n: number of trials
        t: threshold
        p: success probability
        c: '+' for P(X >= t), '-' for P(X <= t)
    """
    _check(n, p)
    if c == UPPER:
        if t <= 0:
            return 0.0
        if t > n:
            return -math.inf
        return min(_logsumexp(genlogbin(n, p)[t:]), 0.0)
    if c == LOWER:
        if t < 0:
            return -math.inf
        if t >= n:
            return 0.0
        return min(_logsumexp(genlogbin(n, p)[: t + 1]), 0.0)
    raise DomainError(f"tail selector must be '+' or '-', got {c!r}")


def binomtail(n: int, t: int, p: float, c: str) -> float:
    """Binomial tail probability: P(X >= t) for c='+', P(X <= t) for c='-'."""
    return math.exp(binlogtail(n, t, p, c))
