"""statfuncs.core.special.gamma

Gamma-family special functions.

Implemented:
- xlgamma: log Gamma(x) by upward recurrence to x >= 10 followed by the
  Stirling series with Bernoulli-number coefficients
- psi (digamma) and tau (trigamma): recurrence, reflection for negative
  arguments, asymptotic series
- lbeta / bprob: log Beta function and log density of the Beta distribution
- mleg: maximum-likelihood fit of a gamma distribution by Newton's method

Poles and non-positive arguments of xlgamma raise DomainError.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..constants import LOG_SQRT_2PI
from ..errors import ConvergenceError, DomainError
from ..models.options import SolverOptions
from ..results.results import GammaFit
from .bernoulli import series_table

logger = logging.getLogger(__name__)

# Below this the argument is shifted upward before the asymptotic series.
_ASYMPTOTIC_MIN = 10.0
_SERIES_TERMS = 10


def _is_pole(x: float) -> bool:
    return x <= 0.0 and x == math.floor(x)


def xlgamma(x: float) -> float:
    """Natural log of the gamma function for x > 0.

    Args:
        x: argument (>0)

    Returns:
        log Gamma(x)
    """
    x = float(x)
    if not (x > 0.0):
        raise DomainError(f"xlgamma requires x > 0, got {x}")
    if math.isinf(x):
        return math.inf

    shift = 0.0
    while x < _ASYMPTOTIC_MIN:
        shift += math.log(x)
        x += 1.0

    bern = series_table()
    xinv = 1.0 / x
    xinv2 = xinv * xinv
    term = xinv
    corr = 0.0
    for k in range(1, _SERIES_TERMS + 1):
        corr += bern.number(2 * k) / (2 * k * (2 * k - 1)) * term
        term *= xinv2

    return (x - 0.5) * math.log(x) - x + LOG_SQRT_2PI + corr - shift


def psi(x: float) -> float:
    """Digamma function psi(x) = d/dx log Gamma(x).

    Negative non-integer arguments use the reflection
    psi(x) = psi(1 - x) - pi / tan(pi x).
    """
    x = float(x)
    if _is_pole(x):
        raise DomainError(f"psi has a pole at {x}")
    if x < 0.0:
        return psi(1.0 - x) - math.pi / math.tan(math.pi * x)

    acc = 0.0
    while x < _ASYMPTOTIC_MIN:
        acc -= 1.0 / x
        x += 1.0

    bern = series_table()
    xinv2 = 1.0 / (x * x)
    term = xinv2
    series = 0.0
    for k in range(1, _SERIES_TERMS + 1):
        series += bern.number(2 * k) / (2 * k) * term
        term *= xinv2

    return acc + math.log(x) - 0.5 / x - series


def tau(x: float) -> float:
    """Trigamma function psi'(x).

    Negative non-integer arguments use the reflection
    psi'(x) = pi^2 / sin^2(pi x) - psi'(1 - x).
    """
    x = float(x)
    if _is_pole(x):
        raise DomainError(f"tau has a pole at {x}")
    if x < 0.0:
        s = math.sin(math.pi * x)
        return (math.pi * math.pi) / (s * s) - tau(1.0 - x)

    acc = 0.0
    while x < _ASYMPTOTIC_MIN:
        acc += 1.0 / (x * x)
        x += 1.0

    bern = series_table()
    xinv = 1.0 / x
    xinv2 = xinv * xinv
    term = xinv * xinv2
    series = 0.0
    for k in range(1, _SERIES_TERMS + 1):
        series += bern.number(2 * k) * term
        term *= xinv2

    return acc + xinv + 0.5 * xinv2 + series


def lbeta(a: float, b: float) -> float:
    """log Beta(a, b) for a, b > 0."""
    if a <= 0.0 or b <= 0.0:
        raise DomainError("lbeta requires a > 0 and b > 0")
    return xlgamma(a) + xlgamma(b) - xlgamma(a + b)


def bprob(p: float, a: float, b: float) -> float:
    """Log density of the Beta(a, b) distribution at p.

    log f(p) = (a-1) log p + (b-1) log(1-p) - log Beta(a, b)

    Args:
        p: point in (0, 1)
        a: first shape parameter (>0)
        b: second shape parameter (>0)
    """
    if not (0.0 < p < 1.0):
        raise DomainError("p must be in (0,1)")
    return (a - 1.0) * math.log(p) + (b - 1.0) * math.log1p(-p) - lbeta(a, b)


def mleg(a1: float, a2: float, options: Optional[SolverOptions] = None) -> GammaFit:
    """Maximum-likelihood gamma distribution from sufficient statistics.

    For a sample x_i from Gamma(shape=p, rate=lam):
        a1 = mean(x_i), a2 = mean(log x_i)
    The shape solves
        log p - psi(p) = log a1 - a2
    and lam = p / a1.

    Uses the Choi-Wette closed form as the starting point, then Newton steps
    with the trigamma derivative, halving whenever a step would leave the
    region p > 0.

    Args:
        a1: sample mean (>0)
        a2: sample mean of logs (< log a1)
        options: solver options (iteration cap, tolerance, strict mode)

    Returns:
        GammaFit(shape, rate, converged, iterations)
    """
    opts = options or SolverOptions()
    if a1 <= 0.0:
        raise DomainError("a1 must be positive")
    s = math.log(a1) - a2
    if not (s > 0.0):
        raise DomainError("mean of logs must be below log of mean")

    p = (3.0 - s + math.sqrt((s - 3.0) ** 2 + 24.0 * s)) / (12.0 * s)

    converged = False
    iterations = 0
    for iterations in range(1, opts.max_iterations + 1):
        f = math.log(p) - psi(p) - s
        fprime = 1.0 / p - tau(p)
        p_new = p - f / fprime
        if p_new <= 0.0:
            p_new = 0.5 * p
        if abs(p_new - p) <= opts.gamma_tolerance * p:
            p = p_new
            converged = True
            break
        p = p_new

    if not converged:
        logger.warning("mleg: no convergence after %d iterations (shape=%g)", iterations, p)
        if opts.strict:
            raise ConvergenceError("mleg did not converge", value=p, iterations=iterations)
    else:
        logger.debug("mleg: converged in %d iterations", iterations)

    return GammaFit(shape=p, rate=p / a1, converged=converged, iterations=iterations)
