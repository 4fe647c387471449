"""statfuncs.core.statistics.distributions

Distribution tails and their inverses.

Implemented:
- Standard normal CDF / upper tail via ``math.erfc``
- Normal upper-tail inverse (zprob): rational initial guess + Halley steps
- Chi-square right tail via the regularized upper incomplete gamma
- Chi-square critical value (critchi) by bisection on [0, CHI_MAX]
- F right tail via the regularized incomplete beta

Chi-square:
  If X ~ ChiSquare(df), then X = 2 * Gamma(a=df/2, scale=1), so
  P(X > z) = Q(df/2, z/2).

F:
  If F ~ F(df1, df2), then P(F > f) = I_x(df2/2, df1/2), x = df2/(df2 + df1 f).

References (algorithms):
- P. J. Acklam's rational approximation for the normal quantile.
- G. Perlman's bisection for chi-square critical values.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Optional

from ..errors import DomainError
from ..models.options import SolverOptions
from ..results.results import ConvergenceResult, ConvergenceStatus
from ..special.incomplete import betainc, gammainc_upper

logger = logging.getLogger(__name__)

_SQRT2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)


# ----------------------------
# Normal
# ----------------------------


def nordis(z: float) -> float:
    """Standard normal CDF, P(Z <= z)."""
    return 0.5 * math.erfc(-z / _SQRT2)


def ntail(z: float) -> float:
    """Standard normal upper tail, P(Z > z)."""
    return 0.5 * math.erfc(z / _SQRT2)


def _normal_pdf(z: float) -> float:
    return math.exp(-0.5 * z * z) / _SQRT_2PI


_A = (
    -3.969683028665376e+01, 2.209460984245205e+02, -2.759285104469687e+02,
    1.383577518672690e+02, -3.066479806614716e+01, 2.506628277459239e+00,
)
_B = (
    -5.447609879822406e+01, 1.615858368580409e+02, -1.556989798598866e+02,
    6.680131188771972e+01, -1.328068155288572e+01,
)
_C = (
    -7.784894002430293e-03, -3.223964580411365e-01, -2.400758277161838e+00,
    -2.549732539343734e+00, 4.374664141464968e+00, 2.938163982698783e+00,
)
_D = (
    7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e+00,
    3.754408661907416e+00,
)
_P_LOW = 0.02425


def _normal_quantile_guess(p: float) -> float:
    """Rational approximation of the normal quantile, relative error ~1e-9."""
    if p < _P_LOW:
        q = math.sqrt(-2.0 * math.log(p))
        return ((((((_C[0] * q + _C[1]) * q + _C[2]) * q + _C[3]) * q + _C[4]) * q + _C[5])
                / ((((_D[0] * q + _D[1]) * q + _D[2]) * q + _D[3]) * q + 1.0))
    if p > 1.0 - _P_LOW:
        q = math.sqrt(-2.0 * math.log1p(-p))
        return -((((((_C[0] * q + _C[1]) * q + _C[2]) * q + _C[3]) * q + _C[4]) * q + _C[5])
                 / ((((_D[0] * q + _D[1]) * q + _D[2]) * q + _D[3]) * q + 1.0))
    q = p - 0.5
    r = q * q
    return ((((((_A[0] * r + _A[1]) * r + _A[2]) * r + _A[3]) * r + _A[4]) * r + _A[5]) * q
            / (((((_B[0] * r + _B[1]) * r + _B[2]) * r + _B[3]) * r + _B[4]) * r + 1.0))


def zprob_result(p: float, options: Optional[SolverOptions] = None) -> ConvergenceResult:
    """Inverse of ntail with convergence status.

    Args:
        p: upper-tail probability in (0, 1)
        options: solver options

    Returns:
        ConvergenceResult with z such that ntail(z) = p
    """
    opts = options or SolverOptions()
    if not (0.0 < p < 1.0):
        raise DomainError("p must be in (0,1)")

    # ntail(z) = p  <=>  Phi(-z) = p
    z = -_normal_quantile_guess(p)

    for it in range(1, opts.max_iterations + 1):
        pdf = _normal_pdf(z)
        if pdf < sys.float_info.min:
            break
        u = (ntail(z) - p) / pdf
        step = u / (1.0 - 0.5 * z * u)
        z += step
        if abs(step) <= opts.z_tolerance * max(1.0, abs(z)):
            return ConvergenceResult(z, ConvergenceStatus.CONVERGED, it)
    else:
        logger.warning("zprob: no convergence after %d iterations (p=%g)", opts.max_iterations, p)
        return ConvergenceResult(z, ConvergenceStatus.MAX_ITERATIONS, opts.max_iterations)

    logger.debug("zprob: density underflow at z=%g (p=%g), keeping last iterate", z, p)
    return ConvergenceResult(z, ConvergenceStatus.UNDERFLOW, it - 1)


def zprob(p: float, options: Optional[SolverOptions] = None) -> float:
    """z such that ntail(z) = p, i.e. the upper-tail normal quantile.

    zprob(0.025) ~= 1.959964
    """
    opts = options or SolverOptions()
    return zprob_result(p, opts).unwrap(opts.strict)


# ----------------------------
# Chi-square
# ----------------------------


def rtlchsq(df: int, z: float, options: Optional[SolverOptions] = None) -> float:
    """Right tail of the chi-square distribution, P(X > z).

    Args:
        df: degrees of freedom (>0)
        z: statistic value
        options: solver options; strict mode raises if the incomplete gamma
            hits its iteration cap

    Returns:
        tail probability in [0, 1]
    """
    if df <= 0:
        raise DomainError("df must be positive")
    if z <= 0.0:
        return 1.0
    strict = options.strict if options is not None else False
    return gammainc_upper(0.5 * float(df), 0.5 * float(z), strict=strict)


def critchi_result(df: int, p: float, options: Optional[SolverOptions] = None) -> ConvergenceResult:
    """Chi-square critical value with convergence status.

    Bisection on [0, chi_max] until the bracket is narrower than chi_epsilon.
    A root at the ceiling is reported as SATURATED rather than as a magic
    value.

    Args:
        df: degrees of freedom (>0)
        p: right-tail probability
        options: solver options (chi_epsilon, chi_max, max_iterations)

    Returns:
        ConvergenceResult with x such that rtlchsq(df, x) = p
    """
    opts = options or SolverOptions()
    if df <= 0:
        raise DomainError("df must be positive")
    if math.isnan(p):
        raise DomainError("p must be a number")

    if p <= 0.0:
        logger.warning("critchi: p=%g saturates at %g", p, opts.chi_max)
        return ConvergenceResult(opts.chi_max, ConvergenceStatus.SATURATED, 0)
    if p >= 1.0:
        return ConvergenceResult(0.0, ConvergenceStatus.CONVERGED, 0)

    lo = 0.0
    hi = opts.chi_max
    x = min(float(df) / math.sqrt(p), hi)

    it = 0
    while hi - lo > opts.chi_epsilon:
        if it >= opts.max_iterations:
            logger.warning("critchi: no convergence after %d iterations (df=%d, p=%g)", it, df, p)
            return ConvergenceResult(x, ConvergenceStatus.MAX_ITERATIONS, it)
        it += 1
        if rtlchsq(df, x, opts) < p:
            hi = x
        else:
            lo = x
        x = 0.5 * (hi + lo)

    if opts.chi_max - x <= opts.chi_epsilon:
        logger.warning("critchi: root for df=%d, p=%g reaches ceiling %g", df, p, opts.chi_max)
        return ConvergenceResult(x, ConvergenceStatus.SATURATED, it)

    logger.debug("critchi: df=%d p=%g -> %g in %d iterations", df, p, x, it)
    return ConvergenceResult(x, ConvergenceStatus.CONVERGED, it)


def critchi(df: int, p: float, options: Optional[SolverOptions] = None) -> float:
    """Chi-square critical value: x with rtlchsq(df, x) = p.

    critchi(1, 0.05) ~= 3.841459
    """
    opts = options or SolverOptions()
    return critchi_result(df, p, opts).unwrap(opts.strict)


# ----------------------------
# F
# ----------------------------


def rtlf(df1: int, df2: int, f: float, options: Optional[SolverOptions] = None) -> float:
    """Right tail of the F distribution, P(F > f).

    Args:
        df1: numerator degrees of freedom (>0)
        df2: denominator degrees of freedom (>0)
        f: statistic value
        options: solver options (strict mode)
    """
    if df1 <= 0 or df2 <= 0:
        raise DomainError("df1 and df2 must be positive")
    if f <= 0.0:
        return 1.0
    if math.isinf(f):
        return 0.0
    x = float(df2) / (float(df2) + float(df1) * f)
    strict = options.strict if options is not None else False
    return betainc(0.5 * float(df2), 0.5 * float(df1), x, strict=strict)
