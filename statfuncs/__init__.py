"""
statfuncs - statistical special functions

Hypothesis-test statistics (chi-square, Kolmogorov-Smirnov, median test,
Hardy-Weinberg, binomial tails, Tracy-Widom), special functions (log-gamma,
digamma, trigamma, dilogarithm, Dawson's integral, Bernoulli numbers) and
distribution tails with their inverses (normal, chi-square, F).

Conventions:
- Tail probabilities are right tails, P(statistic > value), unless stated
- Arguments outside a function's domain raise DomainError (a ValueError)
- Iterative routines have a *_result variant carrying a ConvergenceStatus
- Array arguments accept any sequence or numpy array
"""

import logging

__version__ = "1.0.0"
__author__ = "statfuncs"

from .core import (
    CHI_EPSILON,
    CHI_MAX,
    LOG_SQRT_PI,
    I_SQRT_PI,
    BIGX,
    ex,
    DomainError,
    ConvergenceError,
    BernoulliTableError,
    SolverOptions,
    ConvergenceStatus,
    ConvergenceResult,
    TwoSampleResult,
    GammaFit,
    HardyWeinbergResult,
    BernoulliTable,
    bernload,
    bernum,
    bernoulli_fraction,
    xlgamma,
    psi,
    tau,
    lbeta,
    bprob,
    mleg,
    li2,
    dilog,
    dawson,
    nordis,
    ntail,
    zprob,
    zprob_result,
    rtlchsq,
    critchi,
    critchi_result,
    rtlf,
    conchi,
    chitest,
    hwstat,
    hwtest,
    medchi,
    ks2,
    probks,
    binomtail,
    binlogtail,
    genlogbin,
    twtail,
    twnorm,
    ifirstgt,
    firstgt,
)
from .core import __all__ as _core_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"] + list(_core_all)
