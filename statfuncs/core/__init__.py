"""
Core module for statfuncs.

This module contains pure Python implementations of the statistical special
functions, grouped into configuration models, result types, special
functions and statistics.
"""

from .constants import CHI_EPSILON, CHI_MAX, LOG_SQRT_PI, I_SQRT_PI, BIGX, ex
from .errors import DomainError, ConvergenceError, BernoulliTableError

from .models import SolverOptions

from .results import (
    ConvergenceStatus,
    ConvergenceResult,
    TwoSampleResult,
    GammaFit,
    HardyWeinbergResult,
)

from .special import (
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
)

from .statistics import (
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

__all__ = [
    # Constants
    "CHI_EPSILON",
    "CHI_MAX",
    "LOG_SQRT_PI",
    "I_SQRT_PI",
    "BIGX",
    "ex",

    # Errors
    "DomainError",
    "ConvergenceError",
    "BernoulliTableError",

    # Configuration
    "SolverOptions",

    # Results
    "ConvergenceStatus",
    "ConvergenceResult",
    "TwoSampleResult",
    "GammaFit",
    "HardyWeinbergResult",

    # Special functions
    "BernoulliTable",
    "bernload",
    "bernum",
    "bernoulli_fraction",
    "xlgamma",
    "psi",
    "tau",
    "lbeta",
    "bprob",
    "mleg",
    "li2",
    "dilog",
    "dawson",

    # Distributions and tests
    "nordis",
    "ntail",
    "zprob",
    "zprob_result",
    "rtlchsq",
    "critchi",
    "critchi_result",
    "rtlf",
    "conchi",
    "chitest",
    "hwstat",
    "hwtest",
    "medchi",
    "ks2",
    "probks",
    "binomtail",
    "binlogtail",
    "genlogbin",
    "twtail",
    "twnorm",
    "ifirstgt",
    "firstgt",
]
