"""Special functions for statfuncs.

This package contains the special functions used by the distribution and
test routines:
- Regularized incomplete gamma and beta
- Bernoulli numbers (lazily loaded table)
- Log-gamma, digamma, trigamma, log-beta, beta log-density, gamma ML fit
- Dilogarithm
- Dawson's integral
"""

from .incomplete import gammainc_pq, gammainc_lower, gammainc_upper, betainc
from .bernoulli import BERNOULLI_MAX, BernoulliTable, bernload, bernum, bernoulli_fraction
from .gamma import xlgamma, psi, tau, lbeta, bprob, mleg
from .dilog import li2, dilog
from .dawson import dawson

__all__ = [
    "gammainc_pq",
    "gammainc_lower",
    "gammainc_upper",
    "betainc",
    "BERNOULLI_MAX",
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
]
