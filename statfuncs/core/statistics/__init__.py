"""Statistics utilities for statfuncs.

This package contains distribution tails and hypothesis-test statistics:
- Distribution functions (normal, chi-square, F) and their inverses
- Contingency, goodness-of-fit, Hardy-Weinberg, median and KS tests
- Binomial tails
- Tracy-Widom normalisation and tail
- Table search helpers
"""

from .distributions import nordis, ntail, zprob, zprob_result, rtlchsq, critchi, critchi_result, rtlf
from .tests import conchi, chitest, hwstat, hwtest, medchi, ks2, probks
from .binomial import binomtail, binlogtail, genlogbin
from .tracy_widom import twtail, twnorm
from .tables import ifirstgt, firstgt

__all__ = [
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
