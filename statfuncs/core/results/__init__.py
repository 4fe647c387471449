"""
Result classes for statfuncs.

This module provides data structures for:
- Iterative solutions with a convergence status
- Two-sample test results
- Gamma maximum-likelihood fits
- Hardy-Weinberg test results
"""

from .results import (
    ConvergenceStatus,
    ConvergenceResult,
    TwoSampleResult,
    GammaFit,
    HardyWeinbergResult,
)

__all__ = [
    "ConvergenceStatus",
    "ConvergenceResult",
    "TwoSampleResult",
    "GammaFit",
    "HardyWeinbergResult",
]
