"""
Configuration models for statfuncs.

- SolverOptions: iteration caps and tolerances for the iterative routines
"""

from .options import SolverOptions

__all__ = [
    "SolverOptions",
]
