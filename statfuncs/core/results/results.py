"""
Result classes for statfuncs routines.

Routines that return more than a single number (test statistics with their
tail probability and class sizes, fitted parameters, iterative solutions with
a convergence status) return one of the dataclasses defined here.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from ..errors import ConvergenceError


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


class ConvergenceStatus(Enum):
    """
    Outcome of an iterative approximation.

    - CONVERGED: tolerance reached
    - SATURATED: root pinned at the configured ceiling (e.g. CHI_MAX)
    - MAX_ITERATIONS: iteration cap reached, value is best effort
    - UNDERFLOW: refinement stopped in the subnormal range, value is the
      last iterate
    """
    CONVERGED = "converged"
    SATURATED = "saturated"
    MAX_ITERATIONS = "max_iterations"
    UNDERFLOW = "underflow"


@dataclass
class ConvergenceResult:
    """
    Value produced by an iterative solver together with its status.

    Attributes:
        value: Solution (best effort unless status is CONVERGED)
        status: How the iteration ended
        iterations: Number of iterations performed
    """

    value: float
    status: ConvergenceStatus
    iterations: int = 0

    @property
    def converged(self) -> bool:
        return self.status is ConvergenceStatus.CONVERGED

    def unwrap(self, strict: bool = False) -> float:
        """Return the value, raising ConvergenceError in strict mode when the cap was hit."""
        if strict and self.status is ConvergenceStatus.MAX_ITERATIONS:
            raise ConvergenceError(
                f"no convergence after {self.iterations} iterations",
                value=self.value,
                iterations=self.iterations,
            )
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "value": _json_safe_value(self.value),
            "status": self.status.value,
            "iterations": self.iterations,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConvergenceResult':
        """Create ConvergenceResult from dictionary."""
        value = data.get("value")
        return cls(
            value=float("nan") if value is None else float(value),
            status=ConvergenceStatus(data["status"]),
            iterations=int(data.get("iterations", 0)),
        )


@dataclass
class TwoSampleResult:
    """
    Result of a two-sample test on a rank-ordered 0/1 label sequence.

    Attributes:
        statistic: Test statistic (chi-square for the median test, D for KS)
        n0: Number of items labelled 0
        n1: Number of items labelled 1
        tail: Right-tail probability of the statistic under the null
    """

    statistic: float
    n0: int
    n1: int
    tail: float

    def __iter__(self):
        return iter((self.statistic, self.n0, self.n1, self.tail))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize two-sample result to dictionary."""
        return {
            "statistic": _json_safe_value(self.statistic),
            "n0": self.n0,
            "n1": self.n1,
            "tail": _json_safe_value(self.tail),
        }


@dataclass
class GammaFit:
    """
    Maximum-likelihood gamma distribution parameters.

    Attributes:
        shape: Shape parameter p
        rate: Rate parameter lambda (mean = shape / rate)
        converged: True if the Newton iteration met its tolerance
        iterations: Newton iterations performed
    """

    shape: float
    rate: float
    converged: bool = True
    iterations: int = 0

    @property
    def scale(self) -> float:
        return 1.0 / self.rate

    @property
    def mean(self) -> float:
        return self.shape / self.rate

    def __iter__(self):
        return iter((self.shape, self.rate))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize gamma fit to dictionary."""
        return {
            "shape": _json_safe_value(self.shape),
            "rate": _json_safe_value(self.rate),
            "converged": self.converged,
            "iterations": self.iterations,
        }


@dataclass
class HardyWeinbergResult:
    """
    Hardy-Weinberg goodness-of-fit for genotype counts.

    Attributes:
        z: Signed z-score; negative for heterozygote deficit
        chi_square: 1-df chi-square statistic (z squared)
        p_value: Right tail of chi_square
        allele_frequency: Frequency of the reference allele
        expected: Expected (hom_ref, het, hom_alt) counts
    """

    z: float
    chi_square: float
    p_value: float
    allele_frequency: float
    expected: Tuple[float, float, float]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize Hardy-Weinberg result to dictionary."""
        return {
            "z": _json_safe_value(self.z),
            "chi_square": _json_safe_value(self.chi_square),
            "p_value": _json_safe_value(self.p_value),
            "allele_frequency": _json_safe_value(self.allele_frequency),
            "expected": [_json_safe_value(float(e)) for e in self.expected],
        }
