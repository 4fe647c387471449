"""
Solver options for the iterative statistical routines.

This module defines configuration for the inverse-distribution and
maximum-likelihood solvers: iteration caps, tolerances and saturation limits.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..constants import CHI_EPSILON, CHI_MAX


@dataclass
class SolverOptions:
    """
    Configuration options for iterative approximations.

    Attributes:
        max_iterations: Iteration cap for every iterative routine (default: 200)
        chi_epsilon: Absolute bracket width at which critchi stops (default: 1e-6)
        chi_max: Upper bracket and saturation value for critchi (default: 99999.0)
        z_tolerance: Newton step size at which zprob stops (default: 1e-12)
        gamma_tolerance: Relative step size at which mleg stops (default: 1e-10)
        strict: Raise ConvergenceError instead of returning a best-effort
            value when the iteration cap is reached (default: False)
    """

    max_iterations: int = 200
    chi_epsilon: float = CHI_EPSILON
    chi_max: float = CHI_MAX
    z_tolerance: float = 1e-12
    gamma_tolerance: float = 1e-10
    strict: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        if self.chi_epsilon <= 0:
            raise ValueError("chi_epsilon must be positive")

        if self.chi_max <= 0:
            raise ValueError("chi_max must be positive")

        if self.z_tolerance <= 0:
            raise ValueError("z_tolerance must be positive")

        if self.gamma_tolerance <= 0:
            raise ValueError("gamma_tolerance must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "max_iterations": self.max_iterations,
            "chi_epsilon": self.chi_epsilon,
            "chi_max": self.chi_max,
            "z_tolerance": self.z_tolerance,
            "gamma_tolerance": self.gamma_tolerance,
            "strict": self.strict,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SolverOptions':
        """
        Create SolverOptions from a dictionary.

        Args:
            data: Dictionary with option values

        Returns:
            New SolverOptions instance
        """
        return cls(
            max_iterations=data.get("max_iterations", 200),
            chi_epsilon=data.get("chi_epsilon", CHI_EPSILON),
            chi_max=data.get("chi_max", CHI_MAX),
            z_tolerance=data.get("z_tolerance", 1e-12),
            gamma_tolerance=data.get("gamma_tolerance", 1e-10),
            strict=data.get("strict", False),
        )

    @classmethod
    def default(cls) -> 'SolverOptions':
        """Create options with default values."""
        return cls()

    @classmethod
    def high_precision(cls) -> 'SolverOptions':
        """
        Create options for high-precision work.

        Returns:
            SolverOptions with tighter tolerances and a larger iteration cap
        """
        return cls(
            max_iterations=1000,
            chi_epsilon=1e-10,
            z_tolerance=1e-15,
            gamma_tolerance=1e-14,
        )

    def __repr__(self) -> str:
        return (
            f"SolverOptions("
            f"max_iter={self.max_iterations}, "
            f"chi_eps={self.chi_epsilon}, "
            f"strict={self.strict})"
        )
