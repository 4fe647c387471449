"""Exception types raised by statfuncs."""


class DomainError(ValueError):
    """Argument outside the valid domain of a function."""


class ConvergenceError(ArithmeticError):
    """Iterative approximation did not reach its tolerance.

    Only raised when ``SolverOptions.strict`` is set; otherwise the
    best-effort value is returned with a non-converged status.
    """

    def __init__(self, message: str, value: float = float("nan"), iterations: int = 0):
        super().__init__(message)
        self.value = value
        self.iterations = iterations


class BernoulliTableError(RuntimeError):
    """Bernoulli table accessed before it was loaded."""
