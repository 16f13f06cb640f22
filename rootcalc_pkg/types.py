"""Error classes and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    result: str | None = None
    approx: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.approx is not None:
            result_dict["approx"] = self.approx
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.approx is not None:
            parts.append(f"approx={self.approx!r}")
        return f"EvalResult({', '.join(parts)})"


@dataclass
class SolveResult:
    """Result of solving an equation, a polynomial or a linear system."""

    ok: bool
    result_type: str  # "equation" or "system"
    error: str | None = None
    error_code: str | None = None
    degree: int | None = None
    # Root strings (equation) or "name = value" pairs (system)
    exact: list[str] | None = None
    approx: list[str] | None = None
    system_solutions: dict[str, str] | None = None
    # Only meaningful for the iterative solver; closed forms always converge
    converged: bool | None = None
    iterations: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "type": self.result_type}
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        if self.degree is not None:
            result_dict["degree"] = self.degree
        if self.exact is not None:
            result_dict["exact"] = self.exact
        if self.approx is not None:
            result_dict["approx"] = self.approx
        if self.system_solutions is not None:
            result_dict["solutions"] = self.system_solutions
        if self.converged is not None:
            result_dict["converged"] = self.converged
        if self.iterations is not None:
            result_dict["iterations"] = self.iterations
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return (
                f"SolveResult(ok=False, result_type={self.result_type!r}, "
                f"error={self.error!r}, error_code={self.error_code!r})"
            )
        parts = [f"ok={self.ok}", f"result_type={self.result_type!r}"]
        if self.degree is not None:
            parts.append(f"degree={self.degree!r}")
        if self.exact is not None:
            parts.append(f"exact={self.exact!r}")
        if self.approx is not None:
            parts.append(f"approx={self.approx!r}")
        if self.system_solutions is not None:
            parts.append(f"system_solutions={self.system_solutions!r}")
        if self.converged is not None:
            parts.append(f"converged={self.converged!r}")
        return f"SolveResult({', '.join(parts)})"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(Exception):
    """Raised when an equation term or expression cannot be parsed."""

    def __init__(self, message: str, code: str = "PARSE_FAILURE", term: str | None = None):
        self.message = message
        self.code = code
        self.term = term
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class SolverError(Exception):
    """Raised when solving fails."""

    default_code = "SOLVER_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidCoefficientCount(SolverError):
    """The coefficient vector (or matrix shape) does not fit the solver."""

    default_code = "INVALID_COEFFICIENT_COUNT"

    def __init__(self, message: str, expected: str | int | None = None, actual: int | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class ZeroLeadingCoefficient(SolverError):
    """The highest-degree coefficient is exactly zero."""

    default_code = "ZERO_LEADING_COEFFICIENT"

    def __init__(self, message: str, index: int = 0):
        self.index = index
        super().__init__(message)


class NoSolution(ZeroLeadingCoefficient):
    """0x = b with b != 0."""

    default_code = "NO_SOLUTION"


class InfiniteSolutions(ZeroLeadingCoefficient):
    """0x = 0."""

    default_code = "INFINITE_SOLUTIONS"


class SingularMatrix(SolverError):
    """Gaussian elimination met an exactly-zero pivot."""

    default_code = "SINGULAR"

    def __init__(self, message: str, column: int | None = None):
        self.column = column
        super().__init__(message)


class DivisionByZero(SolverError, ZeroDivisionError):
    """Exact division by a zero rational or a complex number of zero modulus."""

    default_code = "DIVISION_BY_ZERO"


class EvaluationError(SolverError):
    """An expression uses a name or operation the kernel cannot evaluate."""

    default_code = "EVALUATION_ERROR"
