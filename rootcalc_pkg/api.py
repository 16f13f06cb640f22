"""Public API for rootcalc - returns structured objects without side effects."""

from __future__ import annotations

from typing import Sequence

from .coefficients import equation_degree, extract_coefficients
from .complex_number import Complex
from .expression import evaluate_expression, preprocess
from .formatting import OutputConfig, format_approx, format_complex, format_solution
from .iterative import durand_kerner
from .linear_system import solve_system_equations
from .logging_config import get_logger
from .solver import solve_polynomial as _solve_polynomial
from .types import EvalResult, ParseError, SolveResult, SolverError, ValidationError

logger = get_logger("api")

HANDLED_ERRORS = (ValidationError, ParseError, SolverError)
CAUGHT_ERRORS = HANDLED_ERRORS + (ValueError, OverflowError)


def _error_fields(exc: Exception) -> dict:
    if isinstance(exc, HANDLED_ERRORS):
        return {"error": str(exc), "error_code": exc.code}
    # Domain errors from the approximate functions (e.g. sqrt of a huge value)
    return {"error": str(exc), "error_code": "DOMAIN_ERROR"}


def _roots_result(roots: Sequence[Complex], config: OutputConfig, **extra) -> SolveResult:
    return SolveResult(
        ok=True,
        result_type="equation",
        exact=[format_complex(r, config) for r in roots],
        approx=[format_approx(r, config) for r in roots],
        **extra,
    )


def evaluate(expression: str, config: OutputConfig | None = None) -> EvalResult:
    """Evaluate an arithmetic expression.

    Args:
        expression: Expression string (e.g., "1/2 + 1/3", "sqrt(-4)")
        config: Output style and precision (default: OutputConfig())

    Returns:
        EvalResult with the exact result and a decimal approximation

    Example:
        >>> from rootcalc_pkg.api import evaluate
        >>> evaluate("1/2 + 1/3").result
        '5/6'
        >>> evaluate("sqrt(-4)").result
        '2i'
    """
    config = config or OutputConfig()
    try:
        value = evaluate_expression(expression)
        return EvalResult(
            ok=True,
            result=format_complex(value, config),
            approx=format_approx(value, config),
        )
    except CAUGHT_ERRORS as e:
        logger.debug(f"Evaluation of {expression!r} failed: {e}")
        return EvalResult(ok=False, **_error_fields(e))


def solve_polynomial(coeffs: Sequence, config: OutputConfig | None = None) -> SolveResult:
    """Solve a polynomial given its coefficients, highest degree first.

    Example:
        >>> from rootcalc_pkg.api import solve_polynomial
        >>> solve_polynomial([1, 0, 1]).exact
        ['i', '-i']
    """
    config = config or OutputConfig()
    degree = len(coeffs) - 1
    try:
        if degree >= 5:
            dk = durand_kerner(coeffs)
            if not dk.converged:
                logger.warning(
                    f"Durand-Kerner did not converge within {dk.iterations} iterations"
                )
            return _roots_result(
                dk.roots,
                config,
                degree=degree,
                converged=dk.converged,
                iterations=dk.iterations,
            )
        return _roots_result(_solve_polynomial(coeffs), config, degree=degree)
    except CAUGHT_ERRORS as e:
        logger.debug(f"Solving {list(coeffs)!r} failed: {e}")
        return SolveResult(ok=False, result_type="equation", **_error_fields(e))


def solve_equation(equation: str, config: OutputConfig | None = None) -> SolveResult:
    """Solve a single polynomial equation in ``x``.

    The degree is detected from the highest power present; an equation
    without ``x`` is treated as linear.

    Example:
        >>> from rootcalc_pkg.api import solve_equation
        >>> solve_equation("x^2 - 5x + 6 = 0").exact
        ['3', '2']
    """
    try:
        degree = max(1, equation_degree(equation))
        coeffs = extract_coefficients(equation, degree)
    except HANDLED_ERRORS as e:
        return SolveResult(ok=False, result_type="equation", **_error_fields(e))
    return solve_polynomial(coeffs, config)


def solve_system(
    equations: str | Sequence[str], config: OutputConfig | None = None
) -> SolveResult:
    """Solve a 2x2 or 3x3 linear system.

    Args:
        equations: Comma-separated equations (e.g., "x+y=5, x-y=1") or a list

    Returns:
        SolveResult with ``system_solutions`` mapping ``x1``.. to values

    Example:
        >>> from rootcalc_pkg.api import solve_system
        >>> solve_system("x+y=5, x-y=1").system_solutions
        {'x1': '3', 'x2': '2'}
    """
    config = config or OutputConfig()
    if isinstance(equations, str):
        equations = [eq.strip() for eq in equations.split(",") if eq.strip()]
    try:
        solution = solve_system_equations(equations)
        return SolveResult(
            ok=True,
            result_type="system",
            exact=[format_solution(name, value, config) for name, value in solution],
            approx=[format_approx(value, config) for _, value in solution],
            system_solutions={name: format_complex(value, config) for name, value in solution},
        )
    except CAUGHT_ERRORS as e:
        logger.debug(f"Solving system {equations!r} failed: {e}")
        return SolveResult(ok=False, result_type="system", **_error_fields(e))


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate an expression without evaluating it.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from rootcalc_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("import os")
        (False, 'Input contains forbidden token: import')
    """
    try:
        preprocess(expression)
        return True, None
    except ValidationError as e:
        return False, str(e)
