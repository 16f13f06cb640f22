"""Gaussian elimination for 2x2 and 3x3 linear systems."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .coefficients import extract_system_row
from .complex_number import Complex, as_complex
from .logging_config import get_logger
from .types import InvalidCoefficientCount, SingularMatrix

logger = get_logger("linear_system")

SUPPORTED_SIZES = (2, 3)


def solve_linear_system(matrix: Sequence[Sequence]) -> List[Tuple[str, Complex]]:
    """Solve an n x (n+1) augmented matrix, n in {2, 3}.

    Pivots on the largest real-part magnitude; imaginary parts are ignored
    when choosing the pivot.

    Returns:
        ``[("x1", v1), ..., ("xn", vn)]``

    Raises:
        InvalidCoefficientCount: for any other shape
        SingularMatrix: when a pivot is exactly zero
    """
    n = len(matrix)
    if n not in SUPPORTED_SIZES:
        raise InvalidCoefficientCount(
            f"Only 2x2 and 3x3 systems are supported, got {n} equations",
            expected="2 or 3",
            actual=n,
        )
    rows = []
    for row in matrix:
        if len(row) != n + 1:
            raise InvalidCoefficientCount(
                f"Each row of a {n}x{n} system needs {n + 1} entries, got {len(row)}",
                expected=n + 1,
                actual=len(row),
            )
        rows.append([as_complex(v) for v in row])

    for col in range(n):
        pivot = col
        best = abs(rows[col][col].real.to_float())
        for r in range(col + 1, n):
            candidate = abs(rows[r][col].real.to_float())
            if candidate > best:
                pivot, best = r, candidate
        if pivot != col:
            rows[col], rows[pivot] = rows[pivot], rows[col]
        if rows[col][col].is_zero():
            raise SingularMatrix(
                "System has no unique solution (singular matrix)", column=col
            )

        for r in range(col + 1, n):
            factor = rows[r][col] / rows[col][col]
            for k in range(col, n + 1):
                rows[r][k] = rows[r][k] - factor * rows[col][k]

    solution = [Complex(0)] * n
    for i in range(n - 1, -1, -1):
        total = rows[i][n]
        for j in range(i + 1, n):
            total = total - rows[i][j] * solution[j]
        solution[i] = total / rows[i][i]

    logger.debug(f"Solved {n}x{n} system")
    return [(f"x{i + 1}", value) for i, value in enumerate(solution)]


def solve_system_equations(equations: Sequence[str]) -> List[Tuple[str, Complex]]:
    """Build the augmented matrix from equation strings and solve it."""
    n = len(equations)
    if n not in SUPPORTED_SIZES:
        raise InvalidCoefficientCount(
            f"Only systems of 2 or 3 equations are supported, got {n}",
            expected="2 or 3",
            actual=n,
        )
    return solve_linear_system([extract_system_row(eq, n) for eq in equations])


def solve_2x2_system(equations: Sequence[str]) -> List[Tuple[str, Complex]]:
    if len(equations) != 2:
        raise InvalidCoefficientCount(
            f"A 2x2 system needs 2 equations, got {len(equations)}",
            expected=2,
            actual=len(equations),
        )
    return solve_system_equations(equations)


def solve_3x3_system(equations: Sequence[str]) -> List[Tuple[str, Complex]]:
    if len(equations) != 3:
        raise InvalidCoefficientCount(
            f"A 3x3 system needs 3 equations, got {len(equations)}",
            expected=3,
            actual=len(equations),
        )
    return solve_system_equations(equations)
