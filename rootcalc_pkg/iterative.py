"""Durand-Kerner (Weierstrass) root finding for degree 5 and above.

The coefficients are normalised exactly with :class:`Complex` division and
then iterated as NumPy complex arrays; exact rationals would grow without
bound over a hundred iterations. Roots are re-encoded with
``Complex.from_doubles`` at the end.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .complex_number import Complex, as_complex
from .config import DK_INITIAL_PHASE, DK_MAX_ITERATIONS, DK_TOLERANCE, MAX_DEGREE
from .logging_config import get_logger
from .types import (
    DivisionByZero,
    InvalidCoefficientCount,
    SolverError,
    ZeroLeadingCoefficient,
)

logger = get_logger("iterative")


@dataclass
class DurandKernerResult:
    """Roots found by :func:`durand_kerner` and how the iteration ended."""

    roots: List[Complex]
    converged: bool
    iterations: int


def _normalized(coeffs: Sequence) -> np.ndarray:
    values = [as_complex(c) for c in coeffs]
    lead = values[0]
    if lead.is_zero():
        raise ZeroLeadingCoefficient("Leading coefficient cannot be zero")
    return np.array([(v / lead).to_complex() for v in values], dtype=complex)


def initial_guesses(normalized: np.ndarray) -> np.ndarray:
    """Evenly spaced points on a circle enclosing the roots.

    The radius is ``1 + max |Re(c_i)|`` over the non-leading coefficients.
    The circle is rotated by ``DK_INITIAL_PHASE`` so that no guess sits on
    the real axis together with its mirror image.
    """
    degree = len(normalized) - 1
    radius = 1.0 + float(np.max(np.abs(normalized[1:].real)))
    angles = 2.0 * np.pi * np.arange(degree) / degree + DK_INITIAL_PHASE
    return radius * np.exp(1j * angles)


def durand_kerner(
    coeffs: Sequence,
    max_iterations: int = DK_MAX_ITERATIONS,
    tolerance: float = DK_TOLERANCE,
) -> DurandKernerResult:
    """Find all roots of a polynomial simultaneously.

    Args:
        coeffs: Coefficients, highest degree first (at least 2)
        max_iterations: Hard cap on the number of sweeps
        tolerance: Stop once the largest ``|dRe| + |dIm|`` change is below this

    Returns:
        DurandKernerResult with ``converged`` False when the cap was reached

    Raises:
        InvalidCoefficientCount: for fewer than 2 coefficients or a degree above MAX_DEGREE
        ZeroLeadingCoefficient: if the leading coefficient is exactly zero
        DivisionByZero: if two estimates coincide
    """
    if len(coeffs) < 2:
        raise InvalidCoefficientCount(
            f"Need at least 2 coefficients, got {len(coeffs)}",
            expected="at least 2",
            actual=len(coeffs),
        )
    if len(coeffs) - 1 > MAX_DEGREE:
        raise InvalidCoefficientCount(
            f"Degree {len(coeffs) - 1} exceeds the maximum of {MAX_DEGREE}",
            expected=f"at most {MAX_DEGREE + 1}",
            actual=len(coeffs),
        )
    normalized = _normalized(coeffs)
    roots = initial_guesses(normalized)
    degree = len(roots)

    converged = False
    iterations = 0
    for iterations in range(1, max_iterations + 1):
        values = np.polyval(normalized, roots)
        diffs = roots[:, np.newaxis] - roots[np.newaxis, :]
        np.fill_diagonal(diffs, 1.0)
        denominators = np.prod(diffs, axis=1)
        if np.any(denominators == 0):
            raise DivisionByZero("Durand-Kerner estimates coincide")

        new_roots = roots - values / denominators
        change = np.max(
            np.abs(new_roots.real - roots.real) + np.abs(new_roots.imag - roots.imag)
        )
        roots = new_roots
        if change < tolerance:
            converged = True
            break

    if not np.all(np.isfinite(roots)):
        raise SolverError("Durand-Kerner iteration diverged")

    logger.debug(
        f"Durand-Kerner degree {degree}: converged={converged} after {iterations} iterations"
    )
    return DurandKernerResult(
        roots=[Complex.from_doubles(float(z.real), float(z.imag)) for z in roots],
        converged=converged,
        iterations=iterations,
    )


def solve_quintic(coeffs: Sequence) -> List[Complex]:
    """Solve a polynomial of degree 5 or higher with Durand-Kerner."""
    if len(coeffs) < 6:
        raise InvalidCoefficientCount(
            f"Quintic equation needs at least 6 coefficients, got {len(coeffs)}",
            expected="at least 6",
            actual=len(coeffs),
        )
    result = durand_kerner(coeffs)
    if not result.converged:
        logger.warning(
            f"Durand-Kerner did not converge within {result.iterations} iterations; "
            "roots are approximate"
        )
    return result.roots
