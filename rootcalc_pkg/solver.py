"""Closed-form polynomial solvers.

This module provides:
- Linear, quadratic, cubic (Cardano) and quartic (Ferrari) solvers
- Degree dispatch to the iterative solver for degree 5 and above
- ``*_equation`` variants that take an equation string

Coefficients are given highest degree first. Plain numbers are accepted and
coerced to :class:`Complex` (floats through ``Rational.from_double``).

Linear and quadratic solving is exact up to the square root. The cubic
solver works in floating point on the real parts of its coefficients and
re-encodes its roots, so cubic and quartic roots are approximations.
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np

from .coefficients import equation_degree, extract_coefficients
from .complex_number import Complex, as_complex
from .config import CASE_THRESHOLD
from .iterative import solve_quintic
from .logging_config import get_logger
from .types import (
    InfiniteSolutions,
    InvalidCoefficientCount,
    NoSolution,
    ZeroLeadingCoefficient,
)

logger = get_logger("solver")

SQRT3 = math.sqrt(3.0)


def _prepare(coeffs: Sequence, expected: int, name: str) -> List[Complex]:
    if len(coeffs) != expected:
        raise InvalidCoefficientCount(
            f"{name} equation needs {expected} coefficients, got {len(coeffs)}",
            expected=expected,
            actual=len(coeffs),
        )
    values = [as_complex(c) for c in coeffs]
    if values[0].is_zero() and expected > 2:
        raise ZeroLeadingCoefficient(
            f"Leading coefficient of a {name.lower()} equation must be non-zero"
        )
    return values


def _cbrt(value: float) -> float:
    return float(np.cbrt(value))


def solve_linear(coeffs: Sequence) -> List[Complex]:
    """Solve ``a*x + b = 0``.

    Raises:
        InfiniteSolutions: if a == 0 and b == 0
        NoSolution: if a == 0 and b != 0
    """
    a, b = _prepare(coeffs, 2, "Linear")
    if a.is_zero():
        if b.is_zero():
            raise InfiniteSolutions("Infinite solutions (0 = 0)")
        raise NoSolution(f"No solution ({b} = 0)")
    return [-b / a]


def solve_quadratic(coeffs: Sequence, collapse_repeated: bool = True) -> List[Complex]:
    """Solve ``a*x^2 + b*x + c = 0``.

    Returns ``[(-b + s)/2a, (-b - s)/2a]`` with ``s`` the principal square
    root of the discriminant. Two exactly equal roots collapse into one entry
    unless ``collapse_repeated`` is False.
    """
    a, b, c = _prepare(coeffs, 3, "Quadratic")
    disc = b * b - Complex(4) * a * c
    s = disc.sqrt()
    two_a = Complex(2) * a
    x1 = (-b + s) / two_a
    x2 = (-b - s) / two_a
    if collapse_repeated and x1 == x2:
        return [x1]
    return [x1, x2]


def solve_cubic(coeffs: Sequence) -> List[Complex]:
    """Solve a cubic with Cardano's method.

    Only the real parts of the coefficients are used. Always returns three
    roots; for a complex pair the order is ``[real, +imag, -imag]``.
    """
    values = _prepare(coeffs, 4, "Cubic")
    a, b, c, d = (v.real.to_float() for v in values)

    # Depressed cubic t^3 + p*t + q with x = t - b/3a
    p = (3 * a * c - b * b) / (3 * a * a)
    q = (2 * b**3 - 9 * a * b * c + 27 * a * a * d) / (27 * a**3)
    disc = q * q / 4 + p**3 / 27
    shift = -b / (3 * a)

    if abs(disc) < CASE_THRESHOLD:
        u = _cbrt(-q / 2)
        if abs(p) < CASE_THRESHOLD:
            logger.debug("Cubic: triple root")
            depressed = [u, u, u]
        else:
            logger.debug("Cubic: double root")
            depressed = [-u, -u, 2 * u]
        return [Complex.from_doubles(t + shift, 0.0) for t in depressed]

    if disc > 0:
        logger.debug("Cubic: one real root and a complex pair")
        sd = math.sqrt(disc)
        u = _cbrt(-q / 2 + sd)
        v = _cbrt(-q / 2 - sd)
        t1 = u + v
        re = -t1 / 2 + shift
        im = SQRT3 * (u - v) / 2
        return [
            Complex.from_doubles(t1 + shift, 0.0),
            Complex.from_doubles(re, im),
            Complex.from_doubles(re, -im),
        ]

    logger.debug("Cubic: three real roots")
    phi = math.atan2(math.sqrt(-disc), -q / 2)
    r = math.sqrt(-p / 3)
    return [
        Complex.from_doubles(2 * r * math.cos((phi + 2 * math.pi * k) / 3) + shift, 0.0)
        for k in range(3)
    ]


def _pick_resolvent_root(roots: List[Complex]) -> Complex:
    """First positive real root, else the first non-zero one.

    m = 0 only solves the resolvent when q = 0 and splits the quartic only
    when it is a perfect square in y^2, so it is the last resort.
    """
    for m in roots:
        if m.is_real() and m.real > 0:
            return m
    for m in roots:
        if not m.is_zero():
            return m
    return roots[0]


def solve_quartic(coeffs: Sequence) -> List[Complex]:
    """Solve a quartic with Ferrari's method.

    The depressed quartic ``y^4 + p*y^2 + q*y + r`` is split into two
    quadratics through a root ``m`` of the resolvent cubic
    ``m^3 + 2p*m^2 + (p^2 - 4r)*m - q^2``. Always returns four roots.
    """
    a, b, c, d, e = _prepare(coeffs, 5, "Quartic")

    a2 = a * a
    a3 = a2 * a
    a4 = a3 * a
    b2 = b * b
    p = (Complex(8) * a * c - Complex(3) * b2) / (Complex(8) * a2)
    q = (b2 * b - Complex(4) * a * b * c + Complex(8) * a2 * d) / (Complex(8) * a3)
    r = (
        Complex(-3) * b2 * b2
        + Complex(256) * a3 * e
        - Complex(64) * a2 * b * d
        + Complex(16) * a * b2 * c
    ) / (Complex(256) * a4)

    resolvent = solve_cubic([Complex(1), Complex(2) * p, p * p - Complex(4) * r, -(q * q)])
    m = _pick_resolvent_root(resolvent)
    logger.debug(f"Quartic: resolvent root m = {m}")

    s = m.sqrt()
    if s.is_zero():
        correction = Complex(0)
    else:
        correction = q / (Complex(2) * s)
    half = (p + m) / Complex(2)

    ys = solve_quadratic([Complex(1), s, half - correction], collapse_repeated=False)
    ys += solve_quadratic([Complex(1), -s, half + correction], collapse_repeated=False)

    shift = b / (Complex(4) * a)
    return [y - shift for y in ys]


def solve_polynomial(coeffs: Sequence) -> List[Complex]:
    """Solve a polynomial of any supported degree."""
    count = len(coeffs)
    if count < 2:
        raise InvalidCoefficientCount(
            f"A polynomial equation needs at least 2 coefficients, got {count}",
            expected="at least 2",
            actual=count,
        )
    logger.debug(f"Solving degree {count - 1} polynomial")
    if count == 2:
        return solve_linear(coeffs)
    if count == 3:
        return solve_quadratic(coeffs)
    if count == 4:
        return solve_cubic(coeffs)
    if count == 5:
        return solve_quartic(coeffs)
    return solve_quintic(coeffs)


# Equation string variants


def solve_linear_equation(text: str) -> List[Complex]:
    return solve_linear(extract_coefficients(text, 1))


def solve_quadratic_equation(text: str) -> List[Complex]:
    return solve_quadratic(extract_coefficients(text, 2))


def solve_cubic_equation(text: str) -> List[Complex]:
    return solve_cubic(extract_coefficients(text, 3))


def solve_quartic_equation(text: str) -> List[Complex]:
    return solve_quartic(extract_coefficients(text, 4))


def solve_quintic_equation(text: str) -> List[Complex]:
    return solve_quintic(extract_coefficients(text, max(5, equation_degree(text))))


def solve_equation(text: str) -> List[Complex]:
    """Detect the degree of ``text`` and solve it.

    An equation without ``x`` is treated as linear, so ``5 = 5`` reports
    infinite solutions and ``5 = 3`` reports none.
    """
    degree = max(1, equation_degree(text))
    return solve_polynomial(extract_coefficients(text, degree))
