"""Equation normalisation and coefficient extraction.

Equations are sums of monomials in ``x`` on both sides of a single ``=``.
Terms on the right-hand side are moved to the left with their sign flipped,
so ``x^2 = 3x - 2`` becomes the term list ``+x^2, -3x, +2``.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .complex_number import Complex
from .config import (
    COEFFICIENT_STAR_REGEX,
    MAX_DEGREE,
    MAX_INPUT_LENGTH,
    SUPERSCRIPT_DIGITS,
    SUPERSCRIPT_REGEX,
    SYSTEM_TERM_REGEX,
    SYSTEM_VARIABLES,
    TERM_REGEX,
)
from .rational import Rational
from .types import ParseError, ValidationError


def _superscript_to_caret(match: re.Match) -> str:
    return "^" + "".join(SUPERSCRIPT_DIGITS[ch] for ch in match.group(1))


def _split_terms(side: str) -> List[str]:
    """Split one side of an equation into signed terms."""
    terms = []
    current = ""
    for ch in side:
        if ch in "+-" and current and current[-1] != "^":
            terms.append(current)
            current = ch
        else:
            current += ch
    terms.append(current)
    return [t if t[0] in "+-" else "+" + t for t in terms]


def _flip(term: str) -> str:
    return ("-" if term[0] == "+" else "+") + term[1:]


def normalize_equation(text: str) -> List[str]:
    """Return the signed terms of ``LHS - RHS = 0``.

    A ``*`` is only allowed between a coefficient and its variable
    (``2*x``); anything else containing ``*`` fails as an unparsable term.

    Raises:
        ValidationError: code ``TOO_LONG`` past ``MAX_INPUT_LENGTH``
        ParseError: code ``INVALID_FORMAT`` unless there is exactly one ``=``
            with something on both sides
    """
    if len(text) > MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (>{MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    cleaned = re.sub(r"\s+", "", text.lower())
    cleaned = cleaned.replace("−", "-")
    cleaned = COEFFICIENT_STAR_REGEX.sub("", cleaned)
    cleaned = SUPERSCRIPT_REGEX.sub(_superscript_to_caret, cleaned)

    if cleaned.count("=") != 1:
        raise ParseError(
            f"Equation must contain exactly one '=': {text!r}", code="INVALID_FORMAT"
        )
    lhs, rhs = cleaned.split("=")
    if not lhs or not rhs:
        raise ParseError(
            f"Both sides of the equation must be non-empty: {text!r}",
            code="INVALID_FORMAT",
        )
    return _split_terms(lhs) + [_flip(t) for t in _split_terms(rhs)]


def _term_body(term: str) -> Tuple[int, str]:
    sign = -1 if term[0] == "-" else 1
    body = term[1:]
    if not body:
        raise ParseError("Empty term in equation", term=term)
    return sign, body


def _coefficient(coef: str | None, term: str) -> Rational:
    if not coef:
        return Rational(1)
    try:
        return Rational.from_string(coef)
    except (ValueError, OverflowError) as e:
        raise ParseError(f"Bad coefficient in {term!r}: {e}", term=term) from e


def parse_term(term: str) -> Tuple[int, Rational]:
    """Parse a signed monomial into ``(power, coefficient)``."""
    sign, body = _term_body(term)
    match = TERM_REGEX.match(body)
    if not match or not (match.group("coef") or match.group("var")):
        raise ParseError(f"Cannot parse term {term!r}", term=term)
    if match.group("exp") and not match.group("var"):
        raise ParseError(f"Exponent without variable in {term!r}", term=term)

    value = _coefficient(match.group("coef"), term)
    exp = match.group("exp")
    if not match.group("var"):
        power = 0
    elif exp:
        if len(exp.lstrip("0")) > len(str(MAX_DEGREE)) or int(exp) > MAX_DEGREE:
            raise ParseError(
                f"Power {exp} in {term!r} exceeds the maximum degree {MAX_DEGREE}",
                term=term,
            )
        power = int(exp)
    else:
        power = 1
    return power, value * sign


def equation_degree(text: str) -> int:
    """Highest power of ``x`` appearing in the equation (0 when there is none)."""
    return max(parse_term(term)[0] for term in normalize_equation(text))


def extract_coefficients(text: str, degree: int) -> List[Complex]:
    """Coefficient vector of ``LHS - RHS``, highest degree first.

    Missing powers are zero. Like terms are summed.

    Raises:
        ParseError: for malformed terms, a power above ``degree`` or a
            ``degree`` above ``MAX_DEGREE``
    """
    if degree > MAX_DEGREE:
        raise ParseError(f"Degree {degree} exceeds the maximum of {MAX_DEGREE}")
    coeffs = [Rational(0)] * (degree + 1)
    for term in normalize_equation(text):
        power, value = parse_term(term)
        if power > degree:
            raise ParseError(
                f"Term {term!r} exceeds degree {degree}", term=term
            )
        coeffs[degree - power] = coeffs[degree - power] + value
    return [Complex(c) for c in coeffs]


def extract_system_row(text: str, n: int) -> List[Complex]:
    """Augmented matrix row ``[a_1, ..., a_n, b]`` for a linear equation.

    Variables are ``x1``/``x``, ``x2``/``y`` and ``x3``/``z``. Constants end
    up on the right-hand side.
    """
    row = [Rational(0)] * (n + 1)
    for term in normalize_equation(text):
        sign, body = _term_body(term)
        match = SYSTEM_TERM_REGEX.match(body)
        if not match or not (match.group("coef") or match.group("var")):
            raise ParseError(f"Cannot parse term {term!r}", term=term)

        value = _coefficient(match.group("coef"), term) * sign
        var = match.group("var")
        if var is None:
            row[n] = row[n] - value
            continue
        index = SYSTEM_VARIABLES[var]
        if index >= n:
            raise ParseError(
                f"Variable {var!r} not allowed in a {n}x{n} system", term=term
            )
        row[index] = row[index] + value
    return [Complex(v) for v in row]
