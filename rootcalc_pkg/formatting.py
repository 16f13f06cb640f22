"""Output formatting for numbers and solutions.

The output style is one of a closed set and travels with an explicit
``OutputConfig`` value; nothing here reads global state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .complex_number import Complex
from .config import (
    OUTPUT_PRECISION,
    OUTPUT_STYLE,
    RADICAL_MAX_DIVISOR,
    RADICAL_MAX_RADICAND,
    RADICAL_MIN_DENOMINATOR,
    RADICAL_TOLERANCE,
)
from .rational import Rational

SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


class OutputStyle(Enum):
    ASCII = "ascii"
    UNICODE = "unicode"
    LATEX = "latex"

    @classmethod
    def from_name(cls, name: str) -> OutputStyle:
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(
                f"Unknown output style {name!r} (expected ascii, unicode or latex)"
            ) from None


@dataclass(frozen=True)
class OutputConfig:
    style: OutputStyle = OutputStyle.ASCII
    precision: int = OUTPUT_PRECISION

    @classmethod
    def default(cls) -> OutputConfig:
        """Config built from ``ROOTCALC_OUTPUT_STYLE`` and ``ROOTCALC_OUTPUT_PRECISION``."""
        return cls(style=OutputStyle.from_name(OUTPUT_STYLE), precision=OUTPUT_PRECISION)


def subscriptify(input_str: str) -> str:
    return input_str.translate(SUBSCRIPTS)


def format_number(val: Any, precision: int = OUTPUT_PRECISION) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        text = fmt.format(float(val))
        # "-0" reads badly in root lists
        return "0" if text in ("-0", "-0.0") else text
    except (ValueError, TypeError, OverflowError):
        return str(val)


def _minus(config: OutputConfig) -> str:
    return "−" if config.style is OutputStyle.UNICODE else "-"


@dataclass(frozen=True)
class Radical:
    """``(offset + coeff*sqrt(radicand)) / divisor`` with integer parts.

    ``radicand`` is square-free and at least 2, ``coeff`` is non-zero and
    carries the sign, ``divisor`` is positive.
    """

    offset: int
    coeff: int
    radicand: int
    divisor: int


def _square_free(k: int) -> tuple[int, int]:
    """Split ``k`` into ``(c, m)`` with ``k == c*c*m`` and ``m`` square-free."""
    c, m = 1, k
    f = 2
    while f * f <= m:
        while m % (f * f) == 0:
            m //= f * f
            c *= f
        f += 1
    return c, m


def find_radical(value: Rational) -> Radical | None:
    """Recognise a rational approximation of ``(p + c*sqrt(m))/d``.

    Square roots leave the kernel as best-fit fractions with large
    denominators (``sqrt(2)`` becomes ``8119/5741``). Such values are matched
    against ``(p ± sqrt(k))/d`` for small ``d`` and ``k``; fractions with a
    denominator below ``RADICAL_MIN_DENOMINATOR`` are never rewritten.
    """
    if value.denominator < RADICAL_MIN_DENOMINATOR:
        return None
    try:
        v = value.to_float()
    except OverflowError:
        return None
    span = math.isqrt(RADICAL_MAX_RADICAND) + 1
    for d in range(1, RADICAL_MAX_DIVISOR + 1):
        t = v * d
        nearest = round(t)
        for p in sorted(range(nearest - span, nearest + span + 1), key=abs):
            r = t - p
            k = round(r * r)
            if k < 2 or k > RADICAL_MAX_RADICAND or math.isqrt(k) ** 2 == k:
                continue
            if abs(math.sqrt(k) - abs(r)) > RADICAL_TOLERANCE * d:
                continue
            c, m = _square_free(k)
            return Radical(offset=p, coeff=c if r > 0 else -c, radicand=m, divisor=d)
    return None


def _root_text(coeff: int, radicand: int, config: OutputConfig) -> str:
    if config.style is OutputStyle.ASCII:
        root = f"sqrt({radicand})"
        return root if coeff == 1 else f"{coeff}*{root}"
    if config.style is OutputStyle.UNICODE:
        root = f"√{radicand}"
    else:
        root = f"\\sqrt{{{radicand}}}"
    return root if coeff == 1 else f"{coeff}{root}"


def format_radical(radical: Radical, config: OutputConfig) -> str:
    """``√2``, ``-3√2/2``, ``(1 + √5)/2``, ``\\frac{1 + \\sqrt{5}}{2}``."""
    root = _root_text(abs(radical.coeff), radical.radicand, config)
    negative = radical.coeff < 0
    if radical.offset == 0:
        if radical.divisor == 1:
            return f"-{root}" if negative else root
        if config.style is OutputStyle.LATEX:
            frac = f"\\frac{{{root}}}{{{radical.divisor}}}"
        else:
            frac = f"{root}/{radical.divisor}"
        return f"-{frac}" if negative else frac

    sign = _minus(config) if negative else "+"
    numer = f"{radical.offset} {sign} {root}"
    if radical.divisor == 1:
        return numer
    if config.style is OutputStyle.LATEX:
        return f"\\frac{{{numer}}}{{{radical.divisor}}}"
    return f"({numer})/{radical.divisor}"


def _fraction_text(value: Rational, config: OutputConfig) -> str:
    if value.is_integer():
        return str(value.numerator)
    if config.style is OutputStyle.LATEX:
        sign = "-" if value.numerator < 0 else ""
        return f"{sign}\\frac{{{abs(value.numerator)}}}{{{value.denominator}}}"
    return f"{value.numerator}/{value.denominator}"


def format_rational(value: Rational, config: OutputConfig) -> str:
    """Integer, radical form when one is recognised, else a fraction."""
    if value.is_integer():
        return str(value.numerator)
    radical = find_radical(value)
    if radical is not None:
        return format_radical(radical, config)
    return _fraction_text(value, config)


IMAGINARY_JOIN = {OutputStyle.ASCII: "*", OutputStyle.UNICODE: "·", OutputStyle.LATEX: " "}


def _imaginary(im: Rational, config: OutputConfig) -> str:
    if im == 1:
        return "i"
    if im == -1:
        return "-i"
    radical = find_radical(im)
    if radical is None:
        return f"{_fraction_text(im, config)}i"
    text = format_radical(radical, config)
    if radical.offset != 0 and config.style is not OutputStyle.LATEX:
        text = f"({text})"
    return f"{text}{IMAGINARY_JOIN[config.style]}i"


def format_complex(value: Complex, config: OutputConfig) -> str:
    """Exact form: ``5``, ``i``, ``-2i``, ``3 + i``, ``1/2 - 3/4i``, ``-1 + √2·i``."""
    re, im = value.real, value.imag
    if im.is_zero():
        return format_rational(re, config)
    if re.is_zero():
        return _imaginary(im, config)
    real_text = format_rational(re, config)
    if " " in real_text and config.style is not OutputStyle.LATEX:
        real_text = f"({real_text})"
    sign = _minus(config) if im < 0 else "+"
    return f"{real_text} {sign} {_imaginary(abs(im), config)}"


def format_approx(value: Complex, config: OutputConfig) -> str:
    """Decimal form with ``config.precision`` significant digits.

    Values beyond the float range keep their exact form.
    """
    try:
        z = value.to_complex()
    except OverflowError:
        return format_complex(value, config)
    real_text = format_number(z.real, config.precision)
    if value.is_real():
        return real_text
    imag_text = format_number(abs(z.imag), config.precision)
    if value.real.is_zero():
        return f"-{imag_text}i" if z.imag < 0 else f"{imag_text}i"
    sign = "-" if z.imag < 0 else "+"
    return f"{real_text} {sign} {imag_text}i"


def format_variable(name: str, config: OutputConfig) -> str:
    """``x1`` as ``x1``, ``x₁`` or ``x_{1}`` depending on the style."""
    base = name.rstrip("0123456789")
    index = name[len(base):]
    if not index or config.style is OutputStyle.ASCII:
        return name
    if config.style is OutputStyle.UNICODE:
        return base + subscriptify(index)
    return f"{base}_{{{index}}}"


def format_solution(var: str, value: Complex, config: OutputConfig) -> str:
    return f"{format_variable(var, config)} = {format_complex(value, config)}"


def format_prompt(config: OutputConfig) -> str:
    return "➤ " if config.style is OutputStyle.UNICODE else ">>> "
