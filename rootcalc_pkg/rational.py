"""Exact rational numbers.

``Rational`` wraps :class:`fractions.Fraction` so that the value is always
reduced with a positive denominator, comparisons are exact, and division by
zero raises :class:`~rootcalc_pkg.types.DivisionByZero` instead of a bare
``ZeroDivisionError``.

Transcendental helpers (``sqrt``, ``sin``, ``cos``, ``sinh``, ``cosh``) work
in floating point and re-encode the result with :meth:`Rational.from_double`.
Each call is a lossy round-trip; composing them accumulates error, and
callers that compare results exactly rely on that behaviour staying as is.
"""

from __future__ import annotations

import math
from fractions import Fraction
from numbers import Integral

from .config import MAX_APPROX_DENOMINATOR, SIMPLE_FRACTION_TOLERANCE
from .types import DivisionByZero

# (value, numerator, denominator), checked before the general approximation
SIMPLE_FRACTIONS = (
    (0.5, 1, 2),
    (0.25, 1, 4),
    (0.75, 3, 4),
    (0.125, 1, 8),
    (0.375, 3, 8),
    (0.625, 5, 8),
    (0.875, 7, 8),
    (1.0 / 3.0, 1, 3),
    (2.0 / 3.0, 2, 3),
    (0.2, 1, 5),
    (0.4, 2, 5),
    (0.6, 3, 5),
    (0.8, 4, 5),
)


def _coerce(value: Rational | int | Fraction) -> Fraction | None:
    if isinstance(value, Rational):
        return value._f
    if isinstance(value, (Integral, Fraction)):
        return Fraction(value)
    return None


class Rational:
    """Reduced numerator/denominator pair with exact arithmetic."""

    __slots__ = ("_f",)

    def __init__(self, num: int | Fraction | Rational = 0, den: int = 1) -> None:
        if den == 0:
            raise DivisionByZero(f"Rational with zero denominator: {num}/0")
        if isinstance(num, Rational):
            self._f = num._f / den if den != 1 else num._f
        elif isinstance(num, Fraction):
            self._f = num / den if den != 1 else num
        elif isinstance(num, Integral) and isinstance(den, Integral):
            self._f = Fraction(int(num), int(den))
        else:
            raise TypeError(
                f"Rational needs integer parts, got {type(num).__name__}/{type(den).__name__}"
                " (use Rational.from_double for floats)"
            )

    @classmethod
    def from_double(cls, value: float) -> Rational:
        """Best-fit rational for a floating value.

        Common fractions (halves, thirds, quarters, fifths, eighths) are matched
        within ``SIMPLE_FRACTION_TOLERANCE``; anything else gets the closest
        fraction whose denominator does not exceed ``MAX_APPROX_DENOMINATOR``.

        Raises:
            ValueError: if ``value`` is NaN or infinite
        """
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Cannot approximate non-finite value {value!r}")
        if value == 0.0:
            return cls(0)

        abs_value = abs(value)
        for frac_val, num, den in SIMPLE_FRACTIONS:
            if abs(abs_value - frac_val) < SIMPLE_FRACTION_TOLERANCE:
                result = Fraction(num, den)
                return cls(-result if value < 0 else result)

        result = Fraction(abs_value).limit_denominator(MAX_APPROX_DENOMINATOR)
        return cls(-result if value < 0 else result)

    @classmethod
    def from_string(cls, text: str) -> Rational:
        """Parse ``"n"``, ``"n/d"`` exactly or a decimal through :meth:`from_double`."""
        text = text.strip()
        if "/" in text:
            num, den = text.split("/", 1)
            return cls(int(num), int(den))
        try:
            return cls(int(text))
        except ValueError:
            return cls.from_double(float(text))

    # Accessors

    @property
    def numerator(self) -> int:
        return self._f.numerator

    @property
    def denominator(self) -> int:
        return self._f.denominator

    def as_fraction(self) -> Fraction:
        return self._f

    def to_float(self) -> float:
        return float(self._f)

    def __float__(self) -> float:
        return float(self._f)

    def to_string(self) -> str:
        if self._f.denominator == 1:
            return str(self._f.numerator)
        return f"{self._f.numerator}/{self._f.denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational({self._f.numerator}, {self._f.denominator})"

    def is_zero(self) -> bool:
        return self._f == 0

    def is_integer(self) -> bool:
        return self._f.denominator == 1

    def bit_length(self) -> int:
        """Size in bits of the larger of numerator and denominator."""
        return max(abs(self._f.numerator).bit_length(), self._f.denominator.bit_length())

    # Arithmetic

    def __add__(self, other: Rational | int | Fraction) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._f + o)

    __radd__ = __add__

    def __sub__(self, other: Rational | int | Fraction) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._f - o)

    def __rsub__(self, other: Rational | int | Fraction) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(o - self._f)

    def __mul__(self, other: Rational | int | Fraction) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._f * o)

    __rmul__ = __mul__

    def __truediv__(self, other: Rational | int | Fraction) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if o == 0:
            raise DivisionByZero(f"Division of {self} by zero")
        return Rational(self._f / o)

    def __rtruediv__(self, other: Rational | int | Fraction) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if self._f == 0:
            raise DivisionByZero(f"Division of {Rational(o)} by zero")
        return Rational(o / self._f)

    def __neg__(self) -> Rational:
        return Rational(-self._f)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return Rational(abs(self._f))

    def abs(self) -> Rational:
        return abs(self)

    def __pow__(self, exp: int) -> Rational:
        if not isinstance(exp, Integral):
            return NotImplemented
        if exp < 0 and self._f == 0:
            raise DivisionByZero("Zero raised to a negative power")
        return Rational(self._f ** int(exp))

    # Comparison

    def __eq__(self, other: object) -> bool:
        o = _coerce(other)  # type: ignore[arg-type]
        if o is None:
            return NotImplemented
        return self._f == o

    def __hash__(self) -> int:
        return hash(self._f)

    def __lt__(self, other: Rational | int | Fraction) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._f < o

    def __le__(self, other: Rational | int | Fraction) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._f <= o

    def __gt__(self, other: Rational | int | Fraction) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._f > o

    def __ge__(self, other: Rational | int | Fraction) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._f >= o

    def __bool__(self) -> bool:
        return self._f != 0

    def signum(self) -> Rational:
        if self._f > 0:
            return Rational(1)
        if self._f < 0:
            return Rational(-1)
        return Rational(0)

    # Approximate transcendentals

    def sqrt(self) -> Rational:
        """Approximate square root; negative values raise ``ValueError``."""
        return Rational.from_double(math.sqrt(self.to_float()))

    def sin(self) -> Rational:
        return Rational.from_double(math.sin(self.to_float()))

    def cos(self) -> Rational:
        return Rational.from_double(math.cos(self.to_float()))

    def sinh(self) -> Rational:
        return Rational.from_double(math.sinh(self.to_float()))

    def cosh(self) -> Rational:
        return Rational.from_double(math.cosh(self.to_float()))

    # Perfect powers

    def is_perfect_square(self) -> bool:
        """True when the value is ``(a/b)**2`` for integers a, b."""
        if self._f < 0:
            return False
        return self.is_perfect_power(2)

    def sqrt_exact(self) -> tuple[bool, Rational]:
        """Return ``(True, root)`` for perfect squares, else ``(False, approximation)``."""
        if self.is_perfect_square():
            return True, self._exact_root(2)
        return False, self.sqrt()

    def is_perfect_power(self, n: int) -> bool:
        """True when the value is ``(a/b)**n`` for integers a, b.

        Even roots of negative values are rejected.
        """
        if n < 1:
            raise ValueError(f"Root order must be positive, got {n}")
        if self._f < 0 and n % 2 == 0:
            return False
        numer = abs(self._f.numerator)
        denom = self._f.denominator
        root_numer = _integer_root(numer, n)
        root_denom = _integer_root(denom, n)
        return root_numer**n == numer and root_denom**n == denom

    def nth_root_exact(self, n: int) -> tuple[bool, Rational]:
        """Return ``(True, root)`` for perfect n-th powers, else ``(False, approximation)``.

        An odd root of a negative value is negative.
        """
        if self.is_perfect_power(n):
            return True, self._exact_root(n)
        value = self.to_float()
        if value < 0 and n % 2 == 1:
            return False, Rational.from_double(-((-value) ** (1.0 / n)))
        return False, Rational.from_double(abs(value) ** (1.0 / n))

    def _exact_root(self, n: int) -> Rational:
        root = Rational(
            _integer_root(abs(self._f.numerator), n),
            _integer_root(self._f.denominator, n),
        )
        return -root if self._f < 0 else root


def _integer_root(value: int, n: int) -> int:
    """Floor of the n-th root of a non-negative integer."""
    if value < 2 or n == 1:
        return value
    if n == 2:
        return math.isqrt(value)
    # Newton's method from an overestimate, all in integers
    x = 1 << -(-value.bit_length() // n)
    while True:
        y = ((n - 1) * x + value // x ** (n - 1)) // n
        if y >= x:
            return x
        x = y
