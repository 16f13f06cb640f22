"""Complex numbers with exact rational parts."""

from __future__ import annotations

from fractions import Fraction
from numbers import Integral

from .rational import Rational
from .types import DivisionByZero


def _as_rational(value: Rational | int | Fraction | float) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, (Integral, Fraction)):
        return Rational(Fraction(value))
    if isinstance(value, float):
        return Rational.from_double(value)
    raise TypeError(f"Cannot use {type(value).__name__} as a rational part")


def as_complex(value: Complex | Rational | int | Fraction | float | complex) -> Complex:
    """Coerce a plain number to ``Complex``; floats go through ``from_double``."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, complex):
        return Complex.from_complex(value)
    return Complex(_as_rational(value))


class Complex:
    """Immutable ``real + imag*i`` over two :class:`Rational` parts.

    ``+ - * /`` are exact. ``sqrt``, ``sin`` and ``cos`` go through the
    floating-point helpers of :class:`Rational` and are approximate.
    """

    __slots__ = ("_real", "_imag")

    def __init__(self, real: Rational | int | Fraction = 0, imag: Rational | int | Fraction = 0) -> None:
        object.__setattr__(self, "_real", _as_rational(real))
        object.__setattr__(self, "_imag", _as_rational(imag))

    def __setattr__(self, name, value):
        raise AttributeError("Complex is immutable")

    @classmethod
    def from_real(cls, value: Rational | int | Fraction) -> Complex:
        return cls(value)

    @classmethod
    def from_double(cls, value: float) -> Complex:
        return cls(Rational.from_double(value))

    @classmethod
    def from_doubles(cls, real: float, imag: float) -> Complex:
        return cls(Rational.from_double(real), Rational.from_double(imag))

    @classmethod
    def from_complex(cls, value: complex) -> Complex:
        return cls.from_doubles(value.real, value.imag)

    @classmethod
    def i(cls) -> Complex:
        return cls(0, 1)

    @property
    def real(self) -> Rational:
        return self._real

    @property
    def imag(self) -> Rational:
        return self._imag

    # Arithmetic

    def __add__(self, other) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Complex(self._real + o._real, self._imag + o._imag)

    __radd__ = __add__

    def __sub__(self, other) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Complex(self._real - o._real, self._imag - o._imag)

    def __rsub__(self, other) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        a, b = self._real, self._imag
        c, d = o._real, o._imag
        return Complex(a * c - b * d, a * d + b * c)

    __rmul__ = __mul__

    def __truediv__(self, other) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        denom = o.modulus_squared()
        if denom.is_zero():
            raise DivisionByZero(f"Division of {self} by zero")
        a, b = self._real, self._imag
        c, d = o._real, o._imag
        return Complex((a * c + b * d) / denom, (b * c - a * d) / denom)

    def __rtruediv__(self, other) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __neg__(self) -> Complex:
        return Complex(-self._real, -self._imag)

    def __pos__(self) -> Complex:
        return self

    def inverse(self) -> Complex:
        """Return ``1/z``; raises ``DivisionByZero`` for zero."""
        denom = self.modulus_squared()
        if denom.is_zero():
            raise DivisionByZero("Inverse of zero")
        return Complex(self._real / denom, -self._imag / denom)

    def pow(self, n: int) -> Complex:
        """Integer power by repeated squaring."""
        if n == 0:
            return Complex(1)
        if n < 0:
            return self.pow(-n).inverse()
        result = Complex(1)
        base = self
        while n:
            if n & 1:
                result = result * base
            base = base * base
            n >>= 1
        return result

    def __pow__(self, n: int) -> Complex:
        if not isinstance(n, Integral):
            return NotImplemented
        return self.pow(int(n))

    # Magnitude and parts

    def modulus_squared(self) -> Rational:
        return self._real * self._real + self._imag * self._imag

    def abs(self) -> Rational:
        """Approximate modulus."""
        return self.modulus_squared().sqrt()

    def __abs__(self) -> Rational:
        return self.abs()

    def conjugate(self) -> Complex:
        return Complex(self._real, -self._imag)

    def is_zero(self) -> bool:
        return self._real.is_zero() and self._imag.is_zero()

    def is_real(self) -> bool:
        return self._imag.is_zero()

    def to_complex(self) -> complex:
        return complex(self._real.to_float(), self._imag.to_float())

    def __complex__(self) -> complex:
        return self.to_complex()

    # Approximate functions

    def sqrt(self) -> Complex:
        """Principal square root.

        Both radicands are clamped at zero since the approximate modulus can
        land slightly below ``|real|``.
        """
        re, im = self._real, self._imag
        if im.is_zero():
            if re >= 0:
                return Complex(re.sqrt())
            return Complex(0, (-re).sqrt())

        modulus = self.abs()
        real_part = _clamp((modulus + re) / 2).sqrt()
        imag_part = _clamp((modulus - re) / 2).sqrt()
        if im < 0:
            imag_part = -imag_part
        return Complex(real_part, imag_part)

    def sin(self) -> Complex:
        a, b = self._real, self._imag
        return Complex(a.sin() * b.cosh(), a.cos() * b.sinh())

    def cos(self) -> Complex:
        a, b = self._real, self._imag
        return Complex(a.cos() * b.cosh(), -(a.sin() * b.sinh()))

    # Comparison and display

    def __eq__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._real == o._real and self._imag == o._imag

    def __hash__(self) -> int:
        if self._imag.is_zero():
            return hash(self._real)
        return hash((self._real, self._imag))

    def to_string(self) -> str:
        re, im = self._real, self._imag
        if im.is_zero():
            return re.to_string()
        if re.is_zero():
            return _imag_term(im)
        sign = "-" if im < 0 else "+"
        return f"{re.to_string()} {sign} {_imag_term(abs(im))}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Complex({self._real!r}, {self._imag!r})"


def _coerce(value) -> Complex | None:
    if isinstance(value, Complex):
        return value
    if isinstance(value, (Rational, Integral, Fraction)):
        return Complex(value)
    return None


def _clamp(value: Rational) -> Rational:
    return value if value > 0 else Rational(0)


def _imag_term(im: Rational) -> str:
    if im == 1:
        return "i"
    if im == -1:
        return "-i"
    return f"{im.to_string()}i"
