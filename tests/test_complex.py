"""Tests for complex numbers over exact rational parts."""

import cmath

import pytest

from rootcalc_pkg.complex_number import Complex, as_complex
from rootcalc_pkg.rational import Rational
from rootcalc_pkg.types import DivisionByZero


class TestComplexArithmetic:
    def test_add_sub(self):
        a = Complex(1, 2)
        b = Complex(Rational(1, 2), -3)
        assert a + b == Complex(Rational(3, 2), -1)
        assert (a + b) - b == a

    def test_multiply(self):
        assert Complex(1, 2) * Complex(3, -1) == Complex(5, 5)

    def test_divide(self):
        assert Complex(5, 5) / Complex(3, -1) == Complex(1, 2)

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZero):
            Complex(1, 1) / Complex(0)

    def test_inverse(self):
        assert Complex(0, 2).inverse() == Complex(0, Rational(-1, 2))
        with pytest.raises(DivisionByZero):
            Complex(0).inverse()

    def test_mixed_with_int(self):
        assert Complex(1, 1) + 1 == Complex(2, 1)
        assert 2 * Complex(1, 1) == Complex(2, 2)
        assert 1 - Complex(0, 1) == Complex(1, -1)

    def test_negation(self):
        assert -Complex(1, -2) == Complex(-1, 2)


class TestComplexPower:
    def test_powers_of_i(self):
        i = Complex.i()
        assert i.pow(2) == Complex(-1)
        assert i.pow(3) == Complex(0, -1)
        assert i.pow(4) == Complex(1)

    def test_zero_exponent(self):
        assert Complex(3, 4).pow(0) == Complex(1)

    def test_negative_exponent(self):
        assert Complex(2).pow(-2) == Complex(Rational(1, 4))
        assert Complex(2) ** -1 == Complex(Rational(1, 2))

    def test_zero_to_negative_power(self):
        with pytest.raises(DivisionByZero):
            Complex(0).pow(-1)

    def test_binomial(self):
        assert Complex(1, 1).pow(8) == Complex(16)


class TestComplexSqrt:
    def test_positive_real(self):
        assert Complex(4).sqrt() == Complex(2)

    @pytest.mark.parametrize("value", [1, 2, 9, Rational(1, 4)])
    def test_negative_real_is_positive_imaginary(self, value):
        root = Complex(-Rational(value)).sqrt()
        assert root.real.is_zero()
        assert root.imag > 0

    def test_negative_four(self):
        assert Complex(-4).sqrt() == Complex(0, 2)

    def test_exact_complex_root(self):
        assert Complex(3, 4).sqrt() == Complex(2, 1)
        assert Complex(3, -4).sqrt() == Complex(2, -1)

    def test_sqrt_of_i(self):
        root = Complex.i().sqrt().to_complex()
        assert root == pytest.approx(cmath.sqrt(1j), abs=1e-6)

    @pytest.mark.parametrize("z", [Complex(1, 2), Complex(-3, 1), Complex(Rational(1, 2), Rational(-7, 3))])
    def test_square_of_root(self, z):
        root = z.sqrt()
        assert (root * root).to_complex() == pytest.approx(z.to_complex(), abs=1e-5)

    def test_principal_branch(self):
        for z in (Complex(-3, 1), Complex(-3, -1), Complex(2, -5)):
            assert z.sqrt().real >= 0


class TestComplexFunctions:
    def test_sin_cos_of_zero(self):
        assert Complex(0).sin() == Complex(0)
        assert Complex(0).cos() == Complex(1)

    def test_sin_cos_against_cmath(self):
        z = Complex(1, 1)
        assert z.sin().to_complex() == pytest.approx(cmath.sin(1 + 1j), abs=1e-5)
        assert z.cos().to_complex() == pytest.approx(cmath.cos(1 + 1j), abs=1e-5)

    def test_modulus(self):
        z = Complex(3, 4)
        assert z.modulus_squared() == Rational(25)
        assert z.abs() == Rational(5)
        assert abs(z) == Rational(5)

    def test_conjugate(self):
        assert Complex(3, 4).conjugate() == Complex(3, -4)

    def test_predicates(self):
        assert Complex(0).is_zero()
        assert Complex(2).is_real()
        assert not Complex(2, 1).is_real()


class TestComplexConstruction:
    def test_from_doubles(self):
        assert Complex.from_doubles(0.5, -0.25) == Complex(Rational(1, 2), Rational(-1, 4))

    def test_from_complex(self):
        assert Complex.from_complex(1j) == Complex.i()

    def test_from_real(self):
        assert Complex.from_real(Rational(2, 3)) == Complex(Rational(2, 3), 0)

    def test_as_complex_coerces_plain_numbers(self):
        assert as_complex(3) == Complex(3)
        assert as_complex(0.5) == Complex(Rational(1, 2))
        assert as_complex(2 - 1j) == Complex(2, -1)

    def test_to_complex(self):
        assert Complex(Rational(1, 2), -2).to_complex() == complex(0.5, -2.0)

    def test_equality_and_hash_with_int(self):
        assert Complex(3) == 3
        assert hash(Complex(3)) == hash(3)
        assert len({Complex(1, 2), Complex(Rational(2, 2), 2)}) == 1

    def test_immutable(self):
        z = Complex(1, 2)
        with pytest.raises(AttributeError):
            z.real = Rational(5)


class TestComplexToString:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (Complex(5), "5"),
            (Complex(0, 1), "i"),
            (Complex(0, -1), "-i"),
            (Complex(0, 2), "2i"),
            (Complex(3, 1), "3 + i"),
            (Complex(3, -1), "3 - i"),
            (Complex(3, -4), "3 - 4i"),
            (Complex(Rational(1, 2), Rational(3, 4)), "1/2 + 3/4i"),
            (Complex(Rational(-1, 3)), "-1/3"),
        ],
    )
    def test_to_string(self, value, expected):
        assert value.to_string() == expected
        assert str(value) == expected
