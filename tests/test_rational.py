"""Unit tests for the exact rational type."""

import math
import unittest
from fractions import Fraction

from rootcalc_pkg.rational import Rational
from rootcalc_pkg.types import DivisionByZero


class TestRationalConstruction(unittest.TestCase):
    """Reduction, sign normalisation and zero denominators."""

    def test_reduced_form(self):
        r = Rational(6, 4)
        self.assertEqual(r.numerator, 3)
        self.assertEqual(r.denominator, 2)

    def test_negative_denominator_moves_sign(self):
        r = Rational(1, -2)
        self.assertEqual(r.numerator, -1)
        self.assertEqual(r.denominator, 2)

    def test_zero_denominator(self):
        with self.assertRaises(DivisionByZero):
            Rational(1, 0)

    def test_zero_denominator_is_zero_division_error(self):
        with self.assertRaises(ZeroDivisionError):
            Rational(5, 0)

    def test_float_parts_rejected(self):
        with self.assertRaises(TypeError):
            Rational(2.5)
        with self.assertRaises(TypeError):
            Rational(1, 0.5)
        self.assertEqual(Rational.from_double(2.5), Rational(5, 2))

    def test_from_fraction(self):
        self.assertEqual(Rational(Fraction(3, 9)), Rational(1, 3))

    def test_from_string(self):
        self.assertEqual(Rational.from_string("3/4"), Rational(3, 4))
        self.assertEqual(Rational.from_string("7"), Rational(7))
        self.assertEqual(Rational.from_string("2.5"), Rational(5, 2))


class TestFromDouble(unittest.TestCase):
    """Best-fit rational approximation of floats."""

    def test_zero(self):
        self.assertEqual(Rational.from_double(0.0), Rational(0))

    def test_simple_fractions(self):
        self.assertEqual(Rational.from_double(0.5), Rational(1, 2))
        self.assertEqual(Rational.from_double(-0.75), Rational(-3, 4))
        self.assertEqual(Rational.from_double(1.0 / 3.0), Rational(1, 3))
        self.assertEqual(Rational.from_double(0.875), Rational(7, 8))

    def test_decimal(self):
        self.assertEqual(Rational.from_double(0.1), Rational(1, 10))
        self.assertEqual(Rational.from_double(2.5), Rational(5, 2))

    def test_pi_uses_bounded_denominator(self):
        self.assertEqual(Rational.from_double(math.pi), Rational(355, 113))

    def test_integers(self):
        self.assertEqual(Rational.from_double(42.0), Rational(42))
        self.assertEqual(Rational.from_double(-3.0), Rational(-3))

    def test_near_integer_rounds(self):
        self.assertEqual(Rational.from_double(2.9999999999999996), Rational(3))

    def test_nan_rejected(self):
        with self.assertRaises(ValueError):
            Rational.from_double(float("nan"))

    def test_infinity_rejected(self):
        with self.assertRaises(ValueError):
            Rational.from_double(float("inf"))
        with self.assertRaises(ValueError):
            Rational.from_double(float("-inf"))


class TestRationalArithmetic(unittest.TestCase):
    """Exact arithmetic, mixed with plain ints."""

    def test_add_then_subtract(self):
        a = Rational(3, 7)
        b = Rational(-5, 11)
        self.assertEqual((a + b) - b, a)

    def test_mixed_int(self):
        half = Rational(1, 2)
        self.assertEqual(half + 1, Rational(3, 2))
        self.assertEqual(1 - half, half)
        self.assertEqual(2 / Rational(4), half)
        self.assertEqual(3 * half, Rational(3, 2))

    def test_multiply_divide(self):
        self.assertEqual(Rational(2, 3) * Rational(3, 4), Rational(1, 2))
        self.assertEqual(Rational(2, 3) / Rational(4, 9), Rational(3, 2))

    def test_divide_by_zero(self):
        with self.assertRaises(DivisionByZero):
            Rational(1, 2) / Rational(0)
        with self.assertRaises(DivisionByZero):
            Rational(1, 2) / 0
        with self.assertRaises(DivisionByZero):
            1 / Rational(0)

    def test_power(self):
        self.assertEqual(Rational(2, 3) ** 2, Rational(4, 9))
        self.assertEqual(Rational(2, 3) ** -2, Rational(9, 4))
        self.assertEqual(Rational(5) ** 0, Rational(1))

    def test_zero_to_negative_power(self):
        with self.assertRaises(DivisionByZero):
            Rational(0) ** -1

    def test_negation_and_abs(self):
        self.assertEqual(-Rational(1, 3), Rational(-1, 3))
        self.assertEqual(abs(Rational(-1, 3)), Rational(1, 3))
        self.assertEqual(Rational(-1, 3).abs(), Rational(1, 3))

    def test_ordering(self):
        self.assertLess(Rational(1, 3), Rational(1, 2))
        self.assertGreater(Rational(-1, 3), Rational(-1, 2))
        self.assertLessEqual(Rational(2, 4), Rational(1, 2))

    def test_signum(self):
        self.assertEqual(Rational(-7, 2).signum(), Rational(-1))
        self.assertEqual(Rational(0).signum(), Rational(0))
        self.assertEqual(Rational(7, 2).signum(), Rational(1))

    def test_predicates(self):
        self.assertTrue(Rational(0).is_zero())
        self.assertTrue(Rational(4, 2).is_integer())
        self.assertFalse(Rational(1, 2).is_integer())

    def test_hash_matches_int(self):
        self.assertEqual(hash(Rational(2)), hash(2))
        self.assertEqual({Rational(1, 2): "half"}[Rational(2, 4)], "half")


class TestRationalFormatting(unittest.TestCase):
    def test_to_string(self):
        self.assertEqual(Rational(5).to_string(), "5")
        self.assertEqual(Rational(-3, 4).to_string(), "-3/4")
        self.assertEqual(str(Rational(10, 4)), "5/2")

    def test_to_float(self):
        self.assertAlmostEqual(Rational(1, 8).to_float(), 0.125)
        self.assertAlmostEqual(float(Rational(-1, 4)), -0.25)


class TestApproximateFunctions(unittest.TestCase):
    """Float round-trips through from_double."""

    def test_sqrt_of_perfect_square(self):
        self.assertEqual(Rational(4).sqrt(), Rational(2))
        self.assertEqual(Rational(9, 16).sqrt(), Rational(3, 4))

    def test_sqrt_approximation(self):
        root = Rational(2).sqrt()
        self.assertAlmostEqual(root.to_float() ** 2, 2.0, places=6)
        self.assertLessEqual(root.denominator, 10000)

    def test_sqrt_negative_is_domain_error(self):
        with self.assertRaises(ValueError):
            Rational(-1).sqrt()

    def test_trig(self):
        self.assertEqual(Rational(0).sin(), Rational(0))
        self.assertEqual(Rational(0).cos(), Rational(1))
        self.assertEqual(Rational(0).sinh(), Rational(0))
        self.assertEqual(Rational(0).cosh(), Rational(1))
        self.assertAlmostEqual(Rational(1).sin().to_float(), math.sin(1.0), places=6)


class TestPerfectPowers(unittest.TestCase):
    def test_perfect_square(self):
        self.assertTrue(Rational(9, 4).is_perfect_square())
        self.assertFalse(Rational(2).is_perfect_square())
        self.assertFalse(Rational(-4).is_perfect_square())

    def test_sqrt_exact(self):
        self.assertEqual(Rational(9, 4).sqrt_exact(), (True, Rational(3, 2)))
        exact, approx = Rational(2).sqrt_exact()
        self.assertFalse(exact)
        self.assertAlmostEqual(approx.to_float(), math.sqrt(2), places=6)

    def test_large_perfect_square(self):
        self.assertTrue(Rational(10**40).is_perfect_square())
        self.assertFalse(Rational(10**40 + 1).is_perfect_square())

    def test_odd_root_of_negative(self):
        value = Rational(-8, 27)
        self.assertTrue(value.is_perfect_power(3))
        self.assertEqual(value.nth_root_exact(3), (True, Rational(-2, 3)))

    def test_even_root_of_negative(self):
        self.assertFalse(Rational(-16).is_perfect_power(4))

    def test_fourth_root(self):
        self.assertEqual(Rational(16, 81).nth_root_exact(4), (True, Rational(2, 3)))

    def test_large_cube(self):
        self.assertEqual(Rational(10**60).nth_root_exact(3), (True, Rational(10**20)))

    def test_inexact_odd_root(self):
        exact, value = Rational(-2).nth_root_exact(3)
        self.assertFalse(exact)
        self.assertLess(value, Rational(0))
        self.assertAlmostEqual(value.to_float(), -(2 ** (1 / 3)), places=6)


if __name__ == "__main__":
    unittest.main()
