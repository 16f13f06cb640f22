"""Tests for 2x2 and 3x3 linear systems."""

import unittest

from rootcalc_pkg.complex_number import Complex
from rootcalc_pkg.linear_system import (
    solve_2x2_system,
    solve_3x3_system,
    solve_linear_system,
    solve_system_equations,
)
from rootcalc_pkg.rational import Rational
from rootcalc_pkg.types import InvalidCoefficientCount, ParseError, SingularMatrix


class TestAugmentedMatrix(unittest.TestCase):
    def test_two_by_two(self):
        result = solve_linear_system([[1, 1, 5], [1, -1, 1]])
        self.assertEqual(result, [("x1", Complex(3)), ("x2", Complex(2))])

    def test_three_by_three(self):
        result = solve_linear_system([[1, 1, 1, 6], [2, -1, 1, 3], [1, 2, -1, 2]])
        self.assertEqual(
            result, [("x1", Complex(1)), ("x2", Complex(2)), ("x3", Complex(3))]
        )

    def test_pivoting_needed(self):
        # zero in the top-left corner forces a row swap
        result = solve_linear_system([[0, 1, 2], [1, 0, 3]])
        self.assertEqual(result, [("x1", Complex(3)), ("x2", Complex(2))])

    def test_fractional_solution(self):
        result = solve_linear_system([[2, 1, 1], [1, 3, 2]])
        self.assertEqual(
            result, [("x1", Complex(Rational(1, 5))), ("x2", Complex(Rational(3, 5)))]
        )

    def test_complex_entries(self):
        result = solve_linear_system([[Complex(0, 1), 0, 1], [0, 1, 2]])
        self.assertEqual(result, [("x1", Complex(0, -1)), ("x2", Complex(2))])

    def test_singular(self):
        with self.assertRaises(SingularMatrix) as ctx:
            solve_linear_system([[1, 1, 2], [2, 2, 4]])
        self.assertEqual(ctx.exception.code, "SINGULAR")
        self.assertEqual(ctx.exception.column, 1)

    def test_unsupported_size(self):
        with self.assertRaises(InvalidCoefficientCount):
            solve_linear_system([[1, 2]])
        with self.assertRaises(InvalidCoefficientCount):
            solve_linear_system([[1, 0, 0, 0, 1]] * 4)

    def test_ragged_row(self):
        with self.assertRaises(InvalidCoefficientCount) as ctx:
            solve_linear_system([[1, 1, 5], [1, -1]])
        self.assertEqual(ctx.exception.expected, 3)
        self.assertEqual(ctx.exception.actual, 2)


class TestSystemEquations(unittest.TestCase):
    def test_xy_names(self):
        result = solve_2x2_system(["x + y = 5", "x - y = 1"])
        self.assertEqual(dict(result), {"x1": Complex(3), "x2": Complex(2)})

    def test_indexed_names_with_constants_on_left(self):
        result = solve_2x2_system(["2x1 + x2 - 4 = 0", "x1 = x2 - 1"])
        self.assertEqual(dict(result), {"x1": Complex(1), "x2": Complex(2)})

    def test_three_equations(self):
        result = solve_3x3_system(["x + y + z = 6", "2x - y + z = 3", "x + 2y - z = 2"])
        self.assertEqual([v for _, v in result], [Complex(1), Complex(2), Complex(3)])

    def test_wrong_equation_count(self):
        with self.assertRaises(InvalidCoefficientCount):
            solve_2x2_system(["x + y = 1"])
        with self.assertRaises(InvalidCoefficientCount):
            solve_3x3_system(["x + y = 1", "x - y = 0"])
        with self.assertRaises(InvalidCoefficientCount):
            solve_system_equations(["x = 1"])

    def test_z_in_two_variable_system(self):
        with self.assertRaises(ParseError):
            solve_2x2_system(["x + z = 1", "x - y = 0"])

    def test_singular_from_equations(self):
        with self.assertRaises(SingularMatrix):
            solve_2x2_system(["x + y = 1", "2x + 2y = 3"])

    def test_dependent_equations_are_singular(self):
        with self.assertRaises(SingularMatrix):
            solve_2x2_system(["x + y = 1", "2x + 2y = 2"])


if __name__ == "__main__":
    unittest.main()
