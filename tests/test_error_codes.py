"""Test error codes returned by the API and raised by the kernel."""

import unittest

from rootcalc_pkg.api import _error_fields, evaluate, solve_equation, solve_polynomial, solve_system
from rootcalc_pkg.expression import preprocess
from rootcalc_pkg.types import (
    DivisionByZero,
    EvaluationError,
    InvalidCoefficientCount,
    SolverError,
    ValidationError,
)


class TestErrorCodes(unittest.TestCase):
    """Test that functions return appropriate error codes."""

    def test_forbidden_token_error_code(self):
        with self.assertRaises(ValidationError) as ctx:
            preprocess("import os")
        self.assertEqual(ctx.exception.code, "FORBIDDEN_TOKEN")
        self.assertIn("forbidden", str(ctx.exception).lower())

    def test_too_long_error_code(self):
        with self.assertRaises(ValidationError) as ctx:
            preprocess("1" * 10001)
        self.assertEqual(ctx.exception.code, "TOO_LONG")
        self.assertIn("too long", str(ctx.exception).lower())

    def test_evaluate_error_codes(self):
        cases = {
            "": "EMPTY_INPUT",
            "(1 + 2": "UNBALANCED",
            "1/0": "DIVISION_BY_ZERO",
            "x + 1": "EVALUATION_ERROR",
            "1 +* 2": "PARSE_FAILURE",
            "lambda: 0": "FORBIDDEN_TOKEN",
        }
        for text, code in cases.items():
            with self.subTest(text=text):
                result = evaluate(text)
                self.assertFalse(result.ok)
                self.assertEqual(result.error_code, code)

    def test_invalid_equation_format(self):
        result = solve_equation("x = x = 1")
        self.assertFalse(result.ok)
        self.assertEqual(result.error_code, "INVALID_FORMAT")
        self.assertIn("exactly one", result.error)

    def test_unparsable_term(self):
        result = solve_equation("x^2 + y = 0")
        self.assertFalse(result.ok)
        self.assertEqual(result.error_code, "PARSE_FAILURE")

    def test_degenerate_linear(self):
        self.assertEqual(solve_equation("5 = 5").error_code, "INFINITE_SOLUTIONS")
        self.assertEqual(solve_equation("x = x + 3").error_code, "NO_SOLUTION")

    def test_polynomial_error_codes(self):
        self.assertEqual(solve_polynomial([1]).error_code, "INVALID_COEFFICIENT_COUNT")
        self.assertEqual(solve_polynomial([0, 1, 2]).error_code, "ZERO_LEADING_COEFFICIENT")
        self.assertEqual(
            solve_polynomial([0, 0, 0, 0, 0, 1]).error_code, "ZERO_LEADING_COEFFICIENT"
        )

    def test_system_error_codes(self):
        self.assertEqual(solve_system("x + y = 1").error_code, "INVALID_COEFFICIENT_COUNT")
        self.assertEqual(solve_system("x + y = 1, 2x + 2y = 2").error_code, "SINGULAR")


class TestErrorHierarchy(unittest.TestCase):
    def test_division_by_zero_is_both(self):
        self.assertTrue(issubclass(DivisionByZero, SolverError))
        self.assertTrue(issubclass(DivisionByZero, ZeroDivisionError))

    def test_default_and_explicit_codes(self):
        self.assertEqual(SolverError("boom").code, "SOLVER_ERROR")
        self.assertEqual(SolverError("boom", code="CUSTOM").code, "CUSTOM")
        self.assertEqual(EvaluationError("bad").code, "EVALUATION_ERROR")

    def test_count_error_carries_sizes(self):
        err = InvalidCoefficientCount("wrong", expected=3, actual=2)
        self.assertEqual((err.expected, err.actual), (3, 2))
        self.assertEqual(str(err), "wrong")

    def test_domain_errors_mapped(self):
        fields = _error_fields(ValueError("math domain error"))
        self.assertEqual(fields, {"error": "math domain error", "error_code": "DOMAIN_ERROR"})


if __name__ == "__main__":
    unittest.main()
