"""Centralized configuration for rootcalc.

This module defines:
- Rational approximation limits (simple-fraction tolerance, denominator cap)
- Numeric case thresholds for the closed-form solvers
- Durand-Kerner iteration limits
- Input validation and result-size limits
- Radical recognition limits for the exact output
- Allowed SymPy names and transformations for expression parsing
- Regex patterns for preprocessing

Configuration can be overridden via:
- CLI flags (see cli.py) for output options
- Environment variables (prefixed with ROOTCALC_)
"""

import os
import re

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    standard_transformations,
)

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("rootcalc")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "0.3.0"

# Rational approximation (Rational.from_double)
SIMPLE_FRACTION_TOLERANCE = float(
    os.getenv("ROOTCALC_SIMPLE_FRACTION_TOLERANCE", "1e-10")
)  # Absolute tolerance for the common-fraction table
MAX_APPROX_DENOMINATOR = int(
    os.getenv("ROOTCALC_MAX_APPROX_DENOMINATOR", "10000")
)  # Denominator cap for best rational approximation

# Closed-form solver case analysis
CASE_THRESHOLD = float(
    os.getenv("ROOTCALC_CASE_THRESHOLD", "1e-10")
)  # Discriminant / p threshold in Cardano's case split

# Durand-Kerner configuration
DK_MAX_ITERATIONS = int(os.getenv("ROOTCALC_DK_MAX_ITERATIONS", "100"))
DK_TOLERANCE = float(
    os.getenv("ROOTCALC_DK_TOLERANCE", "1e-10")
)  # Max L1 change between iterations to stop early
DK_INITIAL_PHASE = float(
    os.getenv("ROOTCALC_DK_INITIAL_PHASE", "0.4")
)  # Rotation (radians) of the initial circle of guesses

# Output configuration
OUTPUT_PRECISION = int(os.getenv("ROOTCALC_OUTPUT_PRECISION", "6"))
OUTPUT_STYLE = os.getenv("ROOTCALC_OUTPUT_STYLE", "ascii")  # ascii, unicode, latex

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("ROOTCALC_MAX_INPUT_LENGTH", "10000"))  # characters
FORBIDDEN_TOKENS = ("__", "import", "lambda", "exec", "eval", "open(")
MAX_INTEGER_EXPONENT = int(
    os.getenv("ROOTCALC_MAX_INTEGER_EXPONENT", "10000")
)  # Largest |n| accepted in z^n during expression evaluation
MAX_RESULT_BITS = int(
    os.getenv("ROOTCALC_MAX_RESULT_BITS", "14000")
)  # Largest numerator/denominator size (bits) of a result; below the 4300-digit str() limit
MAX_DEGREE = int(
    os.getenv("ROOTCALC_MAX_DEGREE", "200")
)  # Highest polynomial degree accepted by the parsers and Durand-Kerner

# Radical recognition in the exact output (x ~ (p + c*sqrt(m))/d)
RADICAL_MIN_DENOMINATOR = int(
    os.getenv("ROOTCALC_RADICAL_MIN_DENOMINATOR", "100")
)  # Fractions with smaller denominators are printed as they are
RADICAL_MAX_RADICAND = int(os.getenv("ROOTCALC_RADICAL_MAX_RADICAND", "200"))
RADICAL_MAX_DIVISOR = int(os.getenv("ROOTCALC_RADICAL_MAX_DIVISOR", "6"))
RADICAL_TOLERANCE = float(os.getenv("ROOTCALC_RADICAL_TOLERANCE", "1e-7"))

# Functions the expression evaluator knows how to compute with the kernel.
# sind/cosd take degrees; they are left as undefined SymPy functions and
# resolved by name during evaluation.
ALLOWED_SYMPY_NAMES = {
    "pi": sp.pi,
    "e": sp.E,
    "E": sp.E,
    "i": sp.I,
    "I": sp.I,
    "sqrt": sp.sqrt,
    "sin": sp.sin,
    "cos": sp.cos,
    "abs": sp.Abs,
    "Abs": sp.Abs,
    "sind": sp.Function("sind"),
    "cosd": sp.Function("cosd"),
}

TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
)

PERCENT_REGEX = re.compile(r"(\d+(?:\.\d+)?)%")
SQRT_UNICODE_REGEX = re.compile(r"√\s*\(")
SUPERSCRIPT_DIGITS = {
    "⁰": "0",
    "¹": "1",
    "²": "2",
    "³": "3",
    "⁴": "4",
    "⁵": "5",
    "⁶": "6",
    "⁷": "7",
    "⁸": "8",
    "⁹": "9",
}
SUPERSCRIPT_REGEX = re.compile("([" + "".join(SUPERSCRIPT_DIGITS) + "]+)")

# Equation terms (implicit '*' already removed): optional coefficient, variable, exponent
TERM_REGEX = re.compile(
    r"^(?P<coef>\d+/\d+|\d+(?:\.\d*)?|\.\d+)?(?P<var>x)?(?:\^(?P<exp>\d+))?$"
)
SYSTEM_TERM_REGEX = re.compile(
    r"^(?P<coef>\d+/\d+|\d+(?:\.\d*)?|\.\d+)?(?P<var>x1|x2|x3|x|y|z)?$"
)
# Only a '*' between a number and a variable is implicit; any other '*' is an error
COEFFICIENT_STAR_REGEX = re.compile(r"(?<=[\d.])\*(?=[xyz])")
SYSTEM_VARIABLES = {"x1": 0, "x": 0, "x2": 1, "y": 1, "x3": 2, "z": 2}
