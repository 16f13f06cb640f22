"""Input preprocessing and evaluation of arithmetic expressions.

Expressions are parsed by SymPy with ``evaluate=False`` so that the tree
mirrors what the user typed; the tree is then evaluated with the exact
:class:`Complex` kernel rather than by SymPy itself.
"""

from __future__ import annotations

import math
import re
from tokenize import TokenError

import sympy as sp
from sympy.parsing.sympy_parser import parse_expr

from .complex_number import Complex
from .config import (
    ALLOWED_SYMPY_NAMES,
    FORBIDDEN_TOKENS,
    MAX_INPUT_LENGTH,
    MAX_INTEGER_EXPONENT,
    MAX_RESULT_BITS,
    PERCENT_REGEX,
    SQRT_UNICODE_REGEX,
    SUPERSCRIPT_DIGITS,
    SUPERSCRIPT_REGEX,
    TRANSFORMATIONS,
)
from .logging_config import get_logger
from .rational import Rational
from .types import EvaluationError, ParseError, ValidationError

logger = get_logger("expression")

DEGREES_TO_RADIANS = math.pi / 180.0
HALF = Complex(Rational(1, 2))


def is_balanced(input_str: str) -> tuple[bool, int | None]:
    """Check if parentheses/brackets are balanced. Returns (is_balanced, error_position)."""
    pairs = {"(": ")", "[": "]", "{": "}"}
    stack: list[tuple[str, int]] = []
    for i, char in enumerate(input_str):
        if char in pairs:
            stack.append((char, i))
        elif char in pairs.values():
            if not stack:
                return False, i
            opening, _ = stack.pop()
            if pairs[opening] != char:
                return False, i
    if stack:
        return False, stack[0][1]
    return True, None


def preprocess(input_str: str) -> str:
    """Validate raw input and rewrite it into parser-friendly ASCII.

    Applies transformations:
    - ``×``/``÷``/``−`` to ``*``/``/``/``-`` and ``π`` to ``pi``
    - Percentages (``50%`` -> ``(50/100)``)
    - ``√(`` to ``sqrt(``
    - Superscript exponents (``x²`` -> ``x^2``)

    Raises:
        ValidationError: If input is empty, too long, contains forbidden
            tokens, or has unbalanced parentheses/brackets
    """
    input_str = input_str.strip() if input_str else ""
    if not input_str:
        raise ValidationError("Input cannot be empty", "EMPTY_INPUT")
    if len(input_str) > MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (>{MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )

    lowered = input_str.lower()
    for tok in FORBIDDEN_TOKENS:
        if tok in lowered:
            logger.warning(
                f"Blocked input containing forbidden token {tok!r} "
                f"(length {len(input_str)})"
            )
            raise ValidationError(
                f"Input contains forbidden token: {tok}", "FORBIDDEN_TOKEN"
            )

    processed = (
        input_str.replace("×", "*")
        .replace("÷", "/")
        .replace("−", "-")
        .replace("π", "pi")
    )
    processed = PERCENT_REGEX.sub(r"(\1/100)", processed)
    processed = SQRT_UNICODE_REGEX.sub("sqrt(", processed)
    processed = SUPERSCRIPT_REGEX.sub(
        lambda m: "^" + "".join(SUPERSCRIPT_DIGITS[ch] for ch in m.group(1)),
        processed,
    )

    balanced, position = is_balanced(processed)
    if not balanced:
        raise ValidationError(
            f"Unbalanced parentheses or brackets at position {position}",
            "UNBALANCED",
        )
    return processed


def parse_expression(text: str) -> sp.Expr:
    """Preprocess and parse ``text`` into an unevaluated SymPy tree."""
    processed = preprocess(text)
    try:
        tree = parse_expr(
            processed,
            local_dict=dict(ALLOWED_SYMPY_NAMES),
            transformations=TRANSFORMATIONS,
            evaluate=False,
        )
    except (SyntaxError, TokenError, TypeError, ValueError, AttributeError, sp.SympifyError) as e:
        raise ParseError(f"Could not parse expression {text!r}: {e}", term=text) from e
    if not isinstance(tree, sp.Basic):
        raise ParseError(f"Not a single expression: {text!r}", term=text)
    return tree


def _bit_size(value: Complex) -> int:
    return max(value.real.bit_length(), value.imag.bit_length())


def _checked(value: Complex) -> Complex:
    if _bit_size(value) > MAX_RESULT_BITS:
        raise EvaluationError(f"Result exceeds {MAX_RESULT_BITS} bits")
    return value


def _power(base: Complex, exponent: Complex) -> Complex:
    if exponent == HALF:
        return base.sqrt()
    if exponent.is_real() and exponent.real.is_integer():
        n = exponent.real.numerator
        if abs(n) > MAX_INTEGER_EXPONENT:
            raise EvaluationError(f"Exponent {n} is too large")
        # Lower bound on the size of z^n; the exact size is checked afterwards
        if abs(n) * (_bit_size(base) - 1) > MAX_RESULT_BITS:
            raise EvaluationError(f"Result of ^{n} would exceed {MAX_RESULT_BITS} bits")
        return _checked(base.pow(n))
    raise EvaluationError(f"Only integer powers and square roots are supported, got ^{exponent}")


def _evaluate_node(node: sp.Basic) -> Complex:
    if node.is_Integer:
        return Complex(int(node))
    if node.is_Rational:
        return Complex(Rational(int(node.p), int(node.q)))
    if node.is_Float:
        return Complex.from_double(float(node))
    if node is sp.I:
        return Complex.i()
    if node.is_NumberSymbol:
        return Complex.from_double(float(node))
    if node.is_Symbol:
        raise EvaluationError(f"Unknown variable: {node}")

    if isinstance(node, sp.Add):
        total = Complex(0)
        for arg in node.args:
            total = _checked(total + _evaluate_node(arg))
        return total
    if isinstance(node, sp.Mul):
        product = Complex(1)
        for arg in node.args:
            product = _checked(product * _evaluate_node(arg))
        return product
    if isinstance(node, sp.Pow):
        base, exponent = node.args
        return _power(_evaluate_node(base), _evaluate_node(exponent))
    if isinstance(node, sp.exp):
        return _power(Complex.from_double(math.e), _evaluate_node(node.args[0]))

    if isinstance(node, sp.Abs):
        return Complex(_evaluate_node(node.args[0]).abs())
    if isinstance(node, sp.sin):
        return _evaluate_node(node.args[0]).sin()
    if isinstance(node, sp.cos):
        return _evaluate_node(node.args[0]).cos()

    name = getattr(node.func, "__name__", "")
    if name in ("sind", "cosd") and len(node.args) == 1:
        radians = _evaluate_node(node.args[0]).to_complex() * DEGREES_TO_RADIANS
        value = Complex.from_complex(radians)
        return value.sin() if name == "sind" else value.cos()

    raise EvaluationError(f"Unsupported operation: {name or type(node).__name__}")


def evaluate_expression(text: str) -> Complex:
    """Evaluate an arithmetic expression with the exact kernel.

    Integers and fractions stay exact; floats, ``pi``, ``e`` and any
    ``sqrt``/``sin``/``cos`` go through floating point and are approximate.

    Raises:
        ValidationError: for rejected input
        ParseError: if SymPy cannot parse the text
        EvaluationError: for unknown names or unsupported powers/functions
        DivisionByZero: on division by zero
    """
    tree = parse_expression(text)
    logger.debug(f"Evaluating {tree!r}")
    return _evaluate_node(tree)
