"""rootcalc package: exact rational/complex kernel, polynomial and linear-system solvers, and CLI."""

__all__ = [
    "config",
    "rational",
    "complex_number",
    "solver",
    "iterative",
    "linear_system",
    "coefficients",
    "expression",
    "formatting",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "solve_equation",
    "solve_system",
    "solve_polynomial",
    "validate_expression",
]
