"""Command-line interface: one-shot evaluation and an interactive REPL."""

import argparse
import json
import sys
from typing import Any, Dict

from .api import evaluate, solve_equation, solve_system
from .config import VERSION
from .formatting import OutputConfig, OutputStyle, format_prompt
from .logging_config import get_logger, setup_logging

logger = get_logger("cli")

EXIT_COMMANDS = ("exit", "quit")


def process_input(text: str, config: OutputConfig) -> Dict[str, Any]:
    """Route one line of input to the right API call.

    Input with ``=`` is an equation, or a system when it also has commas.
    Anything else is an expression.
    """
    if "=" in text:
        if "," in text:
            return solve_system(text, config).to_dict()
        return solve_equation(text, config).to_dict()
    res = evaluate(text, config).to_dict()
    if res.get("ok"):
        res["type"] = "value"
    return res


def print_result_pretty(res: Dict[str, Any], output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Result dictionary
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res, indent=2, ensure_ascii=False))
        return
    if not res.get("ok"):
        print("Error:", res.get("error"))
        return
    typ = res.get("type", "value")
    if typ == "equation":
        exact = res.get("exact", [])
        approx = res.get("approx", [])
        for i, (exact_val, approx_val) in enumerate(zip(exact, approx), start=1):
            line = f"x{i} = {exact_val}" if len(exact) > 1 else f"x = {exact_val}"
            if approx_val != exact_val:
                line += f"  (≈ {approx_val})"
            print(line)
        if res.get("converged") is False:
            print(f"Warning: not converged after {res.get('iterations')} iterations")
    elif typ == "system":
        for line in res.get("exact", []):
            print(line)
    else:
        print(res.get("result"))
        approx = res.get("approx")
        if approx and approx != res.get("result"):
            print("Decimal:", approx)


def print_help_text() -> None:
    print(
        "Enter an expression (1/2 + 1/3, sqrt(-4), sind(30)),\n"
        "an equation in x (x^2 - 5x + 6 = 0),\n"
        "or a linear system separated by commas (x + y = 5, x - y = 1).\n"
        "Type 'quit' or 'exit' to leave."
    )


def repl_loop(config: OutputConfig, output_format: str = "human") -> int:
    """Read lines until exit/quit/EOF. Returns 1 if any input failed."""
    print("rootcalc - type 'help' for usage, 'quit' to exit.")
    failed = False
    while True:
        try:
            line = input(format_prompt(config))
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue
        text = line.strip()
        if not text:
            continue
        if text.lower() in EXIT_COMMANDS:
            break
        if text.lower() == "help":
            print_help_text()
            continue
        res = process_input(text, config)
        if not res.get("ok"):
            failed = True
        print_result_pretty(res, output_format=output_format)
    return 1 if failed else 0


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for rootcalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    parser = argparse.ArgumentParser(prog="rootcalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression, equation or system and exit",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    style = parser.add_mutually_exclusive_group()
    style.add_argument(
        "-a", "--ascii", dest="style", action="store_const", const=OutputStyle.ASCII,
        help="Plain ASCII output",
    )
    style.add_argument(
        "-u", "--unicode", dest="style", action="store_const", const=OutputStyle.UNICODE,
        help="Unicode output (subscripts, prompt)",
    )
    style.add_argument(
        "-l", "--latex", dest="style", action="store_const", const=OutputStyle.LATEX,
        help="LaTeX output",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0

    default = OutputConfig.default()
    config = OutputConfig(
        style=args.style or default.style,
        precision=args.precision if args.precision and args.precision > 0 else default.precision,
    )

    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        if expr.startswith(">>>"):
            expr = expr[3:].strip()
        if not expr or expr == "=":
            print("Error: Empty input. Please enter a valid expression or equation.")
            return 1
        logger.debug(f"Evaluating --eval input {expr!r}")
        res = process_input(expr, config)
        print_result_pretty(res, output_format=args.format)
        return 0 if res.get("ok") else 1

    return repl_loop(config, output_format=args.format)


if __name__ == "__main__":
    sys.exit(main_entry())
