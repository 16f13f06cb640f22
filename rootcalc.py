#!/usr/bin/env python3
"""
rootcalc - exact rational calculator and polynomial root finder

Thin wrapper that delegates all functionality to the rootcalc_pkg package.

Usage:
    python rootcalc.py                          # Interactive REPL
    python rootcalc.py -e "1/2 + 1/3"           # Evaluate expression
    python rootcalc.py -e "x^3 - 6x^2 + 11x - 6 = 0"
    python rootcalc.py --help                   # Show help
"""

from __future__ import annotations

import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for rootcalc.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from rootcalc_pkg.cli import main_entry

        return main_entry(sys.argv[1:] if argv is None else argv)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import rootcalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
