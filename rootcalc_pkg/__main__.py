"""Main entry point for running rootcalc_pkg as a module.

This allows running rootcalc with:
    python -m rootcalc_pkg
    python -m rootcalc_pkg -e "x^2 - 5x + 6 = 0"

This is equivalent to running:
    python -m rootcalc_pkg.cli
    python rootcalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
