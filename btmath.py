#!/usr/bin/env python3
"""
BT Math - RPN expression calculator

Main entry point for the BT Math calculator. This file serves as a thin
wrapper that delegates all functionality to the btmath_pkg package.

Usage:
    python btmath.py                        # Interactive REPL
    python btmath.py -e "2+2"               # Evaluate expression
    python btmath.py "2*5/3" "sin(45)"      # Evaluate several expressions
    python btmath.py --help                 # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for BT Math.

    Delegates all functionality to the btmath_pkg.cli module,
    which handles argument parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from btmath_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
