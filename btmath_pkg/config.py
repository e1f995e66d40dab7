"""Centralized configuration for BT Math.

This module defines:
- Input validation limits (length of the expression text)
- Evaluator limits (value stack depth)
- Output formatting precision

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with BTMATH_)
"""

import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("bt-math")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "0.1.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("BTMATH_MAX_INPUT_LENGTH", "10000"))  # characters

# Evaluator limits
MAX_STACK_DEPTH = int(os.getenv("BTMATH_MAX_STACK_DEPTH", "1000"))  # values

# Output formatting
OUTPUT_PRECISION = int(
    os.getenv("BTMATH_OUTPUT_PRECISION", "12")
)  # significant digits
