"""``python -m btmath_pkg [expression ...]``: same behaviour as the ``btmath`` script."""

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
