"""
validgrid.py
Check for a valid Maidenhead Grid locator of any length

Version 1.0a

Input:  locator
Output: exit code only:
 0      valid
 1      invalid
 2      script usage error
"""

import sys

from .locator import validate_grid


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        return 2

    return 0 if validate_grid(args[0].strip()) else 1


if __name__ == "__main__":
    raise SystemExit(main())
