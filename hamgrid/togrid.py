"""
togrid.py
Convert latitude and longitude into Maidenhead Grid

Version 1.0a

Output: Maidenhead Grid Square, subsquare letters in lowercase
Exit codes: 0 = ok
            1 = coordinates out of range
            2 = invalid arguments or precision
"""

import argparse
import sys

from .locator import (
    BadPrecisionError,
    Coordinate,
    CoordinateRangeError,
    point_to_grid,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hamgrid",
        description="Calculate Maidenhead Grid from Latitude and Longitude.",
    )
    parser.add_argument('latitude', type=float, help="Latitude (e.g., 41.714649)")
    parser.add_argument('longitude', type=float, help="Longitude (e.g., -72.728485)")
    parser.add_argument('-p', '--precision', type=int, default=6,
                        help="Number of characters, even (default: 6)")
    parser.add_argument('--plain', action='store_true',
                        help="Print all letters in uppercase")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    point = Coordinate(args.latitude, args.longitude)

    try:
        maidenhead = point_to_grid(point, args.precision, humanize=not args.plain)
    except BadPrecisionError as e:
        print(e, file=sys.stderr)
        return 2
    except CoordinateRangeError as e:
        print(e, file=sys.stderr)
        return 1

    print(f"{maidenhead}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
