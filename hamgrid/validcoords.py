"""
validcoords.py
Check that a latitude and longitude lie on the Maidenhead grid

Version 1.0a

The grid covers latitude -90..90 and longitude -180..180, both ends
included. point_to_grid refuses anything else instead of wrapping it,
and NaN or infinite values fail the same check.

Input:  Latitude Longitude
Exit codes: 0 = on the grid
            1 = off the grid
            2 = invalid arguments
"""

import argparse
import sys


class SilentArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        sys.exit(2)   # argparse-style error, but silent


def validate(latitude: float, longitude: float) -> bool:
    # NaN fails every comparison.
    if not (-90.0 <= latitude <= 90.0):
        return False

    if not (-180.0 <= longitude <= 180.0):
        return False

    return True


def main(argv=None) -> int:
    parser = SilentArgumentParser(add_help=False)
    parser.add_argument("latitude", type=float)
    parser.add_argument("longitude", type=float)

    args = parser.parse_args(argv)

    if not validate(args.latitude, args.longitude):
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
