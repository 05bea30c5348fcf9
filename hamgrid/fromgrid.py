"""
fromgrid.py
Convert a Maidenhead Grid locator into latitude and longitude

Version 1.0a

Input:  locator
Output: lat,lon of the centre of the grid square
        with --box: south,west and north,east on two lines
Exit codes: 0 = ok
            1 = invalid locator
            2 = invalid arguments
"""

import argparse
import sys

from .locator import InvalidLocatorError, grid_to_box


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="hamgrid-point",
        description="Calculate Latitude and Longitude from a Maidenhead Grid.",
    )
    parser.add_argument("grid", help="Maidenhead locator (e.g., FN42gv)")
    parser.add_argument("--box", action="store_true",
                        help="Print the corners of the grid square instead of its centre")
    args = parser.parse_args(argv)

    try:
        box = grid_to_box(args.grid.strip())
    except InvalidLocatorError as e:
        print(e, file=sys.stderr)
        return 1

    if args.box:
        for corner in box:
            print(f"{corner.lat:.7f},{corner.lon:.7f}")
    else:
        center = box.center
        print(f"{center.lat:.7f},{center.lon:.7f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
