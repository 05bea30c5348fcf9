"""
gpsgrid.py
Read the current position from a GPS device and print its Maidenhead Grid

Version 1.0a

Input:  GPS device on a serial port, --port or $HAMGRID_GPS_PORT
Output: lat,lon,grid

Exit codes:
  0 = fix
  1 = nofix
  2 = invalid arguments
  3 = nogps
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Callable, Optional

import pynmea2
import serial

from .locator import BadPrecisionError, Coordinate, check_precision, point_to_grid

GPS_PORT_ENV = "HAMGRID_GPS_PORT"
NO_GPS = "nogps"

RMC_PREFIXES = ("$GNRMC", "$GPRMC")


def parse_fix(line: str) -> Optional[Coordinate]:
    """Position from an RMC sentence with a valid fix, None for anything else."""
    if not line.startswith(RMC_PREFIXES):
        return None

    # A line cut short by the read timeout has no *HH checksum.
    try:
        msg = pynmea2.parse(line, check=True)
    except pynmea2.ParseError:
        return None

    if msg.status != "A":  # A = valid fix
        return None

    if not (msg.lat and msg.lat_dir and msg.lon and msg.lon_dir):
        return None

    try:
        return Coordinate(msg.latitude, msg.longitude)
    except ValueError:
        return None


def read_fix(
    ser,
    timeout: float,
    debug: bool = False,
    clock: Callable[[], float] = time.monotonic,
) -> Optional[Coordinate]:
    deadline = clock() + timeout

    while clock() < deadline:
        line = ser.readline().decode('ascii', errors='ignore').strip()
        if not line:
            continue

        if debug:
            print(line, file=sys.stderr)

        fix = parse_fix(line)
        if fix is not None:
            return fix

    return None


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        prog="gpsgrid",
        description="Print the Maidenhead Grid of the current GPS position.",
    )
    ap.add_argument("--port", default=os.getenv(GPS_PORT_ENV, NO_GPS),
                    help=f"GPS serial port (default: ${GPS_PORT_ENV})")
    ap.add_argument("--baud", type=int, default=9600)
    ap.add_argument("--timeout", type=float, default=10.0,
                    help="Seconds to wait for a fix")
    ap.add_argument("-p", "--precision", type=int, default=6)
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args(argv)

    if args.port == NO_GPS:
        print(f"No GPS device is configured, set {GPS_PORT_ENV} or use --port.", file=sys.stderr)
        return 3

    try:
        # Fail on a bad precision before waiting on the device.
        check_precision(args.precision)
    except BadPrecisionError as e:
        print(e, file=sys.stderr)
        return 2

    if args.debug:
        print(f"Reading {args.port}@{args.baud}", file=sys.stderr)

    try:
        with serial.Serial(args.port, args.baud, timeout=1) as ser:
            fix = read_fix(ser, args.timeout, args.debug)
    except (serial.SerialException, OSError) as e:
        print(f"{args.port}: {e}", file=sys.stderr)
        return 3

    if fix is None:
        print("nofix", file=sys.stderr)
        return 1

    grid = point_to_grid(fix, args.precision, humanize=True)
    print(f"{fix.lat:.7f},{fix.lon:.7f},{grid}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
