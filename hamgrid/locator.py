"""
locator.py
Convert between latitude/longitude and Maidenhead Grid locators

Version 1.0a

A valid locator has no restrictions on letter case and no maximum
length. The first pair is A-R, after that pairs alternate between
digits 0-9 and letters A-X. The shortest locator is 2 characters.

Decoding returns the centre of the grid square, not a corner.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from fractions import Fraction
from typing import NamedTuple, Union

from .validcoords import validate as validate_coords


class LocatorError(ValueError):
    pass


class InvalidLocatorError(LocatorError):
    def __init__(self, locator: str) -> None:
        super().__init__(f'"{locator}" is not a valid Maidenhead locator')
        self.locator = locator


class BadPrecisionError(LocatorError):
    def __init__(self, precision) -> None:
        super().__init__(
            f"Maidenhead grids are supposed to have an even number of characters, got {precision!r}"
        )
        self.precision = precision


class CoordinateRangeError(LocatorError):
    def __init__(self, lat, lon) -> None:
        super().__init__(f"Coordinates out of range: {lat}, {lon}")
        self.lat = lat
        self.lon = lon


class Coordinate(NamedTuple):
    # Latitude is +north -south, longitude is +east -west.
    lat: float
    lon: float


class BoundingBox(NamedTuple):
    southwest: Coordinate
    northeast: Coordinate

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            (self.southwest.lat + self.northeast.lat) / 2,
            (self.southwest.lon + self.northeast.lon) / 2,
        )


class PairKind(NamedTuple):
    name: str
    base: int
    letters: bool
    pattern: re.Pattern


FIELD = PairKind("field", 18, True, re.compile(r"[a-r]{2}"))
SQUARE = PairKind("square", 10, False, re.compile(r"[0-9]{2}"))
SUBSQUARE = PairKind("subsquare", 24, True, re.compile(r"[a-x]{2}"))

GRID_CHARS_RE = re.compile(r"[A-Xa-x0-9]+")

Point = Union[Coordinate, Mapping, tuple]


def pair_kind(p: int) -> PairKind:
    """Which alphabet the pair at 0-based pair index p uses."""
    if p == 0:
        return FIELD
    if p % 2:
        return SQUARE
    return SUBSQUARE


def char_to_value(c: str) -> int:
    c = c.upper()
    if c.isdigit():
        return ord(c) - ord("0")
    return ord(c) - ord("A")


def value_to_char(x: int, letters: bool) -> str:
    return chr(x + ord("A" if letters else "0"))


def validate_grid(grid: str) -> bool:
    """
    True if grid is a correct Maidenhead locator.

    Validity is checked pair by pair, because a regexp covering
    arbitrary length is too cumbersome.
    """
    if not isinstance(grid, str) or not grid or len(grid) % 2:
        return False
    if not GRID_CHARS_RE.fullmatch(grid):
        return False

    g = grid.lower()
    for p in range(len(g) // 2):
        if not pair_kind(p).pattern.fullmatch(g[2 * p:2 * p + 2]):
            return False
    return True


def grid_to_box(grid: str) -> BoundingBox:
    if not validate_grid(grid):
        raise InvalidLocatorError(grid)

    g = grid.upper()
    pairs = len(g) // 2
    lon = Fraction(-90)
    lat = Fraction(-90)
    res = Fraction(10)

    for p in range(pairs):
        # First character in a pair is longitude, second is latitude.
        lon += res * char_to_value(g[2 * p])
        lat += res * char_to_value(g[2 * p + 1])

        # The last pair keeps its resolution, it is the size of the box.
        if p < pairs - 1:
            res /= pair_kind(p + 1).base

    lon *= 2

    return BoundingBox(
        Coordinate(float(lat), float(lon)),
        Coordinate(float(lat + res), float(lon + res * 2)),
    )


def grid_to_point(grid: str) -> Coordinate:
    """Centre of the grid square."""
    return grid_to_box(grid).center


def humanize_grid(grid: str) -> str:
    """Lowercase every other letter pair (pairs 2, 6, 10, ...), uppercase the rest."""
    return "".join(
        ch.lower() if (i // 2) % 4 == 2 else ch.upper()
        for i, ch in enumerate(grid)
    )


def _lat_lon(point: Point):
    if isinstance(point, Mapping):
        return point["lat"], point["lon"]
    if hasattr(point, "lat") and hasattr(point, "lon"):
        return point.lat, point.lon
    lat, lon = point
    return lat, lon


def check_precision(precision) -> None:
    """Raise BadPrecisionError unless precision is a positive even int."""
    if (
        not isinstance(precision, int)
        or isinstance(precision, bool)
        or precision <= 0
        or precision % 2
    ):
        raise BadPrecisionError(precision)


def point_to_grid(point: Point, precision: int = 6, humanize: bool = False) -> str:
    """
    Maidenhead locator of point, precision characters long.

    point is a Coordinate, anything with lat/lon attributes, a mapping
    with "lat" and "lon" keys, or a (lat, lon) tuple. With humanize the
    subsquare letters are written in lowercase the way it is normally
    done, e.g. FN42gv54AX.
    """
    check_precision(precision)

    lat, lon = _lat_lon(point)
    if not validate_coords(lat, lon):
        raise CoordinateRangeError(lat, lon)

    # Same walk as grid_to_box, but dividing by the shrinking
    # resolution and passing the remainder on.
    x = Fraction(lon) / 2 + 90
    y = Fraction(lat) + 90
    res = Fraction(10)
    chars = []

    for p in range(precision // 2):
        kind = pair_kind(p)

        # Clamp so that lat 90 and lon 180 land in the last square.
        x_value = min(x // res, kind.base - 1)
        y_value = min(y // res, kind.base - 1)
        chars.append(value_to_char(x_value, kind.letters))
        chars.append(value_to_char(y_value, kind.letters))

        x -= x_value * res
        y -= y_value * res
        res /= pair_kind(p + 1).base

    grid = "".join(chars)
    if humanize:
        grid = humanize_grid(grid)
    return grid
