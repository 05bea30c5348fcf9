from .locator import (
    BadPrecisionError,
    BoundingBox,
    Coordinate,
    CoordinateRangeError,
    InvalidLocatorError,
    LocatorError,
    check_precision,
    grid_to_box,
    grid_to_point,
    humanize_grid,
    point_to_grid,
    validate_grid,
)

__version__ = "1.0a0"

__all__ = [
    "BadPrecisionError",
    "BoundingBox",
    "Coordinate",
    "CoordinateRangeError",
    "InvalidLocatorError",
    "LocatorError",
    "check_precision",
    "grid_to_box",
    "grid_to_point",
    "humanize_grid",
    "point_to_grid",
    "validate_grid",
]
