"""Core great-circle geodesy utilities."""

from .constants import EARTH_RADIUS_NM
from .geodesy import (
    Coordinates,
    angle_diff,
    bearing_distance_to_coordinates,
    great_circle_distance,
    great_circle_heading,
    normalize_deg,
    normalize_lon_deg,
    wrap_deg,
)

__all__ = [
    "EARTH_RADIUS_NM",
    "Coordinates",
    "angle_diff",
    "bearing_distance_to_coordinates",
    "great_circle_distance",
    "great_circle_heading",
    "normalize_deg",
    "normalize_lon_deg",
    "wrap_deg",
]
