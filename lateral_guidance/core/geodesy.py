"""Spherical-Earth great-circle utilities used throughout the guidance code."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .constants import EARTH_RADIUS_NM


@dataclass(frozen=True, slots=True)
class Coordinates:
    lat_deg: float
    lon_deg: float
    alt_ft: float = 0.0


def normalize_deg(angle_deg):
    """Normalize an angle into [0, 360)."""
    angle = float(np.mod(float(angle_deg), 360.0))
    # np.mod can round tiny negatives up to exactly 360.0
    return 0.0 if angle >= 360.0 else angle


def wrap_deg(angle_deg):
    """Wrap an angle into (-180, 180]."""
    return 180.0 - normalize_deg(180.0 - float(angle_deg))


def normalize_lon_deg(lon_deg):
    lon = np.asarray(lon_deg, dtype=float)
    return (lon + 180.0) % 360.0 - 180.0


def angle_diff(from_deg: float, to_deg: float) -> float:
    """Signed smallest rotation taking ``from_deg`` onto ``to_deg``, in (-180, 180]."""
    return wrap_deg(float(to_deg) - float(from_deg))


def great_circle_heading(origin, target) -> float:
    """Initial great-circle bearing from ``origin`` to ``target`` in degrees [0, 360)."""
    lat1 = np.deg2rad(origin.lat_deg)
    lat2 = np.deg2rad(target.lat_deg)
    dlon = np.deg2rad(target.lon_deg - origin.lon_deg)

    y = np.sin(dlon) * np.cos(lat2)
    x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)
    return normalize_deg(np.rad2deg(np.arctan2(y, x)))


def great_circle_distance(origin, target) -> float:
    """Haversine distance between two points in nautical miles."""
    lat1 = np.deg2rad(origin.lat_deg)
    lat2 = np.deg2rad(target.lat_deg)
    dlat = lat2 - lat1
    dlon = np.deg2rad(target.lon_deg - origin.lon_deg)

    h = np.sin(dlat / 2.0) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2.0) ** 2
    h = min(max(float(h), 0.0), 1.0)
    central_angle = 2.0 * np.arctan2(np.sqrt(h), np.sqrt(1.0 - h))
    return float(EARTH_RADIUS_NM * central_angle)


def bearing_distance_to_coordinates(bearing_deg: float, distance_nm: float, origin) -> Coordinates:
    """Destination reached by flying ``distance_nm`` along ``bearing_deg`` from ``origin``."""
    lat1 = np.deg2rad(origin.lat_deg)
    lon1 = np.deg2rad(origin.lon_deg)
    brg = np.deg2rad(bearing_deg)
    delta = float(distance_nm) / EARTH_RADIUS_NM

    sin_lat2 = np.sin(lat1) * np.cos(delta) + np.cos(lat1) * np.sin(delta) * np.cos(brg)
    lat2 = np.arcsin(np.clip(sin_lat2, -1.0, 1.0))
    lon2 = lon1 + np.arctan2(
        np.sin(brg) * np.sin(delta) * np.cos(lat1),
        np.cos(delta) - np.sin(lat1) * np.sin(lat2),
    )
    return Coordinates(
        lat_deg=float(np.rad2deg(lat2)),
        lon_deg=float(normalize_lon_deg(np.rad2deg(lon2))),
        alt_ft=float(getattr(origin, "alt_ft", 0.0)),
    )
