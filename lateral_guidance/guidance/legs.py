"""Flight-plan legs: straight path segments between two waypoints."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

import numpy as np

from ..core.constants import EARTH_RADIUS_NM
from ..core.geodesy import angle_diff, great_circle_distance, great_circle_heading, wrap_deg
from .control_laws import ControlLaw, GuidanceParameters


class Guidable(Protocol):
    """Anything the aircraft can be guided along."""

    def guidance_at(self, position, true_track_deg: float) -> GuidanceParameters | None: ...

    def distance_to_go(self, position) -> float: ...

    def is_abeam(self, position) -> bool: ...


class Leg(ABC):
    @abstractmethod
    def guidance_at(self, position, true_track_deg: float) -> GuidanceParameters | None:
        raise NotImplementedError

    @abstractmethod
    def distance_to_go(self, position) -> float:
        raise NotImplementedError

    @abstractmethod
    def is_abeam(self, position) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_past_termination(self, position) -> bool:
        raise NotImplementedError


class TrackToFixLeg(Leg):
    """Great-circle track from one fix to the next.

    Bearing and length are only defined when ``from_waypoint`` and ``to_waypoint``
    are distinct points; callers must not build zero-length legs.
    """

    def __init__(self, from_waypoint, to_waypoint):
        self.from_waypoint = from_waypoint
        self.to_waypoint = to_waypoint

    @property
    def bearing(self) -> float:
        return great_circle_heading(self.from_waypoint, self.to_waypoint)

    @property
    def distance(self) -> float:
        return great_circle_distance(self.from_waypoint, self.to_waypoint)

    def cross_track_error_nm(self, position) -> float:
        """Signed cross-track error; positive when the aircraft is left of track."""
        bearing_ac = great_circle_heading(self.from_waypoint, position)
        distance_ac = great_circle_distance(self.from_waypoint, position)

        actual_offset = EARTH_RADIUS_NM * np.arcsin(
            np.sin(distance_ac / EARTH_RADIUS_NM) * np.sin(np.deg2rad(bearing_ac - self.bearing))
        )
        # No path offsets: the desired offset is always the leg itself.
        return float(0.0 - actual_offset)

    def guidance_at(self, position, true_track_deg: float) -> GuidanceParameters | None:
        return GuidanceParameters(
            law=ControlLaw.LATERAL_PATH,
            track_angle_error_deg=wrap_deg(self.bearing - float(true_track_deg)),
            cross_track_error_nm=self.cross_track_error_nm(position),
            bank_angle_command_deg=0.0,
        )

    def distance_to_go(self, position) -> float:
        return great_circle_distance(position, self.to_waypoint)

    def along_track_distance_nm(self, position) -> float | None:
        """Distance from the start fix to the abeam point, or None when behind the leg start."""
        bearing_ac = great_circle_heading(self.from_waypoint, position)
        heading_ac = abs(angle_diff(self.bearing, bearing_ac))
        if heading_ac > 90.0:
            return None

        distance_ac = great_circle_distance(self.from_waypoint, position)
        return float(np.cos(np.deg2rad(heading_ac)) * distance_ac)

    def is_abeam(self, position) -> bool:
        distance_ax = self.along_track_distance_nm(position)
        return distance_ax is not None and distance_ax <= self.distance

    def is_past_termination(self, position) -> bool:
        distance_ax = self.along_track_distance_nm(position)
        return distance_ax is not None and distance_ax > self.distance

    def __str__(self) -> str:
        return f"<TrackToFixLeg from={_ident(self.from_waypoint)} to={_ident(self.to_waypoint)}>"


def _ident(waypoint) -> str:
    ident = getattr(waypoint, "ident", None)
    if ident:
        return str(ident)
    return f"({waypoint.lat_deg:.4f}, {waypoint.lon_deg:.4f})"
