"""Turn segments joining two consecutive legs."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..core.geodesy import (
    Coordinates,
    angle_diff,
    bearing_distance_to_coordinates,
    great_circle_distance,
    great_circle_heading,
    normalize_deg,
    wrap_deg,
)
from ..errors import DegenerateTurnError, TurnReversalError, UnsupportedTransitionError
from .control_laws import ControlLaw, GuidanceParameters
from .legs import TrackToFixLeg

_REVERSAL_TOLERANCE_DEG = 1e-6


class Transition(ABC):
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
    def track_distance_to_termination(self, position) -> float:
        """Along-track distance (nm) left before the transition terminates."""
        raise NotImplementedError


class FixedRadiusTransition(Transition):
    """Constant-radius arc tangent to two track-to-fix legs sharing a corner waypoint.

    The previous and next legs are borrowed from the owning geometry; the
    transition never outlives it.
    """

    def __init__(
        self,
        previous_leg: TrackToFixLeg,
        next_leg: TrackToFixLeg,
        radius_nm: float,
        clockwise: bool,
        *,
        bank_angle_command_deg: float = 25.0,
    ):
        if not radius_nm > 0.0:
            raise DegenerateTurnError(f"Turn radius must be positive, got {radius_nm!r} nm")

        self.previous_leg = previous_leg
        self.next_leg = next_leg
        self.radius_nm = float(radius_nm)
        self.clockwise = bool(clockwise)
        self.bank_angle_command_deg = float(bank_angle_command_deg)

        self.turn_angle_deg = abs(angle_diff(previous_leg.bearing, next_leg.bearing))
        if self.turn_angle_deg == 0.0:
            raise DegenerateTurnError("Collinear legs need no transition")
        if self.turn_angle_deg >= 180.0 - _REVERSAL_TOLERANCE_DEG:
            raise TurnReversalError(self.turn_angle_deg)

        self.center = self._compute_center()
        self.entry_point, self.exit_point = self._compute_turning_points()

    @property
    def corner(self):
        return self.previous_leg.to_waypoint

    @property
    def _bisecting_rad(self) -> float:
        return float(np.deg2rad((180.0 - self.turn_angle_deg) / 2.0))

    @property
    def distance(self) -> float:
        """Length of the full arc."""
        return 2.0 * np.pi * self.radius_nm / 360.0 * self.turn_angle_deg

    def _compute_center(self) -> Coordinates:
        """Point ``radius_nm`` away from both legs, on the bisector of the corner."""
        bisecting_deg = (180.0 - self.turn_angle_deg) / 2.0
        distance_center_to_corner = self.radius_nm / np.sin(self._bisecting_rad)
        inbound_reciprocal = normalize_deg(self.previous_leg.bearing + 180.0)
        center_bearing = inbound_reciprocal - bisecting_deg if self.clockwise else inbound_reciprocal + bisecting_deg
        return bearing_distance_to_coordinates(normalize_deg(center_bearing), distance_center_to_corner, self.corner)

    def _compute_turning_points(self) -> tuple[Coordinates, Coordinates]:
        tangent_length = self.radius_nm / np.tan(self._bisecting_rad)
        entry = bearing_distance_to_coordinates(
            normalize_deg(self.previous_leg.bearing + 180.0),
            tangent_length,
            self.corner,
        )
        exit_ = bearing_distance_to_coordinates(self.next_leg.bearing, tangent_length, self.corner)
        return entry, exit_

    def turning_points(self) -> tuple[Coordinates, Coordinates]:
        return self.entry_point, self.exit_point

    def is_abeam(self, position) -> bool:
        # Only the entry side is bounded; the arc stays "abeam" past the exit point.
        bearing_ac = great_circle_heading(self.entry_point, position)
        return abs(angle_diff(self.previous_leg.bearing, bearing_ac)) <= 90.0

    def track_distance_to_termination(self, position) -> float:
        # Rotate the frame so the bisector (center towards corner) reads 180 deg;
        # the arc then spans [180 - angle/2, 180 + angle/2] from entry to exit
        # for a clockwise turn, and the reverse for a counterclockwise one.
        corrective_factor = 180.0 - great_circle_heading(self.center, self.corner)
        half_angle = self.turn_angle_deg / 2.0
        min_bearing = 180.0 - half_angle
        max_bearing = 180.0 + half_angle

        rotated_bearing = normalize_deg(great_circle_heading(self.center, position) + corrective_factor)
        limited_bearing = min(max(rotated_bearing, min_bearing), max_bearing)
        if self.clockwise:
            remaining_arc_deg = max_bearing - limited_bearing
        else:
            remaining_arc_deg = limited_bearing - min_bearing

        return float(2.0 * np.pi * self.radius_nm / 360.0 * remaining_arc_deg)

    def distance_to_go(self, position) -> float:
        return self.track_distance_to_termination(position)

    def guidance_at(self, position, true_track_deg: float) -> GuidanceParameters | None:
        bearing_from_center = great_circle_heading(self.center, position)
        desired_track = normalize_deg(bearing_from_center + (90.0 if self.clockwise else -90.0))
        distance_from_center = great_circle_distance(self.center, position)

        if self.clockwise:
            cross_track_error = distance_from_center - self.radius_nm
            bank_angle_command = self.bank_angle_command_deg
        else:
            cross_track_error = self.radius_nm - distance_from_center
            bank_angle_command = -self.bank_angle_command_deg

        return GuidanceParameters(
            law=ControlLaw.LATERAL_PATH,
            track_angle_error_deg=wrap_deg(desired_track - float(true_track_deg)),
            cross_track_error_nm=float(cross_track_error),
            bank_angle_command_deg=bank_angle_command,
        )

    def __str__(self) -> str:
        return f"FixedRadiusTransition<radius={self.radius_nm:.3f}nm clockwise={self.clockwise}>"


class SmoothOntoLegTransition(Transition):
    """Smooth transition capturing a fixed reference leg. Not implemented yet."""

    def __new__(cls, *args, **kwargs):
        raise UnsupportedTransitionError("Smooth transitions onto a fixed leg are not supported")
