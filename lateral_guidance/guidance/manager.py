"""Builds path geometry from the flight plan and runs one guidance cycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..flight.aircraft import AircraftState
from ..flight.waypoints import SequenceableFlightPlan
from ..guidance_config import GuidanceConfig
from .control_laws import GuidanceParameters
from .geometry import Geometry
from .legs import TrackToFixLeg
from .planner import TransitionPlanner

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GuidanceOutput:
    parameters: GuidanceParameters | None
    distance_to_go_nm: float
    sequenced: bool
    active_waypoint_index: int
    geometry: Geometry


class GuidanceManager:
    """Predicts the lateral path from the flight plan and guides along it."""

    def __init__(self, flight_plan: SequenceableFlightPlan, config: GuidanceConfig | None = None):
        self.flight_plan = flight_plan
        self.config = config or GuidanceConfig()
        self.planner = TransitionPlanner(self.config.turn, self.config.transition)

    def _leg_between(self, from_index: int, to_index: int) -> TrackToFixLeg | None:
        from_wp = self.flight_plan.waypoint_at(from_index)
        to_wp = self.flight_plan.waypoint_at(to_index)
        if from_wp is None or to_wp is None:
            return None
        return TrackToFixLeg(from_wp, to_wp)

    def active_leg(self) -> TrackToFixLeg | None:
        active_index = self.flight_plan.active_waypoint_index()
        return self._leg_between(active_index - 1, active_index)

    def next_leg(self) -> TrackToFixLeg | None:
        active_index = self.flight_plan.active_waypoint_index()
        return self._leg_between(active_index, active_index + 1)

    def active_leg_path_geometry(self, true_airspeed_kts: float) -> Geometry | None:
        """Geometry for immediate autoflight, or None when there is no active leg."""
        active_leg = self.active_leg()
        if active_leg is None:
            return None

        next_leg = self.next_leg()
        transitions = self.planner.plan(active_leg, next_leg, true_airspeed_kts)
        return Geometry(
            active_leg,
            next_leg,
            transitions,
            sequencing_threshold_nm=self.config.sequencing.threshold_nm,
        )

    def multiple_leg_geometry(self) -> Geometry | None:
        """Full-route geometry for displays; not computed by lateral guidance."""
        return None

    @staticmethod
    def _should_advance(geometry: Geometry, position) -> bool:
        if geometry.transitions:
            # Only from inside the turn.
            return geometry.transitions[0].is_abeam(position) and geometry.should_sequence_leg(position)
        if geometry.next_leg is None:
            return False
        # Straight through the fix: advance once it is behind the aircraft.
        return geometry.active_leg.is_past_termination(position)

    def update(self, state: AircraftState) -> GuidanceOutput | None:
        """Run one guidance cycle; sequences the flight plan when the active leg is done.

        Returns None when no active leg exists, in which case callers should hold
        the previous guidance or disengage the lateral mode.
        """
        geometry = self.active_leg_path_geometry(state.true_airspeed_kts)
        if geometry is None:
            return None

        position = state.position
        parameters = geometry.guidance_at(position, state.true_track_deg)
        distance_to_go = geometry.distance_to_go(position)

        sequenced = False
        if self._should_advance(geometry, position):
            self.flight_plan.sequence()
            sequenced = True
            _logger.info("Sequenced leg %s", geometry.active_leg)

        return GuidanceOutput(
            parameters=parameters,
            distance_to_go_nm=float(distance_to_go),
            sequenced=sequenced,
            active_waypoint_index=self.flight_plan.active_waypoint_index(),
            geometry=geometry,
        )
