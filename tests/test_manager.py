"""Tests for geometry construction from the flight plan and the guidance cycle."""

import math

import pytest

from lateral_guidance.core.constants import EARTH_RADIUS_NM
from lateral_guidance.core.geodesy import bearing_distance_to_coordinates
from lateral_guidance.flight.aircraft import AircraftState
from lateral_guidance.flight.waypoints import FlightPlan, Waypoint
from lateral_guidance.guidance.manager import GuidanceManager
from lateral_guidance.guidance.planner import turn_radius_nm
from lateral_guidance.guidance.transitions import FixedRadiusTransition
from lateral_guidance.guidance_config import GuidanceConfig, SequencingConfig

from .conftest import CORNER, EAST, NORTH, NORTH_EAST, SOUTH

NEARLY_STRAIGHT = Waypoint("NRLY", 1.0, 0.0002)
FAR_NORTH = Waypoint("FAR", 2.0, 0.0)

SOUTH_TO_CORNER_NM = EARTH_RADIUS_NM * math.pi / 180.0


def state_at(point, track=0.0, tas=250.0) -> AircraftState:
    return AircraftState(lat_deg=point.lat_deg, lon_deg=point.lon_deg, true_track_deg=track, true_airspeed_kts=tas)


class TestLegs:
    def test_active_and_next_leg(self, flight_plan):
        manager = GuidanceManager(flight_plan)
        assert manager.active_leg().from_waypoint is SOUTH
        assert manager.active_leg().to_waypoint is CORNER
        assert manager.next_leg().from_waypoint is CORNER
        assert manager.next_leg().to_waypoint is EAST

    def test_no_active_leg_at_start(self):
        manager = GuidanceManager(FlightPlan([SOUTH, CORNER], active_index=0))
        assert manager.active_leg() is None
        assert manager.active_leg_path_geometry(250.0) is None

    def test_last_leg_has_no_next_leg(self):
        manager = GuidanceManager(FlightPlan([SOUTH, CORNER], active_index=1))
        geometry = manager.active_leg_path_geometry(250.0)
        assert geometry.next_leg is None
        assert geometry.transitions == ()

    def test_multiple_leg_geometry_not_computed(self, flight_plan):
        assert GuidanceManager(flight_plan).multiple_leg_geometry() is None


class TestActiveLegPathGeometry:
    def test_turn_sized_for_airspeed(self, flight_plan):
        geometry = GuidanceManager(flight_plan).active_leg_path_geometry(250.0)
        (transition,) = geometry.transitions
        assert isinstance(transition, FixedRadiusTransition)
        assert transition.clockwise is True
        assert transition.radius_nm == pytest.approx(turn_radius_nm(250.0, 25.0))

    def test_collinear_next_leg(self):
        manager = GuidanceManager(FlightPlan([SOUTH, CORNER, NORTH], active_index=1))
        assert manager.active_leg_path_geometry(250.0).transitions == ()

    def test_sequencing_threshold_from_config(self, flight_plan):
        config = GuidanceConfig(sequencing=SequencingConfig(threshold_nm=0.5))
        geometry = GuidanceManager(flight_plan, config).active_leg_path_geometry(250.0)
        assert geometry.sequencing_threshold_nm == 0.5


class TestUpdate:
    def test_tracking_active_leg(self, flight_plan):
        manager = GuidanceManager(flight_plan)
        output = manager.update(state_at(bearing_distance_to_coordinates(0.0, 20.0, SOUTH)))
        assert output.sequenced is False
        assert output.active_waypoint_index == 1
        assert output.parameters.bank_angle_command_deg == 0.0
        assert output.distance_to_go_nm == pytest.approx(SOUTH_TO_CORNER_NM - 20.0, rel=1e-6)

    def test_sequences_at_end_of_turn(self, flight_plan):
        manager = GuidanceManager(flight_plan)
        exit_point = manager.active_leg_path_geometry(250.0).transitions[0].exit_point
        output = manager.update(state_at(exit_point, track=90.0))
        assert output.sequenced is True
        assert output.active_waypoint_index == 2
        assert output.parameters.bank_angle_command_deg == 25.0

        # next cycle flies the new active leg CRNR -> EAST
        assert manager.active_leg().to_waypoint is EAST
        assert manager.next_leg().to_waypoint is NORTH_EAST

    def test_flight_plan_exhausted(self):
        plan = FlightPlan([SOUTH, CORNER], active_index=2)
        assert GuidanceManager(plan).update(state_at(CORNER)) is None



class TestSequencingSmallTurns:
    def test_short_arc_does_not_sequence_from_the_active_leg(self):
        manager = GuidanceManager(FlightPlan([SOUTH, CORNER, NEARLY_STRAIGHT], active_index=1))
        output = manager.update(state_at(bearing_distance_to_coordinates(0.0, 1.0, SOUTH)))
        assert output.sequenced is False
        assert output.active_waypoint_index == 1
        assert output.distance_to_go_nm == pytest.approx(SOUTH_TO_CORNER_NM - 1.0, rel=1e-6)

    def test_short_arc_sequences_once_in_the_turn(self):
        manager = GuidanceManager(FlightPlan([SOUTH, CORNER, NEARLY_STRAIGHT], active_index=1))
        output = manager.update(state_at(bearing_distance_to_coordinates(0.0, 0.5, CORNER)))
        assert output.sequenced is True
        assert output.active_waypoint_index == 2


class TestSequencingStraightThrough:
    def test_before_the_fix(self):
        manager = GuidanceManager(FlightPlan([SOUTH, CORNER, NORTH, FAR_NORTH], active_index=1))
        output = manager.update(state_at(bearing_distance_to_coordinates(180.0, 10.0, CORNER)))
        assert output.sequenced is False
        assert output.active_waypoint_index == 1

    def test_past_the_fix(self):
        manager = GuidanceManager(FlightPlan([SOUTH, CORNER, NORTH, FAR_NORTH], active_index=1))
        output = manager.update(state_at(bearing_distance_to_coordinates(0.0, 40.0, CORNER)))
        assert output.sequenced is True
        assert output.active_waypoint_index == 2
        assert manager.active_leg().to_waypoint is NORTH

    def test_last_leg_is_never_sequenced(self):
        manager = GuidanceManager(FlightPlan([SOUTH, CORNER], active_index=1))
        output = manager.update(state_at(bearing_distance_to_coordinates(0.0, 40.0, CORNER)))
        assert output.sequenced is False
        assert output.active_waypoint_index == 1


def test_output_carries_the_geometry_used(flight_plan):
    manager = GuidanceManager(flight_plan)
    exit_point = manager.active_leg_path_geometry(250.0).transitions[0].exit_point
    output = manager.update(state_at(exit_point, track=90.0))
    assert output.sequenced is True
    assert output.geometry.active_leg.to_waypoint is CORNER
    assert output.geometry.next_leg.to_waypoint is EAST
