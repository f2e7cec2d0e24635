"""Shared fixtures: a right-angle corner on the equator."""

from __future__ import annotations

import pytest

from lateral_guidance.flight.waypoints import FlightPlan, Waypoint
from lateral_guidance.guidance.legs import TrackToFixLeg
from lateral_guidance.guidance.transitions import FixedRadiusTransition

# Legs along a meridian and the equator so bearings are exactly 0/90/270 deg.
SOUTH = Waypoint("SOUTH", -1.0, 0.0)
CORNER = Waypoint("CRNR", 0.0, 0.0)
EAST = Waypoint("EAST", 0.0, 1.0)
WEST = Waypoint("WEST", 0.0, -1.0)
NORTH = Waypoint("NORTH", 1.0, 0.0)
NORTH_EAST = Waypoint("NEAST", 1.0, 1.0)


@pytest.fixture
def inbound_leg() -> TrackToFixLeg:
    return TrackToFixLeg(SOUTH, CORNER)


@pytest.fixture
def right_turn_leg() -> TrackToFixLeg:
    return TrackToFixLeg(CORNER, EAST)


@pytest.fixture
def left_turn_leg() -> TrackToFixLeg:
    return TrackToFixLeg(CORNER, WEST)


@pytest.fixture
def right_turn(inbound_leg, right_turn_leg) -> FixedRadiusTransition:
    return FixedRadiusTransition(inbound_leg, right_turn_leg, 1.0, True)


@pytest.fixture
def left_turn(inbound_leg, left_turn_leg) -> FixedRadiusTransition:
    return FixedRadiusTransition(inbound_leg, left_turn_leg, 1.0, False)


@pytest.fixture
def flight_plan() -> FlightPlan:
    return FlightPlan([SOUTH, CORNER, EAST, NORTH_EAST], active_index=1)
