"""Flight-plan and aircraft-state models."""

from .aircraft import AircraftState
from .waypoints import FlightPlan, FlightPlanSource, SequenceableFlightPlan, Waypoint, load_waypoints_json

__all__ = [
    "AircraftState",
    "FlightPlan",
    "FlightPlanSource",
    "SequenceableFlightPlan",
    "Waypoint",
    "load_waypoints_json",
]
