"""Lateral flight-path guidance package."""

from .errors import DegenerateTurnError, GeometryError, TurnReversalError, UnsupportedTransitionError
from .flight.aircraft import AircraftState
from .flight.waypoints import FlightPlan, Waypoint, load_waypoints_json
from .guidance import Geometry, GuidanceManager, GuidanceParameters
from .guidance_config import GuidanceConfig, load_guidance_config

__all__ = [
    "AircraftState",
    "FlightPlan",
    "Waypoint",
    "load_waypoints_json",
    "Geometry",
    "GuidanceManager",
    "GuidanceParameters",
    "GuidanceConfig",
    "load_guidance_config",
    "GeometryError",
    "DegenerateTurnError",
    "TurnReversalError",
    "UnsupportedTransitionError",
]
