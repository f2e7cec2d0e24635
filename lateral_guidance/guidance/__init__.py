"""Lateral path geometry: legs, turn transitions and the composed geometry."""

from .control_laws import ControlLaw, GuidanceParameters
from .geometry import Geometry
from .legs import Guidable, Leg, TrackToFixLeg
from .manager import GuidanceManager, GuidanceOutput
from .planner import TransitionPlanner, bank_angle_deg, turn_radius_nm, turn_rate_deg_s
from .transitions import FixedRadiusTransition, SmoothOntoLegTransition, Transition

__all__ = [
    "ControlLaw",
    "GuidanceParameters",
    "Geometry",
    "Guidable",
    "Leg",
    "TrackToFixLeg",
    "GuidanceManager",
    "GuidanceOutput",
    "TransitionPlanner",
    "bank_angle_deg",
    "turn_radius_nm",
    "turn_rate_deg_s",
    "FixedRadiusTransition",
    "SmoothOntoLegTransition",
    "Transition",
]
