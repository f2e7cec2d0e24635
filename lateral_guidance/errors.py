"""Error kinds raised for malformed flight-plan geometry."""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for path geometry that cannot be constructed."""


class DegenerateTurnError(GeometryError):
    """Raised when a turn has no defined arc (zero turn angle or non-positive radius)."""


class TurnReversalError(GeometryError):
    """Raised for a 180 degree course reversal, where the turn center diverges."""

    def __init__(self, turn_angle_deg: float):
        super().__init__(f"Course reversal of {turn_angle_deg:.6f} deg cannot be flown as a fixed-radius turn")
        self.turn_angle_deg = float(turn_angle_deg)


class UnsupportedTransitionError(NotImplementedError):
    """Raised when a transition variant without an implementation is requested."""
