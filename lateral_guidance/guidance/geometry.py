"""Path geometry for the active leg and the turn onto the next one."""

from __future__ import annotations

import logging
from typing import Sequence

from .control_laws import GuidanceParameters
from .legs import Guidable, Leg
from .transitions import Transition

_logger = logging.getLogger(__name__)

DEFAULT_SEQUENCING_THRESHOLD_NM = 0.001


class Geometry:
    """Routes guidance queries to whichever segment the aircraft is currently on.

    Built fresh every guidance cycle; never patched in place.
    """

    def __init__(
        self,
        active_leg: Leg,
        next_leg: Leg | None,
        transitions: Sequence[Transition],
        *,
        sequencing_threshold_nm: float = DEFAULT_SEQUENCING_THRESHOLD_NM,
    ):
        self.active_leg = active_leg
        self.next_leg = next_leg
        # Entry transition first, in traversal order.
        self.transitions = tuple(transitions)
        self.sequencing_threshold_nm = float(sequencing_threshold_nm)

    def segment_at(self, position) -> Guidable:
        """The first abeam transition, otherwise the active leg."""
        for transition in self.transitions:
            if transition.is_abeam(position):
                return transition
        return self.active_leg

    def guidance_at(self, position, true_track_deg: float) -> GuidanceParameters | None:
        return self.segment_at(position).guidance_at(position, true_track_deg)

    def distance_to_go(self, position) -> float:
        return self.segment_at(position).distance_to_go(position)

    def should_sequence_leg(self, position) -> bool:
        if not self.transitions:
            return False
        remaining_nm = self.transitions[0].track_distance_to_termination(position)
        _logger.debug("track distance to termination point: %.6f nm", remaining_nm)
        return remaining_nm < self.sequencing_threshold_nm

    def __str__(self) -> str:
        if self.next_leg is None:
            return str(self.active_leg)
        transitions = ", ".join(str(t) for t in self.transitions)
        return f"Geometry<activeLeg={self.active_leg} nextLeg={self.next_leg} transitions=[{transitions}]>"
