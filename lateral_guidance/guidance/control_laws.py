"""Guidance outputs handed to the autopilot / flight director control laws."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ControlLaw(Enum):
    LATERAL_PATH = "lateral_path"


@dataclass(frozen=True, slots=True)
class GuidanceParameters:
    law: ControlLaw
    track_angle_error_deg: float
    cross_track_error_nm: float
    bank_angle_command_deg: float
