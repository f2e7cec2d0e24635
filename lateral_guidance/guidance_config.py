"""Dedicated guidance configuration and JSON loader."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class TurnPlanningConfig:
    min_planning_speed_kts: float = 150.0
    low_speed_bank_deg: float = 15.0
    nominal_bank_deg: float = 25.0
    high_speed_bank_deg: float = 19.0
    low_speed_limit_kts: float = 150.0
    high_speed_start_kts: float = 300.0
    high_speed_span_kts: float = 150.0
    turn_rate_constant: float = 1091.0

    def validate(self):
        if self.min_planning_speed_kts <= 0.0:
            raise ValueError("turn.min_planning_speed_kts must be positive")
        if self.low_speed_limit_kts <= 0.0 or self.high_speed_span_kts <= 0.0:
            raise ValueError("turn speed breakpoints must be positive")
        if self.high_speed_start_kts < self.low_speed_limit_kts:
            raise ValueError("turn.high_speed_start_kts must not be below turn.low_speed_limit_kts")
        for name in ("low_speed_bank_deg", "nominal_bank_deg", "high_speed_bank_deg"):
            value = getattr(self, name)
            if not 0.0 < value < 90.0:
                raise ValueError(f"turn.{name} must be within (0, 90) degrees")


@dataclass(slots=True)
class TransitionGuidanceConfig:
    bank_angle_command_deg: float = 25.0

    def validate(self):
        if not 0.0 <= self.bank_angle_command_deg < 90.0:
            raise ValueError("transition.bank_angle_command_deg must be within [0, 90) degrees")


@dataclass(slots=True)
class SequencingConfig:
    threshold_nm: float = 0.001

    def validate(self):
        if self.threshold_nm <= 0.0:
            raise ValueError("sequencing.threshold_nm must be positive")


@dataclass(slots=True)
class GuidanceConfig:
    turn: TurnPlanningConfig = field(default_factory=TurnPlanningConfig)
    transition: TransitionGuidanceConfig = field(default_factory=TransitionGuidanceConfig)
    sequencing: SequencingConfig = field(default_factory=SequencingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GuidanceConfig":
        if not isinstance(data, dict):
            raise ValueError("Guidance config root must be a JSON object")
        cfg = cls(
            turn=TurnPlanningConfig(**data.get("turn", {})),
            transition=TransitionGuidanceConfig(**data.get("transition", {})),
            sequencing=SequencingConfig(**data.get("sequencing", {})),
        )
        cfg.validate()
        return cfg

    def validate(self):
        self.turn.validate()
        self.transition.validate()
        self.sequencing.validate()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_guidance_config(path: str | Path | None) -> GuidanceConfig:
    if path is None:
        return GuidanceConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Guidance config file not found: {config_path}")
    if config_path.suffix.lower() != ".json":
        raise ValueError("Only JSON guidance config files are supported")

    with config_path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError("Guidance config root must be a JSON object")

    # Allow either a direct guidance config object or {"guidance": {...}}.
    payload = raw.get("guidance", raw)
    if not isinstance(payload, dict):
        raise ValueError("Guidance config payload must be a JSON object")
    return GuidanceConfig.from_dict(payload)
