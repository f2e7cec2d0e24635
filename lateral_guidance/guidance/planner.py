"""Turn sizing for the transitions between consecutive legs."""

from __future__ import annotations

import numpy as np

from ..core.constants import SECONDS_PER_HOUR
from ..core.geodesy import angle_diff
from ..guidance_config import TransitionGuidanceConfig, TurnPlanningConfig
from .legs import TrackToFixLeg
from .transitions import FixedRadiusTransition, Transition


def bank_angle_deg(speed_kts: float, config: TurnPlanningConfig | None = None) -> float:
    """Bank angle schedule: reduced at low speed, tapered off at high speed."""
    cfg = config or TurnPlanningConfig()
    kts = float(speed_kts)
    if kts < cfg.low_speed_limit_kts:
        fraction = min(max(kts, 0.0) / cfg.low_speed_limit_kts, 1.0)
        return cfg.low_speed_bank_deg + fraction * (cfg.nominal_bank_deg - cfg.low_speed_bank_deg)
    if kts > cfg.high_speed_start_kts:
        fraction = min((kts - cfg.high_speed_start_kts) / cfg.high_speed_span_kts, 1.0)
        return cfg.nominal_bank_deg - fraction * (cfg.nominal_bank_deg - cfg.high_speed_bank_deg)
    return cfg.nominal_bank_deg


def turn_rate_deg_s(speed_kts: float, bank_deg: float, config: TurnPlanningConfig | None = None) -> float:
    """Rate of a coordinated turn."""
    cfg = config or TurnPlanningConfig()
    return float(cfg.turn_rate_constant * np.tan(np.deg2rad(bank_deg)) / float(speed_kts))


def turn_radius_nm(speed_kts: float, bank_deg: float, config: TurnPlanningConfig | None = None) -> float:
    speed_nm_s = float(speed_kts) / SECONDS_PER_HOUR
    return float(speed_nm_s / np.deg2rad(turn_rate_deg_s(speed_kts, bank_deg, config)))


def is_clockwise_turn(active_leg: TrackToFixLeg, next_leg: TrackToFixLeg) -> bool:
    # A reversal wraps to -180 and is planned to the left.
    delta = float(np.mod(next_leg.bearing - active_leg.bearing + 180.0, 360.0) - 180.0)
    return delta >= 0.0


class TransitionPlanner:
    """Sizes the turn between the active and next leg for the current airspeed."""

    def __init__(
        self,
        config: TurnPlanningConfig | None = None,
        transition_config: TransitionGuidanceConfig | None = None,
    ):
        self.config = config or TurnPlanningConfig()
        self.transition_config = transition_config or TransitionGuidanceConfig()

    def planning_speed_kts(self, true_airspeed_kts: float) -> float:
        return max(float(true_airspeed_kts), self.config.min_planning_speed_kts)

    def plan(
        self,
        active_leg: TrackToFixLeg,
        next_leg: TrackToFixLeg | None,
        true_airspeed_kts: float,
    ) -> list[Transition]:
        if next_leg is None:
            return []
        if angle_diff(active_leg.bearing, next_leg.bearing) == 0.0:
            # Collinear legs: nothing to turn.
            return []

        kts = self.planning_speed_kts(true_airspeed_kts)
        bank = bank_angle_deg(kts, self.config)
        radius = turn_radius_nm(kts, bank, self.config)
        return [
            FixedRadiusTransition(
                active_leg,
                next_leg,
                radius,
                is_clockwise_turn(active_leg, next_leg),
                bank_angle_command_deg=self.transition_config.bank_angle_command_deg,
            )
        ]
