"""Aircraft state snapshot consumed by lateral guidance."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.geodesy import Coordinates, normalize_deg


@dataclass(frozen=True, slots=True)
class AircraftState:
    lat_deg: float
    lon_deg: float
    true_track_deg: float
    true_airspeed_kts: float
    alt_ft: float = 0.0

    def __post_init__(self):
        if not -90.0 <= self.lat_deg <= 90.0:
            raise ValueError(f"Latitude out of range: {self.lat_deg}")
        if self.true_airspeed_kts < 0.0:
            raise ValueError("True airspeed must not be negative")
        object.__setattr__(self, "true_track_deg", normalize_deg(self.true_track_deg))

    @property
    def position(self) -> Coordinates:
        return Coordinates(self.lat_deg, self.lon_deg, self.alt_ft)
