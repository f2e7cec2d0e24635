"""Waypoint ingestion and the in-memory flight plan."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol


@dataclass(frozen=True, slots=True)
class Waypoint:
    ident: str
    lat_deg: float
    lon_deg: float
    alt_ft: float = 0.0

    def __str__(self) -> str:
        return self.ident


class FlightPlanSource(Protocol):
    """Read access to a flight plan, as consumed by the guidance manager."""

    def active_waypoint_index(self) -> int: ...

    def waypoint_at(self, index: int) -> Waypoint | None: ...


class SequenceableFlightPlan(FlightPlanSource, Protocol):
    def sequence(self) -> int: ...


def _parse_waypoint(i: int, item) -> Waypoint:
    if not isinstance(item, dict):
        raise ValueError(f"Waypoint {i} must be a JSON object")
    try:
        lat = float(item["lat"])
        lon = float(item["lon"])
    except KeyError as exc:
        raise ValueError(f"Waypoint {i} is missing {exc.args[0]!r}") from exc
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Waypoint {i} latitude out of range: {lat}")
    return Waypoint(
        ident=str(item.get("ident") or f"WPT{i:02d}"),
        lat_deg=lat,
        lon_deg=lon,
        alt_ft=float(item.get("alt_ft", 0.0)),
    )


def load_waypoints_json(path: str | Path) -> "FlightPlan":
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Waypoint file not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    active_index = 1
    if isinstance(raw, dict):
        points = raw.get("waypoints")
        active_index = int(raw.get("active_index", 1))
    else:
        points = raw

    if not isinstance(points, list):
        raise ValueError("Waypoint JSON must be a list or an object with key 'waypoints'")

    waypoints = [_parse_waypoint(i, item) for i, item in enumerate(points)]
    if len(waypoints) < 2:
        raise ValueError("At least two waypoints are required")
    return FlightPlan(waypoints, active_index=active_index)


class FlightPlan:
    """Ordered waypoint list with an active-waypoint pointer.

    The active waypoint is the one currently being flown to, so the active leg
    runs from ``active_index - 1`` to ``active_index``.
    """

    def __init__(self, waypoints: Iterable[Waypoint], active_index: int = 1):
        self.waypoints = list(waypoints)
        if not 0 <= active_index <= len(self.waypoints):
            raise ValueError(f"Active waypoint index {active_index} out of range")
        self._active_index = int(active_index)

    def __len__(self) -> int:
        return len(self.waypoints)

    def active_waypoint_index(self) -> int:
        return self._active_index

    def waypoint_at(self, index: int) -> Waypoint | None:
        if 0 <= index < len(self.waypoints):
            return self.waypoints[index]
        return None

    @property
    def is_exhausted(self) -> bool:
        return self._active_index >= len(self.waypoints)

    def sequence(self) -> int:
        """Advance the active waypoint; returns the new index."""
        if not self.is_exhausted:
            self._active_index += 1
        return self._active_index
