"""Command-line entrypoint evaluating one lateral guidance cycle."""

from __future__ import annotations

import argparse
import logging

from .errors import GeometryError
from .flight.aircraft import AircraftState
from .flight.waypoints import FlightPlan, load_waypoints_json
from .guidance.manager import GuidanceManager
from .guidance_config import load_guidance_config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lateral path guidance")
    parser.add_argument("--waypoints", required=True, help="Path to waypoint JSON")
    parser.add_argument("--guidance-config", default=None, help="Path to guidance config JSON")
    parser.add_argument("--active-index", type=int, default=None, help="Active waypoint index override")
    parser.add_argument("--lat", type=float, required=True, help="Aircraft latitude (deg)")
    parser.add_argument("--lon", type=float, required=True, help="Aircraft longitude (deg)")
    parser.add_argument("--track", type=float, required=True, help="True track (deg)")
    parser.add_argument("--tas", type=float, required=True, help="True airspeed (kt)")
    parser.add_argument("--verbose", action="store_true", help="Log sequencing diagnostics")
    return parser


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    guidance_cfg = load_guidance_config(args.guidance_config)
    flight_plan = load_waypoints_json(args.waypoints)
    if args.active_index is not None:
        flight_plan = FlightPlan(flight_plan.waypoints, active_index=args.active_index)

    state = AircraftState(
        lat_deg=args.lat,
        lon_deg=args.lon,
        true_track_deg=args.track,
        true_airspeed_kts=args.tas,
    )
    manager = GuidanceManager(flight_plan, guidance_cfg)

    try:
        output = manager.update(state)
    except GeometryError as exc:
        print(f"[error] invalid path geometry: {exc}")
        return 2

    if output is None:
        print("[warn] no active leg; lateral guidance unavailable")
        return 1

    print(f"[done] geometry: {output.geometry}")
    params = output.parameters
    if params is not None:
        print(f"  - law:                {params.law.value}")
        print(f"  - track angle error:  {params.track_angle_error_deg:+8.3f} deg")
        print(f"  - cross-track error:  {params.cross_track_error_nm:+8.4f} nm")
        print(f"  - bank command:       {params.bank_angle_command_deg:+8.3f} deg")
    print(f"  - distance to go:     {output.distance_to_go_nm:8.4f} nm")
    print(f"  - sequenced:          {output.sequenced} (active index {output.active_waypoint_index})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
