from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from pit_timeline import (
    LayoutConfig,
    NoData,
    Race,
    SeasonCalendar,
    SessionRecords,
    TimelineLayout,
    Viewport,
    build_timeline,
    get_settings,
    pan_ratio,
)
from pit_timeline.sources import SOURCES, load_season, load_session_records

logger = logging.getLogger("run_timeline")


def _summary(result: TimelineLayout | NoData, records: SessionRecords) -> dict:
    summary = {
        "session_key": records.race.session_key,
        "circuit": records.race.circuit_name,
        "date": records.race.date_string,
        "drivers": len(records.drivers),
        "pit_stops": len(records.pitstops),
    }
    if isinstance(result, NoData):
        summary.update({"status": "no_data", "reason": result.reason, "message": result.message})
        return summary
    summary.update(
        {
            "status": "ok",
            "tracks": len(result.tracks),
            "points": len(result.points),
            "segments": len(result.segments),
            "labels": len(result.labels),
            "viewport_width": result.viewport_width,
            "content_width": round(result.content_width, 2),
            "pan_ratio": round(pan_ratio(result.content_width, result.viewport_width), 4),
        }
    )
    return summary


def _pick_race(calendar: SeasonCalendar, index: int, session_key: str | None) -> Race:
    if session_key is None:
        return calendar.race_at(index)
    key: int | str = int(session_key) if session_key.isdigit() else session_key
    found = calendar.index_of(key)
    if found is None:
        raise ValueError(f"Session {session_key} is not a race of the {calendar.year} season")
    return calendar.race_at(found)


def main() -> None:
    parser = argparse.ArgumentParser(description="Lay out the pit stop timeline of one race.")
    parser.add_argument("--season", type=int, required=True)
    parser.add_argument("--index", type=int, default=0, help="0-based race index in the season")
    parser.add_argument("--session-key", help="pick the race by session key instead of index")
    parser.add_argument("--source", choices=SOURCES)
    parser.add_argument("--width", type=float)
    parser.add_argument("--height", type=float)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = get_settings()
    if args.source:
        settings = replace(settings, data_source=args.source)
    if args.width:
        settings = replace(settings, viewport_width=args.width)
    if args.height:
        settings = replace(settings, viewport_height=args.height)

    config = LayoutConfig()
    try:
        calendar = load_season(args.season, settings)
        race = _pick_race(calendar, args.index, args.session_key)
        records = load_session_records(race, settings)
        viewport = Viewport.from_settings(settings, config)
        result = build_timeline(records.drivers, records.pitstops, race, viewport, config)
    except Exception:
        logger.exception("Timeline run failed for season=%s index=%s", args.season, args.index)
        raise

    print(json.dumps(_summary(result, records), default=str, indent=2))


if __name__ == "__main__":
    main()
