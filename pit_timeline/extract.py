from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import fastf1
import pandas as pd

from pit_timeline.config import get_settings
from pit_timeline.errors import DataSourceError
from pit_timeline.models import Driver, Pitstop, Race, SessionRecords
from pit_timeline.utils import (
    datetime_to_utc,
    format_race_date,
    make_race_id,
    normalize_hex_color,
    safe_int,
    with_retries,
)

logger = logging.getLogger(__name__)


def _text(value: object) -> str | None:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _enable_cache() -> None:
    settings = get_settings()
    Path(settings.fastf1_cache_dir).mkdir(parents=True, exist_ok=True)
    fastf1.Cache.enable_cache(settings.fastf1_cache_dir)


def races_from_schedule(schedule: pd.DataFrame, season: int) -> list[Race]:
    races: list[Race] = []
    for _, row in schedule.iterrows():
        round_number = safe_int(row.get("RoundNumber"))
        start = datetime_to_utc(row.get("Session5DateUtc"))
        if start is None:
            start = datetime_to_utc(row.get("EventDate"))
        if round_number is None or round_number < 1 or start is None:
            logger.warning("Skipping schedule row without round or date: %s", row.to_dict())
            continue
        circuit = row.get("Location")
        if circuit is None or pd.isna(circuit):
            circuit = row.get("EventName", f"{season} Round {round_number}")
        races.append(
            Race(
                session_key=make_race_id(season, round_number),
                circuit_name=str(circuit),
                date_string=format_race_date(start),
                start_instant=start,
            )
        )
    return sorted(races, key=lambda race: race.start_instant)


def drivers_from_laps(
    laps: pd.DataFrame, results: pd.DataFrame, t0: pd.Timestamp
) -> list[Driver]:
    """One driver per car that completed a timed lap, finishing at the end of that lap."""
    if laps.empty:
        return []

    timed = laps[laps["LapTime"].notna() & laps["Time"].notna()].copy()
    timed["LapNumber"] = pd.to_numeric(timed["LapNumber"], errors="coerce")
    timed = timed[timed["LapNumber"].notna()]
    last = timed.sort_values(["DriverNumber", "LapNumber"]).groupby("DriverNumber").tail(1)

    info: dict[int, dict[str, Any]] = {}
    for _, row in results.iterrows():
        number = safe_int(row.get("DriverNumber"))
        if number is not None:
            info[number] = row.to_dict()

    drivers: list[Driver] = []
    for _, row in last.iterrows():
        number = safe_int(row["DriverNumber"])
        if number is None:
            continue
        meta = info.get(number, {})
        name = _text(meta.get("Abbreviation")) or _text(row.get("Driver")) or str(number)
        drivers.append(
            Driver(
                name=str(name),
                number=number,
                finish_instant=t0 + row["Time"],
                final_lap=int(row["LapNumber"]),
                color=normalize_hex_color(meta.get("TeamColor")),
            )
        )
    return drivers


def pitstops_from_laps(laps: pd.DataFrame, t0: pd.Timestamp) -> list[Pitstop]:
    """Pair the pit-in time of lap n with the pit-out time of lap n + 1."""
    if laps.empty:
        return []

    df = laps[["DriverNumber", "LapNumber", "PitInTime", "PitOutTime"]].copy()
    df["LapNumber"] = pd.to_numeric(df["LapNumber"], errors="coerce")
    df = df.sort_values(["DriverNumber", "LapNumber"])
    grouped = df.groupby("DriverNumber")
    df["next_lap_number"] = grouped["LapNumber"].shift(-1)
    df["next_pit_out_time"] = grouped["PitOutTime"].shift(-1)

    stops = df[
        df["PitInTime"].notna()
        & df["next_pit_out_time"].notna()
        & (df["next_lap_number"] == df["LapNumber"] + 1)
    ]
    pitstops: list[Pitstop] = []
    for _, row in stops.iterrows():
        duration = (row["next_pit_out_time"] - row["PitInTime"]).total_seconds()
        pitstops.append(
            Pitstop(
                driver_number=safe_int(row["DriverNumber"]),
                lap_number=safe_int(row["LapNumber"]),
                duration_seconds=duration,
                start_instant=t0 + row["PitInTime"],
            )
        )
    return pitstops


def fetch_event_schedule(season: int) -> list[Race]:
    _enable_cache()

    def _load_schedule() -> pd.DataFrame:
        schedule_df = fastf1.get_event_schedule(season, include_testing=False)
        if schedule_df is None or schedule_df.empty:
            raise ValueError(f"Empty schedule returned for season={season}")
        return schedule_df

    try:
        schedule = with_retries(
            label=f"schedule fetch season={season}",
            fn=_load_schedule,
            attempts=5,
            base_sleep_seconds=2.0,
        )
    except Exception as exc:
        raise DataSourceError(f"FastF1 schedule fetch for {season} failed: {exc}") from exc
    return races_from_schedule(pd.DataFrame(schedule), season)


def fetch_session_records(season: int, round_number: int) -> SessionRecords:
    _enable_cache()

    def _load_session() -> SessionRecords:
        session = fastf1.get_session(season, round_number, "R")
        session.load(laps=True, telemetry=False, weather=False, messages=False)

        race_id = make_race_id(season, round_number)
        laps = session.laps.copy().reset_index(drop=True)
        if laps.empty:
            raise ValueError(f"No lap rows returned for {race_id}")

        t0 = datetime_to_utc(session.t0_date)
        if t0 is None:
            raise ValueError(f"No session time reference for {race_id}")
        start_time = getattr(session, "session_start_time", None)
        start = t0 + start_time if start_time is not None and pd.notna(start_time) else t0

        event: Any = session.event
        race = Race(
            session_key=race_id,
            circuit_name=str(getattr(event, "Location", race_id)),
            date_string=format_race_date(start),
            start_instant=start,
        )
        results = session.results.copy().reset_index(drop=True)
        return SessionRecords(
            race=race,
            drivers=drivers_from_laps(laps, results, t0),
            pitstops=pitstops_from_laps(laps, t0),
        )

    try:
        return with_retries(
            label=f"session fetch season={season} round={round_number}",
            fn=_load_session,
            attempts=4,
            base_sleep_seconds=2.0,
        )
    except Exception as exc:
        raise DataSourceError(
            f"FastF1 session fetch for {season} round {round_number} failed: {exc}"
        ) from exc
