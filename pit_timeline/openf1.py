"""OpenF1 REST client and row parsers for race, driver and pit-stop records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd
import requests

from pit_timeline.config import Settings, get_settings
from pit_timeline.errors import DataSourceError, MalformedRecordError
from pit_timeline.models import Driver, Pitstop, Race, SessionRecords
from pit_timeline.utils import (
    datetime_to_utc,
    format_race_date,
    normalize_hex_color,
    safe_float,
    safe_int,
    with_retries,
)

logger = logging.getLogger(__name__)

_LAP_COLUMNS = ["driver_number", "lap_number", "lap_duration", "date_start"]


# ---------------------------------------------------------------------------
# Row parsers
# ---------------------------------------------------------------------------
def parse_race(row: Mapping[str, Any]) -> Race:
    session_key = safe_int(row.get("session_key"))
    start = datetime_to_utc(row.get("date_start"))
    if session_key is None or start is None:
        raise MalformedRecordError(f"Session row without key or start time: {dict(row)}")
    circuit = row.get("circuit_short_name") or row.get("location") or f"Session {session_key}"
    return Race(
        session_key=session_key,
        circuit_name=str(circuit),
        date_string=format_race_date(start),
        start_instant=start,
    )


def parse_races(rows: Iterable[Mapping[str, Any]]) -> list[Race]:
    races: list[Race] = []
    for row in rows:
        try:
            races.append(parse_race(row))
        except MalformedRecordError as exc:
            logger.warning("Skipping session row: %s", exc)
    return sorted(races, key=lambda race: race.start_instant)


def last_timed_laps(lap_rows: Iterable[Mapping[str, Any]]) -> dict[int, tuple[pd.Timestamp, int]]:
    """Map driver number to (finish instant, lap number) of their last timed lap."""
    laps = pd.DataFrame(list(lap_rows))
    if laps.empty or not set(_LAP_COLUMNS).issubset(laps.columns):
        return {}

    laps = laps[_LAP_COLUMNS].copy()
    laps["driver_number"] = pd.to_numeric(laps["driver_number"], errors="coerce")
    laps["lap_number"] = pd.to_numeric(laps["lap_number"], errors="coerce")
    laps["lap_duration"] = pd.to_numeric(laps["lap_duration"], errors="coerce")
    laps["date_start"] = pd.to_datetime(
        laps["date_start"], utc=True, errors="coerce", format="ISO8601"
    )
    laps = laps.dropna(subset=_LAP_COLUMNS)
    if laps.empty:
        return {}

    last = laps.sort_values(["driver_number", "lap_number"]).groupby("driver_number").tail(1)
    out: dict[int, tuple[pd.Timestamp, int]] = {}
    for row in last.itertuples(index=False):
        finish = row.date_start + pd.to_timedelta(row.lap_duration, unit="s")
        out[int(row.driver_number)] = (finish, int(row.lap_number))
    return out


def parse_drivers(
    driver_rows: Iterable[Mapping[str, Any]],
    lap_rows: Iterable[Mapping[str, Any]],
) -> list[Driver]:
    finishes = last_timed_laps(lap_rows)
    drivers: list[Driver] = []
    for row in driver_rows:
        number = safe_int(row.get("driver_number"))
        if number is None:
            logger.warning("Skipping driver row without a driver number: %s", dict(row))
            continue
        if number not in finishes:
            logger.warning("Skipping driver %s: no timed laps", number)
            continue
        finish_instant, final_lap = finishes[number]
        name = row.get("name_acronym") or row.get("broadcast_name") or str(number)
        drivers.append(
            Driver(
                name=str(name),
                number=number,
                finish_instant=finish_instant,
                final_lap=final_lap,
                color=normalize_hex_color(row.get("team_colour")),
            )
        )
    return drivers


def parse_pitstop(row: Mapping[str, Any]) -> Pitstop:
    pitstop = Pitstop(
        driver_number=safe_int(row.get("driver_number")),
        lap_number=safe_int(row.get("lap_number")),
        duration_seconds=safe_float(row.get("pit_duration")),
        start_instant=datetime_to_utc(row.get("date")),
    )
    if not pitstop.is_valid:
        raise MalformedRecordError(f"Incomplete pit row: {dict(row)}")
    return pitstop


def parse_pitstops(rows: Iterable[Mapping[str, Any]]) -> list[Pitstop]:
    pitstops: list[Pitstop] = []
    dropped = 0
    for row in rows:
        try:
            pitstops.append(parse_pitstop(row))
        except MalformedRecordError as exc:
            dropped += 1
            logger.warning("Skipping pit row: %s", exc)
    if dropped:
        logger.warning("Dropped %s of %s pit row(s)", dropped, dropped + len(pitstops))
    return pitstops


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------
def _is_retryable(exc: Exception) -> bool:
    """Connection drops, timeouts and 5xx responses are worth another attempt."""
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(exc, requests.HTTPError):
        response = exc.response
        return response is not None and response.status_code >= 500
    return False


class OpenF1Client:
    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
        retry_sleep_seconds: float = 2.0,
    ) -> None:
        self.settings = settings or get_settings()
        self.session = session or requests.Session()
        self.retry_sleep_seconds = retry_sleep_seconds

    def _get(self, endpoint: str, **params: Any) -> list[dict[str, Any]]:
        url = f"{self.settings.openf1_base_url.rstrip('/')}/{endpoint}"

        def _request() -> list[dict[str, Any]]:
            response = self.session.get(
                url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.settings.request_timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
            if not isinstance(payload, list):
                raise DataSourceError(f"Expected a JSON array from {url}, got {type(payload)}")
            return payload

        try:
            return with_retries(
                label=f"OpenF1 {endpoint} {params}",
                fn=_request,
                attempts=self.settings.request_attempts,
                base_sleep_seconds=self.retry_sleep_seconds,
                retryable=_is_retryable,
            )
        except (requests.RequestException, ValueError) as exc:
            raise DataSourceError(f"OpenF1 request to {url} failed: {exc}") from exc

    def fetch_season_races(self, year: int) -> list[Race]:
        rows = self._get("sessions", session_type="Race", session_name="Race", year=year)
        return parse_races(rows)

    def fetch_drivers(self, session_key: int) -> list[Driver]:
        driver_rows = self._get("drivers", session_key=session_key)
        lap_rows = self._get("laps", session_key=session_key)
        return parse_drivers(driver_rows, lap_rows)

    def fetch_pitstops(self, session_key: int) -> list[Pitstop]:
        return parse_pitstops(self._get("pit", session_key=session_key))

    def fetch_session_records(self, race: Race) -> SessionRecords:
        return SessionRecords(
            race=race,
            drivers=self.fetch_drivers(int(race.session_key)),
            pitstops=self.fetch_pitstops(int(race.session_key)),
        )
