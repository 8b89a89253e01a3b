"""Pick the configured data source for season calendars and race records."""

from __future__ import annotations

from pit_timeline import extract
from pit_timeline.config import Settings, get_settings
from pit_timeline.errors import InvalidConfigurationError
from pit_timeline.models import Race, SessionRecords
from pit_timeline.openf1 import OpenF1Client
from pit_timeline.season import SeasonCalendar
from pit_timeline.utils import parse_race_id

SOURCES = ("openf1", "fastf1")


def _source(settings: Settings) -> str:
    source = settings.data_source.strip().lower()
    if source not in SOURCES:
        raise InvalidConfigurationError(
            f"Unknown data source {settings.data_source!r}; expected one of {SOURCES}"
        )
    return source


def load_season(year: int, settings: Settings | None = None) -> SeasonCalendar:
    settings = settings or get_settings()
    if _source(settings) == "fastf1":
        races = extract.fetch_event_schedule(year)
    else:
        races = OpenF1Client(settings).fetch_season_races(year)
    return SeasonCalendar(year=year, races=tuple(races))


def load_session_records(race: Race, settings: Settings | None = None) -> SessionRecords:
    settings = settings or get_settings()
    if _source(settings) == "fastf1":
        season, round_number, _ = parse_race_id(str(race.session_key))
        return extract.fetch_session_records(season, round_number)
    return OpenF1Client(settings).fetch_session_records(race)
