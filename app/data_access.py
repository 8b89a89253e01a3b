from __future__ import annotations

import logging

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
)
from pit_timeline.sources import load_season, load_session_records

logger = logging.getLogger(__name__)


def get_season_calendar(season: int) -> SeasonCalendar:
    return load_season(season, get_settings())


def get_session_records(race: Race) -> SessionRecords:
    records = load_session_records(race, get_settings())
    logger.info(
        "Loaded %s driver(s) and %s pit stop(s) for session %s",
        len(records.drivers),
        len(records.pitstops),
        race.session_key,
    )
    return records


def build_race_timeline(
    records: SessionRecords, config: LayoutConfig
) -> tuple[TimelineLayout | NoData, Viewport]:
    viewport = Viewport.from_settings(get_settings(), config)
    return (
        build_timeline(records.drivers, records.pitstops, records.race, viewport, config),
        viewport,
    )
