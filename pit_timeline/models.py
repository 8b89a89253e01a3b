"""Immutable race, driver and pit-stop records.

All instants are timezone-aware and every derived offset is an integer number of
milliseconds measured from the race start.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from pit_timeline.utils import normalize_hex_color, offset_ms


@dataclass(frozen=True)
class Race:
    session_key: int | str
    circuit_name: str
    date_string: str
    start_instant: datetime


@dataclass(frozen=True)
class Driver:
    name: str
    number: int
    finish_instant: datetime | None
    final_lap: int | None
    color: str = "#000000"

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", normalize_hex_color(self.color))

    def finish_offset_ms(self, race: Race) -> int | None:
        if self.finish_instant is None:
            return None
        return offset_ms(race.start_instant, self.finish_instant)

    def is_plottable(self, race: Race) -> bool:
        """True when both the finish offset and the final lap are usable coordinates."""
        finish = self.finish_offset_ms(race)
        return (
            finish is not None
            and finish >= 0
            and isinstance(self.final_lap, int)
            and self.final_lap > 0
        )


@dataclass(frozen=True)
class Pitstop:
    driver_number: int | None
    lap_number: int | None
    duration_seconds: float | None
    start_instant: datetime | None

    @property
    def is_valid(self) -> bool:
        return (
            isinstance(self.driver_number, int)
            and isinstance(self.lap_number, int)
            and self.lap_number > 0
            and isinstance(self.duration_seconds, (int, float))
            and math.isfinite(self.duration_seconds)
            and self.duration_seconds >= 0
            and self.start_instant is not None
        )

    @property
    def end_instant(self) -> datetime:
        return self.start_instant + timedelta(seconds=self.duration_seconds)

    def start_offset_ms(self, race: Race) -> int:
        return offset_ms(race.start_instant, self.start_instant)

    def end_offset_ms(self, race: Race) -> int:
        return offset_ms(race.start_instant, self.end_instant)


@dataclass(frozen=True)
class SessionRecords:
    """Everything a data source hands over for one race."""

    race: Race
    drivers: list[Driver]
    pitstops: list[Pitstop]
