"""Linear time->x and lap->y scaling shared by every primitive of one layout pass."""

from __future__ import annotations

from dataclasses import dataclass

from pit_timeline.aggregate import RaceData
from pit_timeline.config import Viewport
from pit_timeline.errors import InsufficientDataError
from pit_timeline.models import Driver, Race


@dataclass(frozen=True)
class CoordinateMapping:
    viewport: Viewport
    max_finish_offset_ms: int
    max_final_lap: int
    time_scale: float
    lap_scale: float

    def time_to_x(self, offset_ms: float) -> float:
        return offset_ms * self.time_scale + self.viewport.padding

    def lap_to_y(self, lap: float) -> float:
        return self.viewport.height - lap * self.lap_scale - self.viewport.padding

    @property
    def content_width(self) -> float:
        return (
            self.viewport.padding
            + self.max_finish_offset_ms * self.time_scale
            + self.viewport.padding
        )


def plottable_drivers(race_data: RaceData, race: Race) -> list[Driver]:
    return [driver for driver in race_data.drivers.values() if driver.is_plottable(race)]


def compute_mapping(viewport: Viewport, race_data: RaceData, race: Race) -> CoordinateMapping:
    drivers = plottable_drivers(race_data, race)
    if not drivers:
        raise InsufficientDataError(
            f"No driver with a usable finish time and final lap for session {race.session_key}"
        )

    max_finish = max(driver.finish_offset_ms(race) for driver in drivers)
    max_lap = max(driver.final_lap for driver in drivers)
    if max_finish <= 0:
        raise InsufficientDataError(
            f"Latest finish offset is {max_finish} ms for session {race.session_key}"
        )

    return CoordinateMapping(
        viewport=viewport,
        max_finish_offset_ms=max_finish,
        max_final_lap=max_lap,
        time_scale=viewport.plot_width / max_finish,
        lap_scale=viewport.plot_height / max_lap,
    )
