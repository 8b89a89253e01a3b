"""Timeline layout: one stroke path per driver through every pit stop to the flag."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pit_timeline.aggregate import RaceData, build_race_data
from pit_timeline.config import LayoutConfig, Viewport
from pit_timeline.errors import InsufficientDataError
from pit_timeline.mapping import CoordinateMapping, compute_mapping, plottable_drivers
from pit_timeline.models import Driver, Pitstop, Race
from pit_timeline.primitives import Label, Point, Primitive, Segment, max_x

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "Not enough data to be displayed. Try another race."


@dataclass(frozen=True)
class NoData:
    reason: str
    message: str = NO_DATA_MESSAGE


@dataclass(frozen=True)
class DriverTrack:
    driver_number: int
    name: str
    color: str
    band_offset: float
    path: tuple[Primitive, ...]
    label: Label

    @property
    def finish_point(self) -> Point:
        return self.path[-1]


@dataclass(frozen=True)
class TimelineLayout:
    race: Race
    mapping: CoordinateMapping
    tracks: tuple[DriverTrack, ...]
    guides: tuple[Primitive, ...]

    @property
    def primitives(self) -> tuple[Primitive, ...]:
        out: list[Primitive] = list(self.guides)
        for track in self.tracks:
            out.extend(track.path)
            out.append(track.label)
        return tuple(out)

    @property
    def points(self) -> list[Point]:
        return [p for p in self.primitives if isinstance(p, Point)]

    @property
    def segments(self) -> list[Segment]:
        return [p for p in self.primitives if isinstance(p, Segment)]

    @property
    def labels(self) -> list[Label]:
        return [p for p in self.primitives if isinstance(p, Label)]

    @property
    def viewport_width(self) -> float:
        return self.mapping.viewport.width

    @property
    def content_width(self) -> float:
        # Band offsets push the latest finishers past the mapped race length.
        viewport = self.mapping.viewport
        rightmost = max_x([p for track in self.tracks for p in track.path])
        if rightmost is None:
            return self.mapping.content_width
        return max(self.mapping.content_width, rightmost + viewport.gutter + viewport.padding)


def lap_axis_ticks(max_final_lap: int, intervals: int = 6) -> list[int]:
    """Evenly spaced positive lap ticks counting down from the final lap."""
    if max_final_lap <= 0 or intervals <= 0:
        return []
    step = max(1, max_final_lap // intervals)
    ticks = {max_final_lap - i * step for i in range(intervals + 1)}
    return sorted(t for t in ticks if t > 0)


def _layout_driver(
    driver: Driver,
    pitstops: Sequence[Pitstop],
    mapping: CoordinateMapping,
    race: Race,
    band_offset: float,
    config: LayoutConfig,
) -> DriverTrack:
    color = driver.color
    path: list[Primitive] = []
    current = (mapping.time_to_x(0) + band_offset, mapping.lap_to_y(0))

    for pitstop in pitstops:
        y = mapping.lap_to_y(pitstop.lap_number)
        pit_in = (mapping.time_to_x(pitstop.start_offset_ms(race)) + band_offset, y)
        pit_out = (
            mapping.time_to_x(pitstop.end_offset_ms(race))
            + pitstop.duration_seconds * config.pit_duration_stretch
            + band_offset,
            y,
        )
        path.append(Segment(*current, *pit_in, color))
        path.append(Point(*pit_in, color))
        path.append(Point(*pit_out, color))
        path.append(Segment(*pit_in, *pit_out, color))
        current = pit_out

    finish = (
        mapping.time_to_x(driver.finish_offset_ms(race)) + band_offset,
        mapping.lap_to_y(driver.final_lap),
    )
    path.append(Segment(*current, *finish, color))
    path.append(Point(*finish, color))

    label = Label(
        driver.name,
        finish[0] + config.driver_label_offset,
        finish[1],
        config.label_font_size,
    )
    return DriverTrack(
        driver_number=driver.number,
        name=driver.name,
        color=color,
        band_offset=band_offset,
        path=tuple(path),
        label=label,
    )


def _guides(mapping: CoordinateMapping, race: Race, config: LayoutConfig) -> list[Primitive]:
    viewport = mapping.viewport
    origin_x = mapping.time_to_x(0)
    base_y = mapping.lap_to_y(0)
    top_y = mapping.lap_to_y(mapping.max_final_lap)
    end_x = mapping.time_to_x(mapping.max_finish_offset_ms)

    guides: list[Primitive] = [
        Segment(origin_x, base_y, end_x, base_y, config.axis_color),
        Segment(origin_x, base_y, origin_x, top_y, config.axis_color),
        Label(race.circuit_name, viewport.width / 2, viewport.padding / 2, config.title_font_size),
        Label(
            config.x_axis_title,
            (origin_x + end_x) / 2,
            base_y + viewport.padding * 0.6,
            config.label_font_size,
        ),
        Label(
            config.y_axis_title,
            origin_x,
            top_y - viewport.padding * 0.4,
            config.label_font_size,
        ),
    ]
    for lap in lap_axis_ticks(mapping.max_final_lap, config.lap_axis_intervals):
        guides.append(
            Label(
                str(lap),
                origin_x - config.lap_label_inset,
                mapping.lap_to_y(lap),
                config.label_font_size,
            )
        )
    return guides


def layout_timeline(
    race_data: RaceData,
    mapping: CoordinateMapping,
    race: Race,
    config: LayoutConfig | None = None,
) -> TimelineLayout | NoData:
    config = config or LayoutConfig()

    if not race_data.drivers:
        return NoData(reason=f"No drivers recorded for session {race.session_key}")
    if race_data.pitstop_count == 0:
        return NoData(reason=f"No pit stops recorded for session {race.session_key}")

    drivers = plottable_drivers(race_data, race)
    excluded = len(race_data.drivers) - len(drivers)
    if excluded:
        logger.warning(
            "Excluding %s driver(s) without a usable finish time or final lap from session %s",
            excluded,
            race.session_key,
        )
    if not drivers:
        return NoData(reason=f"No plottable drivers for session {race.session_key}")

    ordered = sorted(drivers, key=lambda driver: driver.finish_offset_ms(race))
    tracks = tuple(
        _layout_driver(
            driver,
            race_data.pitstops_for(driver.number),
            mapping,
            race,
            band_offset=config.band_step * position,
            config=config,
        )
        for position, driver in enumerate(ordered, start=1)
    )
    return TimelineLayout(
        race=race,
        mapping=mapping,
        tracks=tracks,
        guides=tuple(_guides(mapping, race, config)),
    )


def build_timeline(
    drivers: Sequence[Driver],
    pitstops: Sequence[Pitstop],
    race: Race,
    viewport: Viewport,
    config: LayoutConfig | None = None,
) -> TimelineLayout | NoData:
    """Aggregate, scale and lay out one race, folding insufficient data into ``NoData``."""
    race_data = build_race_data(drivers, pitstops)
    if not race_data.has_layout_data:
        return NoData(reason=f"Session {race.session_key} has no driver or pit-stop data")
    try:
        mapping = compute_mapping(viewport, race_data, race)
    except InsufficientDataError as exc:
        logger.warning("Cannot scale timeline for session %s: %s", race.session_key, exc)
        return NoData(reason=str(exc))
    return layout_timeline(race_data, mapping, race, config)
