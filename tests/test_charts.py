from __future__ import annotations

import pytest
from charts import (
    _readable_color,
    build_no_data_figure,
    build_pit_stop_table,
    build_timeline_chart,
    format_elapsed_ms,
    format_pit_duration,
)
from conftest import at

from pit_timeline import (
    Driver,
    Pitstop,
    Race,
    SessionRecords,
    TimelineLayout,
    Viewport,
    build_timeline,
    update_pan,
)


def _layout(race: Race, viewport: Viewport, drivers: list[Driver], stop: Pitstop) -> TimelineLayout:
    result = build_timeline(drivers, [stop], race, viewport)
    assert isinstance(result, TimelineLayout)
    return result


def test_timeline_chart_traces(
    race: Race, viewport: Viewport, hamilton: Driver, verstappen: Driver, hamilton_stop: Pitstop
) -> None:
    layout = _layout(race, viewport, [hamilton, verstappen], hamilton_stop)
    fig = build_timeline_chart(layout)

    # One guide trace, then a line trace and a marker trace per driver.
    assert len(fig.data) == 1 + 2 * len(layout.tracks)
    assert [t.name for t in fig.data[1::2]] == ["VER", "HAM"]
    assert len(fig.layout.annotations) == len(layout.labels)
    assert list(fig.layout.xaxis.range) == [0, 1000]
    assert list(fig.layout.yaxis.range) == [600, 0]


def test_timeline_chart_is_shifted_by_the_pan(
    race: Race, viewport: Viewport, hamilton: Driver, hamilton_stop: Pitstop
) -> None:
    narrow = Viewport(width=400, height=600, padding=50, gutter=50)
    layout = _layout(race, narrow, [hamilton], hamilton_stop)
    translation = update_pan(1000, layout.viewport_width, 30, layout.content_width)
    assert translation == pytest.approx(-(layout.content_width - layout.viewport_width))

    fig = build_timeline_chart(layout, translation)
    x_range = list(fig.layout.xaxis.range)
    assert x_range == pytest.approx([-translation, -translation + 400])


def test_no_data_figure() -> None:
    fig = build_no_data_figure("Not enough data", width=800, height=400)
    assert fig.layout.annotations[0].text == "Not enough data"
    assert fig.layout.width == 800


def test_pit_stop_table(race: Race, hamilton: Driver, verstappen: Driver) -> None:
    records = SessionRecords(
        race=race,
        drivers=[hamilton, verstappen],
        pitstops=[
            Pitstop(44, 20, 21.04, at(1950.5)),
            Pitstop(1, 18, 19.96, at(1800)),
            Pitstop(1, None, 20.0, at(100)),
        ],
    )
    table = build_pit_stop_table(records)
    assert table["Driver"].tolist() == ["VER", "HAM"]
    assert table["Pit In"].tolist() == ["30:00.000", "32:30.500"]
    assert table["Duration (s)"].tolist() == [20.0, 21.0]


def test_pit_stop_table_without_stops(race: Race) -> None:
    table = build_pit_stop_table(SessionRecords(race=race, drivers=[], pitstops=[]))
    assert table.empty
    assert list(table.columns) == ["Driver", "No.", "Lap", "Pit In", "Duration (s)"]


def test_formatting_helpers() -> None:
    assert format_elapsed_ms(83_456) == "1:23.456"
    assert format_pit_duration(22.44) == "22.4s"
    assert _readable_color("#000000") == "#9CA3AF"
    assert _readable_color("#FF8000") == "#FF8000"
