from __future__ import annotations

import pytest
from conftest import at

from pit_timeline import (
    Driver,
    InsufficientDataError,
    InvalidConfigurationError,
    Pitstop,
    Race,
    Viewport,
    build_race_data,
    compute_mapping,
)


def test_compute_mapping_scales(
    race: Race, viewport: Viewport, hamilton: Driver, verstappen: Driver, hamilton_stop: Pitstop
) -> None:
    data = build_race_data([hamilton, verstappen], [hamilton_stop])
    mapping = compute_mapping(viewport, data, race)

    assert mapping.max_finish_offset_ms == 100_000
    assert mapping.max_final_lap == 10
    assert mapping.time_scale == pytest.approx(850 / 100_000)
    assert mapping.lap_scale == pytest.approx(50)
    assert mapping.time_to_x(0) == pytest.approx(50)
    assert mapping.time_to_x(100_000) == pytest.approx(900)
    assert mapping.lap_to_y(0) == pytest.approx(550)
    assert mapping.lap_to_y(10) == pytest.approx(50)
    assert mapping.content_width == pytest.approx(950)


def test_compute_mapping_ignores_unplottable_drivers(
    race: Race, viewport: Viewport, hamilton: Driver
) -> None:
    ghost = Driver(name="GHO", number=99, finish_instant=None, final_lap=70)
    mapping = compute_mapping(viewport, build_race_data([hamilton, ghost], []), race)
    assert mapping.max_final_lap == 10


def test_compute_mapping_without_drivers(race: Race, viewport: Viewport) -> None:
    with pytest.raises(InsufficientDataError):
        compute_mapping(viewport, build_race_data([], []), race)


def test_compute_mapping_with_zero_race_length(race: Race, viewport: Viewport) -> None:
    instant = Driver(name="ZER", number=7, finish_instant=at(0), final_lap=1)
    with pytest.raises(InsufficientDataError):
        compute_mapping(viewport, build_race_data([instant], []), race)


@pytest.mark.parametrize(
    "width,height,padding,gutter",
    [(0, 600, 50, 50), (1000, -1, 50, 50), (100, 600, 50, 50), (1000, 100, 50, 0)],
)
def test_viewport_rejects_degenerate_geometry(
    width: float, height: float, padding: float, gutter: float
) -> None:
    with pytest.raises(InvalidConfigurationError):
        Viewport(width=width, height=height, padding=padding, gutter=gutter)


def test_invalid_configuration_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Viewport(width=0, height=0)
