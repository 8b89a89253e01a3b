from __future__ import annotations

import math

from conftest import at

from pit_timeline import Driver, Pitstop, Race


def test_driver_color_is_normalised() -> None:
    driver = Driver(name="NOR", number=4, finish_instant=at(10), final_lap=1, color="ff8000")
    assert driver.color == "#FF8000"
    assert Driver(name="X", number=9, finish_instant=None, final_lap=None, color="").color == (
        "#000000"
    )


def test_driver_finish_offset(race: Race, hamilton: Driver) -> None:
    assert hamilton.finish_offset_ms(race) == 100_000
    assert hamilton.is_plottable(race)


def test_driver_without_finish_or_lap_is_not_plottable(race: Race) -> None:
    no_finish = Driver(name="A", number=2, finish_instant=None, final_lap=10)
    no_lap = Driver(name="B", number=3, finish_instant=at(50), final_lap=None)
    zero_lap = Driver(name="C", number=5, finish_instant=at(50), final_lap=0)
    before_start = Driver(name="D", number=6, finish_instant=at(-5), final_lap=3)
    for driver in (no_finish, no_lap, zero_lap, before_start):
        assert not driver.is_plottable(race)
    assert no_finish.finish_offset_ms(race) is None


def test_pitstop_offsets(race: Race, hamilton_stop: Pitstop) -> None:
    assert hamilton_stop.is_valid
    assert hamilton_stop.start_offset_ms(race) == 40_000
    assert hamilton_stop.end_offset_ms(race) == 60_000


def test_pitstop_validity() -> None:
    assert not Pitstop(None, 4, 20.0, at(40)).is_valid
    assert not Pitstop(44, None, 20.0, at(40)).is_valid
    assert not Pitstop(44, 0, 20.0, at(40)).is_valid
    assert not Pitstop(44, 4, None, at(40)).is_valid
    assert not Pitstop(44, 4, -1.0, at(40)).is_valid
    assert not Pitstop(44, 4, math.nan, at(40)).is_valid
    assert not Pitstop(44, 4, 20.0, None).is_valid
    assert Pitstop(44, 4, 0.0, at(40)).is_valid
