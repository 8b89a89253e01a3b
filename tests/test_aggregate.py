from __future__ import annotations

import itertools

import pytest

from conftest import at

from pit_timeline import Driver, Pitstop, build_race_data


def _stops() -> list[Pitstop]:
    return [
        Pitstop(driver_number=44, lap_number=30, duration_seconds=21.0, start_instant=at(3000)),
        Pitstop(driver_number=44, lap_number=12, duration_seconds=22.5, start_instant=at(1200)),
        Pitstop(driver_number=1, lap_number=18, duration_seconds=20.1, start_instant=at(1800)),
        Pitstop(driver_number=44, lap_number=20, duration_seconds=23.0, start_instant=at(2000)),
    ]


def test_pitstops_are_grouped_and_chronological() -> None:
    data = build_race_data([], _stops())
    assert [p.lap_number for p in data.pitstops_for(44)] == [12, 20, 30]
    assert [p.lap_number for p in data.pitstops_for(1)] == [18]
    assert data.pitstops_for(63) == ()
    assert data.pitstop_count == 4


def test_pitstop_order_does_not_depend_on_input_order() -> None:
    expected = build_race_data([], _stops()).pitstops
    for permutation in itertools.permutations(_stops()):
        assert build_race_data([], permutation).pitstops == expected


def test_equal_start_instants_keep_input_order() -> None:
    first = Pitstop(driver_number=44, lap_number=12, duration_seconds=22.0, start_instant=at(10))
    second = Pitstop(driver_number=44, lap_number=13, duration_seconds=25.0, start_instant=at(10))
    assert build_race_data([], [first, second]).pitstops_for(44) == (first, second)
    assert build_race_data([], [second, first]).pitstops_for(44) == (second, first)


def test_malformed_pitstops_are_dropped() -> None:
    stops = _stops() + [
        Pitstop(driver_number=None, lap_number=3, duration_seconds=20.0, start_instant=at(5)),
        Pitstop(driver_number=44, lap_number=3, duration_seconds=None, start_instant=at(5)),
        Pitstop(driver_number=44, lap_number=3, duration_seconds=20.0, start_instant=None),
    ]
    data = build_race_data([], stops)
    assert data.pitstop_count == 4


def test_last_driver_record_wins() -> None:
    early = Driver(name="HAM", number=44, finish_instant=at(100), final_lap=10)
    late = Driver(name="HAM", number=44, finish_instant=at(120), final_lap=11)
    data = build_race_data([early, late], [])
    assert data.drivers == {44: late}


def test_empty_input_is_not_an_error() -> None:
    data = build_race_data([], [])
    assert not data.drivers
    assert data.pitstop_count == 0
    assert not data.has_layout_data


def test_race_data_is_read_only() -> None:
    data = build_race_data([], _stops())
    with pytest.raises(TypeError):
        data.pitstops[99] = ()  # type: ignore[index]
