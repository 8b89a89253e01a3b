from __future__ import annotations

import pytest
from conftest import at

from pit_timeline import Race, SeasonCalendar


def _calendar() -> SeasonCalendar:
    races = tuple(
        Race(session_key=key, circuit_name=name, date_string="", start_instant=at(i * 86400))
        for i, (key, name) in enumerate([(9472, "Sakhir"), (9480, "Jeddah"), (9488, "Melbourne")])
    )
    return SeasonCalendar(year=2024, races=races)


def test_browsing_is_clamped() -> None:
    calendar = _calendar()
    assert len(calendar) == 3
    assert calendar.next_index(0) == 1
    assert calendar.next_index(2) == 2
    assert calendar.previous_index(0) == 0
    assert calendar.previous_index(2) == 1


def test_race_at() -> None:
    calendar = _calendar()
    assert calendar.race_at(1).circuit_name == "Jeddah"
    with pytest.raises(IndexError):
        calendar.race_at(3)
    with pytest.raises(IndexError):
        calendar.race_at(-1)


def test_index_of() -> None:
    calendar = _calendar()
    assert calendar.index_of(9488) == 2
    assert calendar.index_of(1) is None


def test_empty_calendar() -> None:
    calendar = SeasonCalendar(year=2030, races=())
    assert calendar.is_empty
    assert calendar.next_index(0) == 0
