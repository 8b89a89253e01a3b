from __future__ import annotations

import pytest
from conftest import at

from pit_timeline import Race, SeasonCalendar
from scripts.run_timeline import _pick_race


def _calendar() -> SeasonCalendar:
    races = (
        Race(session_key=9472, circuit_name="Sakhir", date_string="", start_instant=at(0)),
        Race(session_key=9480, circuit_name="Jeddah", date_string="", start_instant=at(86400)),
    )
    return SeasonCalendar(year=2024, races=races)


def test_pick_race_by_index() -> None:
    assert _pick_race(_calendar(), 1, None).circuit_name == "Jeddah"


def test_pick_race_by_session_key() -> None:
    assert _pick_race(_calendar(), 0, "9480").circuit_name == "Jeddah"


def test_pick_race_by_fastf1_key() -> None:
    race = Race(session_key="2024_01_R", circuit_name="Sakhir", date_string="", start_instant=at(0))
    calendar = SeasonCalendar(year=2024, races=(race,))
    assert _pick_race(calendar, 5, "2024_01_R").circuit_name == "Sakhir"


def test_pick_race_unknown_session_key() -> None:
    with pytest.raises(ValueError, match="9999"):
        _pick_race(_calendar(), 0, "9999")
