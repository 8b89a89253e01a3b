from __future__ import annotations

import pandas as pd
import pytest

from pit_timeline import Driver, Pitstop, Race, Viewport

RACE_START = pd.Timestamp("2024-03-02 15:00:00", tz="UTC")


def at(seconds: float) -> pd.Timestamp:
    return RACE_START + pd.Timedelta(seconds=seconds)


@pytest.fixture
def race() -> Race:
    return Race(
        session_key=9472,
        circuit_name="Sakhir",
        date_string="March - 02",
        start_instant=RACE_START,
    )


@pytest.fixture
def viewport() -> Viewport:
    # 850 x 500 drawable area.
    return Viewport(width=1000, height=600, padding=50, gutter=50)


@pytest.fixture
def hamilton() -> Driver:
    return Driver(name="HAM", number=44, finish_instant=at(100), final_lap=10, color="00D2BE")


@pytest.fixture
def verstappen() -> Driver:
    return Driver(name="VER", number=1, finish_instant=at(90), final_lap=10, color="#3671C6")


@pytest.fixture
def hamilton_stop() -> Pitstop:
    return Pitstop(driver_number=44, lap_number=4, duration_seconds=20.0, start_instant=at(40))
