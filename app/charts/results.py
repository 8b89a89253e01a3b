from __future__ import annotations

import pandas as pd

from pit_timeline import SessionRecords
from pit_timeline.utils import offset_ms

from ._shared import format_elapsed_ms

_COLUMNS = ["Driver", "No.", "Lap", "Pit In", "Duration (s)"]


def build_pit_stop_table(records: SessionRecords) -> pd.DataFrame:
    """One row per usable pit stop, in the order the cars entered the pit lane."""
    race = records.race
    names = {d.number: d.name for d in records.drivers}
    stops = sorted((p for p in records.pitstops if p.is_valid), key=lambda p: p.start_instant)
    if not stops:
        return pd.DataFrame(columns=_COLUMNS)

    rows = [
        {
            "Driver": names.get(p.driver_number, "-"),
            "No.": p.driver_number,
            "Lap": p.lap_number,
            "Pit In": format_elapsed_ms(offset_ms(race.start_instant, p.start_instant)),
            "Duration (s)": round(p.duration_seconds, 1),
        }
        for p in stops
    ]
    return pd.DataFrame(rows, columns=_COLUMNS)
