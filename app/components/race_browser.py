"""Previous / next race browsing over a season calendar."""

from __future__ import annotations

import streamlit as st

from pit_timeline import SeasonCalendar


def race_browser(calendar: SeasonCalendar, key: str = "race_index") -> int:
    """Render the arrow buttons and return the index of the race on screen."""
    state_key = f"{key}_{calendar.year}"
    index = st.session_state.get(state_key, 0)
    index = min(max(index, 0), max(len(calendar) - 1, 0))

    prev_col, _, next_col = st.columns([1, 6, 1])
    with prev_col:
        if st.button("←", key=f"{state_key}_prev", disabled=index == 0):
            index = calendar.previous_index(index)
    with next_col:
        if st.button("→", key=f"{state_key}_next", disabled=index >= len(calendar) - 1):
            index = calendar.next_index(index)

    st.session_state[state_key] = index
    return index
