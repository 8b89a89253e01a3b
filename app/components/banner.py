"""Race card banner for the selected race."""

from __future__ import annotations

import streamlit as st

from pit_timeline import Race


def render_banner(race: Race, year: int, position: int, total: int) -> None:
    """Render the race card header: circuit, date and place in the season."""
    st.markdown(
        f"""
        <div class="race-banner">
            <div>
                <h1>{race.circuit_name}</h1>
                <p>{year} &middot; {race.date_string} &middot; Race {position} of {total}</p>
            </div>
        </div>
        """,
        unsafe_allow_html=True,
    )
