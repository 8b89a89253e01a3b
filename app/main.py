from __future__ import annotations

import streamlit as st
from data_access import build_race_timeline, get_season_calendar, get_session_records

from pit_timeline import DataSourceError, LayoutConfig, Race, SeasonCalendar, SessionRecords

st.set_page_config(page_title="F1 Pit Timeline", page_icon="🏎️", layout="wide")

from components import derive_pit_stats, race_browser, render_banner, render_summary  # noqa: E402
from tabs import pit_stops, timeline  # noqa: E402
from theme.css import inject_theme  # noqa: E402

inject_theme()


# ---------------------------------------------------------------------------
# Cached data helpers
# ---------------------------------------------------------------------------
@st.cache_data(ttl=600, show_spinner=False)
def cached_season_calendar(season: int) -> SeasonCalendar:
    return get_season_calendar(season)


@st.cache_data(ttl=600, show_spinner=False)
def cached_session_records(session_key: int | str, _race: Race) -> SessionRecords:
    return get_session_records(_race)


# ---------------------------------------------------------------------------
# Header row
# ---------------------------------------------------------------------------
st.markdown(
    '<div style="padding:0.2rem 0 0.6rem 0;">'
    '<span style="font-size:2.5rem;font-weight:900;color:#E10600;'
    'letter-spacing:0.05em;margin-right:0.4rem;">F1</span>'
    '<span style="font-size:1.6rem;font-weight:600;color:#E5E7EB;">Pit Timeline</span>'
    "</div>",
    unsafe_allow_html=True,
)

# ---------------------------------------------------------------------------
# Season selector + race browsing
# ---------------------------------------------------------------------------
_season_col, _ = st.columns([1, 3])

with _season_col:
    season = st.selectbox("Season", list(range(2023, 2026)), index=2)

try:
    calendar = cached_season_calendar(season)
except DataSourceError as exc:
    st.error(f"Could not load the {season} calendar.\n\n{exc}")
    st.stop()

if calendar.is_empty:
    st.warning(f"No races found for the {season} season.")
    st.stop()

race_index = race_browser(calendar)
race = calendar.race_at(race_index)
render_banner(race, calendar.year, race_index + 1, len(calendar))

if not st.toggle("Show race data", value=True, key="show_race_data"):
    st.stop()

# ---------------------------------------------------------------------------
# Load race records and lay out the timeline
# ---------------------------------------------------------------------------
try:
    with st.spinner("Loading pit stops…"):
        records = cached_session_records(race.session_key, race)
except DataSourceError as exc:
    st.error(f"Could not load data for {race.circuit_name}.\n\n{exc}")
    st.stop()

layout_config = LayoutConfig()
result, viewport = build_race_timeline(records, layout_config)

render_summary(derive_pit_stats(records))

tab_timeline, tab_stops = st.tabs(["\U0001f6de Timeline", "\U0001f4cb Pit Stops"])

with tab_timeline:
    timeline.render(result, layout_config, viewport.width)

with tab_stops:
    pit_stops.render(records)

# ---------------------------------------------------------------------------
# Footer
# ---------------------------------------------------------------------------
st.markdown(
    '<div class="app-footer">Data sourced via OpenF1 or FastF1 &middot; '
    "Built with Streamlit</div>",
    unsafe_allow_html=True,
)
