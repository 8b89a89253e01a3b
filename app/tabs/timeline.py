"""Timeline tab: pit stop timeline with a horizontal scroll bar."""

from __future__ import annotations

import streamlit as st
from charts import build_no_data_figure, build_timeline_chart

from pit_timeline import LayoutConfig, NoData, TimelineLayout, update_pan


@st.fragment
def render(result: TimelineLayout | NoData, config: LayoutConfig, viewport_width: float) -> None:
    st.markdown(
        '<p class="section-header first">Pit Stop Timeline</p>',
        unsafe_allow_html=True,
    )
    st.markdown(
        '<p class="chart-caption">'
        "Each coloured path follows one driver from the start to the chequered flag. "
        "Squares mark the moments a car entered and left the pit lane; the flat stretch "
        "between them is time spent in the pits. Later finishers are drawn further to "
        "the right. Drag the scroll bar to pan along the race.</p>",
        unsafe_allow_html=True,
    )

    if isinstance(result, NoData):
        st.plotly_chart(
            build_no_data_figure(result.message, width=viewport_width),
            use_container_width=False,
        )
        st.caption(result.reason)
        return

    can_pan = result.content_width > result.viewport_width
    pointer_x = st.slider(
        "Scroll",
        min_value=0,
        max_value=int(result.viewport_width),
        value=0,
        key=f"timeline_scroll_{result.race.session_key}",
        disabled=not can_pan,
        label_visibility="collapsed",
    )
    translation = update_pan(
        pointer_x,
        result.viewport_width,
        config.slider_width,
        result.content_width,
    )
    st.plotly_chart(build_timeline_chart(result, translation), use_container_width=False)
