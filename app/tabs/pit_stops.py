"""Pit Stops tab: every stop of the race as a table."""

from __future__ import annotations

import streamlit as st
from charts import build_pit_stop_table

from pit_timeline import SessionRecords


@st.fragment
def render(records: SessionRecords) -> None:
    st.markdown(
        '<p class="section-header first">Pit Stops</p>',
        unsafe_allow_html=True,
    )
    st.markdown(
        '<p class="chart-caption">'
        "Every usable pit stop in the order cars entered the pit lane. Pit In is the race "
        "time elapsed when the car entered; Duration is the time spent in the pit lane.</p>",
        unsafe_allow_html=True,
    )

    table = build_pit_stop_table(records)
    if table.empty:
        st.info("No pit stop data available for this race.")
        return

    rows_html = ""
    for _, row in table.iterrows():
        rows_html += (
            '<tr style="border-bottom: 1px solid rgba(255,255,255,0.05);">'
            '<td style="padding: 10px 16px; color: #FFFFFF; '
            f'font-weight: 700;">{row["Driver"]}</td>'
            f'<td style="padding: 10px 16px; color: #E5E7EB;">{row["No."]}</td>'
            f'<td style="padding: 10px 16px; color: #E5E7EB;">{row["Lap"]}</td>'
            f'<td style="padding: 10px 16px; color: #E5E7EB;">{row["Pit In"]}</td>'
            f'<td style="padding: 10px 16px; color: #E5E7EB;">{row["Duration (s)"]:.1f}</td>'
            "</tr>"
        )

    _ths = "padding:12px 16px;text-align:left;color:#9CA3AF;font-weight:600"
    header_html = "".join(f'<th style="{_ths}">{col}</th>' for col in table.columns)
    table_html = (
        '<div style="background: #1A1D26; border-radius: 8px; overflow: hidden;">'
        '<table style="width: 100%; border-collapse: collapse; font-size: 0.9rem;">'
        f'<thead><tr style="background: #252A3A;">{header_html}</tr></thead>'
        f'<tbody style="background: #1A1D26;">{rows_html}</tbody>'
        "</table></div>"
    )
    st.markdown(table_html, unsafe_allow_html=True)

    csv_data = table.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download pit stops as CSV",
        csv_data,
        file_name=f"pit_stops_{records.race.session_key}.csv",
        mime="text/csv",
    )
