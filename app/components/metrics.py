"""Metric cards, pit-stop stat derivation, and summary strip rendering."""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st
from charts import format_elapsed_ms, format_pit_duration

from pit_timeline import SessionRecords


@dataclass(frozen=True)
class PitStats:
    total_laps: int
    total_pit_stops: int
    drivers_pitted: int
    fastest_stop_str: str
    fastest_stop_driver: str
    winner_name: str
    winner_time_str: str


def derive_pit_stats(records: SessionRecords) -> PitStats:
    """Summarise the raw session records shown above the timeline."""
    race = records.race
    names = {d.number: d.name for d in records.drivers}
    valid_stops = [p for p in records.pitstops if p.is_valid]
    plottable = [d for d in records.drivers if d.is_plottable(race)]

    total_laps = max((d.final_lap for d in plottable), default=0)

    fastest_stop_str = "—"
    fastest_stop_driver = ""
    if valid_stops:
        fastest = min(valid_stops, key=lambda p: p.duration_seconds)
        fastest_stop_str = format_pit_duration(fastest.duration_seconds)
        fastest_stop_driver = names.get(fastest.driver_number, f"#{fastest.driver_number}")

    winner_name = ""
    winner_time_str = "—"
    if plottable:
        # First across the line among drivers on the lead lap.
        lead_lap = [d for d in plottable if d.final_lap == total_laps]
        winner = min(lead_lap, key=lambda d: d.finish_offset_ms(race))
        winner_name = winner.name
        winner_time_str = format_elapsed_ms(winner.finish_offset_ms(race))

    return PitStats(
        total_laps=total_laps,
        total_pit_stops=len(valid_stops),
        drivers_pitted=len({p.driver_number for p in valid_stops}),
        fastest_stop_str=fastest_stop_str,
        fastest_stop_driver=fastest_stop_driver,
        winner_name=winner_name,
        winner_time_str=winner_time_str,
    )


def metric_html(
    label: str,
    value: str,
    sub: str = "",
    icon: str = "",
    variant: str = "",
    tooltip: str = "",
) -> str:
    """Generate HTML for a metric card with optional Phosphor icon and color variant."""
    sub_html = f'<div class="metric-sub">{sub}</div>' if sub else ""
    icon_html = f'<div class="metric-icon"><i class="{icon}"></i></div>' if icon else ""
    variant_class = f" {variant}" if variant else ""
    tooltip_html = f'<div class="metric-tooltip">{tooltip}</div>' if tooltip else ""
    tooltip_class = " has-tooltip" if tooltip else ""
    return (
        f'<div class="metric-card{variant_class}{tooltip_class}">'
        f"{icon_html}"
        f'<div class="metric-body">'
        f'<div class="metric-label">{label}</div>'
        f'<div class="metric-value">{value}</div>'
        f"{sub_html}"
        f"</div>"
        f"{tooltip_html}</div>"
    )


def render_summary(stats: PitStats) -> None:
    """Render the KPI summary strip."""
    s = stats
    kpi_cards = [
        metric_html(
            "Race Time",
            s.winner_time_str,
            s.winner_name,
            icon="ph-bold ph-timer",
            variant="timing",
            tooltip="Elapsed time of the first finisher on the lead lap",
        ),
        metric_html(
            "Total Laps",
            str(s.total_laps),
            icon="ph-bold ph-flag-checkered",
            variant="count",
            tooltip="Highest final lap reached by any driver",
        ),
        metric_html(
            "Pit Stops",
            str(s.total_pit_stops),
            f"{s.drivers_pitted} drivers",
            icon="ph-bold ph-wrench",
            variant="count",
            tooltip="Combined pit stops by all drivers",
        ),
        metric_html(
            "Quickest Stop",
            s.fastest_stop_str,
            s.fastest_stop_driver,
            icon="ph-bold ph-lightning",
            variant="movement",
            tooltip="Shortest time spent in the pit lane",
        ),
    ]
    kpi_grid = "\n".join(kpi_cards)

    st.markdown(
        f"""<div class="dashboard-summary">
<div class="summary-stats">
<div class="summary-section-title">Pit Lane</div>
<div class="summary-kpis">
{kpi_grid}
</div>
</div>
</div>""",
        unsafe_allow_html=True,
    )
