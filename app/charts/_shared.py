from __future__ import annotations

from pit_timeline.utils import hex_to_rgb

_TEXT = "#E8EAED"

# No title; HTML captions above each chart handle labelling.
_CHART_LAYOUT = {
    "paper_bgcolor": "rgba(0,0,0,0)",
    "plot_bgcolor": "rgba(0,0,0,0)",
    "font": {"color": _TEXT, "size": 14},
    "margin": {"l": 0, "r": 0, "t": 0, "b": 0},
    "hoverlabel": {
        "bgcolor": "#1E2130",
        "font_size": 15,
        "font_color": "#F0F2F5",
        "align": "left",
    },
}

_H_LEGEND = {
    "orientation": "h",
    "yanchor": "bottom",
    "y": 1.0,
    "x": 0,
    "font": {"size": 14, "color": "#F0F2F5"},
}


def _readable_color(hex_color: str) -> str:
    """Lift near-black team colours so they stay visible on the dark background."""
    r, g, b = hex_to_rgb(hex_color)
    if 0.299 * r + 0.587 * g + 0.114 * b < 60:
        return "#9CA3AF"
    return hex_color


def format_elapsed_ms(ms: float | int) -> str:
    total_sec = float(ms) / 1000.0
    minutes = int(total_sec // 60)
    seconds = total_sec % 60
    return f"{minutes}:{seconds:06.3f}"


def format_pit_duration(seconds: float) -> str:
    return f"{seconds:.1f}s"
