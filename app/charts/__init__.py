"""Chart builders for the pit timeline dashboard."""

from ._shared import (
    _readable_color,
    format_elapsed_ms,
    format_pit_duration,
)
from .results import build_pit_stop_table
from .timeline import build_no_data_figure, build_timeline_chart

__all__ = [
    "_readable_color",
    "build_no_data_figure",
    "build_pit_stop_table",
    "build_timeline_chart",
    "format_elapsed_ms",
    "format_pit_duration",
]
