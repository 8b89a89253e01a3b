"""Reusable UI components for the pit timeline dashboard."""

from .banner import render_banner
from .metrics import derive_pit_stats, metric_html, render_summary
from .race_browser import race_browser

__all__ = [
    "derive_pit_stats",
    "metric_html",
    "race_browser",
    "render_banner",
    "render_summary",
]
