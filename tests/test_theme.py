from __future__ import annotations

from theme.css import _stylesheet


def test_stylesheet_covers_dashboard_classes() -> None:
    css = _stylesheet()
    for selector in (
        ".race-banner",
        ".summary-kpis",
        ".metric-card.timing",
        ".metric-card.movement",
        ".metric-tooltip",
        ".section-header",
        ".chart-caption",
        ".app-footer",
    ):
        assert selector in css
    assert css.count("{") == css.count("}")
