from __future__ import annotations

import plotly.graph_objects as go

from pit_timeline import Label, Point, Segment, TimelineLayout

from ._shared import _CHART_LAYOUT, _H_LEGEND, _TEXT, _readable_color


# ---------------------------------------------------------------------------
# Pit Stop Timeline
# ---------------------------------------------------------------------------
def _segment_xy(segments: list[Segment]) -> tuple[list[float | None], list[float | None]]:
    # One trace per colour; None breaks the line between segments.
    xs: list[float | None] = []
    ys: list[float | None] = []
    for seg in segments:
        xs.extend((seg.x1, seg.x2, None))
        ys.extend((seg.y1, seg.y2, None))
    return xs, ys


def _screen_axes(layout: TimelineLayout, translation: float) -> dict:
    viewport = layout.mapping.viewport
    hidden = {"visible": False, "fixedrange": True, "showgrid": False, "zeroline": False}
    return {
        "xaxis": {**hidden, "range": [-translation, -translation + viewport.width]},
        # Screen coordinates grow downwards.
        "yaxis": {**hidden, "range": [viewport.height, 0]},
    }


def build_timeline_chart(layout: TimelineLayout, translation: float = 0.0) -> go.Figure:
    """Draw layout primitives in screen space, shifted left by the pan translation."""
    figure = go.Figure()
    viewport = layout.mapping.viewport

    guide_segments = [p for p in layout.guides if isinstance(p, Segment)]
    if guide_segments:
        xs, ys = _segment_xy(guide_segments)
        figure.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                line={"width": 1.5, "color": guide_segments[0].color},
                showlegend=False,
                hoverinfo="skip",
            )
        )

    for track in layout.tracks:
        color = _readable_color(track.color)
        segments = [p for p in track.path if isinstance(p, Segment)]
        points = [p for p in track.path if isinstance(p, Point)]
        xs, ys = _segment_xy(segments)
        figure.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                line={"width": 2, "color": color},
                name=track.name,
                legendgroup=track.name,
                hoverinfo="skip",
            )
        )
        figure.add_trace(
            go.Scatter(
                x=[p.x for p in points],
                y=[p.y for p in points],
                mode="markers",
                marker={"symbol": "square", "size": 10, "color": color},
                legendgroup=track.name,
                showlegend=False,
                hovertemplate=f"<b>{track.name}</b> #{track.driver_number}<extra></extra>",
            )
        )

    for label in layout.labels:
        _add_label(figure, label)

    figure.update_layout(
        **_CHART_LAYOUT,
        **_screen_axes(layout, translation),
        legend=_H_LEGEND,
        height=int(viewport.height),
        width=int(viewport.width),
    )
    return figure


def _add_label(figure: go.Figure, label: Label) -> None:
    figure.add_annotation(
        x=label.x,
        y=label.y,
        text=label.text,
        showarrow=False,
        font={"size": label.font_size, "color": _TEXT},
    )


def build_no_data_figure(message: str, width: float = 1400, height: float = 800) -> go.Figure:
    figure = go.Figure()
    figure.add_annotation(
        x=0.5,
        y=0.5,
        xref="paper",
        yref="paper",
        text=message,
        showarrow=False,
        font={"size": 20, "color": _TEXT},
    )
    figure.update_layout(
        **_CHART_LAYOUT,
        xaxis={"visible": False},
        yaxis={"visible": False},
        height=int(height),
        width=int(width),
    )
    return figure
