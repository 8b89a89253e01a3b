"""Phosphor Icons CDN and custom CSS for the dark pit timeline dashboard."""

from __future__ import annotations

import streamlit as st

_PHOSPHOR_CDN = "https://unpkg.com/@phosphor-icons/web@2.0.3/src"

# Pit-lane palette: asphalt background, kerb red accent, timing-screen text.
_ACCENT = "#E10600"
_SURFACE = "#181B24"
_SURFACE_RAISED = "#20242F"
_BORDER = "rgba(255,255,255,0.07)"
_TEXT = "#E5E7EB"
_MUTED = "#8B93A1"


def _stylesheet() -> str:
    return f"""
    <style>
    /* ---- Page ---- */
    .stApp {{
        background: radial-gradient(circle at 20% 0%, #161A24 0%, #0E1015 55%, #0B0C10 100%);
        color: {_TEXT};
    }}
    .block-container {{
        padding-top: 0.75rem;
        padding-bottom: 1.5rem;
        max-width: 1480px;
    }}
    header[data-testid="stHeader"] {{ background: transparent; }}
    footer {{ display: none; }}

    /* ---- Race card ---- */
    .race-banner {{
        background: linear-gradient(100deg, {_ACCENT} 0%, #7A0A05 55%, {_SURFACE} 100%);
        border-radius: 10px;
        padding: 0.9rem 1.4rem;
        margin: 0.25rem 0 0.9rem 0;
        box-shadow: 0 6px 18px rgba(225, 6, 0, 0.18);
    }}
    .race-banner h1 {{
        color: #FFFFFF;
        font-size: 1.6rem;
        font-weight: 800;
        margin: 0 0 0.15rem 0;
        text-transform: uppercase;
        letter-spacing: 0.04em;
    }}
    .race-banner p {{
        color: #F3DCDC;
        font-size: 0.9rem;
        margin: 0;
    }}

    /* ---- Summary strip ---- */
    .dashboard-summary {{
        margin: 0.4rem 0 1.2rem 0;
    }}
    .summary-stats {{
        display: flex;
        flex-direction: column;
        gap: 0.4rem;
    }}
    .summary-section-title {{
        font-size: 0.62rem;
        text-transform: uppercase;
        letter-spacing: 0.12em;
        color: {_MUTED};
        padding-left: 0.15rem;
    }}
    .summary-kpis {{
        display: grid;
        grid-template-columns: repeat(4, minmax(0, 1fr));
        gap: 0.5rem;
    }}

    /* ---- Metric cards ---- */
    .metric-card {{
        position: relative;
        display: flex;
        align-items: center;
        gap: 0.7rem;
        min-height: 68px;
        padding: 0.65rem 0.85rem;
        background: {_SURFACE};
        border: 1px solid {_BORDER};
        border-left: 3px solid {_SURFACE_RAISED};
        border-radius: 8px;
    }}
    .metric-card .metric-icon {{
        display: flex;
        align-items: center;
        justify-content: center;
        width: 36px;
        height: 36px;
        border-radius: 8px;
        font-size: 1.1rem;
        background: rgba(255,255,255,0.05);
        flex-shrink: 0;
    }}
    .metric-card .metric-body {{ display: flex; flex-direction: column; min-width: 0; }}
    .metric-card .metric-label {{
        font-size: 0.66rem;
        text-transform: uppercase;
        letter-spacing: 0.08em;
        color: {_MUTED};
    }}
    .metric-card .metric-value {{
        font-size: 1.2rem;
        font-weight: 700;
        color: #FFFFFF;
        font-variant-numeric: tabular-nums;
    }}
    .metric-card .metric-sub {{ font-size: 0.68rem; color: {_MUTED}; }}
    .metric-card.timing {{ border-left-color: #60A5FA; }}
    .metric-card.timing .metric-icon {{ color: #60A5FA; }}
    .metric-card.count {{ border-left-color: #A78BFA; }}
    .metric-card.count .metric-icon {{ color: #A78BFA; }}
    .metric-card.movement {{ border-left-color: #F472B6; }}
    .metric-card.movement .metric-icon {{ color: #F472B6; }}

    /* ---- Metric tooltips ---- */
    .metric-card.has-tooltip {{ cursor: help; }}
    .metric-tooltip {{
        display: none;
        position: absolute;
        left: 0.5rem;
        bottom: calc(100% + 6px);
        z-index: 20;
        max-width: 240px;
        padding: 0.4rem 0.6rem;
        border-radius: 6px;
        background: {_SURFACE_RAISED};
        border: 1px solid {_BORDER};
        color: {_TEXT};
        font-size: 0.72rem;
    }}
    .metric-card.has-tooltip:hover .metric-tooltip {{ display: block; }}

    /* ---- Tabs ---- */
    .stTabs [data-baseweb="tab-list"] {{ gap: 0.3rem; }}
    .stTabs [data-baseweb="tab"] {{
        padding: 0.45rem 1rem;
        border-radius: 6px 6px 0 0;
        color: {_MUTED};
    }}
    .stTabs [aria-selected="true"] {{
        color: #FFFFFF;
        border-bottom: 2px solid {_ACCENT};
    }}

    /* ---- Timeline scroll bar ---- */
    .stSlider [data-baseweb="slider"] [role="slider"] {{
        width: 30px;
        border-radius: 4px;
        background: {_ACCENT};
    }}
    .stSlider [data-testid="stTickBar"] {{ display: none; }}

    /* ---- Captions, section headers, footer ---- */
    .section-header {{
        margin: 1.2rem 0 0.2rem 0;
        font-size: 1rem;
        font-weight: 700;
        color: #FFFFFF;
        border-left: 3px solid {_ACCENT};
        padding-left: 0.5rem;
    }}
    .section-header.first {{ margin-top: 0.4rem; }}
    .chart-caption {{
        margin: 0 0 0.6rem 0;
        font-size: 0.8rem;
        color: {_MUTED};
    }}
    .app-footer {{
        margin-top: 2rem;
        padding-top: 0.8rem;
        border-top: 1px solid {_BORDER};
        text-align: center;
        font-size: 0.72rem;
        color: #5B6270;
    }}

    /* ---- Selects and buttons ---- */
    div[data-baseweb="select"] input {{ caret-color: transparent !important; }}
    div[data-baseweb="select"] > div {{
        background: {_SURFACE} !important;
        border-color: {_BORDER} !important;
    }}
    .stButton > button, .stDownloadButton > button {{
        background: {_SURFACE} !important;
        color: {_TEXT} !important;
        border: 1px solid {_BORDER} !important;
    }}
    .stButton > button:hover, .stDownloadButton > button:hover {{
        border-color: {_ACCENT} !important;
    }}
    </style>
    """


def inject_theme() -> None:
    """Inject Phosphor icon CDN links and the dashboard stylesheet into the page."""
    st.markdown(
        f"""
        <link rel="stylesheet" href="{_PHOSPHOR_CDN}/regular/style.css" />
        <link rel="stylesheet" href="{_PHOSPHOR_CDN}/bold/style.css" />
        """,
        unsafe_allow_html=True,
    )
    st.markdown(_stylesheet(), unsafe_allow_html=True)
