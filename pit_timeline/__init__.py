"""Pit-stop timeline layout for Formula 1 races."""

from pit_timeline.aggregate import RaceData, build_race_data
from pit_timeline.config import LayoutConfig, Settings, Viewport, get_settings
from pit_timeline.errors import (
    DataSourceError,
    InsufficientDataError,
    InvalidConfigurationError,
    MalformedRecordError,
    TimelineError,
)
from pit_timeline.layout import (
    NO_DATA_MESSAGE,
    DriverTrack,
    NoData,
    TimelineLayout,
    build_timeline,
    lap_axis_ticks,
    layout_timeline,
)
from pit_timeline.mapping import CoordinateMapping, compute_mapping
from pit_timeline.models import Driver, Pitstop, Race, SessionRecords
from pit_timeline.pan import ScrollBar, pan_ratio, update_pan
from pit_timeline.primitives import Label, Point, Primitive, Segment
from pit_timeline.season import SeasonCalendar

__all__ = [
    "NO_DATA_MESSAGE",
    "CoordinateMapping",
    "DataSourceError",
    "Driver",
    "DriverTrack",
    "InsufficientDataError",
    "InvalidConfigurationError",
    "Label",
    "LayoutConfig",
    "MalformedRecordError",
    "NoData",
    "Pitstop",
    "Point",
    "Primitive",
    "Race",
    "RaceData",
    "ScrollBar",
    "SeasonCalendar",
    "Segment",
    "SessionRecords",
    "Settings",
    "TimelineError",
    "TimelineLayout",
    "Viewport",
    "build_race_data",
    "build_timeline",
    "compute_mapping",
    "get_settings",
    "lap_axis_ticks",
    "layout_timeline",
    "pan_ratio",
    "update_pan",
]
