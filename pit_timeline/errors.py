"""Error types raised across the timeline package."""

from __future__ import annotations


class TimelineError(Exception):
    pass


class InsufficientDataError(TimelineError):
    """Not enough drivers, pit stops or usable extrema to scale a timeline."""


class InvalidConfigurationError(TimelineError, ValueError):
    """Viewport or pan inputs that would produce division by zero or inverted geometry."""


class MalformedRecordError(TimelineError, ValueError):
    """A single source record is missing a required field."""


class DataSourceError(TimelineError):
    """A remote data source could not be reached or returned an unusable payload."""
