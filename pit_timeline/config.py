from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pit_timeline.errors import InvalidConfigurationError


@dataclass(frozen=True)
class Settings:
    data_source: str = os.getenv("PIT_TIMELINE_SOURCE", "openf1")
    openf1_base_url: str = os.getenv("OPENF1_BASE_URL", "https://api.openf1.org/v1")
    request_timeout_seconds: float = float(os.getenv("OPENF1_TIMEOUT_SECONDS", "10"))
    request_attempts: int = int(os.getenv("OPENF1_REQUEST_ATTEMPTS", "4"))
    fastf1_cache_dir: str = os.getenv(
        "FASTF1_CACHE_DIR", str((Path.cwd() / "fastf1_cache").resolve())
    )
    viewport_width: float = float(os.getenv("TIMELINE_VIEWPORT_WIDTH", "1400"))
    viewport_height: float = float(os.getenv("TIMELINE_VIEWPORT_HEIGHT", "800"))


def get_settings() -> Settings:
    return Settings()


@dataclass(frozen=True)
class LayoutConfig:
    """Fixed drawing constants shared by the layout engine and the renderers."""

    padding: float = 50.0
    # Horizontal room reserved right of the plot for driver name labels.
    gutter: float = 50.0
    # Cumulative x shift between consecutive drivers sorted by finish time.
    band_step: float = 18.0
    # Extra x length per second spent in the pit lane, so short stops stay visible.
    pit_duration_stretch: float = 1.5
    lap_axis_intervals: int = 6
    slider_width: float = 30.0
    lap_label_inset: float = 20.0
    driver_label_offset: float = 12.0
    axis_color: str = "#9CA3AF"
    label_font_size: int = 12
    title_font_size: int = 18
    x_axis_title: str = "Race Time Elapsed (seconds)"
    y_axis_title: str = "Lap #"


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float
    padding: float = 50.0
    gutter: float = 50.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfigurationError(
                f"Viewport dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.padding < 0 or self.gutter < 0:
            raise InvalidConfigurationError("Viewport padding and gutter must not be negative")
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise InvalidConfigurationError(
                f"Padding {self.padding} and gutter {self.gutter} leave no drawable area "
                f"in a {self.width}x{self.height} viewport"
            )

    @property
    def plot_width(self) -> float:
        return self.width - 2 * self.padding - self.gutter

    @property
    def plot_height(self) -> float:
        return self.height - 2 * self.padding

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, layout: LayoutConfig | None = None
    ) -> Viewport:
        settings = settings or get_settings()
        layout = layout or LayoutConfig()
        return cls(
            width=settings.viewport_width,
            height=settings.viewport_height,
            padding=layout.padding,
            gutter=layout.gutter,
        )
