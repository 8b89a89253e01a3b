"""Scrollbar-style horizontal panning for timelines wider than the viewport."""

from __future__ import annotations

from dataclasses import dataclass

from pit_timeline.errors import InvalidConfigurationError


def _validate(viewport_width: float, slider_width: float, content_width: float) -> None:
    if viewport_width <= 0:
        raise InvalidConfigurationError(f"Viewport width must be positive, got {viewport_width}")
    if not 0 < slider_width <= viewport_width:
        raise InvalidConfigurationError(
            f"Slider width must be within (0, {viewport_width}], got {slider_width}"
        )
    if content_width < 0:
        raise InvalidConfigurationError(f"Content width must not be negative, got {content_width}")


def pan_ratio(content_width: float, viewport_width: float) -> float:
    if viewport_width <= 0:
        raise InvalidConfigurationError(f"Viewport width must be positive, got {viewport_width}")
    return max(1.0, content_width / viewport_width)


def slider_position(pointer_x: float, viewport_width: float, slider_width: float) -> float:
    """Left edge of a slider centred on the pointer, kept inside the bar."""
    return max(0.0, min(pointer_x - slider_width / 2, viewport_width - slider_width))


def update_pan(
    pointer_x: float,
    viewport_width: float,
    slider_width: float,
    content_width: float,
) -> float:
    """Horizontal translation for the content given the latest drag position.

    Always within ``[-(content_width - viewport_width), 0]``; content that fits the
    viewport is never moved.
    """
    _validate(viewport_width, slider_width, content_width)
    overflow = content_width - viewport_width
    if overflow <= 0:
        return 0.0
    slider_x = slider_position(pointer_x, viewport_width, slider_width)
    travel = min(slider_x * pan_ratio(content_width, viewport_width), overflow)
    return -travel if travel else 0.0


@dataclass
class ScrollBar:
    content_width: float
    viewport_width: float
    slider_width: float = 30.0
    slider_x: float = 0.0
    translation: float = 0.0

    def __post_init__(self) -> None:
        _validate(self.viewport_width, self.slider_width, self.content_width)

    @property
    def ratio(self) -> float:
        return pan_ratio(self.content_width, self.viewport_width)

    def drag(self, pointer_x: float) -> float:
        self.slider_x = slider_position(pointer_x, self.viewport_width, self.slider_width)
        self.translation = update_pan(
            pointer_x, self.viewport_width, self.slider_width, self.content_width
        )
        return self.translation
