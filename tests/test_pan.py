from __future__ import annotations

import pytest

from pit_timeline import InvalidConfigurationError, ScrollBar, pan_ratio, update_pan


def test_content_that_fits_never_moves() -> None:
    for pointer in (0, 300, 1000, 5000):
        assert update_pan(pointer, 1000, 30, 950) == 0.0
    assert update_pan(500, 1000, 30, 1000) == 0.0


def test_pan_follows_the_slider() -> None:
    # Slider left edge sits at pointer - 15; content moves twice as far.
    assert update_pan(0, 1000, 30, 2000) == 0.0
    assert update_pan(265, 1000, 30, 2000) == pytest.approx(-500)
    assert update_pan(515, 1000, 30, 2000) == pytest.approx(-1000)


def test_pan_stays_within_bounds() -> None:
    content, viewport = 2600.0, 1000.0
    for pointer in range(-200, 1400, 37):
        translation = update_pan(pointer, viewport, 30, content)
        assert -(content - viewport) <= translation <= 0


def test_pan_ratio() -> None:
    assert pan_ratio(2000, 1000) == 2
    assert pan_ratio(500, 1000) == 1
    with pytest.raises(InvalidConfigurationError):
        pan_ratio(500, 0)


@pytest.mark.parametrize(
    "viewport_width,slider_width,content_width",
    [(0, 30, 100), (1000, 0, 2000), (1000, 1200, 2000), (1000, 30, -1)],
)
def test_update_pan_rejects_bad_geometry(
    viewport_width: float, slider_width: float, content_width: float
) -> None:
    with pytest.raises(InvalidConfigurationError):
        update_pan(10, viewport_width, slider_width, content_width)


def test_scroll_bar_drag() -> None:
    bar = ScrollBar(content_width=3000, viewport_width=1000)
    assert bar.ratio == 3
    assert bar.drag(115) == pytest.approx(-300)
    assert bar.slider_x == pytest.approx(100)
    assert bar.drag(10_000) == pytest.approx(-2000)
    assert bar.slider_x == pytest.approx(970)
    assert bar.drag(-50) == 0.0
    assert bar.slider_x == 0.0


def test_scroll_bar_validates() -> None:
    with pytest.raises(InvalidConfigurationError):
        ScrollBar(content_width=3000, viewport_width=0)
