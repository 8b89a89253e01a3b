from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import TypeVar

import pandas as pd

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ONE_MS = timedelta(milliseconds=1)
_FALLBACK_COLOR = "#000000"


def make_race_id(season: int, round_number: int, session_type: str = "R") -> str:
    return f"{season}_{round_number:02d}_{session_type.upper()}"


def datetime_to_utc(value: object) -> pd.Timestamp | None:
    if value is None or pd.isna(value):
        return None
    ts = pd.to_datetime(value, utc=True, errors="coerce")
    if pd.isna(ts):
        return None
    return ts


def offset_ms(origin: datetime, instant: datetime) -> int:
    """Whole milliseconds elapsed from ``origin`` to ``instant``."""
    return int((instant - origin) // _ONE_MS)


def safe_int(value: object) -> int | None:
    if value is None or isinstance(value, bool) or pd.isna(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def safe_float(value: object) -> float | None:
    if value is None or isinstance(value, bool) or pd.isna(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def normalize_hex_color(value: object, fallback: str = _FALLBACK_COLOR) -> str:
    if value is None or pd.isna(value):
        return fallback
    color = str(value).strip().lstrip("#")
    if len(color) != 6:
        return fallback
    try:
        int(color, 16)
    except ValueError:
        return fallback
    return f"#{color.upper()}"


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    h = hex_color.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def format_race_date(value: object) -> str:
    ts = datetime_to_utc(value)
    if ts is None:
        return ""
    return ts.strftime("%B - %d")


def parse_race_id(race_id: str) -> tuple[int, int, str]:
    season, round_number, session_type = str(race_id).split("_")
    return int(season), int(round_number), session_type


def with_retries(
    label: str,
    fn: Callable[[], T],
    attempts: int = 4,
    base_sleep_seconds: float = 2.0,
    retryable: Callable[[Exception], bool] | None = None,
) -> T:
    """Call `fn` until it succeeds; errors rejected by `retryable` are raised at once."""
    last_exc: Exception | None = None
    for attempt in range(1, attempts + 1):
        try:
            return fn()
        except Exception as exc:  # noqa: BLE001
            last_exc = exc
            if retryable is not None and not retryable(exc):
                raise
            if attempt == attempts:
                break
            sleep_for = base_sleep_seconds * (2 ** (attempt - 1))
            logger.warning(
                "%s failed on attempt %s/%s: %s. Retrying in %.1fs",
                label,
                attempt,
                attempts,
                exc,
                sleep_for,
            )
            time.sleep(sleep_for)
    assert last_exc is not None
    raise last_exc
