from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pit_timeline.models import Driver, Pitstop

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RaceData:
    drivers: Mapping[int, Driver] = field(default_factory=lambda: MappingProxyType({}))
    pitstops: Mapping[int, tuple[Pitstop, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def pitstops_for(self, driver_number: int) -> tuple[Pitstop, ...]:
        """Chronological pit stops for one driver; empty when the driver never pitted."""
        return self.pitstops.get(driver_number, ())

    @property
    def pitstop_count(self) -> int:
        return sum(len(stops) for stops in self.pitstops.values())

    @property
    def has_layout_data(self) -> bool:
        return bool(self.drivers) and self.pitstop_count > 0


def _index_drivers(drivers: Iterable[Driver]) -> dict[int, Driver]:
    by_number: dict[int, Driver] = {}
    for driver in drivers:
        if not isinstance(driver.number, int):
            logger.warning("Dropping driver %r without a numeric identifier", driver.name)
            continue
        # Last record for a number wins.
        by_number[driver.number] = driver
    return by_number


def _group_pitstops(pitstops: Iterable[Pitstop]) -> dict[int, tuple[Pitstop, ...]]:
    grouped: dict[int, list[Pitstop]] = {}
    dropped = 0
    for pitstop in pitstops:
        if not pitstop.is_valid:
            dropped += 1
            logger.warning("Dropping malformed pit stop %r", pitstop)
            continue
        # insort_right keeps input order among equal start instants.
        bisect.insort_right(
            grouped.setdefault(pitstop.driver_number, []),
            pitstop,
            key=lambda stop: stop.start_instant,
        )
    if dropped:
        logger.warning("Dropped %s malformed pit stop record(s)", dropped)
    return {number: tuple(stops) for number, stops in grouped.items()}


def build_race_data(drivers: Iterable[Driver], pitstops: Iterable[Pitstop]) -> RaceData:
    """Index drivers by number and order each driver's pit stops by start time."""
    return RaceData(
        drivers=MappingProxyType(_index_drivers(drivers)),
        pitstops=MappingProxyType(_group_pitstops(pitstops)),
    )
