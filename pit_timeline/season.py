from __future__ import annotations

from dataclasses import dataclass

from pit_timeline.models import Race


@dataclass(frozen=True)
class SeasonCalendar:
    """Races of one season in running order, browsed by index."""

    year: int
    races: tuple[Race, ...]

    def __len__(self) -> int:
        return len(self.races)

    @property
    def is_empty(self) -> bool:
        return not self.races

    def race_at(self, index: int) -> Race:
        if not 0 <= index < len(self.races):
            raise IndexError(f"Race index {index} outside season {self.year} ({len(self)} races)")
        return self.races[index]

    def next_index(self, index: int) -> int:
        if self.is_empty:
            return 0
        return min(index + 1, len(self.races) - 1)

    def previous_index(self, index: int) -> int:
        return max(index - 1, 0)

    def index_of(self, session_key: int | str) -> int | None:
        for i, race in enumerate(self.races):
            if race.session_key == session_key:
                return i
        return None
