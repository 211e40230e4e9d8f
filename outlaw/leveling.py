"""Data-driven XP table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from outlaw.progression_types import XPLevelEntry


@dataclass(frozen=True)
class LevelingConfig:
    """XP thresholds and skill point awards; entry 0 describes level 1."""

    level_table: tuple[XPLevelEntry, ...] = ()
    default_skill_points_per_level: int = 1
    """Points awarded at a level whose entry awards 0."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "level_table", tuple(self.level_table))
        if self.default_skill_points_per_level < 0:
            raise ValueError("default_skill_points_per_level must not be negative")

    def _entry(self, level: int) -> Optional[XPLevelEntry]:
        index = level - 1
        if 0 <= index < len(self.level_table):
            return self.level_table[index]
        return None

    def max_level(self) -> int:
        """The highest reachable level: the number of table entries."""
        return len(self.level_table)

    def xp_for_level(self, level: int) -> int:
        """Total XP needed to reach ``level``; 0 for a level outside the table."""
        entry = self._entry(level)
        return entry.required_xp if entry else 0

    def level_for_xp(self, total_xp: int) -> int:
        """The highest level reached with ``total_xp``; never below 1."""
        level = 1
        for level_number, entry in enumerate(self.level_table, start=1):
            if total_xp < entry.required_xp:
                break
            level = level_number
        return level

    def skill_points_for_level(self, level: int) -> int:
        """Points awarded on reaching ``level``; 0 for a level outside the table."""
        entry = self._entry(level)
        if entry is None:
            return 0
        if entry.skill_points_awarded > 0:
            return entry.skill_points_awarded
        return self.default_skill_points_per_level

    def total_skill_points_for_level(self, level: int) -> int:
        """Points earned from level 1 through ``level`` inclusive."""
        return sum(self.skill_points_for_level(n) for n in range(1, level + 1))