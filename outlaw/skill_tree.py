"""Skill tree node definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from outlaw.progression_types import (
    SkillNodePrerequisite,
    SkillNodeUnlockType,
    StatGrowthEntry,
)


@dataclass(frozen=True)
class SkillTreeNode:
    """One allocable point on a class skill tree, with one or more ranks."""

    node_tag: str
    display_name: str = ""
    description: str = ""
    icon: str = ""
    unlock_type: SkillNodeUnlockType = SkillNodeUnlockType.MANUAL
    max_rank: int = 1
    point_cost_per_rank: int = 1
    required_level: int = 1
    auto_unlock_level: int = 0
    """Level at which an auto-unlock node is granted; 0 disables it."""
    prerequisites: tuple[SkillNodePrerequisite, ...] = ()
    granted_ability_set: Any = None
    per_rank_ability_sets: tuple[Any, ...] = ()
    """Ability sets by rank, entry 0 for rank 1; a missing entry falls back."""
    stat_bonuses_per_rank: tuple[StatGrowthEntry, ...] = ()

    def __post_init__(self) -> None:
        for name in ("prerequisites", "per_rank_ability_sets", "stat_bonuses_per_rank"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if self.max_rank < 1:
            raise ValueError(f"max_rank must be at least 1, got {self.max_rank}")
        if self.point_cost_per_rank < 0:
            raise ValueError("point_cost_per_rank must not be negative")
        if self.auto_unlock_level < 0:
            raise ValueError("auto_unlock_level must not be negative")

    def ability_set_for_rank(self, rank: int) -> Optional[Any]:
        """The ability set for a 1-based rank, else the node's granted set."""
        index = rank - 1
        if 0 <= index < len(self.per_rank_ability_sets):
            per_rank = self.per_rank_ability_sets[index]
            if per_rank is not None:
                return per_rank
        return self.granted_ability_set