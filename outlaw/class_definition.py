"""Character class definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from outlaw.leveling import LevelingConfig
from outlaw.progression_types import ClassMode, StatGrowthEntry
from outlaw.skill_tree import SkillTreeNode


@dataclass(frozen=True)
class ClassDefinition:
    """A base class or ascendancy: stat growth, skill tree and sub-classes."""

    class_tag: str
    display_name: str = ""
    description: str = ""
    class_icon: str = ""
    class_mode: ClassMode = ClassMode.FIXED_CLASS
    is_base_class: bool = True
    stat_growth_table: tuple[StatGrowthEntry, ...] = ()
    class_ability_set: Any = None
    skill_tree_nodes: tuple[Optional[SkillTreeNode], ...] = ()
    available_ascendancies: tuple[Optional[ClassDefinition], ...] = ()
    ascendancy_required_level: int = 0
    leveling_config: Optional[LevelingConfig] = None
    """XP table override; ``None`` means the component's default is used."""

    def __post_init__(self) -> None:
        for name in ("stat_growth_table", "skill_tree_nodes", "available_ascendancies"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if self.ascendancy_required_level < 0:
            raise ValueError("ascendancy_required_level must not be negative")

    def attribute_base_at_level(self, attribute: str, level: int) -> float:
        """Sum of every growth entry for ``attribute`` times ``level``."""
        return sum(
            (entry.value_per_level * float(level)
             for entry in self.stat_growth_table
             if entry.attribute == attribute),
            0.0,
        )

    def find_skill_node(self, node_tag: str) -> Optional[SkillTreeNode]:
        """The first skill tree node with ``node_tag``, or ``None``."""
        return next(
            (node for node in self.skill_tree_nodes
             if node is not None and node.node_tag == node_tag),
            None,
        )