"""Enums and plain records shared by the progression system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class ClassMode(Enum):
    """How a class's skill tree behaves."""

    FIXED_CLASS = "fixed_class"
    """A predefined class with a skill tree and abilities unlocked per level."""
    ASCENDANCY_CLASS = "ascendancy_class"
    """A base class that specialises into an ascendancy with a node-based tree."""


class SkillNodeUnlockType(Enum):
    """How a skill tree node is unlocked."""

    MANUAL = "manual"
    """Allocated by the player with skill points, subject to prerequisites."""
    AUTO_ON_LEVEL = "auto_on_level"
    """Granted automatically once the character reaches a level."""


@dataclass(frozen=True)
class XPLevelEntry:
    """One row of an XP table: total XP to reach the level and points it awards."""

    required_xp: int = 0
    skill_points_awarded: int = 0
    """Points awarded on reaching the level; 0 means use the table's default."""


@dataclass(frozen=True)
class StatGrowthEntry:
    """An attribute and the amount added to it per level (or per node rank)."""

    attribute: str = ""
    value_per_level: float = 0.0


@dataclass(frozen=True)
class SkillNodePrerequisite:
    """A link to another node that must reach a rank first."""

    required_node_tag: str = ""
    required_rank: int = 1

    def __post_init__(self) -> None:
        if self.required_rank < 1:
            raise ValueError(f"required_rank must be at least 1, got {self.required_rank}")


@dataclass
class AllocatedSkillNode:
    """The rank currently allocated on one skill node."""

    node_tag: str = ""
    allocated_rank: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"node_tag": self.node_tag, "allocated_rank": self.allocated_rank}


def _read_int(data: Mapping[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key!r} must be an integer, got {value!r}")
    return value


def _read_tag(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string tag, got {value!r}")
    return value


@dataclass
class ProgressionSaveData:
    """A serialisable snapshot of a character's whole progression state."""

    current_level: int = 1
    current_xp: int = 0
    available_skill_points: int = 0
    selected_class_tag: str = ""
    selected_ascendancy_tag: str = ""
    allocated_nodes: list[AllocatedSkillNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dictionary of this snapshot."""
        return {
            "current_level": self.current_level,
            "current_xp": self.current_xp,
            "available_skill_points": self.available_skill_points,
            "selected_class_tag": self.selected_class_tag,
            "selected_ascendancy_tag": self.selected_ascendancy_tag,
            "allocated_nodes": [node.to_dict() for node in self.allocated_nodes],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProgressionSaveData:
        """Build a snapshot from a dictionary made by :meth:`to_dict`.

        Missing keys take their defaults; values of the wrong type raise
        ``ValueError``.
        """
        raw_nodes = data.get("allocated_nodes", [])
        if not isinstance(raw_nodes, list):
            raise ValueError("'allocated_nodes' must be a list")
        nodes = []
        for raw in raw_nodes:
            if not isinstance(raw, Mapping):
                raise ValueError(f"allocated node entry must be a mapping, got {raw!r}")
            nodes.append(
                AllocatedSkillNode(
                    node_tag=_read_tag(raw, "node_tag"),
                    allocated_rank=_read_int(raw, "allocated_rank", 0),
                )
            )
        return cls(
            current_level=_read_int(data, "current_level", 1),
            current_xp=_read_int(data, "current_xp", 0),
            available_skill_points=_read_int(data, "available_skill_points", 0),
            selected_class_tag=_read_tag(data, "selected_class_tag"),
            selected_ascendancy_tag=_read_tag(data, "selected_ascendancy_tag"),
            allocated_nodes=nodes,
        )