# outlaw

Game-logic building blocks for action role-playing games: XP tables,
class and skill tree definitions, progression snapshots, reserve ammo and
weapon slot cycling, stat bars, and pooled projectiles that penetrate, chain
or splash. Plain Python, no dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `outlaw.progression_types` | `ClassMode`, `SkillNodeUnlockType`, `XPLevelEntry`, `StatGrowthEntry`, `SkillNodePrerequisite`, `AllocatedSkillNode`, `ProgressionSaveData` |
| `outlaw.leveling` | `LevelingConfig`: XP thresholds and skill-point awards per level |
| `outlaw.skill_tree` | `SkillTreeNode`: one node of a class skill tree |
| `outlaw.class_definition` | `ClassDefinition`: stat growth, skill nodes and ascendancies |
| `outlaw.ammo` | `ReserveAmmo` pools and `next_weapon_slot` for weapon cycling |
| `outlaw.stat_bar` | `StatBar`: a current/maximum value pair and its fill fraction |
| `outlaw.projectile_pool` | `ProjectilePool`: per-class reuse of projectile objects |
| `outlaw.projectile` | `ProjectileInitData`, `HitOutcome`, `Projectile`, `BulletProjectile`, `SpellProjectile`, `fire_hitscan` |

## Leveling

A `LevelingConfig` holds one `XPLevelEntry` per level, the first entry being
level 1. Each entry gives the total XP needed to reach that level and the
skill points awarded there; an award of 0 falls back to
`default_skill_points_per_level` (1 unless set). Levels outside the table
need 0 XP and award 0 points.

```python
from outlaw.leveling import LevelingConfig
from outlaw.progression_types import XPLevelEntry

config = LevelingConfig(level_table=[
    XPLevelEntry(required_xp=0),
    XPLevelEntry(required_xp=100),
    XPLevelEntry(required_xp=250, skill_points_awarded=2),
])

config.max_level()                       # 3
config.level_for_xp(120)                 # 2
config.xp_for_level(3)                   # 250
config.total_skill_points_for_level(3)   # 4
```

## Classes and skill trees

A `SkillTreeNode` describes a node: how it unlocks (`SkillNodeUnlockType.MANUAL`
or `AUTO_ON_LEVEL`), its maximum rank, point cost per rank, required level,
prerequisites and per-rank stat bonuses. `ability_set_for_rank(rank)` returns
the ability set for a 1-based rank, falling back to `granted_ability_set`.

A `ClassDefinition` groups a class's stat growth table, skill tree nodes,
available ascendancies and an optional `LevelingConfig` override.

```python
from outlaw.class_definition import ClassDefinition
from outlaw.progression_types import StatGrowthEntry
from outlaw.skill_tree import SkillTreeNode

leap = SkillTreeNode(node_tag="Skill.Devastator.GravityLeap", max_rank=3)
devastator = ClassDefinition(
    class_tag="Class.Devastator",
    stat_growth_table=[StatGrowthEntry("MaxHealth", 12.0)],
    skill_tree_nodes=[leap],
)

devastator.attribute_base_at_level("MaxHealth", 5)        # 60.0
devastator.find_skill_node("Skill.Devastator.GravityLeap")  # leap
```

`ProgressionSaveData` is a snapshot record of level, XP, skill points,
selected class and ascendancy tags and allocated node ranks.
`to_dict()` and `ProgressionSaveData.from_dict()` convert it to and from plain
data suitable for JSON; `from_dict` raises `ValueError` on values of the wrong
type.

## Ammo and weapon cycling

```python
from outlaw.ammo import ReserveAmmo, next_weapon_slot

ammo = ReserveAmmo()
ammo.add("Ammo.Rifle", 90)
ammo.consume("Ammo.Rifle", 30)   # 30
ammo.get("Ammo.Rifle")           # 60

next_weapon_slot(["Primary1", "Primary2", "Sidearm"], "Sidearm")  # "Primary1"
```

A `ReserveAmmo` created with `has_authority=False` ignores `add` and `consume`.

## Stat bars

`StatBar` caches a current and maximum value and calls its listener with
`(current, maximum, percent)` on every change; `percent` is clamped to 0..1
and is 0 when the maximum is not positive.

```python
from outlaw.stat_bar import StatBar

bar = StatBar(on_stat_changed=print)
bar.bind(50, 200)       # prints 50.0 200.0 0.25
bar.update_current(250)
bar.percent()           # 1.0
```

## Projectiles

`ProjectilePool` keeps up to `max_pool_size_per_class` idle projectiles per
class. `acquire` hands out a pooled one or builds a new one, `release` returns
one (or passes it to `on_discard` when the pool is full), `prewarm` fills the
pool ahead of time and `pooled_count` reports how many are waiting.

A `Projectile` is launched with `ProjectileInitData`. `on_hit(target,
chain_candidates)` damages the target through the data's `source` callable and
returns a `HitOutcome`: `PENETRATED` while penetrations remain, `CHAINED` when
it turns toward the closest unhit damageable candidate within `chain_radius`,
otherwise `RETURNED` after going back to its pool. `BulletProjectile` flies at
10000 with no gravity; `SpellProjectile` with a positive `splash_radius`
damages every actor within that radius and returns to its pool.

```python
from outlaw.projectile import Projectile, ProjectileInitData, fire_hitscan
from outlaw.projectile_pool import ProjectilePool

pool = ProjectilePool()
shot = pool.acquire(Projectile)
shot.pool = pool
shot.launch(ProjectileInitData(source=lambda target, effect, level: None,
                               damage_effect="Damage", penetration_count_override=1))
shot.on_hit("goblin")   # HitOutcome.PENETRATED
shot.on_hit("orc")      # HitOutcome.RETURNED

fire_hitscan(["a", None, "b", "c"], apply_damage=lambda hit: None,
             penetration_count=1)   # ["a", "b"]
```

## What this package does not do

There is no component that ties these pieces together at run time: nothing
here awards XP and levels a character up, selects classes or ascendancies,
allocates or refunds skill points, or restores a character from a
`ProgressionSaveData`. The package also holds no weapon stat records, gem or
mod definitions, or affix rolling. It does no collision detection or physics:
callers supply hit targets, nearby actors and their locations themselves.