"""Projectiles that penetrate, chain or splash, and instant hitscan shots."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Union

Vec3 = tuple[float, float, float]
DamageSource = Callable[[Any, Any, int], None]
Candidates = Union[Mapping[Any, Vec3], Iterable[tuple[Any, Vec3]], None]

_ZERO: Vec3 = (0.0, 0.0, 0.0)
_SMALL_NUMBER = 1e-8


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(v: Vec3, factor: float) -> Vec3:
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def _length_sq(v: Vec3) -> float:
    return v[0] * v[0] + v[1] * v[1] + v[2] * v[2]


def _length(v: Vec3) -> float:
    return math.sqrt(_length_sq(v))


def _safe_normal(v: Vec3) -> Vec3:
    length_sq = _length_sq(v)
    if length_sq < _SMALL_NUMBER:
        return _ZERO
    return _scale(v, 1.0 / math.sqrt(length_sq))


def _vec(v: Iterable[float]) -> Vec3:
    x, y, z = (float(c) for c in v)
    return (x, y, z)


def _pairs(candidates: Candidates) -> list[tuple[Any, Vec3]]:
    if candidates is None:
        return []
    if isinstance(candidates, Mapping):
        return [(actor, _vec(loc)) for actor, loc in candidates.items()]
    return [(actor, _vec(loc)) for actor, loc in candidates]


@dataclass
class ProjectileInitData:
    """Everything a projectile needs when it is launched or taken from a pool.

    ``source`` applies damage and is called as ``source(target, damage_effect,
    level)``. Override counts below 0 keep the projectile's own defaults.
    """

    direction: Vec3 = (1.0, 0.0, 0.0)
    speed: float = 3000.0
    source: Optional[DamageSource] = None
    damage_effect: Any = None
    level: int = 1
    penetration_count_override: int = -1
    chain_count_override: int = -1
    homing_target: Any = None


class HitOutcome(Enum):
    """What a projectile did after touching something."""

    IGNORED = "ignored"
    """The hit was not processed (no authority, owner, or already hit)."""
    PENETRATED = "penetrated"
    """The projectile passed through and keeps flying."""
    CHAINED = "chained"
    """The projectile turned towards a new target."""
    RETURNED = "returned"
    """The projectile stopped and went back to its pool."""


class Projectile:
    """A pooled projectile that damages what it hits, then penetrates or chains."""

    speed: float = 3000.0
    penetration_count: int = 0
    chain_count: int = 0
    chain_radius: float = 500.0
    gravity_scale: float = 1.0

    def __init__(
        self,
        owner: Any = None,
        pool: Any = None,
        has_authority: bool = True,
        is_damageable: Optional[Callable[[Any], bool]] = None,
        location: Iterable[float] = _ZERO,
    ) -> None:
        self.owner = owner
        self.pool = pool
        self.has_authority = has_authority
        self.is_damageable: Callable[[Any], bool] = (
            is_damageable if is_damageable is not None else (lambda target: True)
        )
        self.location: Vec3 = _vec(location)
        self.velocity: Vec3 = _ZERO
        self.active = False
        self.hidden = True
        self.collision_enabled = False
        self.trail_active = False
        self.homing_target: Any = None
        self.homing_acceleration = 0.0
        self.current_penetration_count = 0
        self.current_chain_count = 0
        self._hit_actors: list[Any] = []
        self._source: Optional[DamageSource] = None
        self._damage_effect: Any = None
        self._damage_level = 1

    @property
    def hit_actors(self) -> list[Any]:
        """Actors already hit during this flight, in hit order."""
        return list(self._hit_actors)

    def launch(self, data: ProjectileInitData) -> None:
        """Set up damage, counts and velocity from ``data`` and make it fly."""
        self._source = data.source
        self._damage_effect = data.damage_effect
        self._damage_level = data.level
        self.current_penetration_count = (
            data.penetration_count_override
            if data.penetration_count_override >= 0 else self.penetration_count
        )
        self.current_chain_count = (
            data.chain_count_override if data.chain_count_override >= 0 else self.chain_count
        )
        self._hit_actors.clear()

        final_speed = data.speed if data.speed > 0.0 else self.speed
        self.velocity = _scale(_vec(data.direction), final_speed)
        if data.homing_target is not None:
            self.homing_target = data.homing_target
            self.homing_acceleration = final_speed * 2.0

        self.hidden = False
        self.collision_enabled = True
        self.active = True
        self.trail_active = True

    def on_hit(self, target: Any, chain_candidates: Candidates = None) -> HitOutcome:
        """Handle touching ``target``.

        ``chain_candidates`` maps nearby actors to their locations; the
        closest damageable one within ``chain_radius`` becomes the next target
        when the projectile still has chains left.
        """
        if not self.has_authority:
            return HitOutcome.IGNORED
        if target is None or target is self.owner or self._already_hit(target):
            return HitOutcome.IGNORED

        self._hit_actors.append(target)
        self._apply_damage(target)

        if self.current_penetration_count > 0:
            self.current_penetration_count -= 1
            return HitOutcome.PENETRATED

        if self.current_chain_count > 0:
            next_target = self._find_next_chain_target(chain_candidates)
            if next_target is not None:
                _, next_location = next_target
                self.current_chain_count -= 1
                direction = _safe_normal(_sub(next_location, self.location))
                self.velocity = _scale(direction, _length(self.velocity))
                return HitOutcome.CHAINED

        self.deactivate()
        return HitOutcome.RETURNED

    def deactivate(self) -> None:
        """Stop, hide and forget hits, then go back to the pool if there is one."""
        self.hidden = True
        self.collision_enabled = False
        self.velocity = _ZERO
        self.active = False
        self.trail_active = False
        self._hit_actors.clear()
        if self.pool is not None:
            self.pool.release(self)

    def _already_hit(self, actor: Any) -> bool:
        return any(hit is actor for hit in self._hit_actors)

    def _can_damage(self) -> bool:
        return self._source is not None and self._damage_effect is not None

    def _apply_damage(self, target: Any) -> None:
        if not self._can_damage() or target is None or not self.is_damageable(target):
            return
        assert self._source is not None
        self._source(target, self._damage_effect, self._damage_level)

    def _find_next_chain_target(self, candidates: Candidates) -> Optional[tuple[Any, Vec3]]:
        radius_sq = self.chain_radius * self.chain_radius
        closest: Optional[tuple[Any, Vec3]] = None
        closest_dist_sq = math.inf
        for actor, location in _pairs(candidates):
            if actor is None or actor is self or actor is self.owner or self._already_hit(actor):
                continue
            dist_sq = _length_sq(_sub(location, self.location))
            if dist_sq > radius_sq or not self.is_damageable(actor):
                continue
            if dist_sq < closest_dist_sq:
                closest_dist_sq = dist_sq
                closest = (actor, location)
        return closest


class BulletProjectile(Projectile):
    """A fast, straight-flying bullet."""

    speed = 10000.0
    gravity_scale = 0.0
    penetration_count = 0


class SpellProjectile(Projectile):
    """A spell that either splashes around its impact point or acts as a projectile."""

    speed = 2000.0
    splash_radius: float = 0.0

    def on_hit(
        self,
        target: Any,
        chain_candidates: Candidates = None,
        splash_targets: Candidates = None,
    ) -> HitOutcome:
        """Splash every damageable actor within ``splash_radius``, or hit normally.

        ``splash_targets`` maps actors near the impact point to their locations.
        """
        if not self.has_authority:
            return HitOutcome.IGNORED
        if self.splash_radius > 0.0:
            self._apply_splash_damage(splash_targets)
            self.deactivate()
            return HitOutcome.RETURNED
        return super().on_hit(target, chain_candidates)

    def _apply_splash_damage(self, splash_targets: Candidates) -> None:
        if not self._can_damage():
            return
        radius_sq = self.splash_radius * self.splash_radius
        for actor, location in _pairs(splash_targets):
            if actor is None or actor is self or actor is self.owner:
                continue
            if _length_sq(_sub(location, self.location)) > radius_sq:
                continue
            self._apply_damage(actor)


def fire_hitscan(
    trace_hits: Iterable[Any],
    apply_damage: Callable[[Any], None],
    penetration_count: int = 0,
) -> list[Any]:
    """Resolve an instant shot along ordered ``trace_hits``.

    Entries that are ``None`` are skipped. Each real hit is damaged through
    ``apply_damage``; the shot stops after the first hit plus
    ``penetration_count`` more. The hits that were processed are returned.
    """
    hits: list[Any] = []
    remaining = penetration_count
    for hit in trace_hits:
        if hit is None:
            continue
        hits.append(hit)
        apply_damage(hit)
        if remaining <= 0:
            break
        remaining -= 1
    return hits