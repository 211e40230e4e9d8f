"""Reusable projectile instances, pooled by projectile class."""

from __future__ import annotations

from typing import Any, Callable, Optional

Factory = Callable[[type], Any]
Discard = Callable[[Any], None]


class ProjectilePool:
    """Keeps spare projectiles per class so they can be reused instead of rebuilt.

    ``factory`` builds a new projectile of a class; by default it calls the
    class with no arguments. A projectile released into a full pool is
    passed to ``on_discard`` instead of being kept.
    """

    def __init__(
        self,
        factory: Optional[Factory] = None,
        max_pool_size_per_class: int = 50,
        on_discard: Optional[Discard] = None,
    ) -> None:
        if max_pool_size_per_class < 0:
            raise ValueError("max_pool_size_per_class must not be negative")
        self.factory: Factory = factory if factory is not None else (lambda cls: cls())
        self.max_pool_size_per_class = max_pool_size_per_class
        self.on_discard = on_discard
        self._pools: dict[type, list[Any]] = {}

    def acquire(self, projectile_class: type) -> Any:
        """A pooled projectile of ``projectile_class``, or a newly built one."""
        if projectile_class is None:
            raise ValueError("a projectile class is required")
        pooled = self._pools.get(projectile_class)
        if pooled:
            return pooled.pop()
        return self.factory(projectile_class)

    def release(self, projectile: Any) -> None:
        """Return ``projectile`` to its class's pool, or discard it if full."""
        if projectile is None:
            raise ValueError("cannot release a missing projectile")
        pooled = self._pools.setdefault(type(projectile), [])
        if len(pooled) < self.max_pool_size_per_class:
            pooled.append(projectile)
        elif self.on_discard is not None:
            self.on_discard(projectile)

    def prewarm(self, projectile_class: type, count: int) -> None:
        """Build up to ``count`` projectiles into the pool, stopping when it is full."""
        if projectile_class is None:
            raise ValueError("a projectile class is required")
        pooled = self._pools.setdefault(projectile_class, [])
        for _ in range(count):
            if len(pooled) >= self.max_pool_size_per_class:
                break
            projectile = self.factory(projectile_class)
            if projectile is not None:
                pooled.append(projectile)

    def pooled_count(self, projectile_class: type) -> int:
        """How many spare projectiles of ``projectile_class`` are waiting."""
        return len(self._pools.get(projectile_class, ()))