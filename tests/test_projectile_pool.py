import pytest

from outlaw.projectile_pool import ProjectilePool


class Dart:
    pass


class Orb:
    pass


def test_acquire_from_empty_pool_builds_new():
    pool = ProjectilePool()
    dart = pool.acquire(Dart)
    assert isinstance(dart, Dart)
    assert pool.pooled_count(Dart) == 0


def test_released_projectile_is_reused():
    pool = ProjectilePool()
    dart = pool.acquire(Dart)
    pool.release(dart)
    assert pool.pooled_count(Dart) == 1
    assert pool.acquire(Dart) is dart
    assert pool.pooled_count(Dart) == 0


def test_acquire_is_last_in_first_out():
    pool = ProjectilePool()
    first, second = Dart(), Dart()
    pool.release(first)
    pool.release(second)
    assert pool.acquire(Dart) is second
    assert pool.acquire(Dart) is first


def test_pools_are_separate_per_class():
    pool = ProjectilePool()
    pool.release(Dart())
    assert pool.pooled_count(Orb) == 0
    assert isinstance(pool.acquire(Orb), Orb)
    assert pool.pooled_count(Dart) == 1


def test_full_pool_discards_released_projectile():
    discarded = []
    pool = ProjectilePool(max_pool_size_per_class=2, on_discard=discarded.append)
    darts = [Dart(), Dart(), Dart()]
    for dart in darts:
        pool.release(dart)
    assert pool.pooled_count(Dart) == 2
    assert discarded == [darts[2]]


def test_prewarm_stops_at_capacity():
    built = []

    def factory(cls):
        obj = cls()
        built.append(obj)
        return obj

    pool = ProjectilePool(factory=factory, max_pool_size_per_class=3)
    pool.prewarm(Dart, 10)
    assert pool.pooled_count(Dart) == 3
    assert len(built) == 3


def test_prewarm_skips_failed_builds():
    pool = ProjectilePool(factory=lambda cls: None)
    pool.prewarm(Dart, 4)
    assert pool.pooled_count(Dart) == 0


def test_default_capacity_is_fifty():
    pool = ProjectilePool()
    pool.prewarm(Dart, 80)
    assert pool.pooled_count(Dart) == 50


def test_missing_class_or_projectile_raises():
    pool = ProjectilePool()
    with pytest.raises(ValueError):
        pool.acquire(None)
    with pytest.raises(ValueError):
        pool.release(None)
    with pytest.raises(ValueError):
        pool.prewarm(None, 1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ProjectilePool(max_pool_size_per_class=-1)