import pytest

from outlaw.ammo import ReserveAmmo, next_weapon_slot

RIFLE = "Ammo.Rifle"
SHELLS = "Ammo.Shells"


def test_get_unknown_type_is_zero():
    ammo = ReserveAmmo()
    assert ammo.get(RIFLE) == 0
    assert RIFLE not in ammo


def test_add_creates_pool():
    ammo = ReserveAmmo()
    ammo.add(RIFLE, 30)
    assert ammo.get(RIFLE) == 30
    assert RIFLE in ammo


def test_add_accumulates():
    ammo = ReserveAmmo()
    first, second = 30, 20
    ammo.add(RIFLE, first)
    ammo.add(RIFLE, second)
    assert ammo.get(RIFLE) == first + second
    assert len(ammo) == 1


def test_pools_are_independent():
    ammo = ReserveAmmo()
    ammo.add(RIFLE, 30)
    ammo.add(SHELLS, 8)
    assert ammo.get(RIFLE) == 30
    assert ammo.get(SHELLS) == 8
    assert ammo.as_dict() == {RIFLE: 30, SHELLS: 8}


@pytest.mark.parametrize("amount", [0, -5])
def test_add_non_positive_is_ignored(amount):
    ammo = ReserveAmmo()
    ammo.add(RIFLE, amount)
    assert ammo.get(RIFLE) == 0
    assert len(ammo) == 0


def test_add_empty_tag_is_ignored():
    ammo = ReserveAmmo()
    ammo.add("", 10)
    assert ammo.as_dict() == {}


def test_consume_partial():
    ammo = ReserveAmmo()
    total, taken = 30, 12
    ammo.add(RIFLE, total)
    assert ammo.consume(RIFLE, taken) == taken
    assert ammo.get(RIFLE) == total - taken


def test_consume_more_than_available_takes_all():
    ammo = ReserveAmmo()
    ammo.add(SHELLS, 8)
    assert ammo.consume(SHELLS, 100) == 8
    assert ammo.get(SHELLS) == 0


def test_consume_from_empty_pool_returns_zero():
    ammo = ReserveAmmo()
    ammo.add(SHELLS, 8)
    ammo.consume(SHELLS, 8)
    assert ammo.consume(SHELLS, 1) == 0
    assert ammo.get(SHELLS) == 0


def test_consume_unknown_type_returns_zero():
    ammo = ReserveAmmo()
    assert ammo.consume(RIFLE, 5) == 0
    assert RIFLE not in ammo


@pytest.mark.parametrize("amount", [0, -3])
def test_consume_non_positive_returns_zero(amount):
    ammo = ReserveAmmo()
    ammo.add(RIFLE, 30)
    assert ammo.consume(RIFLE, amount) == 0
    assert ammo.get(RIFLE) == 30


def test_without_authority_changes_are_ignored():
    ammo = ReserveAmmo(has_authority=False)
    ammo.add(RIFLE, 30)
    assert ammo.get(RIFLE) == 0
    assert ammo.consume(RIFLE, 5) == 0


def test_consumed_plus_remaining_equals_added():
    ammo = ReserveAmmo()
    added = 45
    ammo.add(RIFLE, added)
    consumed = sum(ammo.consume(RIFLE, 7) for _ in range(10))
    assert consumed + ammo.get(RIFLE) == added


def test_iteration_preserves_insertion_order():
    ammo = ReserveAmmo()
    ammo.add(SHELLS, 4)
    ammo.add(RIFLE, 9)
    assert list(ammo) == [(SHELLS, 4), (RIFLE, 9)]


SLOTS = ["Weapon.Slot.Primary1", "Weapon.Slot.Primary2", "Weapon.Slot.Sidearm"]


def test_next_slot_advances():
    assert next_weapon_slot(SLOTS, SLOTS[0]) == SLOTS[1]
    assert next_weapon_slot(SLOTS, SLOTS[1]) == SLOTS[2]


def test_next_slot_wraps_around():
    assert next_weapon_slot(SLOTS, SLOTS[2]) == SLOTS[0]


def test_next_slot_from_unknown_starts_at_first():
    assert next_weapon_slot(SLOTS, "") == SLOTS[0]
    assert next_weapon_slot(SLOTS, "Weapon.Slot.Heavy") == SLOTS[0]


def test_next_slot_empty_order_is_none():
    assert next_weapon_slot([], SLOTS[0]) is None


def test_cycling_visits_every_slot_and_returns():
    slot = SLOTS[0]
    visited = []
    for _ in SLOTS:
        slot = next_weapon_slot(SLOTS, slot)
        visited.append(slot)
    assert sorted(visited) == sorted(SLOTS)
    assert slot == SLOTS[0]


def test_single_slot_cycles_to_itself():
    assert next_weapon_slot(SLOTS[:1], SLOTS[0]) == SLOTS[0]