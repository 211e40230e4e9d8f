"""Reserve ammunition pools and shooter weapon slot cycling."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence


class ReserveAmmo:
    """Reserve ammunition counts keyed by ammo type tag.

    Without authority, requests that change the pools are ignored.
    """

    def __init__(self, has_authority: bool = True) -> None:
        self.has_authority = has_authority
        self._amounts: dict[str, int] = {}

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(list(self._amounts.items()))

    def __len__(self) -> int:
        return len(self._amounts)

    def __contains__(self, ammo_type: object) -> bool:
        return ammo_type in self._amounts

    def as_dict(self) -> dict[str, int]:
        """A copy of every pool, in the order the ammo types were first added."""
        return dict(self._amounts)

    def get(self, ammo_type: str) -> int:
        """The reserve count for ``ammo_type``; 0 if there is no pool for it."""
        return self._amounts.get(ammo_type, 0)

    def add(self, ammo_type: str, amount: int) -> None:
        """Add ``amount`` rounds to the pool for ``ammo_type``.

        Non-positive amounts and empty tags are ignored.
        """
        if not self.has_authority or amount <= 0 or not ammo_type:
            return
        self._amounts[ammo_type] = self._amounts.get(ammo_type, 0) + amount

    def consume(self, ammo_type: str, amount: int) -> int:
        """Take up to ``amount`` rounds from the pool and return how many were taken."""
        if not self.has_authority or amount <= 0 or not ammo_type:
            return 0
        available = self._amounts.get(ammo_type)
        if available is None or available <= 0:
            return 0
        consumed = min(amount, available)
        self._amounts[ammo_type] = available - consumed
        return consumed


def next_weapon_slot(slot_order: Sequence[str], active_slot: str) -> Optional[str]:
    """The slot that follows ``active_slot`` in ``slot_order``, wrapping around.

    When ``active_slot`` is not in the order the first slot is returned;
    with no slots at all the result is ``None``.
    """
    if not slot_order:
        return None
    try:
        index = list(slot_order).index(active_slot)
    except ValueError:
        return slot_order[0]
    return slot_order[(index + 1) % len(slot_order)]