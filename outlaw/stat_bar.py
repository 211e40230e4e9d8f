"""A bar that tracks a current and a maximum attribute value."""

from __future__ import annotations

from typing import Callable, Optional

StatListener = Callable[[float, float, float], None]


class StatBar:
    """Caches a current and maximum value and reports each change.

    The listener receives (current, maximum, percent) where percent is the
    current value over the maximum clamped to 0..1, or 0 if the maximum is
    not positive.
    """

    def __init__(self, on_stat_changed: Optional[StatListener] = None) -> None:
        self.on_stat_changed = on_stat_changed
        self._current = 0.0
        self._maximum = 0.0

    @property
    def current(self) -> float:
        return self._current

    @property
    def maximum(self) -> float:
        return self._maximum

    def bind(self, current: float, maximum: float) -> None:
        """Take initial values from a newly bound source and report them."""
        self._current = float(current)
        self._maximum = float(maximum)
        self._broadcast()

    def update_current(self, value: float) -> None:
        """Record a new current value and report it."""
        self._current = float(value)
        self._broadcast()

    def update_max(self, value: float) -> None:
        """Record a new maximum value and report it."""
        self._maximum = float(value)
        self._broadcast()

    def percent(self) -> float:
        """Current over maximum, clamped to 0..1; 0 when maximum is not positive."""
        if self._maximum <= 0.0:
            return 0.0
        return min(1.0, max(0.0, self._current / self._maximum))

    def _broadcast(self) -> None:
        if self.on_stat_changed is not None:
            self.on_stat_changed(self._current, self._maximum, self.percent())