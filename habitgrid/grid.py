# habitgrid/grid.py
"""HabitGrid: keeps a habit/day checkbox grid in sync with a snapshot.

State:
  - habits:   ordered habit names, discovered from the surface once
  - days:     set of canonical days (MM-DD)
  - snapshot: {habit: [canonical day, ...]}

Flow:
  construction -> set_data (optional) -> load -> render_layout
  user toggle  -> surface change -> _update -> set_data
  add_day      -> render_layout

set_data never re-renders. Call load() after a direct set_data when the
surface should reflect the new snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from .dates import DISPLAY_SEP, sort_days, to_canonical, to_display
from .errors import InvalidArgument
from .model import DayRow, Snapshot, Toggle
from .surface import MemorySurface, RenderSurface

logger = logging.getLogger(__name__)


class HabitGrid:
    def __init__(self, surface: RenderSurface, snapshot: Optional[Mapping[str, Any]] = None) -> None:
        self._surface = surface
        self._habits: List[str] = []
        self._days: set[str] = set()
        self._data: Snapshot = {}

        self.create_habits()
        self._surface.on_change(self._update)
        if snapshot is not None:
            self.set_data(snapshot)
        self.load()

    # --- read-only views ----------------------------------------------------------

    @property
    def surface(self) -> RenderSurface:
        return self._surface

    @property
    def habits(self) -> Tuple[str, ...]:
        return tuple(self._habits)

    @property
    def days(self) -> FrozenSet[str]:
        return frozenset(self._days)

    @property
    def data(self) -> Snapshot:
        return {k: list(v) for k, v in self._data.items()}

    # --- habits -------------------------------------------------------------------

    def create_habits(self) -> Tuple[str, ...]:
        """Discover habit declarations from the surface (declaration order, first wins)."""
        for name in self._surface.habit_names():
            self._add_habit(str(name))
        return self.habits

    def _add_habit(self, habit: str) -> None:
        if habit in self._habits:
            return
        self._habits.append(habit)

    # --- snapshot -----------------------------------------------------------------

    def set_data(self, snapshot: Optional[Mapping[str, Any]]) -> None:
        """Replace the whole snapshot.

        Example:
            grid.set_data({"run": ["01-01", "01-02"], "water": ["01-04"]})

        Days must be canonical (MM-DD). `{}` is valid; None is not.
        """
        if snapshot is None:
            raise InvalidArgument("snapshot mapping is required: {habit: [MM-DD, ...]}")
        if not isinstance(snapshot, Mapping):
            raise InvalidArgument(f"snapshot must be a mapping; got {type(snapshot).__name__}")
        data: Snapshot = {}
        for k, v in snapshot.items():
            if v is None:
                v = []
            if isinstance(v, (str, bytes)) or not isinstance(v, Sequence):
                raise InvalidArgument(f"snapshot[{k!r}] must be a list of MM-DD days; got {type(v).__name__}")
            data[str(k)] = list(v)
        self._data = data

    def load(self) -> None:
        """Register every snapshot day and re-render. No-op for an empty snapshot."""
        if not self._data:
            return
        self._register_days()
        self.render_layout()

    def _register_days(self) -> None:
        for days in self._data.values():
            for date in days:
                self._days.add(date)

    def _update(self) -> None:
        prepared: Snapshot = {}
        for habit in self._habits:
            prepared[habit] = list(self._surface.checked_values(habit))
        logger.debug("snapshot rebuilt from surface: %s", prepared)
        self.set_data(prepared)

    # --- days ---------------------------------------------------------------------

    def sorted_days(self) -> List[str]:
        return sort_days(self._days)

    def day_exists(self, date: str) -> bool:
        """True if the display date (DD/MM) is tracked.

        Strings without `/` are never tracked, so they answer False.
        """
        if not isinstance(date, str) or DISPLAY_SEP not in date:
            return False
        return to_canonical(date) in self._days

    def add_day(self, date: Optional[str]) -> None:
        """Track a display date (DD/MM) and re-render.

        Falsy, separator-less and already tracked dates are ignored.
        """
        if not date or not isinstance(date, str) or DISPLAY_SEP not in date:
            return
        if self.day_exists(date):
            return
        self._days.add(to_canonical(date))
        logger.debug("day added: %s", date)
        self.render_layout()

    # --- rendering ----------------------------------------------------------------

    def render_layout(self) -> None:
        """Replace the surface rows with one row per tracked day, oldest first."""
        self._surface.clear_days()
        for date in self.sorted_days():
            label = to_display(date)
            self._surface.append_day(DayRow(label=label, toggles=self.create_checkboxes(label)))
        logger.debug("rendered %d day rows x %d habits", len(self._days), len(self._habits))

    def create_checkboxes(self, date: str) -> Tuple[Toggle, ...]:
        """Toggles for one display date, in habit order."""
        # Value comes from the label, not the stored day: a malformed snapshot
        # day such as "01-02-03" renders as "01-02" and never shows checked.
        value = to_canonical(date)
        return tuple(
            Toggle(habit=habit, value=value, checked=value in self._data.get(habit, ()))
            for habit in self._habits
        )

    def __repr__(self) -> str:
        return f"HabitGrid(habits={self._habits!r}, days={self.sorted_days()!r})"


def grid_from_habits(habits: List[str], snapshot: Optional[Dict[str, Any]] = None) -> HabitGrid:
    """Convenience: a grid over an in-memory surface."""
    return HabitGrid(MemorySurface(habits), snapshot)


__all__ = [
    "HabitGrid",
    "grid_from_habits",
]
