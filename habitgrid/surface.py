# habitgrid/surface.py
"""Render surface boundary.

The grid never touches a document directly. Anything that can list habit
declarations, hold day rows, report changes and answer "which values are
checked under this name" can host a HabitGrid.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Protocol, Tuple

from .model import ChangeCallback, DayRow, Toggle


class RenderSurface(Protocol):
    def habit_names(self) -> List[str]: ...

    def clear_days(self) -> None: ...

    def append_day(self, row: DayRow) -> None: ...

    def on_change(self, callback: ChangeCallback) -> None: ...

    def checked_values(self, name: str) -> List[str]: ...


class RowStore:
    """Rendered rows plus their mutable checked state.

    Shared by the concrete surfaces: rows are kept as rendered, the checked
    flags live in a side table keyed by (habit, value) so user toggles do not
    have to rebuild frozen rows.
    """

    def __init__(self) -> None:
        self.rows: List[DayRow] = []
        self._checked: Dict[Tuple[str, str], bool] = {}
        self._callbacks: List[ChangeCallback] = []
        self.render_count = 0

    # --- surface capability ---------------------------------------------------

    def clear_days(self) -> None:
        self.rows = []
        self._checked = {}
        self.render_count += 1

    def append_day(self, row: DayRow) -> None:
        self.rows.append(row)
        for t in row.toggles:
            self._checked[(t.habit, t.value)] = bool(t.checked)

    def on_change(self, callback: ChangeCallback) -> None:
        self._callbacks.append(callback)

    def checked_values(self, name: str) -> List[str]:
        out: List[str] = []
        for row in self.rows:
            for t in row.toggles:
                if t.habit == name and self._checked.get((t.habit, t.value)):
                    out.append(t.value)
        return out

    # --- helpers ----------------------------------------------------------------

    def is_checked(self, habit: str, value: str) -> bool:
        key = (habit, value)
        if key not in self._checked:
            raise KeyError(f"no control named {habit!r} with value {value!r}")
        return self._checked[key]

    def current_rows(self) -> List[DayRow]:
        """Rows with their toggles reflecting the live checked state."""
        out: List[DayRow] = []
        for row in self.rows:
            toggles = tuple(
                Toggle(habit=t.habit, value=t.value, checked=self._checked.get((t.habit, t.value), False))
                for t in row.toggles
            )
            out.append(DayRow(label=row.label, toggles=toggles))
        return out

    def notify_change(self) -> None:
        for cb in list(self._callbacks):
            cb()


class MemorySurface(RowStore):
    """In-memory render surface.

    Example:
        surface = MemorySurface(["run", "water"])
        grid = HabitGrid(surface, {"run": ["01-01"], "water": []})
        surface.set_checked("water", "01-01")   # fires the change path
        grid.data  # {"run": ["01-01"], "water": ["01-01"]}
    """

    def __init__(self, habits: Iterable[str] = ()) -> None:
        super().__init__()
        self._habits = [str(h) for h in habits]

    def habit_names(self) -> List[str]:
        return list(self._habits)

    @property
    def labels(self) -> List[str]:
        return [r.label for r in self.rows]

    def set_checked(self, habit: str, value: str, checked: bool = True) -> None:
        """Simulate a user toggling one control; fires change callbacks."""
        self.is_checked(habit, value)
        self._checked[(habit, value)] = bool(checked)
        self.notify_change()


__all__ = [
    "MemorySurface",
    "RenderSurface",
    "RowStore",
]
