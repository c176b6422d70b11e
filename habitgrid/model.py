# habitgrid/model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from .dates import to_canonical


# habit -> canonical days (MM-DD) the habit was completed on
Snapshot = Dict[str, List[str]]

ChangeCallback = Callable[[], None]


@dataclass(frozen=True)
class Toggle:
    habit: str
    value: str  # canonical day
    checked: bool = False


@dataclass(frozen=True)
class DayRow:
    label: str  # display day (DD/MM)
    toggles: Tuple[Toggle, ...]

    @property
    def day(self) -> str:
        """Canonical day shared by every toggle of the row."""
        if self.toggles:
            return self.toggles[0].value
        return to_canonical(self.label)


__all__ = [
    "ChangeCallback",
    "DayRow",
    "Snapshot",
    "Toggle",
]
