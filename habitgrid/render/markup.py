# habitgrid/render/markup.py
from __future__ import annotations

import html
from typing import Iterable, Mapping, Optional

from ..model import DayRow, Toggle

FORM_TEMPLATE = r"""<form id="habit-form">
  <div class="habits">
__HABITS__
  </div>
  <div class="days"></div>
</form>"""

HABIT_TEMPLATE = r"""    <div class="habit" data-name="__NAME__">__LABEL__</div>"""


def _attr(s: str) -> str:
    return html.escape(s, quote=True)


def checkbox_markup(toggle: Toggle) -> str:
    # `checked` is a boolean attribute: present or absent, never a value.
    checked = " checked" if toggle.checked else ""
    return (
        f'<input type="checkbox" name="{_attr(toggle.habit)}" '
        f'value="{_attr(toggle.value)}"{checked}/>'
    )


def checkboxes_markup(toggles: Iterable[Toggle]) -> str:
    return "".join(checkbox_markup(t) for t in toggles)


def day_row_markup(row: DayRow) -> str:
    return f'<div class="day"><div>{html.escape(row.label)}</div>{checkboxes_markup(row.toggles)}</div>'


def days_markup(rows: Iterable[DayRow]) -> str:
    return "".join(day_row_markup(r) for r in rows)


def form_markup(habits: Iterable[str], labels: Optional[Mapping[str, str]] = None) -> str:
    """Standard form: one `.habit[data-name]` per habit and an empty `.days` container."""
    labels = labels or {}
    lines = []
    for h in habits:
        label = labels.get(h, h)
        lines.append(HABIT_TEMPLATE.replace("__NAME__", _attr(h)).replace("__LABEL__", html.escape(label)))
    return FORM_TEMPLATE.replace("__HABITS__", "\n".join(lines))


__all__ = [
    "FORM_TEMPLATE",
    "checkbox_markup",
    "checkboxes_markup",
    "day_row_markup",
    "days_markup",
    "form_markup",
]
