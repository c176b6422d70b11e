# habitgrid/render/html_surface.py
"""Render surface backed by HTML form markup.

Expected structure (anything around it is kept verbatim):

    <form>
      <div class="habits">
        <div class="habit" data-name="run">🏃</div>
        <div class="habit" data-name="water">💧</div>
      </div>
      <div class="days"></div>
    </form>

Rendered rows replace the content of the `.days` container:

    <div class="day"><div>01/01</div>
      <input type="checkbox" name="run" value="01-01" checked/>
      <input type="checkbox" name="water" value="01-01"/>
    </div>

A browser posts checked boxes as `run=01-01&water=01-02`; `submit()` takes
that body (or an already parsed mapping) and fires the change path.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from html.parser import HTMLParser
from typing import Dict, List, Optional, Sequence, Tuple, Union
from urllib.parse import parse_qs

from ..errors import SurfaceMarkupError
from ..surface import RowStore
from .markup import days_markup

logger = logging.getLogger(__name__)

FormData = Union[str, Mapping[str, Sequence[str]]]


def _classes(attrs: List[Tuple[str, Optional[str]]]) -> List[str]:
    for k, v in attrs:
        if k == "class" and v:
            return v.split()
    return []


class _FormScanner(HTMLParser):
    """Finds habit declarations and the `.days` container span (offsets into the source)."""

    def __init__(self, text: str) -> None:
        super().__init__(convert_charrefs=True)
        self._line_starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(i + 1)
        self.habits: List[str] = []
        self.days_inner: Optional[Tuple[int, int]] = None
        self._days_tag: Optional[str] = None
        self._days_start = 0
        self._depth = 0

    def _offset(self) -> int:
        line, col = self.getpos()
        return self._line_starts[line - 1] + col

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        classes = _classes(attrs)
        if "habit" in classes:
            name = dict(attrs).get("data-name")
            if name:
                self.habits.append(name)

        if self._days_tag is not None:
            if tag == self._days_tag:
                self._depth += 1
            return
        if self.days_inner is None and "days" in classes:
            raw = self.get_starttag_text() or ""
            self._days_tag = tag
            self._days_start = self._offset() + len(raw)
            self._depth = 1

    def handle_endtag(self, tag: str) -> None:
        if self._days_tag is None or tag != self._days_tag:
            return
        self._depth -= 1
        if self._depth == 0:
            self.days_inner = (self._days_start, self._offset())
            self._days_tag = None

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        # Self-closing elements never open a nesting level.
        classes = _classes(attrs)
        if "habit" in classes:
            name = dict(attrs).get("data-name")
            if name:
                self.habits.append(name)
        if self._days_tag is None and self.days_inner is None and "days" in classes:
            end = self._offset() + len(self.get_starttag_text() or "")
            self.days_inner = (end, end)


class HtmlFormSurface(RowStore):
    def __init__(self, form_html: str) -> None:
        super().__init__()
        if not isinstance(form_html, str):
            raise TypeError(f"form_html must be str, got {type(form_html).__name__}")

        scanner = _FormScanner(form_html)
        scanner.feed(form_html)
        scanner.close()
        if scanner.days_inner is None:
            raise SurfaceMarkupError("form markup has no .days container")

        start, end = scanner.days_inner
        self._head = form_html[:start]
        self._tail = form_html[end:]
        self._habits = scanner.habits

    def habit_names(self) -> List[str]:
        return list(self._habits)

    def to_html(self) -> str:
        return self._head + days_markup(self.current_rows()) + self._tail

    def submit(self, form_data: FormData) -> None:
        """Apply a form submission: a control is checked iff its value was posted under its name."""
        posted = parse_form_data(form_data)
        for row in self.rows:
            for t in row.toggles:
                self._checked[(t.habit, t.value)] = t.value in posted.get(t.habit, ())
        logger.debug("form submitted: %s", posted)
        self.notify_change()


def parse_form_data(form_data: FormData) -> Dict[str, List[str]]:
    """URL-encoded body or mapping -> {name: [values...]} (order kept)."""
    if isinstance(form_data, str):
        return {k: list(v) for k, v in parse_qs(form_data, keep_blank_values=True).items()}
    if isinstance(form_data, Mapping):
        out: Dict[str, List[str]] = {}
        for k, v in form_data.items():
            out[str(k)] = [v] if isinstance(v, str) else [str(x) for x in (v or [])]
        return out
    raise TypeError(f"form data must be str or mapping, got {type(form_data).__name__}")


__all__ = [
    "FormData",
    "HtmlFormSurface",
    "parse_form_data",
]
