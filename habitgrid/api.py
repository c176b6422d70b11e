"""habitgrid.api

Stable *library* entrypoint for habitgrid.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from habitgrid.dates import to_canonical, to_display
from habitgrid.errors import (
    HtmlSnapshotExtractError,
    InvalidArgument,
    InvalidDate,
    SnapshotValidationError,
    SurfaceMarkupError,
)
from habitgrid.grid import HabitGrid, grid_from_habits
from habitgrid.html_extract import extract_checked_from_html_text, extract_snapshot_json_from_html_text
from habitgrid.model import DayRow, Snapshot, Toggle
from habitgrid.render.html_surface import HtmlFormSurface
from habitgrid.render.inline import build_html
from habitgrid.render.markup import form_markup
from habitgrid.snapshot import (
    assert_valid_snapshot,
    dump_snapshot_json,
    load_snapshot_from_html,
    load_snapshot_from_json,
    normalize_snapshot,
    validate_snapshot,
)
from habitgrid.surface import MemorySurface, RenderSurface


def render_page(grid: HabitGrid, *, title: str = "Habits") -> str:
    """Standalone HTML page for a grid hosted on an HtmlFormSurface."""
    surface = grid.surface
    if not isinstance(surface, HtmlFormSurface):
        raise TypeError(f"render_page needs an HtmlFormSurface, got {type(surface).__name__}")
    return build_html(surface.to_html(), grid.data, title=title)


# --- Public API exports -------------------------------------------------------
_PUBLIC_EXPORTS = [
    "HabitGrid",
    "grid_from_habits",
    "RenderSurface",
    "MemorySurface",
    "HtmlFormSurface",
    "DayRow",
    "Toggle",
    "Snapshot",
    "to_canonical",
    "to_display",
    "form_markup",
    "build_html",
    "render_page",
    "extract_snapshot_json_from_html_text",
    "extract_checked_from_html_text",
    "validate_snapshot",
    "assert_valid_snapshot",
    "normalize_snapshot",
    "load_snapshot_from_json",
    "load_snapshot_from_html",
    "dump_snapshot_json",
    "InvalidArgument",
    "InvalidDate",
    "SnapshotValidationError",
    "SurfaceMarkupError",
    "HtmlSnapshotExtractError",
]

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------------
