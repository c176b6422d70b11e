# habitgrid/render/inline.py
from __future__ import annotations

import html as _html
import json
from typing import Any, Mapping

from .template import HTML_TEMPLATE

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

DEFAULT_TITLE = "Habits"

_DATA_MARKER = "__DATA_JSON__"
_FORM_MARKER = "__FORM_MARKUP__"
_TITLE_MARKER = "__TITLE__"


def snapshot_json(snapshot: Mapping[str, Any]) -> str:
    data = {str(k): list(v) for k, v in snapshot.items()}
    if orjson is not None:
        return orjson.dumps(data).decode("utf-8")
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def build_html(form_html: str, snapshot: Mapping[str, Any], *, title: str = DEFAULT_TITLE) -> str:
    # Hardening:
    #   - Each marker must appear exactly once in the template.
    #   - Generated HTML must not contain the data marker after injection.
    if not isinstance(form_html, str):
        raise TypeError(f"form_html must be str, got {type(form_html).__name__}")
    if not isinstance(snapshot, Mapping):
        raise TypeError(f"snapshot must be a mapping, got {type(snapshot).__name__}")

    for marker in (_DATA_MARKER, _FORM_MARKER, _TITLE_MARKER):
        n = HTML_TEMPLATE.count(marker)
        if n != 1:
            raise RuntimeError(f"HTML_TEMPLATE must contain {marker} exactly once (found {n})")

    data_json = snapshot_json(snapshot).replace("</", r"<\/")  # script-safe injection

    # Data goes in last so user-supplied form markup cannot smuggle a marker in.
    page = (
        HTML_TEMPLATE
        .replace(_TITLE_MARKER, _html.escape(title))
        .replace(_FORM_MARKER, form_html)
    )
    head, _, tail = page.rpartition(_DATA_MARKER)
    page = head + data_json + tail

    if _DATA_MARKER in tail:
        raise RuntimeError("HTML generation failed: marker still present after injection")

    return page
