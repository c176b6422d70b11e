# Public helper API: read a snapshot back out of rendered HTML
from __future__ import annotations

import html as _html
import json
import re
from html.parser import HTMLParser
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .errors import HtmlSnapshotExtractError
from .model import Snapshot

_ID_RE = re.compile(
    r'<script\b[^>]*\bid=["\']habit-data["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)

_JSON_TYPE_RE = re.compile(
    r'<script\b[^>]*\btype=["\']application/json(?:\s*;[^"\']*)?["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)


def _first_json_body(pattern: re.Pattern[str], html_text: str) -> Optional[Any]:
    for m in pattern.finditer(html_text):
        body = (m.group("body") or "").strip()
        if not body:
            continue
        try:
            return json.loads(body)
        except ValueError:
            pass
        # Hand-written pages may entity-encode the block.
        try:
            return json.loads(_html.unescape(body))
        except ValueError:
            continue
    return None


def extract_snapshot_json_from_html_text(html_text: str) -> Any:
    """
    Extract the embedded snapshot JSON from a rendered page.

    Supported embeddings:
      1) Preferred: <script id="habit-data"> ...json... </script>   (type may be absent/variant)
      2) Also:      <script type="application/json[;...]" ...> ...json... </script>
    """
    obj = _first_json_body(_ID_RE, html_text)
    if obj is not None:
        return obj
    obj = _first_json_body(_JSON_TYPE_RE, html_text)
    if obj is not None:
        return obj
    raise HtmlSnapshotExtractError("No <script id='habit-data'> snapshot block found in HTML.")


def extract_snapshot_json_from_html_file(path: str | Path) -> Any:
    p = Path(path)
    return extract_snapshot_json_from_html_text(p.read_text(encoding="utf-8"))


class _CheckboxCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.seen: List[str] = []
        self.checked: List[Tuple[str, str]] = []

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        if tag != "input":
            return
        a = dict(attrs)
        if (a.get("type") or "").lower() != "checkbox":
            return
        name = a.get("name")
        if not name:
            return
        if name not in self.seen:
            self.seen.append(name)
        # Boolean attribute: present (any value, even empty) means checked.
        if "checked" in a:
            self.checked.append((name, a.get("value") or "on"))


def extract_checked_from_html_text(html_text: str, habits: Optional[Iterable[str]] = None) -> Snapshot:
    """Rebuild a snapshot from the checked checkboxes of a rendered form, in document order.

    `habits` defaults to the checkbox names in first-seen order.
    """
    c = _CheckboxCollector()
    c.feed(html_text)
    c.close()

    names = list(habits) if habits is not None else list(c.seen)
    out: Dict[str, List[str]] = {h: [] for h in names}
    for name, value in c.checked:
        if name in out:
            out[name].append(value)
    return out
