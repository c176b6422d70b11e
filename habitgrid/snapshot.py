"""Snapshot validation and I/O helpers (library-facing)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from .dates import is_canonical_date
from .errors import SnapshotValidationError
from .html_extract import extract_snapshot_json_from_html_file
from .model import Snapshot
from .render.inline import snapshot_json
from .util.console import eprint, obs_enabled

JsonPath = Union[str, Path]


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def validate_snapshot(snapshot: Any, *, label: str = "snapshot", strict_days: bool = True) -> List[str]:
    """Return a list of problems (empty when valid).

    strict_days=True also requires every entry to look like MM-DD.
    """
    if not isinstance(snapshot, dict):
        return [f"{label}: snapshot must be a dict/object"]

    errs: List[str] = []
    for habit, days in snapshot.items():
        _require(isinstance(habit, str) and bool(habit), f"{label}: habit keys must be non-empty strings", errs)
        if not isinstance(days, list):
            errs.append(f"{label}[{habit!r}] must be list")
            continue
        for i, d in enumerate(days):
            if not isinstance(d, str):
                errs.append(f"{label}[{habit!r}][{i}] must be string")
                continue
            if strict_days:
                _require(is_canonical_date(d), f"{label}[{habit!r}][{i}] must be MM-DD; got {d!r}", errs)
    return errs


def assert_valid_snapshot(snapshot: Any, *, strict_days: bool = True) -> None:
    if not isinstance(snapshot, dict):
        raise SnapshotValidationError("snapshot must be a JSON object")
    errs = validate_snapshot(snapshot, strict_days=strict_days)
    if errs:
        raise SnapshotValidationError(errs[0])


def normalize_snapshot(snapshot: Mapping[str, Any]) -> Snapshot:
    """Lenient copy: keep string keys and string days, drop everything else.

    Order is preserved. Set HABITGRID_OBS_LOG=1 to see what was dropped.
    """
    if not isinstance(snapshot, Mapping):
        raise TypeError(f"snapshot must be a mapping; got {type(snapshot).__name__}")

    out: Dict[str, List[str]] = {}
    for habit, days in snapshot.items():
        if not isinstance(habit, str) or not habit:
            if obs_enabled():
                eprint(f"[habitgrid.snapshot] WARN: dropping habit key {habit!r}")
            continue
        if not isinstance(days, (list, tuple)):
            if obs_enabled():
                eprint(f"[habitgrid.snapshot] WARN: habit={habit!r} days is {type(days).__name__}, using []")
            days = []
        kept = [d for d in days if isinstance(d, str)]
        if obs_enabled() and len(kept) != len(days):
            eprint(f"[habitgrid.snapshot] WARN: habit={habit!r} dropped {len(days) - len(kept)} non-string day(s)")
        out[habit] = kept
    return out


def load_snapshot_from_json(path: JsonPath, *, validate: bool = True) -> Snapshot:
    p = Path(path)
    obj = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(obj, dict):
        raise SnapshotValidationError(f"JSON snapshot must be an object/dict; got {type(obj).__name__}")
    if validate:
        assert_valid_snapshot(obj)
    return normalize_snapshot(obj)


def load_snapshot_from_html(path: JsonPath, *, validate: bool = True) -> Snapshot:
    """Extract the embedded snapshot from a rendered page."""
    obj = extract_snapshot_json_from_html_file(Path(path))
    if not isinstance(obj, dict):
        raise SnapshotValidationError(f"HTML snapshot must be an object/dict; got {type(obj).__name__}")
    if validate:
        assert_valid_snapshot(obj)
    return normalize_snapshot(obj)


def dump_snapshot_json(snapshot: Mapping[str, Any], path: JsonPath) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(snapshot_json(snapshot) + "\n", encoding="utf-8", newline="\n")
    return p


__all__ = [
    "assert_valid_snapshot",
    "dump_snapshot_json",
    "load_snapshot_from_html",
    "load_snapshot_from_json",
    "normalize_snapshot",
    "validate_snapshot",
]
