#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from habitgrid.html_extract import extract_snapshot_json_from_html_file
from habitgrid.snapshot import validate_snapshot


def _die(msg: str, rc: int = 2) -> int:
    print(f"[habitgrid-validate-snapshot] ERROR: {msg}", file=sys.stderr)
    return rc


def _read_json(p: Path) -> Any:
    return json.loads(p.read_text(encoding="utf-8", errors="replace"))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="habitgrid-validate-snapshot",
        description="Validate a habit snapshot from JSON and/or a rendered HTML page.",
    )
    ap.add_argument("--in", dest="in_json", default=None, help="Input snapshot JSON path")
    ap.add_argument(
        "--from-html",
        dest="from_html",
        default=None,
        help="Extract snapshot from HTML path (embedded #habit-data script block)",
    )
    ap.add_argument(
        "--write-json",
        default=None,
        help="If using --from-html, write the extracted snapshot JSON to this path",
    )
    ap.add_argument(
        "--lenient-days",
        action="store_true",
        help="Only check types; do not require MM-DD day strings",
    )
    ns = ap.parse_args(argv)

    if not ns.in_json and not ns.from_html:
        return _die("Provide --in and/or --from-html")

    all_errs: List[str] = []
    strict = not ns.lenient_days

    def _validate_one(*, src: str, snapshot: Any, write_json_path: Optional[Path] = None) -> None:
        if write_json_path is not None:
            write_json_path.parent.mkdir(parents=True, exist_ok=True)
            write_json_path.write_text(
                json.dumps(snapshot, ensure_ascii=False, indent=2) + "\n",
                encoding="utf-8",
                newline="\n",
            )
        errs = validate_snapshot(snapshot, strict_days=strict)
        all_errs.extend([f"{src}: {e}" for e in errs])

    if ns.in_json:
        p = Path(ns.in_json)
        if not p.exists():
            return _die(f"Missing JSON file: {p}")
        try:
            _validate_one(src=f"json:{p}", snapshot=_read_json(p))
        except ValueError as e:
            return _die(f"Failed to load JSON snapshot: {p} ({e})")

    if ns.from_html:
        p = Path(ns.from_html)
        if not p.exists():
            return _die(f"Missing HTML file: {p}")
        try:
            raw = extract_snapshot_json_from_html_file(p)
            outp = Path(ns.write_json) if ns.write_json else None
            _validate_one(src=f"html:{p}", snapshot=raw, write_json_path=outp)
        except Exception as e:
            return _die(f"Failed to extract snapshot from HTML: {p} ({e})")

    if all_errs:
        print("[habitgrid-validate-snapshot] FAIL", file=sys.stderr)
        for e in all_errs:
            print(f"  - {e}", file=sys.stderr)
        return 3

    print("[habitgrid-validate-snapshot] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
