from __future__ import annotations

import argparse
import logging
import os
import sys
import webbrowser
from pathlib import Path
from typing import List

from .grid import HabitGrid
from .render.html_surface import HtmlFormSurface
from .render.inline import DEFAULT_TITLE
from .render.markup import form_markup
from .snapshot import dump_snapshot_json, load_snapshot_from_json
from .api import render_page

logger = logging.getLogger("habitgrid")


def _die(msg: str, rc: int = 2) -> int:
    print(f"[habitgrid] ERROR: {msg}", file=sys.stderr)
    return rc


def _setup_logging(level_name: str) -> None:
    level = getattr(logging, (level_name or "WARNING").upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _parse_habits(s: str) -> List[str]:
    return [h.strip() for h in s.split(",") if h.strip()]


def main(argv: List[str] | None = None) -> int:
    default_out = os.getenv("HABITGRID_OUT") or os.path.join("build", "habitgrid.html")
    ap = argparse.ArgumentParser(
        prog="habitgrid",
        description="Render a habit/day checkbox grid as a standalone HTML page.",
    )
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--habits", default=None, help="Comma-separated habit names, e.g. run,water,food")
    src.add_argument("--form", default=None, help="HTML file with the form markup (.habit[data-name] + .days)")

    ap.add_argument("--snapshot", default=None, help="Snapshot JSON {habit: [MM-DD, ...]} (default: empty)")
    ap.add_argument("--add-day", action="append", default=[], metavar="DD/MM", help="Track a day (repeatable)")
    ap.add_argument("--submit", default=None, help="URL-encoded form submission to apply, e.g. run=01-01&water=01-02")
    ap.add_argument("--title", default=DEFAULT_TITLE, help=f"Page title (default: {DEFAULT_TITLE})")
    ap.add_argument("--out", default=default_out, help="Output HTML path (default: env HABITGRID_OUT or ./build/habitgrid.html)")
    ap.add_argument("--snapshot-out", default=None, help="Write the resulting snapshot JSON here")
    ap.add_argument("--open", action="store_true", help="Open the generated HTML in a browser")
    ap.add_argument(
        "--log-level",
        default=os.getenv("HABITGRID_LOG_LEVEL", "WARNING"),
        help="Logging level (default: env HABITGRID_LOG_LEVEL or WARNING)",
    )
    args = ap.parse_args(argv)

    _setup_logging(args.log_level)

    if args.form:
        form_path = Path(args.form)
        if not form_path.exists():
            return _die(f"Missing form file: {form_path}")
        form_html = form_path.read_text(encoding="utf-8", errors="replace")
    else:
        habits = _parse_habits(args.habits)
        if not habits:
            return _die("--habits must name at least one habit")
        form_html = form_markup(habits)

    snapshot = {}
    if args.snapshot:
        snap_path = Path(args.snapshot)
        if not snap_path.exists():
            return _die(f"Missing snapshot JSON: {snap_path}")
        try:
            snapshot = load_snapshot_from_json(snap_path)
        except Exception as e:
            return _die(f"Invalid snapshot: {snap_path} ({e})", rc=3)

    try:
        surface = HtmlFormSurface(form_html)
    except ValueError as e:
        return _die(str(e))

    grid = HabitGrid(surface, snapshot)
    for day in args.add_day:
        if not grid.day_exists(day):
            grid.add_day(day)
            if not grid.day_exists(day):
                logger.warning("ignored malformed day: %r", day)

    if args.submit is not None:
        surface.submit(args.submit)

    out_path = Path(args.out).resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_page(grid, title=args.title), encoding="utf-8")
    print(f"Wrote: {out_path}")

    if args.snapshot_out:
        p = dump_snapshot_json(grid.data, args.snapshot_out)
        print(f"Wrote: {p.resolve()}")

    if args.open:
        webbrowser.open(out_path.as_uri())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
