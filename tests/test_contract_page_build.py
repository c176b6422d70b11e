from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from habitgrid.api import render_page
from habitgrid.errors import HtmlSnapshotExtractError
from habitgrid.grid import HabitGrid, grid_from_habits
from habitgrid.html_extract import (
    extract_checked_from_html_text,
    extract_snapshot_json_from_html_file,
    extract_snapshot_json_from_html_text,
)
from habitgrid.render.html_surface import HtmlFormSurface
from habitgrid.render.inline import build_html
from habitgrid.render.markup import form_markup


class TestPageBuildContract(unittest.TestCase):
    def test_page_embeds_snapshot_once(self) -> None:
        surface = HtmlFormSurface(form_markup(["run", "water"]))
        grid = HabitGrid(surface, {"run": ["01-01"], "water": []})

        page = render_page(grid, title="My habits")

        self.assertTrue(page.startswith("<!doctype html>"))
        self.assertIn("<title>My habits</title>", page)
        self.assertEqual(page.count('id="habit-data"'), 1)
        for marker in ("__DATA_JSON__", "__FORM_MARKUP__", "__TITLE__", "__CSS_BLOCK__", "__JS_BLOCK__"):
            self.assertNotIn(marker, page)
        self.assertEqual(extract_snapshot_json_from_html_text(page), {"run": ["01-01"], "water": []})
        self.assertEqual(extract_checked_from_html_text(page), {"run": ["01-01"], "water": []})

    def test_script_terminator_is_escaped(self) -> None:
        page = build_html(form_markup(["x"]), {"x": ["</script>"]})
        body = page.split('<script id="habit-data" type="application/json">', 1)[1]
        self.assertNotIn("</script>\"", body.split("</script>", 1)[0])
        self.assertEqual(extract_snapshot_json_from_html_text(page), {"x": ["</script>"]})

    def test_entity_like_text_survives_round_trip(self) -> None:
        snapshot = {"a&lt;b": ["01-01"], "x&copy": ["01-02"], "&amp;": []}
        page = build_html("<form></form>", snapshot)
        self.assertEqual(extract_snapshot_json_from_html_text(page), snapshot)

    def test_entity_encoded_block_still_parses(self) -> None:
        html = '<script id="habit-data">{&quot;run&quot;: [&quot;01-01&quot;]}</script>'
        self.assertEqual(extract_snapshot_json_from_html_text(html), {"run": ["01-01"]})

    def test_title_is_escaped(self) -> None:
        page = build_html(form_markup(["x"]), {}, title="<b>&")
        self.assertIn("<title>&lt;b&gt;&amp;</title>", page)

    def test_build_html_rejects_bad_inputs(self) -> None:
        with self.assertRaises(TypeError):
            build_html(None, {})  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            build_html("<form></form>", None)  # type: ignore[arg-type]

    def test_render_page_needs_html_surface(self) -> None:
        with self.assertRaises(TypeError):
            render_page(grid_from_habits(["run"]))


class TestHtmlExtractContract(unittest.TestCase):
    def test_falls_back_to_any_json_script(self) -> None:
        html = '<html><script type="application/json; charset=utf-8">{"run": ["01-01"]}</script></html>'
        self.assertEqual(extract_snapshot_json_from_html_text(html), {"run": ["01-01"]})

    def test_skips_empty_and_broken_blocks(self) -> None:
        html = (
            '<script id="habit-data"></script>'
            '<script type="application/json">{broken</script>'
            '<script type="application/json">{"a": []}</script>'
        )
        self.assertEqual(extract_snapshot_json_from_html_text(html), {"a": []})

    def test_missing_block_raises(self) -> None:
        with self.assertRaises(HtmlSnapshotExtractError) as cm:
            extract_snapshot_json_from_html_text("<html></html>")
        self.assertIn("habit-data", str(cm.exception))

    def test_extract_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "page.html"
            p.write_text(build_html(form_markup(["run"]), {"run": ["02-29"]}), encoding="utf-8")
            self.assertEqual(extract_snapshot_json_from_html_file(p), {"run": ["02-29"]})

    def test_checked_extraction_defaults_to_seen_names(self) -> None:
        html = (
            '<input type="checkbox" name="b" value="01-01" checked>'
            '<input type="checkbox" name="a" value="01-01">'
            '<input type="text" name="c" value="x" checked>'
            '<input type="checkbox" name="a" value="01-02" checked="checked">'
        )
        self.assertEqual(extract_checked_from_html_text(html), {"b": ["01-01"], "a": ["01-02"]})
        self.assertEqual(extract_checked_from_html_text(html, ["a"]), {"a": ["01-02"]})


if __name__ == "__main__":
    unittest.main(verbosity=2)
