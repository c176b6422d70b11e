from __future__ import annotations

import unittest

from habitgrid.errors import SurfaceMarkupError
from habitgrid.grid import HabitGrid
from habitgrid.html_extract import extract_checked_from_html_text
from habitgrid.model import DayRow, Toggle
from habitgrid.render.html_surface import HtmlFormSurface, parse_form_data
from habitgrid.render.markup import checkbox_markup, day_row_markup, form_markup

FORM = """<form>
  <div class="habits">
    <div class="habit" data-name="run">🏃🏽‍♂️</div>
    <div class="habit" data-name="water">💧</div>
    <div class="habit" data-name="food">🍎</div>
  </div>

  <div class="days"></div>
</form>"""


class TestHtmlMarkupContract(unittest.TestCase):
    def test_checked_is_a_bare_boolean_attribute(self) -> None:
        on = checkbox_markup(Toggle("run", "01-01", True))
        off = checkbox_markup(Toggle("run", "01-01", False))
        self.assertEqual(on, '<input type="checkbox" name="run" value="01-01" checked/>')
        self.assertEqual(off, '<input type="checkbox" name="run" value="01-01"/>')
        for bad in ("false", "undefined", "checked="):
            self.assertNotIn(bad, off)

    def test_day_row_markup(self) -> None:
        row = DayRow("01/01", (Toggle("run", "01-01", True), Toggle("water", "01-01")))
        self.assertEqual(
            day_row_markup(row),
            '<div class="day"><div>01/01</div>'
            '<input type="checkbox" name="run" value="01-01" checked/>'
            '<input type="checkbox" name="water" value="01-01"/></div>',
        )

    def test_markup_escapes_names(self) -> None:
        s = checkbox_markup(Toggle('a"b<', "01-01"))
        self.assertIn('name="a&quot;b&lt;"', s)

    def test_form_markup_declares_habits(self) -> None:
        html = form_markup(["run", "water"], labels={"run": "Run"})
        self.assertIn('<div class="habit" data-name="run">Run</div>', html)
        self.assertIn('<div class="habit" data-name="water">water</div>', html)
        self.assertIn('<div class="days"></div>', html)


class TestHtmlFormSurfaceContract(unittest.TestCase):
    def test_discovers_habits_in_document_order(self) -> None:
        surface = HtmlFormSurface(FORM)
        self.assertEqual(surface.habit_names(), ["run", "water", "food"])

    def test_missing_days_container_raises(self) -> None:
        with self.assertRaises(SurfaceMarkupError):
            HtmlFormSurface('<form><div class="habit" data-name="run"></div></form>')

    def test_untouched_markup_round_trips(self) -> None:
        surface = HtmlFormSurface(FORM)
        self.assertEqual(surface.to_html(), FORM)

    def test_rows_fill_the_days_container_only(self) -> None:
        surface = HtmlFormSurface(FORM)
        HabitGrid(surface, {"run": ["01-02"], "water": ["01-01"], "food": []})
        out = surface.to_html()

        head, _, rest = out.partition('<div class="days">')
        inner, _, tail = rest.rpartition("</div>")
        self.assertEqual(head, FORM.partition('<div class="days">')[0])
        self.assertEqual(tail, "\n</form>")
        self.assertEqual(inner.count('<div class="day">'), 2)
        self.assertLess(inner.index("<div>01/01</div>"), inner.index("<div>02/01</div>"))

    def test_nested_content_inside_days_is_replaced(self) -> None:
        form = '<form><div class="habit" data-name="run"></div><div class="days"><div class="day"><div>09/09</div></div></div><p>after</p></form>'
        surface = HtmlFormSurface(form)
        HabitGrid(surface, {"run": ["01-01"]})
        out = surface.to_html()
        self.assertNotIn("09/09", out)
        self.assertIn("01/01", out)
        self.assertTrue(out.endswith("</div><p>after</p></form>"))

    def test_rendered_checkboxes_read_back(self) -> None:
        surface = HtmlFormSurface(FORM)
        HabitGrid(surface, {"run": ["01-01", "01-02"], "water": ["01-02"], "food": []})
        got = extract_checked_from_html_text(surface.to_html(), ["run", "water", "food"])
        self.assertEqual(got, {"run": ["01-01", "01-02"], "water": ["01-02"], "food": []})

    def test_submit_drives_the_update_path(self) -> None:
        surface = HtmlFormSurface(FORM)
        grid = HabitGrid(surface, {"run": ["01-01"], "water": [], "food": []})

        surface.submit("run=01-01&water=01-01")

        self.assertEqual(grid.data, {"run": ["01-01"], "water": ["01-01"], "food": []})
        self.assertIn('name="water" value="01-01" checked', surface.to_html())

    def test_submit_unchecks_missing_and_ignores_unknown(self) -> None:
        surface = HtmlFormSurface(FORM)
        grid = HabitGrid(surface, {"run": ["01-01"], "water": [], "food": []})

        surface.submit({"water": ["01-01", "12-12"], "nope": ["01-01"]})

        self.assertEqual(grid.data, {"run": [], "water": ["01-01"], "food": []})

    def test_parse_form_data(self) -> None:
        self.assertEqual(parse_form_data("run=01-01&run=01-02&water="), {"run": ["01-01", "01-02"], "water": [""]})
        self.assertEqual(parse_form_data({"run": "01-01"}), {"run": ["01-01"]})
        with self.assertRaises(TypeError):
            parse_form_data(42)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main(verbosity=2)
