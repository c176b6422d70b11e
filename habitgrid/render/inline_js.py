# habitgrid/render/inline_js.py
from __future__ import annotations

# Keeps #habit-data in sync with the checked boxes (same rebuild as HabitGrid._update)
# and re-emits it as a `habitgrid:change` event for host pages.
JS_BLOCK = r"""(function () {
  const form = document.querySelector("#habit-form") || document.querySelector("form");
  const store = document.getElementById("habit-data");
  if (!form || !store) return;
  const habits = [...form.querySelectorAll(".habit")].map((el) => el.dataset.name);
  form.addEventListener("change", () => {
    const data = new FormData(form);
    const snapshot = {};
    for (const habit of habits) snapshot[habit] = data.getAll(habit);
    store.textContent = JSON.stringify(snapshot);
    form.dispatchEvent(new CustomEvent("habitgrid:change", { detail: snapshot, bubbles: true }));
  });
})();"""
