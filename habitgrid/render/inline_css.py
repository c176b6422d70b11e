# habitgrid/render/inline_css.py
from __future__ import annotations

CSS_BLOCK = r""":root {
  --bg: #09090a;
  --fg: #e4e4e7;
  --muted: #52525b;
  --accent: #8b5cf6;
  --cell: 2.5rem;
}
body {
  margin: 0;
  padding: 2rem;
  background: var(--bg);
  color: var(--fg);
  font-family: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif;
}
form { display: flex; gap: 1rem; overflow-x: auto; }
.habits, .day { display: flex; flex-direction: column; gap: .5rem; }
.habits { padding-top: 2rem; }
.habit, .day input {
  width: var(--cell);
  height: var(--cell);
}
.habit { display: grid; place-items: center; font-size: 1.5rem; }
.days { display: flex; gap: .5rem; }
.day > div { height: 1.5rem; font-size: .8rem; color: var(--muted); text-align: center; }
.day input {
  appearance: none;
  margin: 0;
  border: 2px solid #27272a;
  border-radius: .5rem;
  background: #18181b;
  cursor: pointer;
}
.day input:checked { background: var(--accent); border-color: #a78bfa; }"""
