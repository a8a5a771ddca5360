from __future__ import annotations

import re

from components.styles import build_css
from config import THEME


def test_every_token_is_filled_from_theme() -> None:
    css = build_css()
    assert re.search(r"__[A-Z_]+__", css) is None
    assert f"--danger: {THEME['danger']};" in css
    assert f"--radius: {THEME['radius_px']}px;" in css
