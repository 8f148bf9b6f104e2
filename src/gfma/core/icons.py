"""Octicon SVG lookup for admonition titles"""

from functools import lru_cache
from pathlib import Path


ICONS_DIR = Path(__file__).resolve().parent.parent / "assets" / "icons"


@lru_cache(maxsize=None)
def icon_svg(name: str) -> str:
    """Return inline SVG markup for the octicon `name`; KeyError if not bundled."""
    path = ICONS_DIR / f"{name}.svg"
    if not path.is_file():
        raise KeyError(f"Unknown icon: {name!r}")
    return path.read_text(encoding="utf-8").strip()
