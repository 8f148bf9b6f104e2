"""Admonition stylesheet loading and minification"""

from pathlib import Path
from typing import Optional

import csscompressor


DEFAULT_STYLESHEET = Path(__file__).resolve().parent.parent / "assets" / "admonitions.css"


def load_stylesheet(path: Optional[Path] = None) -> str:
    """Read the admonition CSS: the bundled stylesheet unless a custom path is given."""
    return Path(path or DEFAULT_STYLESHEET).read_text(encoding="utf-8")


def minify_css(css: str) -> str:
    """Strip comments and insignificant whitespace from css."""
    return csscompressor.compress(css)
