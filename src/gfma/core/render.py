"""markdown-it rendering and HTML page wrapping"""

import html

from markdown_it import MarkdownIt

from gfma.core.models import Document


PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{body}</body>
</html>
"""


def make_renderer(preset: str = "gfm-like") -> MarkdownIt:
    """Build a MarkdownIt converter for the given preset; inline HTML passes through."""
    try:
        return MarkdownIt(preset, options_update={"linkify": False, "html": True})
    except KeyError as e:
        raise RuntimeError(
            f"Markdown converter not found: unknown parser preset {preset!r}. "
            "Please configure a valid MarkdownIt preset."
        ) from e


def render_page(doc: Document, body_html: str, standalone: bool = True) -> str:
    """Return the final output for doc: a full HTML page, or the bare body if not standalone."""
    if not standalone:
        return body_html
    return PAGE_TEMPLATE.format(title=html.escape(doc.title), body=body_html)
