"""Rewrite GitHub-flavored markdown admonitions into HTML alert boxes.

An admonition is a block quote whose first line is a ``[!KIND]`` tag::

    > [!NOTE]
    > Useful information that users should know.

The whole quoted run (tag line plus every contiguous ``>`` line after it) is
replaced by a ``markdown-alert`` div. The body is rendered through the host's
markdown converter, so the fragment can be left inline for the rest of the
document to be rendered around it.

Fenced code blocks are shielded first: each one is swapped for a sentinel
fence, and put back once the admonitions are converted.
"""

import logging
import re
import uuid
from typing import Callable

from gfma.core.icons import icon_svg as default_icon_svg
from gfma.core.models import AdmonitionKind


logger = logging.getLogger(__name__)

RenderInline = Callable[[str], str]
IconLookup = Callable[[str], str]

# A fence opens at the start of a line (never behind a '>' marker) and runs to the next fence.
CODE_BLOCK_RE = re.compile(r'^[ \t]*```.*?```', re.MULTILINE | re.DOTALL)
SENTINEL = "```{{{{CODE_BLOCK_{nonce}_{index}}}}}```"

# Tags are matched case-sensitively; the body run is greedy.
ADMONITION_RE = re.compile(
    r'^>[ \t]*\[!(IMPORTANT|NOTE|WARNING|TIP|CAUTION)\][ \t]*\r?\n'
    r'((?:>.*\n?)*)',
    re.MULTILINE,
)
QUOTE_MARKER_RE = re.compile(r'^>[ \t]*', re.MULTILINE)
# A line break that is followed by a blank line would end a CommonMark HTML block.
BLANK_LINE_BREAK_RE = re.compile(r'\n(?=[ \t]*\n)')


def shield_code_blocks(text: str) -> tuple[str, list[str], str]:
    """Replace fenced code blocks with sentinels. Returns (text, blocks, nonce)."""
    blocks: list[str] = []
    nonce = uuid.uuid4().hex[:12]

    def _stash(m: re.Match) -> str:
        blocks.append(m.group(0))
        return SENTINEL.format(nonce=nonce, index=len(blocks) - 1)

    return CODE_BLOCK_RE.sub(_stash, text), blocks, nonce


def restore_code_blocks(text: str, blocks: list[str], nonce: str) -> str:
    """Put back the blocks captured by shield_code_blocks."""
    if not blocks:
        return text
    pattern = re.compile(r'```\{\{CODE_BLOCK_' + re.escape(nonce) + r'_(\d+)\}\}```')
    return pattern.sub(lambda m: blocks[int(m.group(1))], text)


def strip_quote_markers(quoted: str) -> str:
    """Drop each line's leading '>' and the blanks after it, then trim the result."""
    return QUOTE_MARKER_RE.sub('', quoted).strip()


def render_admonition(
    kind: str,
    body: str,
    render_inline: RenderInline,
    icon_svg: IconLookup = default_icon_svg,
    ) -> str:
    """Build the alert box HTML for one admonition.

    Blank lines in the rendered body are folded into ``&#10;`` references so
    the fragment stays a single HTML block when the page is rendered again.
    """
    kind = AdmonitionKind(kind)
    rendered = BLANK_LINE_BREAK_RE.sub('&#10;', render_inline(body))
    return (
        f'<div class="markdown-alert markdown-alert-{kind.value}">\n'
        f'  <p class="markdown-alert-title">{icon_svg(kind.icon)} {kind.title}</p>\n'
        f'  <p>{rendered}</p>\n'
        f'</div>\n\n'
    )


def rewrite(
    source: str,
    render_inline: RenderInline,
    icon_svg: IconLookup = default_icon_svg,
    ) -> str:
    """Return source with every admonition replaced by its HTML fragment.

    Text outside admonitions, fenced code blocks included, is returned
    byte-identical. Unknown tags such as ``[!DANGER]`` are not admonitions.
    """
    shielded, blocks, nonce = shield_code_blocks(source)

    def _convert(m: re.Match) -> str:
        kind = m.group(1).lower()
        logger.debug("Converting %s admonition.", kind)
        return render_admonition(kind, strip_quote_markers(m.group(2)), render_inline, icon_svg)

    converted = ADMONITION_RE.sub(_convert, shielded)
    return restore_code_blocks(converted, blocks, nonce)
