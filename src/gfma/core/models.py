"""Document handle and admonition kinds shared across the build pipeline"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class AdmonitionKind(str, Enum):
    important = "important"
    note = "note"
    tip = "tip"
    warning = "warning"
    caution = "caution"

    @property
    def title(self) -> str:
        return self.value.capitalize()

    @property
    def icon(self) -> str:
        return ADMONITION_ICONS[self]


ADMONITION_ICONS: dict[AdmonitionKind, str] = {
    AdmonitionKind.important: "report",
    AdmonitionKind.note:      "info",
    AdmonitionKind.tip:       "light-bulb",
    AdmonitionKind.warning:   "alert",
    AdmonitionKind.caution:   "stop",
}


class DocumentKind(str, Enum):
    post = "post"
    page = "page"


@dataclass(eq=False)
class Document:
    """A source document owned by the build; content is rewritten, output is injected."""
    path:        Path
    slug:        str
    kind:        DocumentKind
    content:     str                     # markdown body (frontmatter stripped)
    frontmatter: dict[str, Any] = field(default_factory=dict)
    output:      Optional[str] = None    # rendered HTML, set by the render phase

    @property
    def title(self) -> str:
        return str(self.frontmatter.get("title") or self.slug)
