"""Build-scoped registry of rewritten documents and post-render style injection"""

import logging
import re
import threading

from gfma.core.models import Document
from gfma.core.styles import minify_css


logger = logging.getLogger(__name__)

HEAD_RE = re.compile(r'<head(?:\s[^>]*)?>.*?</head>', re.DOTALL | re.IGNORECASE)
HEAD_CLOSE = len('</head>')


class BuildContext:
    """Documents changed by the rewriter during one build invocation.

    Create one per build and pass it to both the rewrite phase and the
    injection phase. A document is injected at most once per context.
    """

    def __init__(self) -> None:
        self.documents: list[Document] = []
        self.converted = 0
        self._injected: set[Document] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self):
        return iter(list(self.documents))

    def record(self, doc: Document) -> bool:
        """Register doc; returns False if it was already registered."""
        with self._lock:
            if doc in self.documents:
                return False
            self.documents.append(doc)
            self.converted += 1
            return True

    def pending(self) -> list[Document]:
        """Registered documents not yet injected in this context."""
        with self._lock:
            return [d for d in self.documents if d not in self._injected]

    def mark_injected(self, doc: Document) -> None:
        with self._lock:
            self._injected.add(doc)


def inject_style(output: str, css: str) -> str:
    """Insert <style>css</style> right before the first </head>; unchanged if there is no head."""
    m = HEAD_RE.search(output)
    if not m:
        return output
    close = m.end() - HEAD_CLOSE
    return f"{output[:close]}<style>{css}</style>{output[close:]}"


def inject_all(ctx: BuildContext, css_text: str, minify: bool = True) -> int:
    """Inject the stylesheet into every rendered document in ctx. Returns the number changed."""
    pending = ctx.pending()
    logger.info("Inserting admonition CSS in %d page(s).", len(pending))
    if not pending:
        return 0

    css = minify_css(css_text) if minify else css_text
    injected = 0
    for doc in pending:
        if doc.output is None:
            logger.debug("Skipping '%s': not rendered yet.", doc.path)
            continue
        logger.debug("Appending admonition style to '%s'.", doc.path)
        styled = inject_style(doc.output, css)
        if styled == doc.output:
            logger.debug("No <head> in '%s'; left unmodified.", doc.path)
            continue
        doc.output = styled
        ctx.mark_injected(doc)
        injected += 1
    return injected
