"""Pipeline step functions: rewrite, render, inject, and build orchestration"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from markdown_it import MarkdownIt

from gfma.config import Settings
from gfma.core.inject import BuildContext, inject_all
from gfma.core.models import Document
from gfma.core.parse import load_documents
from gfma.core.render import make_renderer, render_page
from gfma.core.rewrite import rewrite
from gfma.core.styles import load_stylesheet


logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    context:   BuildContext
    documents: list[Document]
    written:   list[tuple[Path, Path]] = field(default_factory=list)
    injected:  int = 0


def _rewrite_one(doc: Document, render_inline: Callable[[str], str]) -> str:
    logger.debug("Processing %s '%s' (%d characters).", doc.kind.value, doc.path, len(doc.content))
    return rewrite(doc.content, render_inline)


def run_rewrite(
    ctx: BuildContext,
    docs: list[Document],
    render_inline: Optional[Callable[[str], str]],
    jobs: int = 1,
    ) -> int:
    """Rewrite admonitions in every doc and record the changed ones in ctx.

    Raises RuntimeError before touching any document if no converter is given.
    Returns the number of documents recorded by this call.
    """
    if render_inline is None:
        raise RuntimeError(
            "Markdown converter not found. Please ensure that a markdown converter is configured."
        )

    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            rewritten = list(pool.map(lambda d: _rewrite_one(d, render_inline), docs))
    else:
        rewritten = [_rewrite_one(d, render_inline) for d in docs]

    recorded = 0
    for doc, content in zip(docs, rewritten):
        if content == doc.content:
            continue
        doc.content = content
        if ctx.record(doc):
            recorded += 1

    logger.info("Converted admonitions in %d file(s).", recorded)
    return recorded


def run_render(docs: list[Document], md: MarkdownIt, standalone: bool = True) -> None:
    """Render every doc's content to its final output."""
    for doc in docs:
        doc.output = render_page(doc, md.render(doc.content), standalone)


def run_inject(ctx: BuildContext, stylesheet: Optional[Path] = None, minify: bool = True) -> int:
    """Read the stylesheet once and inject it into every document recorded in ctx."""
    return inject_all(ctx, load_stylesheet(stylesheet), minify=minify)


def write_outputs(docs: list[Document], root: Path, output_dir: Path) -> list[tuple[Path, Path]]:
    """Write each doc's output under output_dir, mirroring its path relative to root."""
    results = []
    for doc in docs:
        rel = doc.path.relative_to(root) if root.is_dir() else Path(doc.path.name)
        dest = output_dir / rel.with_suffix(".html")
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(doc.output or "", encoding="utf-8")
        results.append((doc.path, dest))
    return results


def run_build(path: str, settings: Settings) -> BuildResult:
    """Load, rewrite, render, inject, and write every document under path."""
    md = make_renderer(settings.parser_config)
    root = Path(path)
    docs = load_documents(root)

    ctx = BuildContext()
    run_rewrite(ctx, docs, md.render, jobs=settings.jobs)
    run_render(docs, md, settings.standalone)

    stylesheet = Path(settings.stylesheet) if settings.stylesheet else None
    injected = run_inject(ctx, stylesheet, settings.minify_css)

    written = write_outputs(docs, root, Path(settings.output_dir))
    return BuildResult(context=ctx, documents=docs, written=written, injected=injected)
