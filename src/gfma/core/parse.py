"""File discovery, frontmatter extraction, and Document loading"""

import re
from pathlib import Path
from typing import Any

import yaml

from gfma.core.models import Document, DocumentKind


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
POST_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}-')
MD_EXTENSIONS = {'.md', '.markdown'}
POSTS_DIR = '_posts'


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated URL-safe slug; post date prefixes are dropped."""
    text = POST_DATE_RE.sub('', text.lower())
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)


def load_document(path: Path) -> Document:
    """Read a markdown file into a Document; files under _posts/ are posts."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = strip_frontmatter(raw)
    kind = DocumentKind.post if POSTS_DIR in path.parts else DocumentKind.page
    return Document(
        path=path,
        slug=frontmatter.get('slug') or slugify(path.stem),
        kind=kind,
        content=body,
        frontmatter=frontmatter,
    )


def load_documents(path: Path) -> list[Document]:
    """Load every document under path, posts first and then pages."""
    docs = [load_document(p) for p in discover_files(path)]
    posts = [d for d in docs if d.kind is DocumentKind.post]
    pages = [d for d in docs if d.kind is DocumentKind.page]
    return posts + pages
