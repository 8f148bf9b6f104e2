"""Shared fixtures for core unit tests"""

from pathlib import Path

import pytest

from gfma.core.models import Document, DocumentKind


SAMPLE_MD = """\
# Release notes

Intro paragraph.

> [!NOTE]
> Highlights information that users should take into account.

```markdown
> [!WARNING]
> This is only an example.
```

> [!CAUTION]
> Negative potential consequences.
> Read **carefully**.

Closing paragraph.
"""


class RecordingRenderer:
    """Identity render_inline stub that remembers every body it was given."""

    def __init__(self):
        self.calls: list[str] = []

    def __call__(self, text: str) -> str:
        self.calls.append(text)
        return text


@pytest.fixture(name="renderer")
def renderer_fixture():
    return RecordingRenderer()


@pytest.fixture(name="stub_icons")
def stub_icons_fixture():
    return lambda name: f"<svg:{name}>"


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    def _make(content: str, name: str = "doc.md", kind: DocumentKind = DocumentKind.page) -> Document:
        path = Path(name)
        return Document(path=path, slug=path.stem, kind=kind, content=content)
    return _make


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
