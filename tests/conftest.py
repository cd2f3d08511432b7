from pathlib import Path

import pytest

from pwi.store import FsStore, MemoryStore
from tests.infrastructure.cli_utils import run_cli
from tests.infrastructure.file_utils import write


@pytest.fixture
def tmpvault(tmp_path: Path) -> Path:
    """
    Small vault on disk:

        book.md ──► chapters/one.md ──► chapters/shared.md
                └─► chapters/two.md (front matter)
                └─► chapters (folder)
    """
    root = tmp_path
    write(root / "book.md", "# Book\n\n## [[chapters/one|First]]\n\n## [[chapters/two|Second]]\n\n## [[chapters|Folder]]\n\nThe end\n")
    write(root / "chapters" / "one.md", "One body\n### [[chapters/shared|Shared]]\n")
    write(root / "chapters" / "two.md", "---\ntags: [draft]\n---\nTwo body\n")
    write(root / "chapters" / "shared.md", "Shared body")
    return root


@pytest.fixture
def fsstore(tmpvault: Path) -> FsStore:
    return FsStore(tmpvault)


def mem(docs: dict, **kwargs) -> MemoryStore:
    """MemoryStore from {path: list-of-lines | text}."""
    return MemoryStore(
        {p: "\n".join(v) if isinstance(v, list) else v for p, v in docs.items()},
        **kwargs,
    )


__all__ = ["run_cli", "mem"]
