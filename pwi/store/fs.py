from __future__ import annotations

import stat
from pathlib import Path
from typing import List, Optional, Tuple

from .common import normalize_path, split_lines
from ..errors import DocumentExistsError, DocumentNotFoundError, DocumentReadError, OutputWriteError
from ..frontmatter import find_frontmatter_end
from ..types import Document, Entry, Folder


class FsStore:
    """
    Directory on disk used as a vault.

    Store paths are relative to the root directory; anything outside it
    does not exist for the store.
    """

    def __init__(self, root: Path):
        self.root = Path(root).resolve()
        # lines of the last document read, reused by frontmatter_end()
        self._last_read: Optional[Tuple[str, List[str]]] = None

    def _abs(self, path: str) -> Optional[Path]:
        rel = normalize_path(path)
        if rel is None:
            return None
        return self.root / rel if rel else self.root

    @staticmethod
    def _mode(p: Path) -> Optional[int]:
        """st_mode of p, None when it cannot be stat'ed (missing, name too long...)."""
        try:
            return p.stat().st_mode
        except OSError:
            return None

    def read_lines(self, path: str) -> List[str]:
        p = self._abs(path)
        mode = self._mode(p) if p is not None else None
        if mode is None or not stat.S_ISREG(mode):
            raise DocumentNotFoundError(path)
        try:
            text = p.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise DocumentNotFoundError(path)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(path, str(e))
        lines = split_lines(text)
        self._last_read = (path, lines)
        return list(lines)

    def frontmatter_end(self, path: str) -> Optional[int]:
        if self._last_read is not None and self._last_read[0] == path:
            return find_frontmatter_end(self._last_read[1])
        return find_frontmatter_end(self.read_lines(path))

    def resolve(self, path: str) -> Optional[Entry]:
        rel = normalize_path(path)
        if rel is None:
            return None
        mode = self._mode(self.root / rel if rel else self.root)
        if mode is None:
            return None
        if stat.S_ISREG(mode):
            return Document(rel)
        if stat.S_ISDIR(mode):
            return Folder(rel)
        return None

    def create_document(self, path: str, content: str) -> Document:
        rel = normalize_path(path)
        if rel is None:
            raise OutputWriteError(path, "path is outside of the vault")
        if not rel:
            raise OutputWriteError(path, "path does not name a document")
        p = self.root / rel
        try:
            # "x" fails on an existing file instead of truncating it
            with p.open("x", encoding="utf-8", newline="") as f:
                f.write(content)
        except FileExistsError:
            raise DocumentExistsError(rel)
        except OSError as e:
            raise OutputWriteError(rel, str(e))
        return Document(rel)

    def __repr__(self) -> str:
        return f"FsStore({self.root.as_posix()!r})"


__all__ = ["FsStore"]
