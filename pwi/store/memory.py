from __future__ import annotations

import posixpath
from typing import Dict, Iterable, List, Mapping, Optional, Set

from .common import normalize_path, split_lines
from ..errors import DocumentExistsError, DocumentNotFoundError, OutputWriteError
from ..frontmatter import find_frontmatter_end
from ..types import Document, Entry, Folder


class MemoryStore:
    """
    Dict-backed store for embedding and tests.

    Folders are implied by document paths ("a/b.md" makes folder "a");
    extra empty folders can be declared explicitly. `frontmatter` overrides
    the detected front matter end per path, the way an editor's metadata
    cache would report it.
    """

    def __init__(
        self,
        docs: Optional[Mapping[str, str]] = None,
        *,
        folders: Iterable[str] = (),
        frontmatter: Optional[Mapping[str, int]] = None,
    ):
        self.docs: Dict[str, str] = {}
        self._folders: Set[str] = set()
        self._frontmatter: Dict[str, int] = {}
        for path, text in (docs or {}).items():
            self.docs[self._key(path)] = text
        for path in folders:
            self._folders.add(self._key(path))
        for path, end in (frontmatter or {}).items():
            self._frontmatter[self._key(path)] = end

    @staticmethod
    def _key(path: str) -> str:
        rel = normalize_path(path)
        if rel is None:
            raise ValueError(f"Path outside of the store: {path}")
        return rel

    def _is_folder(self, rel: str) -> bool:
        if rel == "" or rel in self._folders:
            return True
        prefix = rel + "/"
        return any(p.startswith(prefix) for p in self.docs) or any(
            f.startswith(prefix) for f in self._folders
        )

    def read_lines(self, path: str) -> List[str]:
        rel = normalize_path(path)
        if rel is None or rel not in self.docs:
            raise DocumentNotFoundError(path)
        return split_lines(self.docs[rel])

    def frontmatter_end(self, path: str) -> Optional[int]:
        rel = normalize_path(path)
        if rel is not None and rel in self._frontmatter:
            return self._frontmatter[rel]
        return find_frontmatter_end(self.read_lines(path))

    def resolve(self, path: str) -> Optional[Entry]:
        rel = normalize_path(path)
        if rel is None:
            return None
        if rel in self.docs:
            return Document(rel)
        if self._is_folder(rel):
            return Folder(rel)
        return None

    def create_document(self, path: str, content: str) -> Document:
        rel = normalize_path(path)
        if rel is None:
            raise OutputWriteError(path, "path is outside of the store")
        if not rel:
            raise OutputWriteError(path, "path does not name a document")
        if rel in self.docs or self._is_folder(rel):
            raise DocumentExistsError(rel)
        parent = posixpath.dirname(rel)
        if not self._is_folder(parent):
            raise OutputWriteError(rel, f"folder does not exist: {parent}")
        self.docs[rel] = content
        return Document(rel)


__all__ = ["MemoryStore"]
