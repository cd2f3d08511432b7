"""
Document store protocol.

Everything the resolver knows about the outside world goes through this
interface: reading text, locating front matter, resolving link targets and
persisting the flattened result.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from ..types import Document, Entry


@runtime_checkable
class DocumentStore(Protocol):

    def read_lines(self, path: str) -> List[str]:
        """
        Raw document text split on '\\n'.

        Raises:
            DocumentNotFoundError: path is not a document
            DocumentReadError: the document exists but cannot be read or decoded
        """
        ...

    def frontmatter_end(self, path: str) -> Optional[int]:
        """0-based index of the line closing the front matter, None if there is none."""
        ...

    def resolve(self, path: str) -> Optional[Entry]:
        """Document or Folder at path, None when nothing exists there."""
        ...

    def create_document(self, path: str, content: str) -> Document:
        """
        Persist a new document.

        Raises:
            DocumentExistsError: something already exists at path
            OutputWriteError: the write itself failed
        """
        ...


__all__ = ["DocumentStore"]
