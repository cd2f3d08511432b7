from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Literal, NewType, Union

# ---- Aliases for clarity ----
DocPath = NewType("DocPath", str)  # vault-relative POSIX path, "notes/todo.md"
CyclePolicy = Literal["skip", "error"]


# ---- Store entries ----

@dataclass(frozen=True)
class Document:
    """
    Handle of a leaf document in the store.

    The handle carries no content: text is always read through the store
    that produced it.
    """
    path: str

    @property
    def name(self) -> str:
        """File name with extension ("todo.md")."""
        return posixpath.basename(self.path)

    @property
    def parent(self) -> str:
        """Path of the containing folder ("" for the store root)."""
        return posixpath.dirname(self.path)


@dataclass(frozen=True)
class Folder:
    """Non-leaf store entry. Includes pointing at a folder expand to nothing."""
    path: str


Entry = Union[Document, Folder]


# ---- Include directive ----

@dataclass(frozen=True)
class Directive:
    """
    Parsed include header line:

        ## [[chapters/intro|Introduction]]
        depth=2, ref="chapters/intro", title="Introduction"
    """
    depth: int
    ref: str
    title: str

    @property
    def heading(self) -> str:
        """Replacement heading emitted in place of the directive line."""
        return "#" * self.depth + " " + self.title


__all__ = ["DocPath", "CyclePolicy", "Document", "Folder", "Entry", "Directive"]
