from __future__ import annotations

from .fs import FsStore
from .memory import MemoryStore
from .protocols import DocumentStore

__all__ = ["DocumentStore", "FsStore", "MemoryStore"]
