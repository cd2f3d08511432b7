"""
Expansion entry points.

expand() is the whole algorithm: one Accumulator, a Resolver on the root
document, finalize. print_with_includes() adds what a host does around it:
settings and saving the result next to the source document.
"""

from __future__ import annotations

import logging
import posixpath

from .accumulator import Accumulator
from .config.model import Settings
from .errors import DocumentNotFoundError
from .resolver import Resolver
from .store.protocols import DocumentStore
from .types import CyclePolicy, Document

logger = logging.getLogger(__name__)


def _root_document(store: DocumentStore, root_path: str) -> Document:
    entry = store.resolve(root_path)
    if not isinstance(entry, Document):
        raise DocumentNotFoundError(root_path)
    return entry


def expand(
    store: DocumentStore,
    root_path: str,
    file_extension: str = ".md",
    cleanup_newlines: bool = True,
    *,
    cycle_policy: CyclePolicy = "skip",
) -> str:
    """
    Flatten a document with all of its includes.

    Args:
        store: Document store
        root_path: Store path of the root document (with extension)
        file_extension: Suffix appended to include link paths
        cleanup_newlines: Collapse runs of blank lines into one
        cycle_policy: What to do when a document includes itself

    Returns:
        Final text

    Raises:
        DocumentNotFoundError: root document is missing or unreadable
        IncludeCycleError: cycle found with cycle_policy="error"
    """
    root = _root_document(store, root_path)
    result = Accumulator(cleanup_newlines)
    Resolver(root, store, result, file_extension, cycle_policy=cycle_policy).run()
    return result.finalize()


def output_path(document: Document, prefix: str) -> str:
    """Output lives next to the source: notes/a.md -> notes/<prefix>a.md."""
    return posixpath.join(document.parent, prefix + document.name)


def print_with_includes(store: DocumentStore, root_path: str, settings: Settings) -> Document:
    """
    Expand root_path and save the result as a new document beside it.

    Raises:
        DocumentExistsError: the output document is already there
        OutputWriteError: the store failed to write it
    """
    root = _root_document(store, root_path)
    text = expand(
        store,
        root.path,
        settings.file_extension,
        settings.cleanup_newlines,
        cycle_policy=settings.cycle_policy,
    )
    path = output_path(root, settings.output_prefix)
    logger.debug("print %s", path)
    return store.create_document(path, text)


__all__ = ["expand", "output_path", "print_with_includes"]
