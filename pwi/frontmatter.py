"""
YAML front matter handling.

Front matter is a YAML mapping fenced by '---' lines at the very top of a
document. Stores use find_frontmatter_end() to report where it ends; the
resolver uses content_without_frontmatter() to drop it from included text.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .types import Document

if TYPE_CHECKING:
    from .store.protocols import DocumentStore

_yaml = YAML(typ="safe")
_FENCE_LINE = re.compile(r"^---\s*$")

logger = logging.getLogger(__name__)


def find_frontmatter_end(lines: List[str]) -> Optional[int]:
    """
    Locate the closing fence of a leading front matter block.

    Returns:
        0-based index of the closing '---' line, or None when the document
        has no front matter (no opening fence, no closing fence, or a body
        that is not a YAML mapping).

    Examples:
        >>> find_frontmatter_end(["---", "tags: [a]", "---", "# Body"])
        2
        >>> find_frontmatter_end(["# Body"]) is None
        True
    """
    if not lines or not _FENCE_LINE.match(lines[0]):
        return None

    end = next((i for i in range(1, len(lines)) if _FENCE_LINE.match(lines[i])), None)
    if end is None:
        # Starts with --- but never closes, treat as no front matter
        return None

    body = "\n".join(lines[1:end])
    try:
        data = _yaml.load(body)
    except (YAMLError, ValueError):
        # ValueError: well-formed but impossible values, e.g. date: 2024-02-30
        return None
    if data is not None and not isinstance(data, dict):
        return None
    return end


def content_without_frontmatter(document: Document, store: DocumentStore) -> List[str]:
    """Lines of the document with the front matter block (if any) removed."""
    logger.debug("read %s", document.path)
    lines = store.read_lines(document.path)
    end = store.frontmatter_end(document.path)
    if end is not None:
        lines = lines[end + 1:]
    return lines


__all__ = ["find_frontmatter_end", "content_without_frontmatter"]
