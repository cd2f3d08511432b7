"""
Include directive grammar.

A directive is a markdown heading whose text is a wiki-link with an alias:

    ### [[path/to/doc|Shown title]]

The heading level is kept, the alias becomes the heading text and the
referenced document is expanded right after it.
"""

from __future__ import annotations

import re

from .errors import DirectiveParseError
from .types import Directive

_HEAD = re.compile(r"^(#+)")
# first '|' separates the path, first ']]' after it closes the link
_LINK = re.compile(r"\[\[([^|]*)\|(.*?)\]\]")


def is_directive(line: str) -> bool:
    """Cheap recognition check. A matching line may still fail parse_directive()."""
    return line.startswith("#") and "[[" in line and "]]" in line and "|" in line


def parse_directive(line: str) -> Directive:
    """
    Split an include line into heading depth, reference path and title.

    Raises:
        DirectiveParseError: heading marks or the aliased link are missing.
    """
    head = _HEAD.match(line)
    if not head:
        raise DirectiveParseError(f"cannot parse header level: {line!r}")

    link = _LINK.search(line)
    if not link:
        raise DirectiveParseError(f"cannot parse link: {line!r}")

    return Directive(depth=len(head.group(1)), ref=link.group(1), title=link.group(2))


__all__ = ["is_directive", "parse_directive"]
