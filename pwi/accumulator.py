from __future__ import annotations

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

_BLANK_RUN = re.compile(r"\n{2,}")


def collapse_blank_lines(text: str) -> str:
    """Any run of blank lines becomes exactly one blank line."""
    return _BLANK_RUN.sub("\n\n", text)


class Accumulator:
    """
    Output lines shared by every resolver of one expansion.

    Resolvers only append; the owner calls finalize() once at the end.
    """

    def __init__(self, cleanup_newlines: bool = True):
        self.cleanup_newlines = cleanup_newlines
        self.lines: List[str] = []

    def add_line(self, line: str) -> None:
        logger.debug("line: %s", line)
        self.lines.append(line)

    def finalize(self) -> str:
        content = "\n".join(self.lines)
        if self.cleanup_newlines:
            content = collapse_blank_lines(content)
        return content

    def __len__(self) -> int:
        return len(self.lines)


__all__ = ["Accumulator", "collapse_blank_lines"]
