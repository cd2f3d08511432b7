"""
Utilities for creating vault documents in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional


def write(p: Path, text: str) -> Path:
    """
    Writes text to a file, creating parent directories when needed.

    Args:
        p: File path
        text: Content to write

    Returns:
        Path to the created file
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def write_markdown(p: Path, body: str = "", frontmatter: Optional[Dict[str, str]] = None) -> Path:
    """
    Creates a markdown document, optionally with a YAML front matter block.

    Args:
        p: File path
        body: Document content after the front matter
        frontmatter: Flat key/value pairs for the front matter block

    Returns:
        Path to the created file
    """
    lines = []
    if frontmatter is not None:
        lines.append("---")
        lines.extend(f"{k}: {v}" for k, v in frontmatter.items())
        lines.append("---")
    lines.append(body)
    return write(p, "\n".join(lines))
