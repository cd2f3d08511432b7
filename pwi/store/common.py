from __future__ import annotations

import posixpath
from typing import Optional


def normalize_path(path: str) -> Optional[str]:
    """
    Canonical store path: POSIX separators, no leading slash, no '.' parts.
    Returns None for paths that climb above the store root.

        "/notes/./a.md" -> "notes/a.md"
        "../secret.md"  -> None
        "" or "/"       -> "" (the root folder)
    """
    p = path.replace("\\", "/").strip("/")
    if not p:
        return ""
    p = posixpath.normpath(p)
    if p == ".":
        return ""
    if p == ".." or p.startswith("../"):
        return None
    return p


def split_lines(text: str) -> list[str]:
    return text.split("\n")


__all__ = ["normalize_path", "split_lines"]
