from __future__ import annotations

from .accumulator import Accumulator, collapse_blank_lines
from .engine import expand, output_path, print_with_includes
from .resolver import Resolver
from .types import Directive, Document, Folder

__all__ = [
    "Accumulator",
    "collapse_blank_lines",
    "Resolver",
    "expand",
    "print_with_includes",
    "output_path",
    "Directive",
    "Document",
    "Folder",
]
