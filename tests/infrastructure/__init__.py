"""
Unified test infrastructure for print-with-includes.

Modules:
- file_utils: Utilities for creating vault documents
- cli_utils: Running the pwi CLI in a subprocess
"""

from .file_utils import write, write_markdown
from .cli_utils import run_cli

__all__ = ["write", "write_markdown", "run_cli"]
