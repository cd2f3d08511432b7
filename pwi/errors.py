"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from PWIUserError.

Programming errors and bugs should NOT inherit from PWIUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Sequence


class PWIUserError(Exception):
    """
    Base class for all user-facing errors in print-with-includes.

    These errors indicate problems that the user can fix:
    missing documents, an occupied output path, a broken settings file, etc.
    """
    pass


class DocumentNotFoundError(PWIUserError):
    """A document could not be read from the store."""

    def __init__(self, path: str):
        super().__init__(f"Document not found: {path}")
        self.path = path


class DocumentReadError(PWIUserError):
    """A document exists but its content could not be read or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path


class DocumentExistsError(PWIUserError):
    """The output document already exists."""

    def __init__(self, path: str):
        super().__init__(f"Document already exists: {path}")
        self.path = path


class OutputWriteError(PWIUserError):
    """Writing the output document failed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path


class IncludeCycleError(PWIUserError):
    """A document includes itself, directly or through other documents."""

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        super().__init__("Include cycle detected: " + " → ".join(self.chain))


class ConfigError(PWIUserError):
    """Invalid .pwi.yaml settings."""
    pass


class DirectiveParseError(ValueError):
    """An include header line could not be parsed. Never leaves the resolver."""
    pass


__all__ = [
    "PWIUserError",
    "DocumentNotFoundError",
    "DocumentReadError",
    "DocumentExistsError",
    "OutputWriteError",
    "IncludeCycleError",
    "ConfigError",
    "DirectiveParseError",
]
