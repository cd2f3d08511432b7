from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional

from ..errors import ConfigError
from ..types import CyclePolicy

CYCLE_POLICIES = ("skip", "error")


def _assert_only_keys(d: Dict[str, Any], allowed: Iterable[str], *, ctx: str) -> None:
    extra = set(d.keys()) - set(allowed)
    if extra:
        raise ConfigError(f"{ctx}: unknown key(s): {', '.join(sorted(extra))}")


@dataclass(frozen=True)
class Settings:
    """
    User settings of print-with-includes.

    file_extension   — appended to include link paths and used for the output
    output_prefix    — prepended to the root document name to form the output name
    cleanup_newlines — collapse runs of blank lines in the output
    cycle_policy     — "skip" cyclic includes with a warning or "error" out
    """
    file_extension: str = ".md"
    output_prefix: str = "P_W_I_"
    cleanup_newlines: bool = True
    cycle_policy: CyclePolicy = "skip"

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> Settings:
        """Missing keys keep their defaults; unknown keys are rejected."""
        if not d:
            return Settings()
        _assert_only_keys(d, Settings.__dataclass_fields__.keys(), ctx="Settings")

        defaults = Settings()
        file_extension = d.get("file_extension", defaults.file_extension)
        output_prefix = d.get("output_prefix", defaults.output_prefix)
        cleanup_newlines = d.get("cleanup_newlines", defaults.cleanup_newlines)
        cycle_policy = d.get("cycle_policy", defaults.cycle_policy)

        if not isinstance(file_extension, str):
            raise ConfigError(f"Settings.file_extension: expected string, got {file_extension!r}")
        if not isinstance(output_prefix, str):
            raise ConfigError(f"Settings.output_prefix: expected string, got {output_prefix!r}")
        if not isinstance(cleanup_newlines, bool):
            raise ConfigError(f"Settings.cleanup_newlines: expected boolean, got {cleanup_newlines!r}")
        if cycle_policy not in CYCLE_POLICIES:
            raise ConfigError(
                f"Settings.cycle_policy: expected one of {', '.join(CYCLE_POLICIES)}, got {cycle_policy!r}"
            )

        return Settings(
            file_extension=file_extension,
            output_prefix=output_prefix,
            cleanup_newlines=cleanup_newlines,
            cycle_policy=cycle_policy,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["Settings", "CYCLE_POLICIES"]
