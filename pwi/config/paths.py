from __future__ import annotations

from pathlib import Path

# Settings live in a single file at the vault root.
CFG_FILE = ".pwi.yaml"


def settings_path(root: Path) -> Path:
    """Absolute path to <vault>/.pwi.yaml."""
    return (root / CFG_FILE).resolve()
