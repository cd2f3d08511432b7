"""
Utilities for working with CLI in tests.
"""

import os
import subprocess
import sys
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parents[2]


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Runs pwi.cli with specified arguments in the given directory.

    Args:
        root: Working directory for command execution (the vault)
        *args: Command line arguments for pwi.cli

    Returns:
        CompletedProcess with execution results
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(_REPO_ROOT), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8"
    env.pop("PWI_DEBUG", None)
    return subprocess.run(
        [sys.executable, "-m", "pwi.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )
