from __future__ import annotations

import logging
import os

_LOG = logging.getLogger("pwi")


def setup_logging(verbose: bool = False) -> None:
    """
    One stderr handler for the "pwi" logger tree.
    PWI_DEBUG in the environment forces DEBUG level.
    """
    level = logging.DEBUG if (verbose or os.environ.get("PWI_DEBUG")) else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)


__all__ = ["setup_logging"]
