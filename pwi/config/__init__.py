from __future__ import annotations

from .load import load_settings, save_settings
from .model import CYCLE_POLICIES, Settings
from .paths import CFG_FILE, settings_path

__all__ = ["Settings", "CYCLE_POLICIES", "load_settings", "save_settings", "CFG_FILE", "settings_path"]
