from __future__ import annotations

from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from .model import Settings
from .paths import settings_path
from ..errors import ConfigError

_yaml = YAML(typ="safe")

_YAML_RT = YAML(typ="rt")
_YAML_RT.indent(mapping=2, sequence=4, offset=2)


def load_settings(root: Path) -> Settings:
    """
    Read <root>/.pwi.yaml over the defaults.
    A missing file means all defaults.
    """
    path = settings_path(root)
    if not path.is_file():
        return Settings()
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return Settings.from_dict(raw)


def save_settings(root: Path, settings: Settings) -> Path:
    """
    Write settings to <root>/.pwi.yaml, keeping comments and key order of an
    existing file. Returns the written path.
    """
    path = settings_path(root)
    data = CommentedMap()
    if path.is_file():
        loaded = _YAML_RT.load(path.read_text(encoding="utf-8"))
        if isinstance(loaded, CommentedMap):
            data = loaded
    for key, value in settings.to_dict().items():
        data[key] = value

    tmp = path.with_suffix(path.suffix + ".tmp-rt")
    with tmp.open("w", encoding="utf-8") as f:
        _YAML_RT.dump(data, f)
    tmp.replace(path)
    return path


__all__ = ["load_settings", "save_settings"]
