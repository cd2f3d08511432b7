from pathlib import Path

import pytest

from pwi.config import CFG_FILE, Settings, load_settings, save_settings
from pwi.errors import ConfigError
from tests.infrastructure.file_utils import write


def test_defaults_without_file(tmp_path: Path):
    s = load_settings(tmp_path)
    assert s == Settings()
    assert s.file_extension == ".md"
    assert s.output_prefix == "P_W_I_"
    assert s.cleanup_newlines is True
    assert s.cycle_policy == "skip"


def test_partial_file_keeps_defaults(tmp_path: Path):
    write(tmp_path / CFG_FILE, "output_prefix: flat_\ncleanup_newlines: false\n")
    s = load_settings(tmp_path)
    assert s == Settings(output_prefix="flat_", cleanup_newlines=False)


def test_empty_file(tmp_path: Path):
    write(tmp_path / CFG_FILE, "")
    assert load_settings(tmp_path) == Settings()


def test_unknown_key(tmp_path: Path):
    write(tmp_path / CFG_FILE, "prefix: x\n")
    with pytest.raises(ConfigError, match="unknown key"):
        load_settings(tmp_path)


def test_not_a_mapping(tmp_path: Path):
    write(tmp_path / CFG_FILE, "- a\n- b\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_settings(tmp_path)


def test_broken_yaml(tmp_path: Path):
    write(tmp_path / CFG_FILE, "output_prefix: [oops\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(tmp_path)


@pytest.mark.parametrize("raw", [
    {"file_extension": 1},
    {"output_prefix": None},
    {"cleanup_newlines": "yes"},
    {"cycle_policy": "ignore"},
])
def test_type_errors(raw):
    with pytest.raises(ConfigError):
        Settings.from_dict(raw)


def test_save_and_reload(tmp_path: Path):
    s = Settings(file_extension=".markdown", cycle_policy="error")
    path = save_settings(tmp_path, s)
    assert path == (tmp_path / CFG_FILE).resolve()
    assert load_settings(tmp_path) == s


def test_save_keeps_comments(tmp_path: Path):
    write(tmp_path / CFG_FILE, "# vault settings\noutput_prefix: flat_  # short\n")
    save_settings(tmp_path, Settings(output_prefix="full_"))
    text = (tmp_path / CFG_FILE).read_text(encoding="utf-8")
    assert "# vault settings" in text
    assert "output_prefix: full_" in text
    assert load_settings(tmp_path).output_prefix == "full_"
