"""Tests for commithook.global_config module."""

import stat
from pathlib import Path

import pytest

from commithook.global_config import (
    GlobalConfigError,
    ensure_global_config_dir,
    get_config_file_path,
    get_credential,
    get_credentials_file_path,
    get_global_config_dir,
    is_configured,
    load_credentials,
    load_global_config,
    save_credential,
    save_global_config,
    set_config_value,
)


class TestPaths:
    """Tests for global config paths."""

    def test_config_dir_is_patched(self, isolated_config_dir):
        assert get_global_config_dir() == isolated_config_dir

    def test_ensure_creates_directory(self, isolated_config_dir):
        result = ensure_global_config_dir()

        assert isolated_config_dir.is_dir()
        assert result == isolated_config_dir

    def test_file_names(self):
        assert get_config_file_path().name == "config.yaml"
        assert get_credentials_file_path().name == "credentials"


class TestGlobalConfigFile:
    """Tests for config.yaml loading and saving."""

    def test_missing_file_is_empty(self):
        assert load_global_config() == {}
        assert is_configured() is False

    def test_round_trip(self):
        save_global_config({"model": "m", "timeout": 10})

        assert load_global_config() == {"model": "m", "timeout": 10}
        assert is_configured() is True

    def test_set_config_value_keeps_other_keys(self):
        save_global_config({"model": "m"})
        set_config_value("timeout", 9)

        assert load_global_config() == {"model": "m", "timeout": 9}

    def test_invalid_yaml_raises(self, isolated_config_dir):
        isolated_config_dir.mkdir(parents=True)
        (isolated_config_dir / "config.yaml").write_text("model: [unclosed")

        with pytest.raises(GlobalConfigError):
            load_global_config()

    def test_non_mapping_raises(self, isolated_config_dir):
        isolated_config_dir.mkdir(parents=True)
        (isolated_config_dir / "config.yaml").write_text("- a\n- b\n")

        with pytest.raises(GlobalConfigError):
            load_global_config()


class TestCredentials:
    """Tests for the credentials file."""

    def test_missing_file_is_empty(self):
        assert load_credentials() == {}
        assert get_credential("CLAUDE_API_KEY") is None

    def test_save_and_get(self):
        save_credential("CLAUDE_API_KEY", "sk-123")

        assert get_credential("CLAUDE_API_KEY") == "sk-123"

    def test_update_keeps_other_keys(self):
        save_credential("CLAUDE_API_KEY", "old")
        save_credential("ANTHROPIC_API_KEY", "other")
        save_credential("CLAUDE_API_KEY", "new")

        assert load_credentials() == {"CLAUDE_API_KEY": "new", "ANTHROPIC_API_KEY": "other"}

    def test_file_is_private(self):
        save_credential("CLAUDE_API_KEY", "sk-123")

        mode = Path(get_credentials_file_path()).stat().st_mode
        assert stat.S_IMODE(mode) == stat.S_IRUSR | stat.S_IWUSR

    def test_comments_ignored(self, isolated_config_dir):
        isolated_config_dir.mkdir(parents=True)
        (isolated_config_dir / "credentials").write_text(
            "# comment\n\nCLAUDE_API_KEY = sk-abc\n"
        )

        assert load_credentials() == {"CLAUDE_API_KEY": "sk-abc"}
