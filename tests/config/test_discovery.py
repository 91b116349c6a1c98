"""Tests for locating wedbook.toml."""

from pathlib import Path

import pytest

from wedbook.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    ConfigFileError,
    resolve_config_path,
)


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestWalkUp:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[output]\nwidth = 80\n")
        assert resolve_config_path(start=tmp_path) == config_file

    def test_nearest_parent_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        inner = tmp_path / "a"
        (inner / "b").mkdir(parents=True)
        (inner / CONFIG_FILENAME).write_text("")
        assert resolve_config_path(start=inner / "b") == inner / CONFIG_FILENAME

    def test_directory_named_like_config_ignored(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).mkdir()
        assert resolve_config_path(start=tmp_path) is None

    def test_nothing_found(self, tmp_path: Path) -> None:
        assert resolve_config_path(start=tmp_path) is None


class TestNamedFile:
    def test_explicit_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert resolve_config_path(str(custom), start=tmp_path) == custom

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert resolve_config_path(start=tmp_path / "elsewhere") == custom

    def test_explicit_beats_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        from_env = tmp_path / "env.toml"
        from_flag = tmp_path / "flag.toml"
        from_env.write_text("")
        from_flag.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(from_env))
        assert resolve_config_path(from_flag) == from_flag

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigFileError, match="not found"):
            resolve_config_path(tmp_path / "missing.toml")

    def test_missing_env_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        with pytest.raises(ConfigFileError):
            resolve_config_path(start=tmp_path)
