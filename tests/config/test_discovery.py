"""Tests for ministry.toml discovery and reading."""

from __future__ import annotations

from pathlib import Path

import pytest

from ministryctl.config.discovery import ConfigError, find_config, read_config_file


class TestFindConfig:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / "ministry.toml").write_text("")
        assert find_config(tmp_path) == (tmp_path / "ministry.toml").resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "ministry.toml").write_text("")
        nested = tmp_path / "x" / "y"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / "ministry.toml").resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "ministry.toml").write_text("")
        other = tmp_path / "elsewhere.toml"
        other.write_text("")
        monkeypatch.setenv("MINISTRYCTL_CONFIG", str(other))
        assert find_config(tmp_path) == other

    def test_dangling_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "ministry.toml").write_text("")
        monkeypatch.setenv("MINISTRYCTL_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestReadConfigFile:
    def test_none(self) -> None:
        assert read_config_file(None) == {}

    def test_missing(self, tmp_path: Path) -> None:
        assert read_config_file(tmp_path / "nope.toml") == {}

    def test_parses(self, tmp_path: Path) -> None:
        path = tmp_path / "ministry.toml"
        path.write_text("[birthdays]\nwindow_days = 10\n")
        assert read_config_file(path) == {"birthdays": {"window_days": 10}}

    def test_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "ministry.toml"
        path.write_text("window_days = = 3\n")
        with pytest.raises(ConfigError):
            read_config_file(path)
