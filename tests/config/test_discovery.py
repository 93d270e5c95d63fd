"""Tests for aggregen.toml discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from aggregen.config.discovery import CONFIG_FILENAME, find_config


@pytest.mark.usefixtures("_isolated_cwd")
class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == cfg.resolve()

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        found = find_config()
        assert found is not None
        assert found.name == CONFIG_FILENAME

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        other = tmp_path / "elsewhere.toml"
        other.write_text("")
        monkeypatch.setenv("AGGREGEN_CONFIG", str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AGGREGEN_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
