"""Tests for AggSettings: unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from aggregen.config.settings import AggSettings


@pytest.mark.usefixtures("_isolated_cwd")
class TestAggSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = AggSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.search.max_solutions == 10
        assert settings.strategy.name == "random"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = AggSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


@pytest.mark.usefixtures("_isolated_cwd")
class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "aggregen.toml"
        toml.write_text('[search]\nseed = 42\n[strategy]\nname = "first-fit"\n')
        settings = AggSettings.from_cli(start=tmp_path)
        assert settings.search.seed == 42
        assert settings.search.attempts == 3
        assert settings.strategy.name == "first-fit"
        assert settings.config_path == toml.resolve()

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "aggregen.toml").write_text("")
        settings = AggSettings.from_cli(start=tmp_path)
        assert settings.selection.allow_self_loops is False

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[selection]\nopen_weighting = \"template\"\n")
        settings = AggSettings.from_cli(config_path=str(custom))
        assert settings.selection.open_weighting == "template"
        assert settings.config_path == custom

    def test_invalid_toml_is_click_error(self, tmp_path: Path) -> None:
        (tmp_path / "aggregen.toml").write_text("[search\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            AggSettings.from_cli(start=tmp_path)


@pytest.mark.usefixtures("_isolated_cwd")
class TestPriority:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = AggSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_env_overrides_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("AGGREGEN_QUIET", "true")
        settings = AggSettings.from_cli(start=tmp_path)
        assert settings.quiet is True

    def test_to_config(self, tmp_path: Path) -> None:
        (tmp_path / "aggregen.toml").write_text("[search]\nmax_depth = 7\n")
        cfg = AggSettings.from_cli(start=tmp_path).to_config()
        assert cfg.search.max_depth == 7

    def test_library_section_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "aggregen.toml").write_text('[library]\nweight_key = "score"\n')
        cfg = AggSettings.from_cli(start=tmp_path).to_config()
        assert cfg.library.weight_key == "score"
