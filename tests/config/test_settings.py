"""Tests for GraphcheckSettings — TOML, env vars, and CLI flags."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from graphcheck.config.settings import GraphcheckSettings
from graphcheck.domain.types import Mode, Strategy


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = GraphcheckSettings.from_cli(start=tmp_path)
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.graph.mode is Mode.BOTH
        assert settings.search.strategy is Strategy.ITERATIVE

    def test_frozen(self, tmp_path: Path) -> None:
        settings = GraphcheckSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        (tmp_path / "graphcheck.toml").write_text(
            '[graph]\nmode = "undirected"\n[search]\ntimeout = 3.0\n'
        )
        settings = GraphcheckSettings.from_cli(start=tmp_path)
        assert settings.graph.mode is Mode.UNDIRECTED
        assert settings.search.timeout == 3.0
        assert settings.search.prune is True
        assert settings.config_path == tmp_path / "graphcheck.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "conf" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[io]\ncoerce_int = false\n")
        settings = GraphcheckSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.io.coerce_int is False
        assert settings.config_path == custom

    def test_config_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "graphcheck.toml").write_text('[graph]\nmode = "directed"\n')
        elsewhere = tmp_path / "elsewhere.toml"
        elsewhere.write_text('[graph]\nmode = "undirected"\n')
        monkeypatch.setenv("GRAPHCHECK_CONFIG", str(elsewhere))
        settings = GraphcheckSettings.from_cli(start=tmp_path)
        assert settings.config_path == elsewhere
        assert settings.graph.mode is Mode.UNDIRECTED

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            GraphcheckSettings.from_cli(config_path=str(tmp_path / "none.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "graphcheck.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            GraphcheckSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "graphcheck.toml").write_text('[search]\nstrategy = "recursive"\n')
        monkeypatch.setenv("GRAPHCHECK_SEARCH__STRATEGY", "iterative")
        settings = GraphcheckSettings.from_cli(start=tmp_path)
        assert settings.search.strategy is Strategy.ITERATIVE

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRAPHCHECK_QUIET", "false")
        settings = GraphcheckSettings.from_cli(start=tmp_path, quiet=True)
        assert settings.quiet is True

    def test_config_view(self, tmp_path: Path) -> None:
        (tmp_path / "graphcheck.toml").write_text("[graph]\ndirected = false\n")
        cfg = GraphcheckSettings.from_cli(start=tmp_path).config()
        assert cfg.graph.directed is False
