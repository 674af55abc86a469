"""Tests for the graph inspection command group."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from graphcheck.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestGraphCommands:
    def test_summary_json(self, cli_runner: CliRunner, edge_file: Callable[..., Path]) -> None:
        path = str(edge_file([(0, 1), (1, 2)]))
        result = cli_runner.invoke(cli, ["--json", "graph", "summary", path, "--undirected"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["vertices"] == 3
        assert data["edges"] == 4
        assert data["connected"] is True

    def test_degrees_table(self, cli_runner: CliRunner, edge_file: Callable[..., Path]) -> None:
        result = cli_runner.invoke(cli, ["graph", "degrees", str(edge_file([(0, 1)]))])
        assert result.exit_code == 0
        assert "In" in result.stdout
        assert "unbalanced" in result.stdout

    def test_neighbors_quiet(self, cli_runner: CliRunner, edge_file: Callable[..., Path]) -> None:
        path = str(edge_file([(0, 2), (0, 1), (1, 0)]))
        result = cli_runner.invoke(cli, ["-q", "graph", "neighbors", path, "0"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["2", "1"]

    def test_unknown_vertex(self, cli_runner: CliRunner, edge_file: Callable[..., Path]) -> None:
        path = str(edge_file([(0, 1)]))
        result = cli_runner.invoke(cli, ["-q", "graph", "neighbors", path, "9"])
        assert result.exit_code == 0
        assert result.stdout == "\n"
        assert "not in the graph" in result.stderr

    def test_show(self, cli_runner: CliRunner, edge_file: Callable[..., Path]) -> None:
        path = str(edge_file([(0, 1), (1, 2)]))
        result = cli_runner.invoke(cli, ["graph", "show", path, "--undirected"])
        assert result.exit_code == 0
        assert "1 -> 0 2" in result.stdout

    def test_tab_delimited_via_config(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        (tmp_path / "graphcheck.toml").write_text('[io]\ndelimiter = "\\t"\n')
        edges = tmp_path / "g.tsv"
        edges.write_text("a\tb\n")
        result = cli_runner.invoke(cli, ["--json", "graph", "neighbors", str(edges), "a"])
        assert json.loads(result.output)["data"]["items"] == ["b"]
