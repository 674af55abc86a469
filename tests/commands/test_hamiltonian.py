"""Tests for the hamiltonian command group."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from graphcheck.cli import cli

PETERSEN_ROWS = (
    [(i, (i + 1) % 5) for i in range(5)]
    + [(i, i + 5) for i in range(5)]
    + [(5 + i, 5 + (i + 2) % 5) for i in range(5)]
)


@pytest.mark.usefixtures("_isolated_cwd")
class TestHamiltonianCommands:
    def test_path_directed_default(
        self, cli_runner: CliRunner, edge_file: Callable[..., Path]
    ) -> None:
        result = cli_runner.invoke(cli, ["-q", "hamiltonian", "path", str(edge_file([(1, 0)]))])
        assert result.exit_code == 0
        assert result.stdout.strip() == "true"

    def test_petersen_undirected(
        self, cli_runner: CliRunner, edge_file: Callable[..., Path]
    ) -> None:
        path = str(edge_file(PETERSEN_ROWS))
        path_result = cli_runner.invoke(cli, ["-q", "hamiltonian", "path", path, "--undirected"])
        cycle_result = cli_runner.invoke(
            cli, ["-q", "hamiltonian", "cycle", path, "--undirected"]
        )
        assert path_result.stdout.strip() == "true"
        assert cycle_result.stdout.strip() == "false"

    def test_cycle_json(self, cli_runner: CliRunner, edge_file: Callable[..., Path]) -> None:
        path = str(edge_file([(0, 1), (1, 2), (2, 0)]))
        result = cli_runner.invoke(
            cli, ["--json", "hamiltonian", "cycle", path, "--strategy", "recursive"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "hamiltonian_cycle"
        assert data["data"]["exists"] is True
        assert data["data"]["directed"] is True

    def test_reading_from_config(
        self, cli_runner: CliRunner, tmp_path: Path, edge_file: Callable[..., Path]
    ) -> None:
        (tmp_path / "graphcheck.toml").write_text("[graph]\ndirected = false\n")
        path = str(edge_file([(0, 1), (2, 1), (0, 2)]))
        result = cli_runner.invoke(cli, ["-q", "hamiltonian", "cycle", path])
        assert result.stdout.strip() == "true"

    def test_max_vertices(self, cli_runner: CliRunner, edge_file: Callable[..., Path]) -> None:
        path = str(edge_file(PETERSEN_ROWS))
        result = cli_runner.invoke(cli, ["hamiltonian", "path", path, "--max-vertices", "5"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr

    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["hamiltonian", "--examples"])
        assert result.exit_code == 0
        assert "graphcheck hamiltonian cycle" in result.output
