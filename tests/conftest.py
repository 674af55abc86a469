"""Shared pytest fixtures and graph builders for graphcheck tests."""

from __future__ import annotations

from collections.abc import Callable, Generator, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from graphcheck.infrastructure.graph.store import Graph
from graphcheck.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer GRAPHCHECK_* env vars out of every test."""
    import os

    for key in list(os.environ):
        if key.startswith("GRAPHCHECK_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Telemetry is a ContextVar; keep one test's --verbose from leaking."""
    yield
    disable_telemetry()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in a temp dir so no graphcheck.toml above the repo is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def edge_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing ``rows`` as an edge-list CSV under tmp_path."""

    def _write(rows: Iterable[tuple[object, object]], name: str = "edges.csv") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{u},{v}\n" for u, v in rows), encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Graph builders (used across test modules)
# ---------------------------------------------------------------------------


def make_graph(
    edges: Iterable[tuple[object, object]],
    *,
    directed: bool = True,
    vertices: Iterable[object] = (),
) -> Graph:
    """Build a Graph from vertices then edges."""
    return Graph.from_edges(list(edges), directed=directed, vertices=vertices)


def directed_triangle() -> Graph:
    return make_graph([(0, 1), (1, 2), (2, 0)])


def undirected_path3() -> Graph:
    return make_graph([(0, 1), (1, 2)], directed=False)


def isolated_plus_edge(*, directed: bool = False) -> Graph:
    return make_graph([(1, 2)], directed=directed, vertices=[0, 1, 2])


def petersen() -> Graph:
    """Petersen graph: traceable but not Hamiltonian."""
    outer = [(i, (i + 1) % 5) for i in range(5)]
    spokes = [(i, i + 5) for i in range(5)]
    inner = [(5 + i, 5 + (i + 2) % 5) for i in range(5)]
    return make_graph(outer + spokes + inner, directed=False)


def herschel() -> Graph:
    """Herschel graph: bipartite with 5/6 sides, so no Hamiltonian cycle."""
    adj = {
        0: [1, 9, 10, 7],
        1: [0, 8, 2],
        2: [1, 9, 3],
        3: [2, 8, 4],
        4: [3, 9, 10, 5],
        5: [4, 8, 6],
        6: [5, 10, 7],
        7: [6, 8, 0],
        8: [1, 3, 5, 7],
        9: [2, 0, 4],
        10: [6, 4, 0],
    }
    return make_graph([(u, v) for u, nbrs in adj.items() for v in nbrs], directed=False)


def dodecahedron() -> Graph:
    """Dodecahedral graph: Hamiltonian."""
    adj = {
        0: [1, 4, 5],
        1: [0, 7, 2],
        2: [1, 9, 3],
        3: [2, 11, 4],
        4: [3, 13, 0],
        5: [0, 14, 6],
        6: [5, 16, 7],
        7: [6, 8, 1],
        8: [7, 17, 9],
        9: [8, 10, 2],
        10: [9, 18, 11],
        11: [10, 3, 12],
        12: [11, 19, 13],
        13: [12, 14, 4],
        14: [13, 15, 5],
        15: [14, 16, 19],
        16: [6, 17, 15],
        17: [16, 8, 18],
        18: [10, 19, 17],
        19: [18, 12, 15],
    }
    return make_graph([(u, v) for u, nbrs in adj.items() for v in nbrs], directed=False)


def mixed_example() -> Graph:
    """Two undirected edges plus one directed edge on three vertices."""
    g = Graph(directed=True)
    for v in (0, 1, 2):
        g.add_vertex(v)
    g.add_edge(0, 1, undirected=True)
    g.add_edge(0, 2)
    g.add_edge(1, 2, undirected=True)
    return g
