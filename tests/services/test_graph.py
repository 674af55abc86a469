"""Tests for GraphService."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from graphcheck.config.models import GraphcheckConfig, IoConfig
from graphcheck.infrastructure.graph.engine import GraphEngine
from graphcheck.services.graph import GraphService


def _service(path: Path, config: GraphcheckConfig | None = None) -> GraphService:
    return GraphService(GraphEngine(path), config)


class TestSummary:
    def test_directed(self, edge_file: Callable[..., Path]) -> None:
        path = edge_file([(0, 1), (1, 1), (2, 3)])
        result = _service(path).summary()
        assert result.ok
        assert result.data == {
            "source": str(path),
            "directed": True,
            "vertices": 4,
            "edges": 3,
            "self_loops": [1],
            "components": 2,
            "largest_component": 2,
            "connected": False,
        }

    def test_undirected_connected(self, edge_file: Callable[..., Path]) -> None:
        result = _service(edge_file([(0, 1), (2, 1)])).summary(directed=False)
        assert result.data["edges"] == 4
        assert result.data["components"] == 1
        assert result.data["connected"] is True

    def test_missing(self, tmp_path: Path) -> None:
        result = _service(tmp_path / "x.csv").summary()
        assert not result.ok
        assert result.op == "summary"
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"


class TestDegrees:
    def test_directed_rows(self, edge_file: Callable[..., Path]) -> None:
        result = _service(edge_file([(0, 1), (0, 2), (1, 2)])).degrees()
        assert result.data["count"] == 3
        assert result.data["items"][0] == {"vertex": 0, "in": 0, "out": 2}
        assert result.data["unbalanced"] == [0, 2]

    def test_undirected_rows(self, edge_file: Callable[..., Path]) -> None:
        result = _service(edge_file([(0, 1), (1, 2)])).degrees(directed=False)
        assert result.data["items"] == [
            {"vertex": 0, "degree": 1},
            {"vertex": 1, "degree": 2},
            {"vertex": 2, "degree": 1},
        ]
        assert result.data["odd"] == [0, 2]
        assert "unbalanced" not in result.data


class TestNeighbors:
    def test_known_vertex(self, edge_file: Callable[..., Path]) -> None:
        result = _service(edge_file([(0, 2), (0, 1)])).neighbors("0")
        assert result.data["vertex"] == 0
        assert result.data["items"] == [2, 1]
        assert result.warnings == []

    def test_unknown_vertex_is_empty(self, edge_file: Callable[..., Path]) -> None:
        result = _service(edge_file([(0, 1)])).neighbors("7")
        assert result.ok
        assert result.data["items"] == []
        assert result.data["count"] == 0
        assert result.warnings == ["Vertex '7' is not in the graph"]

    def test_without_coercion(self, tmp_path: Path) -> None:
        path = tmp_path / "e.csv"
        path.write_text("0,1\n")
        engine = GraphEngine(path, coerce_int=False)
        config = GraphcheckConfig(io=IoConfig(coerce_int=False))
        result = GraphService(engine, config).neighbors("0")
        assert result.data["items"] == ["1"]


class TestShow:
    def test_adjacency_and_text(self, edge_file: Callable[..., Path]) -> None:
        result = _service(edge_file([(0, 1), (1, 2)])).show(directed=False)
        assert result.data["adjacency"] == [
            {"vertex": 0, "neighbors": [1]},
            {"vertex": 1, "neighbors": [0, 2]},
            {"vertex": 2, "neighbors": [1]},
        ]
        assert result.data["text"] == "0 -> 1\n1 -> 0 2\n2 -> 1"
