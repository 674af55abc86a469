"""Cross-cutting decider properties: purity, order independence, agreement."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from graphcheck.domain.eulerian import has_eulerian_cycle, has_eulerian_path
from graphcheck.domain.hamiltonian import has_hamiltonian_cycle, has_hamiltonian_path
from graphcheck.domain.types import Strategy
from graphcheck.infrastructure.graph.store import Graph
from tests.conftest import (
    directed_triangle,
    herschel,
    isolated_plus_edge,
    make_graph,
    mixed_example,
    petersen,
    undirected_path3,
)

FIXTURES: dict[str, Callable[[], Graph]] = {
    "directed_triangle": directed_triangle,
    "undirected_path3": undirected_path3,
    "isolated_plus_edge": isolated_plus_edge,
    "mixed": mixed_example,
    "petersen": petersen,
    "herschel": herschel,
    "star": lambda: make_graph([(0, 1), (0, 2), (0, 3)], directed=False),
    "diamond": lambda: make_graph([(0, 1), (0, 2), (1, 3), (2, 3), (3, 0)]),
}


def _decisions(g: Graph) -> tuple[bool, ...]:
    return (
        has_hamiltonian_path(g),
        has_hamiltonian_cycle(g),
        has_eulerian_path(g, directed=True),
        has_eulerian_cycle(g, directed=True),
        has_eulerian_path(g, directed=False),
        has_eulerian_cycle(g, directed=False),
    )


@pytest.mark.parametrize("name", sorted(FIXTURES))
class TestDeciderProperties:
    def test_idempotent(self, name: str) -> None:
        g = FIXTURES[name]()
        snapshot = g.adjacency()
        assert _decisions(g) == _decisions(g)
        assert g.adjacency() == snapshot

    def test_insertion_order_independent(self, name: str) -> None:
        original = FIXTURES[name]()
        expected = _decisions(original)
        rng = random.Random(f"order-{name}")
        for _ in range(5):
            vertices = original.ordered_vertices()
            edges = original.edges()
            rng.shuffle(vertices)
            rng.shuffle(edges)
            # Stored entries already carry any mirroring, so rebuild as directed.
            shuffled = Graph.from_edges(edges, directed=True, vertices=vertices)
            assert _decisions(shuffled) == expected

    def test_strategies_agree(self, name: str) -> None:
        g = FIXTURES[name]()
        for fn in (has_hamiltonian_path, has_hamiltonian_cycle):
            results = {
                fn(g, strategy=strategy, prune=prune)
                for strategy in Strategy
                for prune in (True, False)
            }
            assert len(results) == 1
