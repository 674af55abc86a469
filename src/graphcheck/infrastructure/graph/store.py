"""Graph — adjacency store backed by a NetworkX DiGraph.

Every edge is stored as directed adjacency entries. Undirected insertion
mirrors the entry (``u -> v`` and ``v -> u``), so a directed flag on the
graph only picks the default for edge insertion and removal; individual
edges may override it, which allows mixed graphs.

NetworkX keeps node and successor dicts in insertion order and ignores
duplicate ``add_edge`` calls, which gives the ordered, duplicate-free
adjacency sequences the deciders rely on. A self-loop is a single entry.
"""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from graphcheck.domain.types import Edge, Vertex

type _Store = nx.DiGraph


class Graph:
    """Mutable adjacency-list graph with total (never-raising) queries."""

    def __init__(self, *, directed: bool = True) -> None:
        self.directed = directed
        self._g: _Store = nx.DiGraph()

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Edge],
        *,
        directed: bool = True,
        vertices: Iterable[Vertex] = (),
    ) -> Graph:
        """Build a graph from *vertices* (added first) and an edge iterable."""
        graph = cls(directed=directed)
        for v in vertices:
            graph.add_vertex(v)
        for source, destination in edges:
            graph.add_edge(source, destination)
        return graph

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """Add *vertex*; no-op if it already exists."""
        if vertex not in self._g:
            self._g.add_node(vertex)

    def add_edge(
        self, source: Vertex, destination: Vertex, undirected: bool | None = None
    ) -> None:
        """Add ``source -> destination``, creating missing vertices.

        When *undirected* (default: ``not self.directed``) the reverse entry
        is added too. Existing entries are left untouched.
        """
        if undirected is None:
            undirected = not self.directed
        self.add_vertex(source)
        self.add_vertex(destination)
        if not self._g.has_edge(source, destination):
            self._g.add_edge(source, destination)
        if undirected and not self._g.has_edge(destination, source):
            self._g.add_edge(destination, source)

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove *vertex* and every entry pointing to or from it."""
        if vertex in self._g:
            self._g.remove_node(vertex)

    def remove_edge(
        self, source: Vertex, destination: Vertex, undirected: bool | None = None
    ) -> None:
        """Remove ``source -> destination`` (and the mirror when undirected)."""
        if undirected is None:
            undirected = not self.directed
        if self._g.has_edge(source, destination):
            self._g.remove_edge(source, destination)
        if undirected and self._g.has_edge(destination, source):
            self._g.remove_edge(destination, source)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, vertex: Vertex) -> list[Vertex]:
        """Out-neighbors in insertion order; empty for unknown vertices."""
        if vertex not in self._g:
            return []
        return list(self._g.successors(vertex))

    def vertices(self) -> set[Vertex]:
        return set(self._g.nodes)

    def ordered_vertices(self) -> list[Vertex]:
        return list(self._g.nodes)

    def is_adjacent(self, source: Vertex, destination: Vertex) -> bool:
        return self._g.has_edge(source, destination)

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._g

    def in_degree(self, vertex: Vertex) -> int:
        if vertex not in self._g:
            return 0
        return self._g.in_degree(vertex)

    def edges(self) -> list[Edge]:
        """Stored adjacency entries as ``(source, destination)`` pairs."""
        return list(self._g.edges)

    def edge_count(self) -> int:
        return self._g.number_of_edges()

    def self_loops(self) -> list[Vertex]:
        return [u for u, _ in nx.selfloop_edges(self._g)]

    def adjacency(self) -> dict[Vertex, list[Vertex]]:
        """Snapshot copy of the adjacency mapping."""
        return {v: list(self._g.successors(v)) for v in self._g.nodes}

    def format_adjacency(self) -> str:
        """Render ``vertex -> n1 n2 ...`` lines, one per vertex."""
        lines = []
        for v, nbrs in self.adjacency().items():
            lines.append(f"{v} -> {' '.join(str(n) for n in nbrs)}".rstrip())
        return "\n".join(lines)

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._g
        except TypeError:
            return False

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, vertices={len(self)}, edges={self.edge_count()})"
