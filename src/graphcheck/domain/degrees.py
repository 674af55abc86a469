"""Degree & connectivity analysis.

Pure functions of a graph snapshot, O(V + E). Nothing is cached: a
DegreeProfile is rebuilt on every call so it can never go stale after
the graph is mutated.

Undirected degree is the length of the stored adjacency sequence, so a
self-loop contributes 1 rather than the textbook 2.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from graphcheck.domain.graph import GraphView
from graphcheck.domain.types import Vertex


@dataclass(frozen=True)
class DegreeProfile:
    """Per-vertex in/out degree for one reading of a graph.

    In undirected mode ``degree(v)`` equals ``out_degree[v]``; the in-degree
    table is still populated (it mirrors out-degree for symmetric storage).
    """

    directed: bool
    out_degree: dict[Vertex, int] = field(default_factory=dict)
    in_degree: dict[Vertex, int] = field(default_factory=dict)

    def degree(self, vertex: Vertex) -> int:
        return self.out_degree.get(vertex, 0)

    def diff(self, vertex: Vertex) -> int:
        """``out_degree - in_degree`` for *vertex*."""
        return self.out_degree.get(vertex, 0) - self.in_degree.get(vertex, 0)

    def odd_vertices(self) -> list[Vertex]:
        return [v for v, d in self.out_degree.items() if d % 2 == 1]

    def is_balanced(self) -> bool:
        """True when in-degree equals out-degree at every vertex."""
        return all(self.diff(v) == 0 for v in self.out_degree)

    def sources(self) -> list[Vertex]:
        """Vertices nothing points at."""
        return [v for v, d in self.in_degree.items() if d == 0]

    def sinks(self) -> list[Vertex]:
        """Vertices with no outgoing adjacency."""
        return [v for v, d in self.out_degree.items() if d == 0]

    def to_rows(self) -> list[dict[str, object]]:
        """Flatten to one row per vertex for reporting."""
        rows: list[dict[str, object]] = []
        for v, out in self.out_degree.items():
            if self.directed:
                rows.append({"vertex": v, "in": self.in_degree[v], "out": out})
            else:
                rows.append({"vertex": v, "degree": out})
        return rows


def degree_profile(graph: GraphView, directed: bool) -> DegreeProfile:
    """Compute the degree profile of *graph*.

    ``out_degree(v) = |neighbors(v)|`` and
    ``in_degree(v) = #{u : v in neighbors(u)}``.
    """
    order = graph.ordered_vertices()
    out_degree: dict[Vertex, int] = {}
    in_degree: dict[Vertex, int] = dict.fromkeys(order, 0)
    for v in order:
        nbrs = graph.neighbors(v)
        out_degree[v] = len(nbrs)
        for n in nbrs:
            in_degree[n] = in_degree.get(n, 0) + 1
    return DegreeProfile(directed=directed, out_degree=out_degree, in_degree=in_degree)


def _undirected_adjacency(graph: GraphView) -> dict[Vertex, list[Vertex]]:
    """Adjacency with edge direction ignored, first-seen neighbor order."""
    adj: dict[Vertex, list[Vertex]] = {v: [] for v in graph.ordered_vertices()}
    seen: set[tuple[Vertex, Vertex]] = set()
    for u in adj:
        for v in graph.neighbors(u):
            for a, b in ((u, v), (v, u)):
                if (a, b) not in seen:
                    seen.add((a, b))
                    adj.setdefault(a, []).append(b)
    return adj


def components(graph: GraphView) -> list[list[Vertex]]:
    """Weakly connected components, in first-seen vertex order.

    Isolated vertices form singleton components.
    """
    adj = _undirected_adjacency(graph)
    visited: set[Vertex] = set()
    result: list[list[Vertex]] = []
    for start in adj:
        if start in visited:
            continue
        visited.add(start)
        members = [start]
        queue: deque[Vertex] = deque([start])
        while queue:
            node = queue.popleft()
            for neighbor in adj[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    members.append(neighbor)
                    queue.append(neighbor)
        result.append(members)
    return result


def is_connected(graph: GraphView, directed: bool) -> bool:
    """Connectivity as required by the Eulerian criteria.

    Directed: weak connectivity restricted to vertices carrying at least one
    edge (isolated vertices do not break it). Undirected: every vertex must
    be reachable from an arbitrary start. Graphs with at most one vertex are
    connected.
    """
    if len(graph.ordered_vertices()) <= 1:
        return True
    comps = components(graph)
    if not directed:
        return len(comps) == 1
    profile = degree_profile(graph, directed=True)
    with_edges = [
        c for c in comps if any(profile.out_degree[v] or profile.in_degree[v] for v in c)
    ]
    return len(with_edges) <= 1
