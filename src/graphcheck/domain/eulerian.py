"""Eulerian path/cycle existence via closed-form degree criteria.

No search is involved; each check is one degree profile plus at most one
connectivity traversal.

Known gap: the directed path criterion checks degrees only. Two disjoint
components can satisfy it together (for example ``a -> b`` plus a separate
directed cycle), which yields a false positive. Combine it with
:func:`~graphcheck.domain.degrees.is_connected` for the strict answer.
"""

from __future__ import annotations

from graphcheck.domain.degrees import degree_profile, is_connected
from graphcheck.domain.graph import GraphView


def has_eulerian_path(graph: GraphView, directed: bool) -> bool:
    """Decide whether a walk can traverse every edge exactly once.

    Directed: exactly one vertex with ``out - in == 1``, exactly one with
    ``out - in == -1``, every other vertex balanced.
    Undirected: exactly two odd-degree vertices and the graph is connected.
    """
    profile = degree_profile(graph, directed)
    if directed:
        diffs = [profile.diff(v) for v in profile.out_degree]
        starts = sum(1 for d in diffs if d == 1)
        ends = sum(1 for d in diffs if d == -1)
        rest_balanced = all(d == 0 for d in diffs if d not in (1, -1))
        return starts == 1 and ends == 1 and rest_balanced
    return len(profile.odd_vertices()) == 2 and is_connected(graph, directed=False)


def has_eulerian_cycle(graph: GraphView, directed: bool) -> bool:
    """Decide whether a closed walk can traverse every edge exactly once.

    Directed: in-degree equals out-degree everywhere and the graph is
    weakly connected. Undirected: every degree even and connected.
    """
    profile = degree_profile(graph, directed)
    if directed:
        return profile.is_balanced() and is_connected(graph, directed=True)
    return not profile.odd_vertices() and is_connected(graph, directed=False)
