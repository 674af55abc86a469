"""Hamiltonian path/cycle existence via exhaustive backtracking.

For every start vertex (insertion order) a depth-first search extends a
simple path by unvisited neighbors of its last vertex, in stored
adjacency order. The search is deterministic for a fixed graph; the order
only decides which witness is met first, never whether one exists.

Worst case is O(V!) per start vertex and nothing is memoized. Callers
that accept untrusted input should bound it with :class:`SearchLimits`.

Two interchangeable strategies are provided:

* ``iterative`` (default) keeps the frontier on an explicit stack and is
  not bound by the interpreter recursion limit.
* ``recursive`` mirrors the textbook formulation. Hitting the recursion
  limit raises :class:`SearchDepthExceeded` instead of a bare
  ``RecursionError``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from graphcheck.domain.degrees import components, degree_profile
from graphcheck.domain.errors import GraphTooLarge, SearchDepthExceeded, SearchTimeout
from graphcheck.domain.graph import GraphView
from graphcheck.domain.types import Strategy, Vertex

logger = logging.getLogger(__name__)

# Deadline is polled once per this many search steps.
_DEADLINE_POLL = 256


@dataclass(frozen=True)
class SearchLimits:
    """Caller-imposed bounds on a Hamiltonian search.

    ``None`` (or 0, as read from config) means unbounded.
    """

    max_vertices: int | None = None
    timeout: float | None = None

    def check_size(self, vertices: int) -> None:
        if self.max_vertices and vertices > self.max_vertices:
            raise GraphTooLarge(vertices, self.max_vertices)


class SearchPath:
    """Simple path under construction: ordered vertices plus a membership set."""

    __slots__ = ("_members", "_order")

    def __init__(self, vertices: Iterable[Vertex] = ()) -> None:
        self._order: list[Vertex] = []
        self._members: set[Vertex] = set()
        for v in vertices:
            self.push(v)

    def push(self, vertex: Vertex) -> None:
        if vertex in self._members:
            raise ValueError(f"Vertex {vertex!r} is already on the path")
        self._order.append(vertex)
        self._members.add(vertex)

    def pop(self) -> Vertex:
        vertex = self._order.pop()
        self._members.discard(vertex)
        return vertex

    @property
    def first(self) -> Vertex:
        return self._order[0]

    @property
    def last(self) -> Vertex:
        return self._order[-1]

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._members

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._order)

    def __repr__(self) -> str:
        return f"SearchPath({self._order!r})"


class _Deadline:
    def __init__(self, timeout: float | None) -> None:
        self._timeout = timeout
        self._at = time.monotonic() + timeout if timeout else None
        self._steps = 0

    def tick(self) -> None:
        if self._at is None:
            return
        self._steps += 1
        if self._steps % _DEADLINE_POLL == 0 and time.monotonic() > self._at:
            raise SearchTimeout(self._timeout or 0.0)


def _closes(graph: GraphView, path: SearchPath, closed: bool) -> bool:
    return not closed or graph.is_adjacent(path.last, path.first)


def _search_iterative(
    graph: GraphView, start: Vertex, total: int, closed: bool, deadline: _Deadline
) -> bool:
    path = SearchPath([start])
    # One neighbor iterator per path position.
    frontier: list[Iterator[Vertex]] = [iter(graph.neighbors(start))]
    while frontier:
        deadline.tick()
        if len(path) == total:
            if _closes(graph, path, closed):
                return True
            frontier.pop()
            path.pop()
            continue
        for neighbor in frontier[-1]:
            if neighbor not in path:
                path.push(neighbor)
                frontier.append(iter(graph.neighbors(neighbor)))
                break
        else:
            frontier.pop()
            path.pop()
    return False


def _search_recursive(
    graph: GraphView, start: Vertex, total: int, closed: bool, deadline: _Deadline
) -> bool:
    path = SearchPath([start])

    def extend() -> bool:
        deadline.tick()
        if len(path) == total:
            return _closes(graph, path, closed)
        for neighbor in graph.neighbors(path.last):
            if neighbor not in path:
                path.push(neighbor)
                if extend():
                    return True
                path.pop()
        return False

    try:
        return extend()
    except RecursionError as exc:
        raise SearchDepthExceeded(total) from exc


_STRATEGIES = {
    Strategy.ITERATIVE: _search_iterative,
    Strategy.RECURSIVE: _search_recursive,
}


def _ruled_out(graph: GraphView, total: int, closed: bool) -> bool:
    """Cheap necessary conditions; True means no search can succeed."""
    if len(components(graph)) > 1:
        return True
    profile = degree_profile(graph, directed=True)
    if closed:
        return total > 1 and bool(profile.sources() or profile.sinks())
    # A path has one start and one end.
    return len(profile.sources()) > 1 or len(profile.sinks()) > 1


def _decide(
    graph: GraphView,
    *,
    closed: bool,
    strategy: Strategy | str,
    prune: bool,
    limits: SearchLimits | None,
) -> bool:
    order = graph.ordered_vertices()
    total = len(order)
    if total == 0:
        # Empty path spans the empty graph; there is nothing to close a cycle on.
        return not closed

    (limits or SearchLimits()).check_size(total)
    if prune and _ruled_out(graph, total, closed):
        logger.debug("hamiltonian search pruned before start (vertices=%d)", total)
        return False

    search = _STRATEGIES[Strategy(strategy)]
    deadline = _Deadline(limits.timeout if limits else None)
    for start in order:
        if search(graph, start, total, closed, deadline):
            logger.debug("hamiltonian %s found from %r", "cycle" if closed else "path", start)
            return True
    return False


def has_hamiltonian_path(
    graph: GraphView,
    *,
    strategy: Strategy | str = Strategy.ITERATIVE,
    prune: bool = True,
    limits: SearchLimits | None = None,
) -> bool:
    """Decide whether a simple path visits every vertex exactly once.

    The empty graph has one (the empty path). Any single vertex has one.
    """
    return _decide(graph, closed=False, strategy=strategy, prune=prune, limits=limits)


def has_hamiltonian_cycle(
    graph: GraphView,
    *,
    strategy: Strategy | str = Strategy.ITERATIVE,
    prune: bool = True,
    limits: SearchLimits | None = None,
) -> bool:
    """Decide whether a simple cycle visits every vertex exactly once.

    Same search as :func:`has_hamiltonian_path`; a spanning path only counts
    when its last vertex is adjacent to its first. A single vertex therefore
    needs a self-loop; the empty graph has no cycle.
    """
    return _decide(graph, closed=True, strategy=strategy, prune=prune, limits=limits)
