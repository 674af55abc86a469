"""Read-only graph contract consumed by the analyzers and deciders.

Any object exposing these queries can be analyzed; the concrete
NetworkX-backed store lives in :mod:`graphcheck.infrastructure.graph.store`.
Queries are total: an unknown vertex behaves as an isolated one.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from graphcheck.domain.types import Vertex


@runtime_checkable
class GraphView(Protocol):
    """Query side of the graph store."""

    def neighbors(self, vertex: Vertex) -> Sequence[Vertex]:
        """Out-neighbors in insertion order; empty for unknown vertices."""
        ...

    def vertices(self) -> set[Vertex]: ...

    def ordered_vertices(self) -> list[Vertex]:
        """All vertices in insertion order."""
        ...

    def is_adjacent(self, source: Vertex, destination: Vertex) -> bool: ...
