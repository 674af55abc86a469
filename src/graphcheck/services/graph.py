"""GraphService — read-only inspection of a loaded graph.

Summary counts, per-vertex degrees, neighbor lookup, and the adjacency
dump. Neighbor lookup of an unknown vertex is an empty answer, not an
error, matching the store's total query contract.
"""

from __future__ import annotations

from typing import Any

from graphcheck.domain.degrees import components, degree_profile, is_connected
from graphcheck.domain.errors import GraphcheckError
from graphcheck.infrastructure.edgelist import parse_vertex
from graphcheck.services.base import BaseService
from graphcheck.services.result import ServiceResult
from graphcheck.services.telemetry import traced


class GraphService(BaseService):
    """Handles graph inspection queries."""

    def _reading(self, directed: bool | None) -> bool:
        return self._config.graph.directed if directed is None else directed

    @traced
    def summary(self, *, directed: bool | None = None) -> ServiceResult:
        """Vertex/edge counts, self-loops, components, and connectivity."""
        if (missing := self._missing_source("summary")) is not None:
            return missing
        directed = self._reading(directed)
        try:
            graph = self._graph(directed=directed)
        except GraphcheckError as exc:
            return self._failure("summary", exc)

        comps = components(graph)
        return ServiceResult(
            ok=True,
            op="summary",
            data={
                "source": str(self._engine.source),
                "directed": directed,
                "vertices": len(graph),
                "edges": graph.edge_count(),
                "self_loops": graph.self_loops(),
                "components": len(comps),
                "largest_component": max((len(c) for c in comps), default=0),
                "connected": is_connected(graph, directed),
            },
        )

    @traced
    def degrees(self, *, directed: bool | None = None) -> ServiceResult:
        """Per-vertex degree table (in/out when directed)."""
        if (missing := self._missing_source("degrees")) is not None:
            return missing
        directed = self._reading(directed)
        try:
            graph = self._graph(directed=directed)
        except GraphcheckError as exc:
            return self._failure("degrees", exc)

        profile = degree_profile(graph, directed)
        data: dict[str, Any] = {
            "directed": directed,
            "count": len(profile.out_degree),
            "items": profile.to_rows(),
        }
        if directed:
            data["unbalanced"] = [v for v in profile.out_degree if profile.diff(v) != 0]
        else:
            data["odd"] = profile.odd_vertices()
        return ServiceResult(ok=True, op="degrees", data=data)

    @traced
    def neighbors(self, vertex: str, *, directed: bool | None = None) -> ServiceResult:
        """Neighbors of *vertex* in stored order; empty if the vertex is unknown.

        Args:
            vertex: Raw vertex token, parsed like an edge-list field.
        """
        if (missing := self._missing_source("neighbors")) is not None:
            return missing
        directed = self._reading(directed)
        try:
            graph = self._graph(directed=directed)
        except GraphcheckError as exc:
            return self._failure("neighbors", exc)

        key = parse_vertex(vertex, coerce_int=self._config.io.coerce_int)
        items = graph.neighbors(key)
        warnings = [] if key in graph else [f"Vertex '{vertex}' is not in the graph"]
        return ServiceResult(
            ok=True,
            op="neighbors",
            data={"vertex": key, "directed": directed, "count": len(items), "items": items},
            warnings=warnings,
        )

    @traced
    def show(self, *, directed: bool | None = None) -> ServiceResult:
        """Adjacency dump, one ``vertex -> neighbors`` line per vertex."""
        if (missing := self._missing_source("show")) is not None:
            return missing
        directed = self._reading(directed)
        try:
            graph = self._graph(directed=directed)
        except GraphcheckError as exc:
            return self._failure("show", exc)

        adjacency = [{"vertex": v, "neighbors": n} for v, n in graph.adjacency().items()]
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "directed": directed,
                "count": len(adjacency),
                "adjacency": adjacency,
                "text": graph.format_adjacency(),
            },
        )
