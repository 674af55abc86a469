"""ExportService — write a loaded graph back out.

Two formats: the ``source,destination`` edge list (round-trips through
ingestion) and a JSON adjacency document. A failed write is reported as a
result error and leaves the in-memory graph as it was.
"""

from __future__ import annotations

import json
from pathlib import Path

from graphcheck.domain.errors import EdgeListError, GraphcheckError
from graphcheck.infrastructure.edgelist import write_edge_list
from graphcheck.services.base import BaseService
from graphcheck.services.result import ServiceResult
from graphcheck.services.telemetry import traced


class ExportService(BaseService):
    """Handles graph export."""

    @traced
    def export_edge_list(self, output: Path, *, directed: bool | None = None) -> ServiceResult:
        """Write every stored adjacency entry as a CSV row.

        Undirected readings store both directions of each edge, so both rows
        are written.
        """
        if (missing := self._missing_source("export_edges")) is not None:
            return missing
        if directed is None:
            directed = self._config.graph.directed
        try:
            graph = self._graph(directed=directed)
            count = write_edge_list(graph, output, delimiter=self._config.io.delimiter)
        except GraphcheckError as exc:
            return self._failure("export_edges", exc)

        return ServiceResult(
            ok=True,
            op="export_edges",
            data={"output": str(output), "directed": directed, "edges": count},
        )

    @traced
    def export_adjacency(self, output: Path, *, directed: bool | None = None) -> ServiceResult:
        """Write ``{"directed": ..., "adjacency": [{"vertex", "neighbors"}]}`` as JSON."""
        if (missing := self._missing_source("export_adjacency")) is not None:
            return missing
        if directed is None:
            directed = self._config.graph.directed
        try:
            graph = self._graph(directed=directed)
            doc = {
                "directed": directed,
                "adjacency": [
                    {"vertex": v, "neighbors": n} for v, n in graph.adjacency().items()
                ],
            }
            try:
                output.parent.mkdir(parents=True, exist_ok=True)
                output.write_text(json.dumps(doc, indent=2) + "\n", encoding="utf-8")
            except OSError as exc:
                raise EdgeListError(f"Cannot write {output}: {exc}", path=str(output)) from exc
        except GraphcheckError as exc:
            return self._failure("export_adjacency", exc)

        return ServiceResult(
            ok=True,
            op="export_adjacency",
            data={"output": str(output), "directed": directed, "vertices": len(graph)},
        )
