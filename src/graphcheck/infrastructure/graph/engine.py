"""GraphEngine — lazy-built graphs from one edge-list file.

The file is read at most once per reading (directed/undirected) and
invocation; commands that fail before touching the graph never read it.
"""

from __future__ import annotations

from pathlib import Path

from graphcheck.infrastructure.edgelist import load_graph
from graphcheck.infrastructure.graph.store import Graph


class GraphEngine:
    """Lazy-loading source of the graphs analyzed by the services."""

    def __init__(self, source: Path, *, delimiter: str = ",", coerce_int: bool = True) -> None:
        self.source = source
        self._delimiter = delimiter
        self._coerce_int = coerce_int
        self._graphs: dict[bool, Graph] = {}

    @classmethod
    def from_graph(cls, graph: Graph, *, source: Path | None = None) -> GraphEngine:
        """Wrap an already-built graph (the other reading stays file-backed)."""
        engine = cls(source or Path("<memory>"))
        engine._graphs[graph.directed] = graph
        return engine

    def exists(self) -> bool:
        return bool(self._graphs) or self.source.is_file()

    def graph(self, *, directed: bool) -> Graph:
        """Return the requested reading, building it from the file on first access."""
        if directed not in self._graphs:
            self._graphs[directed] = load_graph(
                self.source,
                directed=directed,
                delimiter=self._delimiter,
                coerce_int=self._coerce_int,
            )
        return self._graphs[directed]
