"""AnalysisService — the four existence decisions over an edge-list file.

``check`` runs all four deciders for one or both readings of the file,
the way the edge list is reported as a directed and as an undirected
graph side by side. Single-property operations back the ``hamiltonian``
and ``eulerian`` commands.
"""

from __future__ import annotations

from typing import Any

from graphcheck.domain.degrees import components
from graphcheck.domain.errors import GraphcheckError
from graphcheck.domain.eulerian import has_eulerian_cycle, has_eulerian_path
from graphcheck.domain.hamiltonian import has_hamiltonian_cycle, has_hamiltonian_path
from graphcheck.domain.types import Mode, Property
from graphcheck.infrastructure.graph.store import Graph
from graphcheck.services.base import BaseService, reading_name
from graphcheck.services.result import ServiceResult
from graphcheck.services.telemetry import trace_span, traced


class AnalysisService(BaseService):
    """Decides Hamiltonian and Eulerian path/cycle existence."""

    def _decide(self, prop: Property, graph: Graph, directed: bool) -> bool:
        search = self._config.search
        match prop:
            case Property.HAMILTONIAN_PATH:
                return has_hamiltonian_path(
                    graph, strategy=search.strategy, prune=search.prune, limits=search.limits()
                )
            case Property.HAMILTONIAN_CYCLE:
                return has_hamiltonian_cycle(
                    graph, strategy=search.strategy, prune=search.prune, limits=search.limits()
                )
            case Property.EULERIAN_PATH:
                return has_eulerian_path(graph, directed)
            case Property.EULERIAN_CYCLE:
                return has_eulerian_cycle(graph, directed)
        raise ValueError(f"Unknown property: {prop}")

    @staticmethod
    def _caveats(prop: Property, graph: Graph, directed: bool, exists: bool) -> list[str]:
        """Warnings about answers that depend on the degree conventions used."""
        warnings: list[str] = []
        if prop is Property.EULERIAN_PATH and directed and exists:
            comps = [c for c in components(graph) if len(c) > 1 or graph.neighbors(c[0])]
            if len(comps) > 1:
                warnings.append(
                    "directed Eulerian path criterion checks degrees only; "
                    f"graph has {len(comps)} weakly connected components with edges"
                )
        if (
            prop in (Property.EULERIAN_PATH, Property.EULERIAN_CYCLE)
            and not directed
            and graph.self_loops()
        ):
            warnings.append("undirected self-loops count once toward vertex degree")
        return warnings

    # ------------------------------------------------------------------
    # check — all four properties
    # ------------------------------------------------------------------

    @traced
    def check(self, mode: Mode | str | None = None) -> ServiceResult:
        """Decide all four properties for the requested reading(s).

        Args:
            mode: ``directed``, ``undirected`` or ``both``; defaults to the
                ``[graph] mode`` config value.
        """
        if (missing := self._missing_source("check")) is not None:
            return missing
        mode = Mode(mode or self._config.graph.mode)

        readings: dict[str, dict[str, Any]] = {}
        warnings: list[str] = []
        try:
            for directed in mode.readings():
                name = reading_name(directed)
                with trace_span(name) as span:
                    graph = self._graph(directed=directed)
                    row: dict[str, Any] = {
                        "vertices": len(graph),
                        "edges": graph.edge_count(),
                    }
                    for prop in Property:
                        row[prop.value] = self._decide(prop, graph, directed)
                        warnings.extend(
                            f"{name}: {w}"
                            for w in self._caveats(prop, graph, directed, row[prop.value])
                        )
                    if span:
                        span.annotate("vertices", row["vertices"])
                        span.annotate("edges", row["edges"])
                readings[name] = row
        except GraphcheckError as exc:
            return self._failure("check", exc)

        return ServiceResult(
            ok=True,
            op="check",
            data={"source": str(self._engine.source), "mode": mode.value, "readings": readings},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # single-property decisions
    # ------------------------------------------------------------------

    @traced
    def decide(self, prop: Property | str, *, directed: bool | None = None) -> ServiceResult:
        """Decide one property for one reading.

        Args:
            prop: Which property to decide.
            directed: Reading to use; defaults to ``[graph] directed``.
        """
        prop = Property(prop)
        if (missing := self._missing_source(prop.value)) is not None:
            return missing
        if directed is None:
            directed = self._config.graph.directed

        try:
            graph = self._graph(directed=directed)
            with trace_span(prop.value):
                exists = self._decide(prop, graph, directed)
        except GraphcheckError as exc:
            return self._failure(prop.value, exc)

        return ServiceResult(
            ok=True,
            op=prop.value,
            data={
                "source": str(self._engine.source),
                "directed": directed,
                "exists": exists,
                "vertices": len(graph),
                "edges": graph.edge_count(),
            },
            warnings=self._caveats(prop, graph, directed, exists),
        )

    def hamiltonian_path(self, *, directed: bool | None = None) -> ServiceResult:
        return self.decide(Property.HAMILTONIAN_PATH, directed=directed)

    def hamiltonian_cycle(self, *, directed: bool | None = None) -> ServiceResult:
        return self.decide(Property.HAMILTONIAN_CYCLE, directed=directed)

    def eulerian_path(self, *, directed: bool | None = None) -> ServiceResult:
        return self.decide(Property.EULERIAN_PATH, directed=directed)

    def eulerian_cycle(self, *, directed: bool | None = None) -> ServiceResult:
        return self.decide(Property.EULERIAN_CYCLE, directed=directed)

