"""BaseService — shared plumbing for graphcheck services.

Every service receives a :class:`GraphEngine` (the lazily loaded edge-list
source) and the analysis config. Domain and I/O exceptions are turned into
failed ServiceResults here so services never leak them to the CLI.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphcheck.config.models import GraphcheckConfig
from graphcheck.services.result import ServiceResult

if TYPE_CHECKING:
    from graphcheck.domain.errors import GraphcheckError
    from graphcheck.infrastructure.graph.engine import GraphEngine
    from graphcheck.infrastructure.graph.store import Graph

logger = logging.getLogger(__name__)


def reading_name(directed: bool) -> str:
    return "directed" if directed else "undirected"


class BaseService:
    """Base for service classes.

    Usage::

        class AnalysisService(BaseService):
            def check(self) -> ServiceResult:
                if (missing := self._missing_source("check")) is not None:
                    return missing
                graph = self._graph(directed=True)
                ...
    """

    def __init__(self, engine: GraphEngine, config: GraphcheckConfig | None = None) -> None:
        self._engine = engine
        self._config = config or GraphcheckConfig()

    def _graph(self, *, directed: bool) -> Graph:
        return self._engine.graph(directed=directed)

    def _missing_source(self, op: str) -> ServiceResult | None:
        """Return a NOT_FOUND result when the edge-list file does not exist."""
        if self._engine.exists():
            return None
        return ServiceResult.failure(
            op,
            "NOT_FOUND",
            f"Edge list '{self._engine.source}' not found",
            path=str(self._engine.source),
        )

    @staticmethod
    def _failure(op: str, exc: GraphcheckError) -> ServiceResult:
        """Convert a graphcheck exception into a failed result."""
        logger.debug("%s failed: %s", op, exc, exc_info=True)
        detail = {
            key: value
            for key, value in vars(exc).items()
            if not key.startswith("_") and value is not None
        }
        return ServiceResult.failure(op, exc.code, str(exc), **detail)
