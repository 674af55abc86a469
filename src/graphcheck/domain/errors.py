"""Exception hierarchy for graphcheck.

Deciders always return a bool for well-formed graphs. The only failures
they raise are resource-exhaustion conditions on exponential searches.
Edge-list I/O failures belong to the ingestion/export collaborator.
"""

from __future__ import annotations


class GraphcheckError(Exception):
    """Base class for all graphcheck errors."""

    code = "GRAPHCHECK_ERROR"


class ResourceExhausted(GraphcheckError):
    """A search ran past a caller-imposed or interpreter limit."""

    code = "RESOURCE_EXHAUSTED"


class GraphTooLarge(ResourceExhausted):
    """Vertex count exceeds the configured ``max_vertices`` bound."""

    code = "GRAPH_TOO_LARGE"

    def __init__(self, vertices: int, limit: int) -> None:
        super().__init__(f"Graph has {vertices} vertices; search limit is {limit}")
        self.vertices = vertices
        self.limit = limit


class SearchTimeout(ResourceExhausted):
    """Hamiltonian search did not finish before its deadline."""

    code = "SEARCH_TIMEOUT"

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Search exceeded {timeout:g}s deadline")
        self.timeout = timeout


class SearchDepthExceeded(ResourceExhausted):
    """Recursive search hit the interpreter recursion limit."""

    code = "SEARCH_DEPTH_EXCEEDED"

    def __init__(self, vertices: int) -> None:
        super().__init__(
            f"Recursive search over {vertices} vertices exceeded the recursion limit; "
            "use the iterative strategy"
        )
        self.vertices = vertices


class EdgeListError(GraphcheckError):
    """An edge-list file could not be read or written."""

    code = "INVALID_EDGE_LIST"

    def __init__(self, message: str, *, path: str | None = None, line: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.line = line
