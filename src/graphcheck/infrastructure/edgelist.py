"""Edge-list files — two-column ``source,destination`` CSV, no header.

Ingestion suppresses duplicate rows (first occurrence wins) and skips
blank lines. Integer-looking tokens become ``int`` so ``0,1`` and the
vertices of a programmatically built graph compare equal.

Export writes one line per stored adjacency entry. Failures on either side
surface as :class:`EdgeListError`; a failed export never touches the
in-memory graph.
"""

from __future__ import annotations

import csv
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from graphcheck.domain.errors import EdgeListError
from graphcheck.infrastructure.graph.store import Graph

if TYPE_CHECKING:
    from graphcheck.domain.types import Edge, Vertex

logger = logging.getLogger(__name__)

_INT_TOKEN = re.compile(r"[+-]?\d+")


def parse_vertex(token: str, *, coerce_int: bool = True) -> Vertex:
    """Turn a raw CSV field into a vertex key."""
    token = token.strip()
    if coerce_int and _INT_TOKEN.fullmatch(token):
        return int(token)
    return token


def read_edge_list(
    path: Path,
    *,
    delimiter: str = ",",
    coerce_int: bool = True,
) -> list[Edge]:
    """Read unique edges from *path* in first-seen order.

    Raises:
        EdgeListError: unreadable file, or a row without exactly two
            non-empty fields.
    """
    edges: list[Edge] = []
    seen: set[Edge] = set()
    try:
        with path.open(newline="", encoding="utf-8") as fh:
            for lineno, row in enumerate(csv.reader(fh, delimiter=delimiter), start=1):
                if not row or all(not field.strip() for field in row):
                    continue
                if len(row) != 2 or not row[0].strip() or not row[1].strip():
                    msg = f"{path}:{lineno}: expected 'source{delimiter}destination', got {row!r}"
                    raise EdgeListError(msg, path=str(path), line=lineno)
                edge = (
                    parse_vertex(row[0], coerce_int=coerce_int),
                    parse_vertex(row[1], coerce_int=coerce_int),
                )
                if edge in seen:
                    continue
                seen.add(edge)
                edges.append(edge)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise EdgeListError(f"Cannot read {path}: {exc}", path=str(path)) from exc

    logger.debug("read %d unique edges from %s", len(edges), path)
    return edges


def load_graph(
    path: Path,
    *,
    directed: bool,
    delimiter: str = ",",
    coerce_int: bool = True,
) -> Graph:
    """Build the directed or undirected reading of an edge-list file."""
    edges = read_edge_list(path, delimiter=delimiter, coerce_int=coerce_int)
    return Graph.from_edges(edges, directed=directed)


def write_edge_list(graph: Graph, path: Path, *, delimiter: str = ",") -> int:
    """Write every stored adjacency entry of *graph* to *path*.

    Creates parent directories. Returns the number of lines written.
    """
    edges = graph.edges()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh, delimiter=delimiter, lineterminator="\n")
            writer.writerows(edges)
    except OSError as exc:
        raise EdgeListError(f"Cannot write {path}: {exc}", path=str(path)) from exc
    logger.debug("wrote %d edges to %s", len(edges), path)
    return len(edges)
