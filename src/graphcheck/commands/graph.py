"""Command group: inspect a loaded graph."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphcheck.commands._base import GcGroup
from graphcheck.commands._options import edges_argument, reading_option
from graphcheck.services.graph import GraphService

if TYPE_CHECKING:
    from graphcheck.commands._context import AppContext


@click.group(cls=GcGroup)
def graph() -> None:
    """Inspect vertices, degrees, and adjacency."""


@graph.command(
    examples=(
        "graphcheck graph summary graph1.csv",
        "graphcheck --json graph summary graph1.csv --undirected",
    )
)
@edges_argument
@reading_option
@click.pass_obj
def summary(app: AppContext, edges: Path, directed: bool | None) -> None:
    """Counts, self-loops, components, and connectivity."""
    app.emit(GraphService(app.engine(edges), app.config()).summary(directed=directed))


@graph.command(
    examples=(
        "graphcheck graph degrees graph1.csv",
        "graphcheck graph degrees graph1.csv --undirected",
    )
)
@edges_argument
@reading_option
@click.pass_obj
def degrees(app: AppContext, edges: Path, directed: bool | None) -> None:
    """Per-vertex degree table."""
    app.emit(GraphService(app.engine(edges), app.config()).degrees(directed=directed))


@graph.command(
    examples=(
        "graphcheck graph neighbors graph1.csv 0",
        "graphcheck -q graph neighbors graph1.csv 2 --undirected",
    )
)
@edges_argument
@click.argument("vertex")
@reading_option
@click.pass_obj
def neighbors(app: AppContext, edges: Path, vertex: str, directed: bool | None) -> None:
    """Neighbors of VERTEX in stored order."""
    app.emit(GraphService(app.engine(edges), app.config()).neighbors(vertex, directed=directed))


@graph.command(
    examples=(
        "graphcheck graph show graph1.csv",
        "graphcheck graph show graph1.csv --undirected",
    )
)
@edges_argument
@reading_option
@click.pass_obj
def show(app: AppContext, edges: Path, directed: bool | None) -> None:
    """Print the adjacency list."""
    app.emit(GraphService(app.engine(edges), app.config()).show(directed=directed))
