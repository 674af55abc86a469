"""Command group: export a graph as an edge list or JSON adjacency."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphcheck.commands._base import GcGroup
from graphcheck.commands._options import edges_argument, reading_option
from graphcheck.services.export import ExportService

if TYPE_CHECKING:
    from graphcheck.commands._context import AppContext

_output_option = click.option(
    "--output",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Destination file.",
)


@click.group(cls=GcGroup)
def export() -> None:
    """Write the loaded graph back to disk."""


@export.command(
    examples=(
        "graphcheck export edges graph1.csv --output clean.csv",
    )
)
@edges_argument
@_output_option
@reading_option
@click.pass_obj
def edges(app: AppContext, edges: Path, output: Path, directed: bool | None) -> None:
    """Deduplicated ``source,destination`` edge list."""
    app.emit(
        ExportService(app.engine(edges), app.config()).export_edge_list(output, directed=directed)
    )


@export.command(
    examples=(
        "graphcheck export adjacency graph1.csv --output graph1.json",
    )
)
@edges_argument
@_output_option
@reading_option
@click.pass_obj
def adjacency(app: AppContext, edges: Path, output: Path, directed: bool | None) -> None:
    """JSON adjacency document."""
    app.emit(
        ExportService(app.engine(edges), app.config()).export_adjacency(output, directed=directed)
    )
