"""Command: decide all four properties for an edge-list file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphcheck.commands._base import GcCommand
from graphcheck.commands._options import edges_argument, search_options
from graphcheck.domain.types import Mode
from graphcheck.services.analysis import AnalysisService

if TYPE_CHECKING:
    from graphcheck.commands._context import AppContext


@click.command(
    cls=GcCommand,
    examples=(
        "graphcheck check graph1.csv",
        "graphcheck check graph1.csv --mode directed",
        "graphcheck check big.csv --max-vertices 20 --timeout 5",
        "graphcheck --json check graph1.csv --strategy recursive",
    ),
)
@edges_argument
@click.option(
    "--mode",
    type=click.Choice([m.value for m in Mode]),
    default=None,
    help="Reading(s) to analyze (default: [graph] mode).",
)
@search_options
@click.pass_obj
def check(
    app: AppContext,
    edges: Path,
    mode: str | None,
    strategy: str | None,
    no_prune: bool,
    max_vertices: int | None,
    timeout: float | None,
) -> None:
    """Decide Hamiltonian/Eulerian path and cycle existence for EDGES."""
    config = app.config(
        strategy=strategy, no_prune=no_prune, max_vertices=max_vertices, timeout=timeout
    )
    app.emit(AnalysisService(app.engine(edges), config).check(mode))
