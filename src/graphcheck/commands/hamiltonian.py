"""Command group: Hamiltonian path/cycle existence."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphcheck.commands._base import GcGroup
from graphcheck.commands._options import edges_argument, reading_option, search_options
from graphcheck.services.analysis import AnalysisService

if TYPE_CHECKING:
    from graphcheck.commands._context import AppContext


@click.group(cls=GcGroup)
def hamiltonian() -> None:
    """Decide whether a simple path/cycle visits every vertex."""


@hamiltonian.command(
    examples=(
        "graphcheck hamiltonian path graph1.csv",
        "graphcheck --json hamiltonian path graph1.csv --undirected",
    )
)
@edges_argument
@reading_option
@search_options
@click.pass_obj
def path(
    app: AppContext,
    edges: Path,
    directed: bool | None,
    strategy: str | None,
    no_prune: bool,
    max_vertices: int | None,
    timeout: float | None,
) -> None:
    """Does a Hamiltonian path exist?"""
    config = app.config(
        strategy=strategy, no_prune=no_prune, max_vertices=max_vertices, timeout=timeout
    )
    app.emit(AnalysisService(app.engine(edges), config).hamiltonian_path(directed=directed))


@hamiltonian.command(
    examples=(
        "graphcheck hamiltonian cycle graph1.csv",
        "graphcheck hamiltonian cycle graph1.csv --strategy recursive",
        "graphcheck -q hamiltonian cycle big.csv --timeout 10 --max-vertices 40",
    )
)
@edges_argument
@reading_option
@search_options
@click.pass_obj
def cycle(
    app: AppContext,
    edges: Path,
    directed: bool | None,
    strategy: str | None,
    no_prune: bool,
    max_vertices: int | None,
    timeout: float | None,
) -> None:
    """Does a Hamiltonian cycle exist?"""
    config = app.config(
        strategy=strategy, no_prune=no_prune, max_vertices=max_vertices, timeout=timeout
    )
    app.emit(AnalysisService(app.engine(edges), config).hamiltonian_cycle(directed=directed))
