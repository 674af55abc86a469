"""Command group: Eulerian path/cycle existence."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphcheck.commands._base import GcGroup
from graphcheck.commands._options import edges_argument, reading_option
from graphcheck.services.analysis import AnalysisService

if TYPE_CHECKING:
    from graphcheck.commands._context import AppContext


@click.group(cls=GcGroup)
def eulerian() -> None:
    """Decide whether a walk can use every edge exactly once."""


@eulerian.command(
    examples=(
        "graphcheck eulerian path graph1.csv",
        "graphcheck -q eulerian path graph1.csv --undirected",
    )
)
@edges_argument
@reading_option
@click.pass_obj
def path(app: AppContext, edges: Path, directed: bool | None) -> None:
    """Does an Eulerian path exist?"""
    app.emit(AnalysisService(app.engine(edges), app.config()).eulerian_path(directed=directed))


@eulerian.command(
    examples=(
        "graphcheck eulerian cycle graph1.csv",
        "graphcheck --json eulerian cycle graph1.csv --directed",
    )
)
@edges_argument
@reading_option
@click.pass_obj
def cycle(app: AppContext, edges: Path, directed: bool | None) -> None:
    """Does an Eulerian cycle exist?"""
    app.emit(AnalysisService(app.engine(edges), app.config()).eulerian_cycle(directed=directed))
