"""Option decorators shared by several commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click

from graphcheck.domain.types import Strategy

edges_argument = click.argument(
    "edges",
    type=click.Path(dir_okay=False, path_type=Path),
)

reading_option = click.option(
    "--directed/--undirected",
    "directed",
    default=None,
    help="Reading of the edge list (default: [graph] directed).",
)


def search_options[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Apply Hamiltonian search overrides to a subcommand."""
    func = click.option(
        "--timeout",
        type=click.FloatRange(min=0),
        default=None,
        help="Abort the search after this many seconds (0 = none).",
    )(func)
    func = click.option(
        "--max-vertices",
        type=click.IntRange(min=0),
        default=None,
        help="Refuse to search graphs larger than this (0 = unbounded).",
    )(func)
    func = click.option(
        "--no-prune",
        "no_prune",
        is_flag=True,
        default=False,
        help="Disable degree/connectivity fast-fail checks.",
    )(func)
    func = click.option(
        "--strategy",
        type=click.Choice([s.value for s in Strategy]),
        default=None,
        help="Backtracking implementation.",
    )(func)
    return func
