"""Root CLI group: global output flags, settings, and command registration.

Global flags go before the subcommand (``graphcheck --json check g.csv``);
analysis options such as ``--strategy`` belong to the subcommand.
"""

from __future__ import annotations

import click

from graphcheck import __version__
from graphcheck.commands import register_commands
from graphcheck.commands._base import GcGroup
from graphcheck.commands._context import AppContext
from graphcheck.config.settings import GraphcheckSettings


@click.group(
    cls=GcGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    examples=(
        "graphcheck check graph1.csv",
        "graphcheck -c ci.toml --json check graph1.csv",
        "GRAPHCHECK_SEARCH__TIMEOUT=5 graphcheck -q check big.csv",
    ),
)
@click.version_option(version=__version__, prog_name="graphcheck")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="graphcheck.toml to use instead of walk-up discovery.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """graphcheck — Hamiltonian and Eulerian checks for edge-list graphs.

    EDGES arguments are two-column ``source,destination`` files without a
    header. Each file can be read as a directed or an undirected graph.
    """
    if quiet and verbose:
        raise click.UsageError("--quiet and --verbose cannot be combined")
    settings = GraphcheckSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
