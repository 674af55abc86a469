"""Subcommand modules for graphcheck.

register_commands() imports lazily so ``graphcheck --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    # --- Groups ---
    from graphcheck.commands.eulerian import eulerian
    from graphcheck.commands.export import export
    from graphcheck.commands.graph import graph
    from graphcheck.commands.hamiltonian import hamiltonian

    cli.add_command(hamiltonian)
    cli.add_command(eulerian)
    cli.add_command(graph)
    cli.add_command(export)

    # --- Standalone commands ---
    from graphcheck.commands.check import check

    cli.add_command(check)
