"""Click base classes with ``--examples`` support.

Commands declare their examples as a tuple of ready-to-paste command
lines. ``--examples`` on a command prints its own lines; on a group it
prints the group's lines followed by every subcommand's, in registration
order, so ``graphcheck --examples`` is a complete cheat sheet.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

_EXAMPLES_HINT = "Run with --examples for sample invocations."


def collect_examples(cmd: click.Command) -> list[str]:
    """Example lines of *cmd* and, for groups, of all nested subcommands."""
    lines = list(getattr(cmd, "examples", ()))
    if isinstance(cmd, click.Group):
        for sub in cmd.commands.values():
            lines.extend(line for line in collect_examples(sub) if line not in lines)
    return lines


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    lines = collect_examples(ctx.command)
    if lines:
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo("\n".join(f"  {line}" for line in lines))
    else:
        click.echo(f"No examples for '{ctx.command_path}'.")
    ctx.exit(0)


class _ExamplesMixin:
    """Eager ``--examples`` flag plus a help epilog pointing at it."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_show_examples,
                help="Show usage examples.",
            )
        )

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if collect_examples(self):  # type: ignore[arg-type]
            formatter.write_paragraph()
            formatter.write_text(_EXAMPLES_HINT)


class GcCommand(_ExamplesMixin, click.Command):
    """Command that accepts an ``examples`` tuple."""


class GcGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands are GcCommands by default."""

    command_class = GcCommand
