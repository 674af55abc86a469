"""AppContext — shared Click context for all commands.

Created once by the root group and handed to subcommands via
``@click.pass_obj``. Owns logging setup, per-file engine creation, config
overrides, and result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from graphcheck.config.models import GraphcheckConfig, SearchConfig
from graphcheck.infrastructure.graph.engine import GraphEngine
from graphcheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from graphcheck.config.settings import GraphcheckSettings
    from graphcheck.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GraphcheckSettings) -> None:
        self.settings = settings

        from graphcheck.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from graphcheck.services.telemetry import enable_telemetry

            enable_telemetry()

    def engine(self, edges: Path) -> GraphEngine:
        """Lazy graph source for one edge-list file."""
        return GraphEngine(
            edges,
            delimiter=self.settings.io.delimiter,
            coerce_int=self.settings.io.coerce_int,
        )

    def config(
        self,
        *,
        strategy: str | None = None,
        no_prune: bool = False,
        max_vertices: int | None = None,
        timeout: float | None = None,
    ) -> GraphcheckConfig:
        """Settings-derived config with per-command search overrides applied."""
        cfg = self.settings.config()
        updates: dict[str, Any] = {
            k: v
            for k, v in {
                "strategy": strategy,
                "max_vertices": max_vertices,
                "timeout": timeout,
            }.items()
            if v is not None
        }
        if no_prune:
            updates["prune"] = False
        if not updates:
            return cfg
        search = SearchConfig.model_validate({**cfg.search.model_dump(), **updates})
        return cfg.model_copy(update={"search": search})

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode, where
          they are already part of the payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
