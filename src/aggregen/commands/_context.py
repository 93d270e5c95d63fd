"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging, owns the plugin manager, and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aggregen.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from aggregen.config.settings import AggSettings
    from aggregen.plugins.manager import PluginManager
    from aggregen.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: AggSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from aggregen.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (loaded lazily on first access)."""
        if self._plugins is None:
            from aggregen.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load()
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr unless in JSON
          mode, where they are already part of the payload.
        * Failure: writes to stderr, exits with code 1.
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
