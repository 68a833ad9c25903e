"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Loads plugins lazily and centralizes result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from solidctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from solidctl.config.settings import SolidSettings
    from solidctl.plugins.manager import PluginManager
    from solidctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SolidSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from solidctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager | None:
        """The plugin manager (loaded on first access), or None if disabled."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from solidctl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            local_dir = self.settings.project_root / self.settings.plugins.local_dir
            self._plugins.discover_and_load(local_dir=local_dir)
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr in human mode.
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
