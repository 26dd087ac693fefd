"""Per-invocation state handed to subcommands as ``ctx.obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from avowed.config.logging import configure_logging
from avowed.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from avowed.config.settings import AvowedSettings
    from avowed.engine.registry import DirectiveRegistry
    from avowed.services.result import ServiceResult


class AppContext:
    """Settings, the directive registry, and result printing for one CLI run.

    Logging is configured on construction. The registry is only built when a
    command asks for it, so ``--help`` never imports plugins.
    """

    def __init__(self, settings: AvowedSettings) -> None:
        self.settings = settings
        self._registry: DirectiveRegistry | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output(self) -> OutputSettings:
        s = self.settings
        return OutputSettings(json_output=s.json_output, quiet=s.quiet, verbose=s.verbose)

    @property
    def registry(self) -> DirectiveRegistry:
        if self._registry is None:
            self._registry = self._build_registry()
        return self._registry

    def _build_registry(self) -> DirectiveRegistry:
        from avowed.engine.registry import build_registry

        if not self.settings.plugins.enabled:
            return build_registry()

        from avowed.plugins.manager import PluginManager

        plugins = PluginManager()
        plugins.discover_and_load()
        return build_registry(plugins=plugins)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 if it failed.

        Successful output goes to stdout and failures to stderr, so
        ``avowed --json check ... | jq`` only ever sees a passing payload.
        Warnings are printed to stderr unless they are already part of the
        JSON payload.
        """
        output = self.output
        click.echo(format_result(result, settings=output), err=not result.ok)
        if result.ok and not output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
