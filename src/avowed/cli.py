"""``avowed`` entry point: global flags, settings, and subcommand registration."""

from __future__ import annotations

from typing import Any

import click

from avowed import __version__
from avowed.commands import register_commands
from avowed.commands._context import AppContext
from avowed.config.settings import AvowedSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="avowed")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only names or a status line.")
@click.option("-v", "--verbose", is_flag=True, help="Show extra columns and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("--no-plugins", is_flag=True, help="Use only the built-in directives.")
@click.option(
    "-c", "--config", "config_path", default=None, help="Read this file instead of avowed.toml."
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, no_plugins: bool, **flags: Any) -> None:
    """Check records against per-field directives such as ``range,min=1,max=10``."""
    overrides: dict[str, Any] = {k: v for k, v in flags.items() if v}
    if no_plugins:
        overrides["plugins"] = {"enabled": False}
    settings = AvowedSettings.from_cli(config_path=config_path, **overrides)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
