"""Subcommand modules for avowed.

Provides register_commands() which uses deferred imports to keep
``avowed --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from avowed.commands.check import check
    from avowed.commands.directives import directives
    from avowed.commands.parse import parse

    cli.add_command(check)
    cli.add_command(parse)
    cli.add_command(directives)
