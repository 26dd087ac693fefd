"""Click command class shared by every avowed subcommand.

``--help`` stays short; worked invocations live behind ``--examples``.
"""

from __future__ import annotations

from typing import Any

import click

KIND_CHOICE = click.Choice(["int", "string"])


class AvowedCommand(click.Command):
    """A ``click.Command`` that grows an eager ``--examples`` flag when given examples."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
