"""Command: list the directive vocabulary."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from avowed.commands._base import KIND_CHOICE, AvowedCommand

if TYPE_CHECKING:
    from avowed.commands._context import AppContext


@click.command(
    cls=AvowedCommand,
    examples="""\
  avowed directives
  avowed directives --type int
  avowed -q directives""",
)
@click.option(
    "-t",
    "--type",
    "kind",
    type=KIND_CHOICE,
    default=None,
    help="Only list directives for this field type.",
)
@click.pass_obj
def directives(app: AppContext, kind: str | None) -> None:
    """List registered directives and their parameters."""
    from avowed.domain.values import FieldKind
    from avowed.services.directives import DirectiveService

    svc = DirectiveService(app.registry, app.settings.validation)
    app.emit(svc.directives(FieldKind(kind) if kind else None))
