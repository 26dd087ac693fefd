"""Command: parse an annotation string and optionally resolve it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from avowed.commands._base import KIND_CHOICE, AvowedCommand

if TYPE_CHECKING:
    from avowed.commands._context import AppContext


@click.command(
    cls=AvowedCommand,
    examples="""\
  avowed parse "range,min=4,max=6"
  avowed parse "range,min=4,max=6" --type int
  avowed parse 'regex,pattern=^[a-z]+$' --type string""",
)
@click.argument("annotation")
@click.option(
    "-t",
    "--type",
    "kind",
    type=KIND_CHOICE,
    default=None,
    help="Also resolve the directive for a field of this type.",
)
@click.pass_obj
def parse(app: AppContext, annotation: str, kind: str | None) -> None:
    """Parse ANNOTATION into a directive name and parameters."""
    from avowed.domain.values import FieldKind
    from avowed.services.directives import DirectiveService

    svc = DirectiveService(app.registry, app.settings.validation)
    app.emit(svc.parse(annotation, FieldKind(kind) if kind else None))
