"""Command: validate record files against a field schema."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from avowed.commands._base import AvowedCommand

if TYPE_CHECKING:
    from avowed.commands._context import AppContext


@click.command(
    cls=AvowedCommand,
    examples="""\
  avowed check users.json --schema user.toml
  avowed check hosts.yaml -s hosts.toml
  avowed --json check users.json -s user.toml""",
)
@click.argument("data", type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "-s",
    "--schema",
    "schema",
    required=True,
    type=click.Path(path_type=Path, dir_okay=False),
    help="TOML, JSON or YAML file mapping field names to directives.",
)
@click.pass_obj
def check(app: AppContext, data: Path, schema: Path) -> None:
    """Validate every record in DATA (JSON or YAML) against a schema."""
    from avowed.services.check import CheckService

    svc = CheckService(app.registry, app.settings.validation)
    app.emit(svc.check_file(data, schema))
