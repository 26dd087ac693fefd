"""Pluggy hook specifications for avowed.

One build-time hook lets installed packages contribute directives to the
registry before it is frozen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from avowed.engine.registry import ValidatorSpec

PROJECT_NAME = "avowed"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class AvowedHookSpec:
    """Hook specifications for the avowed plugin system."""

    @hookspec
    def avowed_directives(self) -> list[ValidatorSpec]:
        """Return extra registry entries.

        Collisions with built-ins or earlier plugins are skipped with a warning.
        """
