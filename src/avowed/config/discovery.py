"""Locate ``avowed.toml``.

Lookup order: ``--config`` path, then the ``AVOWED_CONFIG`` env var, then the
nearest ``avowed.toml`` in the start directory or any of its parents.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "avowed.toml"
CONFIG_ENV_VAR = "AVOWED_CONFIG"


def _existing_file(raw: str | Path) -> Path | None:
    path = Path(raw)
    return path if path.is_file() else None


def _ancestors(start: Path) -> Iterator[Path]:
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A set ``AVOWED_CONFIG`` short-circuits the walk, even when it names a
    file that does not exist.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return _existing_file(override)
    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(config_path: str | Path | None, start: Path | None = None) -> Path | None:
    """Apply ``--config`` if given, otherwise fall back to :func:`find_config`."""
    if config_path:
        return _existing_file(config_path)
    return find_config(start)
