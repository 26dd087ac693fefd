"""Sections of ``avowed.toml``.

Every key has a default here, so a config file only lists what it changes::

    [validation]
    tag_key = "check"
    unsupported_fields = "skip"

    [plugins]
    enabled = false
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

UnsupportedFields = Literal["error", "skip"]


class ValidationConfig(BaseModel):
    """[validation]: how records are walked."""

    model_config = {"frozen": True}

    tag_key: str = "val"
    unsupported_fields: UnsupportedFields = "error"


class PluginsConfig(BaseModel):
    """[plugins]: whether entry-point plugins may add directives."""

    model_config = {"frozen": True}

    enabled: bool = True
