"""AvowedSettings: CLI flags, env vars and ``avowed.toml`` merged into one object.

Highest priority first:

1. keyword arguments (the CLI flags Click parsed)
2. ``AVOWED_*`` env vars, ``__`` separating section and key
   (``AVOWED_VALIDATION__TAG_KEY=check``)
3. the discovered ``avowed.toml``
4. defaults baked into the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from avowed.config.discovery import resolve_config_path
from avowed.config.models import PluginsConfig, ValidationConfig

# File chosen by from_cli(), visible to settings_customise_sources() during __init__.
_active_toml: ContextVar[Path | None] = ContextVar("avowed_active_toml", default=None)


class AvowedSettings(BaseSettings):
    """Everything a CLI invocation needs to know.

    Attributes:
        config_path: The ``avowed.toml`` that was loaded, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="AVOWED_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = _active_toml.get()
        if toml_path is None:
            return (init_settings, env_settings)
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> AvowedSettings:
        """Build settings for one invocation.

        Raises:
            click.ClickException: The selected ``avowed.toml`` is not valid TOML.
        """
        toml_path = resolve_config_path(config_path, start)
        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _active_toml.reset(token)
