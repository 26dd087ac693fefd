"""Tests for AvowedSettings: unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from avowed.config.settings import AvowedSettings
from tests.conftest import write_file


class TestAvowedSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = AvowedSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.validation.tag_key == "val"
        assert settings.validation.unsupported_fields == "error"
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = AvowedSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        write_file(
            tmp_path / "avowed.toml",
            '[validation]\ntag_key = "check"\n[plugins]\nenabled = false\n',
        )
        settings = AvowedSettings.from_cli(start=tmp_path)
        assert settings.validation.tag_key == "check"
        assert settings.validation.unsupported_fields == "error"
        assert settings.plugins.enabled is False
        assert settings.config_path == (tmp_path / "avowed.toml").resolve()

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        write_file(tmp_path / "avowed.toml", '[validation]\nunsupported_fields = "skip"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = AvowedSettings.from_cli(start=nested)
        assert settings.validation.unsupported_fields == "skip"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = write_file(tmp_path / "custom" / "my.toml", '[validation]\ntag_key = "rule"\n')
        settings = AvowedSettings.from_cli(config_path=str(custom))
        assert settings.validation.tag_key == "rule"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        write_file(tmp_path / "avowed.toml", "[validation\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            AvowedSettings.from_cli(start=tmp_path)

    def test_invalid_policy_rejected(self, tmp_path: Path) -> None:
        write_file(tmp_path / "avowed.toml", '[validation]\nunsupported_fields = "maybe"\n')
        with pytest.raises(Exception):
            AvowedSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = AvowedSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_file(tmp_path / "avowed.toml", '[validation]\ntag_key = "from_toml"\n')
        monkeypatch.setenv("AVOWED_VALIDATION__TAG_KEY", "from_env")
        settings = AvowedSettings.from_cli(start=tmp_path)
        assert settings.validation.tag_key == "from_env"

    def test_env_flag(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AVOWED_QUIET", "true")
        assert AvowedSettings.from_cli(start=tmp_path).quiet is True
