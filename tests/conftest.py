"""Shared pytest fixtures and test helpers for avowed tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from avowed.engine.registry import DirectiveRegistry, build_registry
from avowed.engine.walker import RecordValidator


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None]:
    """Keep user config and AVOWED_* env vars out of every test."""
    for name in (
        "AVOWED_CONFIG",
        "AVOWED_JSON_OUTPUT",
        "AVOWED_QUIET",
        "AVOWED_VERBOSE",
        "AVOWED_LOG_JSON",
        "AVOWED_VALIDATION__TAG_KEY",
        "AVOWED_VALIDATION__UNSUPPORTED_FIELDS",
        "AVOWED_PLUGINS__ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and avowed logger state; the CLI reconfigures logging per invocation."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    avowed_logger = logging.getLogger("avowed")
    avowed_level = avowed_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    avowed_logger.setLevel(avowed_level)


@pytest.fixture(scope="session")
def registry() -> DirectiveRegistry:
    """Frozen built-in registry shared across tests (read-only)."""
    return build_registry()


@pytest.fixture
def walker(registry: DirectiveRegistry) -> RecordValidator:
    return RecordValidator(registry)


def write_file(path: Path, content: str) -> Path:
    """Write *content* to *path*, creating parents, and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
