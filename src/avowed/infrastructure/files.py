"""Load record data and field schemas from disk.

Data files (JSON or YAML) hold one record object or a list of them.
Schema files (TOML, JSON or YAML) map field names to directive strings,
either under a ``fields`` table or at the top level::

    [fields]
    port = "range,min=1,max=65535"
    host = "ip"
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from avowed.domain.errors import AvowedError

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
SCHEMA_TABLE = "fields"


class FileLoadError(AvowedError):
    """A data or schema file is missing, unreadable, or has the wrong shape."""

    code = "INVALID_FILE"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")

    def detail(self) -> dict[str, Any]:
        return {"path": str(self.path), "reason": self.reason}


class MissingFileError(FileLoadError):
    code = "FILE_NOT_FOUND"

    def __init__(self, path: Path) -> None:
        super().__init__(path, "file not found")


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader (ruamel's YAML object is stateful)."""
    return YAML(typ="safe", pure=True)


def read_document(path: Path) -> Any:
    """Parse *path* as TOML, YAML or JSON, chosen by suffix (JSON by default).

    Raises:
        MissingFileError: *path* does not exist.
        FileLoadError: The content does not parse.
    """
    if not path.is_file():
        raise MissingFileError(path)
    raw = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            return tomllib.loads(raw)
        if suffix in YAML_SUFFIXES:
            return _new_yaml().load(raw)
        return json.loads(raw)
    except (tomllib.TOMLDecodeError, YAMLError, ValueError) as exc:
        raise FileLoadError(path, f"parse error: {exc}") from exc


def load_records(path: Path) -> list[dict[str, Any]]:
    """Load the records in a data file, always as a list.

    Raises:
        FileLoadError: The document is not an object or a list of objects.
    """
    doc = read_document(path)
    items = doc if isinstance(doc, list) else [doc]
    records: list[dict[str, Any]] = []
    for i, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise FileLoadError(path, f"record {i} is {type(item).__name__}, expected an object")
        records.append(dict(item))
    return records


def load_rules(path: Path) -> dict[str, str]:
    """Load a field-to-directive mapping from a schema file.

    Raises:
        FileLoadError: The schema is not a mapping of field names to strings.
    """
    doc = read_document(path)
    if isinstance(doc, Mapping) and isinstance(doc.get(SCHEMA_TABLE), Mapping):
        doc = doc[SCHEMA_TABLE]
    if not isinstance(doc, Mapping):
        raise FileLoadError(path, "schema must map field names to directive strings")
    rules: dict[str, str] = {}
    for name, directive in doc.items():
        if not isinstance(directive, str):
            raise FileLoadError(path, f"directive for field {name!r} must be a string")
        rules[str(name)] = directive
    return rules
