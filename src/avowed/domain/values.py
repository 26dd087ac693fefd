"""Field value variant and per-field descriptor.

Only two field kinds are validated: integers and strings. ``bool`` is a
subclass of ``int`` in Python but is not treated as an integer field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from avowed.domain.directives import Directive


class FieldKind(StrEnum):
    """Static kind of a validated field, used as half of the registry key."""

    INT = "int"
    STRING = "string"


@dataclass(frozen=True)
class FieldValue:
    """Tagged runtime value: ``Int(i) | Str(s)``."""

    kind: FieldKind
    value: int | str

    @classmethod
    def of(cls, value: object) -> FieldValue | None:
        """Wrap *value*, or return None when its type is not supported."""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return cls(FieldKind.INT, value)
        if isinstance(value, str):
            return cls(FieldKind.STRING, value)
        return None


@dataclass(frozen=True)
class FieldDescriptor:
    """Everything the walker knows about one annotated field at validation time."""

    field_name: str
    kind: FieldKind
    directive: Directive
    value: int | str
