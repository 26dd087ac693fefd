"""Record introspection: read field names, annotations, and values.

This is the adapter between host-language records and the walker. Supported
record shapes, each enumerated in declaration order:

- dataclass instances: ``field(metadata={"val": ...})`` (see :func:`rule`)
  or ``Annotated[int, Rule(...)]``
- pydantic models: ``Annotated[int, Rule(...)]`` or
  ``Field(json_schema_extra={"val": ...})``
- :class:`AnnotatedRecord`: a plain mapping plus explicit field rules
- any other object whose class annotations carry ``Rule`` markers
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Annotated, Any, Final, get_origin, get_type_hints

from pydantic import BaseModel

logger = logging.getLogger(__name__)

TAG_KEY: Final = "val"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


@dataclass(frozen=True)
class Rule:
    """``Annotated`` marker carrying a directive string.

    Example::

        @dataclass
        class Port:
            number: Annotated[int, Rule("range,min=1,max=65535")]
    """

    directive: str


@dataclass(frozen=True)
class AnnotatedRecord:
    """A mapping record with its field rules supplied separately."""

    values: Mapping[str, Any]
    rules: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RecordField:
    """One field as seen by the walker. ``annotation`` is None for unannotated fields."""

    name: str
    annotation: str | None
    value: Any


def rule(directive: str, *, tag_key: str = TAG_KEY, **kwargs: Any) -> Any:
    """Dataclass field carrying *directive* in its metadata.

    Accepts the same keyword arguments as :func:`dataclasses.field`::

        @dataclass
        class User:
            name: str = rule("lengthrange,min=2,max=40", default="anon")
    """
    metadata = {**kwargs.pop("metadata", {}), tag_key: directive}
    return dataclasses.field(metadata=metadata, **kwargs)


def iter_fields(record: object, *, tag_key: str = TAG_KEY) -> Iterator[RecordField]:
    """Yield every field of *record* in declaration order.

    Raises:
        TypeError: *record* is a class, or a bare mapping without rules.
    """
    if isinstance(record, AnnotatedRecord):
        yield from _mapping_fields(record)
    elif isinstance(record, type):
        msg = f"expected a record instance, got class {record.__name__}"
        raise TypeError(msg)
    elif dataclasses.is_dataclass(record):
        yield from _dataclass_fields(record, tag_key)
    elif isinstance(record, BaseModel):
        yield from _model_fields(record, tag_key)
    elif isinstance(record, Mapping):
        msg = "mappings carry no field annotations; wrap them in AnnotatedRecord"
        raise TypeError(msg)
    else:
        yield from _annotated_attributes(record)


def _rule_from_hint(hint: Any) -> str | None:
    if get_origin(hint) is not Annotated:
        return None
    return _rule_from_metadata(hint.__metadata__)


def _rule_from_metadata(metadata: Any) -> str | None:
    for item in metadata:
        if isinstance(item, Rule):
            return item.directive
    return None


def _type_hints(cls: type) -> dict[str, Any]:
    """``get_type_hints`` that gives up on names it cannot resolve.

    String annotations may name ``TYPE_CHECKING``-only imports or classes
    local to a function; such records simply carry no ``Annotated`` rules.
    """
    try:
        return get_type_hints(cls, include_extras=True)
    except NameError:
        logger.debug("Unresolvable annotations on %s; ignoring Annotated rules", cls.__name__)
        return {}


def _mapping_fields(record: AnnotatedRecord) -> Iterator[RecordField]:
    for name, value in record.values.items():
        yield RecordField(name, record.rules.get(name), value)
    for name, annotation in record.rules.items():
        if name not in record.values:
            yield RecordField(name, annotation, MISSING)


def _dataclass_fields(record: Any, tag_key: str) -> Iterator[RecordField]:
    hints: dict[str, Any] | None = None
    for f in dataclasses.fields(record):
        annotation = f.metadata.get(tag_key)
        if annotation is None:
            if hints is None:
                hints = _type_hints(type(record))
            annotation = _rule_from_hint(hints.get(f.name))
        yield RecordField(f.name, annotation, getattr(record, f.name))


def _model_fields(record: BaseModel, tag_key: str) -> Iterator[RecordField]:
    for name, info in type(record).model_fields.items():
        annotation = _rule_from_metadata(info.metadata)
        extra = info.json_schema_extra
        if annotation is None and isinstance(extra, dict):
            raw = extra.get(tag_key)
            annotation = raw if isinstance(raw, str) else None
        yield RecordField(name, annotation, getattr(record, name))


def _annotated_attributes(record: object) -> Iterator[RecordField]:
    for name, hint in _type_hints(type(record)).items():
        yield RecordField(name, _rule_from_hint(hint), getattr(record, name, MISSING))
