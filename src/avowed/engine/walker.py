"""Struct walker: validate every annotated field of a record.

INVARIANT: Fail-fast. The walker stops at the first failing field and
returns one error naming it; remaining fields are not visited. A record
passes only when every annotated field has been walked without failure.

Parser and dispatcher errors travel through the same channel as bad
values: all are wrapped in ``ValidationFailed(field, cause)``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

from avowed.domain.directives import parse_directive
from avowed.domain.errors import (
    AvowedError,
    DirectiveError,
    DispatchError,
    MissingField,
    UnsupportedFieldType,
    ValidationFailed,
)
from avowed.domain.values import FieldDescriptor, FieldValue
from avowed.engine.dispatcher import Dispatcher
from avowed.engine.introspection import MISSING, TAG_KEY, RecordField, iter_fields
from avowed.engine.registry import DirectiveRegistry, build_registry

logger = logging.getLogger(__name__)

UnsupportedPolicy = Literal["error", "skip"]


@dataclass(frozen=True)
class FieldOutcome:
    """Result for one annotated field."""

    field_name: str
    ok: bool
    error: AvowedError | None = None


class RecordValidator:
    """Walks records and drives parse -> resolve -> validate per annotated field.

    Holds only the registry and options, so one instance can validate many
    records, from any number of threads.

    Args:
        registry: Frozen directive registry (see :func:`build_registry`).
        tag_key: Metadata key holding the directive string.
        unsupported: ``"error"`` reports fields that are neither int nor str
            as ``UnsupportedFieldType``; ``"skip"`` ignores them.
    """

    def __init__(
        self,
        registry: DirectiveRegistry,
        *,
        tag_key: str = TAG_KEY,
        unsupported: UnsupportedPolicy = "error",
    ) -> None:
        self._dispatcher = Dispatcher(registry)
        self.tag_key = tag_key
        self.unsupported = unsupported

    @property
    def registry(self) -> DirectiveRegistry:
        return self._dispatcher.registry

    def outcomes(self, record: object) -> Iterator[FieldOutcome]:
        """Yield one outcome per annotated field, ending at the first failure."""
        for rf in iter_fields(record, tag_key=self.tag_key):
            if rf.annotation is None:
                continue
            outcome = self._check_field(rf, rf.annotation)
            if outcome is None:
                continue
            yield outcome
            if not outcome.ok:
                return

    def validate(self, record: object) -> tuple[bool, AvowedError | None]:
        """Return ``(True, None)`` if every annotated field passes, else ``(False, error)``."""
        for outcome in self.outcomes(record):
            if not outcome.ok:
                return False, outcome.error
        return True, None

    def check(self, record: object) -> None:
        """Like :meth:`validate` but raises the first error."""
        ok, error = self.validate(record)
        if not ok and error is not None:
            raise error

    def _check_field(self, rf: RecordField, annotation: str) -> FieldOutcome | None:
        if rf.value is MISSING:
            logger.debug("Field %s is missing", rf.name)
            return FieldOutcome(rf.name, False, MissingField(rf.name))

        fv = FieldValue.of(rf.value)
        if fv is None:
            type_name = type(rf.value).__name__
            if self.unsupported == "skip":
                logger.debug("Skipping field %s of unsupported type %s", rf.name, type_name)
                return None
            return FieldOutcome(rf.name, False, UnsupportedFieldType(rf.name, type_name))

        try:
            directive = parse_directive(annotation)
            descriptor = FieldDescriptor(rf.name, fv.kind, directive, fv.value)
            validator = self._dispatcher.resolve(descriptor.directive, descriptor.kind)
        except (DirectiveError, DispatchError) as exc:
            logger.debug("Field %s has a bad directive %r: %s", rf.name, annotation, exc)
            return FieldOutcome(rf.name, False, ValidationFailed(rf.name, exc))

        ok, error = validator.validate(descriptor.value)
        if not ok:
            cause = error or AvowedError(f"value {descriptor.value!r} rejected")
            logger.debug("Field %s failed %s: %s", rf.name, directive, cause)
            return FieldOutcome(rf.name, False, ValidationFailed(rf.name, cause))
        return FieldOutcome(rf.name, True)


def validate_record(
    record: object,
    registry: DirectiveRegistry | None = None,
    *,
    tag_key: str = TAG_KEY,
    unsupported: UnsupportedPolicy = "error",
) -> tuple[bool, AvowedError | None]:
    """Validate *record* fail-fast.

    When *registry* is None a fresh built-in registry is built for this call;
    pass a shared one when validating many records.

    Examples:
        >>> from dataclasses import dataclass
        >>> from avowed.engine.introspection import rule
        >>> @dataclass
        ... class Item:
        ...     number: int = rule("range,min=4,max=6")
        ...     word: str = rule("lengthrange,min=4,max=6")
        >>> validate_record(Item(5, "Pluk"))
        (True, None)
        >>> ok, err = validate_record(Item(7, "Pluk"))
        >>> ok, err.field
        (False, 'number')
    """
    validator = RecordValidator(
        registry if registry is not None else build_registry(),
        tag_key=tag_key,
        unsupported=unsupported,
    )
    return validator.validate(record)
