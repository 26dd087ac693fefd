"""Error taxonomy for directive parsing, dispatch, and record validation.

Every error carries a stable ``code`` so the service layer can map it onto
``ServiceError`` without inspecting message text.

- Parser: ``EmptyDirective``, ``MalformedParameter``
- Registry/dispatcher: ``UnknownDirective``, ``ParameterMismatch``,
  ``InvalidParameterValue``, ``DuplicateDirective``, ``RegistryFrozen``
- Leaf validators: ``InvalidValue`` (returned, never raised by ``validate``)
- Walker: ``ValidationFailed``, ``UnsupportedFieldType``, ``MissingField``
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class AvowedError(Exception):
    """Base class for all avowed errors."""

    code: str = "AVOWED_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured fields for machine-readable output."""
        return {}


# --- Parser ---


class DirectiveError(AvowedError):
    """The annotation string could not be parsed into a directive."""


class EmptyDirective(DirectiveError):
    code = "EMPTY_DIRECTIVE"

    def __init__(self, annotation: str) -> None:
        self.annotation = annotation
        super().__init__(f"missing directive name in annotation {annotation!r}")

    def detail(self) -> dict[str, Any]:
        return {"annotation": self.annotation}


class MalformedParameter(DirectiveError):
    code = "MALFORMED_PARAMETER"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'malformed key value pair {token!r}, expected format is "key=value"')

    def detail(self) -> dict[str, Any]:
        return {"token": self.token}


# --- Registry / dispatcher ---


class DispatchError(AvowedError):
    """A parsed directive could not be turned into a validator."""


class UnknownDirective(DispatchError):
    code = "UNKNOWN_DIRECTIVE"

    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"unknown validator {name!r} for {kind} fields")

    def detail(self) -> dict[str, Any]:
        return {"name": self.name, "kind": self.kind}


class ParameterMismatch(DispatchError):
    code = "PARAMETER_MISMATCH"

    def __init__(self, directive: str, expected: Iterable[str], found: Iterable[str]) -> None:
        self.directive = directive
        self.expected = sorted(expected)
        self.found = list(found)
        if self.expected:
            wanted = f"expected {len(self.expected)} parameter(s) ({', '.join(self.expected)})"
        else:
            wanted = "expected no parameters"
        super().__init__(f"{directive}: {wanted}, found: {self.found}")

    def detail(self) -> dict[str, Any]:
        return {"directive": self.directive, "expected": self.expected, "found": self.found}


class InvalidParameterValue(DispatchError):
    code = "INVALID_PARAMETER_VALUE"

    def __init__(self, key: str, raw_value: str, reason: str | None = None) -> None:
        self.key = key
        self.raw_value = raw_value
        self.reason = reason
        msg = f"invalid value {raw_value!r} for parameter {key!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)

    def detail(self) -> dict[str, Any]:
        return {"key": self.key, "raw_value": self.raw_value, "reason": self.reason}


class DuplicateDirective(AvowedError):
    code = "DUPLICATE_DIRECTIVE"

    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"directive {name!r} is already registered for {kind} fields")


class RegistryFrozen(AvowedError):
    code = "REGISTRY_FROZEN"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"cannot register {name!r}: registry is frozen")


# --- Leaf validators ---


class InvalidValue(AvowedError):
    """A value (or a validator's own configuration) failed a check."""

    code = "INVALID_VALUE"


# --- Walker ---


class ValidationFailed(AvowedError):
    """A record field failed; wraps the underlying error as ``cause``."""

    code = "VALIDATION_FAILED"

    def __init__(self, field: str, cause: AvowedError) -> None:
        self.field = field
        self.cause = cause
        super().__init__(f"error validating field {field!r}: {cause}")
        self.__cause__ = cause

    def detail(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "cause": {"code": self.cause.code, "message": str(self.cause), **self.cause.detail()},
        }


class UnsupportedFieldType(AvowedError):
    code = "UNSUPPORTED_FIELD_TYPE"

    def __init__(self, field: str, type_name: str) -> None:
        self.field = field
        self.type_name = type_name
        super().__init__(f"field {field!r} has unsupported type {type_name!r} (expected int or str)")

    def detail(self) -> dict[str, Any]:
        return {"field": self.field, "type": self.type_name}


class MissingField(AvowedError):
    code = "MISSING_FIELD"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"annotated field {field!r} is missing from the record")

    def detail(self) -> dict[str, Any]:
        return {"field": self.field}
