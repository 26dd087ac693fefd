"""Dispatch engine: registry, dispatcher, record introspection, and walker."""

from avowed.engine.dispatcher import Dispatcher
from avowed.engine.introspection import AnnotatedRecord, Rule, iter_fields, rule
from avowed.engine.registry import DirectiveRegistry, ValidatorSpec, build_registry
from avowed.engine.walker import FieldOutcome, RecordValidator, validate_record

__all__ = [
    "AnnotatedRecord",
    "DirectiveRegistry",
    "Dispatcher",
    "FieldOutcome",
    "RecordValidator",
    "Rule",
    "ValidatorSpec",
    "build_registry",
    "iter_fields",
    "rule",
    "validate_record",
]
