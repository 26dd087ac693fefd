"""avowed: annotation-driven validation for record fields.

Attach a directive string such as ``"range,min=4,max=6"`` to a field and
:func:`validate_record` resolves it to a validator and checks the value.
"""

from avowed.domain.directives import Directive, parse_directive
from avowed.domain.errors import (
    AvowedError,
    EmptyDirective,
    InvalidParameterValue,
    InvalidValue,
    MalformedParameter,
    MissingField,
    ParameterMismatch,
    UnknownDirective,
    UnsupportedFieldType,
    ValidationFailed,
)
from avowed.domain.values import FieldKind
from avowed.engine import (
    AnnotatedRecord,
    DirectiveRegistry,
    Dispatcher,
    RecordValidator,
    Rule,
    ValidatorSpec,
    build_registry,
    rule,
    validate_record,
)
from avowed.validators import CompositeValidator, Outcome, ValidatedValue, Validator

__version__ = "0.3.0"

__all__ = [
    "AnnotatedRecord",
    "AvowedError",
    "CompositeValidator",
    "Directive",
    "DirectiveRegistry",
    "Dispatcher",
    "EmptyDirective",
    "FieldKind",
    "InvalidParameterValue",
    "InvalidValue",
    "MalformedParameter",
    "MissingField",
    "Outcome",
    "ParameterMismatch",
    "RecordValidator",
    "Rule",
    "UnknownDirective",
    "UnsupportedFieldType",
    "ValidatedValue",
    "ValidationFailed",
    "Validator",
    "ValidatorSpec",
    "__version__",
    "build_registry",
    "parse_directive",
    "rule",
    "validate_record",
]
