"""Parameter key checks and typed conversion for directive parameters."""

from __future__ import annotations

import re
from collections.abc import Mapping

from avowed.domain.directives import Directive
from avowed.domain.errors import InvalidParameterValue, ParameterMismatch

_INTEGER = re.compile(r"[+-]?[0-9]+")


def require_keys(directive: Directive, expected: frozenset[str]) -> dict[str, str]:
    """Return the directive's parameters as a dict if its key set is exactly *expected*.

    Order is irrelevant. Missing, extra, and repeated keys all count as a mismatch.

    Raises:
        ParameterMismatch: The keys differ from *expected*.
    """
    found = directive.keys()
    if len(found) != len(expected) or set(found) != expected:
        raise ParameterMismatch(directive.name, expected, found)
    return directive.as_dict()


def int_param(params: Mapping[str, str], key: str) -> int:
    """Parse a base-10 integer parameter (optional sign, ASCII digits only).

    Raises:
        InvalidParameterValue: The raw value is not an integer.
    """
    raw = params[key]
    if _INTEGER.fullmatch(raw) is None:
        raise InvalidParameterValue(key, raw, "expected an integer")
    return int(raw)


def pattern_param(params: Mapping[str, str], key: str) -> re.Pattern[str]:
    """Compile a regular expression parameter.

    Raises:
        InvalidParameterValue: The raw value is not a valid regular expression.
    """
    raw = params[key]
    try:
        return re.compile(raw)
    except re.error as exc:
        raise InvalidParameterValue(key, raw, str(exc)) from exc
