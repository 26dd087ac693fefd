"""Structured text format checks: URL, email address, JSON, XML."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from urllib.parse import urlsplit
from xml.etree import ElementTree

from pydantic.networks import validate_email

from avowed.validators.base import Outcome

_WHITESPACE_OR_CONTROL = re.compile(r"[\s\x00-\x1f\x7f]")


def _reject_constant(token: str) -> float:
    raise ValueError(f"non-standard JSON constant {token}")


@dataclass(frozen=True)
class URLValidator:
    """Absolute URI (``scheme:...``) or an absolute path (``/...``)."""

    def validate(self, value: str) -> Outcome:
        if not value or _WHITESPACE_OR_CONTROL.search(value):
            return Outcome.failed(f"invalid URL {value!r}")
        if value.startswith("/"):
            return Outcome.passed()
        try:
            parts = urlsplit(value)
        except ValueError as exc:
            return Outcome.failed(f"invalid URL {value!r}: {exc}")
        if not parts.scheme:
            return Outcome.failed(f"invalid URL {value!r}: missing scheme")
        if not (parts.netloc or parts.path):
            return Outcome.failed(f"invalid URL {value!r}: nothing after scheme")
        return Outcome.passed()


@dataclass(frozen=True)
class EmailValidator:
    """Email address, optionally with a display name (``Name <user@host>``).

    Syntax only, through pydantic's ``email-validator`` backend; no DNS lookups.
    """

    def validate(self, value: str) -> Outcome:
        try:
            validate_email(value)
        except ValueError:
            return Outcome.failed(f"invalid email address {value!r}")
        return Outcome.passed()


@dataclass(frozen=True)
class JSONValidator:
    """Any JSON text; ``NaN`` and ``Infinity`` are rejected."""

    def validate(self, value: str) -> Outcome:
        try:
            json.loads(value, parse_constant=_reject_constant)
        except ValueError as exc:
            return Outcome.failed(f"invalid JSON: {exc}")
        except RecursionError:
            return Outcome.failed("invalid JSON: nesting too deep")
        return Outcome.passed()


@dataclass(frozen=True)
class XMLValidator:
    """Well-formed XML with exactly one root element; bare text is rejected."""

    def validate(self, value: str) -> Outcome:
        if not value.strip():
            return Outcome.failed("XML document must contain at least one element")
        try:
            ElementTree.fromstring(value)
        except (ElementTree.ParseError, ValueError) as exc:
            return Outcome.failed(f"XML parsing error: {exc}")
        return Outcome.passed()
