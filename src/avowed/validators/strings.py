"""String content and length checks.

Lengths count code points (``len(str)``), not encoded bytes.
A length bound of zero or less is a configuration error and fails every
value instead of passing vacuously.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from avowed.validators.base import Outcome

_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")


def _bound_error(name: str, size: int) -> Outcome | None:
    if size <= 0:
        return Outcome.failed(f"invalid {name} {size}: length bounds must be positive")
    return None


@dataclass(frozen=True)
class NonEmptyValidator:
    def validate(self, value: str) -> Outcome:
        if value == "":
            return Outcome.failed("string is empty")
        return Outcome.passed()


@dataclass(frozen=True)
class MinLengthValidator:
    size: int

    def validate(self, value: str) -> Outcome:
        if misconfigured := _bound_error("minimum length", self.size):
            return misconfigured
        if len(value) < self.size:
            return Outcome.failed(
                f"value {value!r} is shorter than minimum length {self.size}"
            )
        return Outcome.passed()


@dataclass(frozen=True)
class MaxLengthValidator:
    size: int

    def validate(self, value: str) -> Outcome:
        if misconfigured := _bound_error("maximum length", self.size):
            return misconfigured
        if len(value) > self.size:
            return Outcome.failed(f"value {value!r} exceeds maximum length {self.size}")
        return Outcome.passed()


@dataclass(frozen=True)
class LengthRangeValidator:
    minimum: int
    maximum: int

    def validate(self, value: str) -> Outcome:
        if misconfigured := _bound_error("minimum length", self.minimum):
            return misconfigured
        if misconfigured := _bound_error("maximum length", self.maximum):
            return misconfigured
        if self.minimum > self.maximum:
            return Outcome.failed(
                f"invalid length range [{self.minimum}, {self.maximum}]: minimum exceeds maximum"
            )
        length = len(value)
        if length < self.minimum or length > self.maximum:
            return Outcome.failed(
                f"length {length} is not in range [{self.minimum}, {self.maximum}]"
            )
        return Outcome.passed()


@dataclass(frozen=True)
class RegexValidator:
    """Valid iff the whole string matches *pattern*."""

    pattern: re.Pattern[str]

    def validate(self, value: str) -> Outcome:
        if self.pattern.fullmatch(value) is None:
            return Outcome.failed(
                f"value {value!r} does not match pattern {self.pattern.pattern!r}"
            )
        return Outcome.passed()


@dataclass(frozen=True)
class AlphaNumericValidator:
    """Non-empty and ASCII letters or digits only."""

    def validate(self, value: str) -> Outcome:
        if _ALPHANUMERIC.fullmatch(value) is None:
            return Outcome.failed(f"value {value!r} is not alphanumeric")
        return Outcome.passed()
