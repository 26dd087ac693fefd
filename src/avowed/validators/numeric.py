"""Range and sign checks over ordered values."""

from __future__ import annotations

from dataclasses import dataclass

from avowed.validators.base import Ordered, Outcome


@dataclass(frozen=True)
class RangeValidator[T: Ordered]:
    """Valid iff ``minimum <= value <= maximum`` (inclusive both ends).

    Works for any ordered type (int, float, str, date, ...).
    """

    minimum: T
    maximum: T

    def validate(self, value: T) -> Outcome:
        if value < self.minimum or self.maximum < value:
            return Outcome.failed(
                f"value {value!r} is out of range [{self.minimum!r}, {self.maximum!r}]"
            )
        return Outcome.passed()


@dataclass(frozen=True)
class NonNegativeValidator:
    def validate(self, value: int) -> Outcome:
        if value < 0:
            return Outcome.failed(f"value {value} is a negative number")
        return Outcome.passed()


@dataclass(frozen=True)
class NonPositiveValidator:
    def validate(self, value: int) -> Outcome:
        if value > 0:
            return Outcome.failed(f"value {value} is a positive number")
        return Outcome.passed()
