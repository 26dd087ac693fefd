"""Validator contract, composition, and the guarded value holder.

INVARIANT: ``validate()`` never raises for bad input or bad configuration.
A passing check returns ``Outcome(True, None)``; a failing one returns
``Outcome(False, InvalidValue(...))`` with a human-readable message.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple, Protocol, runtime_checkable

from avowed.domain.errors import InvalidValue


class Outcome(NamedTuple):
    """Result of one check. Unpacks as ``ok, error = validator.validate(v)``."""

    ok: bool
    error: InvalidValue | None = None

    @classmethod
    def passed(cls) -> Outcome:
        return cls(True, None)

    @classmethod
    def failed(cls, message: str) -> Outcome:
        return cls(False, InvalidValue(message))


@runtime_checkable
class Validator[T](Protocol):
    """The single extension point: anything with ``validate(value) -> Outcome``."""

    def validate(self, value: T) -> Outcome: ...


class Ordered(Protocol):
    """Minimal constraint for range checks."""

    def __lt__(self, other: Any, /) -> bool: ...


@dataclass(frozen=True)
class ValidatorFunc[T]:
    """Adapt a plain ``(value) -> Outcome`` callable to the validator contract."""

    func: Callable[[T], Outcome]

    def validate(self, value: T) -> Outcome:
        return self.func(value)


class CompositeValidator[T]:
    """Ordered AND-chain of validators.

    Short-circuits on the first failure and returns that failure verbatim,
    so the order of *validators* decides which error the caller sees.
    """

    def __init__(self, validators: Sequence[Validator[T]]) -> None:
        self._validators = tuple(validators)

    @property
    def validators(self) -> tuple[Validator[T], ...]:
        return self._validators

    def validate(self, value: T) -> Outcome:
        for validator in self._validators:
            outcome = validator.validate(value)
            if not outcome.ok:
                return outcome
        return Outcome.passed()


class ValidatedValue[T]:
    """Holder that only ever stores values its validator accepts.

    Usage::

        port = ValidatedValue(RangeValidator(1, 65535), initial=8080)
        port.set(70000)  # raises InvalidValue, port.get() is still 8080
    """

    def __init__(self, validator: Validator[T], initial: T | None = None) -> None:
        self.validator = validator
        self._value: T | None = None
        if initial is not None:
            self.set(initial)

    def set(self, value: T) -> None:
        """Store *value* if it validates.

        Raises:
            InvalidValue: The validator rejected *value*; the stored value is unchanged.
        """
        ok, error = self.validator.validate(value)
        if not ok:
            raise error or InvalidValue(f"value {value!r} rejected")
        self._value = value

    def get(self) -> T | None:
        return self._value
