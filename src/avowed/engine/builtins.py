"""Built-in directive vocabulary.

string: url, email, nonempty, minlength, maxlength, lengthrange, regex,
        alphanumeric, mac, ip, ipv4, ipv6, xml, json
int:    range, nonnegative, nonpositive

Extending the vocabulary means adding a spec here (or from a plugin);
the parser and walker never change.
"""

from __future__ import annotations

from collections.abc import Mapping

from avowed.domain.values import FieldKind
from avowed.engine.params import int_param, pattern_param
from avowed.engine.registry import Builder, ValidatorSpec
from avowed.validators import (
    AlphaNumericValidator,
    EmailValidator,
    IPv4Validator,
    IPv6Validator,
    IPValidator,
    JSONValidator,
    LengthRangeValidator,
    MACAddressValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NonEmptyValidator,
    NonNegativeValidator,
    NonPositiveValidator,
    RangeValidator,
    RegexValidator,
    URLValidator,
    XMLValidator,
)

MIN_KEY = "min"
MAX_KEY = "max"
SIZE_KEY = "size"
PATTERN_KEY = "pattern"

_BOUNDS = frozenset({MIN_KEY, MAX_KEY})
_SIZE = frozenset({SIZE_KEY})
_PATTERN = frozenset({PATTERN_KEY})


def _int_range(params: Mapping[str, str]) -> RangeValidator[int]:
    return RangeValidator(int_param(params, MIN_KEY), int_param(params, MAX_KEY))


def _length_range(params: Mapping[str, str]) -> LengthRangeValidator:
    return LengthRangeValidator(int_param(params, MIN_KEY), int_param(params, MAX_KEY))


def _min_length(params: Mapping[str, str]) -> MinLengthValidator:
    return MinLengthValidator(int_param(params, SIZE_KEY))


def _max_length(params: Mapping[str, str]) -> MaxLengthValidator:
    return MaxLengthValidator(int_param(params, SIZE_KEY))


def _regex(params: Mapping[str, str]) -> RegexValidator:
    return RegexValidator(pattern_param(params, PATTERN_KEY))


def _string(
    name: str, build: Builder, summary: str, required: frozenset[str] = frozenset()
) -> ValidatorSpec:
    return ValidatorSpec(name, FieldKind.STRING, build, required, summary)


def _int(
    name: str, build: Builder, summary: str, required: frozenset[str] = frozenset()
) -> ValidatorSpec:
    return ValidatorSpec(name, FieldKind.INT, build, required, summary)


BUILTIN_SPECS: tuple[ValidatorSpec, ...] = (
    # --- string ---
    _string("url", lambda _: URLValidator(), "absolute URI or absolute path"),
    _string("email", lambda _: EmailValidator(), "email address, optionally with a display name"),
    _string("nonempty", lambda _: NonEmptyValidator(), "string is not empty"),
    _string("minlength", _min_length, "length >= size", _SIZE),
    _string("maxlength", _max_length, "length <= size", _SIZE),
    _string("lengthrange", _length_range, "min <= length <= max", _BOUNDS),
    _string("regex", _regex, "whole string matches pattern", _PATTERN),
    _string("alphanumeric", lambda _: AlphaNumericValidator(), "ASCII letters and digits only"),
    _string("mac", lambda _: MACAddressValidator(), "IEEE 802 MAC address"),
    _string("ip", lambda _: IPValidator(), "IPv4 or IPv6 address"),
    _string("ipv4", lambda _: IPv4Validator(), "IPv4 address"),
    _string("ipv6", lambda _: IPv6Validator(), "IPv6 address"),
    _string("xml", lambda _: XMLValidator(), "well-formed XML with exactly one root element"),
    _string("json", lambda _: JSONValidator(), "well-formed JSON"),
    # --- int ---
    _int("range", _int_range, "min <= value <= max", _BOUNDS),
    _int("nonnegative", lambda _: NonNegativeValidator(), "value >= 0"),
    _int("nonpositive", lambda _: NonPositiveValidator(), "value <= 0"),
)
