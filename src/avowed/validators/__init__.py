"""Leaf validators and the validator contract.

Every validator exposes ``validate(value) -> Outcome``. Validators are pure
functions of their configuration and the input; compiled patterns are built
once at construction.
"""

from avowed.validators.base import (
    CompositeValidator,
    Outcome,
    ValidatedValue,
    Validator,
    ValidatorFunc,
)
from avowed.validators.formats import EmailValidator, JSONValidator, URLValidator, XMLValidator
from avowed.validators.network import (
    IPv4Validator,
    IPv6Validator,
    IPValidator,
    MACAddressValidator,
)
from avowed.validators.numeric import NonNegativeValidator, NonPositiveValidator, RangeValidator
from avowed.validators.strings import (
    AlphaNumericValidator,
    LengthRangeValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NonEmptyValidator,
    RegexValidator,
)

__all__ = [
    "AlphaNumericValidator",
    "CompositeValidator",
    "EmailValidator",
    "IPValidator",
    "IPv4Validator",
    "IPv6Validator",
    "JSONValidator",
    "LengthRangeValidator",
    "MACAddressValidator",
    "MaxLengthValidator",
    "MinLengthValidator",
    "NonEmptyValidator",
    "NonNegativeValidator",
    "NonPositiveValidator",
    "Outcome",
    "RangeValidator",
    "RegexValidator",
    "URLValidator",
    "ValidatedValue",
    "Validator",
    "ValidatorFunc",
    "XMLValidator",
]
