"""Network address format checks.

MAC addresses accept the IEEE 802 MAC-48, EUI-64 and 20-octet IP over
InfiniBand link-layer forms, written with colons, hyphens, or as
dot-separated groups of four hex digits::

    00:00:5e:00:53:01
    02-00-5e-10-00-00-00-01
    0000.5e00.5301
"""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass

from avowed.validators.base import Outcome

_HEX2 = "[0-9A-Fa-f]{2}"
_HEX4 = "[0-9A-Fa-f]{4}"
_OCTET_COUNTS = (6, 8, 20)

_MAC_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern)
    for n in _OCTET_COUNTS
    for pattern in (
        rf"{_HEX2}(?::{_HEX2}){{{n - 1}}}",
        rf"{_HEX2}(?:-{_HEX2}){{{n - 1}}}",
        rf"{_HEX4}(?:\.{_HEX4}){{{n // 2 - 1}}}",
    )
)


def _parse_ip(value: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    try:
        return ipaddress.ip_address(value)
    except ValueError:
        return None


def _is_ipv4(address: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    """IPv4, including IPv4-mapped IPv6 (``::ffff:a.b.c.d``)."""
    if isinstance(address, ipaddress.IPv4Address):
        return True
    return address.ipv4_mapped is not None


@dataclass(frozen=True)
class MACAddressValidator:
    def validate(self, value: str) -> Outcome:
        if not any(p.fullmatch(value) for p in _MAC_PATTERNS):
            return Outcome.failed(f"invalid MAC address {value!r}")
        return Outcome.passed()


@dataclass(frozen=True)
class IPValidator:
    def validate(self, value: str) -> Outcome:
        if _parse_ip(value) is None:
            return Outcome.failed(f"invalid IP address {value!r}")
        return Outcome.passed()


@dataclass(frozen=True)
class IPv4Validator:
    def validate(self, value: str) -> Outcome:
        address = _parse_ip(value)
        if address is None or not _is_ipv4(address):
            return Outcome.failed(f"invalid IPv4 address {value!r}")
        return Outcome.passed()


@dataclass(frozen=True)
class IPv6Validator:
    def validate(self, value: str) -> Outcome:
        address = _parse_ip(value)
        if address is None or _is_ipv4(address):
            return Outcome.failed(f"invalid IPv6 address {value!r}")
        return Outcome.passed()
