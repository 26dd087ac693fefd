"""Tests for MAC and IP address validators."""

from __future__ import annotations

import pytest

from avowed.validators import IPv4Validator, IPv6Validator, IPValidator, MACAddressValidator


class TestMACAddress:
    @pytest.mark.parametrize(
        "value",
        [
            "00:00:5e:00:53:01",
            "00-00-5E-00-53-01",
            "0000.5e00.5301",
            "02:00:5e:10:00:00:00:01",
            "0200.5e10.0000.0001",
            "00:00:00:00:fe:80:00:00:00:00:00:00:02:00:5e:10:00:00:00:01",
        ],
    )
    def test_valid(self, value: str) -> None:
        assert MACAddressValidator().validate(value).ok

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "00:00:5e:00:53",
            "00:00:5e:00:53:01:02",
            "00:00-5e:00:53:01",
            "0000.5e00.530",
            "gg:00:5e:00:53:01",
            "00005e005301",
        ],
    )
    def test_invalid(self, value: str) -> None:
        ok, error = MACAddressValidator().validate(value)
        assert not ok
        assert "invalid MAC address" in str(error)


class TestIP:
    @pytest.mark.parametrize("value", ["127.0.0.1", "::1", "2001:db8::68", "::ffff:192.0.2.1"])
    def test_any_ip(self, value: str) -> None:
        assert IPValidator().validate(value).ok

    @pytest.mark.parametrize("value", ["", "256.0.0.1", "1.2.3", "localhost", "2001:db8::g"])
    def test_not_ip(self, value: str) -> None:
        assert not IPValidator().validate(value).ok


class TestIPv4:
    @pytest.mark.parametrize("value", ["192.0.2.1", "0.0.0.0", "::ffff:192.0.2.1"])
    def test_valid(self, value: str) -> None:
        assert IPv4Validator().validate(value).ok

    @pytest.mark.parametrize("value", ["2001:db8::68", "::1", "300.1.1.1"])
    def test_invalid(self, value: str) -> None:
        assert not IPv4Validator().validate(value).ok


class TestIPv6:
    @pytest.mark.parametrize("value", ["2001:db8::68", "::1", "fe80::1"])
    def test_valid(self, value: str) -> None:
        assert IPv6Validator().validate(value).ok

    @pytest.mark.parametrize("value", ["192.0.2.1", "::ffff:192.0.2.1", "not-an-ip"])
    def test_invalid(self, value: str) -> None:
        assert not IPv6Validator().validate(value).ok
