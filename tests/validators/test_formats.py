"""Tests for URL, email, JSON and XML validators."""

from __future__ import annotations

import pytest

from avowed.validators import EmailValidator, JSONValidator, URLValidator, XMLValidator


class TestURL:
    @pytest.mark.parametrize(
        "value",
        [
            "http://example.com",
            "https://example.com/path?q=1#frag",
            "ftp://user@host:21/file",
            "mailto:someone@example.com",
            "/relative/to/root",
        ],
    )
    def test_valid(self, value: str) -> None:
        assert URLValidator().validate(value).ok

    @pytest.mark.parametrize(
        "value",
        ["", "example.com", "relative/path", "http://exa mple.com", "http:", "http://[::1"],
    )
    def test_invalid(self, value: str) -> None:
        ok, error = URLValidator().validate(value)
        assert not ok
        assert "invalid URL" in str(error)


class TestEmail:
    @pytest.mark.parametrize(
        "value",
        ["user@example.com", "first.last+tag@sub.example.org", "Jane Doe <jane@example.com>"],
    )
    def test_valid(self, value: str) -> None:
        assert EmailValidator().validate(value).ok

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "plainaddress",
            "@example.com",
            "user@",
            "a@b@c",
            "a..b@example.com",
            ".a@b.com",
            "x@y.com (c) junk",
        ],
    )
    def test_invalid(self, value: str) -> None:
        ok, error = EmailValidator().validate(value)
        assert not ok
        assert "invalid email address" in str(error)


class TestJSON:
    @pytest.mark.parametrize("value", ['{"a": 1}', "[1, 2]", '"text"', "3", "null", "true"])
    def test_valid(self, value: str) -> None:
        assert JSONValidator().validate(value).ok

    @pytest.mark.parametrize("value", ["", "{", "{'a': 1}", "NaN", "[Infinity]", "{} {}"])
    def test_invalid(self, value: str) -> None:
        ok, error = JSONValidator().validate(value)
        assert not ok
        assert str(error).startswith("invalid JSON")

    def test_deep_nesting_is_rejected(self) -> None:
        ok, error = JSONValidator().validate("[" * 100000)
        assert not ok
        assert "nesting too deep" in str(error)


class TestXML:
    @pytest.mark.parametrize(
        "value",
        ["<a/>", "<root><child attr='1'>text</child></root>", '<?xml version="1.0"?><x/>'],
    )
    def test_valid(self, value: str) -> None:
        assert XMLValidator().validate(value).ok

    @pytest.mark.parametrize("value", ["", "   ", "plain text", "<a>", "<a></b>", "<a/><b/>"])
    def test_invalid(self, value: str) -> None:
        assert not XMLValidator().validate(value).ok

    def test_single_root_element_only(self) -> None:
        ok, error = XMLValidator().validate("<a/><b/>")
        assert not ok
        assert "XML parsing error" in str(error)

    def test_lone_surrogate_is_rejected(self) -> None:
        ok, error = XMLValidator().validate("<a>\ud800</a>")
        assert not ok
        assert "XML parsing error" in str(error)
