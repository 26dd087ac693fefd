"""Tests for the struct walker and validate_record."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Annotated

import pytest
from pydantic import BaseModel

from avowed.domain.errors import (
    InvalidValue,
    MalformedParameter,
    MissingField,
    ParameterMismatch,
    UnknownDirective,
    UnsupportedFieldType,
    ValidationFailed,
)
from avowed.engine.introspection import AnnotatedRecord, Rule, rule
from avowed.engine.registry import DirectiveRegistry
from avowed.engine.walker import FieldOutcome, RecordValidator, validate_record


@dataclass
class Sample:
    number: int = rule("range,min=4,max=6")
    word: str = rule("lengthrange,min=4,max=6")


@dataclass
class Unannotated:
    a: int = 1
    b: str = ""


@dataclass
class WithFloat:
    ratio: float = rule("range,min=0,max=1")
    word: str = rule("nonempty")


class Host(BaseModel):
    address: Annotated[str, Rule("ipv4")]
    port: Annotated[int, Rule("range,min=1,max=65535")]


class TestValidateRecord:
    def test_valid_record(self) -> None:
        assert validate_record(Sample(5, "Pluk")) == (True, None)

    def test_number_out_of_range_names_field(self) -> None:
        ok, err = validate_record(Sample(7, "Pluk"))
        assert ok is False
        assert isinstance(err, ValidationFailed)
        assert err.field == "number"
        assert isinstance(err.cause, InvalidValue)
        assert "number" in str(err)

    def test_word_too_short(self) -> None:
        ok, err = validate_record(Sample(5, "Plu"))
        assert not ok
        assert isinstance(err, ValidationFailed)
        assert err.field == "word"

    def test_fail_fast_reports_first_field(self) -> None:
        ok, err = validate_record(Sample(7, "Plu"))
        assert not ok
        assert isinstance(err, ValidationFailed)
        assert err.field == "number"

    def test_unannotated_record_passes(self) -> None:
        assert validate_record(Unannotated()) == (True, None)

    def test_shared_registry(self, registry: DirectiveRegistry) -> None:
        assert validate_record(Sample(4, "Plukje"), registry) == (True, None)

    def test_idempotent(self, registry: DirectiveRegistry) -> None:
        record = Sample(7, "Pluk")
        first = validate_record(record, registry)
        second = validate_record(record, registry)
        assert first[0] == second[0]
        assert str(first[1]) == str(second[1])

    def test_pydantic_model(self, registry: DirectiveRegistry) -> None:
        assert validate_record(Host(address="192.0.2.1", port=443), registry)[0]
        ok, err = validate_record(Host(address="::1", port=443), registry)
        assert not ok
        assert isinstance(err, ValidationFailed)
        assert err.field == "address"


class TestDirectiveErrorsAreWrapped:
    def _check(self, walker: RecordValidator, annotation: str, value: object) -> ValidationFailed:
        ok, err = walker.validate(AnnotatedRecord({"f": value}, {"f": annotation}))
        assert not ok
        assert isinstance(err, ValidationFailed)
        assert err.field == "f"
        return err

    def test_unknown_directive(self, walker: RecordValidator) -> None:
        err = self._check(walker, "bogus", "x")
        assert isinstance(err.cause, UnknownDirective)

    def test_directive_for_wrong_kind(self, walker: RecordValidator) -> None:
        err = self._check(walker, "lengthrange,min=1,max=2", 5)
        assert isinstance(err.cause, UnknownDirective)

    def test_malformed_annotation(self, walker: RecordValidator) -> None:
        err = self._check(walker, "range,min", 5)
        assert isinstance(err.cause, MalformedParameter)

    def test_parameter_mismatch(self, walker: RecordValidator) -> None:
        err = self._check(walker, "range,min=1", 5)
        assert isinstance(err.cause, ParameterMismatch)

    def test_nonpositive_length_bound(self, walker: RecordValidator) -> None:
        err = self._check(walker, "minlength,size=0", "abc")
        assert isinstance(err.cause, InvalidValue)


class TestUnsupportedFields:
    def test_error_by_default(self, walker: RecordValidator) -> None:
        ok, err = walker.validate(WithFloat(0.5, "x"))
        assert not ok
        assert isinstance(err, UnsupportedFieldType)
        assert err.field == "ratio"
        assert err.type_name == "float"

    def test_bool_is_not_an_int(self, walker: RecordValidator) -> None:
        record = AnnotatedRecord({"flag": True}, {"flag": "nonnegative"})
        ok, err = walker.validate(record)
        assert not ok
        assert isinstance(err, UnsupportedFieldType)

    def test_skip_policy(self, registry: DirectiveRegistry) -> None:
        walker = RecordValidator(registry, unsupported="skip")
        assert walker.validate(WithFloat(0.5, "x")) == (True, None)
        ok, err = walker.validate(WithFloat(0.5, ""))
        assert not ok
        assert isinstance(err, ValidationFailed)
        assert err.field == "word"


class TestRecordValidator:
    def test_missing_mapping_field(self, walker: RecordValidator) -> None:
        ok, err = walker.validate(AnnotatedRecord({}, {"email": "email"}))
        assert not ok
        assert isinstance(err, MissingField)
        assert err.field == "email"

    def test_outcomes_stop_at_first_failure(self, walker: RecordValidator) -> None:
        record = AnnotatedRecord(
            {"a": 5, "b": 7, "c": 5},
            {"a": "range,min=4,max=6", "b": "range,min=4,max=6", "c": "range,min=4,max=6"},
        )
        outcomes = list(walker.outcomes(record))
        assert [o.field_name for o in outcomes] == ["a", "b"]
        assert outcomes[0] == FieldOutcome("a", True)
        assert outcomes[1].ok is False

    def test_check_raises(self, walker: RecordValidator) -> None:
        with pytest.raises(ValidationFailed, match="error validating field 'number'"):
            walker.check(Sample(3, "Pluk"))

    def test_check_passes_silently(self, walker: RecordValidator) -> None:
        walker.check(Sample(5, "Pluk"))

    def test_custom_tag_key(self, registry: DirectiveRegistry) -> None:
        from dataclasses import field

        @dataclass
        class Custom:
            n: int = field(default=9, metadata={"check": "range,min=0,max=5"})

        assert validate_record(Custom(), registry) == (True, None)
        ok, _ = validate_record(Custom(), registry, tag_key="check")
        assert not ok

    def test_concurrent_use(self, walker: RecordValidator) -> None:
        results: list[bool] = []
        lock = threading.Lock()

        def run(value: int) -> None:
            ok, _ = walker.validate(Sample(value, "Pluk"))
            with lock:
                results.append(ok)

        threads = [threading.Thread(target=run, args=(4 + i % 4,)) for i in range(40)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results.count(True) == 30
        assert results.count(False) == 10


@dataclass
class Entry:
    Number: int = rule("range,min=4,max=6")
    Word: str = rule("lengthrange,min=4,max=6")


class TestEndToEnd:
    def test_entry_passes(self, registry: DirectiveRegistry) -> None:
        assert validate_record(Entry(5, "Pluk"), registry) == (True, None)

    def test_entry_number_seven_names_field(self, registry: DirectiveRegistry) -> None:
        ok, err = validate_record(Entry(7, "Pluk"), registry)
        assert not ok
        assert isinstance(err, ValidationFailed)
        assert err.field == "Number"
        assert "'Number'" in str(err)


@dataclass
class Payload:
    body: str = rule("json")
    markup: str = rule("xml")


class TestHostileValues:
    def test_deeply_nested_json_is_a_failure(self, registry: DirectiveRegistry) -> None:
        ok, err = validate_record(Payload("[" * 100000, "<a/>"), registry)
        assert not ok
        assert isinstance(err, ValidationFailed)
        assert err.field == "body"

    def test_surrogate_in_xml_is_a_failure(self, registry: DirectiveRegistry) -> None:
        ok, err = validate_record(Payload("{}", "<a>\ud800</a>"), registry)
        assert not ok
        assert isinstance(err, ValidationFailed)
        assert err.field == "markup"
