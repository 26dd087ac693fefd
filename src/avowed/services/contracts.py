"""Typed payload contracts for service boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class RecordResult(BaseModel):
    """Outcome for one record in a checked data file."""

    model_config = ConfigDict(extra="allow")

    index: int
    ok: bool
    field: str | None = None
    code: str | None = None
    message: str | None = None


class CheckResultData(BaseModel):
    """Payload contract for ``CheckService.check_records``."""

    count: int
    passed: int
    failed: int
    fields: list[str]
    results: list[RecordResult]


class ParseResultData(BaseModel):
    """Payload contract for ``DirectiveService.parse``."""

    annotation: str
    name: str
    params: list[list[str]]
    kind: str | None = None
    validator: str | None = None


class DirectiveItem(BaseModel):
    """One registry entry."""

    name: str
    kind: str
    params: list[str]
    usage: str
    summary: str


class DirectivesResultData(BaseModel):
    """Payload contract for ``DirectiveService.directives``."""

    count: int
    items: list[DirectiveItem]
