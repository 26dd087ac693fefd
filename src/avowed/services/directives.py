"""DirectiveService: parse annotations and describe the registry."""

from __future__ import annotations

from avowed.domain.directives import parse_directive
from avowed.domain.errors import AvowedError
from avowed.domain.values import FieldKind
from avowed.engine.dispatcher import Dispatcher
from avowed.services.base import BaseService
from avowed.services.contracts import DirectivesResultData, ParseResultData, dump_validated
from avowed.services.result import ServiceResult


class DirectiveService(BaseService):
    """Introspection behind ``avowed parse`` and ``avowed directives``."""

    def parse(self, annotation: str, kind: FieldKind | None = None) -> ServiceResult:
        """Parse *annotation*; with *kind*, also resolve it against the registry."""
        try:
            directive = parse_directive(annotation)
        except AvowedError as exc:
            return ServiceResult.failure("parse", exc)

        payload: dict[str, object] = {
            "annotation": str(directive),
            "name": directive.name,
            "params": [list(p) for p in directive.params],
        }
        if kind is not None:
            payload["kind"] = str(kind)
            try:
                validator = Dispatcher(self._registry).resolve(directive, kind)
            except AvowedError as exc:
                return ServiceResult.failure(
                    "parse", exc, data=dump_validated(ParseResultData, payload)
                )
            payload["validator"] = type(validator).__name__
        return ServiceResult(ok=True, op="parse", data=dump_validated(ParseResultData, payload))

    def directives(self, kind: FieldKind | None = None) -> ServiceResult:
        """List registered directives, optionally only those for *kind*."""
        items = [
            {
                "name": spec.name,
                "kind": str(spec.kind),
                "params": sorted(spec.required),
                "usage": spec.usage(),
                "summary": spec.summary,
            }
            for spec in self._registry
            if kind is None or spec.kind == kind
        ]
        data = dump_validated(DirectivesResultData, {"count": len(items), "items": items})
        return ServiceResult(ok=True, op="directives", data=data)
