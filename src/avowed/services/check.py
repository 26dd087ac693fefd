"""CheckService: validate records from data files against a field schema.

Each record is validated independently and fail-fast: a record reports at
most one failing field. The operation fails when any record fails.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from avowed.domain.errors import ValidationFailed
from avowed.engine.introspection import AnnotatedRecord
from avowed.infrastructure.files import FileLoadError, load_records, load_rules
from avowed.services.base import BaseService
from avowed.services.contracts import CheckResultData, dump_validated
from avowed.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class CheckService(BaseService):
    """Record validation behind ``avowed check``."""

    def check_file(self, data_path: Path, schema_path: Path) -> ServiceResult:
        """Load *schema_path* and *data_path*, then validate every record."""
        try:
            rules = load_rules(schema_path)
            records = load_records(data_path)
        except FileLoadError as exc:
            return ServiceResult.failure("check", exc)
        result = self.check_records(records, rules)
        meta = {"data": str(data_path), "schema": str(schema_path)}
        return result.model_copy(update={"meta": meta})

    def check_records(
        self,
        records: Sequence[Mapping[str, Any]],
        rules: Mapping[str, str],
    ) -> ServiceResult:
        """Validate each mapping in *records* against *rules*."""
        walker = self._walker
        results: list[dict[str, Any]] = []
        warnings: list[str] = []

        for index, values in enumerate(records):
            ok, error = walker.validate(AnnotatedRecord(values, rules))
            if ok or error is None:
                results.append({"index": index, "ok": True})
                continue
            field = getattr(error, "field", None)
            cause = error.cause if isinstance(error, ValidationFailed) else error
            results.append(
                {
                    "index": index,
                    "ok": False,
                    "field": field,
                    "code": cause.code,
                    "message": str(error),
                }
            )
            logger.debug("Record %d failed: %s", index, error)

        unchecked = sorted({k for r in records for k in r} - set(rules))
        if unchecked:
            warnings.append(f"Fields without a directive were not checked: {', '.join(unchecked)}")

        failed = sum(1 for r in results if not r["ok"])
        data = dump_validated(
            CheckResultData,
            {
                "count": len(results),
                "passed": len(results) - failed,
                "failed": failed,
                "fields": list(rules),
                "results": results,
            },
        )
        if failed:
            failures = [r for r in data["results"] if not r["ok"]]
            return ServiceResult(
                ok=False,
                op="check",
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="VALIDATION_FAILED",
                    message=f"{failed} of {len(results)} record(s) failed validation",
                    detail={"failures": failures},
                ),
            )
        return ServiceResult(ok=True, op="check", data=data, warnings=warnings)
