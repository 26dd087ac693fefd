"""BaseService: abstract foundation for avowed services.

Every service receives the frozen directive registry and the
``[validation]`` settings at construction time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from avowed.config.models import ValidationConfig
from avowed.engine.walker import RecordValidator

if TYPE_CHECKING:
    from avowed.engine.registry import DirectiveRegistry


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class CheckService(BaseService):
            def check_records(self, records, rules) -> ServiceResult:
                ok, error = self._walker.validate(...)
    """

    def __init__(
        self,
        registry: DirectiveRegistry,
        validation: ValidationConfig | None = None,
    ) -> None:
        self._registry = registry
        self._validation = validation or ValidationConfig()

    @property
    def _walker(self) -> RecordValidator:
        return RecordValidator(
            self._registry,
            tag_key=self._validation.tag_key,
            unsupported=self._validation.unsupported_fields,
        )
