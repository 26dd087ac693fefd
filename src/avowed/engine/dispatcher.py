"""Directive dispatcher: resolve a parsed directive into a validator.

Resolution is pure: look up ``(name, kind)``, check the exact parameter key
set, convert raw values, construct. A fresh validator is built on every
call; nothing is cached.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from avowed.domain.directives import Directive, parse_directive
from avowed.engine.params import require_keys

if TYPE_CHECKING:
    from avowed.domain.values import FieldKind
    from avowed.engine.registry import DirectiveRegistry
    from avowed.validators.base import Validator

logger = logging.getLogger(__name__)


class Dispatcher:
    """Turns directives into validator instances using a frozen registry."""

    def __init__(self, registry: DirectiveRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> DirectiveRegistry:
        return self._registry

    def resolve(self, directive: Directive, kind: FieldKind) -> Validator[Any]:
        """Build the validator *directive* names for a field of *kind*.

        Raises:
            UnknownDirective: No registry entry for ``(directive.name, kind)``.
            ParameterMismatch: Parameter keys differ from the required set.
            InvalidParameterValue: A parameter value failed conversion.
        """
        spec = self._registry.lookup(directive.name, kind)
        params = require_keys(directive, spec.required)
        validator = spec.build(params)
        logger.debug("Resolved %s for %s field -> %s", directive, kind, type(validator).__name__)
        return validator

    def resolve_annotation(self, annotation: str, kind: FieldKind) -> Validator[Any]:
        """Parse *annotation* and resolve it in one step."""
        return self.resolve(parse_directive(annotation), kind)
