"""Directive registry: ``(name, kind) -> ValidatorSpec``.

The registry is an explicit value: build it once with :func:`build_registry`
at application entry and pass it to the walker. After ``freeze()`` it is
read-only, so concurrent readers need no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from avowed.domain.errors import DuplicateDirective, RegistryFrozen, UnknownDirective
from avowed.domain.values import FieldKind

if TYPE_CHECKING:
    from avowed.plugins.manager import PluginManager
    from avowed.validators.base import Validator

logger = logging.getLogger(__name__)

RegistryKey = tuple[str, FieldKind]
Builder = Callable[[Mapping[str, str]], "Validator[Any]"]


@dataclass(frozen=True)
class ValidatorSpec:
    """One registry entry.

    Attributes:
        name: Directive name as written in annotations (case-sensitive).
        kind: Field kind this entry applies to.
        required: Exact set of parameter keys the directive takes.
        build: Turns checked raw parameters into a validator instance; may raise
            ``InvalidParameterValue``.
        summary: One-line description for ``avowed directives``.
    """

    name: str
    kind: FieldKind
    build: Builder
    required: frozenset[str] = frozenset()
    summary: str = ""

    @property
    def key(self) -> RegistryKey:
        return (self.name, self.kind)

    def usage(self) -> str:
        """Annotation template, e.g. ``range,max=<max>,min=<min>``."""
        return ",".join([self.name, *(f"{k}=<{k}>" for k in sorted(self.required))])


class DirectiveRegistry:
    """Exact-match lookup table from directive name and field kind to a spec."""

    def __init__(self, specs: Iterable[ValidatorSpec] = ()) -> None:
        self._specs: dict[RegistryKey, ValidatorSpec] = {}
        self._frozen = False
        for spec in specs:
            self.register(spec)

    def register(self, spec: ValidatorSpec) -> None:
        """Add *spec*.

        Raises:
            RegistryFrozen: ``freeze()`` has already been called.
            DuplicateDirective: A spec for the same ``(name, kind)`` exists.
        """
        if self._frozen:
            raise RegistryFrozen(spec.name)
        if spec.key in self._specs:
            raise DuplicateDirective(spec.name, spec.kind)
        self._specs[spec.key] = spec

    def freeze(self) -> DirectiveRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str, kind: FieldKind) -> ValidatorSpec:
        """Return the spec for ``(name, kind)``.

        Raises:
            UnknownDirective: No spec is registered for that combination.
        """
        spec = self._specs.get((name, kind))
        if spec is None:
            raise UnknownDirective(name, kind)
        return spec

    def names(self, kind: FieldKind | None = None) -> list[str]:
        """Registered directive names, optionally filtered by kind, in registration order."""
        return [name for name, k in self._specs if kind is None or k == kind]

    def specs(self) -> Mapping[RegistryKey, ValidatorSpec]:
        return MappingProxyType(self._specs)

    def __contains__(self, key: object) -> bool:
        return key in self._specs

    def __iter__(self) -> Iterator[ValidatorSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)


def build_registry(*, plugins: PluginManager | None = None) -> DirectiveRegistry:
    """Build and freeze a registry holding the built-in vocabulary.

    When *plugins* is given, specs contributed through the
    ``avowed_directives`` hook are registered after the built-ins. A plugin
    spec that collides with an existing entry is skipped with a warning;
    built-ins are never overridden.
    """
    from avowed.engine.builtins import BUILTIN_SPECS

    registry = DirectiveRegistry(BUILTIN_SPECS)
    if plugins is not None:
        for spec in plugins.collect_specs():
            try:
                registry.register(spec)
            except DuplicateDirective:
                logger.warning("Ignoring plugin directive %s (%s): already registered",
                               spec.name, spec.kind)
                continue
            logger.debug("Registered plugin directive: %s (%s)", spec.name, spec.kind)
    return registry.freeze()
