"""Load plugins and gather the directives they contribute.

Plugins arrive two ways: installed packages advertising an entry point in
the ``avowed.plugins`` group, and objects handed to :meth:`register_plugin`.
A plugin that fails to load or to answer the hook is logged and ignored;
it never stops the CLI.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable

import pluggy

from avowed.engine.registry import ValidatorSpec
from avowed.plugins.hookspecs import PROJECT_NAME, AvowedHookSpec

ENTRY_POINT_GROUP = "avowed.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper over ``pluggy.PluginManager`` for the ``avowed`` project."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(AvowedHookSpec)
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        """True once :meth:`discover_and_load` has run."""
        return self._loaded

    def discover_and_load(self) -> list[str]:
        """Register every entry-point plugin; return all plugin names."""
        try:
            count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Could not load %s entry points", ENTRY_POINT_GROUP, exc_info=True)
        else:
            logger.debug("Loaded %d entry-point plugin(s)", count)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register *plugin*, named after its class unless *name* is given."""
        plugin_name = name or type(plugin).__name__
        self._pm.register(plugin, name=plugin_name)
        logger.debug("Registered plugin %s", plugin_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    def collect_specs(self) -> list[ValidatorSpec]:
        """Directive specs from every ``avowed_directives`` implementation.

        Each implementation is called on its own so one broken plugin does
        not hide the others.
        """
        specs: list[ValidatorSpec] = []
        for impl in self._pm.hook.avowed_directives.get_hookimpls():
            try:
                contributed = impl.function()
            except Exception:
                logger.warning("Plugin %s failed to list directives", impl.plugin_name,
                               exc_info=True)
                continue
            specs.extend(_only_specs(impl.plugin_name, contributed or ()))
        return specs

    def _normalize_plugin_instances(self) -> None:
        """Swap plugin classes registered by entry points for instances.

        Hook implementations are methods, so a class left registered would be
        called without ``self``.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Plugin class %s could not be instantiated", plugin_name,
                               exc_info=True)
                continue
            self._pm.register(instance, name=plugin_name)


def _only_specs(plugin_name: str, items: Iterable[object]) -> list[ValidatorSpec]:
    specs: list[ValidatorSpec] = []
    for item in items:
        if isinstance(item, ValidatorSpec):
            specs.append(item)
        else:
            logger.warning("Plugin %s returned a non-spec directive entry: %r", plugin_name, item)
    return specs
