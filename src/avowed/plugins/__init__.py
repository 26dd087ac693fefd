"""Plugin system: pluggy hooks for contributing directives."""

from avowed.plugins.hookspecs import hookimpl
from avowed.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
