"""PluginManager — finds plugins and relays lifecycle hooks to them.

Plugins are installed packages that declare an entry point in the
``notectl.plugins`` group, or objects registered at runtime (tests,
embedding front ends).
"""

from __future__ import annotations

import logging

import pluggy

from notectl.plugins.hookspecs import NotectlHookSpec

PROJECT_NAME = "notectl"
ENTRY_POINT_GROUP = "notectl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper over :class:`pluggy.PluginManager` with notectl's hookspecs."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(NotectlHookSpec)
        self._loaded = False

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    @property
    def is_loaded(self) -> bool:
        """True once :meth:`discover_and_load` has run."""
        return self._loaded

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the names now registered.

        A broken plugin is logged and skipped. Note operations must keep
        working without it.
        """
        try:
            count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load plugins from %s", ENTRY_POINT_GROUP, exc_info=True)
        else:
            logger.debug("Loaded %d plugin(s) from %s", count, ENTRY_POINT_GROUP)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register *plugin*, named after its class unless *name* is given."""
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin %s", name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]
