"""Plugin discovery, strategy registry and hook dispatch.

Discovery: entry_points (pip-installed) in the ``aggregen.plugins``
group, plus plugins registered directly by the caller.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from aggregen.engine.callback import GenerateCallback
from aggregen.plugins.hookspecs import AggregenHookSpec

PROJECT_NAME = "aggregen"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin loading, strategy lookup and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(AggregenHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Register the built-ins and any ``aggregen.plugins`` entry points.

        Returns a list of loaded plugin names.
        """
        from aggregen.plugins.builtins.strategies import BuiltinStrategiesPlugin

        if not self._pm.has_plugin("builtin-strategies"):
            self.register_plugin(BuiltinStrategiesPlugin(), name="builtin-strategies")
        self._pm.load_setuptools_entrypoints("aggregen.plugins")
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def strategies(self) -> dict[str, type[GenerateCallback]]:
        """Collect strategy classes from every plugin.

        Malformed registrations are logged and skipped. Later plugins win
        on name clashes, so a third-party plugin can replace a built-in.
        """
        found: dict[str, type[GenerateCallback]] = {}
        # pluggy calls hooks in LIFO registration order.
        for mapping in reversed(self._pm.hook.register_strategies()):
            if not isinstance(mapping, dict):
                logger.warning("Ignoring non-dict strategy registration: %r", mapping)
                continue
            for name, cls in mapping.items():
                if not (inspect.isclass(cls) and issubclass(cls, GenerateCallback)):
                    logger.warning("Ignoring strategy %r: not a GenerateCallback", name)
                    continue
                found[name] = cls
        return found

    def get_strategy(self, name: str) -> type[GenerateCallback] | None:
        return self.strategies().get(name)

    # ------------------------------------------------------------------
    # Entry-point normalization
    # ------------------------------------------------------------------

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
