"""Extension layer: plugin system via pluggy.

INVARIANT: Plugin failures are warnings, never errors.
"""

from aggregen.plugins.manager import PluginManager

__all__ = ["PluginManager"]
