"""Extension layer: plugin system via pluggy.

INVARIANT: Plugin failures are warnings, never errors.
"""

from oopnotes.plugins.hookspecs import hookimpl
from oopnotes.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
