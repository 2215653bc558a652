"""Plugin discovery, loading and hook dispatch.

Discovery: the ``oopnotes.plugins`` entry-point group (pip-installed
plugins) plus single-file plugins in a local directory, by default
``<project>/.oopnotes/plugins/``.
"""

from __future__ import annotations

import importlib.metadata
import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

import pluggy

from oopnotes.plugins.hookspecs import PROJECT_NAME, OopnotesHookSpec

ENTRY_POINT_GROUP = "oopnotes.plugins"
LOCAL_MODULE_PREFIX = "oopnotes_local_plugin_"

logger = logging.getLogger(__name__)


class PluginManager:
    """Wraps a pluggy manager with oopnotes discovery rules."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(OopnotesHookSpec)

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then single-file plugins from *local_dir*.

        Returns the names of all registered plugins.
        """
        self._discover_entry_points()
        if local_dir is not None:
            self._discover_local(local_dir)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def note_dirs(self) -> list[tuple[str, Path]]:
        """Collect ``(plugin_name, directory)`` pairs from ``register_note_dirs``.

        Each plugin is called on its own so one failing plugin only costs
        its own directories.
        """
        collected: list[tuple[str, Path]] = []
        for plugin in self._pm.get_plugins():
            hook = getattr(plugin, "register_note_dirs", None)
            if hook is None:
                continue
            name = self._pm.get_name(plugin) or plugin.__class__.__name__
            try:
                dirs = hook()
            except Exception:
                logger.warning("Plugin %s failed in register_note_dirs", name, exc_info=True)
                continue
            for directory in dirs or []:
                collected.append((name, Path(directory)))
        return collected

    def notify(self, hook_name: str, **payload: Any) -> None:
        """Call a notification hook. Raises whatever a plugin raises."""
        getattr(self._pm.hook, hook_name)(**payload)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def _discover_entry_points(self) -> None:
        """Register every plugin advertised in the ``oopnotes.plugins`` group.

        An entry point that fails to load, or whose class cannot be
        instantiated, is logged and skipped.
        """
        for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            if self._pm.get_plugin(ep.name) is not None or self._pm.is_blocked(ep.name):
                continue
            try:
                plugin = ep.load()
                if inspect.isclass(plugin):
                    plugin = plugin()
                self.register_plugin(plugin, name=ep.name)
            except Exception:
                logger.warning("Entry-point plugin %s failed to load", ep.name, exc_info=True)

    # ------------------------------------------------------------------
    # Local plugin files
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Register every hook class found in ``*.py`` files under *local_dir*.

        Files starting with ``_`` are skipped. A file that fails to import is
        logged and skipped; so is a class whose constructor raises.
        """
        if not local_dir.is_dir():
            return
        for py_file in sorted(local_dir.glob("[!_]*.py")):
            module = self._import_local_file(py_file)
            if module is None:
                continue
            for plugin_cls in self._hook_classes(module):
                try:
                    self.register_plugin(plugin_cls(), name=module.__name__)
                except Exception:
                    logger.warning(
                        "Cannot instantiate %s from %s", plugin_cls.__name__, py_file, exc_info=True
                    )

    @staticmethod
    def _import_local_file(py_file: Path) -> ModuleType | None:
        module_name = f"{LOCAL_MODULE_PREFIX}{py_file.stem}"
        spec = importlib.util.spec_from_file_location(module_name, py_file)
        if spec is None or spec.loader is None:
            logger.warning("Not a loadable plugin file: %s", py_file)
            return None
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            logger.warning("Local plugin %s failed to import", py_file, exc_info=True)
            return None
        return module

    @classmethod
    def _hook_classes(cls, module: ModuleType) -> list[type]:
        """Classes defined in *module* itself that implement at least one hook."""
        return [
            obj
            for _name, obj in inspect.getmembers(module, inspect.isclass)
            if obj.__module__ == module.__name__ and cls._has_hook_impls(obj)
        ]

    @staticmethod
    def _has_hook_impls(obj: type) -> bool:
        """True when *obj* has a public method marked with ``@hookimpl``."""
        marker = f"{PROJECT_NAME}_impl"
        return any(
            callable(getattr(obj, name, None)) and getattr(getattr(obj, name), marker, None)
            for name in dir(obj)
            if not name.startswith("_")
        )
