"""Plugin discovery, loading, and sink dispatch.

Discovery: entry_points (pip-installed) in the ``gridareas.plugins`` group,
plus local single-file plugins from ``.gridareas/plugins/``.
Capabilities: declaration sinks and layout providers.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pluggy

from gridareas.plugins.hookspecs import GridAreasHookSpec

if TYPE_CHECKING:
    from gridareas.domain.declarations import DeclarationRecord, RecordResolver

PROJECT_NAME = "gridareas"
ENTRY_POINT_GROUP = "gridareas.plugins"
LOCAL_PLUGIN_DIR = Path(".gridareas") / "plugins"

logger = logging.getLogger(__name__)


class HookSink:
    """Utility sink that fans out to every registered plugin."""

    def __init__(self, hook: pluggy.HookRelay) -> None:
        self._hook = hook

    def add_utilities(self, utilities: DeclarationRecord) -> None:
        self._hook.add_utilities(utilities=utilities)

    def match_utilities(self, resolvers: Mapping[str, RecordResolver]) -> None:
        self._hook.match_utilities(resolvers=dict(resolvers))


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(GridAreasHookSpec)
        self._loaded: bool = False
        self._checked: set[str] = set()

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        for plugin in self._pm.get_plugins():
            self._warn_unknown_hooks(plugin)
        if local_dir is not None:
            self._discover_local(local_dir)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. the stylesheet sink)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)
        self._warn_unknown_hooks(plugin)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        name = self._pm.get_name(plugin)
        self._pm.unregister(plugin)
        self._checked.discard(name or plugin.__class__.__name__)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    @property
    def sink(self) -> HookSink:
        """A sink forwarding utilities to all registered plugins."""
        return HookSink(self._pm.hook)

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_layouts(self, warnings: list[str]) -> dict[str, Any]:
        """Merge layouts contributed by plugins via ``register_layouts``.

        A plugin returning something other than a dict is skipped with a
        warning appended to *warnings*.
        """
        merged: dict[str, Any] = {}
        # pluggy calls implementations in LIFO order; reverse for registration order.
        for contribution in reversed(self._pm.hook.register_layouts()):
            if contribution is None:
                continue
            if not isinstance(contribution, dict):
                logger.warning("Plugin returned non-dict layout registrations")
                warnings.append("Ignored non-dict layout registrations from a plugin")
                continue
            merged.update(contribution)
        return merged

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python plugins.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module; classes in it that carry hookimpl-decorated methods are
        instantiated and registered. A broken file is logged and skipped.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"gridareas_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name or not self._has_hook_impls(obj):
                    continue
                try:
                    self.register_plugin(obj(), name=f"{module_name}.{obj.__name__}")
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _instantiate_class_plugins(self) -> None:
        """Replace entry-point plugin classes with instances.

        Hook dispatch against a class object leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
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

    def _warn_unknown_hooks(self, plugin: object) -> None:
        """Log hookimpls on *plugin* that match no hookspec.

        pluggy accepts them at registration and never calls them, so a
        misspelled hook would otherwise fail silently.
        """
        plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
        if plugin_name in self._checked:
            return
        self._checked.add(plugin_name)
        for attr in dir(plugin):
            opts = self._pm.parse_hookimpl_opts(plugin, attr)
            if opts is None or opts.get("optionalhook"):
                continue
            hook_name = opts.get("specname") or attr
            caller = getattr(self._pm.hook, hook_name, None)
            if caller is None or not caller.has_spec():
                logger.warning(
                    "Plugin %s implements unknown hook %r; it will never be called",
                    plugin_name,
                    hook_name,
                )

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* has a method marked with ``@hookimpl``.

        ``HookimplMarker("gridareas")`` sets ``gridareas_impl`` on it.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "gridareas_impl", None):
                return True
        return False
