"""Plugin discovery and loading.

Discovery: entry points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery from ``.solidctl/plugins/``.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path

import pluggy

from solidctl.plugins.hookspecs import SolidctlHookSpec

PROJECT_NAME = "solidctl"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(SolidctlHookSpec)
        self._loaded: bool = False

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints("solidctl.plugins")
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._register_variants()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._register_plugin_variants(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python plugins.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module and its hookimpl-carrying classes are instantiated.
        Errors are logged as warnings but never raised.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"solidctl_local_plugin_{py_file.stem}"
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
                if obj.__module__ != module_name:
                    continue
                if not self._has_hook_impls(obj):
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

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly, which
        leaves ``self`` unbound at dispatch time.
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

    def _register_variants(self) -> None:
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            self._register_plugin_variants(plugin, plugin_name)

    @staticmethod
    def _register_plugin_variants(plugin: object, plugin_name: str) -> None:
        """Register variants exposed by a single plugin instance."""
        from solidctl.domain.registry import register_variant

        hook = getattr(plugin, "register_variants", None)
        if hook is None:
            return

        try:
            variant_map = hook()
        except Exception:
            logger.warning(
                "Failed to collect variants from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return

        if variant_map is None:
            return
        if not isinstance(variant_map, dict):
            logger.warning("Plugin %s returned non-dict variant registrations", plugin_name)
            return

        for capability, variants in variant_map.items():
            if not isinstance(variants, dict):
                logger.warning(
                    "Plugin %s returned non-dict variants for %s", plugin_name, capability
                )
                continue
            for key, variant_cls in variants.items():
                try:
                    register_variant(capability, key, variant_cls)
                except (KeyError, TypeError, ValueError):
                    logger.warning(
                        "Skipping %s variant %r from plugin %s",
                        capability,
                        key,
                        plugin_name,
                        exc_info=True,
                    )

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any ``@hookimpl``-decorated methods.

        ``HookimplMarker("solidctl")`` sets a ``solidctl_impl`` attribute.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "solidctl_impl", None):
                return True
        return False
