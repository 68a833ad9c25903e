"""Plugin system: pluggy hookspecs and plugin discovery."""

from solidctl.plugins.hookspecs import SolidctlHookSpec
from solidctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "SolidctlHookSpec"]
