"""load-plugins: expose a project's declared plugins on a single object."""

__version__ = "0.1.0"

from load_plugins.assembler import PluginNamespace, assemble, is_loaded
from load_plugins.exceptions import (
    ConfigNotFoundError,
    InvalidKeyError,
    KeyCollisionError,
    LoadPluginsError,
    ManifestError,
)
from load_plugins.loader import load_plugins, plan_plugins
from load_plugins.matcher import DEFAULT_PATTERNS
from load_plugins.models import ResolutionEntry
from load_plugins.options import LoaderOptions
from load_plugins.resolver import LazyValue, ModuleResolver

__all__ = [
    "ConfigNotFoundError",
    "DEFAULT_PATTERNS",
    "InvalidKeyError",
    "KeyCollisionError",
    "LazyValue",
    "LoadPluginsError",
    "LoaderOptions",
    "ManifestError",
    "ModuleResolver",
    "PluginNamespace",
    "ResolutionEntry",
    "assemble",
    "is_loaded",
    "load_plugins",
    "plan_plugins",
]
