from .app import FetchApp
from .colors import ColorSpec
from .config import AsciiConfig, FetchConfig, ModuleConfig
from .pluginApi import FetchResult, ModuleError, PluginMeta

__all__ = [
    "FetchApp",
    "ColorSpec",
    "AsciiConfig",
    "FetchConfig",
    "ModuleConfig",
    "FetchResult",
    "ModuleError",
    "PluginMeta",
]
