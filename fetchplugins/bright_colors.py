from __future__ import annotations

from typing import Any

from fetchlib.colors import BRIGHT_COLORS
from fetchlib.core import FetchCore
from fetchlib.pluginApi import PluginMeta

from .colors import SwatchPlugin

typeName = "bright_colors"

pluginMeta = PluginMeta(
    typeName="bright_colors",
    defaultParams={
        "title": "",
        "format": "{swatch}",
        "glyph": "███",
    },
)


class BrightSwatchPlugin(SwatchPlugin):
    meta = pluginMeta
    displayName = "BrightColors"
    palette = BRIGHT_COLORS


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> BrightSwatchPlugin:
    return BrightSwatchPlugin(core, params=params, arg=arg)
