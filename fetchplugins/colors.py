from __future__ import annotations

from typing import Any

from fetchlib.colors import NORMAL_COLORS, ColorSpec
from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import PluginMeta
from fetchlib.pluginBase import PluginBase

typeName = "colors"

pluginMeta = PluginMeta(
    typeName="colors",
    defaultParams={
        "title": "",
        "format": "{swatch}",
        "glyph": "███",
    },
)


class SwatchPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Colors"
    placeholderNames = ("swatch",)
    palette: tuple[ColorSpec, ...] = NORMAL_COLORS

    def placeholders(self, record: Any, config: FetchConfig) -> dict[str, str]:
        glyph = str(self.params.get("glyph") or "███")
        return {"swatch": "".join(c.apply(glyph) for c in self.palette)}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> SwatchPlugin:
    return SwatchPlugin(core, params=params, arg=arg)
