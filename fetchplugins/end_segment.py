from __future__ import annotations

from typing import Any

from fetchlib.colors import replaceColorPlaceholders
from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.formatter import renderFormat
from fetchlib.pluginApi import PluginMeta
from fetchlib.pluginBase import PluginBase

typeName = "end_segment"

pluginMeta = PluginMeta(typeName="end_segment")


class EndSegmentPlugin(PluginBase):
    meta = pluginMeta
    displayName = "EndSegment"

    def render(self, config: FetchConfig, maxTitleLength: int) -> list[str]:
        name = self.core.currentSegment
        # " {name} " in the header is two wider than the name itself
        gap = "-" * (len(name) + 2)
        self.core.currentSegment = ""
        line = renderFormat(config.segmentBottom, {"name": name, "name_sized_gap": gap})
        return [replaceColorPlaceholders(line, config.titleColor)]


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> EndSegmentPlugin:
    return EndSegmentPlugin(core, params=params, arg=arg)
