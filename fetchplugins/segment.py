from __future__ import annotations

from typing import Any

from fetchlib.colors import replaceColorPlaceholders
from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.formatter import renderFormat
from fetchlib.pluginApi import PluginMeta
from fetchlib.pluginBase import PluginBase

typeName = "segment"

pluginMeta = PluginMeta(typeName="segment")


class SegmentPlugin(PluginBase):
    """Header line opening a named group, used as segment:NAME."""

    meta = pluginMeta
    displayName = "Segment"

    @property
    def segmentName(self) -> str:
        return str(self.arg or self.params.get("name") or "")

    def render(self, config: FetchConfig, maxTitleLength: int) -> list[str]:
        self.core.currentSegment = self.segmentName
        line = renderFormat(config.segmentTop, {"name": self.segmentName})
        return [replaceColorPlaceholders(line, config.titleColor)]


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> SegmentPlugin:
    return SegmentPlugin(core, params=params, arg=arg)
