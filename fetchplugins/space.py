from __future__ import annotations

from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import PluginMeta
from fetchlib.pluginBase import PluginBase

typeName = "space"

pluginMeta = PluginMeta(typeName="space")


class SpacePlugin(PluginBase):
    meta = pluginMeta
    displayName = "Space"

    def render(self, config: FetchConfig, maxTitleLength: int) -> list[str]:
        return [""]


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> SpacePlugin:
    return SpacePlugin(core, params=params, arg=arg)
