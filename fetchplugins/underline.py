from __future__ import annotations

from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import PluginMeta
from fetchlib.pluginBase import PluginBase

typeName = "underline"

pluginMeta = PluginMeta(typeName="underline")


class UnderlinePlugin(PluginBase):
    meta = pluginMeta
    displayName = "Underline"

    def render(self, config: FetchConfig, maxTitleLength: int) -> list[str]:
        return [config.underlineCharacter * config.underlineLength]


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> UnderlinePlugin:
    return UnderlinePlugin(core, params=params, arg=arg)
