from __future__ import annotations

from typing import Any

from fetchlib.core import FetchCore
from fetchlib.pluginApi import PluginMeta

from .theme import GtkSettingPlugin

typeName = "icon_theme"

pluginMeta = PluginMeta(
    typeName="icon_theme",
    defaultParams={
        "title": "Icons",
        "format": "{gtk3}",
        "config_path": "",
    },
)


class IconThemePlugin(GtkSettingPlugin):
    meta = pluginMeta
    displayName = "Icons"
    gtkProperty = "gtk-icon-theme-name"


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> IconThemePlugin:
    return IconThemePlugin(core, params=params, arg=arg)
