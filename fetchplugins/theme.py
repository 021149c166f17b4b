from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr

typeName = "theme"

pluginMeta = PluginMeta(
    typeName="theme",
    defaultParams={
        "title": "Theme",
        "format": "{gtk3}",
        "config_path": "",
    },
)

DEFAULT_GTK_VALUE = "Adwaita"
GTK_SETTINGS_FILES = (
    ("gtk2", "gtk-2.0/settings.ini"),
    ("gtk3", "gtk-3.0/settings.ini"),
    ("gtk4", "gtk-4.0/settings.ini"),
)


@dataclass(frozen=True)
class GtkSettings:
    gtk2: str
    gtk3: str
    gtk4: str


def readGtkProperty(prop: str, path: Path) -> str | None:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None

    for line in text.splitlines():
        if "=" not in line:
            continue
        k, v = line.split("=", 1)
        if k.strip() == prop:
            val = v.strip().strip('"').strip("'")
            return val or None
    return None


class GtkSettingPlugin(PluginBase):
    """One settings.ini key read for each GTK major version."""

    meta = pluginMeta
    displayName = "Theme"
    placeholderNames = ("gtk2", "gtk3", "gtk4")
    gtkProperty = "gtk-theme-name"

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.configPath = parseStr(params.get("config_path"))

    def configDir(self) -> Path:
        if self.configPath:
            return Path(self.configPath)
        xdg = parseStr(os.environ.get("XDG_CONFIG_HOME"))
        if xdg:
            return Path(xdg)
        home = parseStr(os.environ.get("HOME"))
        if home:
            return Path(home) / ".config"
        raise ModuleError(self.displayName, "unable to find a config directory")

    def fetch(self) -> GtkSettings:
        baseDir = self.configDir()
        values: dict[str, str] = {}
        for key, relPath in GTK_SETTINGS_FILES:
            values[key] = readGtkProperty(self.gtkProperty, baseDir / relPath) or DEFAULT_GTK_VALUE
        return GtkSettings(**values)

    def placeholders(self, record: GtkSettings, config: FetchConfig) -> dict[str, str]:
        return {"gtk2": record.gtk2, "gtk3": record.gtk3, "gtk4": record.gtk4}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> GtkSettingPlugin:
    return GtkSettingPlugin(core, params=params, arg=arg)
