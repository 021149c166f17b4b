from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase

typeName = "desktop"

pluginMeta = PluginMeta(
    typeName="desktop",
    defaultParams={
        "title": "Desktop",
        "format": "{desktop} ({display_type})",
    },
)


@dataclass(frozen=True)
class DesktopInfo:
    desktop: str
    displayType: str


def detectDisplayType(env: dict[str, str]) -> str:
    sessionType = (env.get("XDG_SESSION_TYPE") or "").strip().lower()
    if sessionType in ("wayland", "x11", "tty"):
        return sessionType.capitalize() if sessionType == "wayland" else sessionType.upper()
    if env.get("WAYLAND_DISPLAY"):
        return "Wayland"
    if env.get("DISPLAY"):
        return "X11"
    return "Unknown"


class DesktopPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Desktop"
    placeholderNames = ("desktop", "display_type")

    def fetch(self) -> DesktopInfo:
        env = dict(os.environ)
        desktop = (env.get("XDG_CURRENT_DESKTOP") or env.get("DESKTOP_SESSION") or "").strip()
        if not desktop:
            raise ModuleError(self.displayName, "no $XDG_CURRENT_DESKTOP or $DESKTOP_SESSION")
        # "ubuntu:GNOME" lists several names, the last is the real one
        return DesktopInfo(desktop=desktop.split(":")[-1], displayType=detectDisplayType(env))

    def placeholders(self, record: DesktopInfo, config: FetchConfig) -> dict[str, str]:
        return {"desktop": record.desktop, "display_type": record.displayType}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> DesktopPlugin:
    return DesktopPlugin(core, params=params, arg=arg)
