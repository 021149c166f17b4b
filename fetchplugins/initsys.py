from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr, readText

typeName = "initsys"

pluginMeta = PluginMeta(
    typeName="initsys",
    defaultParams={
        "title": "Init System",
        "format": "{name}",
        "proc_path": "/proc",
    },
)


@dataclass(frozen=True)
class InitSysInfo:
    name: str
    path: str


class InitSysPlugin(PluginBase):
    meta = pluginMeta
    displayName = "InitSys"
    placeholderNames = ("name", "path")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.procPath = Path(parseStr(params.get("proc_path")) or "/proc")

    def fetch(self) -> InitSysInfo:
        name = readText(self.displayName, self.procPath / "1" / "comm").strip()
        try:
            path = os.readlink(self.procPath / "1" / "exe")
        except OSError:
            # usually needs root
            path = "Unknown"
        return InitSysInfo(name=name, path=path)

    def placeholders(self, record: InitSysInfo, config: FetchConfig) -> dict[str, str]:
        return {"name": record.name, "path": record.path}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> InitSysPlugin:
    return InitSysPlugin(core, params=params, arg=arg)
