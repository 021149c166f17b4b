from __future__ import annotations

import getpass
import os
import socket
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr

typeName = "hostname"

pluginMeta = PluginMeta(
    typeName="hostname",
    defaultParams={
        "title": "",
        "format": "{color-title}{username}{color-white}@{color-title}{hostname}",
        "source_path": "/etc/hostname",
    },
)


@dataclass(frozen=True)
class HostnameInfo:
    username: str
    hostname: str


class HostnamePlugin(PluginBase):
    meta = pluginMeta
    displayName = "Hostname"
    placeholderNames = ("username", "hostname")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.sourcePath = parseStr(params.get("source_path"))

    def readUsername(self) -> str:
        name = parseStr(os.environ.get("USER"))
        if name:
            return name
        try:
            return getpass.getuser()
        except (OSError, KeyError) as exc:
            raise ModuleError(self.displayName, f"unable to determine username: {exc}") from exc

    def readHostname(self) -> str:
        if self.sourcePath:
            try:
                name = Path(self.sourcePath).read_text(encoding="utf-8").strip()
                if name:
                    return name
            except OSError as exc:
                self.writeLog(f"can't read {self.sourcePath} ({exc.strerror or exc}), asking the socket layer")
        return socket.gethostname()

    def fetch(self) -> HostnameInfo:
        return HostnameInfo(username=self.readUsername(), hostname=self.readHostname())

    def placeholders(self, record: HostnameInfo, config: FetchConfig) -> dict[str, str]:
        return {"username": record.username, "hostname": record.hostname}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> HostnamePlugin:
    return HostnamePlugin(core, params=params, arg=arg)
