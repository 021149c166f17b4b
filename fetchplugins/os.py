from __future__ import annotations

import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseOsRelease, parseStr, readText

typeName = "os"

pluginMeta = PluginMeta(
    typeName="os",
    defaultParams={
        "title": "Operating System",
        "format": "{distro} ({kernel})",
        "source_path": "/etc/os-release",
        "kernel_path": "/proc/sys/kernel/osrelease",
    },
)


@dataclass(frozen=True)
class OsInfo:
    distro: str
    kernel: str
    id: str


class OsPlugin(PluginBase):
    meta = pluginMeta
    displayName = "OS"
    placeholderNames = ("distro", "kernel", "id")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.sourcePath = parseStr(params.get("source_path")) or "/etc/os-release"
        self.kernelPath = parseStr(params.get("kernel_path"))

    def readKernel(self) -> str:
        if self.kernelPath:
            try:
                return Path(self.kernelPath).read_text(encoding="utf-8").strip()
            except OSError as exc:
                self.writeLog(f"can't read {self.kernelPath} ({exc.strerror or exc}), using uname")
        return platform.release() or "Unknown"

    def fetch(self) -> OsInfo:
        fields = parseOsRelease(readText(self.displayName, self.sourcePath))
        distro = fields.get("PRETTY_NAME") or fields.get("NAME")
        if not distro:
            raise ModuleError(self.displayName, f"no PRETTY_NAME or NAME in {self.sourcePath}")
        return OsInfo(distro=distro, kernel=self.readKernel(), id=fields.get("ID", "linux"))

    def placeholders(self, record: OsInfo, config: FetchConfig) -> dict[str, str]:
        return {"distro": record.distro, "kernel": record.kernel, "id": record.id}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> OsPlugin:
    return OsPlugin(core, params=params, arg=arg)
