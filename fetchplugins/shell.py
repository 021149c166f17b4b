from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseBool, parseStr, readText

typeName = "shell"

pluginMeta = PluginMeta(
    typeName="shell",
    defaultParams={
        "title": "Shell",
        "format": "{name}",
        "show_default_shell": False,
        "proc_path": "/proc",
    },
)


@dataclass(frozen=True)
class ShellInfo:
    name: str
    path: str


class ShellPlugin(PluginBase):
    """The shell that launched us, or the login shell from $SHELL with show_default_shell."""

    meta = pluginMeta
    displayName = "Shell"
    placeholderNames = ("name", "path")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.showDefaultShell = parseBool(params.get("show_default_shell"), False)
        self.procPath = Path(parseStr(params.get("proc_path")) or "/proc")
        self.startPid = os.getppid()

    def fetchDefaultShell(self) -> ShellInfo:
        raw = parseStr(os.environ.get("SHELL"))
        if not raw:
            raise ModuleError(self.displayName, "$SHELL is not set")
        path = raw if os.path.isabs(raw) else (shutil.which(raw) or raw)
        return ShellInfo(name=os.path.basename(path), path=path)

    def fetchRunningShell(self) -> ShellInfo:
        procDir = self.procPath / str(self.startPid)
        try:
            path = os.readlink(procDir / "exe")
        except OSError as exc:
            raise ModuleError(self.displayName, f"can't read {procDir / 'exe'} - {exc.strerror or exc}") from exc
        name = readText(self.displayName, procDir / "comm").strip() or os.path.basename(path)
        return ShellInfo(name=name, path=path)

    def fetch(self) -> ShellInfo:
        if self.showDefaultShell:
            return self.fetchDefaultShell()
        return self.fetchRunningShell()

    def placeholders(self, record: ShellInfo, config: FetchConfig) -> dict[str, str]:
        return {"name": record.name, "path": record.path}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> ShellPlugin:
    return ShellPlugin(core, params=params, arg=arg)
