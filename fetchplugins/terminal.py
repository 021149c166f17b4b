from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseKeyValueLines, parseStr

typeName = "terminal"

pluginMeta = PluginMeta(
    typeName="terminal",
    defaultParams={
        "title": "Terminal",
        "format": "{name}",
        "proc_path": "/proc",
    },
)

# processes between us and the terminal emulator
SKIP_NAMES = {"sh", "bash", "zsh", "fish", "dash", "ksh", "tcsh", "nu", "sudo", "doas", "su", "login",
              "python", "python3", "overfetch", "tmux: server", "screen"}


class TerminalPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Terminal"
    placeholderNames = ("name",)

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.procPath = Path(parseStr(params.get("proc_path")) or "/proc")
        self.startPid = os.getppid()

    def readStatus(self, pid: int) -> dict[str, str]:
        try:
            return parseKeyValueLines((self.procPath / str(pid) / "status").read_text(encoding="utf-8"))
        except OSError:
            return {}

    def fetch(self) -> str:
        termProgram = parseStr(os.environ.get("TERM_PROGRAM"))
        if termProgram:
            return termProgram

        pid = self.startPid
        for _ in range(16):
            if pid <= 1:
                break
            status = self.readStatus(pid)
            name = status.get("Name", "")
            if not name:
                break
            if name.startswith("sshd"):
                return "SSH Session"
            if name not in SKIP_NAMES and not name.startswith("python"):
                return name
            try:
                pid = int(status.get("PPid", "0"))
            except ValueError:
                break

        raise ModuleError(self.displayName, "no terminal process found above this one")

    def placeholders(self, record: str, config: FetchConfig) -> dict[str, str]:
        return {"name": record}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> TerminalPlugin:
    return TerminalPlugin(core, params=params, arg=arg)
