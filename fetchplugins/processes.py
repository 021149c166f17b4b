from __future__ import annotations

from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr

typeName = "processes"

pluginMeta = PluginMeta(
    typeName="processes",
    defaultParams={
        "title": "Total Processes",
        "format": "{count}",
        "proc_path": "/proc",
    },
)


class ProcessesPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Processes"
    placeholderNames = ("count",)

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.procPath = Path(parseStr(params.get("proc_path")) or "/proc")

    def fetch(self) -> int:
        try:
            return sum(1 for p in self.procPath.iterdir() if p.name.isdigit())
        except OSError as exc:
            raise ModuleError(self.displayName, f"can't list {self.procPath} - {exc.strerror or exc}") from exc

    def placeholders(self, record: int, config: FetchConfig) -> dict[str, str]:
        return {"count": str(record)}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> ProcessesPlugin:
    return ProcessesPlugin(core, params=params, arg=arg)
