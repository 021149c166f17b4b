from __future__ import annotations

from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr, readText

typeName = "uptime"

pluginMeta = PluginMeta(
    typeName="uptime",
    defaultParams={
        "title": "Uptime",
        "format": "{time}",
        "source_path": "/proc/uptime",
    },
)


def formatDuration(totalSec: int) -> str:
    days, rem = divmod(int(totalSec), 86400)
    hours, rem = divmod(rem, 3600)
    minutes, seconds = divmod(rem, 60)

    parts: list[str] = []
    for amount, unit in ((days, "day"), (hours, "hour"), (minutes, "min")):
        if amount:
            parts.append(f"{amount} {unit}{'s' if amount != 1 else ''}")
    if not parts:
        parts.append(f"{seconds} sec{'s' if seconds != 1 else ''}")
    return ", ".join(parts)


class UptimePlugin(PluginBase):
    meta = pluginMeta
    displayName = "Uptime"
    placeholderNames = ("time", "days", "hours", "minutes")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.sourcePath = parseStr(params.get("source_path")) or "/proc/uptime"

    def fetch(self) -> int:
        raw = readText(self.displayName, self.sourcePath).split()
        try:
            return int(float(raw[0]))
        except (ValueError, IndexError):
            raise ModuleError(self.displayName, f"could not parse {self.sourcePath}") from None

    def placeholders(self, record: int, config: FetchConfig) -> dict[str, str]:
        return {
            "time": formatDuration(record),
            "days": str(record // 86400),
            "hours": str((record % 86400) // 3600),
            "minutes": str((record % 3600) // 60),
        }


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> UptimePlugin:
    return UptimePlugin(core, params=params, arg=arg)
