from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.formatter import autoFormatBytes
from fetchlib.pluginApi import PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseKeyValueLines, parseStr, readText

from .memory import parseMeminfoKb

typeName = "swap"

pluginMeta = PluginMeta(
    typeName="swap",
    defaultParams={
        "title": "Swap",
        "format": "{used} / {total} ({percent})",
        "source_path": "/proc/meminfo",
    },
)


@dataclass(frozen=True)
class SwapInfo:
    usedKb: int
    totalKb: int
    percentage: float


class SwapPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Swap"
    placeholderNames = ("used", "total", "percent", "bar")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.sourcePath = parseStr(params.get("source_path")) or "/proc/meminfo"

    def fetch(self) -> SwapInfo:
        fields = parseKeyValueLines(readText(self.displayName, self.sourcePath))
        totalKb = parseMeminfoKb(self.displayName, fields, "SwapTotal")
        freeKb = parseMeminfoKb(self.displayName, fields, "SwapFree")
        usedKb = max(0, totalKb - freeKb)
        # no swap configured is 0%, not an error
        percentage = (usedKb / totalKb) * 100.0 if totalKb else 0.0
        return SwapInfo(usedKb=usedKb, totalKb=totalKb, percentage=percentage)

    def placeholders(self, record: SwapInfo, config: FetchConfig) -> dict[str, str]:
        places = self.decimalPlaces(config)
        ibis = self.useIbis(config)
        return {
            "used": autoFormatBytes(record.usedKb, ibis, places),
            "total": autoFormatBytes(record.totalKb, ibis, places),
        }

    def percentage(self, record: SwapInfo) -> float:
        return record.percentage


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> SwapPlugin:
    return SwapPlugin(core, params=params, arg=arg)
