from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.formatter import autoFormatBytes
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseKeyValueLines, parseStr, readText

typeName = "memory"

pluginMeta = PluginMeta(
    typeName="memory",
    defaultParams={
        "title": "Memory",
        "format": "{used} / {max} ({percent})",
        "source_path": "/proc/meminfo",
    },
)


@dataclass(frozen=True)
class MemoryInfo:
    usedKb: int
    maxKb: int
    percentage: float


def parseMeminfoKb(moduleName: str, fields: dict[str, str], key: str) -> int:
    raw = fields.get(key)
    if raw is None:
        raise ModuleError(moduleName, f"{key} missing from meminfo")
    try:
        # meminfo reports KiB, records hold decimal KB
        return int(float(raw.split()[0]) * 1.024)
    except (ValueError, IndexError):
        raise ModuleError(moduleName, f"could not parse {key}: '{raw}'") from None


class MemoryPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Memory"
    placeholderNames = ("used", "max", "percent", "bar")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.sourcePath = parseStr(params.get("source_path")) or "/proc/meminfo"

    def fetch(self) -> MemoryInfo:
        fields = parseKeyValueLines(readText(self.displayName, self.sourcePath))
        maxKb = parseMeminfoKb(self.displayName, fields, "MemTotal")
        availKb = parseMeminfoKb(self.displayName, fields, "MemAvailable")
        usedKb = max(0, maxKb - availKb)
        percentage = (usedKb / maxKb) * 100.0 if maxKb else 0.0
        return MemoryInfo(usedKb=usedKb, maxKb=maxKb, percentage=percentage)

    def placeholders(self, record: MemoryInfo, config: FetchConfig) -> dict[str, str]:
        places = self.decimalPlaces(config)
        ibis = self.useIbis(config)
        return {
            "used": autoFormatBytes(record.usedKb, ibis, places),
            "max": autoFormatBytes(record.maxKb, ibis, places),
        }

    def percentage(self, record: MemoryInfo) -> float:
        return record.percentage


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> MemoryPlugin:
    return MemoryPlugin(core, params=params, arg=arg)
