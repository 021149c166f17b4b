from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr

typeName = "battery"

pluginMeta = PluginMeta(
    typeName="battery",
    defaultParams={
        "title": "Battery",
        "format": "{percent} ({status})",
        "power_supply_path": "/sys/class/power_supply",
    },
)


@dataclass(frozen=True)
class BatteryInfo:
    modelName: str
    status: str
    percentage: float


class BatteryPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Battery"
    placeholderNames = ("model_name", "status", "percent", "bar")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.supplyPath = Path(parseStr(params.get("power_supply_path")) or "/sys/class/power_supply")

    def readField(self, batteryDir: Path, name: str) -> str:
        try:
            return (batteryDir / name).read_text(encoding="utf-8").strip()
        except OSError:
            return ""

    def fetch(self) -> BatteryInfo:
        try:
            candidates = sorted(p for p in self.supplyPath.iterdir() if p.name.startswith("BAT"))
        except OSError as exc:
            raise ModuleError(self.displayName, f"can't list {self.supplyPath} - {exc.strerror or exc}") from exc
        if not candidates:
            raise ModuleError(self.displayName, "no battery found")

        batteryDir = candidates[0]
        capacity = self.readField(batteryDir, "capacity")
        try:
            percentage = float(capacity)
        except ValueError:
            raise ModuleError(self.displayName, f"could not parse capacity '{capacity}'") from None

        return BatteryInfo(
            modelName=self.readField(batteryDir, "model_name") or "Unknown",
            status=self.readField(batteryDir, "status") or "Unknown",
            percentage=percentage,
        )

    def placeholders(self, record: BatteryInfo, config: FetchConfig) -> dict[str, str]:
        return {"model_name": record.modelName, "status": record.status}

    def percentage(self, record: BatteryInfo) -> float:
        return record.percentage


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> BatteryPlugin:
    return BatteryPlugin(core, params=params, arg=arg)
