from __future__ import annotations

from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr

typeName = "host"

pluginMeta = PluginMeta(
    typeName="host",
    defaultParams={
        "title": "Host",
        "format": "{host}",
        "dmi_path": "/sys/devices/virtual/dmi/id",
    },
)

# vendors fill unused DMI fields with these
PLACEHOLDER_VALUES = {"", "To Be Filled By O.E.M.", "System Product Name", "Default string", "None"}


class HostPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Host"
    placeholderNames = ("host",)

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.dmiPath = Path(parseStr(params.get("dmi_path")) or "/sys/devices/virtual/dmi/id")

    def readField(self, name: str) -> str:
        try:
            val = (self.dmiPath / name).read_text(encoding="utf-8").strip()
        except OSError:
            return ""
        return "" if val in PLACEHOLDER_VALUES else val

    def fetch(self) -> str:
        for fieldName in ("product_name", "board_name"):
            val = self.readField(fieldName)
            if val:
                version = self.readField("product_version")
                return f"{val} {version}" if version and fieldName == "product_name" else val
        raise ModuleError(self.displayName, f"no product or board name under {self.dmiPath}")

    def placeholders(self, record: str, config: FetchConfig) -> dict[str, str]:
        return {"host": record}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> HostPlugin:
    return HostPlugin(core, params=params, arg=arg)
