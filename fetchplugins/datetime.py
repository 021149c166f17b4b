from __future__ import annotations

from datetime import datetime
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import PluginMeta
from fetchlib.pluginBase import PluginBase

typeName = "datetime"

pluginMeta = PluginMeta(
    typeName="datetime",
    defaultParams={
        "title": "Date Time",
        "format": "{date_time}",
        "datetime_format": "%Y-%m-%d %H:%M:%S",
    },
)


class DateTimePlugin(PluginBase):
    meta = pluginMeta
    displayName = "DateTime"
    placeholderNames = ("date_time",)

    def fetch(self) -> datetime:
        return datetime.now()

    def placeholders(self, record: datetime, config: FetchConfig) -> dict[str, str]:
        fmt = str(self.params.get("datetime_format") or "%Y-%m-%d %H:%M:%S")
        return {"date_time": record.strftime(fmt)}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> DateTimePlugin:
    return DateTimePlugin(core, params=params, arg=arg)
