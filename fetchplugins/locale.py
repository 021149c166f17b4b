from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase

typeName = "locale"

pluginMeta = PluginMeta(
    typeName="locale",
    defaultParams={
        "title": "Locale",
        "format": "{language} ({encoding})",
    },
)


@dataclass(frozen=True)
class LocaleInfo:
    language: str
    encoding: str


class LocalePlugin(PluginBase):
    meta = pluginMeta
    displayName = "Locale"
    placeholderNames = ("language", "encoding")

    def fetch(self) -> LocaleInfo:
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            raw = (os.environ.get(var) or "").strip()
            if raw:
                break
        else:
            raise ModuleError(self.displayName, "none of $LC_ALL, $LC_MESSAGES, $LANG is set")

        language, _, encoding = raw.partition(".")
        return LocaleInfo(language=language, encoding=encoding.split("@")[0] or "Unknown")

    def placeholders(self, record: LocaleInfo, config: FetchConfig) -> dict[str, str]:
        return {"language": record.language, "encoding": record.encoding}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> LocalePlugin:
    return LocalePlugin(core, params=params, arg=arg)
