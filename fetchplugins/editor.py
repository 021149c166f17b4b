from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase

typeName = "editor"

pluginMeta = PluginMeta(
    typeName="editor",
    defaultParams={
        "title": "Editor",
        "format": "{name}",
    },
)


@dataclass(frozen=True)
class EditorInfo:
    name: str
    path: str


class EditorPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Editor"
    placeholderNames = ("name", "path")

    def fetch(self) -> EditorInfo:
        raw = (os.environ.get("VISUAL") or os.environ.get("EDITOR") or "").strip()
        if not raw:
            raise ModuleError(self.displayName, "neither $VISUAL nor $EDITOR is set")

        # "code --wait" style values carry arguments
        command = raw.split()[0]
        path = command if os.path.isabs(command) else (shutil.which(command) or command)
        return EditorInfo(name=os.path.basename(command), path=path)

    def placeholders(self, record: EditorInfo, config: FetchConfig) -> dict[str, str]:
        return {"name": record.name, "path": record.path}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> EditorPlugin:
    return EditorPlugin(core, params=params, arg=arg)
