from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.colors import replaceColorPlaceholders
from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.formatter import renderFormat
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr, parseStrList

typeName = "packages"

pluginMeta = PluginMeta(
    typeName="packages",
    defaultParams={
        "title": "Packages",
        "format": "{count} ({manager})",
        "ignore": [],
        "root_path": "/",
    },
)


@dataclass(frozen=True)
class ManagerInfo:
    managerName: str
    packageCount: int


def countDirs(path: Path) -> int:
    try:
        return sum(1 for p in path.iterdir() if p.is_dir())
    except OSError:
        return 0


def countDpkg(statusPath: Path) -> int:
    try:
        text = statusPath.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return 0
    return sum(1 for line in text.splitlines() if line.strip() == "Status: install ok installed")


class PackagesPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Packages"
    placeholderNames = ("count", "manager")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.rootPath = Path(parseStr(params.get("root_path")) or "/")
        self.ignoreList = [x.lower() for x in parseStrList(params.get("ignore"))]

    def fetch(self) -> list[ManagerInfo]:
        root = self.rootPath
        counts = [
            ("pacman", countDirs(root / "var/lib/pacman/local")),
            ("dpkg", countDpkg(root / "var/lib/dpkg/status")),
            ("xbps", countDirs(root / "var/db/xbps/.pkgdb") if (root / "var/db/xbps/.pkgdb").is_dir() else 0),
            ("flatpak", countDirs(root / "var/lib/flatpak/app")),
            # /snap/bin holds wrappers, not packages
            ("snap", max(0, countDirs(root / "snap") - (1 if (root / "snap/bin").is_dir() else 0))),
        ]

        managers = [
            ManagerInfo(managerName=name, packageCount=count)
            for name, count in counts
            if count > 0 and name not in self.ignoreList
        ]
        if not managers:
            raise ModuleError(self.displayName, "no supported package manager found")
        return managers

    def style(self, record: list[ManagerInfo], config: FetchConfig, maxTitleLength: int) -> str:
        # format applies per manager, results joined
        value = ", ".join(
            renderFormat(self.formatStr, {"manager": m.managerName, "count": str(m.packageCount)})
            for m in record
        )
        value = replaceColorPlaceholders(value, self.titleColor(config))
        return self.compose(self.title, value, config, maxTitleLength)


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> PackagesPlugin:
    return PackagesPlugin(core, params=params, arg=arg)
