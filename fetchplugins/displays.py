from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.formatter import formatNumber, roundHalfAway
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr

typeName = "displays"

pluginMeta = PluginMeta(
    typeName="displays",
    defaultParams={
        "title": "Display ({name})",
        "format": "{width}x{height} @ {refresh_rate}Hz",
        "drm_path": "/sys/class/drm",
    },
    dynamicTitle=True,
    multiRow=True,
)

reConnector = re.compile(r"^card\d+-(.+)$")
reMode = re.compile(r"^(\d+)x(\d+)")

EDID_HEADER = b"\x00\xff\xff\xff\xff\xff\xff\x00"


@dataclass(frozen=True)
class DisplayInfo:
    name: str
    width: int
    height: int
    refreshRate: float | None = None


def edidRefreshRate(edid: bytes) -> float | None:
    """Refresh rate of the preferred mode, from the first detailed timing descriptor."""
    if len(edid) < 72 or not edid.startswith(EDID_HEADER):
        return None
    dtd = edid[54:72]
    pixelClockHz = int.from_bytes(dtd[0:2], "little") * 10000
    if pixelClockHz == 0:
        return None

    hTotal = (dtd[2] | ((dtd[4] & 0xF0) << 4)) + (dtd[3] | ((dtd[4] & 0x0F) << 8))
    vTotal = (dtd[5] | ((dtd[7] & 0xF0) << 4)) + (dtd[6] | ((dtd[7] & 0x0F) << 8))
    if not hTotal or not vTotal:
        return None
    return pixelClockHz / (hTotal * vTotal)


class DisplaysPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Displays"
    placeholderNames = ("name", "width", "height", "refresh_rate")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.drmPath = Path(parseStr(params.get("drm_path")) or "/sys/class/drm")

    def readRefreshRate(self, connectorDir: Path) -> float | None:
        try:
            return edidRefreshRate((connectorDir / "edid").read_bytes())
        except OSError as exc:
            self.writeLog(f"no edid for {connectorDir.name}: {exc.strerror or exc}")
            return None

    def readConnector(self, connectorDir: Path, name: str) -> DisplayInfo | None:
        try:
            if (connectorDir / "status").read_text(encoding="utf-8").strip() != "connected":
                return None
            modes = (connectorDir / "modes").read_text(encoding="utf-8").splitlines()
        except OSError:
            return None

        # first listed mode is the preferred one
        m = reMode.match(modes[0].strip()) if modes else None
        if m is None:
            return None
        return DisplayInfo(
            name=name,
            width=int(m.group(1)),
            height=int(m.group(2)),
            refreshRate=self.readRefreshRate(connectorDir),
        )

    def fetch(self) -> list[DisplayInfo]:
        try:
            entries = sorted(self.drmPath.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise ModuleError(self.displayName, f"can't list {self.drmPath} - {exc.strerror or exc}") from exc

        displays: list[DisplayInfo] = []
        for entry in entries:
            m = reConnector.match(entry.name)
            if m is None:
                continue
            info = self.readConnector(entry, m.group(1))
            if info is not None:
                displays.append(info)

        if not displays:
            raise ModuleError(self.displayName, "no connected displays found")
        return displays

    def placeholders(self, record: DisplayInfo, config: FetchConfig) -> dict[str, str]:
        if record.refreshRate is None:
            refresh = "Unknown"
        else:
            places = self.decimalPlaces(config)
            refresh = formatNumber(roundHalfAway(record.refreshRate, places), places)
        return {
            "name": record.name,
            "width": str(record.width),
            "height": str(record.height),
            "refresh_rate": refresh,
        }


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> DisplaysPlugin:
    return DisplaysPlugin(core, params=params, arg=arg)
