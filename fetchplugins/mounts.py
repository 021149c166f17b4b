from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.formatter import autoFormatBytes
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr, parseStrList, readText

typeName = "mounts"

pluginMeta = PluginMeta(
    typeName="mounts",
    defaultParams={
        "title": "Disk ({mount})",
        "format": "{space_used} used of {space_total} ({percent}) [{filesystem}]",
        "source_path": "/proc/mounts",
        "ignore": ["/boot", "/snap"],
    },
    dynamicTitle=True,
    multiRow=True,
)


@dataclass(frozen=True)
class MountInfo:
    device: str
    mount: str
    filesystem: str
    spaceAvailKb: int
    spaceTotalKb: int
    percent: float


def decodeMountPoint(raw: str) -> str:
    return raw.replace("\\040", " ").replace("\\011", "\t")


class MountsPlugin(PluginBase):
    meta = pluginMeta
    displayName = "Mounts"
    placeholderNames = (
        "device",
        "mount",
        "filesystem",
        "space_used",
        "space_avail",
        "space_total",
        "percent",
        "bar",
    )

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.sourcePath = parseStr(params.get("source_path")) or "/proc/mounts"
        self.ignoreList = parseStrList(params.get("ignore"))
        self.statFn: Callable[[str], Any] = os.statvfs

    def isIgnored(self, mountPoint: str, filesystem: str) -> bool:
        return any(mountPoint.startswith(x) or filesystem.startswith(x) for x in self.ignoreList)

    def statMount(self, device: str, mountPoint: str, filesystem: str) -> MountInfo:
        try:
            st = self.statFn(mountPoint)
        except OSError as exc:
            raise ModuleError(self.displayName, f"statvfs failed for mount point {mountPoint} ({exc.strerror or exc})") from exc

        totalKb = (st.f_blocks * st.f_frsize) // 1000
        availKb = (st.f_bfree * st.f_frsize) // 1000
        percent = ((totalKb - availKb) / totalKb) * 100.0 if totalKb else 0.0
        return MountInfo(
            device=device,
            mount=mountPoint,
            filesystem=filesystem,
            spaceAvailKb=availKb,
            spaceTotalKb=totalKb,
            percent=percent,
        )

    def fetch(self) -> list[MountInfo]:
        mounts: list[MountInfo] = []
        seenDevices: set[str] = set()

        for line in readText(self.displayName, self.sourcePath).splitlines():
            if not line.strip() or line.startswith("#"):
                continue
            entries = line.split()
            if len(entries) < 3:
                continue

            device, mountPoint, filesystem = entries[0], decodeMountPoint(entries[1]), entries[2]
            # only real block devices, each once
            if not device.startswith("/") or device in seenDevices:
                continue
            seenDevices.add(device)

            if mountPoint in ("none", "swap") or self.isIgnored(mountPoint, filesystem):
                continue

            mounts.append(self.statMount(device, mountPoint, filesystem))

        return mounts

    def placeholders(self, record: MountInfo, config: FetchConfig) -> dict[str, str]:
        places = self.decimalPlaces(config)
        ibis = self.useIbis(config)
        return {
            "device": record.device,
            "mount": record.mount,
            "filesystem": record.filesystem,
            "space_used": autoFormatBytes(record.spaceTotalKb - record.spaceAvailKb, ibis, places),
            "space_avail": autoFormatBytes(record.spaceAvailKb, ibis, places),
            "space_total": autoFormatBytes(record.spaceTotalKb, ibis, places),
        }

    def percentage(self, record: MountInfo) -> float:
        return record.percent


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> MountsPlugin:
    return MountsPlugin(core, params=params, arg=arg)
