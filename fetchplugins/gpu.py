from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.formatter import autoFormatBytes
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr, parseStrList

typeName = "gpu"

pluginMeta = PluginMeta(
    typeName="gpu",
    defaultParams={
        "title": "GPU",
        "format": "{vendor} {model}",
        "drm_path": "/sys/class/drm",
        "pci_ids_paths": ["/usr/share/hwdata/pci.ids", "/usr/share/misc/pci.ids"],
    },
    multiRow=True,
)

VENDOR_NAMES: dict[str, str] = {
    "10de": "NVIDIA",
    "1002": "AMD",
    "8086": "Intel",
    "1af4": "Red Hat",
    "15ad": "VMware",
    "80ee": "VirtualBox",
    "1234": "QEMU",
}

reCard = re.compile(r"^card(\d+)$")


@dataclass(frozen=True)
class GpuInfo:
    index: int
    vendor: str
    model: str
    vramKb: int


def lookupPciModel(pciIdsText: str, vendorId: str, deviceId: str) -> str | None:
    """Device name from a pci.ids database: vendor lines at column 0, devices one tab in."""
    inVendor = False
    for line in pciIdsText.splitlines():
        if not line or line.startswith("#"):
            continue
        if not line.startswith("\t"):
            inVendor = line[:4].lower() == vendorId
            continue
        if inVendor and not line.startswith("\t\t") and line[1:5].lower() == deviceId:
            return line[5:].strip()
    return None


def readHexId(path: Path) -> str:
    return path.read_text(encoding="utf-8").strip().lower().removeprefix("0x")


class GpuPlugin(PluginBase):
    meta = pluginMeta
    displayName = "GPU"
    placeholderNames = ("index", "vendor", "model", "vram")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.drmPath = Path(parseStr(params.get("drm_path")) or "/sys/class/drm")
        self.pciIdsPaths = parseStrList(params.get("pci_ids_paths"))
        self.pciIdsText: str | None = None

    def pciIds(self) -> str:
        if self.pciIdsText is None:
            self.pciIdsText = ""
            for p in self.pciIdsPaths:
                try:
                    self.pciIdsText = Path(p).read_text(encoding="utf-8", errors="replace")
                    break
                except OSError:
                    continue
        return self.pciIdsText

    def readVramKb(self, deviceDir: Path) -> int:
        try:
            return int((deviceDir / "mem_info_vram_total").read_text(encoding="utf-8").strip()) // 1000
        except (OSError, ValueError):
            return 0

    def fetch(self) -> list[GpuInfo]:
        try:
            cardDirs = sorted(
                (p for p in self.drmPath.iterdir() if reCard.match(p.name)),
                key=lambda p: int(reCard.match(p.name).group(1)),
            )
        except OSError as exc:
            raise ModuleError(self.displayName, f"can't list {self.drmPath} - {exc.strerror or exc}") from exc

        gpus: list[GpuInfo] = []
        for cardDir in cardDirs:
            deviceDir = cardDir / "device"
            try:
                vendorId = readHexId(deviceDir / "vendor")
                deviceId = readHexId(deviceDir / "device")
            except OSError:
                continue

            model = lookupPciModel(self.pciIds(), vendorId, deviceId) or f"Unknown device {deviceId}"
            gpus.append(
                GpuInfo(
                    index=len(gpus) + 1,
                    vendor=VENDOR_NAMES.get(vendorId, f"Unknown vendor {vendorId}"),
                    model=model,
                    vramKb=self.readVramKb(deviceDir),
                )
            )

        if not gpus:
            raise ModuleError(self.displayName, f"no GPUs found under {self.drmPath}")
        return gpus

    def placeholders(self, record: GpuInfo, config: FetchConfig) -> dict[str, str]:
        return {
            "index": str(record.index),
            "vendor": record.vendor,
            "model": record.model,
            "vram": autoFormatBytes(record.vramKb, self.useIbis(config), 0),
        }


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> GpuPlugin:
    return GpuPlugin(core, params=params, arg=arg)
