from __future__ import annotations

import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.formatter import formatNumber, roundHalfAway
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr, readText

typeName = "cpu"

pluginMeta = PluginMeta(
    typeName="cpu",
    defaultParams={
        "title": "Processor",
        "format": "{name} ({core_count}c {thread_count}t) @ {max_clock_ghz} GHz",
        "source_path": "/proc/cpuinfo",
        "max_freq_path": "/sys/devices/system/cpu/cpu0/cpufreq/cpuinfo_max_freq",
    },
)


@dataclass(frozen=True)
class CpuInfo:
    name: str
    cores: int
    threads: int
    currentClockMhz: float
    maxClockMhz: float
    arch: str


def parseCpuinfo(text: str) -> tuple[str, int, int, float]:
    """Model name, cores and threads of the first entry plus the average current clock."""
    name = ""
    cores = 0
    threads = 0
    processorCount = 0
    mhzValues: list[float] = []

    firstEntry = True
    for line in text.splitlines():
        if not line.strip():
            if processorCount:
                firstEntry = False
            continue
        if ":" not in line:
            continue
        key, val = (p.strip() for p in line.split(":", 1))

        if key == "processor":
            processorCount += 1
        elif key == "cpu MHz":
            try:
                mhzValues.append(float(val))
            except ValueError:
                pass

        if not firstEntry:
            continue
        if key == "model name" and not name:
            name = val
        elif key == "cpu cores":
            cores = int(val) if val.isdigit() else 0
        elif key == "siblings":
            threads = int(val) if val.isdigit() else 0

    threads = threads or processorCount
    cores = cores or threads
    currentMhz = sum(mhzValues) / len(mhzValues) if mhzValues else 0.0
    return name, cores, threads, currentMhz


class CpuPlugin(PluginBase):
    meta = pluginMeta
    displayName = "CPU"
    placeholderNames = (
        "name",
        "core_count",
        "thread_count",
        "current_clock_mhz",
        "current_clock_ghz",
        "max_clock_mhz",
        "max_clock_ghz",
        "arch",
    )

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.sourcePath = parseStr(params.get("source_path")) or "/proc/cpuinfo"
        self.maxFreqPath = parseStr(params.get("max_freq_path"))

    def readMaxClockMhz(self) -> float | None:
        if not self.maxFreqPath:
            return None
        try:
            # cpufreq reports kHz
            return float(Path(self.maxFreqPath).read_text(encoding="utf-8").strip()) / 1000.0
        except (OSError, ValueError) as exc:
            self.writeLog(f"no max clock from {self.maxFreqPath}: {exc}")
            return None

    def fetch(self) -> CpuInfo:
        name, cores, threads, currentMhz = parseCpuinfo(readText(self.displayName, self.sourcePath))
        if not name:
            raise ModuleError(self.displayName, f"no model name in {self.sourcePath}")

        maxMhz = self.readMaxClockMhz()
        return CpuInfo(
            name=name,
            cores=cores,
            threads=threads,
            currentClockMhz=currentMhz,
            maxClockMhz=maxMhz if maxMhz is not None else currentMhz,
            arch=platform.machine() or "Unknown",
        )

    def placeholders(self, record: CpuInfo, config: FetchConfig) -> dict[str, str]:
        places = self.decimalPlaces(config)

        def clock(val: float) -> str:
            return formatNumber(roundHalfAway(val, places), places)

        return {
            "name": record.name,
            "core_count": str(record.cores),
            "thread_count": str(record.threads),
            "current_clock_mhz": clock(record.currentClockMhz),
            "current_clock_ghz": clock(record.currentClockMhz / 1000.0),
            "max_clock_mhz": clock(record.maxClockMhz),
            "max_clock_ghz": clock(record.maxClockMhz / 1000.0),
            "arch": record.arch,
        }


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> CpuPlugin:
    return CpuPlugin(core, params=params, arg=arg)
