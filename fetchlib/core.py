from __future__ import annotations

import time
from typing import Any

from .pluginApi import FetchResult, ModuleError


class FetchCore:
    def __init__(self, *, pluginRegistry: Any = None) -> None:
        self.pluginRegistry = pluginRegistry
        self.commandLog: list[str] = []
        self.maxLogLines: int = 512

        # one entry per module identity, filled by the alignment pre-pass or the render pass
        self.resultsByKey: dict[str, FetchResult] = {}
        self.fetchCounts: dict[str, int] = {}

        # name of the last opened segment, read by end_segment
        self.currentSegment: str = ""

    def writeLog(self, msg: str) -> None:
        tsStr = time.strftime("%H:%M:%S")
        self.commandLog.append(f"[{tsStr}] {msg}")
        if len(self.commandLog) > self.maxLogLines:
            del self.commandLog[: -self.maxLogLines]

    def cacheKeyFor(self, pluginObj: Any) -> str:
        typeName = str(getattr(pluginObj, "typeName", "") or "").strip().lower() or "?"
        arg = getattr(pluginObj, "arg", None)
        return f"{typeName}:{arg}" if arg else typeName

    def fetchCached(self, pluginObj: Any) -> FetchResult:
        key = self.cacheKeyFor(pluginObj)
        cached = self.resultsByKey.get(key)
        if cached is not None:
            return cached

        displayName = str(getattr(pluginObj, "displayName", "") or key)
        self.fetchCounts[key] = self.fetchCounts.get(key, 0) + 1
        startTs = time.perf_counter()
        try:
            record = pluginObj.fetch()
            error = None
        except ModuleError as exc:
            record = None
            error = exc
        except Exception as exc:
            record = None
            error = ModuleError(displayName, f"{type(exc).__name__}: {exc}")
        durationMs = (time.perf_counter() - startTs) * 1000.0

        if error is None:
            self.writeLog(f"fetched {key} in {durationMs:.2f}ms")
        else:
            self.writeLog(f"{error} ({durationMs:.2f}ms)")

        result = FetchResult(record=record, error=error, durationMs=durationMs)
        self.resultsByKey[key] = result
        return result

    def fetchCount(self, pluginObj: Any) -> int:
        return self.fetchCounts.get(self.cacheKeyFor(pluginObj), 0)
