from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PluginMeta:
    typeName: str
    defaultParams: dict[str, Any] = field(default_factory=dict)
    dynamicTitle: bool = False  # title depends on fetched data
    multiRow: bool = False      # fetch returns a list, one output line per record


class ModuleError(Exception):
    def __init__(self, moduleName: str, message: str) -> None:
        super().__init__(moduleName, message)
        self.moduleName = str(moduleName)
        self.message = str(message)

    def __str__(self) -> str:
        return f"Module {self.moduleName} failed: {self.message}"


@dataclass(frozen=True)
class FetchResult:
    record: Any = None
    error: ModuleError | None = None
    durationMs: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None
