from __future__ import annotations

import importlib
import pkgutil
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .config import FetchConfig, ModuleConfig
from .pluginApi import PluginMeta

CreatePluginFn = Callable[[Any, dict[str, Any], "str | None"], Any]


@dataclass(frozen=True)
class LoadedPlugin:
    moduleName: str
    meta: PluginMeta
    createPlugin: CreatePluginFn


class UnknownModule:
    """Plan entry for a configured name no plugin provides."""

    def __init__(self, typeName: str) -> None:
        self.typeName = typeName

    def render(self, config: FetchConfig, maxTitleLength: int) -> list[str]:
        return [f"Unknown module: {self.typeName}"]


class PluginRegistry:
    def __init__(self) -> None:
        self.pluginsByType: dict[str, LoadedPlugin] = {}

    def resolve(self, typeName: str) -> LoadedPlugin | None:
        return self.pluginsByType.get(str(typeName or "").strip().lower())

    def register(self, meta: PluginMeta, createPlugin: CreatePluginFn, *, moduleName: str = "?") -> None:
        key = str(meta.typeName or "").strip().lower()
        if not key:
            raise RuntimeError(f"{moduleName}: plugin without a type name")

        existing = self.pluginsByType.get(key)
        if existing is not None and existing.moduleName != moduleName:
            raise RuntimeError(f"module type '{key}' defined by both {existing.moduleName} and {moduleName}")
        self.pluginsByType[key] = LoadedPlugin(moduleName=moduleName, meta=meta, createPlugin=createPlugin)

    def loadPluginModule(self, moduleName: str) -> bool:
        mod = importlib.import_module(moduleName)

        metaObj = getattr(mod, "pluginMeta", None)
        createPluginFn = getattr(mod, "createPlugin", None)
        if not isinstance(metaObj, PluginMeta) or not callable(createPluginFn):
            return False

        self.register(metaObj, createPluginFn, moduleName=moduleName)
        return True

    def loadPluginsFromPackage(self, packageName: str) -> int:
        pkg = importlib.import_module(packageName)
        pkgPath = getattr(pkg, "__path__", None)
        if pkgPath is None:
            return 0

        count = 0
        for modInfo in pkgutil.iter_modules(pkgPath, pkg.__name__ + "."):
            if modInfo.name.rpartition(".")[2].startswith("_"):
                continue
            if self.loadPluginModule(modInfo.name):
                count += 1
        return count

    def buildPlan(self, elements: Iterable[ModuleConfig], core: Any) -> list[Any]:
        """Instantiate configured modules in output order; unknown names become UnknownModule entries."""
        plan: list[Any] = []
        for elCfg in sorted(elements, key=lambda e: e.order):
            loaded = self.resolve(elCfg.type)
            if loaded is None:
                core.writeLog(f"unknown module '{elCfg.type}'")
                plan.append(UnknownModule(elCfg.type))
                continue
            plan.append(loaded.createPlugin(core, dict(elCfg.params or {}), elCfg.arg))
        return plan

    def listTypes(self) -> list[str]:
        return sorted(self.pluginsByType.keys())

    def describeTypes(self) -> list[tuple[str, str]]:
        # (type, default title) for --list-modules
        return [(t, str(self.pluginsByType[t].meta.defaultParams.get("title") or "")) for t in self.listTypes()]
