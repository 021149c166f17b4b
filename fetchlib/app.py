from __future__ import annotations

from typing import Any, Iterator

from .ascii import *
from .config import *
from .core import *
from .layout import computeMaxTitleLength
from .pluginLoader import *
from .ui import *
from .utils import parseOsRelease


class FetchApp:
    def __init__(
        self,
        config: FetchConfig,
        *,
        pluginRegistry: PluginRegistry | None = None,
        pluginPackage: str = "fetchplugins",
        ui: ConsoleUi | None = None,
        osReleasePath: str = "/etc/os-release",
    ) -> None:

        self.config = config
        if pluginRegistry is None:
            pluginRegistry = PluginRegistry()
            pluginRegistry.loadPluginsFromPackage(pluginPackage)
        self.pluginRegistry = pluginRegistry
        self.core = FetchCore(pluginRegistry=self.pluginRegistry)
        self.plugins: list[Any] = []
        self.ui = ui or ConsoleUi()
        self.osReleasePath = osReleasePath

    def buildPluginsFromConfig(self) -> None:
        self.plugins = self.pluginRegistry.buildPlan(self.config.elements, self.core)
        self.core.writeLog(f"plan: {len(self.plugins)} modules")

    def detectOsId(self) -> str | None:
        try:
            with open(self.osReleasePath, encoding="utf-8") as fh:
                return parseOsRelease(fh.read()).get("ID")
        except OSError as exc:
            self.core.writeLog(f"os id: can't read {self.osReleasePath}: {exc.strerror or exc}")
            return None

    def iterModuleLines(self) -> Iterator[str]:
        maxTitleLength = computeMaxTitleLength(self.plugins, self.config) if self.config.inlineValues else 0
        self.core.writeLog(f"max title length {maxTitleLength}")

        for pluginObj in self.plugins:
            yield from pluginObj.render(self.config, maxTitleLength)

    def iterOutput(self) -> Iterator[str]:
        if not self.plugins:
            self.buildPluginsFromConfig()

        asciiCfg = self.config.ascii
        if not asciiCfg.display:
            yield from self.iterModuleLines()
            return

        osId = self.detectOsId()
        art = resolveAscii(asciiCfg, osId, logFn=self.core.writeLog)
        yield from renderLogoInterleaved(self.iterModuleLines(), art, asciiCfg, osId)

    def run(self, *, showLog: bool = False) -> int:
        try:
            return self.ui.printLines(self.iterOutput())
        finally:
            if showLog:
                self.ui.printLog(list(self.core.commandLog))
