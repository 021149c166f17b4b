from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from .colors import ColorSpec
from .config import *
from .pluginLoader import *
from .utils import *

CONFIG_DIR_NAME = "overfetch"
CONFIG_FILE_NAME = "config.toml"


def defaultConfigPaths() -> list[Path]:
    paths: list[Path] = []
    xdgHome = parseStr(os.environ.get("XDG_CONFIG_HOME"))
    if xdgHome:
        paths.append(Path(xdgHome) / CONFIG_DIR_NAME / CONFIG_FILE_NAME)
    homeDir = parseStr(os.environ.get("HOME"))
    if homeDir:
        paths.append(Path(homeDir) / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME)
    return paths


def findConfigFile(explicitPath: str | None = None) -> Path | None:
    if explicitPath:
        pathObj = Path(explicitPath).expanduser()
        if not pathObj.is_file():
            raise RuntimeError(f"config file not found: {pathObj}")
        return pathObj

    for pathObj in defaultConfigPaths():
        if pathObj.is_file():
            return pathObj
    return None


def requireColor(fileName: str, key: str, val: Any) -> ColorSpec:
    try:
        return ColorSpec.resolve(safeStr(val))
    except ValueError:
        raise RuntimeError(f"{fileName}: unknown color '{val}' for {key}") from None


def parseThresholds(fileName: str, tableObj: Any) -> dict[int, ColorSpec]:
    if not isinstance(tableObj, dict):
        return {}
    out: dict[int, ColorSpec] = {}
    for k, v in tableObj.items():
        threshold = parseInt(k, -1)
        if not 0 <= threshold <= 100:
            raise RuntimeError(f"{fileName}: percentage threshold '{k}' is not in 0-100")
        out[threshold] = requireColor(fileName, f"percentage_color_thresholds.{k}", v)
    return out


def parseAscii(fileName: str, tableObj: Any) -> AsciiConfig:
    cfg = AsciiConfig()
    if not isinstance(tableObj, dict):
        return cfg

    cfg.display = parseBool(tableObj.get("display"), cfg.display)
    mode = parseStrLower(tableObj.get("mode")) or cfg.mode
    if mode not in ASCII_MODES:
        raise RuntimeError(f"{fileName}: unknown ascii mode '{mode}', expected one of {', '.join(ASCII_MODES)}")
    cfg.mode = mode
    cfg.margin = max(0, parseInt(tableObj.get("margin"), cfg.margin))
    if tableObj.get("solid_color") is not None:
        cfg.solidColor = requireColor(fileName, "ascii.solid_color", tableObj.get("solid_color"))
    cfg.bandColors = [
        requireColor(fileName, "ascii.band_colors", c) for c in parseStrList(tableObj.get("band_colors"))
    ]
    cfg.path = parseStr(tableObj.get("path"))
    return cfg


def strOption(hostCfg: dict[str, Any], key: str, defaultVal: str) -> str:
    val = hostCfg.get(key)
    return defaultVal if val is None else safeStr(val)


def buildConfig(rawCfg: dict[str, Any], *, pluginRegistry: PluginRegistry, fileName: str = "<defaults>") -> FetchConfig:
    cfg = FetchConfig()

    if rawCfg.get("title_color") is not None:
        cfg.titleColor = requireColor(fileName, "title_color", rawCfg.get("title_color"))
    cfg.titleBold = parseBool(rawCfg.get("title_bold"), cfg.titleBold)
    cfg.titleItalic = parseBool(rawCfg.get("title_italic"), cfg.titleItalic)
    cfg.separator = strOption(rawCfg, "separator", cfg.separator)
    cfg.decimalPlaces = max(0, parseInt(rawCfg.get("decimal_places"), cfg.decimalPlaces))
    cfg.useIbis = parseBool(rawCfg.get("use_ibis"), cfg.useIbis)
    cfg.inlineValues = parseBool(rawCfg.get("inline_values"), cfg.inlineValues)
    cfg.suppressErrors = parseBool(rawCfg.get("suppress_errors"), cfg.suppressErrors)

    cfg.underlineLength = max(0, parseInt(rawCfg.get("underline_length"), cfg.underlineLength))
    cfg.underlineCharacter = strOption(rawCfg, "underline_character", cfg.underlineCharacter)
    cfg.segmentTop = strOption(rawCfg, "segment_top", cfg.segmentTop)
    cfg.segmentBottom = strOption(rawCfg, "segment_bottom", cfg.segmentBottom)

    cfg.percentageColorThresholds = parseThresholds(fileName, rawCfg.get("percentage_color_thresholds"))

    cfg.progressLeftBorder = strOption(rawCfg, "progress_left_border", cfg.progressLeftBorder)
    cfg.progressRightBorder = strOption(rawCfg, "progress_right_border", cfg.progressRightBorder)
    cfg.progressProgress = strOption(rawCfg, "progress_progress", cfg.progressProgress)
    cfg.progressEmpty = strOption(rawCfg, "progress_empty", cfg.progressEmpty)
    cfg.progressTargetLength = max(0, parseInt(rawCfg.get("progress_target_length"), cfg.progressTargetLength))

    cfg.ascii = parseAscii(fileName, rawCfg.get("ascii"))

    moduleNames = parseStrList(rawCfg.get("modules")) if "modules" in rawCfg else list(DEFAULT_MODULES)
    for idx, entry in enumerate(moduleNames):
        typeName, _, arg = entry.partition(":")
        typeName = typeName.strip().lower()

        loaded = pluginRegistry.resolve(typeName)
        sectionVal = rawCfg.get(typeName)
        sectionObj = dict(sectionVal) if isinstance(sectionVal, dict) else {}
        if sectionObj.get("title_color") is not None:
            requireColor(fileName, f"{typeName}.title_color", sectionObj.get("title_color"))

        defaults = dict(loaded.meta.defaultParams or {}) if loaded is not None else {}
        cfg.elements.append(
            ModuleConfig(
                type=typeName,
                arg=arg.strip() or None,
                params=deepMerge(defaults, sectionObj),
                order=idx,
            )
        )

    return cfg


def loadConfig(configPath: str | None = None, *, pluginRegistry: PluginRegistry) -> FetchConfig:
    pathObj = findConfigFile(configPath)
    if pathObj is None:
        return buildConfig({}, pluginRegistry=pluginRegistry)

    cfg = buildConfig(loadToml(pathObj), pluginRegistry=pluginRegistry, fileName=pathObj.name)
    cfg.sourcePath = str(pathObj)
    return cfg
