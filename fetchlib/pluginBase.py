from __future__ import annotations

from typing import Any

from .colors import ColorSpec, replaceColorPlaceholders
from .config import FetchConfig
from .core import FetchCore
from .formatter import makeBar, processPercentagePlaceholder, renderFormat, roundHalfAway
from .layout import defaultStyle, visibleLength
from .pluginApi import PluginMeta
from .utils import parseBool, parseColor, parseInt

# room reserved for a rendered {index}, up to two digits
INDEX_WIDTH = 2


class PluginBase:
    """
    Generic module renderer.

    Subclasses provide fetch(), placeholders() and, for usage style modules, percentage(). Every
    style option resolves to the module's own section first and the global config second.
    """

    meta: PluginMeta = PluginMeta(typeName="?")
    displayName: str = "?"
    placeholderNames: tuple[str, ...] = ()
    unknownValues: dict[str, str] = {"bar": "", "index": "0"}

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        self.core = core
        self.params = dict(params or {})
        self.arg = arg

    @property
    def typeName(self) -> str:
        return self.meta.typeName

    @property
    def title(self) -> str:
        return str(self.params.get("title") or "")

    @property
    def formatStr(self) -> str:
        return str(self.params.get("format") or "")

    def writeLog(self, text: str) -> None:
        self.core.writeLog(f"[{self.typeName}] {text}")

    ########### option resolution #########################

    def titleColor(self, config: FetchConfig) -> ColorSpec:
        return parseColor(self.params.get("title_color"), config.titleColor) or config.titleColor

    def titleBold(self, config: FetchConfig) -> bool:
        return parseBool(self.params.get("title_bold"), config.titleBold)

    def titleItalic(self, config: FetchConfig) -> bool:
        return parseBool(self.params.get("title_italic"), config.titleItalic)

    def separator(self, config: FetchConfig) -> str:
        val = self.params.get("separator")
        return config.separator if val is None else str(val)

    def decimalPlaces(self, config: FetchConfig) -> int:
        return parseInt(self.params.get("decimal_places"), config.decimalPlaces)

    def useIbis(self, config: FetchConfig) -> bool:
        return parseBool(self.params.get("use_ibis"), config.useIbis)

    def progressBar(self, percent: float, config: FetchConfig) -> str:
        def opt(key: str, defaultVal: str) -> str:
            val = self.params.get(key)
            return defaultVal if val is None else str(val)

        return makeBar(
            opt("progress_left_border", config.progressLeftBorder),
            opt("progress_right_border", config.progressRightBorder),
            opt("progress_progress", config.progressProgress),
            opt("progress_empty", config.progressEmpty),
            percent,
            parseInt(self.params.get("progress_target_length"), config.progressTargetLength),
        )

    ########### capability interface #########################

    def fetch(self) -> Any:
        return None

    def placeholders(self, record: Any, config: FetchConfig) -> dict[str, str]:
        return {}

    def percentage(self, record: Any) -> float | None:
        return None

    def records(self, record: Any) -> list[Any]:
        if self.meta.multiRow:
            return list(record or [])
        return [record]

    ########### rendering #########################

    def replacePlaceholders(self, text: str, record: Any, config: FetchConfig) -> str:
        values = dict(self.placeholders(record, config))
        percent = self.percentage(record)
        if percent is not None:
            places = self.decimalPlaces(config)
            roundedPercent = roundHalfAway(percent, places)
            text = processPercentagePlaceholder(text, roundedPercent, config.percentageColorThresholds, places)
            if "{bar}" in text:
                values["bar"] = self.progressBar(percent, config)
        return renderFormat(text, values)

    def unknownPlaceholders(self) -> dict[str, str]:
        return {name: self.unknownValues.get(name, "Unknown") for name in self.placeholderNames}

    def titleText(self, record: Any, config: FetchConfig) -> str:
        return self.replacePlaceholders(self.title, record, config)

    def titleWidths(self, config: FetchConfig) -> list[int]:
        title = self.title
        if not title.strip():
            return []
        if "{index}" in title:
            return [visibleLength(title.replace("{index}", "")) + INDEX_WIDTH]
        if not self.meta.dynamicTitle:
            return [visibleLength(title)]

        result = self.core.fetchCached(self)
        if not result.ok:
            return [visibleLength(renderFormat(title, self.unknownPlaceholders()))]
        return [visibleLength(self.titleText(r, config)) for r in self.records(result.record)]

    def compose(self, title: str, value: str, config: FetchConfig, maxTitleLength: int) -> str:
        return defaultStyle(
            title,
            self.titleColor(config),
            self.titleBold(config),
            self.titleItalic(config),
            self.separator(config),
            value,
            maxTitleLength,
            config.inlineValues,
        )

    def style(self, record: Any, config: FetchConfig, maxTitleLength: int) -> str:
        title = self.titleText(record, config)
        value = replaceColorPlaceholders(
            self.replacePlaceholders(self.formatStr, record, config),
            self.titleColor(config),
        )
        return self.compose(title, value, config, maxTitleLength)

    def unknownOutput(self, config: FetchConfig, maxTitleLength: int) -> str:
        unknown = self.unknownPlaceholders()
        title = renderFormat(self.title.replace("{percent}", "Unknown"), unknown)
        value = replaceColorPlaceholders(
            renderFormat(self.formatStr.replace("{percent}", "Unknown"), unknown),
            self.titleColor(config),
        )
        return self.compose(title, value, config, maxTitleLength)

    def render(self, config: FetchConfig, maxTitleLength: int) -> list[str]:
        result = self.core.fetchCached(self)
        if not result.ok:
            if config.suppressErrors:
                return [self.unknownOutput(config, maxTitleLength)]
            return [str(result.error)]
        return [self.style(r, config, maxTitleLength) for r in self.records(result.record)]
