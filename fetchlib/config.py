"""
Configuration data classes for FetchApp.

ModuleConfig is one entry of the configured module list: the module type, an optional argument
(segment:Hardware -> arg "Hardware"), its merged parameters, and its position in the output.

AsciiConfig holds the logo side panel settings. FetchConfig holds the global style defaults every
module falls back to when its own section does not override them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .colors import ColorSpec

ASCII_MODES = ("raw", "os", "solid", "band")

DEFAULT_MODULES: list[str] = [
    "hostname",
    "underline",
    "segment:System",
    "os",
    "host",
    "uptime",
    "packages",
    "shell",
    "terminal",
    "end_segment",
    "segment:Hardware",
    "cpu",
    "gpu",
    "memory",
    "swap",
    "mounts",
    "displays",
    "end_segment",
    "space",
    "colors",
    "bright_colors",
]


@dataclass
class ModuleConfig:
    type: str
    arg: str | None = None
    params: dict[str, Any] = field(default_factory=dict)
    order: int = 0  # <- position in `modules`


@dataclass
class AsciiConfig:
    display: bool = True
    mode: str = "os"
    margin: int = 4
    solidColor: ColorSpec = ColorSpec.BRIGHT_MAGENTA
    bandColors: list[ColorSpec] = field(default_factory=list)
    path: str | None = None


@dataclass
class FetchConfig:
    titleColor: ColorSpec = ColorSpec.BRIGHT_MAGENTA
    titleBold: bool = True
    titleItalic: bool = False
    separator: str = " > "
    decimalPlaces: int = 2
    useIbis: bool = False
    inlineValues: bool = True
    suppressErrors: bool = False

    underlineLength: int = 24
    underlineCharacter: str = "-"
    segmentTop: str = "{color-white}[======------{color-brightblack} {name} {color-white}------======]"
    segmentBottom: str = "{color-white}[======------{color-brightblack}{name_sized_gap}{color-white}------======]"

    percentageColorThresholds: dict[int, ColorSpec] = field(default_factory=dict)

    progressLeftBorder: str = "["
    progressRightBorder: str = "]"
    progressProgress: str = "="
    progressEmpty: str = " "
    progressTargetLength: int = 20

    ascii: AsciiConfig = field(default_factory=AsciiConfig)
    elements: list[ModuleConfig] = field(default_factory=list)
    sourcePath: str | None = None
