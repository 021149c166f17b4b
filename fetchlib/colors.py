"""
Terminal color model.

ColorSpec is the closed set of colors a user can name in the config: the 16 ANSI colors plus
CLEAR, which applies no color at all. Escape sequences are produced by rich so output matches what
the rest of the UI renders.

replaceColorPlaceholders implements the {color-NAME} directive: everything after a directive up to
the next directive (or the end of the string) is wrapped in that color.
"""
from __future__ import annotations

from enum import Enum

from rich.color import ColorSystem
from rich.style import Style


class ColorSpec(Enum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"
    CLEAR = "clear"

    @classmethod
    def resolve(cls, name: str) -> "ColorSpec":
        """Case-insensitive exact lookup; "brightred" and "bright_red" both name BRIGHT_RED."""
        key = str(name or "").strip().lower().replace("_", "")
        found = colorsByKey.get(key)
        if found is None:
            raise ValueError(f"unknown color '{name}'")
        return found

    @classmethod
    def tryResolve(cls, name: str) -> "ColorSpec | None":
        try:
            return cls.resolve(name)
        except ValueError:
            return None

    def apply(self, text: str, bold: bool = False, italic: bool = False) -> str:
        color = None if self is ColorSpec.CLEAR else self.value
        style = Style(color=color, bold=bold or None, italic=italic or None)
        return style.render(text, color_system=ColorSystem.STANDARD)


colorsByKey: dict[str, ColorSpec] = {c.value.replace("_", ""): c for c in ColorSpec}

NORMAL_COLORS: tuple[ColorSpec, ...] = (
    ColorSpec.BLACK,
    ColorSpec.RED,
    ColorSpec.GREEN,
    ColorSpec.YELLOW,
    ColorSpec.BLUE,
    ColorSpec.MAGENTA,
    ColorSpec.CYAN,
    ColorSpec.WHITE,
)

BRIGHT_COLORS: tuple[ColorSpec, ...] = (
    ColorSpec.BRIGHT_BLACK,
    ColorSpec.BRIGHT_RED,
    ColorSpec.BRIGHT_GREEN,
    ColorSpec.BRIGHT_YELLOW,
    ColorSpec.BRIGHT_BLUE,
    ColorSpec.BRIGHT_MAGENTA,
    ColorSpec.BRIGHT_CYAN,
    ColorSpec.BRIGHT_WHITE,
)

DIRECTIVE_TOKEN = "{color-"


def replaceColorPlaceholders(text: str, titleColor: ColorSpec = ColorSpec.CLEAR) -> str:
    parts = text.split(DIRECTIVE_TOKEN)
    if len(parts) <= 1:
        return text

    out: list[str] = [parts[0]]
    for part in parts[1:]:
        closeIdx = part.find("}")
        if closeIdx < 0:
            # truncated directive, the token itself is consumed
            out.append(part)
            continue

        colorName = part[:closeIdx]
        payload = part[closeIdx + 1 :]

        if colorName.strip().lower() == "title":
            color: ColorSpec | None = titleColor
        else:
            color = ColorSpec.tryResolve(colorName)

        if color is None:
            out.append(payload)
            continue

        out.append(color.apply(payload) if payload else payload)

    return "".join(out)
