"""
Line composition and title column alignment.

With inline values enabled every title is padded to the widest visible title among the active
modules, so all separators line up in one column. Widths are counted in characters after ANSI
escapes are stripped.
"""
from __future__ import annotations

from typing import Any, Iterable

from rich.text import Text

from .colors import ColorSpec
from .config import FetchConfig


def visibleLength(text: str) -> int:
    if not text:
        return 0
    if "\x1b" not in text:
        return len(text)
    return len(Text.from_ansi(text).plain)


def defaultStyle(
    title: str,
    titleColor: ColorSpec,
    titleBold: bool,
    titleItalic: bool,
    separator: str,
    value: str,
    maxTitleLength: int,
    inlineValues: bool,
) -> str:
    if not title.strip():
        return value

    parts: list[str] = [titleColor.apply(title, bold=titleBold, italic=titleItalic)]
    if inlineValues:
        titleLen = visibleLength(title)
        parts.append(" " * (int(maxTitleLength) - min(titleLen, int(maxTitleLength))))
    parts.append(separator)
    parts.append(value)
    return "".join(parts)


def computeMaxTitleLength(plugins: Iterable[Any], config: FetchConfig) -> int:
    """Widest title over all plugins; dynamic titles pull their data through the fetch cache."""
    maxLen = 0
    for pluginObj in plugins:
        fn = getattr(pluginObj, "titleWidths", None)
        if not callable(fn):
            continue
        for width in fn(config):
            maxLen = max(maxLen, int(width))
    return maxLen
