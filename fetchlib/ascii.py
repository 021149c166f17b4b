"""
ASCII logo side panel.

The logo is printed to the left of the info lines. Every logo row is right padded to the logo's
widest row plus the configured margin, then colored according to the ascii mode:

  raw    no coloring
  os     one color picked from the detected OS
  solid  one user chosen color
  band   vertical gradient, each row picks a color from band_colors by its height in the logo

When the logo and the info block differ in height the taller one keeps printing on its own.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator

from .colors import ColorSpec
from .config import AsciiConfig
from .formatter import roundHalfAway
from .layout import visibleLength

BUILTIN_ART: dict[str, str] = {
    "arch": """\
                  -`
                 .o+`
                `ooo/
               `+oooo:
              `+oooooo:
              -+oooooo+:
            `/:-:++oooo+:
           `/++++/+++++++:
          `/++++++++++++++:
         `/+++ooooooooooooo/`
        ./ooosssso++osssssso+`
       .oossssso-````/ossssss+`
      -osssssso.      :ssssssso.
     :osssssss/        osssso+++.
    /ossssssss/        +ssssooo/-
  `/ossssso+/:-        -:/+osssso+-
 `+sso+:-`                 `.-/+oso:
`++:.                           `-/+/
.`                                 `/""",
    "debian": """\
       _,met$$$$$gg.
    ,g$$$$$$$$$$$$$$$P.
  ,g$$P"     \"\"\"Y$$.".
 ,$$P'              `$$$.
',$$P       ,ggs.     `$$b:
`d$$'     ,$P"'   .    $$$
 $$P      d$'     ,    $$P
 $$:      $$.   -    ,d$$'
 $$;      Y$b._   _,d$P'
 Y$$.    `.`"Y$$$$P"'
 `$$b      "-.__
  `Y$$
   `Y$$.
     `$$b.
       `Y$$b.
          `"Y$b._
              `\"\"\"""",
    "ubuntu": """\
            .-/+oossssoo+/-.
        `:+ssssssssssssssssss+:`
      -+ssssssssssssssssssyyssss+-
    .ossssssssssssssssssdMMMNysssso.
   /ssssssssssshdmmNNmmyNMMMMhssssss/
  +ssssssssshmydMMMMMMMNddddyssssssss+
 /sssssssshNMMMyhhyyyyhmNMMMNhssssssss/
.ssssssssdMMMNhsssssssssshNMMMdssssssss.
+sssshhhyNMMNyssssssssssssyNMMMysssssss+
ossyNMMMNyMMhsssssssssssssshmmmhssssssso
ossyNMMMNyMMhsssssssssssssshmmmhssssssso
+sssshhhyNMMNyssssssssssssyNMMMysssssss+
.ssssssssdMMMNhsssssssssshNMMMdssssssss.
 /sssssssshNMMMyhhyyyyhdNMMMNhssssssss/
  +sssssssssdmydMMMMMMMMddddyssssssss+
   /ssssssssssshdmNNNNmyNMMMMhssssss/
    .ossssssssssssssssssdMMMNysssso.
      -+sssssssssssssssssyyyssss+-
        `:+ssssssssssssssssss+:`
            .-/+oossssoo+/-.""",
    "fedora": """\
             .',;::::;,'.
         .';:cccccccccccc:;,.
      .;cccccccccccccccccccccc;.
    .:cccccccccccccccccccccccccc:.
  .;ccccccccccccc;.:dddl:.;ccccccc;.
 .:ccccccccccccc;OWMKOOXMWd;ccccccc:.
.:ccccccccccccc;KMMc;cc;xMMc;ccccccc:.
,cccccccccccccc;MMM.;cc;;WW:;cccccccc,
:cccccccccccccc;MMM.;cccccccccccccccc:
:ccccccc;oxOOOo;MMM000k.;cccccccccccc:
cccccc;0MMKxdd:;MMMkddc.;cccccccccccc;
ccccc;XMO';cccc;MMM.;cccccccccccccccc'
ccccc;MMo;ccccc;MMW.;ccccccccccccccc;
ccccc;0MNc.ccc.xMMd;ccccccccccccccc;
cccccc;dNMWXXXWM0:;cccccccccccccc:,
cccccccc;.:odl:.;cccccccccccccc:,.
ccccccccccccccccccccccccccccc:'.
:ccccccccccccccccccccccc:;,..""",
    "linux": """\
        #####
       #######
       ##O#O##
       #######
     ###########
    #############
   ###############
   ################
  #################
#####################
#####################
  #################""",
}

OS_ALIASES: dict[str, str] = {
    "archlinux": "arch",
    "arch linux": "arch",
    "debian gnu/linux": "debian",
    "fedora linux": "fedora",
}

OS_COLORS: dict[str, ColorSpec] = {
    "arch": ColorSpec.BRIGHT_CYAN,
    "debian": ColorSpec.RED,
    "ubuntu": ColorSpec.BRIGHT_RED,
    "fedora": ColorSpec.BLUE,
    "linux": ColorSpec.WHITE,
}


def normalizeOsId(osId: str | None) -> str:
    key = str(osId or "").strip().lower()
    key = OS_ALIASES.get(key, key)
    return key if key in BUILTIN_ART else "linux"


@dataclass(frozen=True)
class AsciiArt:
    lines: tuple[str, ...]
    maxWidth: int

    @classmethod
    def fromText(cls, text: str) -> "AsciiArt":
        lines = tuple(text.rstrip("\n").split("\n")) if text.strip() else ()
        maxWidth = max((visibleLength(ln) for ln in lines), default=0)
        return cls(lines=lines, maxWidth=maxWidth)

    @property
    def height(self) -> int:
        return len(self.lines)


def resolveAscii(
    asciiConfig: AsciiConfig,
    osId: str | None,
    *,
    logFn: Callable[[str], None] | None = None,
) -> AsciiArt:
    if asciiConfig.path:
        pathObj = Path(asciiConfig.path).expanduser()
        try:
            return AsciiArt.fromText(pathObj.read_text(encoding="utf-8"))
        except OSError as exc:
            if logFn is not None:
                logFn(f"ascii: can't read {pathObj}: {exc.strerror or exc}, using built-in art")
    return AsciiArt.fromText(BUILTIN_ART[normalizeOsId(osId)])


def bandColor(rowIndex: int, totalRows: int, bandColors: list[ColorSpec]) -> ColorSpec | None:
    if not bandColors:
        return None
    percentage = rowIndex / (totalRows - 1) if totalRows > 1 else 0.0
    lastIdx = len(bandColors) - 1
    idx = int(roundHalfAway(lastIdx * percentage, 0))
    return bandColors[max(0, min(lastIdx, idx))]


def lineColor(rowIndex: int, art: AsciiArt, asciiConfig: AsciiConfig, osId: str | None) -> ColorSpec | None:
    mode = str(asciiConfig.mode or "raw").strip().lower()
    if mode == "os":
        return OS_COLORS.get(normalizeOsId(osId), ColorSpec.CLEAR)
    if mode == "solid":
        return asciiConfig.solidColor
    if mode == "band":
        return bandColor(rowIndex, art.height, asciiConfig.bandColors)
    return None


def getAsciiLine(
    rowIndex: int,
    art: AsciiArt,
    targetWidth: int,
    asciiConfig: AsciiConfig,
    osId: str | None = None,
) -> str:
    line = art.lines[rowIndex] if 0 <= rowIndex < art.height else ""
    padded = line + " " * max(0, int(targetWidth) - visibleLength(line))

    color = lineColor(rowIndex, art, asciiConfig, osId)
    if color is None:
        return padded
    return color.apply(padded)


def renderLogoInterleaved(
    lines: Iterable[str],
    art: AsciiArt,
    asciiConfig: AsciiConfig,
    osId: str | None = None,
) -> Iterator[str]:
    """Zip logo rows with output lines, then drain whichever block is taller."""
    if not asciiConfig.display or art.height == 0:
        yield from lines
        return

    targetWidth = art.maxWidth + max(0, int(asciiConfig.margin))
    rowIndex = 0
    for line in lines:
        if rowIndex < art.height:
            yield getAsciiLine(rowIndex, art, targetWidth, asciiConfig, osId) + line
        else:
            yield " " * targetWidth + line
        rowIndex += 1

    while rowIndex < art.height:
        yield getAsciiLine(rowIndex, art, targetWidth, asciiConfig, osId)
        rowIndex += 1
