from __future__ import annotations

import math
from typing import Mapping

from .colors import ColorSpec

UNITS_DECIMAL = ("KB", "MB", "GB", "TB")
UNITS_BINARY = ("KiB", "MiB", "GiB", "TiB")


def roundHalfAway(number: float, places: int) -> float:
    power = 10.0 ** int(places)
    return math.copysign(math.floor(abs(number) * power + 0.5), number) / power


def formatNumber(number: float, decimalPlaces: int) -> str:
    """Fixed-point text without trailing zeros: 50.0 -> "50", 45.25 -> "45.25", never exponent form."""
    out = f"{float(number):.{max(0, int(decimalPlaces))}f}"
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    return "0" if out == "-0" else out


def autoFormatBytes(kilobytes: int, useBinaryUnits: bool, decimalPlaces: int) -> str:
    # source figures are decimal kilobytes, binary display re-bases them first
    result = float(kilobytes)
    divider = 1024 if useBinaryUnits else 1000
    if useBinaryUnits:
        result = result / 1.024

    steps = 0
    for _ in range(3):
        curStep = result / divider
        if curStep <= 1.0:
            break
        result = curStep
        steps += 1

    places = max(0, int(decimalPlaces))
    result = roundHalfAway(result, places)
    units = UNITS_BINARY if useBinaryUnits else UNITS_DECIMAL
    return f"{result:.{places}f} {units[steps]}"


def selectThresholdColor(percent: float, thresholds: Mapping[int, ColorSpec]) -> ColorSpec | None:
    """Highest threshold strictly below percent; below every threshold falls back to the lowest."""
    if not thresholds:
        return None

    chosen: int | None = None
    for threshold in thresholds:
        if threshold < percent and (chosen is None or threshold > chosen):
            chosen = threshold

    if chosen is None:
        chosen = min(thresholds)
    return thresholds[chosen]


def processPercentagePlaceholder(
    text: str,
    percent: float,
    thresholds: Mapping[int, ColorSpec],
    decimalPlaces: int = 2,
) -> str:
    percentStr = formatNumber(percent, decimalPlaces) + "%"
    color = selectThresholdColor(percent, thresholds)
    if color is not None:
        percentStr = color.apply(percentStr)
    return text.replace("{percent}", percentStr)


def makeBar(
    leftBorder: str,
    rightBorder: str,
    fillGlyph: str,
    emptyGlyph: str,
    percent: float,
    totalLength: int,
) -> str:
    totalLength = int(totalLength)
    if totalLength < len(leftBorder) + len(rightBorder):
        return ""

    # borders may be wider than one slot each, the bar then overshoots totalLength
    interior = totalLength - 2
    parts: list[str] = [leftBorder]
    for i in range(max(0, interior)):
        if percent > int((i / interior) * 100):
            parts.append(fillGlyph)
        else:
            parts.append(emptyGlyph)
    parts.append(rightBorder)
    return "".join(parts)


def renderFormat(template: str, values: Mapping[str, str]) -> str:
    """Ordered literal {token} replacement, no recursion into substituted values."""
    out = template
    for key, val in values.items():
        out = out.replace("{" + key + "}", str(val))
    return out
