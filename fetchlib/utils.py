from __future__ import annotations
from pathlib import Path
from typing import Any

import tomli

from .colors import ColorSpec
from .pluginApi import ModuleError


def safeStr(val: Any) -> str:
    try:
        return str(val)
    except Exception:
        return ""


def parseStr(val: Any) -> str | None:
    if val is None:
        return None
    s = safeStr(val).strip()
    return s if s else None


def parseStrLower(val: Any) -> str | None:
    s = parseStr(val)
    return s.lower() if s else None


def parseInt(val: Any, defaultVal: int) -> int:
    if val is None:
        return int(defaultVal)
    try:
        s = safeStr(val).strip()
        if not s:
            return int(defaultVal)
        return int(float(s)) if any(ch in s for ch in ".eE") else int(s)
    except Exception:
        return int(defaultVal)


def parseBool(val: Any, defaultVal: bool) -> bool:
    if isinstance(val, bool):
        return bool(val)
    if isinstance(val, (int, float)):
        return bool(val)

    s = parseStrLower(val)
    if not s:
        return bool(defaultVal)

    if s in ("1", "true", "yes", "y", "on", "enabled"):
        return True
    if s in ("0", "false", "no", "n", "off", "disabled"):
        return False
    return bool(defaultVal)


def parseStrList(val: Any) -> list[str]:
    if isinstance(val, list):
        out: list[str] = []
        for x in val:
            s = parseStr(x)
            if s:
                out.append(s)
        return out

    s = parseStr(val)
    return [s] if s else []


def parseColor(val: Any, defaultVal: ColorSpec | None) -> ColorSpec | None:
    s = parseStr(val)
    if s is None:
        return defaultVal
    return ColorSpec.tryResolve(s) or defaultVal


def loadToml(pathObj: Path) -> dict[str, Any]:
    try:
        dataObj = tomli.loads(pathObj.read_text(encoding="utf-8"))
    except tomli.TOMLDecodeError as exc:
        raise RuntimeError(f"{pathObj.name}: invalid toml: {exc}") from exc
    if isinstance(dataObj, dict):
        return dataObj
    raise RuntimeError(f"{pathObj.name}: invalid toml root")


def deepMerge(baseObj: dict[str, Any], overrideObj: dict[str, Any]) -> dict[str, Any]:
    outObj = dict(baseObj)
    for k, v in overrideObj.items():
        a = outObj.get(k)
        outObj[k] = deepMerge(dict(a), v) if isinstance(a, dict) and isinstance(v, dict) else v
    return outObj


def readText(moduleName: str, path: str | Path) -> str:
    """Read a whole /proc or /sys style file, failures become ModuleError."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ModuleError(moduleName, f"can't read from {path} - {exc.strerror or exc}") from exc


def parseKeyValueLines(text: str, sep: str = ":") -> dict[str, str]:
    out: dict[str, str] = {}
    for line in text.splitlines():
        if sep not in line:
            continue
        k, v = line.split(sep, 1)
        key = k.strip()
        if key and key not in out:
            out[key] = v.strip()
    return out


def parseOsRelease(text: str) -> dict[str, str]:
    out: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, v = line.split("=", 1)
        out[k.strip()] = v.strip().strip('"').strip("'")
    return out
