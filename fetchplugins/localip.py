from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import Any

from fetchlib.config import FetchConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError, PluginMeta
from fetchlib.pluginBase import PluginBase
from fetchlib.utils import parseStr, readText

typeName = "localip"

pluginMeta = PluginMeta(
    typeName="localip",
    defaultParams={
        "title": "Local IP",
        "format": "{addr} ({interface})",
        "route_path": "/proc/net/route",
        "route_addr": "10.255.255.255",
    },
)


@dataclass(frozen=True)
class LocalIpInfo:
    interface: str
    addr: str


def defaultInterface(routeText: str) -> str | None:
    for line in routeText.splitlines()[1:]:
        cols = line.split()
        if len(cols) >= 2 and cols[1] == "00000000":
            return cols[0]
    return None


class LocalIpPlugin(PluginBase):
    meta = pluginMeta
    displayName = "LocalIP"
    placeholderNames = ("interface", "addr")

    def __init__(self, core: FetchCore, *, params: dict[str, Any], arg: str | None = None) -> None:
        super().__init__(core, params=params, arg=arg)
        self.routePath = parseStr(params.get("route_path")) or "/proc/net/route"
        self.routeAddr = parseStr(params.get("route_addr")) or "10.255.255.255"

    def primaryAddr(self) -> str:
        sockObj: socket.socket | None = None
        try:
            # connect() on UDP sends nothing, it only picks the outgoing address
            sockObj = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            sockObj.connect((self.routeAddr, 1))
            return str(sockObj.getsockname()[0])
        except OSError as exc:
            raise ModuleError(self.displayName, f"no routable address: {exc.strerror or exc}") from exc
        finally:
            if sockObj is not None:
                sockObj.close()

    def fetch(self) -> LocalIpInfo:
        interface = defaultInterface(readText(self.displayName, self.routePath)) or "Unknown"
        return LocalIpInfo(interface=interface, addr=self.primaryAddr())

    def placeholders(self, record: LocalIpInfo, config: FetchConfig) -> dict[str, str]:
        return {"interface": record.interface, "addr": record.addr}


def createPlugin(core: FetchCore, params: dict[str, Any], arg: str | None = None) -> LocalIpPlugin:
    return LocalIpPlugin(core, params=params, arg=arg)
