from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.text import Text


class ConsoleUi:
    def __init__(
        self,
        *,
        console: Console | None = None,
        errConsole: Console | None = None,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.errConsole = errConsole or Console(stderr=True, highlight=False)

        self.styleLog = "dim"
        self.styleError = "bold red"

    def printLines(self, lines: Iterable[str]) -> int:
        count = 0
        for line in lines:
            # lines already carry their escapes, rich re-emits them for the real terminal
            self.console.print(Text.from_ansi(line), soft_wrap=True)
            count += 1
        return count

    def printLog(self, logLines: Iterable[str]) -> None:
        for ln in logLines:
            self.errConsole.print(Text(ln, style=self.styleLog), soft_wrap=True)

    def printError(self, msg: str) -> None:
        self.errConsole.print(Text(msg, style=self.styleError), soft_wrap=True)
