from __future__ import annotations

import argparse
import sys
from typing import Sequence

from fetchlib.app import FetchApp
from fetchlib.config import ASCII_MODES
from fetchlib.configLoader import loadConfig
from fetchlib.pluginLoader import PluginRegistry
from fetchlib.ui import ConsoleUi


def buildParser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="overfetch", description="Print a summary of this system next to a logo.")
    p.add_argument("-c", "--config", help="Config file (default: $XDG_CONFIG_HOME/overfetch/config.toml).")
    p.add_argument("--suppress-errors", action="store_true", help="Show 'Unknown' instead of module errors.")
    p.add_argument("--no-ascii", action="store_true", help="Do not print the logo.")
    p.add_argument("--ascii-mode", choices=ASCII_MODES, help="Override the logo coloring mode.")
    p.add_argument("--log", action="store_true", help="Print the fetch log to stderr afterwards.")
    p.add_argument("--list-modules", action="store_true", help="List available modules and exit.")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = buildParser().parse_args(argv)
    ui = ConsoleUi()

    pluginRegistry = PluginRegistry()
    pluginRegistry.loadPluginsFromPackage("fetchplugins")

    if args.list_modules:
        ui.printLines(f"{name:<14} {title}".rstrip() for name, title in pluginRegistry.describeTypes())
        return 0

    try:
        config = loadConfig(args.config, pluginRegistry=pluginRegistry)
    except RuntimeError as exc:
        ui.printError(f"overfetch: {exc}")
        return 1

    if args.suppress_errors:
        config.suppressErrors = True
    if args.no_ascii:
        config.ascii.display = False
    if args.ascii_mode:
        config.ascii.mode = args.ascii_mode

    app = FetchApp(config, pluginRegistry=pluginRegistry, ui=ui)
    if config.sourcePath:
        app.core.writeLog(f"config loaded from {config.sourcePath}")
    app.run(showLog=args.log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
