import io
from pathlib import Path

import pytest
from rich.console import Console

import overfetch
from fetchlib.app import FetchApp
from fetchlib.config import AsciiConfig
from fetchlib.configLoader import buildConfig
from fetchlib.pluginLoader import PluginRegistry
from fetchlib.ui import ConsoleUi

MEMINFO = "MemTotal: 1000000 kB\nMemAvailable: 500000 kB\n"


def makeRegistry() -> PluginRegistry:
    reg = PluginRegistry()
    reg.loadPluginsFromPackage("fetchplugins")
    return reg


def makeApp(tmp_path: Path, registry: PluginRegistry, buf: io.StringIO) -> FetchApp:
    meminfo = tmp_path / "meminfo"
    meminfo.write_text(MEMINFO, encoding="utf-8")
    rawCfg = {
        "modules": ["memory", "bogus", "space", "underline"],
        "title_color": "clear",
        "title_bold": False,
        "underline_length": 10,
        "ascii": {"display": False},
        "memory": {"source_path": str(meminfo), "title": "Mem"},
    }
    cfg = buildConfig(rawCfg, pluginRegistry=registry)
    ui = ConsoleUi(console=Console(file=buf, force_terminal=False, color_system=None, width=200))
    return FetchApp(cfg, pluginRegistry=registry, ui=ui, osReleasePath=str(tmp_path / "os-release"))


def test_run_prints_every_module_line(tmp_path: Path) -> None:
    buf = io.StringIO()
    app = makeApp(tmp_path, makeRegistry(), buf)

    count = app.run()

    assert count == 4
    assert buf.getvalue().splitlines() == [
        "Mem > 512.00 MB / 1.02 GB (50%)",
        "Unknown module: bogus",
        "",
        "-" * 10,
    ]
    assert any("unknown module 'bogus'" in ln for ln in app.core.commandLog)


def test_output_with_logo_side_panel(tmp_path: Path) -> None:
    artPath = tmp_path / "logo.txt"
    artPath.write_text("AB\nCDE\n", encoding="utf-8")
    app = makeApp(tmp_path, makeRegistry(), io.StringIO())
    app.config.ascii = AsciiConfig(display=True, mode="raw", margin=1, path=str(artPath))

    out = list(app.iterOutput())

    assert out[0] == "AB  Mem > 512.00 MB / 1.02 GB (50%)"
    assert out[1] == "CDE Unknown module: bogus"
    assert out[2] == "    "
    assert out[3] == "    " + "-" * 10


def test_os_id_from_os_release(tmp_path: Path) -> None:
    app = makeApp(tmp_path, makeRegistry(), io.StringIO())
    assert app.detectOsId() is None

    (tmp_path / "os-release").write_text('NAME="Arch Linux"\nID=arch\n', encoding="utf-8")
    assert app.detectOsId() == "arch"


def test_cli_lists_modules(capsys: pytest.CaptureFixture[str]) -> None:
    assert overfetch.main(["--list-modules"]) == 0
    names = [ln.split()[0] for ln in capsys.readouterr().out.splitlines() if ln.strip()]
    assert "memory" in names
    assert "end_segment" in names


def test_cli_missing_config_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert overfetch.main(["--config", str(tmp_path / "nope.toml")]) == 1
    assert "config file not found" in capsys.readouterr().err


def test_cli_runs_with_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfgPath = tmp_path / "config.toml"
    cfgPath.write_text('modules = ["underline"]\nunderline_length = 5\n', encoding="utf-8")

    assert overfetch.main(["--config", str(cfgPath), "--no-ascii"]) == 0
    assert capsys.readouterr().out.splitlines() == ["-----"]
