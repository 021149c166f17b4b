from pathlib import Path

import pytest

from fetchlib.colors import ColorSpec
from fetchlib.config import DEFAULT_MODULES, FetchConfig, ModuleConfig
from fetchlib.configLoader import buildConfig, loadConfig
from fetchlib.core import FetchCore
from fetchlib.pluginApi import PluginMeta
from fetchlib.pluginLoader import PluginRegistry, UnknownModule

CONFIG = """\
modules = ["memory", "segment:Hardware", "bogus"]
title_color = "red"
separator = ": "
decimal_places = 1

[percentage_color_thresholds]
50 = "yellow"
90 = "bright_red"

[ascii]
mode = "band"
band_colors = ["red", "blue"]

[memory]
title = "RAM"
"""


@pytest.fixture()
def registry() -> PluginRegistry:
    reg = PluginRegistry()
    reg.loadPluginsFromPackage("fetchplugins")
    return reg


def writeConfig(tmp_path: Path, text: str) -> str:
    p = tmp_path / "config.toml"
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_registry_discovers_builtin_modules(registry: PluginRegistry) -> None:
    types = registry.listTypes()
    for name in ("memory", "cpu", "mounts", "segment", "end_segment", "colors", "bright_colors", "theme", "icon_theme"):
        assert name in types
    assert registry.resolve("MEMORY") is registry.resolve("memory")


def test_load_config_reads_globals_and_sections(tmp_path: Path, registry: PluginRegistry) -> None:
    cfg = loadConfig(writeConfig(tmp_path, CONFIG), pluginRegistry=registry)

    assert cfg.titleColor is ColorSpec.RED
    assert cfg.separator == ": "
    assert cfg.decimalPlaces == 1
    assert cfg.percentageColorThresholds == {50: ColorSpec.YELLOW, 90: ColorSpec.BRIGHT_RED}
    assert cfg.ascii.mode == "band"
    assert cfg.ascii.bandColors == [ColorSpec.RED, ColorSpec.BLUE]
    assert cfg.sourcePath is not None and cfg.sourcePath.endswith("config.toml")

    assert [e.type for e in cfg.elements] == ["memory", "segment", "bogus"]
    assert [e.order for e in cfg.elements] == [0, 1, 2]
    assert cfg.elements[1].arg == "Hardware"
    assert cfg.elements[2].params == {}


def test_section_merges_over_module_defaults(tmp_path: Path, registry: PluginRegistry) -> None:
    cfg = loadConfig(writeConfig(tmp_path, CONFIG), pluginRegistry=registry)
    params = cfg.elements[0].params

    assert params["title"] == "RAM"
    assert params["format"] == registry.resolve("memory").meta.defaultParams["format"]


def test_unknown_color_names_file_and_key(tmp_path: Path, registry: PluginRegistry) -> None:
    path = writeConfig(tmp_path, 'modules = ["memory"]\n[memory]\ntitle_color = "purple"\n')
    with pytest.raises(RuntimeError, match=r"config\.toml: unknown color 'purple' for memory\.title_color"):
        loadConfig(path, pluginRegistry=registry)


def test_threshold_out_of_range(registry: PluginRegistry) -> None:
    with pytest.raises(RuntimeError, match="not in 0-100"):
        buildConfig({"percentage_color_thresholds": {"150": "red"}}, pluginRegistry=registry)


def test_unknown_ascii_mode(registry: PluginRegistry) -> None:
    with pytest.raises(RuntimeError, match="unknown ascii mode"):
        buildConfig({"ascii": {"mode": "rainbow"}}, pluginRegistry=registry)


def test_invalid_toml(tmp_path: Path, registry: PluginRegistry) -> None:
    with pytest.raises(RuntimeError, match="invalid toml"):
        loadConfig(writeConfig(tmp_path, "modules = [\n"), pluginRegistry=registry)


def test_explicit_missing_file(tmp_path: Path, registry: PluginRegistry) -> None:
    with pytest.raises(RuntimeError, match="config file not found"):
        loadConfig(str(tmp_path / "nope.toml"), pluginRegistry=registry)


def test_defaults_without_any_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, registry: PluginRegistry) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    cfg = loadConfig(None, pluginRegistry=registry)
    assert cfg.sourcePath is None
    assert [e.type for e in cfg.elements] == [m.partition(":")[0] for m in DEFAULT_MODULES]


def test_xdg_config_is_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, registry: PluginRegistry) -> None:
    cfgDir = tmp_path / "xdg" / "overfetch"
    cfgDir.mkdir(parents=True)
    (cfgDir / "config.toml").write_text('modules = ["space"]\n', encoding="utf-8")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    cfg = loadConfig(None, pluginRegistry=registry)
    assert [e.type for e in cfg.elements] == ["space"]


def test_registry_rejects_duplicate_type() -> None:
    reg = PluginRegistry()
    reg.register(PluginMeta(typeName="cpu"), lambda core, params, arg: None, moduleName="a.cpu")
    with pytest.raises(RuntimeError, match="defined by both a.cpu and b.cpu"):
        reg.register(PluginMeta(typeName="CPU"), lambda core, params, arg: None, moduleName="b.cpu")


def test_build_plan_keeps_order_and_marks_unknown(registry: PluginRegistry) -> None:
    core = FetchCore()
    elements = [
        ModuleConfig(type="space", order=2),
        ModuleConfig(type="bogus", order=1),
        ModuleConfig(type="segment", arg="HW", order=0),
    ]
    plan = registry.buildPlan(elements, core)

    assert [p.typeName for p in plan] == ["segment", "bogus", "space"]
    assert isinstance(plan[1], UnknownModule)
    assert plan[1].render(FetchConfig(), 0) == ["Unknown module: bogus"]
    assert plan[0].arg == "HW"
    assert any("unknown module 'bogus'" in ln for ln in core.commandLog)
