from pathlib import Path

from fetchlib.ascii import (
    BUILTIN_ART,
    AsciiArt,
    bandColor,
    getAsciiLine,
    normalizeOsId,
    renderLogoInterleaved,
    resolveAscii,
)
from fetchlib.colors import ColorSpec
from fetchlib.config import AsciiConfig

RGB = [ColorSpec.RED, ColorSpec.GREEN, ColorSpec.BLUE]


def makeArt(rows: int) -> AsciiArt:
    return AsciiArt.fromText("\n".join("#" * (i + 1) for i in range(rows)))


def test_art_from_text_measures_widest_row() -> None:
    art = AsciiArt.fromText("ab\nabcd\n")
    assert art.lines == ("ab", "abcd")
    assert art.maxWidth == 4
    assert art.height == 2
    assert AsciiArt.fromText("   \n").height == 0


def test_normalize_os_id() -> None:
    assert normalizeOsId("Arch") == "arch"
    assert normalizeOsId("archlinux") == "arch"
    assert normalizeOsId("gentoo") == "linux"
    assert normalizeOsId(None) == "linux"


def test_band_color_spreads_over_height() -> None:
    assert bandColor(0, 5, RGB) is ColorSpec.RED
    assert bandColor(1, 5, RGB) is ColorSpec.GREEN
    assert bandColor(2, 5, RGB) is ColorSpec.GREEN
    assert bandColor(4, 5, RGB) is ColorSpec.BLUE
    assert bandColor(0, 1, RGB) is ColorSpec.RED
    assert bandColor(3, 5, []) is None


def test_raw_line_is_padded_to_target_width() -> None:
    art = AsciiArt.fromText("ab\nabcd")
    cfg = AsciiConfig(mode="raw")
    assert getAsciiLine(0, art, 6, cfg) == "ab    "
    assert getAsciiLine(1, art, 6, cfg) == "abcd  "


def test_solid_line_wraps_padding_in_color() -> None:
    art = AsciiArt.fromText("ab\nabcd")
    cfg = AsciiConfig(mode="solid", solidColor=ColorSpec.RED)
    assert getAsciiLine(0, art, 6, cfg) == ColorSpec.RED.apply("ab    ")


def test_os_line_uses_distro_color() -> None:
    art = AsciiArt.fromText("ab")
    cfg = AsciiConfig(mode="os")
    assert getAsciiLine(0, art, 2, cfg, "debian") == ColorSpec.RED.apply("ab")


def test_output_taller_than_logo() -> None:
    art = makeArt(5)
    cfg = AsciiConfig(mode="raw", margin=2)
    lines = [f"line{i}" for i in range(8)]
    out = list(renderLogoInterleaved(lines, art, cfg))

    assert len(out) == 8
    assert out[0] == "#      line0"
    assert out[4] == "#####  line4"
    for i in range(5, 8):
        assert out[i] == " " * 7 + f"line{i}"


def test_logo_taller_than_output() -> None:
    art = makeArt(8)
    cfg = AsciiConfig(mode="raw", margin=1)
    out = list(renderLogoInterleaved(["a", "b", "c", "d", "e"], art, cfg))

    assert len(out) == 8
    assert out[4] == "#####    e"
    assert out[5:] == ["######   ", "#######  ", "######## "]


def test_hidden_logo_passes_lines_through() -> None:
    out = list(renderLogoInterleaved(["a", "b"], makeArt(3), AsciiConfig(display=False)))
    assert out == ["a", "b"]


def test_resolve_ascii_prefers_user_file(tmp_path: Path) -> None:
    artPath = tmp_path / "logo.txt"
    artPath.write_text("XX\nYYY\n", encoding="utf-8")
    art = resolveAscii(AsciiConfig(path=str(artPath)), "arch")
    assert art.lines == ("XX", "YYY")


def test_resolve_ascii_missing_file_falls_back(tmp_path: Path) -> None:
    logLines: list[str] = []
    art = resolveAscii(AsciiConfig(path=str(tmp_path / "nope.txt")), "fedora", logFn=logLines.append)
    assert art == AsciiArt.fromText(BUILTIN_ART["fedora"])
    assert logLines and "nope.txt" in logLines[0]
