from rich.text import Text

from fetchlib.colors import ColorSpec
from fetchlib.config import FetchConfig
from fetchlib.layout import computeMaxTitleLength, defaultStyle, visibleLength


class FakeTitled:
    def __init__(self, widths: list[int]) -> None:
        self.widths = widths

    def titleWidths(self, config: FetchConfig) -> list[int]:
        return self.widths


def test_visible_length_ignores_escapes() -> None:
    assert visibleLength(ColorSpec.RED.apply("abc")) == 3
    assert visibleLength("abc") == 3
    assert visibleLength("") == 0


def test_default_style_pads_title_to_column() -> None:
    out = defaultStyle("CPU", ColorSpec.CLEAR, False, False, " > ", "val", 6, True)
    assert out == "CPU    > val"


def test_default_style_padding_uses_visible_width() -> None:
    out = defaultStyle("CPU", ColorSpec.RED, True, False, ": ", "val", 6, True)
    assert visibleLength(out) == len("CPU   : val")
    assert out.endswith("   : val")


def test_default_style_without_inline_values() -> None:
    out = defaultStyle("CPU", ColorSpec.CLEAR, False, False, " > ", "val", 10, False)
    assert out == "CPU > val"


def test_default_style_long_title_gets_no_padding() -> None:
    out = defaultStyle("Processor", ColorSpec.CLEAR, False, False, ": ", "x", 3, True)
    assert out == "Processor: x"


def test_default_style_empty_title_returns_value() -> None:
    assert defaultStyle("  ", ColorSpec.RED, True, True, " > ", "user@host", 12, True) == "user@host"


def test_max_title_length_over_all_rows() -> None:
    plugins = [FakeTitled([3]), FakeTitled([7, 4]), FakeTitled([2]), object(), FakeTitled([])]
    assert computeMaxTitleLength(plugins, FetchConfig()) == 7
    assert computeMaxTitleLength([], FetchConfig()) == 0


def test_separators_share_one_column() -> None:
    titles = ["CPU", "Processor", "OS"]
    maxLen = computeMaxTitleLength([FakeTitled([len(t)]) for t in titles], FetchConfig())
    lines = [defaultStyle(t, ColorSpec.BLUE, True, False, " > ", "v", maxLen, True) for t in titles]

    plain = [Text.from_ansi(ln).plain for ln in lines]
    assert {p.index(" > ") for p in plain} == {len("Processor")}
