from fetchlib.colors import ColorSpec
from fetchlib.formatter import (
    autoFormatBytes,
    formatNumber,
    makeBar,
    processPercentagePlaceholder,
    renderFormat,
    roundHalfAway,
    selectThresholdColor,
)

THRESHOLDS = {75: ColorSpec.GREEN, 85: ColorSpec.YELLOW, 90: ColorSpec.RED}


def test_round_half_away_from_zero() -> None:
    assert roundHalfAway(2.5, 0) == 3.0
    assert roundHalfAway(-2.5, 0) == -3.0
    assert roundHalfAway(0.125, 2) == 0.13
    assert roundHalfAway(7.0, 3) == 7.0


def test_format_number_drops_integral_fraction() -> None:
    assert formatNumber(50.0, 2) == "50"
    assert formatNumber(45.25, 2) == "45.25"
    assert formatNumber(7.0, 0) == "7"
    assert formatNumber(-0.0001, 2) == "0"


def test_auto_format_bytes_decimal_units() -> None:
    assert autoFormatBytes(15, False, 0) == "15 KB"
    assert autoFormatBytes(1526, False, 1) == "1.5 MB"
    assert autoFormatBytes(1024000, False, 2) == "1.02 GB"


def test_auto_format_bytes_binary_units_rebase_first() -> None:
    assert autoFormatBytes(15, True, 0) == "15 KiB"
    assert autoFormatBytes(15, True, 1) == "14.6 KiB"


def test_auto_format_bytes_stays_on_unit_at_exact_boundary() -> None:
    assert autoFormatBytes(1000, False, 0) == "1000 KB"


def test_auto_format_bytes_caps_at_largest_unit() -> None:
    assert autoFormatBytes(5 * 10**12, False, 0) == "5000 TB"


def test_make_bar_half_full() -> None:
    bar = makeBar("[", "]", "=", "-", 50.0, 16)
    assert bar == "[=======-------]"
    assert len(bar) == 16


def test_make_bar_extremes() -> None:
    assert makeBar("[", "]", "#", ".", 0.0, 7) == "[.....]"
    assert makeBar("[", "]", "#", ".", 100.0, 7) == "[#####]"


def test_make_bar_too_short_for_borders() -> None:
    assert makeBar("[", "]", "=", "-", 50.0, 1) == ""
    assert makeBar("[", "]", "=", "-", 50.0, 2) == "[]"


def test_threshold_selection_uses_highest_below() -> None:
    assert selectThresholdColor(80.0, THRESHOLDS) is ColorSpec.GREEN
    assert selectThresholdColor(95.0, THRESHOLDS) is ColorSpec.RED
    assert selectThresholdColor(85.0, THRESHOLDS) is ColorSpec.GREEN


def test_threshold_selection_falls_back_to_lowest() -> None:
    assert selectThresholdColor(10.0, THRESHOLDS) is ColorSpec.GREEN
    assert selectThresholdColor(10.0, {}) is None


def test_percent_placeholder_colored_by_threshold() -> None:
    assert processPercentagePlaceholder("used {percent}", 50.0, {}) == "used 50%"
    out = processPercentagePlaceholder("{percent}!", 95.5, THRESHOLDS)
    assert out == ColorSpec.RED.apply("95.5%") + "!"


def test_render_format_leaves_unknown_tokens() -> None:
    assert renderFormat("{a}-{b}-{c}", {"a": "1", "b": "2"}) == "1-2-{c}"


def test_render_format_without_placeholders_is_unchanged() -> None:
    text = "no {tokens here, just {braces"
    assert renderFormat(text, {"used": "1 KB", "max": "2 KB", "percent": "50%"}) == text


def test_small_percent_never_uses_exponent_form() -> None:
    assert formatNumber(0.00001, 10) == "0.00001"
    percent = roundHalfAway(0.00001, 10)
    assert processPercentagePlaceholder("{percent}", percent, {}, 10) == "0.00001%"
