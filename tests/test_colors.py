import pytest

from fetchlib.colors import ColorSpec, replaceColorPlaceholders


def test_resolve_is_case_insensitive_with_underscore_alias() -> None:
    assert ColorSpec.resolve("RED") is ColorSpec.RED
    assert ColorSpec.resolve("brightred") is ColorSpec.BRIGHT_RED
    assert ColorSpec.resolve("Bright_Red") is ColorSpec.BRIGHT_RED
    assert ColorSpec.resolve("clear") is ColorSpec.CLEAR


def test_resolve_unknown_raises() -> None:
    with pytest.raises(ValueError):
        ColorSpec.resolve("purple")
    assert ColorSpec.tryResolve("purple") is None


def test_apply_emits_standard_sgr_codes() -> None:
    assert ColorSpec.RED.apply("x") == "\x1b[31mx\x1b[0m"
    assert ColorSpec.BRIGHT_RED.apply("x") == "\x1b[91mx\x1b[0m"
    assert ColorSpec.CLEAR.apply("x") == "x"


def test_text_without_directives_is_unchanged() -> None:
    assert replaceColorPlaceholders("plain {value} text") == "plain {value} text"


def test_directive_colors_until_next_directive() -> None:
    out = replaceColorPlaceholders("a{color-red}b{color-blue}c")
    assert out == "a" + ColorSpec.RED.apply("b") + ColorSpec.BLUE.apply("c")


def test_title_directive_uses_title_color() -> None:
    out = replaceColorPlaceholders("{color-title}user", ColorSpec.GREEN)
    assert out == ColorSpec.GREEN.apply("user")


def test_unknown_color_keeps_payload_uncolored() -> None:
    assert replaceColorPlaceholders("x{color-nope}payload") == "xpayload"


def test_truncated_directive_is_consumed() -> None:
    assert replaceColorPlaceholders("a{color-red") == "ared"


def test_empty_payload_adds_nothing() -> None:
    assert replaceColorPlaceholders("{color-red}") == ""


def test_replacement_is_idempotent() -> None:
    once = replaceColorPlaceholders("{color-white}[{color-brightblack} Hardware {color-white}]")
    assert replaceColorPlaceholders(once) == once
