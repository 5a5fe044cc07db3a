import io
import sys

import pytest

from kslibs.colors import (
    Bg,
    BgBright,
    Control,
    Fg,
    FgBright,
    Style,
    get_control_mode,
    is_terminal,
    print_styled,
    set_control_mode,
    sgr,
    should_color,
    styled,
    supports_color,
)


class _TtyStream(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture(autouse=True)
def _restore_mode():
    previous = get_control_mode()
    yield
    set_control_mode(previous)


@pytest.fixture
def unix(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")


@pytest.mark.parametrize(
    "code, expected",
    [
        (Style.BOLD, "\033[1m"),
        (Fg.RED, "\033[31m"),
        (Bg.RESET, "\033[49m"),
        (FgBright.GRAY, "\033[97m"),
        (BgBright.BLACK, "\033[100m"),
    ],
)
def test_enum_codes_match_ansi(code, expected):
    assert sgr(code) == expected


@pytest.mark.parametrize(
    "name, fg, bg, fg_bright, bg_bright",
    [
        ("BLACK", 30, 40, 90, 100),
        ("RED", 31, 41, 91, 101),
        ("GREEN", 32, 42, 92, 102),
        ("YELLOW", 33, 43, 93, 103),
        ("BLUE", 34, 44, 94, 104),
        ("MAGENTA", 35, 45, 95, 105),
        ("CYAN", 36, 46, 96, 106),
        ("GRAY", 37, 47, 97, 107),
    ],
)
def test_color_sequences_for_every_color(name, fg, bg, fg_bright, bg_bright):
    assert sgr(Fg[name]) == f"\033[{fg}m"
    assert sgr(Bg[name]) == f"\033[{bg}m"
    assert sgr(FgBright[name]) == f"\033[{fg_bright}m"
    assert sgr(BgBright[name]) == f"\033[{bg_bright}m"


def test_sgr_sequence():
    assert sgr(Fg.RED) == "\033[31m"
    assert sgr(0) == "\033[0m"


def test_control_mode_roundtrip():
    set_control_mode(Control.FORCE)
    assert get_control_mode() is Control.FORCE
    set_control_mode(Control.OFF)
    assert get_control_mode() is Control.OFF


def test_set_control_mode_rejects_unknown():
    with pytest.raises(ValueError):
        set_control_mode(7)


@pytest.mark.parametrize("term", ["xterm-256color", "screen", "linux", "rxvt-unicode"])
def test_supports_color_known_terms(unix, term):
    assert supports_color({"TERM": term}) is True


def test_supports_color_unknown_or_missing(unix):
    assert supports_color({"TERM": "dumb"}) is False
    assert supports_color({}) is False


def test_is_terminal():
    assert is_terminal(_TtyStream()) is True
    assert is_terminal(io.StringIO()) is False
    assert is_terminal(object()) is False


def test_should_color_modes(unix, monkeypatch):
    monkeypatch.setenv("TERM", "xterm")
    tty = _TtyStream()
    plain = io.StringIO()
    set_control_mode(Control.AUTO)
    assert should_color(tty) is True
    assert should_color(plain) is False
    set_control_mode(Control.FORCE)
    assert should_color(plain) is True
    set_control_mode(Control.OFF)
    assert should_color(tty) is False


def test_auto_without_color_terminal(unix, monkeypatch):
    monkeypatch.delenv("TERM", raising=False)
    set_control_mode(Control.AUTO)
    assert should_color(_TtyStream()) is False


def test_styled_forced_appends_reset():
    set_control_mode(Control.FORCE)
    text = styled(Fg.GREEN, "hello", stream=io.StringIO())
    assert text == sgr(Fg.GREEN) + "hello" + sgr(Style.RESET) + sgr(Fg.RESET) + sgr(Bg.RESET)


def test_styled_single_argument_has_no_reset():
    set_control_mode(Control.FORCE)
    assert styled("plain", stream=io.StringIO()) == "plain"


def test_styled_off_strips_escapes():
    set_control_mode(Control.OFF)
    text = styled(Style.BOLD, Fg.YELLOW, "size: ", 3, stream=io.StringIO())
    assert text == "size: 3"
    assert "\033" not in text


def test_print_styled_writes_line():
    set_control_mode(Control.OFF)
    out = io.StringIO()
    print_styled(Fg.CYAN, "a", "b", stream=out)
    assert out.getvalue() == "ab\n"


def test_print_styled_no_args_writes_nothing():
    out = io.StringIO()
    print_styled(stream=out)
    assert out.getvalue() == ""


def test_print_styled_forced_contains_codes():
    set_control_mode(Control.FORCE)
    out = io.StringIO()
    print_styled(Style.REVERSED, Fg.RED, "x", stream=out)
    value = out.getvalue()
    assert value.startswith(sgr(Style.REVERSED) + sgr(Fg.RED) + "x")
    assert value.endswith(sgr(Bg.RESET) + "\n")