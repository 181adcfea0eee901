import pytest

from split_tui.utils import (
    LOGIN_SHELL_SENTINEL,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    Rect,
    SplitSide,
    arrow_key_to_split_side,
    contains,
    key_to_bytes,
    resolve_login_shell_command,
)


def test_rect_right_and_bottom():
    rect = Rect(x=3, y=2, width=20, height=10)
    assert rect.right() == 23
    assert rect.bottom() == 12


def test_rect_edges_saturate():
    rect = Rect(x=65000, y=65000, width=1000, height=1000)
    assert rect.right() == 65535
    assert rect.bottom() == 65535


def test_contains_inclusive_start_exclusive_end():
    rect = Rect(x=3, y=2, width=20, height=10)
    assert contains(rect, 3, 2)
    assert contains(rect, 22, 11)
    assert not contains(rect, 23, 5)
    assert not contains(rect, 5, 12)
    assert not contains(rect, 2, 5)


def test_contains_empty_rect_holds_nothing():
    rect = Rect(x=5, y=5, width=0, height=4)
    assert not contains(rect, 5, 5)


def test_resolve_login_shell_uses_shell_env(monkeypatch):
    monkeypatch.setenv("SHELL", "/usr/bin/zsh")
    assert resolve_login_shell_command(LOGIN_SHELL_SENTINEL) == "/usr/bin/zsh"


def test_resolve_login_shell_defaults_to_bin_sh(monkeypatch):
    monkeypatch.delenv("SHELL", raising=False)
    assert resolve_login_shell_command(LOGIN_SHELL_SENTINEL) == "/bin/sh"


def test_resolve_other_command_unchanged(monkeypatch):
    monkeypatch.setenv("SHELL", "/usr/bin/zsh")
    assert resolve_login_shell_command("codex") == "codex"


@pytest.mark.parametrize(
    "code, expected",
    [
        (KeyCode.BACKSPACE, b"\x7f"),
        (KeyCode.TAB, b"\t"),
        (KeyCode.BACK_TAB, b"\x1b[Z"),
        (KeyCode.ENTER, b"\r"),
        (KeyCode.LEFT, b"\x1b[D"),
        (KeyCode.RIGHT, b"\x1b[C"),
        (KeyCode.UP, b"\x1b[A"),
        (KeyCode.DOWN, b"\x1b[B"),
        (KeyCode.HOME, b"\x1b[H"),
        (KeyCode.END, b"\x1b[F"),
        (KeyCode.PAGE_UP, b"\x1b[5~"),
        (KeyCode.PAGE_DOWN, b"\x1b[6~"),
        (KeyCode.DELETE, b"\x1b[3~"),
        (KeyCode.INSERT, b"\x1b[2~"),
        (KeyCode.F1, b"\x1b[11~"),
        (KeyCode.F5, b"\x1b[15~"),
        (KeyCode.F6, b"\x1b[17~"),
        (KeyCode.F11, b"\x1b[23~"),
        (KeyCode.F12, b"\x1b[24~"),
        (KeyCode.ESC, b""),
    ],
)
def test_special_keys(code, expected):
    assert key_to_bytes(KeyEvent(code)) == expected


def test_plain_character_is_utf8():
    assert key_to_bytes(KeyEvent("é")) == "é".encode("utf-8")
    assert key_to_bytes(KeyEvent("a")) == b"a"


def test_control_letters_case_insensitive():
    lower = key_to_bytes(KeyEvent("c", KeyModifiers.CONTROL))
    upper = key_to_bytes(KeyEvent("C", KeyModifiers.CONTROL | KeyModifiers.SHIFT))
    assert lower == upper == b"\x03"


@pytest.mark.parametrize(
    "char, expected",
    [(" ", b"\x00"), ("[", b"\x1b"), ("\\", b"\x1c"), ("]", b"\x1d"), ("^", b"\x1e"), ("_", b"\x1f")],
)
def test_control_symbols(char, expected):
    assert key_to_bytes(KeyEvent(char, KeyModifiers.CONTROL)) == expected


def test_control_unmapped_char_is_empty():
    assert key_to_bytes(KeyEvent("1", KeyModifiers.CONTROL)) == b""


def test_alt_prefixes_escape():
    assert key_to_bytes(KeyEvent("x", KeyModifiers.ALT)) == b"\x1bx"


def test_control_wins_over_alt():
    event = KeyEvent("a", KeyModifiers.CONTROL | KeyModifiers.ALT)
    assert key_to_bytes(event) == key_to_bytes(KeyEvent("a", KeyModifiers.CONTROL))


def test_key_event_rejects_multi_char():
    with pytest.raises(ValueError):
        KeyEvent("ab")


@pytest.mark.parametrize(
    "code, side",
    [
        (KeyCode.UP, SplitSide.TOP),
        (KeyCode.DOWN, SplitSide.BOTTOM),
        (KeyCode.LEFT, SplitSide.LEFT),
        (KeyCode.RIGHT, SplitSide.RIGHT),
    ],
)
def test_arrow_key_to_split_side(code, side):
    assert arrow_key_to_split_side(code) is side


def test_non_arrow_has_no_side():
    assert arrow_key_to_split_side(KeyCode.ENTER) is None
    assert arrow_key_to_split_side("k") is None