"""Screen geometry primitives, key events and terminal input encoding."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass

#: Stored in layouts and presets when a pane should run the user's login shell.
LOGIN_SHELL_SENTINEL = "__SHELL__"

_U16_MAX = 0xFFFF


def _sat_add(a: int, b: int) -> int:
    return min(a + b, _U16_MAX)


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def right(self) -> int:
        """Column just past the right edge."""
        return _sat_add(self.x, self.width)

    def bottom(self) -> int:
        """Row just past the bottom edge."""
        return _sat_add(self.y, self.height)


class Direction(enum.Enum):
    """Axis along which a split divides its area."""

    HORIZONTAL = "H"
    VERTICAL = "V"


class SplitSide(enum.Enum):
    """A side of a pane."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class KeyCode(enum.Enum):
    """Non-character keys. Printable characters are given as one-character strings."""

    BACKSPACE = enum.auto()
    TAB = enum.auto()
    BACK_TAB = enum.auto()
    ENTER = enum.auto()
    ESC = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    DELETE = enum.auto()
    INSERT = enum.auto()
    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a KeyCode or a single character, plus modifiers."""

    code: KeyCode | str
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if isinstance(self.code, str) and len(self.code) != 1:
            raise ValueError(f"character key must be one character, got {self.code!r}")


def resolve_login_shell_command(command: str) -> str:
    """Replace the shell sentinel with $SHELL (or /bin/sh)."""
    if command == LOGIN_SHELL_SENTINEL:
        return os.environ.get("SHELL", "/bin/sh")
    return command


def contains(rect: Rect, x: int, y: int) -> bool:
    """True if the cell (x, y) lies inside rect."""
    return rect.x <= x < rect.right() and rect.y <= y < rect.bottom()


_ESCAPES: dict[KeyCode, bytes] = {
    KeyCode.BACKSPACE: b"\x7f",
    KeyCode.TAB: b"\t",
    KeyCode.BACK_TAB: b"\x1b[Z",
    KeyCode.ENTER: b"\r",
    KeyCode.LEFT: b"\x1b[D",
    KeyCode.RIGHT: b"\x1b[C",
    KeyCode.UP: b"\x1b[A",
    KeyCode.DOWN: b"\x1b[B",
    KeyCode.HOME: b"\x1b[H",
    KeyCode.END: b"\x1b[F",
    KeyCode.PAGE_UP: b"\x1b[5~",
    KeyCode.PAGE_DOWN: b"\x1b[6~",
    KeyCode.DELETE: b"\x1b[3~",
    KeyCode.INSERT: b"\x1b[2~",
    KeyCode.F1: b"\x1b[11~",
    KeyCode.F2: b"\x1b[12~",
    KeyCode.F3: b"\x1b[13~",
    KeyCode.F4: b"\x1b[14~",
    KeyCode.F5: b"\x1b[15~",
    KeyCode.F6: b"\x1b[17~",
    KeyCode.F7: b"\x1b[18~",
    KeyCode.F8: b"\x1b[19~",
    KeyCode.F9: b"\x1b[20~",
    KeyCode.F10: b"\x1b[21~",
    KeyCode.F11: b"\x1b[23~",
    KeyCode.F12: b"\x1b[24~",
}

_CTRL_SYMBOLS: dict[str, bytes] = {
    " ": b"\x00",
    "[": b"\x1b",
    "\\": b"\x1c",
    "]": b"\x1d",
    "^": b"\x1e",
    "_": b"\x1f",
}


def _ctrl_char(char: str) -> bytes:
    lower = char.lower() if char.isascii() else char
    if "a" <= lower <= "z":
        return bytes([ord(lower) & 0x1F])
    return _CTRL_SYMBOLS.get(lower, b"")


def key_to_bytes(key: KeyEvent) -> bytes:
    """Encode a key event as the bytes a terminal program expects."""
    if isinstance(key.code, KeyCode):
        return _ESCAPES.get(key.code, b"")
    char = key.code
    if KeyModifiers.CONTROL in key.modifiers:
        return _ctrl_char(char)
    if KeyModifiers.ALT in key.modifiers:
        return b"\x1b" + char.encode("utf-8")
    return char.encode("utf-8")


_ARROW_SIDES = {
    KeyCode.UP: SplitSide.TOP,
    KeyCode.DOWN: SplitSide.BOTTOM,
    KeyCode.LEFT: SplitSide.LEFT,
    KeyCode.RIGHT: SplitSide.RIGHT,
}


def arrow_key_to_split_side(code: KeyCode | str) -> SplitSide | None:
    """Map an arrow key to the pane side it points at."""
    if isinstance(code, KeyCode):
        return _ARROW_SIDES.get(code)
    return None