"""Launch lines for pane programs and scraping of agents' resume hints."""

from __future__ import annotations

from typing import Sequence

SHELL = "/bin/sh"

_RESUME_KEYWORDS = (
    "resume",
    "--session",
    "--continue",
    "--resume",
    " -r",
    " -c",
)

_TRAILING_PUNCTUATION = "`'\" .,)]\u00a0"
_LEADING_PUNCTUATION = "`'\"("

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def exec_argv(command: str) -> list[str]:
    """The argument vector that runs a pane's command line.

    A line without whitespace names a program run directly; anything else is
    handed to the shell so multi-word commands such as ``codex resume <id>``
    work. Raises ValueError for an empty or blank line.
    """
    if not command.strip():
        raise ValueError("empty command line")
    if not any(char.isspace() for char in command):
        return [command]
    return [SHELL, "-c", command]


def find_token(haystack: str, needle: str) -> int | None:
    """Offset of needle in haystack where it is not part of a longer word.

    The characters on either side of the match must not be ASCII letters or
    digits, so "pi" is not found inside "pipe".
    """
    if not needle:
        return None
    search_from = 0
    while True:
        found = haystack.find(needle, search_from)
        if found < 0:
            return None
        after = found + len(needle)
        before_ok = found == 0 or not _is_ascii_alnum(haystack[found - 1])
        after_ok = after >= len(haystack) or not _is_ascii_alnum(haystack[after])
        if before_ok and after_ok:
            return found
        search_from = after


def extract_resume_command(binary: str, rows: Sequence[str]) -> str | None:
    """The most recent resume hint for binary found in the screen rows.

    Rows are scanned from the bottom up for one holding binary as a token
    followed by a resume-style keyword. The hint runs from the binary to the
    end of the line, stripped of surrounding quotes, backticks and brackets.
    """
    needle = _ascii_lower(binary)
    for row in reversed(rows):
        trimmed = row.strip()
        if not trimmed:
            continue
        lower = _ascii_lower(trimmed)
        start = find_token(lower, needle)
        if start is None:
            continue
        tail_lower = lower[start:]
        if not any(keyword in tail_lower for keyword in _RESUME_KEYWORDS):
            continue
        candidate = (
            trimmed[start:]
            .rstrip(_TRAILING_PUNCTUATION)
            .lstrip(_LEADING_PUNCTUATION)
            .strip()
        )
        if candidate:
            return candidate
    return None