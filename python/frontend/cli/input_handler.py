"""Keyboard input for the pixel puzzle terminal UI.

Each keypress is turned into an action name understood by the game loop:
directions steer the cursor or the grabbed unit, Space/Enter grabs,
N/B/M ask for hints and P pauses the clock.  Arrow keys arrive as escape
sequences on Unix and as two-byte scan codes on Windows.
"""

from __future__ import annotations

import os
import sys


# -- raw reads -----------------------------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    # latin-1 keeps the 0xE0 scan-code prefix intact.
    return msvcrt.getch().decode("latin-1")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key tables ----------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "grab",
    "\r": "grab",
    "\n": "grab",
    "n": "hint",
    "b": "hint_area",
    "m": "reveal",
    "p": "pause",
    "r": "restart",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

# Final byte of ``ESC [ x`` / ``ESC O x`` sequences.
_ANSI_ARROWS: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}

# Second byte after a 0x00 / 0xE0 prefix from msvcrt.
_SCAN_ARROWS: dict[str, str] = {"H": "up", "P": "down", "M": "right", "K": "left"}


def resolve_key(ch: str) -> str:
    """Map a raw character to its action string.

    Letters are matched case-insensitively; unmapped printable characters
    come back unchanged and anything else as ``""``.
    """
    action = _KEY_MAP.get(ch.lower() if ch.isalpha() else ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def resolve_sequence(first: str, read_next) -> str:
    """Resolve a multi-byte arrow key starting with *first*.

    *read_next* is called for each further byte.  A lone Escape, or any
    prefix not followed by an arrow code, means ``"quit"`` or ``""``.
    """
    if first == "\x1b":
        if read_next() not in ("[", "O"):
            return "quit"
        return _ANSI_ARROWS.get(read_next(), "")
    if first in ("\x00", "\xe0"):
        return _SCAN_ARROWS.get(read_next(), "")
    return resolve_key(first)


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string.

    One of ``"up"``, ``"down"``, ``"left"``, ``"right"``, ``"grab"``,
    ``"hint"``, ``"hint_area"``, ``"reveal"``, ``"pause"``, ``"restart"``,
    ``"quit"``, an unmapped printable character, or ``""``.
    """
    return resolve_sequence(_getch(), _getch)
