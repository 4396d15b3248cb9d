"""Translation of raw curses input into controller key events."""

from __future__ import annotations

import curses
from typing import Union

from keyboard_cli.core.events import KeyEvent, KeyKind
from keyboard_cli.core.keyboard import BACKSPACE, ENTER, SPACE, TAB

ESCAPE_CHAR = "\x1b"
CTRL_C = "\x03"

_ENTER_INPUTS = {"\n", "\r", curses.KEY_ENTER}
_BACKSPACE_INPUTS = {"\x7f", "\b", curses.KEY_BACKSPACE}

_FUNCTION_KEYS = {
    curses.KEY_F1: KeyKind.VISUAL_MODE,
    curses.KEY_F2: KeyKind.PRACTICE_MODE,
    curses.KEY_F3: KeyKind.NEW_CHALLENGE,
}


def translate_key(raw: Union[str, int]) -> KeyEvent:
    """Map a ``get_wch()`` result to a :class:`KeyEvent`."""
    if raw == ESCAPE_CHAR:
        return KeyEvent(KeyKind.ESCAPE)
    if raw == CTRL_C:
        return KeyEvent(KeyKind.INTERRUPT)
    if raw in _FUNCTION_KEYS:
        return KeyEvent(_FUNCTION_KEYS[raw])
    if raw == " ":
        return KeyEvent(KeyKind.SPACE, key=SPACE, char=" ")
    if raw in _ENTER_INPUTS:
        return KeyEvent(KeyKind.ENTER, key=ENTER, char="\n")
    if raw in _BACKSPACE_INPUTS:
        return KeyEvent(KeyKind.BACKSPACE, key=BACKSPACE)
    if raw == "\t":
        return KeyEvent(KeyKind.TAB, key=TAB)
    if isinstance(raw, str) and len(raw) == 1 and raw.isprintable():
        return KeyEvent(KeyKind.CHAR, key=raw.upper(), char=raw)
    return KeyEvent(KeyKind.IGNORED)
