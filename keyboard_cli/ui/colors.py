"""Terminal styles and their curses colour pairs."""

from __future__ import annotations

import curses
from typing import Dict, Tuple


class Style:
    """Style names used by the frame builder."""

    TEXT = "text"
    KEY = "key"
    KEY_ACTIVE = "key_active"
    KEY_NEXT = "key_next"
    BORDER = "border"
    TYPED = "typed"
    NEXT_CHAR = "next_char"
    UNTYPED = "untyped"
    PROGRESS = "progress"
    HINT = "hint"


# style -> (fg, bg, 256-colour fg, 256-colour bg, bold)
_PALETTE: Dict[str, Tuple[int, int, int, int, bool]] = {
    Style.KEY: (curses.COLOR_WHITE, -1, 252, -1, False),
    Style.KEY_ACTIVE: (curses.COLOR_BLACK, curses.COLOR_BLUE, 0, 12, True),
    Style.KEY_NEXT: (curses.COLOR_WHITE, curses.COLOR_CYAN, 252, 39, True),
    Style.BORDER: (curses.COLOR_MAGENTA, -1, 63, -1, False),
    Style.TYPED: (curses.COLOR_GREEN, -1, 2, -1, False),
    Style.NEXT_CHAR: (curses.COLOR_BLACK, curses.COLOR_WHITE, 0, 7, False),
    Style.PROGRESS: (curses.COLOR_CYAN, -1, 39, -1, True),
    Style.HINT: (curses.COLOR_WHITE, -1, 245, -1, False),
}

_attrs: Dict[str, int] = {}


def init_palette() -> None:
    """Register one colour pair per style. Call once curses is running."""
    _attrs.clear()
    if not curses.has_colors():
        _attrs[Style.KEY_ACTIVE] = curses.A_REVERSE | curses.A_BOLD
        _attrs[Style.KEY_NEXT] = curses.A_UNDERLINE | curses.A_BOLD
        _attrs[Style.NEXT_CHAR] = curses.A_REVERSE
        _attrs[Style.PROGRESS] = curses.A_BOLD
        return
    curses.start_color()
    curses.use_default_colors()
    rich = curses.COLORS >= 256
    for pair, (style, (fg, bg, fg256, bg256, bold)) in enumerate(_PALETTE.items(), start=1):
        if rich:
            fg, bg = fg256, bg256
        curses.init_pair(pair, fg, bg)
        attr = curses.color_pair(pair)
        if bold:
            attr |= curses.A_BOLD
        _attrs[style] = attr


def attr_for(style: str) -> int:
    return _attrs.get(style, curses.A_NORMAL)
