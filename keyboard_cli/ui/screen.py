"""Full-screen curses loop: one key event or one clock tick at a time."""

from __future__ import annotations

import curses
import logging
import time
from typing import Callable, List, Optional, Union

from keyboard_cli.core.controller import InteractionController, Signal
from keyboard_cli.core.tracker import TICK_INTERVAL
from keyboard_cli.ui.colors import attr_for, init_palette
from keyboard_cli.ui.keys import CTRL_C, translate_key
from keyboard_cli.ui.models import Line
from keyboard_cli.ui.renderer import build_frame

logger = logging.getLogger(__name__)

# Milliseconds curses waits for ESC sequences before reporting a bare ESC.
ESC_DELAY_MS = 25


def _setup(stdscr) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.set_escdelay(ESC_DELAY_MS)
    init_palette()
    stdscr.keypad(True)
    stdscr.timeout(int(TICK_INTERVAL * 1000))


def _read_key(stdscr) -> Optional[Union[str, int]]:
    """Wait up to one tick for input; None means the wait timed out."""
    try:
        return stdscr.get_wch()
    except curses.error:
        return None
    except KeyboardInterrupt:
        return CTRL_C


def draw(stdscr, lines: List[Line]) -> None:
    stdscr.erase()
    height, width = stdscr.getmaxyx()
    for y, line in enumerate(lines[:height]):
        x = 0
        for seg in line:
            if x >= width:
                break
            try:
                stdscr.addnstr(y, x, seg.text, width - x, attr_for(seg.style))
            except curses.error:
                # Writing the bottom-right cell raises after drawing it.
                pass
            x += len(seg.text)
    stdscr.refresh()


def run_screen(
    stdscr,
    controller: InteractionController,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """Process events until the controller asks to quit."""
    _setup(stdscr)
    last_tick = clock()
    draw(stdscr, build_frame(controller, last_tick))

    while True:
        raw = _read_key(stdscr)
        now = clock()
        if raw is not None:
            if raw == curses.KEY_RESIZE:
                stdscr.clear()
            elif controller.handle_key(translate_key(raw), now) is Signal.QUIT:
                logger.debug("Quit requested")
                return
        if raw is None or now - last_tick >= TICK_INTERVAL:
            controller.tick(now)
            last_tick = now
        draw(stdscr, build_frame(controller, now))
