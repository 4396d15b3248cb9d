"""Builds a frame of styled text lines from the controller state."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from keyboard_cli.core.challenge import Challenge, RenderState
from keyboard_cli.core.controller import InteractionController, Mode
from keyboard_cli.core.keyboard import QWERTY_LAYOUT, SPACE_BAR
from keyboard_cli.core.tracker import KeyPressTracker
from keyboard_cli.ui.colors import Style
from keyboard_cli.ui.models import Line, Segment, line_text

SPACE_BAR_WIDTH = 30
CHALLENGE_BOX_WIDTH = 80
TYPED_BOX_WIDTH = 50
# Horizontal padding inside boxes, each side.
BOX_PADDING = 2

MODE_HINT = "Press F1 for Visual Mode, F2 for Practice Mode, F3 for New Text"
EXIT_HINT = "Press ESC or Ctrl+C to exit."

_RENDER_STYLES = {
    RenderState.TYPED: Style.TYPED,
    RenderState.NEXT: Style.NEXT_CHAR,
    RenderState.UNTYPED: Style.UNTYPED,
}


def build_frame(controller: InteractionController, now: float) -> List[Line]:
    """Lay out everything shown on screen for the current state."""
    challenge = controller.challenge
    if controller.mode is Mode.PRACTICE and challenge is not None:
        lines = practice_lines(controller, challenge, now)
    else:
        lines = visual_lines(controller)
    lines.extend([[], []])
    if controller.supports_practice:
        lines.append([Segment(MODE_HINT, Style.HINT)])
    lines.append([Segment(EXIT_HINT, Style.HINT)])
    return lines


def practice_lines(
    controller: InteractionController, challenge: Challenge, now: float
) -> List[Line]:
    inner = CHALLENGE_BOX_WIDTH - 2 - 2 * BOX_PADDING
    content: List[Line] = [[Segment("Type this text:")], []]
    content.extend(_view_rows(challenge.formatted_view(), inner))

    lines = box(content, CHALLENGE_BOX_WIDTH)
    lines.append([])
    lines.append([Segment(challenge.progress_text(now), Style.PROGRESS)])
    lines.append([])
    lines.extend(keyboard_lines(controller.tracker, controller.next_key))
    return lines


def visual_lines(controller: InteractionController) -> List[Line]:
    lines = keyboard_lines(controller.tracker)
    lines.append([])
    inner = TYPED_BOX_WIDTH - 2 - 2 * BOX_PADDING
    typed = "Typed: " + controller.typed_text.replace("\n", "↵")
    content: List[Line] = [
        [Segment(typed[i:i + inner])] for i in range(0, len(typed), inner)
    ]
    lines.extend(box(content, TYPED_BOX_WIDTH))
    return lines


def keyboard_lines(tracker: KeyPressTracker, next_key: Optional[str] = None) -> List[Line]:
    """Rows of the keyboard followed by a blank line and the space bar."""
    lines: List[Line] = []
    for row in QWERTY_LAYOUT:
        line: Line = []
        for key_def in row:
            if key_def.offset:
                line.append(Segment(" " * key_def.offset))
            style = key_style(key_def.key, tracker, next_key)
            line.append(Segment(f" {key_def.display} ", style))
        lines.append(line)
    lines.append([])
    space_style = key_style(SPACE_BAR.key, tracker, next_key)
    lines.append([Segment(SPACE_BAR.display.center(SPACE_BAR_WIDTH), space_style)])
    return lines


def key_style(key: str, tracker: KeyPressTracker, next_key: Optional[str] = None) -> str:
    if next_key is not None and key == next_key:
        return Style.KEY_NEXT
    if tracker.is_active(key):
        return Style.KEY_ACTIVE
    return Style.KEY


def box(content: Sequence[Line], width: int) -> List[Line]:
    """Surround ``content`` with a rounded border and one line of padding."""
    inner = width - 2
    pad = " " * BOX_PADDING
    lines: List[Line] = [[Segment("╭" + "─" * inner + "╮", Style.BORDER)]]
    body: List[Line] = [[], *content, []]
    for row in body:
        fill = inner - 2 * BOX_PADDING - len(line_text(row))
        lines.append(
            [Segment("│", Style.BORDER), Segment(pad), *row,
             Segment(" " * max(fill, 0) + pad), Segment("│", Style.BORDER)]
        )
    lines.append([Segment("╰" + "─" * inner + "╯", Style.BORDER)])
    return lines


def wrap_view(
    view: Sequence[Tuple[str, RenderState]], width: int
) -> List[Sequence[Tuple[str, RenderState]]]:
    """Split the view into rows of at most ``width`` characters.

    Rows break after the last space that fits; words longer than ``width``
    are split.
    """
    rows = []
    start = 0
    while start < len(view):
        end = min(start + width, len(view))
        if end < len(view):
            for j in range(end, start, -1):
                if view[j - 1][0] == " ":
                    end = j
                    break
        rows.append(view[start:end])
        start = end
    return rows


def _view_rows(view: Sequence[Tuple[str, RenderState]], width: int) -> List[Line]:
    lines: List[Line] = []
    for row in wrap_view(view, width):
        line: Line = []
        run = ""
        run_state: Optional[RenderState] = None
        for ch, state in row:
            ch = "↵" if ch == "\n" else ch
            if state is not run_state and run:
                line.append(Segment(run, _RENDER_STYLES[run_state]))
                run = ""
            run += ch
            run_state = state
        if run:
            line.append(Segment(run, _RENDER_STYLES[run_state]))
        lines.append(line)
    return lines
