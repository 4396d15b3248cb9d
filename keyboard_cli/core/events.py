"""Input events delivered to the interaction controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyKind(Enum):
    CHAR = "char"
    SPACE = "space"
    ENTER = "enter"
    BACKSPACE = "backspace"
    TAB = "tab"
    ESCAPE = "escape"
    INTERRUPT = "interrupt"
    VISUAL_MODE = "visual_mode"
    PRACTICE_MODE = "practice_mode"
    NEW_CHALLENGE = "new_challenge"
    IGNORED = "ignored"


@dataclass(frozen=True)
class KeyEvent:
    """A translated keystroke: what kind it is, which key, what it types."""

    kind: KeyKind
    key: str = ""
    char: str = ""

    @property
    def is_quit(self) -> bool:
        return self.kind in (KeyKind.ESCAPE, KeyKind.INTERRUPT)
