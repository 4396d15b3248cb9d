from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Deque, Optional

from keyboard_cli.core.challenge import Challenge
from keyboard_cli.core.events import KeyEvent, KeyKind
from keyboard_cli.core.keyboard import key_for_char
from keyboard_cli.core.texts import ChallengeSelector, Difficulty
from keyboard_cli.core.tracker import DECAY_WINDOW, KeyPressTracker

logger = logging.getLogger(__name__)

# Characters kept for the "Typed:" box in visual mode.
MAX_STROKES = 100


class Mode(Enum):
    VISUAL = "visual"
    PRACTICE = "practice"


class Signal(Enum):
    CONTINUE = "continue"
    QUIT = "quit"


class InteractionController:
    """Routes key events and clock ticks to the tracker and the challenge.

    Without a ``selector`` the controller is visualisation-only: it stays in
    visual mode and ignores mode-switch and new-text requests.
    """

    def __init__(
        self,
        selector: Optional[ChallengeSelector] = None,
        mode: Mode = Mode.PRACTICE,
        difficulty: Difficulty = Difficulty.MEDIUM,
        max_strokes: int = MAX_STROKES,
    ) -> None:
        self._tracker = KeyPressTracker()
        self._selector = selector
        self._difficulty = difficulty
        self._strokes: Deque[str] = deque(maxlen=max_strokes)
        self._challenge: Optional[Challenge] = None
        self._mode = Mode.VISUAL
        if mode is Mode.PRACTICE:
            self.switch_mode(Mode.PRACTICE)

    @property
    def tracker(self) -> KeyPressTracker:
        return self._tracker

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def challenge(self) -> Optional[Challenge]:
        return self._challenge

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def supports_practice(self) -> bool:
        return self._selector is not None

    @property
    def typed_text(self) -> str:
        return "".join(self._strokes)

    @property
    def next_key(self) -> Optional[str]:
        """Key identifier of the character the challenge expects next."""
        if self._mode is not Mode.PRACTICE or self._challenge is None:
            return None
        return key_for_char(self._challenge.next_char)

    def switch_mode(self, mode: Mode) -> None:
        if mode is Mode.VISUAL:
            self._mode = Mode.VISUAL
            self._challenge = None
            logger.debug("Switched to visual mode")
            return
        if self._selector is None:
            logger.debug("Practice mode unavailable without practice texts")
            return
        if self._mode is not Mode.PRACTICE:
            self._challenge = self._selector.new_challenge(self._difficulty)
            self._mode = Mode.PRACTICE
            logger.debug("Switched to practice mode")

    def new_challenge(self) -> None:
        """Replace the current challenge, finished or not."""
        if self._mode is not Mode.PRACTICE or self._selector is None:
            return
        self._challenge = self._selector.new_challenge(self._difficulty)

    def handle_key(self, event: KeyEvent, now: float) -> Signal:
        if event.is_quit:
            return Signal.QUIT

        if event.kind is KeyKind.VISUAL_MODE:
            self.switch_mode(Mode.VISUAL)
            return Signal.CONTINUE
        if event.kind is KeyKind.PRACTICE_MODE:
            self.switch_mode(Mode.PRACTICE)
            return Signal.CONTINUE
        if event.kind is KeyKind.NEW_CHALLENGE:
            self.new_challenge()
            return Signal.CONTINUE
        if event.kind is KeyKind.IGNORED or not event.key:
            return Signal.CONTINUE

        self._tracker.record(event.key, now)

        if event.kind is KeyKind.BACKSPACE:
            if self._strokes:
                self._strokes.pop()
            return Signal.CONTINUE

        if event.char:
            if self._mode is Mode.PRACTICE and self._challenge is not None:
                self._challenge.process_key(event.char, now)
            self._strokes.append(event.char)
        return Signal.CONTINUE

    def tick(self, now: float) -> None:
        self._tracker.sweep(now, DECAY_WINDOW)
