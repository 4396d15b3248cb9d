from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


class ChallengeState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class KeyResult(Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class RenderState(Enum):
    TYPED = "typed"
    NEXT = "next"
    UNTYPED = "untyped"


@dataclass(frozen=True)
class ChallengeStats:
    """Snapshot of a challenge's progress."""

    total_chars: int
    typed_chars: int
    mistakes: int
    accuracy: float
    wpm: float
    completed: bool


class Challenge:
    """One typing exercise bound to a fixed target text.

    The challenge moves through three states:

      * ``NOT_STARTED`` – nothing typed yet, no start time.
      * ``IN_PROGRESS`` – the first key was processed; start time is fixed.
      * ``COMPLETED`` – the cursor reached the end of the text. Terminal.

    Speed and accuracy follow the classic formulas:
      * **Accuracy** – 100 × (typed − mistakes) / typed, 100 before typing.
      * **WPM** – (typed / 5) / elapsed minutes, 0 when no time has elapsed.
    """

    def __init__(self, text: str) -> None:
        """Create a challenge for ``text``, which must not be empty."""
        if not text:
            raise ValueError("challenge text must not be empty")
        self._text = text
        self._position = 0
        self._mistakes = 0
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None
        self._state = ChallengeState.NOT_STARTED

    @property
    def text(self) -> str:
        """The target text."""
        return self._text

    @property
    def position(self) -> int:
        """Index of the next character to type (0-based)."""
        return self._position

    @property
    def mistakes(self) -> int:
        """Number of rejected keystrokes so far."""
        return self._mistakes

    @property
    def start_time(self) -> Optional[float]:
        """Timestamp of the first processed key, or None."""
        return self._start_time

    @property
    def end_time(self) -> Optional[float]:
        """Timestamp of the key that completed the text, or None."""
        return self._end_time

    @property
    def state(self) -> ChallengeState:
        return self._state

    @property
    def completed(self) -> bool:
        return self._state is ChallengeState.COMPLETED

    @property
    def next_char(self) -> Optional[str]:
        """Character expected at the cursor, or None once completed."""
        if self._position < len(self._text):
            return self._text[self._position]
        return None

    def process_key(self, ch: str, now: float) -> KeyResult:
        """Compare ``ch`` with the character at the cursor."""
        if self._state is ChallengeState.COMPLETED:
            return KeyResult.REJECTED
        if self._state is ChallengeState.NOT_STARTED:
            self._start_time = now
            self._state = ChallengeState.IN_PROGRESS

        if ch != self._text[self._position]:
            self._mistakes += 1
            return KeyResult.REJECTED

        self._position += 1
        if self._position == len(self._text):
            self._end_time = now
            self._state = ChallengeState.COMPLETED
            logger.debug(
                "Challenge completed: %d chars, %d mistakes", len(self._text), self._mistakes
            )
        return KeyResult.ACCEPTED

    def elapsed(self, now: float) -> float:
        """Seconds spent on the challenge, frozen once it is completed."""
        if self._start_time is None:
            return 0.0
        if self._end_time is not None:
            return self._end_time - self._start_time
        return now - self._start_time

    def stats(self, now: float) -> ChallengeStats:
        typed = self._position
        if typed > 0:
            accuracy = 100.0 * (typed - self._mistakes) / typed
        else:
            accuracy = 100.0

        elapsed_minutes = self.elapsed(now) / 60.0
        wpm = (typed / 5.0) / elapsed_minutes if elapsed_minutes > 0 else 0.0

        return ChallengeStats(
            total_chars=len(self._text),
            typed_chars=typed,
            mistakes=self._mistakes,
            accuracy=accuracy,
            wpm=wpm,
            completed=self.completed,
        )

    def formatted_view(self) -> List[Tuple[str, RenderState]]:
        """Pair every character of the text with how it should be drawn."""
        view: List[Tuple[str, RenderState]] = []
        for i, ch in enumerate(self._text):
            if i < self._position:
                view.append((ch, RenderState.TYPED))
            elif i == self._position:
                view.append((ch, RenderState.NEXT))
            else:
                view.append((ch, RenderState.UNTYPED))
        return view

    def progress_text(self, now: float) -> str:
        """One-line summary shown under the challenge text."""
        s = self.stats(now)
        if s.completed:
            return f"Completed! WPM: {s.wpm:.1f}, Accuracy: {s.accuracy:.1f}%"
        return (
            f"Progress: {s.typed_chars}/{s.total_chars} chars, "
            f"WPM: {s.wpm:.1f}, Accuracy: {s.accuracy:.1f}%"
        )
