"""Fixed QWERTY layout shown by the visualiser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

SPACE = "SPACE"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
TAB = "TAB"


@dataclass(frozen=True)
class KeyDef:
    """A single key on the drawn keyboard."""

    key: str
    label: str = ""
    offset: int = 0

    @property
    def display(self) -> str:
        return self.label or self.key


def _row(keys: str, offset: int = 0) -> Tuple[KeyDef, ...]:
    defs = [KeyDef(key=k) for k in keys]
    if defs and offset:
        defs[0] = KeyDef(key=defs[0].key, offset=offset)
    return tuple(defs)


QWERTY_LAYOUT: Tuple[Tuple[KeyDef, ...], ...] = (
    _row("QWERTYUIOP[]"),
    _row("ASDFGHJKL;'", offset=2),
    _row("ZXCVBNM,./", offset=4),
)

SPACE_BAR = KeyDef(key=SPACE, label="SPACE")


def key_for_char(ch: Optional[str]) -> Optional[str]:
    """Return the key identifier that produces ``ch``, or None."""
    if not ch:
        return None
    if ch == " ":
        return SPACE
    if ch == "\n":
        return ENTER
    if ch == "\t":
        return TAB
    return ch.upper()
