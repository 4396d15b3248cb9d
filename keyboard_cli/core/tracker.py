from __future__ import annotations

from typing import Dict, FrozenSet, Optional

# Seconds a key stays highlighted after its most recent press.
DECAY_WINDOW = 0.3
# Seconds between clock ticks; independent of DECAY_WINDOW.
TICK_INTERVAL = 0.1


class KeyPressTracker:
    """Remembers when each key was last pressed.

    Entries are only dropped by :meth:`sweep`, so a key stays active until
    the next sweep that finds it older than the decay window.
    """

    def __init__(self) -> None:
        self._pressed: Dict[str, float] = {}

    def record(self, key: str, now: float) -> None:
        """Set the last-press time of ``key`` to ``now``."""
        self._pressed[key] = now

    def sweep(self, now: float, window: float = DECAY_WINDOW) -> None:
        """Forget every key pressed ``window`` seconds or more before ``now``."""
        expired = [k for k, t in self._pressed.items() if now - t >= window]
        for key in expired:
            del self._pressed[key]

    def is_active(self, key: str) -> bool:
        return key in self._pressed

    def active_keys(self) -> FrozenSet[str]:
        return frozenset(self._pressed)

    def last_pressed(self, key: str) -> Optional[float]:
        return self._pressed.get(key)

    def clear(self) -> None:
        self._pressed.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._pressed

    def __len__(self) -> int:
        return len(self._pressed)
