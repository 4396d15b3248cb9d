"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from keyboard_cli.ui.colors import Style


@dataclass(frozen=True)
class Segment:
    """A run of text drawn in a single style."""

    text: str
    style: str = Style.TEXT


Line = List[Segment]


def line_text(line: Line) -> str:
    """Plain text of a line, without styling."""
    return "".join(seg.text for seg in line)
