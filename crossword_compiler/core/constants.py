"""Shared constants and enumerations for the crossword compiler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Clue directions, including the unresolved direction of a tail label."""

    ACROSS = "across"
    DOWN = "down"
    UNKNOWN = "unknown"


BLANK = " "

CLUE_PATTERN = "<LabelText>.<ClueText>(<LengthText>)"

DOCUMENT_MIMETYPE = "application/vnd.js-crossword"
DOCUMENT_VERSION = "1.0"

# Separators allowed between the words of a length group, besides whitespace.
LENGTH_SEPARATORS = ",-."

ITALIC_CLASS = "cw-italic"
BOLD_CLASS = "cw-bold"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height
