"""Helpers normalizing the answer, solution and revealed letter buffers."""

from __future__ import annotations

import re
from typing import Optional

from ..core.constants import BLANK

NON_ANSWER_RE = re.compile(r"[^A-Z ]")
NON_LETTER_RE = re.compile(r"[^A-Z]")


def blank_buffer(length: int) -> str:
    return BLANK * length


def normalize_answer(answer: Optional[str], length: int) -> str:
    """Return the solver's answer uppercased, with illegal characters blanked.

    The result is padded with blanks (or clipped) to exactly ``length``.
    """

    if not answer:
        return blank_buffer(length)
    cleaned = NON_ANSWER_RE.sub(BLANK, answer.upper())
    return cleaned[:length].ljust(length, BLANK)


def normalize_solution(solution: Optional[str]) -> str:
    """Return the setter's solution uppercased with every non-letter removed."""

    if not solution:
        return ""
    return NON_LETTER_RE.sub("", solution.upper())


def normalize_revealed(revealed: Optional[str]) -> str:
    if not revealed:
        return ""
    return revealed.upper()


def set_letter(buffer: str, index: int, letter: str) -> str:
    """Return ``buffer`` with the character at ``index`` replaced by ``letter``."""

    if not 0 <= index < len(buffer):
        raise IndexError(f"Letter index {index} outside buffer of length {len(buffer)}")
    return f"{buffer[:index]}{letter}{buffer[index + 1:]}"


def is_blank(letter: Optional[str]) -> bool:
    return not letter or letter == BLANK


__all__ = [
    "blank_buffer",
    "is_blank",
    "normalize_answer",
    "normalize_revealed",
    "normalize_solution",
    "set_letter",
]
