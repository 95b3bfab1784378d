"""Grammar for clue specification strings.

A clue string has the shape ``<LabelText>.<ClueText>(<LengthText>)``::

    "9,3a,4d. Grand finale (5,3-4)"

The label and length groups have their own small grammars. Both are read by a
character scanner that consumes one leading token at a time; whatever cannot be
consumed is reported as the residual of a :class:`GrammarError`.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Callable, List

from ..core.constants import CLUE_PATTERN, LENGTH_SEPARATORS, Direction
from ..core.exceptions import GrammarError

DIRECTION_SUFFIXES = {"a": Direction.ACROSS, "d": Direction.DOWN}


@dataclass(frozen=True)
class ClueParts:
    """The three raw groups of a clue string."""

    label_text: str
    clue_text: str
    length_text: str


@dataclass(frozen=True)
class LabelSegment:
    number: int
    suffix: str = ""

    @property
    def text(self) -> str:
        return f"{self.number}{self.suffix}"

    @property
    def direction(self) -> Direction:
        return DIRECTION_SUFFIXES.get(self.suffix, Direction.UNKNOWN)


@dataclass(frozen=True)
class WordLength:
    length: int
    terminator: str = ""


@dataclass(frozen=True)
class ParsedClue:
    parts: ClueParts
    label_segments: List[LabelSegment]
    clue_text: str
    words: List[WordLength]


class _Scanner:
    """Cursor over a string, consuming characters by class."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.at_end and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def take_one_of(self, chars: str) -> str:
        if not self.at_end and self.text[self.pos] in chars:
            self.pos += 1
            return self.text[self.pos - 1]
        return ""


def _is_digit(char: str) -> bool:
    return char in string.digits


def _is_label_separator(char: str) -> bool:
    return not char.isalnum()


def _is_length_separator(char: str) -> bool:
    return char in LENGTH_SEPARATORS or char.isspace()


def split_clue(clue: str) -> ClueParts:
    """Split a clue string into label, clue and length text.

    The label ends at the first period and the length group starts at the last
    opening parenthesis, so extra periods or parentheses land in the clue text.
    """

    text = clue.strip()
    dot = text.find(".")
    paren = text.rfind("(", dot + 1, len(text) - 1) if dot >= 0 else -1
    if paren < 0 or not text.endswith(")"):
        raise GrammarError(
            f"Clue '{clue}' does not match the required pattern '{CLUE_PATTERN}'"
        )
    return ClueParts(
        label_text=text[:dot],
        clue_text=text[dot + 1:paren],
        length_text=text[paren + 1:-1],
    )


def parse_label_text(label_text: str, clue: str = "") -> List[LabelSegment]:
    """Parse ``"9,3a,4d"`` style labels into segments; the first is the head.

    Only whitespace may precede the head. Every later segment needs a
    non-empty separator run before it.
    """

    def residual_error(start: int) -> GrammarError:
        return GrammarError(
            f"'{clue or label_text}' Error in <labelText> near <{label_text[start:]}>"
        )

    scanner = _Scanner(label_text)
    segments: List[LabelSegment] = []
    while True:
        start = scanner.pos
        separator = scanner.take_while(_is_label_separator if segments else str.isspace)
        if segments and not separator:
            raise residual_error(start)
        digits = scanner.take_while(_is_digit)
        if not digits:
            raise residual_error(start)
        suffix = scanner.take_one_of("".join(DIRECTION_SUFFIXES))
        segments.append(LabelSegment(number=int(digits), suffix=suffix))
        scanner.take_while(str.isspace)
        if scanner.at_end:
            return segments


def parse_length_text(length_text: str, clue: str = "") -> List[WordLength]:
    """Parse ``"5,3-4"`` style word lengths together with their terminators."""

    def residual_error(start: int) -> GrammarError:
        return GrammarError(
            f"'{clue or length_text}' Error in <lengthText> near <{length_text[start:]}>"
        )

    scanner = _Scanner(length_text)
    scanner.take_while(str.isspace)
    words: List[WordLength] = []
    while True:
        start = scanner.pos
        digits = scanner.take_while(_is_digit)
        if not digits or int(digits) == 0:
            raise residual_error(start)
        separator_start = scanner.pos
        run = scanner.take_while(_is_length_separator)
        terminator = "".join(char for char in run if not char.isspace())
        if scanner.at_end:
            # Only acronym periods may trail the final word.
            if terminator.strip("."):
                raise residual_error(separator_start)
            words.append(WordLength(length=int(digits), terminator=terminator))
            return words
        if not run:
            raise residual_error(separator_start)
        words.append(WordLength(length=int(digits), terminator=terminator or " "))


def parse_clue_text(clue_text: str) -> str:
    return clue_text.strip()


def parse_clue(clue: str) -> ParsedClue:
    """Run the full grammar over a clue string."""

    parts = split_clue(clue)
    return ParsedClue(
        parts=parts,
        label_segments=parse_label_text(parts.label_text, clue),
        clue_text=parse_clue_text(parts.clue_text),
        words=parse_length_text(parts.length_text, clue),
    )


__all__ = [
    "ClueParts",
    "LabelSegment",
    "ParsedClue",
    "WordLength",
    "parse_clue",
    "parse_clue_text",
    "parse_label_text",
    "parse_length_text",
    "split_clue",
]
