"""Data models produced by the crossword compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import BLANK, Direction


@dataclass(frozen=True)
class TailDescriptor:
    """Reference from a head clue to one of its sibling segments."""

    head_number: int
    direction: Direction = Direction.UNKNOWN


@dataclass
class ClueModel:
    """A compiled clue segment.

    Chain links (``tail_segments``, ``previous_clue_segment``,
    ``next_clue_segment``, ``head_segment``, ``flat_cells``) are filled in by
    the segment linker and refer to sibling clues of the same model, so they
    take no part in ``repr`` or equality.
    """

    head_number: int
    label_text: str
    clue_id: str
    clue_text: str
    word_lengths: List[int]
    word_terminators: List[str]
    segment_length: int
    tail_descriptors: List[TailDescriptor]
    answer: str
    solution: str
    revealed: str
    x: int
    y: int
    is_across: bool
    cells: List[Cell] = field(default_factory=list, repr=False)
    length_text: str = ""
    chain_label_text: str = ""
    tail_segments: List[ClueModel] = field(default_factory=list, repr=False, compare=False)
    previous_clue_segment: Optional[ClueModel] = field(default=None, repr=False, compare=False)
    next_clue_segment: Optional[ClueModel] = field(default=None, repr=False, compare=False)
    head_segment: Optional[ClueModel] = field(default=None, repr=False, compare=False)
    flat_cells: Optional[List[Cell]] = field(default=None, repr=False, compare=False)

    @property
    def direction(self) -> Direction:
        return Direction.ACROSS if self.is_across else Direction.DOWN

    @property
    def is_head_segment(self) -> bool:
        return self.head_segment is self

    def __str__(self) -> str:
        return self.clue_id


@dataclass
class Cell:
    """A single grid cell. Dark cells keep every optional field unset."""

    x: int
    y: int
    light: bool = False
    across_clue: Optional[ClueModel] = field(default=None, repr=False, compare=False)
    down_clue: Optional[ClueModel] = field(default=None, repr=False, compare=False)
    across_clue_letter_index: Optional[int] = None
    down_clue_letter_index: Optional[int] = None
    across_terminator: Optional[str] = None
    down_terminator: Optional[str] = None
    answer: str = BLANK
    solution: str = BLANK
    label_text: Optional[str] = None
    model: Optional[CrosswordModel] = field(default=None, repr=False, compare=False)

    def clue(self, direction: Direction) -> Optional[ClueModel]:
        if direction == Direction.ACROSS:
            return self.across_clue
        if direction == Direction.DOWN:
            return self.down_clue
        return None

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass
class CrosswordModel:
    """The compiled crossword: grid cells indexed ``cells[x][y]`` plus clues."""

    width: int
    height: int
    cells: List[List[Cell]] = field(default_factory=list, repr=False)
    across_clues: List[ClueModel] = field(default_factory=list)
    down_clues: List[ClueModel] = field(default_factory=list)
    light_cells: List[Cell] = field(default_factory=list, repr=False, compare=False)
    across_head_segments: List[ClueModel] = field(default_factory=list, repr=False, compare=False)
    down_head_segments: List[ClueModel] = field(default_factory=list, repr=False, compare=False)

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[x][y]

    @property
    def clues(self) -> List[ClueModel]:
        return [*self.across_clues, *self.down_clues]

    def clues_for(self, direction: Direction) -> List[ClueModel]:
        if direction == Direction.ACROSS:
            return self.across_clues
        if direction == Direction.DOWN:
            return self.down_clues
        return self.clues

    def head_segments(self, direction: Direction) -> List[ClueModel]:
        if direction == Direction.ACROSS:
            return self.across_head_segments
        if direction == Direction.DOWN:
            return self.down_head_segments
        return [*self.across_head_segments, *self.down_head_segments]
