"""Grid allocation and clue placement."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from ..core.constants import Bounds, Direction
from ..core.exceptions import BoundsError, CoherenceError, StructuralError
from ..core.models import Cell, ClueModel, CrosswordModel
from ..text.normalization import is_blank, set_letter
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def _valid_dimension(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def interior_word_index(letter_index: int, word_lengths: Sequence[int]) -> Optional[int]:
    """Return the index of the word whose last letter is ``letter_index``.

    Only interior words count: the final word of an answer has no separator.
    """

    if letter_index < 0:
        return None
    remaining = letter_index
    for index, length in enumerate(word_lengths):
        if remaining < length:
            if remaining == length - 1 and index != len(word_lengths) - 1:
                return index
            return None
        remaining -= length
    return None


def is_word_separator_index(letter_index: int, word_lengths: Sequence[int]) -> bool:
    return interior_word_index(letter_index, word_lengths) is not None


class GridAssembler:
    """Allocates the cell grid and lays compiled clues onto it."""

    def __init__(self, width: int, height: int, logger: Optional[logging.Logger] = None) -> None:
        if not (_valid_dimension(width) and _valid_dimension(height)):
            raise StructuralError("The crossword bounds are invalid.")
        self.bounds = Bounds(width=width, height=height)
        self.log = logger or LOGGER
        self.model = CrosswordModel(width=width, height=height)
        self.model.cells = [
            [Cell(x=x, y=y, model=self.model) for y in range(height)] for x in range(width)
        ]

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def assemble(
        self, across_clues: Iterable[ClueModel], down_clues: Iterable[ClueModel]
    ) -> CrosswordModel:
        for clue in across_clues:
            self.place_clue(clue, is_across=True)
        for clue in down_clues:
            self.place_clue(clue, is_across=False)
        self.model.light_cells = [
            cell for column in self.model.cells for cell in column if cell.light
        ]
        self.log.debug(
            "Assembled %sx%s grid with %s light cells",
            self.bounds.width,
            self.bounds.height,
            len(self.model.light_cells),
        )
        return self.model

    # ------------------------------------------------------------------
    # Clue placement
    # ------------------------------------------------------------------
    def place_clue(self, clue: ClueModel, is_across: bool) -> None:
        self._check_bounds(clue, is_across)
        (self.model.across_clues if is_across else self.model.down_clues).append(clue)

        dx, dy = (1, 0) if is_across else (0, 1)
        direction, crossing = (
            (Direction.ACROSS, Direction.DOWN) if is_across else (Direction.DOWN, Direction.ACROSS)
        )
        for letter_index in range(clue.segment_length):
            cell = self.model.cells[clue.x + dx * letter_index][clue.y + dy * letter_index]
            # An overlapping clue of the same direction wrote first, if there is one.
            previous = cell.clue(direction) or cell.clue(crossing)
            self._attach(cell, clue, letter_index, is_across)
            if self._write_letter(cell, clue, letter_index, "answer", previous):
                self._propagate_answer(cell, crossing)
            elif not is_blank(cell.answer):
                clue.answer = set_letter(clue.answer, letter_index, cell.answer)
            self._write_letter(cell, clue, letter_index, "solution", previous)
            if letter_index == 0:
                self._set_label(cell, clue, previous)

        self.log.debug(
            "Placed clue %s at (%s,%s) over %s cells", clue.clue_id, clue.x, clue.y, clue.segment_length
        )

    def _check_bounds(self, clue: ClueModel, is_across: bool) -> None:
        if not self.bounds.contains(clue.x, clue.y):
            raise BoundsError(f"Clue {clue.clue_id} doesn't start in the bounds.")
        if is_across:
            if clue.x + clue.segment_length > self.bounds.width:
                raise BoundsError(f"Clue {clue.clue_id} exceeds horizontal bounds.")
        elif clue.y + clue.segment_length > self.bounds.height:
            raise BoundsError(f"Clue {clue.clue_id} exceeds vertical bounds.")

    # ------------------------------------------------------------------
    # Cell manipulation
    # ------------------------------------------------------------------
    @staticmethod
    def _attach(cell: Cell, clue: ClueModel, letter_index: int, is_across: bool) -> None:
        cell.light = True
        word_index = interior_word_index(letter_index, clue.word_lengths)
        terminator = (clue.word_terminators[word_index] or " ") if word_index is not None else None
        if is_across:
            cell.across_clue = clue
            cell.across_clue_letter_index = letter_index
            if terminator:
                cell.across_terminator = terminator
        else:
            cell.down_clue = clue
            cell.down_clue_letter_index = letter_index
            if terminator:
                cell.down_terminator = terminator
        clue.cells.append(cell)

    @staticmethod
    def _write_letter(
        cell: Cell,
        clue: ClueModel,
        letter_index: int,
        prop: str,
        previous: Optional[ClueModel],
    ) -> bool:
        """Write the clue's ``answer``/``solution`` letter into the cell.

        Blank letters never overwrite. Returns whether a letter was written.
        """

        letter = getattr(clue, prop)[letter_index]
        if is_blank(letter):
            return False
        existing = getattr(cell, prop)
        if not is_blank(existing) and existing != letter:
            previous_id = previous.clue_id if previous else "?"
            previous_value = getattr(previous, prop) if previous else ""
            raise CoherenceError(
                f"Clue {clue.clue_id} {prop} at ({cell.x + 1},{cell.y + 1}) "
                f"[{getattr(clue, prop)}[{letter_index + 1}],{letter}] is not coherent "
                f"with previous clue ({previous_id}) {prop} [{previous_value},{existing}]."
            )
        setattr(cell, prop, letter)
        return True

    @staticmethod
    def _propagate_answer(cell: Cell, crossing: Direction) -> None:
        clue = cell.clue(crossing)
        index = (
            cell.across_clue_letter_index
            if crossing == Direction.ACROSS
            else cell.down_clue_letter_index
        )
        if clue is not None and index is not None:
            clue.answer = set_letter(clue.answer, index, cell.answer)

    @staticmethod
    def _set_label(cell: Cell, clue: ClueModel, previous: Optional[ClueModel]) -> None:
        if cell.label_text is not None and cell.label_text != clue.label_text:
            other = previous.clue_id if previous else "?"
            raise CoherenceError(
                f"Clue {clue.clue_id} has a label which is inconsistent with another clue ({other})."
            )
        cell.label_text = clue.label_text


def assemble_grid(
    width: int,
    height: int,
    across_clues: List[ClueModel],
    down_clues: List[ClueModel],
    *,
    logger: Optional[logging.Logger] = None,
) -> CrosswordModel:
    """Allocate a ``width`` x ``height`` grid and place every clue on it."""

    return GridAssembler(width, height, logger=logger).assemble(across_clues, down_clues)


__all__ = ["GridAssembler", "assemble_grid", "interior_word_index", "is_word_separator_index"]
