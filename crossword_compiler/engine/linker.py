"""Linking of multi-segment (non-linear) clues.

A multi-segment clue has one answer split over several clue segments that sit
apart on the grid, for example ``"4,21. Grand old man (9,3,5)"`` whose answer
continues in 21 across. The head segment lists its tails in its label; this
module resolves those references once every clue has been placed.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.exceptions import UnresolvedSegmentError
from ..core.models import Cell, ClueModel, CrosswordModel, TailDescriptor
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def format_length_text(word_lengths: List[int]) -> str:
    return f"({','.join(str(length) for length in word_lengths)})"


def resolve_tail(model: CrosswordModel, descriptor: TailDescriptor) -> Optional[ClueModel]:
    """Find the clue a tail descriptor refers to; unknown directions prefer across."""

    candidates = model.clues_for(descriptor.direction)
    return next((clue for clue in candidates if clue.head_number == descriptor.head_number), None)


def _dedupe_cells(segments: List[ClueModel]) -> List[Cell]:
    seen = set()
    cells: List[Cell] = []
    for segment in segments:
        for cell in segment.cells:
            if id(cell) not in seen:
                seen.add(id(cell))
                cells.append(cell)
    return cells


def _reset_segment(clue: ClueModel) -> None:
    clue.head_segment = clue
    clue.tail_segments = []
    clue.previous_clue_segment = None
    clue.next_clue_segment = None
    clue.flat_cells = list(clue.cells)
    clue.length_text = format_length_text(clue.word_lengths)
    clue.chain_label_text = clue.label_text


def _link_chain(model: CrosswordModel, head: ClueModel, log: logging.Logger) -> None:
    chain = [head]
    for descriptor in head.tail_descriptors:
        segment = resolve_tail(model, descriptor)
        if segment is None:
            raise UnresolvedSegmentError(
                f"Clue {head.clue_id} refers to segment {descriptor.head_number} "
                f"({descriptor.direction.value}) which is not in the crossword."
            )
        if (
            any(segment is linked for linked in chain)
            or segment.head_segment is not segment
            or segment.tail_segments
        ):
            raise UnresolvedSegmentError(
                f"Clue {head.clue_id} refers to segment {segment.clue_id} which is already linked."
            )
        chain.append(segment)

    for index, segment in enumerate(chain):
        segment.head_segment = head
        if index > 0:
            segment.previous_clue_segment = chain[index - 1]
        if index < len(chain) - 1:
            segment.next_clue_segment = chain[index + 1]

    tails = chain[1:]
    head.tail_segments = tails
    head.flat_cells = _dedupe_cells(chain)
    head.length_text = format_length_text(
        [length for segment in chain for length in segment.word_lengths]
    )
    head.chain_label_text = ",".join(segment.label_text for segment in chain)
    for tail in tails:
        tail.length_text = ""
        tail.flat_cells = None

    log.debug(
        "Linked clue %s to segments %s",
        head.clue_id,
        ", ".join(tail.clue_id for tail in tails),
    )


def link_segments(model: CrosswordModel, *, logger: Optional[logging.Logger] = None) -> None:
    """Resolve tail descriptors into head/tail chains across the whole model."""

    log = logger or LOGGER
    clues = model.clues
    for clue in clues:
        _reset_segment(clue)
    for clue in clues:
        if clue.tail_descriptors:
            # A tail that claims tails of its own would break the single chain.
            if clue.head_segment is not clue:
                raise UnresolvedSegmentError(
                    f"Clue {clue.clue_id} is a tail of {clue.head_segment} and cannot have tails."
                )
            _link_chain(model, clue, log)

    model.across_head_segments = [clue for clue in model.across_clues if clue.is_head_segment]
    model.down_head_segments = [clue for clue in model.down_clues if clue.is_head_segment]


__all__ = ["link_segments", "resolve_tail", "format_length_text"]
