"""Integrity checks over a compiled crossword model."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..core.constants import Direction
from ..core.exceptions import ValidationError
from ..core.models import ClueModel, CrosswordModel
from ..text.normalization import is_blank
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class ModelValidator:
    """Runs deterministic invariant checks over a compiled model."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.log = logger or LOGGER

    def validate(self, model: CrosswordModel) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_cell_count(model)
            self._check_light_cells_referenced(model)
            self._check_buffer_lengths(model)
            self._check_shared_letters(model)
            self._check_labels(model)
            self._check_chains(model)
        except ValidationError as exc:
            messages.append(str(exc))
            self.log.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_cell_count(self, model: CrosswordModel) -> None:
        if len(model.cells) != model.width or any(
            len(column) != model.height for column in model.cells
        ):
            raise ValidationError(
                f"Grid does not hold {model.width}x{model.height} cells"
            )

    def _check_light_cells_referenced(self, model: CrosswordModel) -> None:
        for column in model.cells:
            for cell in column:
                if cell.light and cell.across_clue is None and cell.down_clue is None:
                    raise ValidationError(f"Light cell at ({cell.x},{cell.y}) has no clue")

    def _check_buffer_lengths(self, model: CrosswordModel) -> None:
        for clue in model.clues:
            for prop in ("answer", "solution", "revealed"):
                if len(getattr(clue, prop)) != clue.segment_length:
                    raise ValidationError(
                        f"Clue {clue.clue_id} {prop} does not hold {clue.segment_length} letters"
                    )

    def _check_shared_letters(self, model: CrosswordModel) -> None:
        for cell in model.light_cells:
            across, down = cell.across_clue, cell.down_clue
            if across is None or down is None:
                continue
            for prop in ("answer", "solution"):
                a = getattr(across, prop)[cell.across_clue_letter_index]
                d = getattr(down, prop)[cell.down_clue_letter_index]
                if not is_blank(a) and not is_blank(d) and a != d:
                    raise ValidationError(
                        f"Clues {across.clue_id} and {down.clue_id} disagree on {prop} "
                        f"at ({cell.x + 1},{cell.y + 1})"
                    )

    def _check_labels(self, model: CrosswordModel) -> None:
        for clue in model.clues:
            if clue.cells and clue.cells[0].label_text != clue.label_text:
                raise ValidationError(f"Clue {clue.clue_id} start cell carries a different label")

    def _check_chains(self, model: CrosswordModel) -> None:
        for clue in model.clues:
            head = clue.head_segment
            if head is None:
                raise ValidationError(f"Clue {clue.clue_id} has no head segment")
            chain = self._walk_chain(head)
            if not any(segment is clue for segment in chain):
                raise ValidationError(f"Clue {clue.clue_id} is not reachable from {head.clue_id}")
            for segment in chain:
                if segment.head_segment is not head:
                    raise ValidationError(
                        f"Clue {segment.clue_id} does not share the head {head.clue_id}"
                    )
        for direction in (Direction.ACROSS, Direction.DOWN):
            expected = [clue for clue in model.clues_for(direction) if clue.is_head_segment]
            listed = model.head_segments(direction)
            if len(listed) != len(expected) or any(a is not b for a, b in zip(listed, expected)):
                raise ValidationError(
                    f"{direction.value.capitalize()} head segments do not match the linked chains"
                )

    @staticmethod
    def _walk_chain(head: ClueModel) -> List[ClueModel]:
        chain: List[ClueModel] = []
        seen = set()
        segment: Optional[ClueModel] = head
        previous: Optional[ClueModel] = None
        while segment is not None:
            if id(segment) in seen:
                raise ValidationError(f"Clue chain starting at {head.clue_id} is cyclic")
            if segment.previous_clue_segment is not previous:
                raise ValidationError(f"Clue {segment.clue_id} has a broken previous link")
            seen.add(id(segment))
            chain.append(segment)
            previous, segment = segment, segment.next_clue_segment
        return chain


def validate_model(
    model: CrosswordModel, *, logger: Optional[logging.Logger] = None
) -> ValidationResult:
    return ModelValidator(logger=logger).validate(model)


__all__ = ["ModelValidator", "ValidationResult", "validate_model"]
