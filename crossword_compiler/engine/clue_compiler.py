"""Compile clue specifications into self-contained clue models."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..core.exceptions import LengthMismatchError, SchemaError
from ..core.models import ClueModel, TailDescriptor
from ..text.grammar import parse_clue
from ..text.markup import render_markup
from ..text.normalization import (
    blank_buffer,
    normalize_answer,
    normalize_revealed,
    normalize_solution,
)
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

REQUIRED_FIELDS: Dict[str, type] = {"x": int, "y": int, "clue": str}
OPTIONAL_FIELDS: Tuple[str, ...] = ("answer", "solution", "revealed")

_TYPE_NAMES = {int: "an int", str: "a str"}


def _has_type(value: Any, expected: type) -> bool:
    # bool is an int subclass but never a coordinate.
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


def validate_clue_spec(clue_spec: Any, is_across: Any) -> None:
    """Check the arguments of :func:`compile_clue`, raising :class:`SchemaError`."""

    if clue_spec is None:
        raise SchemaError("'clue_spec' is required")
    if is_across is None:
        raise SchemaError("'is_across' is required")
    if not isinstance(is_across, bool):
        raise SchemaError("'is_across' must be a boolean (True, False)")
    if not isinstance(clue_spec, Mapping):
        raise SchemaError(f"'clue_spec' must be a mapping, not {type(clue_spec).__name__}")

    for key in REQUIRED_FIELDS:
        if key not in clue_spec:
            raise SchemaError(f"'clue_spec.{key}' is missing")

    for key, expected in REQUIRED_FIELDS.items():
        value = clue_spec[key]
        if not _has_type(value, expected):
            raise SchemaError(f"'clue_spec.{key} ({value!r})' must be {_TYPE_NAMES[expected]}")

    for key in OPTIONAL_FIELDS:
        if key in clue_spec and not isinstance(clue_spec[key], str):
            raise SchemaError(f"'clue_spec.{key} ({clue_spec[key]!r})' must be a str")

    unexpected = [
        str(key) for key in clue_spec if key not in REQUIRED_FIELDS and key not in OPTIONAL_FIELDS
    ]
    if unexpected:
        raise SchemaError(f"'clue_spec' has unexpected properties <{','.join(unexpected)}>")


def compile_clue(
    clue_spec: Optional[Mapping[str, Any]] = None,
    is_across: Optional[bool] = None,
    *,
    render: bool = True,
    logger: Optional[logging.Logger] = None,
) -> ClueModel:
    """Compile one clue spec into a :class:`ClueModel` with no grid placement.

    ``clue_spec`` holds 1-based ``x``/``y``, the ``clue`` string and the
    optional ``answer``, ``solution`` and ``revealed`` strings.
    """

    log = logger or LOGGER
    validate_clue_spec(clue_spec, is_across)

    clue = clue_spec["clue"]
    parsed = parse_clue(clue)

    head, *tails = parsed.label_segments
    clue_id = head.text if head.suffix else f"{head.number}{'a' if is_across else 'd'}"
    tail_descriptors = [
        TailDescriptor(head_number=segment.number, direction=segment.direction)
        for segment in tails
    ]

    word_lengths: List[int] = [word.length for word in parsed.words]
    segment_length = sum(word_lengths)
    length_text = f"({parsed.parts.length_text.strip()})"

    solution = normalize_solution(clue_spec.get("solution"))
    if solution and len(solution) != segment_length:
        raise LengthMismatchError(
            f"Length of clue solution '{solution}' does not match the answer length '{length_text}'"
        )

    revealed = normalize_revealed(clue_spec.get("revealed"))
    if revealed and len(revealed) != segment_length:
        raise LengthMismatchError(
            f"Length of clue revealed characters '{revealed}' does not match "
            f"the answer length '{length_text}'"
        )

    model = ClueModel(
        head_number=head.number,
        label_text=str(head.number),
        clue_id=clue_id,
        clue_text=render_markup(parsed.clue_text) if render else parsed.clue_text,
        word_lengths=word_lengths,
        word_terminators=[word.terminator for word in parsed.words],
        segment_length=segment_length,
        tail_descriptors=tail_descriptors,
        answer=normalize_answer(clue_spec.get("answer"), segment_length),
        solution=solution or blank_buffer(segment_length),
        revealed=revealed or blank_buffer(segment_length),
        x=clue_spec["x"] - 1,
        y=clue_spec["y"] - 1,
        is_across=is_across,
    )
    log.debug("Compiled clue %s %s (%s letters)", model.clue_id, length_text, segment_length)
    return model


__all__ = ["compile_clue", "validate_clue_spec", "REQUIRED_FIELDS", "OPTIONAL_FIELDS"]
