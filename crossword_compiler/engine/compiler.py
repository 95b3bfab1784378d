"""Crossword compilation orchestration.

Compilation runs in three phases over an already parsed definition:
  1. Clues: every clue spec is compiled on its own into a ClueModel.
  2. Grid: the clues are laid onto a fresh grid, across clues first.
  3. Links: multi-segment clues are chained head to tail.

Each call builds its model from scratch; a failing phase raises and no model
is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence

from ..core.constants import DOCUMENT_MIMETYPE, DOCUMENT_VERSION
from ..core.exceptions import SchemaError, StructuralError, ValidationError
from ..core.models import ClueModel, CrosswordModel
from ..utils.logger import get_logger
from .clue_compiler import compile_clue
from .grid import GridAssembler
from .linker import link_segments
from .validator import validate_model


LOGGER = get_logger(__name__)


@dataclass
class CompilerConfig:
    """Options for :func:`compile_crossword`."""

    render_markup: bool = True
    require_document: bool = False
    verify_model: bool = False


def _normalise(value: Any) -> str:
    return str(value).strip().lower()


def validate_document(definition: Mapping[str, Any], required: bool = False) -> None:
    """Check the optional ``document`` header naming the definition format."""

    document = definition.get("document")
    if document is None:
        if required:
            raise SchemaError("Missing 'document' element")
        return
    if not isinstance(document, Mapping):
        raise SchemaError("'document' must be a mapping")
    if not document.get("mimetype"):
        raise SchemaError("Missing 'document.mimetype' element")
    mimetype = _normalise(document["mimetype"])
    if mimetype != DOCUMENT_MIMETYPE:
        raise SchemaError(
            f"Unsupported 'document.mimetype' ({mimetype}) Expected: {DOCUMENT_MIMETYPE}"
        )
    if not document.get("version"):
        raise SchemaError("Missing 'document.version' element")
    version = _normalise(document["version"])
    if version != DOCUMENT_VERSION:
        raise SchemaError(
            f"Unsupported document version ({version}) Expected: {DOCUMENT_VERSION}"
        )


def _clue_specs(definition: Mapping[str, Any], key: str) -> Sequence[Any]:
    specs = definition.get(key)
    if specs is None:
        return []
    if isinstance(specs, (str, bytes)) or not isinstance(specs, Sequence):
        raise SchemaError(f"'{key}' must be a list of clues")
    return specs


def compile_crossword(
    definition: Optional[Mapping[str, Any]],
    config: Optional[CompilerConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> CrosswordModel:
    """Compile a crossword definition into a :class:`CrosswordModel`.

    ``definition`` is the parsed document: ``width``, ``height``,
    ``acrossClues`` and ``downClues``, optionally with a ``document`` header.
    """

    config = config or CompilerConfig()
    log = logger or LOGGER

    if definition is None:
        raise StructuralError("The crossword must be initialised with a crossword definition.")
    if not isinstance(definition, Mapping):
        raise StructuralError("The crossword definition must be a mapping.")

    validate_document(definition, required=config.require_document)
    # Bounds are checked before any clue is compiled.
    assembler = GridAssembler(definition.get("width"), definition.get("height"), logger=log)

    across_clues: List[ClueModel] = [
        compile_clue(spec, True, render=config.render_markup, logger=log)
        for spec in _clue_specs(definition, "acrossClues")
    ]
    down_clues: List[ClueModel] = [
        compile_clue(spec, False, render=config.render_markup, logger=log)
        for spec in _clue_specs(definition, "downClues")
    ]

    model = assembler.assemble(across_clues, down_clues)
    link_segments(model, logger=log)

    if config.verify_model:
        result = validate_model(model, logger=log)
        if not result.ok:
            raise ValidationError(f"Crossword validation failed: {result.messages}")

    log.info(
        "Compiled %sx%s crossword: %s across, %s down, %s light cells",
        model.width,
        model.height,
        len(model.across_clues),
        len(model.down_clues),
        len(model.light_cells),
    )
    return model


__all__ = ["CompilerConfig", "compile_crossword", "validate_document"]
