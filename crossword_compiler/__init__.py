"""Crossword definition compiler.

This package turns an already parsed crossword definition into an in-memory
model. The public API surface is:

- ``crossword_compiler.engine.compiler.compile_crossword``: compiles a whole
  definition (clues, grid, multi-segment links).
- ``crossword_compiler.engine.clue_compiler.compile_clue``: compiles a single
  clue spec.
- ``crossword_compiler.engine.validator.validate_model``: checks the model
  invariants of a compiled crossword.
- ``crossword_compiler.text.markup.render_markup``: clue text emphasis markup.
"""

from .core.constants import Direction
from .core.exceptions import (
    BoundsError,
    CoherenceError,
    CrosswordError,
    GrammarError,
    LengthMismatchError,
    SchemaError,
    StructuralError,
    UnresolvedSegmentError,
    ValidationError,
)
from .core.models import Cell, ClueModel, CrosswordModel, TailDescriptor
from .engine.clue_compiler import compile_clue
from .engine.compiler import CompilerConfig, compile_crossword
from .engine.grid import assemble_grid
from .engine.linker import link_segments
from .engine.validator import ValidationResult, validate_model
from .text.markup import render_markup

__all__ = [
    "BoundsError",
    "Cell",
    "ClueModel",
    "CoherenceError",
    "CompilerConfig",
    "CrosswordError",
    "CrosswordModel",
    "Direction",
    "GrammarError",
    "LengthMismatchError",
    "SchemaError",
    "StructuralError",
    "TailDescriptor",
    "UnresolvedSegmentError",
    "ValidationError",
    "ValidationResult",
    "assemble_grid",
    "compile_clue",
    "compile_crossword",
    "link_segments",
    "render_markup",
    "validate_model",
]

__version__ = "0.1.0"
