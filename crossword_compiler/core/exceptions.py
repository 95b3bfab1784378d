"""Custom exception hierarchy for crossword compilation."""


class CrosswordError(Exception):
    """Base exception for compiler failures."""


class StructuralError(CrosswordError):
    """Raised when the grid bounds of a definition are missing or invalid."""


class SchemaError(CrosswordError):
    """Raised when a definition or clue spec has missing, mistyped or unexpected fields."""


class GrammarError(CrosswordError):
    """Raised when a clue string does not follow the clue grammar."""


class BoundsError(CrosswordError):
    """Raised when a clue starts or extends outside the grid."""


class CoherenceError(CrosswordError):
    """Raised when intersecting clues disagree on a letter or label."""


class LengthMismatchError(CrosswordError):
    """Raised when a solution or revealed string disagrees with the clue length."""


class UnresolvedSegmentError(CrosswordError, AssertionError):
    """Raised when a multi-segment clue references a segment that cannot be linked."""


class ValidationError(CrosswordError):
    """Raised when the compiled model integrity checks fail."""
