"""Exception types raised by the engine for malformed input and impossible generation."""

# errors.py
# Gameplay outcomes (conflicts, "no hint", failed solves) are returned as
# values. Only these conditions raise.


class SudokuError(Exception):
    """Base class for every error the engine raises."""


class InvalidGridError(SudokuError, ValueError):
    """Grid is not 9x9 or holds something other than 0..9 / None."""


class InvalidCellError(SudokuError, ValueError):
    """Row or column outside 0..8."""


class InvalidValueError(SudokuError, ValueError):
    """Digit outside 1..9, or an unknown enum name (difficulty, level)."""


class GivenCellError(SudokuError):
    """Attempt to modify a given (pre-filled) cell of a puzzle."""


class GenerationError(SudokuError, RuntimeError):
    """The generator could not produce a solved grid within its budget."""


class UnsolvableGridError(SudokuError, RuntimeError):
    """An imported grid has no completion (duplicate givens or dead end)."""
