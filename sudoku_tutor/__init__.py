"""Sudoku tutoring engine: generation, constraint checks, candidates, technique hints and completion detection."""

from .candidates import all_candidates, candidates_for, merge_candidates
from .completion import is_solved, units_completed_by
from .config import EngineConfig, load_config
from .constraints import find_conflict, find_duplicates, is_valid_move, sanity_check
from .errors import (
    GenerationError,
    GivenCellError,
    InvalidCellError,
    InvalidGridError,
    InvalidValueError,
    SudokuError,
    UnsolvableGridError,
)
from .generator import count_solutions, generate, solve, solve_existing
from .hint_types import TECHNIQUES, Hint, HintKind, NoHint, TechniqueId, TechniqueLevel
from .hints import find_hint, get_hint
from .session import GameSession, MoveResult
from .solver_core import format_grid, parse_grid
from .types_sudoku import CompletionUnit, Conflict, Difficulty, Grid, Puzzle, UnitType

__all__ = [
    "CompletionUnit",
    "Conflict",
    "Difficulty",
    "EngineConfig",
    "GameSession",
    "GenerationError",
    "GivenCellError",
    "Grid",
    "Hint",
    "HintKind",
    "InvalidCellError",
    "InvalidGridError",
    "InvalidValueError",
    "MoveResult",
    "NoHint",
    "Puzzle",
    "SudokuError",
    "TECHNIQUES",
    "TechniqueId",
    "TechniqueLevel",
    "UnitType",
    "UnsolvableGridError",
    "all_candidates",
    "candidates_for",
    "count_solutions",
    "find_conflict",
    "find_duplicates",
    "find_hint",
    "format_grid",
    "generate",
    "get_hint",
    "is_solved",
    "is_valid_move",
    "load_config",
    "merge_candidates",
    "parse_grid",
    "sanity_check",
    "solve",
    "solve_existing",
    "units_completed_by",
]
