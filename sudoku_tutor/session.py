"""A single-player game: givens, the player's board and notes, mistakes, undo history, and hints."""

# session.py
# The session owns its grids; callers get copies. A move that disagrees with
# the reference solution is counted as a mistake and leaves the board as is.
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any

from .completion import empty_count, is_solved, units_completed_by
from .config import EngineConfig
from .constraints import scan_conflict
from .errors import GivenCellError, UnsolvableGridError
from .generator import generate, parse_difficulty, solve_existing
from .hint_types import Hint, NoHint
from .hints import get_hint
from .solver_core import clone_grid, normalize_grid, validate_cell, validate_digit
from .types_sudoku import EMPTY, CompletionUnit, Conflict, Difficulty, Grid

logger = logging.getLogger(__name__)

Notes = list[list[set[int]]]


def _empty_notes() -> Notes:
    return [[set() for _ in range(9)] for _ in range(9)]


def _copy_notes(notes: Notes) -> Notes:
    return [[set(s) for s in row] for row in notes]


@dataclass
class MoveResult:
    accepted: bool
    conflict: Conflict | None = None
    completed: list[CompletionUnit] = field(default_factory=list)
    solved: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "accepted": self.accepted,
            "conflict": self.conflict.to_dict() if self.conflict else None,
            "completed": [u.to_dict() for u in self.completed],
            "solved": self.solved,
        }


class GameSession:
    """Holds one puzzle in play. Single writer: not safe for concurrent edits."""

    def __init__(self, initial: Grid, solution: Grid, difficulty: Difficulty | None = None):
        self.initial = normalize_grid(initial)
        self.solution = normalize_grid(solution)
        self.difficulty = difficulty
        self.board = clone_grid(self.initial)
        self.notes: Notes = _empty_notes()
        self.mistakes = 0
        self.hints_used = 0
        self._history: list[tuple[Grid, Notes]] = []

    @classmethod
    def new(
        cls,
        difficulty: Difficulty | str = Difficulty.EASY,
        rng: random.Random | None = None,
        config: EngineConfig | None = None,
    ) -> "GameSession":
        level = parse_difficulty(difficulty)
        puzzle = generate(level, rng=rng, config=config)
        return cls(puzzle.puzzle, puzzle.solution, level)

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        rng: random.Random | None = None,
        budget: int | None = None,
        config: EngineConfig | None = None,
    ) -> "GameSession":
        """Start a session from an imported (e.g. scanned) grid.

        The reference solution search is bounded by `budget`, or by the
        config's solve budget when omitted.
        """
        initial = normalize_grid(grid)
        solution = solve_existing(initial, rng=rng, budget=budget, config=config)
        if solution is None:
            raise UnsolvableGridError("imported grid has no valid completion")
        return cls(initial, solution)

    # ------------------------------------------------------------------ state

    def is_given(self, row: int, col: int) -> bool:
        return self.initial[row][col] != EMPTY

    @property
    def solved(self) -> bool:
        return is_solved(self.board)

    def _snapshot(self) -> None:
        self._history.append((clone_grid(self.board), _copy_notes(self.notes)))

    def _check_editable(self, row: int, col: int) -> None:
        validate_cell(row, col)
        if self.is_given(row, col):
            raise GivenCellError(f"cell ({row}, {col}) is a given")

    # ------------------------------------------------------------------ moves

    def place(self, row: int, col: int, value: int) -> MoveResult:
        """Enter `value` at (row, col).

        A digit that disagrees with the reference solution is a mistake: the
        board is unchanged, `mistakes` goes up and the first clashing peer,
        if any, is reported. A correct digit is written and clears the
        cell's notes.
        """
        self._check_editable(row, col)
        validate_digit(value)
        if self.solution[row][col] != value:
            self.mistakes += 1
            conflict = scan_conflict(self.board, row, col, value)
            logger.debug("mistake at (%d, %d): %d, conflict=%s", row, col, value, conflict)
            return MoveResult(accepted=False, conflict=conflict)

        self._snapshot()
        self.board[row][col] = value
        self.notes[row][col] = set()
        completed = units_completed_by(self.board, row, col)
        solved = is_solved(self.board)
        if solved:
            logger.info("puzzle solved with %d mistake(s), %d hint(s)", self.mistakes, self.hints_used)
        return MoveResult(accepted=True, completed=completed, solved=solved)

    def erase(self, row: int, col: int) -> bool:
        """Clear a cell's digit and notes.

        A placed digit that still fits (no clashing peer) is kept, so only
        notes, or a digit that now clashes, can be erased.
        """
        self._check_editable(row, col)
        value = self.board[row][col]
        if value == EMPTY and not self.notes[row][col]:
            return False
        if value != EMPTY and scan_conflict(self.board, row, col, value) is None:
            return False
        self._snapshot()
        self.board[row][col] = EMPTY
        self.notes[row][col] = set()
        return True

    def toggle_note(self, row: int, col: int, value: int) -> bool:
        """Add or remove a pencil mark; only empty cells take notes."""
        self._check_editable(row, col)
        validate_digit(value)
        if self.board[row][col] != EMPTY:
            return False
        self._snapshot()
        self.notes[row][col] ^= {value}
        return True

    def undo(self) -> bool:
        if not self._history:
            return False
        self.board, self.notes = self._history.pop()
        return True

    def hint(self, use_notes: bool = True, max_level=None) -> Hint:
        """Ask the hint engine about the current board; counts as a used hint."""
        if self.solved:
            return NoHint()
        self.hints_used += 1
        notes = self.notes if use_notes else None
        return get_hint(self.board, notes, max_level=max_level)

    def to_dict(self) -> dict[str, Any]:
        return {
            "initial": clone_grid(self.initial),
            "board": clone_grid(self.board),
            "notes": [[sorted(s) for s in row] for row in self.notes],
            "difficulty": self.difficulty.value if self.difficulty else None,
            "mistakes": self.mistakes,
            "hints_used": self.hints_used,
            "remaining": empty_count(self.board),
            "solved": self.solved,
        }
