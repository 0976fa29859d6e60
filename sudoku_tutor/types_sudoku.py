# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cell = tuple[int, int]
"""(row, col), both 0-based."""

Candidates = list[list[set[int]]]
"""9x9 candidate sets; filled cells hold an empty set."""

CandidateKeys = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a sorted list of candidate digits (1..9)."""

EMPTY = 0
DIGITS = range(1, 10)


class UnitType(str, Enum):
    ROW = "row"
    COL = "col"
    BOX = "box"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class Conflict:
    """A placed digit clashes with `cell`, a peer holding the same value."""

    unit: UnitType
    value: int
    cell: Cell
    row: int
    col: int

    @property
    def key(self) -> str:
        return f"conflict_{self.unit.value}"

    def params(self) -> dict[str, Any]:
        p: dict[str, Any] = {"val": self.value}
        if self.unit is UnitType.ROW:
            p["row"] = self.row + 1
        elif self.unit is UnitType.COL:
            p["col"] = self.col + 1
        return p

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "params": self.params(),
            "conflictingCell": {"row": self.cell[0], "col": self.cell[1]},
        }


@dataclass(frozen=True)
class Duplicate:
    """A unit that holds `value` more than once."""

    unit: UnitType
    index: int
    value: int
    cells: tuple[Cell, ...]


@dataclass(frozen=True)
class CompletionUnit:
    unit: UnitType
    index: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.unit.value, "index": self.index}


@dataclass(frozen=True)
class Puzzle:
    """A generated puzzle and the completion it was carved from."""

    puzzle: Grid
    solution: Grid
    difficulty: Difficulty

    @property
    def clues(self) -> int:
        return sum(1 for row in self.puzzle for v in row if v != EMPTY)
