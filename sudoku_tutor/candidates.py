"""Pencil-mark computation: candidate sets per empty cell, merging with player notes, and payload conversions."""

# candidates.py
# Candidates are a pure function of the grid and are recomputed on every call.
from __future__ import annotations

from collections.abc import Iterable, Mapping

from .constraints import scan_conflict
from .errors import InvalidGridError
from .solver_core import key_to_rc, normalize_grid, rc_to_key, validate_cell, validate_digit
from .types_sudoku import DIGITS, EMPTY, CandidateKeys, Candidates, Cell, Grid


def _candidates(grid: Grid, row: int, col: int) -> set[int]:
    if grid[row][col] != EMPTY:
        return set()
    return {d for d in DIGITS if scan_conflict(grid, row, col, d) is None}


def _all_candidates(grid: Grid) -> Candidates:
    return [[_candidates(grid, r, c) for c in range(9)] for r in range(9)]


def candidates_for(grid: Grid, row: int, col: int) -> set[int]:
    """Digits that can go at (row, col) without a conflict; empty for filled cells."""
    grid = normalize_grid(grid)
    validate_cell(row, col)
    return _candidates(grid, row, col)


def all_candidates(grid: Grid) -> Candidates:
    return _all_candidates(normalize_grid(grid))


def _notes_grid(supplied) -> list[list[set[int]]]:
    """Accept 9x9 nested iterables or a {'r1c1': [...]} mapping."""
    notes: list[list[set[int]]] = [[set() for _ in range(9)] for _ in range(9)]
    if isinstance(supplied, Mapping):
        for key, digits in supplied.items():
            r, c = key_to_rc(key)
            notes[r][c] = _digit_set(digits)
        return notes
    rows = list(supplied)
    if len(rows) != 9:
        raise InvalidGridError(f"candidate grid must have 9 rows, got {len(rows)}")
    for r, row in enumerate(rows):
        row = list(row)
        if len(row) != 9:
            raise InvalidGridError(f"candidate row {r} must have 9 cells, got {len(row)}")
        for c, digits in enumerate(row):
            notes[r][c] = _digit_set(digits or ())
    return notes


def _digit_set(digits: Iterable[int]) -> set[int]:
    out = set()
    for d in digits:
        validate_digit(d)
        out.add(d)
    return out


def merge_candidates(grid: Grid, supplied=None) -> Candidates:
    """Combine computed candidates with externally supplied notes.

    A cell with notes keeps only the noted digits that are still legal; a cell
    without notes falls back to the computed set. Filled cells are empty.
    """
    grid = normalize_grid(grid)
    computed = _all_candidates(grid)
    if supplied is None:
        return computed
    notes = _notes_grid(supplied)
    merged: Candidates = []
    for r in range(9):
        row = []
        for c in range(9):
            if notes[r][c] and grid[r][c] == EMPTY:
                row.append(computed[r][c] & notes[r][c])
            else:
                row.append(computed[r][c])
        merged.append(row)
    return merged


def clone_candidates(cands: Candidates) -> Candidates:
    return [[set(s) for s in row] for row in cands]


def eliminate(cands: Candidates, eliminations: Iterable[tuple[Cell, int]]) -> Candidates:
    """Return a copy of `cands` with each (cell, digit) removed."""
    out = clone_candidates(cands)
    for (r, c), d in eliminations:
        out[r][c].discard(d)
    return out


def candidates_to_keys(cands: Candidates) -> CandidateKeys:
    return {rc_to_key(r, c): sorted(cands[r][c]) for r in range(9) for c in range(9) if cands[r][c]}


def candidates_from_keys(mapping: Mapping[str, Iterable[int]]) -> Candidates:
    return _notes_grid(mapping)
