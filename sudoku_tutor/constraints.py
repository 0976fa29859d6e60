"""Row/column/box uniqueness checks: the first conflicting peer for a placement, and duplicate scans over whole grids."""

# constraints.py
# find_conflict searches row, then column, then box, and reports the first hit.
# That order decides which peer is reported when a digit clashes in several
# houses at once.
from __future__ import annotations

from typing import Any

from .solver_core import (
    all_units,
    box_index,
    normalize_grid,
    rc_to_key,
    unit_cells_box,
    validate_cell,
    validate_digit,
)
from .types_sudoku import EMPTY, Conflict, Duplicate, Grid, UnitType


def scan_conflict(grid: Grid, row: int, col: int, value: int) -> Conflict | None:
    # no input validation: grid must come from normalize_grid
    for c in range(9):
        if c != col and grid[row][c] == value:
            return Conflict(UnitType.ROW, value, (row, c), row, col)
    for r in range(9):
        if r != row and grid[r][col] == value:
            return Conflict(UnitType.COL, value, (r, col), row, col)
    for r, c in unit_cells_box(box_index(row, col)):
        if (r, c) != (row, col) and grid[r][c] == value:
            return Conflict(UnitType.BOX, value, (r, c), row, col)
    return None


def find_conflict(grid: Grid, row: int, col: int, value: int) -> Conflict | None:
    """Return the first peer of (row, col) already holding `value`, or None.

    The cell itself is never compared against, so asking about a digit that
    is already placed at (row, col) checks whether that placement clashes.
    """
    grid = normalize_grid(grid)
    validate_cell(row, col)
    validate_digit(value)
    return scan_conflict(grid, row, col, value)


def is_valid_move(grid: Grid, row: int, col: int, value: int) -> bool:
    return find_conflict(grid, row, col, value) is None


def find_duplicates(grid: Grid) -> list[Duplicate]:
    """Every (unit, digit) pair where a digit appears more than once."""
    grid = normalize_grid(grid)
    dups = []
    for kind, index, cells in all_units():
        seen: dict[int, list] = {}
        for r, c in cells:
            v = grid[r][c]
            if v != EMPTY:
                seen.setdefault(v, []).append((r, c))
        for v in sorted(seen):
            if len(seen[v]) > 1:
                dups.append(Duplicate(kind, index, v, tuple(seen[v])))
    return dups


def has_duplicates(grid: Grid) -> bool:
    return bool(find_duplicates(grid))


def sanity_check(original: Grid, current: Grid) -> dict[str, Any]:
    """Tool payload: givens the player overwrote plus duplicate digits per unit."""
    original = normalize_grid(original)
    current = normalize_grid(current)
    issues: list[dict[str, Any]] = []
    for r in range(9):
        for c in range(9):
            if original[r][c] != EMPTY and current[r][c] not in (EMPTY, original[r][c]):
                issues.append(
                    {
                        "type": "given_overwritten",
                        "cell": rc_to_key(r, c),
                        "given": original[r][c],
                        "found": current[r][c],
                    }
                )
    for dup in find_duplicates(current):
        issues.append(
            {
                "type": "duplicate",
                "unit": f"{dup.unit.value[0]}{dup.index + 1}",
                "digit": dup.value,
                "cells": [rc_to_key(r, c) for r, c in dup.cells],
            }
        )
    return {"ok": len(issues) == 0, "issues": issues}
