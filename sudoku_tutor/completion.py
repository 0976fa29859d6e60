"""Completion checks: which houses a move just finished, and whether the whole grid is a valid solution."""

from __future__ import annotations

from .solver_core import (
    all_units,
    box_index,
    is_complete_unit,
    normalize_grid,
    unit_cells_box,
    unit_cells_col,
    unit_cells_row,
    unit_values,
    validate_cell,
)
from .types_sudoku import EMPTY, CompletionUnit, Grid, UnitType


def units_completed_by(grid: Grid, row: int, col: int) -> list[CompletionUnit]:
    """Row, column and box through (row, col) that are now full and hold 1..9 once each.

    Order is row, column, box; a single move can complete all three.
    """
    grid = normalize_grid(grid)
    validate_cell(row, col)
    b = box_index(row, col)
    done = []
    for unit, index, cells in (
        (UnitType.ROW, row, unit_cells_row(row)),
        (UnitType.COL, col, unit_cells_col(col)),
        (UnitType.BOX, b, unit_cells_box(b)),
    ):
        if is_complete_unit(unit_values(grid, cells)):
            done.append(CompletionUnit(unit, index))
    return done


def is_solved(grid: Grid) -> bool:
    """Every cell filled and every row, column and box a permutation of 1..9."""
    grid = normalize_grid(grid)
    if any(v == EMPTY for row in grid for v in row):
        return False
    return all(is_complete_unit(unit_values(grid, cells)) for _, _, cells in all_units())


def empty_count(grid: Grid) -> int:
    return sum(1 for row in normalize_grid(grid) for v in row if v == EMPTY)
