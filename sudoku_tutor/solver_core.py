"""Core Sudoku utilities shared by every other module: input validation, index math, peers, unit iterators, and grid text I/O."""

# solver_core.py
# Grid model:
# - cells are (row, col), 0-based; labels for tool payloads are 1-based "r1c1"
# - 0 is the empty marker, None is accepted on input and mapped to 0
# - box index = (row // 3) * 3 + col // 3
from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

from .errors import InvalidCellError, InvalidGridError, InvalidValueError
from .types_sudoku import EMPTY, Cell, Grid, UnitType


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r <= 8 and 0 <= c <= 8


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def key_to_rc(key: str) -> Cell:
    try:
        r = int(key.split("c")[0][1:])
        c = int(key.split("c")[1])
    except (IndexError, ValueError) as e:
        raise InvalidCellError(f"bad cell key {key!r}") from e
    if not (1 <= r <= 9 and 1 <= c <= 9):
        raise InvalidCellError(f"cell key {key!r} outside r1c1..r9c9")
    return (r - 1, c - 1)


def validate_cell(r: int, c: int) -> None:
    if isinstance(r, bool) or isinstance(c, bool) or not isinstance(r, int) or not isinstance(c, int):
        raise InvalidCellError(f"cell indices must be ints, got ({r!r}, {c!r})")
    if not in_bounds(r, c):
        raise InvalidCellError(f"cell ({r}, {c}) outside 0..8")


def validate_digit(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 9:
        raise InvalidValueError(f"digit must be an int in 1..9, got {value!r}")


def normalize_grid(grid: Iterable[Iterable[int | None]]) -> Grid:
    """Validate a 9x9 grid and return a fresh copy with None mapped to 0.

    Raises InvalidGridError for any other shape or content.
    """
    if grid is None or isinstance(grid, (str, bytes)):
        raise InvalidGridError("grid must be a 9x9 sequence of rows")
    try:
        rows = [list(row) for row in grid]
    except TypeError as e:
        raise InvalidGridError("grid must be a 9x9 sequence of rows") from e
    if len(rows) != 9:
        raise InvalidGridError(f"grid must have 9 rows, got {len(rows)}")
    out: Grid = []
    for r, row in enumerate(rows):
        if len(row) != 9:
            raise InvalidGridError(f"row {r} must have 9 cells, got {len(row)}")
        clean = []
        for c, v in enumerate(row):
            if v is None:
                v = EMPTY
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 9:
                raise InvalidGridError(f"cell ({r}, {c}) holds {v!r}; expected 0..9 or None")
            clean.append(v)
        out.append(clean)
    return out


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def empty_grid() -> Grid:
    return [[EMPTY] * 9 for _ in range(9)]


def box_index(r: int, c: int) -> int:
    return (r // 3) * 3 + c // 3


def box_origin(b: int) -> Cell:
    return (3 * (b // 3), 3 * (b % 3))


@lru_cache(maxsize=None)
def unit_cells_row(r: int) -> tuple[Cell, ...]:
    return tuple((r, c) for c in range(9))


@lru_cache(maxsize=None)
def unit_cells_col(c: int) -> tuple[Cell, ...]:
    return tuple((r, c) for r in range(9))


@lru_cache(maxsize=None)
def unit_cells_box(b: int) -> tuple[Cell, ...]:
    r0, c0 = box_origin(b)
    return tuple((r0 + i, c0 + j) for i in range(3) for j in range(3))


def unit_cells(unit: UnitType, index: int) -> tuple[Cell, ...]:
    if unit is UnitType.ROW:
        return unit_cells_row(index)
    if unit is UnitType.COL:
        return unit_cells_col(index)
    return unit_cells_box(index)


def all_units() -> list[tuple[UnitType, int, tuple[Cell, ...]]]:
    """Every house in scan order: rows, then columns, then boxes."""
    units = []
    for kind in (UnitType.ROW, UnitType.COL, UnitType.BOX):
        for i in range(9):
            units.append((kind, i, unit_cells(kind, i)))
    return units


@lru_cache(maxsize=None)
def peers(r: int, c: int) -> frozenset[Cell]:
    """Return the set of peer coordinates for a given cell (same row, column, and 3x3 box)."""
    ps = set(unit_cells_row(r)) | set(unit_cells_col(c)) | set(unit_cells_box(box_index(r, c)))
    ps.discard((r, c))
    return frozenset(ps)


def unit_values(grid: Grid, cells: Iterable[Cell]) -> list[int]:
    return [grid[r][c] for r, c in cells]


def filled_count(grid: Grid, cells: Iterable[Cell]) -> int:
    return sum(1 for r, c in cells if grid[r][c] != EMPTY)


def is_complete_unit(values: list[int]) -> bool:
    """Nine filled digits with no repeats."""
    return EMPTY not in values and len(set(values)) == 9


def parse_grid(text: str) -> Grid:
    """Parse an 81-character string or nine lines of nine cells.

    '.' and '0' are empty; whitespace and the '|', '-', '+' separators of
    format_grid are ignored.
    """
    if not isinstance(text, str):
        raise InvalidGridError("grid text must be a string")
    cells: list[int] = []
    for ch in text:
        if ch in ".0":
            cells.append(EMPTY)
        elif ch in "123456789":
            cells.append(int(ch))
        elif ch.isspace() or ch in "|-+":
            continue
        else:
            raise InvalidGridError(f"unexpected character {ch!r} in grid text")
    if len(cells) != 81:
        raise InvalidGridError(f"grid text must describe 81 cells, got {len(cells)}")
    return [cells[i * 9:(i + 1) * 9] for i in range(9)]


def format_grid(grid: Grid, empty: str = ".") -> str:
    """Format a 9x9 grid with box separators, for logs and the demo CLI."""
    lines = []
    for r, row in enumerate(grid):
        if r in (3, 6):
            lines.append("------+-------+------")
        parts = []
        for c, v in enumerate(row):
            if c in (3, 6):
                parts.append("|")
            parts.append(str(v) if v != EMPTY else empty)
        lines.append(" ".join(parts))
    return "\n".join(lines)


def grid_to_string(grid: Grid) -> str:
    return "".join(str(v) if v != EMPTY else "." for row in grid for v in row)
