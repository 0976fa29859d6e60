"""Randomized backtracking solver, solution counting, and puzzle generation by carving cells out of a solved grid."""

# generator.py
# - solve(): in-place randomized backtracking; every placement is undone when
#   the branch below it fails, so a failed search leaves the grid as it was
# - count_solutions(): deterministic search that stops at `limit`
# - generate(): solve an empty grid, then clear `carve_count` distinct cells
#
# Carving does not check uniqueness unless asked (unique=True); the number of
# cleared cells is a proxy for difficulty, not a rating.
from __future__ import annotations

import logging
import random

from .config import EngineConfig
from .constraints import has_duplicates, scan_conflict
from .errors import GenerationError, InvalidValueError
from .solver_core import clone_grid, empty_grid, grid_to_string, normalize_grid
from .types_sudoku import DIGITS, EMPTY, Difficulty, Grid, Puzzle

logger = logging.getLogger(__name__)


class BudgetExceeded(Exception):
    """Internal signal: the search used up its placement budget."""


def parse_difficulty(difficulty: Difficulty | str) -> Difficulty:
    if isinstance(difficulty, Difficulty):
        return difficulty
    try:
        return Difficulty(str(difficulty).lower())
    except ValueError as e:
        names = ", ".join(d.value for d in Difficulty)
        raise InvalidValueError(f"unknown difficulty {difficulty!r}; expected one of {names}") from e


def _first_empty(grid: Grid) -> tuple[int, int] | None:
    for r in range(9):
        for c in range(9):
            if grid[r][c] == EMPTY:
                return r, c
    return None


class _Search:
    def __init__(self, budget: int | None):
        self.budget = budget
        self.steps = 0

    def tick(self) -> None:
        self.steps += 1
        if self.budget is not None and self.steps > self.budget:
            raise BudgetExceeded()


def _solve(grid: Grid, rng: random.Random, search: _Search) -> bool:
    cell = _first_empty(grid)
    if cell is None:
        return True
    r, c = cell
    digits = list(DIGITS)
    rng.shuffle(digits)
    for d in digits:
        if scan_conflict(grid, r, c, d) is not None:
            continue
        search.tick()
        grid[r][c] = d
        if _solve(grid, rng, search):
            return True
        grid[r][c] = EMPTY
    return False


def solve(grid: Grid, rng: random.Random | None = None, budget: int | None = None) -> bool:
    """Fill `grid` in place; True on success.

    Empty cells are taken in row-major order and digits tried in shuffled
    order. On failure (dead end or budget used up) the grid is left exactly
    as it was passed in. Existing givens are not checked for duplicates;
    use solve_existing for untrusted input.
    """
    work = normalize_grid(grid)
    rng = rng or random.Random()
    search = _Search(budget)
    try:
        ok = _solve(work, rng, search)
    except BudgetExceeded:
        logger.warning("solve gave up after %d placements (budget %s)", search.steps, budget)
        return False
    logger.debug("solve finished ok=%s after %d placements", ok, search.steps)
    if ok:
        for r in range(9):
            grid[r][:] = work[r]
    return ok


def _count(grid: Grid, limit: int, search: _Search) -> int:
    cell = _first_empty(grid)
    if cell is None:
        return 1
    r, c = cell
    total = 0
    for d in DIGITS:
        if scan_conflict(grid, r, c, d) is not None:
            continue
        search.tick()
        grid[r][c] = d
        total += _count(grid, limit - total, search)
        grid[r][c] = EMPTY
        if total >= limit:
            break
    return total


def count_solutions(grid: Grid, limit: int = 2, budget: int | None = None) -> int | None:
    """Number of completions of `grid`, capped at `limit`.

    Returns 0 when the givens already clash, and None when the budget runs
    out before the count is known.
    """
    work = normalize_grid(grid)
    if has_duplicates(work):
        return 0
    search = _Search(budget)
    try:
        return _count(work, limit, search)
    except BudgetExceeded:
        logger.warning("count_solutions gave up after %d placements", search.steps)
        return None


def _dead_cell(grid: Grid) -> tuple[int, int] | None:
    """First empty cell that no digit fits, if any."""
    for r in range(9):
        for c in range(9):
            if grid[r][c] == EMPTY and all(scan_conflict(grid, r, c, d) is not None for d in DIGITS):
                return r, c
    return None


def solve_existing(
    grid: Grid,
    rng: random.Random | None = None,
    budget: int | None = None,
    config: EngineConfig | None = None,
) -> Grid | None:
    """Return a solved copy of a partially filled grid, or None if there is none.

    Meant for imported (scanned) grids, so the search is always bounded:
    `budget` defaults to the config's solve budget. The input is never
    modified. Under-constrained grids may get a different completion on
    every call because digit order is randomized.
    """
    work = normalize_grid(grid)
    if has_duplicates(work):
        logger.info("solve_existing: givens contain duplicates, no solution")
        return None
    dead = _dead_cell(work)
    if dead is not None:
        logger.info("solve_existing: no digit fits cell %s", dead)
        return None
    if budget is None:
        budget = (config or EngineConfig()).solve_budget
    if not solve(work, rng=rng, budget=budget):
        return None
    return work


def _carve_random(puzzle: Grid, attempts: int, rng: random.Random) -> int:
    cleared = 0
    for _ in range(attempts):
        r, c = rng.randrange(9), rng.randrange(9)
        while puzzle[r][c] == EMPTY:
            r, c = rng.randrange(9), rng.randrange(9)
        puzzle[r][c] = EMPTY
        cleared += 1
    return cleared


def _carve_unique(puzzle: Grid, attempts: int, rng: random.Random, budget: int) -> int:
    cells = [(r, c) for r in range(9) for c in range(9)]
    rng.shuffle(cells)
    cleared = 0
    for r, c in cells:
        if cleared >= attempts:
            break
        keep = puzzle[r][c]
        puzzle[r][c] = EMPTY
        if count_solutions(puzzle, limit=2, budget=budget) == 1:
            cleared += 1
        else:
            puzzle[r][c] = keep
    return cleared


def generate(
    difficulty: Difficulty | str = Difficulty.EASY,
    rng: random.Random | None = None,
    unique: bool | None = None,
    config: EngineConfig | None = None,
) -> Puzzle:
    """Build a random solved grid and carve a puzzle out of it.

    easy/medium/hard clear 30/45/55 distinct cells by default. With
    unique=True a cell is only cleared while the puzzle keeps exactly one
    solution, which can leave more clues than the target.
    """
    level = parse_difficulty(difficulty)
    cfg = config or EngineConfig()
    rng = rng or random.Random()
    unique = cfg.unique if unique is None else unique
    attempts = cfg.carve_count(level.value)

    board = empty_grid()
    if not solve(board, rng=rng, budget=cfg.solve_budget):
        raise GenerationError("could not build a solved grid within the search budget")
    solution = clone_grid(board)

    puzzle = clone_grid(solution)
    if unique:
        cleared = _carve_unique(puzzle, attempts, rng, cfg.unique_budget)
        if cleared < attempts:
            logger.info(
                "unique carving stopped at %d of %d cells for %s", cleared, attempts, level.value
            )
    else:
        cleared = _carve_random(puzzle, attempts, rng)
    logger.debug("generated %s puzzle (%d cleared): %s", level.value, cleared, grid_to_string(puzzle))
    return Puzzle(puzzle=puzzle, solution=solution, difficulty=level)
