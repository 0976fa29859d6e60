"""Tool-friendly interface over the engine: JSON-ready payloads, applying hints, chained next-move search, and difficulty rating."""

# sudoku_tools.py (chaining enabled)
# Payload conventions: cells are "r1c1" keys, digits are ints, and hints are
# Hint.to_dict() dicts. Nothing here mutates the grids passed in.
from __future__ import annotations

import logging
from typing import Any

from .candidates import (
    all_candidates,
    candidates_to_keys,
    clone_candidates,
    eliminate,
    merge_candidates,
)
from .completion import is_solved
from .hint_types import Hint, HintKind, TechniqueLevel
from .hints import find_hint, get_hint
from .solver_core import normalize_grid
from .types_sudoku import Candidates, Grid

logger = logging.getLogger(__name__)


def compute_candidates_tool(current: Grid) -> dict[str, Any]:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c2': [1, 2, 5], ...}}."""
    return {"candidates": candidates_to_keys(all_candidates(current))}


def hint_tool(current: Grid, candidates=None, max_level=None) -> dict[str, Any]:
    return get_hint(current, candidates, max_level).to_dict()


def apply_hint(current: Grid, candidates: Candidates | None, hint: Hint) -> tuple[Grid, Candidates]:
    """Return (grid, candidates) after acting on `hint`.

    Placements write the digit and drop it from its peers; narrowing from
    earlier eliminations is kept. Eliminations only narrow the candidates.
    """
    grid = normalize_grid(current)
    cands = clone_candidates(candidates) if candidates is not None else all_candidates(grid)
    if hint.kind is HintKind.PLACEMENT:
        r, c = hint.cell
        grid[r][c] = hint.value
        fresh = all_candidates(grid)
        # keep prior narrowing wherever it is still a subset of the legal set
        cands = [[fresh[i][j] & cands[i][j] if cands[i][j] else fresh[i][j] for j in range(9)] for i in range(9)]
        return grid, cands
    if hint.kind is HintKind.ELIMINATION:
        return grid, eliminate(cands, hint.eliminations)
    return grid, cands


def next_moves(
    current: Grid,
    candidates=None,
    max_level: TechniqueLevel | str | int | None = None,
    max_moves: int = 5,
    chain: bool = True,
) -> dict[str, Any]:
    """Top-level technique dispatcher with chaining.

    Returns up to `max_moves` hints. With `chain=True` each hint is applied to
    a working copy (placements fill the cell, eliminations narrow the
    candidates) before the next search, so later moves build on earlier
    ones. Without chaining only the first hint is returned. Supplied
    `candidates` are the player's notes: they are carried along and only
    filter out eliminations already made, never the reasoning itself. The
    final working state is included as `snapshot`.
    """
    cur = normalize_grid(current)
    cands = all_candidates(cur)
    shown = merge_candidates(cur, candidates) if candidates is not None else None
    out_moves: list[dict[str, Any]] = []

    while len(out_moves) < max_moves and not is_solved(cur):
        hint = find_hint(cur, cands, max_level, shown)
        if not hint.found:
            break
        move = hint.to_dict()
        move["index"] = len(out_moves) + 1
        out_moves.append(move)
        if not chain:
            break
        if shown is not None:
            _, shown = apply_hint(cur, shown, hint)
        cur, cands = apply_hint(cur, cands, hint)

    logger.debug("next_moves produced %d move(s)", len(out_moves))
    return {
        "moves": out_moves,
        "solved": is_solved(cur),
        "snapshot": {"current": cur, "candidates": candidates_to_keys(shown if shown is not None else cands)},
    }


def solve_with_techniques(
    current: Grid, max_level: TechniqueLevel | str | int | None = None, max_steps: int = 1000
) -> tuple[Grid, list[Hint]]:
    """Apply hints until the grid is solved or the cascade runs dry."""
    cur = normalize_grid(current)
    cands = all_candidates(cur)
    steps: list[Hint] = []
    while len(steps) < max_steps and not is_solved(cur):
        hint = find_hint(cur, cands, max_level)
        if not hint.found:
            break
        steps.append(hint)
        cur, cands = apply_hint(cur, cands, hint)
    return cur, steps


def rate_difficulty(current: Grid) -> TechniqueLevel | None:
    """Hardest technique level the hint loop needs to solve the grid.

    None when the implemented techniques stall before the grid is solved.
    """
    grid, steps = solve_with_techniques(current)
    if not is_solved(grid):
        return None
    levels = [h.level for h in steps if h.level is not None]
    return max(levels) if levels else TechniqueLevel.BEGINNER
