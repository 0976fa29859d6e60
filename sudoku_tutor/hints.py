"""Hint engine: runs the technique detectors in a fixed priority order and returns the first hit."""

# hints.py
# Cascade (lowest complexity first):
#   naked single -> hidden single -> locked candidates (pointing, claiming)
#   -> naked pair -> hidden pair -> naked triple -> hidden triple
#   -> X-Wing -> Y-Wing -> Swordfish -> NoHint
# A category that finds anything ends the search, so a lower-priority
# technique is never suggested while a higher one applies.
from __future__ import annotations

import logging
from typing import Callable

from .candidates import all_candidates, merge_candidates
from .hint_types import TECHNIQUES, Hint, HintKind, NoHint, TechniqueId, TechniqueLevel
from .solver_core import normalize_grid
from .techniques import (
    Keep,
    find_hidden_pair,
    find_hidden_single,
    find_hidden_triple,
    find_locked_candidates_claiming,
    find_locked_candidates_pointing,
    find_naked_pair,
    find_naked_single,
    find_naked_triple,
    find_swordfish,
    find_x_wing,
    find_y_wing,
)
from .types_sudoku import Candidates, Grid

logger = logging.getLogger(__name__)

Detector = Callable[[Grid, Candidates, "Keep | None"], "Hint | None"]

DETECTORS: dict[TechniqueId, Detector] = {
    TechniqueId.NAKED_SINGLE: find_naked_single,
    TechniqueId.HIDDEN_SINGLE: find_hidden_single,
    TechniqueId.LOCKED_CANDIDATES_POINTING: find_locked_candidates_pointing,
    TechniqueId.LOCKED_CANDIDATES_CLAIMING: find_locked_candidates_claiming,
    TechniqueId.NAKED_PAIR: find_naked_pair,
    TechniqueId.HIDDEN_PAIR: find_hidden_pair,
    TechniqueId.NAKED_TRIPLE: find_naked_triple,
    TechniqueId.HIDDEN_TRIPLE: find_hidden_triple,
    TechniqueId.X_WING: find_x_wing,
    TechniqueId.Y_WING: find_y_wing,
    TechniqueId.SWORDFISH: find_swordfish,
}


def cascade(max_level: TechniqueLevel | str | int | None = None) -> list[tuple[TechniqueId, Detector]]:
    """Detectors in priority order, limited to techniques at or below `max_level`."""
    ceiling = TechniqueLevel.parse(max_level)
    return [
        (t.id, DETECTORS[t.id])
        for t in TECHNIQUES
        if ceiling is None or t.level <= ceiling
    ]


def still_noted(shown: Candidates) -> Keep:
    """Accept placements, and eliminations that remove a digit still in `shown`."""

    def keep(hint: Hint) -> bool:
        if hint.kind is not HintKind.ELIMINATION:
            return True
        return any(d in shown[r][c] for (r, c), d in hint.eliminations)

    return keep


def find_hint(grid: Grid, cands: Candidates, max_level=None, shown: Candidates | None = None) -> Hint:
    """Run the cascade over an already normalized grid and a sound candidate grid.

    `shown` is what the player currently sees in their notes. It never feeds
    the reasoning; it only drops eliminations the player has already made.
    """
    keep = still_noted(shown) if shown is not None else None
    for technique, detect in cascade(max_level):
        hint = detect(grid, cands, keep)
        if hint is not None:
            logger.debug("hint: %s %s", technique.value, hint.params())
            return hint
    return NoHint()


def get_hint(grid: Grid, candidates=None, max_level: TechniqueLevel | str | int | None = None) -> Hint:
    """Return the lowest-complexity applicable hint for `grid`.

    Reasoning always runs on candidates computed from the board, so a
    partial or mistaken pencil mark can never turn into a placement.
    `candidates` optionally carries the player's notes (9x9 digit lists or a
    {'r1c1': [...]} map); they only pick which elimination to show, skipping
    ones whose digits are already gone from the notes. The grid is never
    modified. NoHint means the technique set is exhausted or the grid is
    full, not that the puzzle is unsolvable.
    """
    grid = normalize_grid(grid)
    shown = merge_candidates(grid, candidates) if candidates is not None else None
    return find_hint(grid, all_candidates(grid), max_level, shown)
