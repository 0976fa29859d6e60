"""Human-style technique detectors over a grid and its candidate sets.

Every detector has the signature ``(grid, cands, keep=None) -> Hint | None``.
It never mutates its inputs. ``cands`` must be sound (computed from the grid,
possibly narrowed by earlier sound eliminations); ``keep`` can veto
individual instances. When several instances of the same technique exist, each
is scored and the best one is returned; ties keep the first instance in scan
order (rows, then columns, then boxes).

Scores:
    naked single    filled cells in the row + column + box, plus 100
    hidden single   filled cells in the house
    eliminations    number of (cell, digit) pairs removed
"""

# techniques.py
# Placements:   naked single, hidden single (row/col/box)
# Eliminations: locked candidates (pointing & claiming), naked/hidden pairs
#               and triples, X-Wing, Y-Wing, Swordfish
from __future__ import annotations

from itertools import combinations
from typing import Callable

from .hint_types import (
    Elimination,
    HiddenPair,
    HiddenSingle,
    HiddenTriple,
    Hint,
    LockedCandidatesClaiming,
    LockedCandidatesPointing,
    NakedPair,
    NakedSingle,
    NakedTriple,
    Swordfish,
    XWing,
    YWing,
)
from .solver_core import (
    all_units,
    box_index,
    filled_count,
    peers,
    unit_cells_box,
    unit_cells_col,
    unit_cells_row,
)
from .types_sudoku import DIGITS, EMPTY, Candidates, Cell, Grid, UnitType

NAKED_SINGLE_BONUS = 100

# filter applied to every candidate instance before scoring
Keep = Callable[[Hint], bool]


class _Best:
    """Keeps the highest-scoring hint seen so far, skipping those `keep` rejects."""

    def __init__(self, keep: Keep | None = None):
        self.keep = keep
        self.hint: Hint | None = None
        self.score = -1

    def offer(self, hint: Hint, score: int) -> None:
        if self.keep is not None and not self.keep(hint):
            return
        if score > self.score:
            self.hint = hint
            self.score = score


def _open(grid: Grid, cands: Candidates, cells) -> list[Cell]:
    return [(r, c) for r, c in cells if grid[r][c] == EMPTY and cands[r][c]]


def _positions(grid: Grid, cands: Candidates, cells, d: int) -> list[Cell]:
    return [(r, c) for r, c in cells if grid[r][c] == EMPTY and d in cands[r][c]]


def _peer_density(grid: Grid, r: int, c: int) -> int:
    return (
        filled_count(grid, unit_cells_row(r))
        + filled_count(grid, unit_cells_col(c))
        + filled_count(grid, unit_cells_box(box_index(r, c)))
    )


# ---------------------------------------------------------------- placements


def find_naked_single(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    best = _Best(keep)
    for r in range(9):
        for c in range(9):
            if grid[r][c] == EMPTY and len(cands[r][c]) == 1:
                (d,) = cands[r][c]
                best.offer(NakedSingle(cell=(r, c), value=d), _peer_density(grid, r, c) + NAKED_SINGLE_BONUS)
    return best.hint


def find_hidden_single(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    best = _Best(keep)
    for unit, index, cells in all_units():
        filled = filled_count(grid, cells)
        for d in DIGITS:
            locs = _positions(grid, cands, cells, d)
            if len(locs) == 1:
                best.offer(HiddenSingle(cell=locs[0], value=d, unit=unit, index=index), filled)
    return best.hint


# ------------------------------------------------------- locked candidates


def find_locked_candidates_pointing(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    """If in a box a digit's candidates lie in a single row (or column), eliminate that digit
    from the rest of that row (or column) outside the box.
    """
    best = _Best(keep)
    for b in range(9):
        cells = unit_cells_box(b)
        for d in DIGITS:
            locs = _positions(grid, cands, cells, d)
            if not 2 <= len(locs) <= 3:
                continue
            for unit, axis, line_cells in (
                (UnitType.ROW, 0, unit_cells_row),
                (UnitType.COL, 1, unit_cells_col),
            ):
                lines = {cell[axis] for cell in locs}
                if len(lines) != 1:
                    continue
                line = lines.pop()
                elim = tuple(
                    (cell, d)
                    for cell in _positions(grid, cands, line_cells(line), d)
                    if box_index(*cell) != b
                )
                if elim:
                    hint = LockedCandidatesPointing(
                        cell=locs[0], value=d, box=b, unit=unit, index=line,
                        related=tuple(locs), eliminations=elim,
                    )
                    best.offer(hint, len(elim))
    return best.hint


def find_locked_candidates_claiming(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    """If in a row/column a digit's candidates are confined to a single box, eliminate that digit
    from other cells in that box.
    """
    best = _Best(keep)
    for unit, axis, line_cells in (
        (UnitType.ROW, 0, unit_cells_row),
        (UnitType.COL, 1, unit_cells_col),
    ):
        for line in range(9):
            for d in DIGITS:
                locs = _positions(grid, cands, line_cells(line), d)
                if not 2 <= len(locs) <= 3:
                    continue
                boxes = {box_index(*cell) for cell in locs}
                if len(boxes) != 1:
                    continue
                b = boxes.pop()
                elim = tuple(
                    (cell, d)
                    for cell in _positions(grid, cands, unit_cells_box(b), d)
                    if cell[axis] != line
                )
                if elim:
                    hint = LockedCandidatesClaiming(
                        cell=locs[0], value=d, box=b, unit=unit, index=line,
                        related=tuple(locs), eliminations=elim,
                    )
                    best.offer(hint, len(elim))
    return best.hint


# ------------------------------------------------------------------ subsets


def _naked_subset(grid: Grid, cands: Candidates, size: int, hint_cls, keep: Keep | None = None) -> Hint | None:
    best = _Best(keep)
    for unit, index, cells in all_units():
        open_cells = _open(grid, cands, cells)
        small = [cell for cell in open_cells if 2 <= len(cands[cell[0]][cell[1]]) <= size]
        for group in combinations(small, size):
            digits: set[int] = set()
            for r, c in group:
                digits |= cands[r][c]
            if len(digits) != size:
                continue
            elim = tuple(
                ((r, c), d)
                for r, c in open_cells
                if (r, c) not in group
                for d in sorted(cands[r][c] & digits)
            )
            if elim:
                hint = hint_cls(
                    cell=group[0], values=tuple(sorted(digits)), unit=unit, index=index,
                    related=group, eliminations=elim,
                )
                best.offer(hint, len(elim))
    return best.hint


def _hidden_subset(grid: Grid, cands: Candidates, size: int, hint_cls, keep: Keep | None = None) -> Hint | None:
    best = _Best(keep)
    for unit, index, cells in all_units():
        where = {d: _positions(grid, cands, cells, d) for d in DIGITS}
        eligible = [d for d in DIGITS if 2 <= len(where[d]) <= size]
        for digits in combinations(eligible, size):
            spots = sorted({cell for d in digits for cell in where[d]})
            if len(spots) != size:
                continue
            kept = set(digits)
            elim = tuple(
                ((r, c), d) for r, c in spots for d in sorted(cands[r][c] - kept)
            )
            if elim:
                hint = hint_cls(
                    cell=spots[0], values=digits, unit=unit, index=index,
                    related=tuple(spots), eliminations=elim,
                )
                best.offer(hint, len(elim))
    return best.hint


def find_naked_pair(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    return _naked_subset(grid, cands, 2, NakedPair, keep)


def find_naked_triple(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    return _naked_subset(grid, cands, 3, NakedTriple, keep)


def find_hidden_pair(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    return _hidden_subset(grid, cands, 2, HiddenPair, keep)


def find_hidden_triple(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    return _hidden_subset(grid, cands, 3, HiddenTriple, keep)


# --------------------------------------------------------------------- fish


def _fish(grid: Grid, cands: Candidates, size: int, hint_cls, keep: Keep | None = None) -> Hint | None:
    best = _Best(keep)
    for unit in (UnitType.ROW, UnitType.COL):
        for d in DIGITS:
            # line index -> cover indices holding d
            spread: dict[int, set[int]] = {}
            for line in range(9):
                cover = set()
                for k in range(9):
                    r, c = (line, k) if unit is UnitType.ROW else (k, line)
                    if grid[r][c] == EMPTY and d in cands[r][c]:
                        cover.add(k)
                if 2 <= len(cover) <= size:
                    spread[line] = cover
            for lines in combinations(sorted(spread), size):
                covers: set[int] = set()
                for line in lines:
                    covers |= spread[line]
                if len(covers) != size:
                    continue
                elim: list[Elimination] = []
                for k in sorted(covers):
                    for other in range(9):
                        if other in lines:
                            continue
                        r, c = (other, k) if unit is UnitType.ROW else (k, other)
                        if grid[r][c] == EMPTY and d in cands[r][c]:
                            elim.append(((r, c), d))
                if not elim:
                    continue
                pattern = tuple(
                    (line, k) if unit is UnitType.ROW else (k, line)
                    for line in lines
                    for k in sorted(spread[line])
                )
                hint = hint_cls(
                    cell=pattern[0], value=d, unit=unit, lines=lines,
                    covers=tuple(sorted(covers)), related=pattern, eliminations=tuple(elim),
                )
                best.offer(hint, len(elim))
    return best.hint


def find_x_wing(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    return _fish(grid, cands, 2, XWing, keep)


def find_swordfish(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    return _fish(grid, cands, 3, Swordfish, keep)


# ------------------------------------------------------------------- Y-Wing


def find_y_wing(grid: Grid, cands: Candidates, keep: Keep | None = None) -> Hint | None:
    best = _Best(keep)
    bivalue = [
        (r, c) for r in range(9) for c in range(9)
        if grid[r][c] == EMPTY and len(cands[r][c]) == 2
    ]
    for pivot in bivalue:
        xy = cands[pivot[0]][pivot[1]]
        wings = [cell for cell in bivalue if cell in peers(*pivot)]
        for a, b in combinations(wings, 2):
            sa, sb = cands[a[0]][a[1]], cands[b[0]][b[1]]
            if sa == xy or sb == xy or len(sa & xy) != 1 or len(sb & xy) != 1:
                continue
            if sa & xy == sb & xy:
                continue
            za, zb = sa - xy, sb - xy
            if za != zb:
                continue
            (z,) = za
            elim = tuple(
                (cell, z)
                for cell in sorted(peers(*a) & peers(*b))
                if cell != pivot
                and grid[cell[0]][cell[1]] == EMPTY
                and z in cands[cell[0]][cell[1]]
            )
            if elim:
                x, y = sorted(xy)
                best.offer(
                    YWing(cell=pivot, value=z, pincers=(a, b), pivot_values=(x, y), eliminations=elim),
                    len(elim),
                )
    return best.hint
