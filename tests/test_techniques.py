# tests/test_techniques.py
# Detector tests run on an empty grid with hand-made notes, the way the
# tutorial scenarios override candidates to show one pattern at a time.
from sudoku_tutor.candidates import all_candidates, merge_candidates
from sudoku_tutor.hints import find_hint, get_hint
from sudoku_tutor.hint_types import (
    HiddenPair,
    HiddenSingle,
    HiddenTriple,
    LockedCandidatesClaiming,
    LockedCandidatesPointing,
    NakedPair,
    NakedSingle,
    NakedTriple,
    Swordfish,
    XWing,
    YWing,
)
from sudoku_tutor.techniques import (
    find_hidden_pair,
    find_hidden_single,
    find_locked_candidates_pointing,
    find_naked_pair,
    find_naked_single,
    find_swordfish,
    find_x_wing,
    find_y_wing,
)
from sudoku_tutor.types_sudoku import UnitType

from conftest import full_notes


def _remove(notes, digit, cells):
    for r, c in cells:
        notes[r][c].discard(digit)


def _first(grid, notes):
    """Run the cascade with the hand-made notes standing in for the candidates."""
    return find_hint(grid, merge_candidates(grid, notes))


def test_naked_single_prefers_crowded_neighbourhood(solution):
    # (0, 0) and (0, 1) are singles in emptier houses than (8, 8)
    for r, c in [(0, 0), (0, 1), (8, 8)]:
        solution[r][c] = 0
    hint = get_hint(solution)
    assert isinstance(hint, NakedSingle)
    assert hint.cell == (8, 8) and hint.value == 9


def test_naked_single_tie_keeps_scan_order(solution):
    solution[0][8] = 0
    solution[8][0] = 0
    hint = find_naked_single(solution, all_candidates(solution))
    assert hint.cell == (0, 8)


def test_hidden_single_in_row(empty):
    for r, c in [(0, 5), (1, 7), (3, 1), (6, 2)]:
        empty[r][c] = 1
    hint = get_hint(empty)
    assert isinstance(hint, HiddenSingle)
    assert (hint.cell, hint.value, hint.unit, hint.index) == ((2, 0), 1, UnitType.ROW, 2)
    assert hint.key == "hint_hiddenSingleRow"


def test_hidden_single_in_column(empty):
    notes = full_notes()
    # 4 fits only at (5, 5) inside column 5
    _remove(notes, 4, [(r, 5) for r in range(9) if r != 5])
    cands = merge_candidates(empty, notes)
    hint = find_hidden_single(empty, cands)
    assert hint.unit is UnitType.COL and hint.cell == (5, 5) and hint.value == 4


def test_pointing_row(empty):
    notes = full_notes()
    _remove(notes, 5, [(1, 0), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2), (0, 2)])
    hint = _first(empty, notes)
    assert isinstance(hint, LockedCandidatesPointing)
    assert hint.key == "hint_lockedCandidatePointingRow"
    assert hint.params() == {"box": 1, "val": 5, "row": 1}
    assert hint.cell == (0, 0)
    assert hint.related == ((0, 0), (0, 1))
    assert [cell for cell, _ in hint.eliminations] == [(0, c) for c in range(3, 9)]


def test_pointing_column_detector(empty):
    notes = full_notes()
    # 8 in box 4 only at (3, 4) and (5, 4)
    _remove(notes, 8, [(r, c) for r in range(3, 6) for c in range(3, 6) if (r, c) not in ((3, 4), (5, 4))])
    hint = find_locked_candidates_pointing(empty, merge_candidates(empty, notes))
    assert hint.unit is UnitType.COL and hint.index == 4 and hint.box == 4
    assert len(hint.eliminations) == 6


def test_claiming_row(empty):
    notes = full_notes()
    _remove(notes, 7, [(4, c) for c in range(9) if c not in (3, 4)])
    hint = _first(empty, notes)
    assert isinstance(hint, LockedCandidatesClaiming)
    assert hint.key == "hint_lockedCandidateClaimingRow"
    assert hint.box == 4 and hint.index == 4
    assert sorted(cell for cell, _ in hint.eliminations) == [
        (r, c) for r in (3, 5) for c in range(3, 6)
    ]


def test_naked_pair_row(empty):
    notes = full_notes()
    notes[0][0] = {1, 2}
    notes[0][1] = {1, 2}
    hint = _first(empty, notes)
    assert isinstance(hint, NakedPair)
    assert hint.unit is UnitType.ROW and hint.index == 0
    assert hint.related == ((0, 0), (0, 1))
    assert hint.values == (1, 2)
    assert len(hint.eliminations) == 14
    assert hint.params()["col1"] == 1 and hint.params()["col2"] == 2
    assert hint.params()["candidates"] == "1,2"


def test_naked_pair_needs_something_to_eliminate(empty):
    notes = full_notes()
    for c in range(9):
        notes[0][c] = {1, 2} if c < 2 else set(range(3, 10))
    cands = merge_candidates(empty, notes)
    hint = find_naked_pair(empty, cands)
    # row 0 is already clean; the pair still clears box 0
    assert hint.unit is UnitType.BOX and hint.index == 0


def test_hidden_pair_row(empty):
    notes = full_notes()
    _remove(notes, 1, [(0, c) for c in range(9) if c not in (0, 4)])
    _remove(notes, 2, [(0, c) for c in range(9) if c not in (0, 4)])
    hint = _first(empty, notes)
    assert isinstance(hint, HiddenPair)
    assert hint.related == ((0, 0), (0, 4))
    assert hint.values == (1, 2)
    assert len(hint.eliminations) == 14
    assert all(d not in (1, 2) for _, d in hint.eliminations)


def test_naked_triple_row(empty):
    notes = full_notes()
    notes[0][0] = {1, 2}
    notes[0][4] = {2, 3}
    notes[0][8] = {1, 3}
    hint = _first(empty, notes)
    assert isinstance(hint, NakedTriple)
    assert hint.values == (1, 2, 3)
    assert hint.related == ((0, 0), (0, 4), (0, 8))
    assert len(hint.eliminations) == 18


def test_hidden_triple_row(empty):
    notes = full_notes()
    for d in (1, 2, 3):
        _remove(notes, d, [(0, c) for c in range(9) if c not in (0, 4, 8)])
    hint = _first(empty, notes)
    assert isinstance(hint, HiddenTriple)
    assert hint.values == (1, 2, 3)
    assert len(hint.eliminations) == 18


def test_x_wing_rows(empty):
    notes = full_notes()
    for r in (1, 5):
        _remove(notes, 4, [(r, c) for c in range(9) if c not in (2, 6)])
    hint = _first(empty, notes)
    assert isinstance(hint, XWing)
    assert hint.unit is UnitType.ROW
    assert hint.lines == (1, 5) and hint.covers == (2, 6)
    assert hint.params() == {"val": 4, "rows": "2,6", "cols": "3,7"}
    assert len(hint.eliminations) == 14


def test_x_wing_columns_detector(empty):
    notes = full_notes()
    for c in (0, 8):
        _remove(notes, 6, [(r, c) for r in range(9) if r not in (3, 7)])
    hint = find_x_wing(empty, merge_candidates(empty, notes))
    assert hint.unit is UnitType.COL
    assert hint.lines == (0, 8) and hint.covers == (3, 7)


def test_y_wing(empty):
    notes = full_notes()
    notes[0][0] = {1, 2}
    notes[0][4] = {1, 3}
    notes[4][0] = {2, 3}
    hint = _first(empty, notes)
    assert isinstance(hint, YWing)
    assert hint.cell == (0, 0)
    assert hint.pincers == ((0, 4), (4, 0))
    assert hint.value == 3
    assert hint.eliminations == (((4, 4), 3),)
    assert hint.related == ((0, 0), (0, 4), (4, 0))


def test_swordfish_rows(empty):
    notes = full_notes()
    spots = {0: (1, 5), 4: (5, 7), 8: (1, 7)}
    for r, cols in spots.items():
        _remove(notes, 9, [(r, c) for c in range(9) if c not in cols])
    cands = merge_candidates(empty, notes)
    assert find_x_wing(empty, cands) is None
    hint = _first(empty, notes)
    assert isinstance(hint, Swordfish)
    assert hint.lines == (0, 4, 8) and hint.covers == (1, 5, 7)
    assert len(hint.eliminations) == 18
    assert find_swordfish(empty, cands) == hint


def test_detectors_return_none_without_pattern(empty):
    cands = all_candidates(empty)
    for detect in (find_naked_single, find_hidden_single, find_naked_pair, find_hidden_pair, find_y_wing):
        assert detect(empty, cands) is None


def test_detectors_do_not_mutate(empty):
    notes = full_notes()
    notes[0][0] = {1, 2}
    notes[0][1] = {1, 2}
    cands = merge_candidates(empty, notes)
    before = [[set(s) for s in row] for row in cands]
    find_naked_pair(empty, cands)
    assert cands == before


def test_keep_vetoes_instances(empty):
    notes = full_notes()
    notes[0][0] = {1, 2}
    notes[0][1] = {1, 2}
    cands = merge_candidates(empty, notes)
    assert find_naked_pair(empty, cands).unit is UnitType.ROW
    hint = find_naked_pair(empty, cands, keep=lambda h: h.unit is not UnitType.ROW)
    assert hint.unit is UnitType.BOX
    assert find_naked_pair(empty, cands, keep=lambda h: False) is None
