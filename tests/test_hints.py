# tests/test_hints.py
import pytest

from sudoku_tutor.candidates import merge_candidates
from sudoku_tutor.errors import InvalidValueError
from sudoku_tutor.hint_types import (
    TECHNIQUES,
    HiddenSingle,
    HintKind,
    NakedPair,
    NakedSingle,
    NoHint,
    TechniqueId,
    TechniqueLevel,
    XWing,
    YWing,
)
from sudoku_tutor.hints import cascade, find_hint, get_hint
from sudoku_tutor.types_sudoku import UnitType

from conftest import PUZZLE, SOLUTION, full_notes


def _x_wing_notes():
    notes = full_notes()
    for r in (1, 5):
        for c in range(9):
            if c not in (2, 6):
                notes[r][c].discard(4)
    return notes


def test_cascade_order_and_levels():
    ids = [tid for tid, _ in cascade()]
    assert ids[0] is TechniqueId.NAKED_SINGLE
    assert ids[-1] is TechniqueId.SWORDFISH
    assert len(ids) == len(TECHNIQUES) == 11
    assert [tid for tid, _ in cascade("beginner")] == [TechniqueId.NAKED_SINGLE, TechniqueId.HIDDEN_SINGLE]
    assert TechniqueId.SWORDFISH not in [tid for tid, _ in cascade(TechniqueLevel.ADVANCED)]


def test_unknown_level_rejected():
    with pytest.raises(InvalidValueError):
        cascade("grandmaster")
    with pytest.raises(InvalidValueError):
        TechniqueLevel.parse(7)


def test_naked_single_beats_pairs(empty):
    notes = full_notes()
    notes[0][0] = {5}
    notes[8][0] = {1, 2}
    notes[8][1] = {1, 2}
    hint = find_hint(empty, merge_candidates(empty, notes))
    assert isinstance(hint, NakedSingle)
    assert hint.cell == (0, 0) and hint.value == 5


def test_max_level_gates_techniques(empty):
    cands = merge_candidates(empty, _x_wing_notes())
    assert isinstance(find_hint(empty, cands), XWing)
    assert isinstance(find_hint(empty, cands, max_level="intermediate"), NoHint)


def test_solved_grid_has_no_hint(solution):
    hint = get_hint(solution)
    assert isinstance(hint, NoHint)
    assert not hint.found
    assert hint.to_dict() == {"technique": None, "type": "none", "key": "hint_noMove", "params": {}}


def test_empty_grid_has_no_hint(empty):
    assert isinstance(get_hint(empty), NoHint)


def test_get_hint_is_pure(puzzle):
    before = [row[:] for row in puzzle]
    first = get_hint(puzzle)
    assert get_hint(puzzle) == first
    assert puzzle == before


def test_classic_puzzle_first_hint_is_correct(puzzle):
    hint = get_hint(puzzle)
    assert hint.kind is HintKind.PLACEMENT
    r, c = hint.cell
    assert puzzle[r][c] == 0
    assert SOLUTION[r][c] == hint.value


def test_placement_to_dict(solution):
    solution[8][8] = 0
    out = get_hint(solution).to_dict()
    assert out["technique"] == "naked_single"
    assert out["type"] == "placement"
    assert out["key"] == "hint_nakedSingle"
    assert out["params"] == {"row": 9, "col": 9, "val": 9}
    assert out["level"] == "beginner"
    assert out["cell"] == {"row": 8, "col": 8}
    assert out["cellKey"] == "r9c9"
    assert out["digit"] == 9
    assert "eliminate" not in out


def test_elimination_to_dict(empty):
    notes = full_notes()
    notes[0][0] = {1, 2}
    notes[0][1] = {1, 2}
    hint = find_hint(empty, merge_candidates(empty, {"r1c1": [1, 2], "r1c2": [1, 2]}))
    assert isinstance(hint, NakedPair)
    assert hint == find_hint(empty, merge_candidates(empty, notes))
    out = hint.to_dict()
    assert out["type"] == "elimination"
    assert out["key"] == "hint_nakedPairRow"
    assert out["level"] == "intermediate"
    assert out["related"] == ["r1c1", "r1c2"]
    assert {"cell": "r1c3", "digit": 1} in out["eliminate"]
    assert len(out["eliminate"]) == 14
    assert "digit" not in out


def test_last_open_cell_is_a_naked_single(solution):
    solution[0][8] = 0
    hint = get_hint(solution)
    assert isinstance(hint, NakedSingle)
    assert hint.cell == (0, 8) and hint.value == 2


def test_single_note_does_not_become_a_placement(empty):
    assert isinstance(get_hint(empty, {"r1c1": [4]}), NoHint)


def test_wrong_note_still_gives_the_correct_digit(puzzle):
    # r1c3 can hold 1, 2 or 4; the player noted only the wrong 1
    hint = get_hint(puzzle, {"r1c3": [1]})
    assert hint.kind is HintKind.PLACEMENT
    r, c = hint.cell
    assert hint.value == SOLUTION[r][c]
    assert hint == get_hint(puzzle)
    assert puzzle == PUZZLE


def test_stale_notes_are_ignored_for_reasoning(empty):
    empty[0][8] = 9
    # the noted 9 is no longer legal in row 1 and 4 is not forced
    assert isinstance(get_hint(empty, {"r1c1": [4, 9]}), NoHint)


def test_notes_skip_eliminations_already_made(empty):
    notes = full_notes()
    notes[0][0] = {1, 2}
    notes[0][1] = {1, 2}
    cands = merge_candidates(empty, notes)
    assert find_hint(empty, cands).unit is UnitType.ROW

    shown = [[set(s) for s in row] for row in cands]
    for c in range(2, 9):
        shown[0][c] -= {1, 2}
    hint = find_hint(empty, cands, shown=shown)
    assert isinstance(hint, NakedPair)
    assert hint.unit is UnitType.BOX and hint.index == 0
    assert all(cell[0] in (1, 2) for cell, _ in hint.eliminations)


def test_hint_variants_build_from_keywords():
    single = HiddenSingle(cell=(2, 0), value=1, unit=UnitType.ROW, index=2)
    assert single.eliminations == () and single.related == ()
    pair = NakedPair(cell=(0, 0), values=(1, 2), unit=UnitType.BOX, index=0)
    assert pair.eliminations == ()
    wing = YWing(cell=(0, 0), value=3, pincers=((0, 4), (4, 0)), pivot_values=(1, 2))
    assert wing.related == ((0, 0), (0, 4), (4, 0))
    assert NoHint() == NoHint()
    with pytest.raises(TypeError):
        NakedSingle((0, 0), 5)
