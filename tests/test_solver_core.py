# tests/test_solver_core.py
import pytest

from sudoku_tutor.errors import InvalidCellError, InvalidGridError
from sudoku_tutor.solver_core import (
    box_index,
    format_grid,
    grid_to_string,
    key_to_rc,
    normalize_grid,
    parse_grid,
    peers,
    rc_to_key,
    unit_cells_box,
)

from conftest import PUZZLE


def test_box_index_layout():
    assert box_index(0, 0) == 0
    assert box_index(0, 8) == 2
    assert box_index(4, 4) == 4
    assert box_index(8, 0) == 6
    assert box_index(8, 8) == 8
    assert unit_cells_box(5)[0] == (3, 6)


def test_peers_count_and_self_exclusion():
    ps = peers(4, 4)
    assert len(ps) == 20
    assert (4, 4) not in ps
    assert (3, 3) in ps and (4, 0) in ps and (0, 4) in ps


def test_cell_keys_are_one_based():
    assert rc_to_key(0, 0) == "r1c1"
    assert key_to_rc("r9c3") == (8, 2)
    with pytest.raises(InvalidCellError):
        key_to_rc("r0c1")
    with pytest.raises(InvalidCellError):
        key_to_rc("x")


def test_normalize_maps_none_and_copies():
    grid = [[None] * 9 for _ in range(9)]
    grid[0][0] = 5
    out = normalize_grid(grid)
    assert out[0][0] == 5 and out[0][1] == 0
    out[0][0] = 1
    assert grid[0][0] == 5


@pytest.mark.parametrize(
    "bad",
    [
        [[0] * 9 for _ in range(8)],
        [[0] * 8 for _ in range(9)],
        [[10] + [0] * 8] + [[0] * 9 for _ in range(8)],
        [["1"] + [0] * 8] + [[0] * 9 for _ in range(8)],
        "." * 81,
        None,
    ],
)
def test_normalize_rejects_bad_shapes(bad):
    with pytest.raises(InvalidGridError):
        normalize_grid(bad)


def test_parse_grid_accepts_string_and_lines():
    text = grid_to_string(PUZZLE)
    assert text.startswith("53..7....")
    assert parse_grid(text) == PUZZLE
    assert parse_grid(format_grid(PUZZLE)) == PUZZLE
    lines = "\n".join("".join(str(v) for v in row) for row in PUZZLE)
    assert parse_grid(lines) == PUZZLE


def test_parse_grid_rejects_wrong_length_and_junk():
    with pytest.raises(InvalidGridError):
        parse_grid("123")
    with pytest.raises(InvalidGridError):
        parse_grid("x" * 81)
