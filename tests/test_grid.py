# tests/test_grid.py
import numpy as np
import pytest

from CvQ_Grid import Grid, Cell, SubgridBounds, subgrid_bounds, grd_solved, grd_puzzle
from utilFunX import _has_duplicateNonZero, _missing_values, _str_toSeq


def test_empty_grid_candidates_are_all_digits():
    grid = Grid()
    for r in range(9):
        for c in range(9):
            assert grid.candidates(Cell(r, c)) == list(range(1, 10))
    assert grid.count_empty() == 81


def test_from_grid_accepts_nested_flat_and_string_input():
    nested = Grid.from_grid(grd_puzzle)
    flat = Grid.from_grid(np.array(grd_puzzle).flatten().tolist())
    as_string = Grid.from_grid("".join(str(v) if v else "." for row in grd_puzzle for v in row))
    assert nested == flat == as_string
    assert nested.grid_toString().startswith("530070000")


def test_grid_built_from_grid_is_independent_copy():
    original = Grid.from_grid(grd_puzzle)
    for clone in (Grid(original), Grid.from_grid(original)):
        assert clone == original
        clone[0, 2] = 4
        assert original[0, 2] == 0


def test_to_list_returns_nested_rows():
    rows = Grid.from_grid(grd_puzzle).to_list()
    assert rows == [list(row) for row in grd_puzzle]
    assert all(type(v) is int for row in rows for v in row)


@pytest.mark.parametrize("bad", [
    list(range(80)),
    [[1] * 9] * 8,
    [10] + [0] * 80,
    [-1] + [0] * 80,
    [0.5] + [0] * 80,
    "53..7....x" + "0" * 71,
    [[0] * 9] * 8 + [[0] * 8],
])
def test_malformed_grids_are_rejected(bad):
    with pytest.raises(ValueError):
        Grid.from_grid(bad)


def test_boolean_grids_are_rejected():
    with pytest.raises(ValueError):
        Grid(np.zeros((9, 9), dtype=bool))


def test_geometry_extraction():
    grid = Grid.from_grid(grd_solved)
    assert grid.gridRow(0).tolist() == [2, 6, 4, 3, 8, 9, 5, 1, 7]
    assert grid.gridCol(1).tolist() == [6, 1, 8, 2, 3, 7, 4, 5, 9]
    assert grid.gridBox(subgrid_bounds(Cell(0, 7))).tolist() == [5, 1, 7, 9, 8, 3, 4, 6, 2]
    with pytest.raises(ValueError):
        grid.gridRow(9)
    with pytest.raises(ValueError):
        grid.gridBox(SubgridBounds(1, 0, 4, 3))


def test_subgrid_bounds_use_row_and_column_fields():
    assert subgrid_bounds(Cell(row=4, col=7)) == SubgridBounds(3, 6, 6, 9)
    assert subgrid_bounds(Cell(row=8, col=0)) == (6, 0, 9, 3)
    assert Cell(row=4, col=7).box == 5


def test_duplicate_nonzero_in_row():
    grid = Grid.from_grid(grd_puzzle)
    grid[0, 2] = 5
    assert _has_duplicateNonZero(grid.gridRow(0))
    assert not grid.is_cellValid(Cell(0, 2))
    assert not grid.gridCheckZero()
    assert not _has_duplicateNonZero([0] * 9)


def test_missing_values_complement_present_values():
    samples = [[0] * 9, [5, 3, 0, 0, 7, 0, 0, 0, 0], [1, 1, 2, 2, 0, 9, 9, 9, 4], list(range(1, 10))]
    for values in samples:
        missing = set(_missing_values(values))
        present = {v for v in values if v != 0}
        assert missing.isdisjoint(present)
        assert missing | present == set(range(1, 10))
        assert _missing_values(values) == sorted(missing)


def test_candidates_and_cell_validity():
    grid = Grid.from_grid(grd_puzzle)
    assert grid.candidates(Cell(0, 2)) == [1, 2, 4]
    grid[0, 2] = 1
    assert grid.is_cellValid(Cell(0, 2))


def test_empty_cells_are_row_major():
    grid = Grid.from_grid(grd_puzzle)
    empties = grid.emptyCells()
    assert empties[:3] == [Cell(0, 2), Cell(0, 3), Cell(0, 5)]
    assert empties[-1] == Cell(8, 6)
    assert len(empties) == grid.count_empty() == 51


def test_is_solved():
    grid = Grid.from_grid(grd_solved)
    assert grid.is_solved()
    assert Grid.is_validGrid(grd_solved)

    grid[4, 4] = 0
    assert not grid.is_solved()

    arr = np.array(grd_solved).reshape(9, 9)
    arr[0, [0, 1]] = arr[0, [1, 0]]
    assert not Grid(arr).is_solved()


def test_copy_is_independent():
    grid = Grid.from_grid(grd_solved)
    clone = grid.copy()
    clone[0, 0] = 0
    assert grid[0, 0] == 2
    assert grid != clone


def test_setitem_checks_value_and_cell():
    grid = Grid()
    with pytest.raises(ValueError):
        grid[0, 0] = 10
    with pytest.raises(ValueError):
        grid[Cell(9, 0)] = 1


def test_str_to_seq_ignores_whitespace():
    seq = _str_toSeq("12 3\n.4")
    assert seq.tolist() == [1, 2, 3, 0, 4]
