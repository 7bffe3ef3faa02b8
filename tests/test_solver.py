# tests/test_solver.py
import numpy as np
import pytest

from CvQ_Grid import Grid, grd_puzzle, grd_solved
from CvQ_Solver import GridSolver, SolveResult, solve_grid


def test_classic_puzzle_is_solved():
    puzzle = Grid.from_grid(grd_puzzle)
    result = GridSolver().solve(puzzle)
    assert result.solved
    assert result.grid.is_solved()
    assert result.grid[0, 1] == 3
    assert result.grid.gridRow(0).tolist() == [5, 3, 4, 6, 7, 8, 9, 1, 2]

    givens = np.array(grd_puzzle) != 0
    assert np.array_equal(result.grid.grid_toArray((9, 9))[givens], np.array(grd_puzzle)[givens])


def test_solver_does_not_mutate_input():
    puzzle = Grid.from_grid(grd_puzzle)
    snapshot = puzzle.copy()
    GridSolver().solve(puzzle)
    assert puzzle == snapshot


def test_oracle_is_idempotent():
    solver = GridSolver()
    puzzle = Grid.from_grid(grd_puzzle)
    assert solver.is_solvable(puzzle) == solver.is_solvable(puzzle) is True

    broken = Grid.from_grid(grd_puzzle)
    broken[0, 2] = 5
    assert solver.is_solvable(broken) == solver.is_solvable(broken) is False


def test_conflicting_givens_are_unsolvable():
    grid = Grid()
    grid[0, 0] = 7
    grid[8, 0] = 7
    result = GridSolver().solve(grid)
    assert not result.solved
    assert result.steps == 0


def test_cell_without_candidates_is_unsolvable():
    grid = Grid()
    for col in range(1, 9):
        grid[0, col] = col
    grid[1, 0] = 9
    assert grid.gridCheckZero()
    assert grid.candidates((0, 0)) == []
    assert not GridSolver().is_solvable(grid)


def test_consistent_but_unsolvable_grid_exhausts_search():
    # (0, 0), (0, 1) and (1, 2) each have candidates {8, 9} and share the
    # top-left box: no completion exists, yet no cell is a naked single.
    grid = Grid()
    for col, value in zip(range(2, 9), range(1, 8)):
        grid[0, col] = value
    grid[1, 0] = 2
    grid[1, 1] = 3
    for row, value in zip(range(3, 7), range(4, 8)):
        grid[row, 2] = value
    assert grid.gridCheckZero()
    for cell in [(0, 0), (0, 1), (1, 2)]:
        assert grid.candidates(cell) == [8, 9]

    result = GridSolver().solve(grid)
    assert not result.solved
    assert not result.aborted
    assert result.steps > 0


def test_empty_grid_needs_backtracking():
    result = GridSolver().solve(Grid())
    assert result.solved
    assert result.propagated == 0
    assert result.steps > 0
    assert result.grid.gridRow(0).tolist() == list(range(1, 10))


def test_step_cap_aborts_search():
    result = GridSolver(max_steps=0).solve(Grid())
    assert result.aborted
    assert not result.solved
    assert not result

    with pytest.raises(ValueError):
        GridSolver(max_steps=-1)


def test_solved_input_needs_no_search():
    result = GridSolver().solve(Grid.from_grid(grd_solved))
    assert isinstance(result, SolveResult)
    assert result.solved
    assert result.steps == 0
    assert result.propagated == 0


def test_single_blank_is_filled_by_propagation():
    grid = Grid.from_grid(grd_solved)
    grid[4, 4] = 0
    result = GridSolver().solve(grid)
    assert result.solved
    assert result.propagated == 1
    assert result.steps == 0


def test_reset_origin_blanks_and_refills_origin():
    solved = Grid.from_grid(grd_solved)
    result = GridSolver(reset_origin=True).solve(solved)
    # the origin is blanked after propagation and refilled by the search
    assert result.solved
    assert result.steps > 0
    assert result.grid == solved

    assert GridSolver(reset_origin=True).is_solvable(Grid.from_grid(grd_puzzle))


def test_reset_origin_ignores_conflict_at_origin():
    grid = Grid()
    grid[0, 0] = 7
    grid[0, 5] = 7
    assert not grid.gridCheckZero()

    assert not GridSolver().is_solvable(grid)
    result = GridSolver(reset_origin=True).solve(grid)
    assert result.solved
    assert result.grid[0, 5] == 7
    assert result.grid[0, 0] != 7


def test_reset_origin_skips_dead_end_caused_by_origin():
    # with 9 at the origin, (0, 8) has no candidate: the row holds 1 - 7
    # and 9, the column holds 8
    grid = Grid()
    grid[0, 0] = 9
    for col in range(1, 8):
        grid[0, col] = col
    grid[1, 8] = 8
    assert grid.gridCheckZero()
    assert grid.candidates((0, 8)) == []

    assert not GridSolver().is_solvable(grid)
    result = GridSolver(reset_origin=True).solve(grid)
    assert result.solved
    assert result.grid[0, 0] == 8
    assert result.grid[0, 8] == 9


def test_reset_origin_keeps_conflicts_away_from_origin():
    grid = Grid()
    grid[0, 0] = 1
    grid[4, 4] = 6
    grid[4, 7] = 6
    assert not GridSolver(reset_origin=True).is_solvable(grid)


def test_solve_grid_wrapper():
    solution = solve_grid(Grid.from_grid(grd_puzzle))
    assert solution is not None and solution.is_solved()

    broken = Grid.from_grid(grd_puzzle)
    broken[0, 2] = 5
    assert solve_grid(broken) is None
