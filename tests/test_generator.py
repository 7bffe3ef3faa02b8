# tests/test_generator.py
import pytest

from CvQ_Generator import GridGenerator, generate_validGrid


def test_seed_grid_is_valid_by_construction():
    grid = GridGenerator.seed_grid(range(1, 10))
    assert grid.is_solved()
    assert grid.gridRow(0).tolist() == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert grid.gridRow(1).tolist() == [7, 8, 9, 1, 2, 3, 4, 5, 6]
    assert grid.gridRow(3).tolist() == [9, 1, 2, 3, 4, 5, 6, 7, 8]
    assert grid[8, 8] == 1


def test_seed_grid_with_any_permutation():
    grid = GridGenerator.seed_grid([4, 9, 2, 7, 1, 8, 3, 6, 5])
    assert grid.is_solved()


@pytest.mark.parametrize("bad", [[1, 2, 3], [1, 1, 2, 3, 4, 5, 6, 7, 8], list(range(0, 9))])
def test_seed_grid_rejects_non_permutations(bad):
    with pytest.raises(ValueError):
        GridGenerator.seed_grid(bad)


@pytest.mark.parametrize("seed", range(10))
def test_generated_grids_are_solved(seed):
    assert generate_validGrid(seed=seed).is_solved()


def test_generation_is_reproducible():
    assert generate_validGrid(seed=42) == generate_validGrid(seed=42)
    generator = GridGenerator(seed=42)
    assert generator.generate() != generator.generate()
