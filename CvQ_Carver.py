#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CarveQ_Carver

Created in October 2026

@author: CarveQ contributors

Puzzle carving: blank random cells of a solved grid, keeping a removal only
if the solver still finds a solution for the whole grid.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple
import warnings

import numpy as np
import pandas as pd
from tqdm import tqdm

from CvQ_Grid import Grid, Cell
from CvQ_Generator import GridGenerator
from CvQ_Solver import GridSolver
from utilFunX import _resolve_rng



class CarveStep(NamedTuple):
    """ one solver-checked removal attempt """
    row: int
    col: int
    value: int
    accepted: bool



@dataclass
class CarveResult:
    """
    Outcome of one carving run:
        puzzle   -- the carved grid
        solution -- clone of the solved input grid
        target   -- requested number of blanks
        removed  -- blanks actually made (== target iff complete)
        draws    -- random cell draws used, re-rolls on empty cells included
        complete -- the target was reached within the draw cap
        history  -- every solver-checked attempt, in order
    """
    puzzle: Grid
    solution: Grid
    target: int
    removed: int
    draws: int
    complete: bool
    history: List[CarveStep] = field(default_factory=list)

    def history_toFrame(self) -> pd.DataFrame:
        """
        The attempt history as DataFrame with columns
        'row', 'col', 'value', 'accepted'.
        """
        return pd.DataFrame(self.history, columns=list(CarveStep._fields))

    def __str__(self) -> str:
        return (
            f"CarveResult[\n"
            f"  blanks      : {self.removed} / {self.target}\n"
            f"  complete    : {self.complete}\n"
            f"  draws       : {self.draws}\n"
            f"  attempts    : {len(self.history)}\n"
            f"]"
        )



class PuzzleCarver:
    """
    Derives puzzles from solved grids.

    Parameters
    ----------
    solver : GridSolver, optional
        Solvability oracle; a default GridSolver if omitted.
    rng : np.random.Generator, optional
        Source of randomness for the cell draws.
    seed : int, optional
        Seed for a fresh Generator (alternative to `rng`).
    max_draws : int, optional
        Cap on random cell draws per carve; default 100 draws per cell
        (8100). Reaching it ends the carve with complete=False.
    """
    MIN_GIVENS: int = 17
    _DRAWS_PER_CELL: int = 100

    def __init__(self,
                 solver: Optional[GridSolver] = None,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 max_draws: Optional[int] = None) -> None:
        if max_draws is not None and max_draws < 1:
            raise ValueError(f"max_draws must be positive; submitted: {max_draws}")
        self.solver: GridSolver = solver if solver is not None else GridSolver()
        self.rng: np.random.Generator = _resolve_rng(rng, seed)
        self.max_draws: int = max_draws if max_draws is not None else self._DRAWS_PER_CELL * Grid._SIZE


    @classmethod
    def max_blanks(cls) -> int:
        return Grid._SIZE - cls.MIN_GIVENS


    def carve(self, solution: Grid, k_blanks: int) -> CarveResult:
        """
        Blanks `k_blanks` cells of a clone of `solution`.

        Each draw picks a cell uniformly at random. Empty cells are simply
        re-rolled; a filled cell is blanked and kept blank only if the
        solver still solves the entire grid, otherwise its value is put back.

        Parameters
        ----------
        solution : Grid
            A solved grid; it is not modified.
        k_blanks : int
            Number of cells to blank, 0 - 64 (at least MIN_GIVENS givens stay).

        Returns
        -------
        CarveResult

        Raises
        ------
        ValueError
            If `solution` is not solved or `k_blanks` is out of range.

        Warns
        -----
        UserWarning
            If the draw cap is reached before `k_blanks` removals.
        """
        if not solution.is_solved():
            raise ValueError("Only solved grids can be carved!")
        if not 0 <= k_blanks <= self.max_blanks():
            raise ValueError(f"k_blanks must lie in 0 - {self.max_blanks()} "
                             f"(at least {self.MIN_GIVENS} givens); submitted: {k_blanks}")

        puzzle = solution.copy()
        history: List[CarveStep] = []
        removed, draws = 0, 0

        while removed < k_blanks and draws < self.max_draws:
            draws += 1
            cell = self._draw_cell()
            old_val = puzzle[cell]
            if old_val == 0:
                continue

            puzzle[cell] = 0
            accepted = self.solver.is_solvable(puzzle)
            if accepted:
                removed += 1
            else:
                puzzle[cell] = old_val
            history.append(CarveStep(cell.row, cell.col, old_val, accepted))

        complete = removed == k_blanks
        if not complete:
            warnings.warn(f"Could not reach target removals: {removed} of {k_blanks} "
                          f"blanks after {draws} draws.", UserWarning)

        return CarveResult(puzzle=puzzle,
                           solution=solution.copy(),
                           target=k_blanks,
                           removed=removed,
                           draws=draws,
                           complete=complete,
                           history=history)


    def _draw_cell(self) -> Cell:
        row, col = self.rng.integers(0, 9, size=2)
        return Cell(row=int(row), col=int(col))



    """ BATCH """

    @staticmethod
    def carve_series(how_many: int = 100,
                     k_blanks: int = 50,
                     seed: Optional[int] = None,
                     solver: Optional[GridSolver] = None
                     ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Generates a series of fresh grids and carves one puzzle from each.

        Parameters
        ----------
        how_many : int, optional
            Number of puzzles. Default is 100.
        k_blanks : int, optional
            Blanks per puzzle. Default is 50.
        seed : int, optional
            Seed for the whole series; generator and carver share one
            Generator, so a seed reproduces the series.
        solver : GridSolver, optional
            Oracle handed to the carver.

        Returns
        -------
        (puzzles, solutions) : Tuple[np.ndarray, np.ndarray]
            Two (how_many, 81)-shaped uint8 arrays, row i of `puzzles`
            carved from row i of `solutions`. Puzzles that missed the
            target are included as they are (a warning is issued for each).
        """
        if how_many < 0:
            raise ValueError(f"how_many must not be negative; submitted: {how_many}")
        rng = np.random.default_rng(seed)
        generator = GridGenerator(rng=rng)
        carver = PuzzleCarver(solver=solver, rng=rng)

        puzzles = np.empty((how_many, Grid._SIZE), dtype=np.uint8)
        solutions = np.empty((how_many, Grid._SIZE), dtype=np.uint8)

        for iteration in tqdm(range(how_many),
                              desc=f"Carving grids with {k_blanks} blanks"):
            result = carver.carve(generator.generate(), k_blanks)
            puzzles[iteration] = result.puzzle.grid_toArray()
            solutions[iteration] = result.solution.grid_toArray()

        return puzzles, solutions
