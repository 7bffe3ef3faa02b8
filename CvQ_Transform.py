#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CarveQ_Transform

Created in October 2026

@author: CarveQ contributors

Sudoku Grids, Part B: symmetry operations.

Every operation below maps a valid grid onto a valid grid:
    -- swapping two rows (columns) inside the same band keeps each subgrid
       populated with the same values,
    -- swapping two whole bands does the same one level up,
    -- rotating by multiples of 90 degrees maps rows to columns and
       subgrids to subgrids.
The primitives mutate the Grid they are given; GridScrambler chains them
into the randomised sequence used by the generator.
"""

from __future__ import annotations
import numpy as np
from typing import Optional, Tuple

from CvQ_Grid import Grid
from utilFunX import _resolve_rng


BAND_SIZE: int = 3
N_BANDS: int = 3



def _band_of(idx: int) -> int:
    if not 0 <= idx < BAND_SIZE * N_BANDS:
        raise ValueError(f"Invalid row/column index {idx} (choose 0 - {BAND_SIZE * N_BANDS - 1})")
    return idx // BAND_SIZE


def _check_band(band: int) -> None:
    if not 0 <= band < N_BANDS:
        raise ValueError(f"Invalid band number {band} (choose 0 - {N_BANDS - 1})")



""" A.    PRIMITIVES """

def swap_rows(grid: Grid, r1: int, r2: int) -> None:
    """ exchanges rows r1 and r2; both must lie in the same band """
    if _band_of(r1) != _band_of(r2):
        raise ValueError(f"Rows {r1} and {r2} lie in different bands!")
    arr = grid.grid_toArray((9, 9))
    arr[[r1, r2], :] = arr[[r2, r1], :]
    grid.insert(arr)


def swap_cols(grid: Grid, c1: int, c2: int) -> None:
    """ exchanges columns c1 and c2; both must lie in the same band """
    if _band_of(c1) != _band_of(c2):
        raise ValueError(f"Columns {c1} and {c2} lie in different bands!")
    arr = grid.grid_toArray((9, 9))
    arr[:, [c1, c2]] = arr[:, [c2, c1]]
    grid.insert(arr)


def swap_rowBands(grid: Grid, b1: int, b2: int) -> None:
    """ exchanges row bands b1 and b2 (0 = rows 0-2, 1 = rows 3-5, 2 = rows 6-8), index for index """
    _check_band(b1)
    _check_band(b2)
    arr = grid.grid_toArray((9, 9))
    band_1 = slice(b1 * BAND_SIZE, (b1 + 1) * BAND_SIZE)
    band_2 = slice(b2 * BAND_SIZE, (b2 + 1) * BAND_SIZE)
    arr[band_1, :], arr[band_2, :] = arr[band_2, :].copy(), arr[band_1, :].copy()
    grid.insert(arr)


def swap_colBands(grid: Grid, b1: int, b2: int) -> None:
    """ exchanges column bands b1 and b2, index for index """
    _check_band(b1)
    _check_band(b2)
    arr = grid.grid_toArray((9, 9))
    band_1 = slice(b1 * BAND_SIZE, (b1 + 1) * BAND_SIZE)
    band_2 = slice(b2 * BAND_SIZE, (b2 + 1) * BAND_SIZE)
    arr[:, band_1], arr[:, band_2] = arr[:, band_2].copy(), arr[:, band_1].copy()
    grid.insert(arr)


def rotate(grid: Grid, quarter_turns: int = 1) -> None:
    """
    rotate the grid clockwise by `quarter_turns` x 90 degrees.

    Parameters
    ----------
    quarter_turns : int, optional
        - 0: identity
        - 1: 90° clockwise (default)
        - 2: 180°
        - 3: 270° clockwise (= 90° counter-clockwise)
        Taken modulo 4.

    Notes
    -----
    np.rot90 turns counter-clockwise for positive k, hence the sign flip.
    """
    arr = grid.grid_toArray((9, 9))
    grid.insert(np.rot90(arr, k=-(quarter_turns % 4)))



""" B.    RANDOMISED SEQUENCE """

class GridScrambler:
    """
    Applies the randomised symmetry sequence to a valid grid:

        1. `repeats` same-band row swaps in each of the three row bands,
        2. `repeats` same-band column swaps in each of the three column bands,
        3. `repeats` row-band swaps,
        4. `repeats` column-band swaps,
        5. one rotation, uniformly chosen from 0°, 90°, 180°, 270°.

    All randomness comes from one numpy Generator, either passed in as `rng`
    or created from `seed`; equal seeds give equal sequences.
    """
    _REPEATS: int = 5

    def __init__(self,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 repeats: Optional[int] = None):
        if repeats is None:
            repeats = self._REPEATS
        if repeats < 0:
            raise ValueError(f"repeats must not be negative; submitted: {repeats}")
        self.rng: np.random.Generator = _resolve_rng(rng, seed)
        self.repeats: int = repeats


    def _two_distinct(self, low: int) -> Tuple[int, int]:
        """ two different indices from low .. low + BAND_SIZE - 1 """
        i, j = self.rng.choice(BAND_SIZE, size=2, replace=False)
        return low + int(i), low + int(j)


    def shuffle_rowsWithinBands(self, grid: Grid) -> None:
        for band in range(N_BANDS):
            for _ in range(self.repeats):
                swap_rows(grid, *self._two_distinct(band * BAND_SIZE))

    def shuffle_colsWithinBands(self, grid: Grid) -> None:
        for band in range(N_BANDS):
            for _ in range(self.repeats):
                swap_cols(grid, *self._two_distinct(band * BAND_SIZE))

    def shuffle_rowBands(self, grid: Grid) -> None:
        for _ in range(self.repeats):
            swap_rowBands(grid, *self._two_distinct(0))

    def shuffle_colBands(self, grid: Grid) -> None:
        for _ in range(self.repeats):
            swap_colBands(grid, *self._two_distinct(0))

    def random_rotate(self, grid: Grid) -> int:
        """ rotates by a uniformly drawn number of quarter turns (0 - 3) and returns it """
        quarter_turns = int(self.rng.integers(0, 4))
        rotate(grid, quarter_turns)
        return quarter_turns


    def scramble(self, grid: Grid) -> Grid:
        """ runs the full sequence on `grid` (in place) and returns it """
        self.shuffle_rowsWithinBands(grid)
        self.shuffle_colsWithinBands(grid)
        self.shuffle_rowBands(grid)
        self.shuffle_colBands(grid)
        self.random_rotate(grid)
        return grid
