#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CarveQ_Generator

Created in October 2026

@author: CarveQ contributors

Full-grid generation without search: a closed-form seed grid, scrambled by
the symmetry sequence of CvQ_Transform.
"""

from __future__ import annotations
import numpy as np
from typing import Optional, Sequence, Tuple

from CvQ_Grid import Grid
from CvQ_Transform import GridScrambler
from utilFunX import _resolve_rng



class GridGenerator:
    """
    Builds random valid grids.

    The seed grid writes one permutation of 1 - 9 into every row, each row
    cyclically shifted by its offset in `_ROW_OFFSETS`. Within a band the
    offsets step by 3, so every subgrid receives nine different values;
    across bands they step by 1, so no column repeats a value. The result is
    valid by construction and then scrambled.
    """
    _ROW_OFFSETS: Tuple[int, ...] = (0, 3, 6, 1, 4, 7, 2, 5, 8)

    def __init__(self,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 repeats: Optional[int] = None) -> None:
        self.rng: np.random.Generator = _resolve_rng(rng, seed)
        self.scrambler = GridScrambler(rng=self.rng, repeats=repeats)


    @classmethod
    def seed_grid(cls, numbers: Sequence[int]) -> Grid:
        """
        Seed grid from the permutation `numbers` of 1 - 9.

        Raises
        ------
        ValueError
            If `numbers` is not a permutation of 1 - 9.
        """
        numbers = [int(n) for n in numbers]
        if sorted(numbers) != list(range(1, 10)):
            raise ValueError(f"Seed row must be a permutation of 1 - 9; submitted: {numbers}")

        arr = np.zeros((9, 9), dtype=np.int8)
        for row, offset in enumerate(cls._ROW_OFFSETS):
            arr[row, :] = np.roll(numbers, offset)
        return Grid(arr)


    def generate(self) -> Grid:
        """ a complete, valid, randomised grid """
        numbers = self.rng.permutation(np.arange(1, 10))
        grid = self.seed_grid(numbers)
        return self.scrambler.scramble(grid)



def generate_validGrid(seed: Optional[int] = None,
                       rng: Optional[np.random.Generator] = None) -> Grid:
    """ convenience wrapper: one random valid grid """
    return GridGenerator(rng=rng, seed=seed).generate()
