#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CarveQ helper functions

Created in October 2026

@author: CarveQ contributors

Unit-level checks (duplicates, missing values, full-grid validity) and input
normalisation shared by the grid, the solver and the carver.
"""

import numpy as np
from typing import Set, Optional, TypeVar, Union, Sequence, List


V = TypeVar('V', str, int)

# Allows string input for convenience (e.g. "530070000600195000...") -- parsed via _str_toSeq
SequenceLike = Union[Sequence[V], np.ndarray]

DIGITS: Set[int] = set(range(1, 10))



def _str_toSeq(grid_str: str) -> np.ndarray:
    """
    Converts a grid string to a sequence of integers; '.' and '0' denote
    empty cells, whitespace is ignored.

    Parameters
    ----------
    grid_str : str
        e.g. "53..7....6..195..." (81 characters once whitespace is removed)

    Returns
    -------
    np.ndarray
        Flat integer array.

    Raises
    ------
    ValueError
        If the string contains anything but digits and dots.
    """
    chars = [c for c in grid_str if not c.isspace()]
    if not all(c.isdigit() or c == '.' for c in chars):
        raise ValueError("The grid string may only contain digits and '.' for empty cells!")
    return np.array([0 if c == '.' else int(c)
                     for c in chars],
                    dtype=np.int64)



def _type_checker(test_array: np.ndarray) -> None:
    """ raises ValueError unless the array holds integers in 0..9 """
    if test_array.dtype == bool or not np.issubdtype(test_array.dtype, np.integer):
        raise ValueError(
            f"Invalid dtype for a grid: {test_array.dtype}. Expected integer values."
        )
    if test_array.size and (test_array.min() < 0 or test_array.max() > 9):
        raise ValueError("Grid values must lie in the range 0 - 9 (0 = empty cell)!")



def _to_gridArray(seq: SequenceLike, dimension: int = 9) -> np.ndarray:
    """
    Normalises a grid-like input (nested 9 x 9 sequence, flat 81-sequence,
    numpy array, or grid string) into a (dimension, dimension) int8 array.
    """
    if isinstance(seq, str):
        seq = _str_toSeq(seq)
    try:
        arr = np.asarray(seq)
    except ValueError:
        raise ValueError("Ragged input cannot be read as a grid!")
    if arr.dtype == object:
        raise ValueError("Ragged input cannot be read as a grid!")

    arr = arr.flatten()
    if arr.shape[0] != dimension**2:
        raise ValueError(f"The sequence submitted does not contain the required number of cells: {dimension**2}")
    if np.issubdtype(arr.dtype, np.floating):
        if not np.all(np.equal(np.mod(arr, 1), 0)):
            raise ValueError("Grid values must be whole numbers!")
        arr = arr.astype(np.int64)

    _type_checker(arr)
    return arr.astype(np.int8).reshape(dimension, dimension)



def _has_duplicateNonZero(values: SequenceLike) -> bool:
    """
    True iff two non-zero entries share a value; zeros stand for 'unknown'
    and never count as duplicates.
    """
    seen: Set[int] = set()
    for v in values:
        v = int(v)
        if v == 0:
            continue
        if v in seen:
            return True
        seen.add(v)
    return False



def _missing_values(values: SequenceLike) -> List[int]:
    """ {1..9} minus the non-zero values present, in ascending order """
    present = {int(v) for v in values}
    return [d for d in range(1, 10) if d not in present]



def _is_validgrid(gridlike: SequenceLike,
                  basenumber: Optional[int] = 3
                  ) -> bool:
    """
    Checks whether the grid is completely filled and valid according to
    Sudoku rules: each digit from 1 to DIMENSION occurs exactly once in
    every row, column, and box.

    Returns
    -------
    bool
        True if the grid is a valid complete Sudoku solution, else False.
    """
    dimension = basenumber**2
    gridlike = np.asarray(gridlike).reshape(dimension, dimension)
    expected = set(range(1, dimension + 1))

    # Check rows and columns
    for i in range(dimension):
        if set(gridlike[i, :].tolist()) != expected:
            return False
        if set(gridlike[:, i].tolist()) != expected:
            return False

    # Check boxes
    for r in range(0, dimension, basenumber):
        for c in range(0, dimension, basenumber):
            box = gridlike[r:r + basenumber, c:c + basenumber].flatten()
            if set(box.tolist()) != expected:
                return False
    return True



def _resolve_rng(rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None) -> np.random.Generator:
    """
    aux-function
    Returns `rng` if given, else a fresh numpy Generator seeded with `seed`
    (None -> OS entropy).
    """
    if rng is not None and seed is not None:
        raise ValueError("Pass either a random generator or a seed, not both!")
    if rng is not None:
        return rng
    return np.random.default_rng(seed)
