#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CarveQ_Grid

Created in October 2026

@author: CarveQ contributors

Sudoku Grids, Part A: the 9 x 9 data model, its geometry, and the
constraint checker.

"""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Union, NamedTuple, Iterator
from dataclasses import dataclass

from utilFunX import (SequenceLike, _to_gridArray, _has_duplicateNonZero,
                      _missing_values, _is_validgrid)

# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *
# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *


@dataclass(frozen=True)
class Cell:
    """
    Grid coordinate with named fields (both 0-based):
        row -- row number, top-down
        col -- column number, left to right
    """
    row: int
    col: int

    @property
    def box(self) -> int:
        """ 0-based number of the 3 x 3 subgrid, counted row-wise """
        return (self.row // 3) * 3 + self.col // 3

    def __str__(self) -> str:
        return f"r{self.row}c{self.col}"


class SubgridBounds(NamedTuple):
    """ row/column span of a subgrid; end indices are exclusive """
    row_start: int
    col_start: int
    row_end: int
    col_end: int


def subgrid_bounds(cell: Cell) -> SubgridBounds:
    """ bounds of the 3 x 3 subgrid containing `cell` """
    row_start: int = (cell.row // 3) * 3
    col_start: int = (cell.col // 3) * 3
    return SubgridBounds(row_start, col_start, row_start + 3, col_start + 3)


CellLike = Union[Cell, Tuple[int, int]]


def _as_cell(cell: CellLike) -> Cell:
    if isinstance(cell, Cell):
        return cell
    row, col = cell
    return Cell(row=int(row), col=int(col))


# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *
# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

class Grid:
    """
        Provides a classical 9 x 9 Sudoku grid backed by a numpy int8 array;
        0 marks an empty cell, 1 - 9 a filled one.

           An illustration; the following (solved) grid:

                *************************************
                * 2 | 6 | 4 * 3 | 8 | 9 * 5 | 1 | 7 *
                *-----------*-----------*-----------*
                * 5 | 1 | 7 * 6 | 4 | 2 * 9 | 8 | 3 *
                *-----------*-----------*-----------*
                * 3 | 8 | 9 * 7 | 5 | 1 * 4 | 6 | 2 *
                *************************************
                * 4 | 2 | 6 * 5 | 1 | 7 * 3 | 9 | 8 *
                   ...

               has a.o. the following coordinates (0-based):

                gridRow(0):                     [2, 6, 4, 3, 8, 9, 5, 1, 7]
                gridCol(1):                     [6, 1, 8, 2, ...]
                gridBox(subgrid_bounds(Cell(0, 7))): [5, 1, 7, 9, 8, 3, 4, 6, 2]

           Cells are addressed by `Cell(row, col)` or, for convenience, a
           plain (row, col) tuple; there is no (col, row) form anywhere.

           The class provides
             -- geometry: rows, columns and subgrids as flat value arrays,
             -- the constraint checker: per-cell legality, candidates,
                empty cells, consistency and solved-status,
             -- copying / (re-)insertion of values.
           Symmetry operations live in CvQ_Transform.
    """

    """ Classical 9 X 9 Sudoku at the class level """
    _BASE_NUMBER: int = 3
    _DIMENSION: int = _BASE_NUMBER**2
    _SIZE: int = _DIMENSION**2

    def __init__(self, values: Union[SequenceLike, Grid, None] = None):
        if values is None:
            self._arrayGrid = np.zeros(shape=(self.DIMENSION, self.DIMENSION), dtype=np.int8)
        elif isinstance(values, Grid):
            self._arrayGrid = values._arrayGrid.copy()
        else:
            self._arrayGrid = _to_gridArray(values, self.DIMENSION)


    def __str__(self) -> str:
        """Returns a human-readable summary of the current grid state."""
        return (
            f"Grid[\n"
            f"  dimension       : {self.DIMENSION} X {self.DIMENSION} \n"
            f"  empty cells     : {self.count_empty()}\n"
            f"  is consistent   : {self.gridCheckZero()}\n"
            f"  is solved       : {self.is_solved()}\n"
            f"]"
        )

    def __repr__(self) -> str:
        return f"Grid('{self.grid_toString()}')"

    def __eq__(self, other: object) -> bool:
        """Checks strict equality based on grid array contents."""
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._arrayGrid, other._arrayGrid)

    __hash__ = None

    def __getitem__(self, cell: CellLike) -> int:
        cell = self._checked(cell)
        return int(self._arrayGrid[cell.row, cell.col])

    def __setitem__(self, cell: CellLike, value: int) -> None:
        cell = self._checked(cell)
        if not 0 <= int(value) <= 9:
            raise ValueError(f"Invalid value {value} (choose 0 - 9)")
        self._arrayGrid[cell.row, cell.col] = value

    def __iter__(self) -> Iterator[np.ndarray]:
        """ yields the rows """
        return iter(self.grid_toArray((self.DIMENSION, self.DIMENSION)))


    @property
    def BASE_NUMBER(self) -> int:
        return self._BASE_NUMBER

    @property
    def DIMENSION(self) -> int:
        return self._DIMENSION

    @property
    def SIZE(self) -> int:
        return self._SIZE


    def _checked(self, cell: CellLike) -> Cell:
        cell = _as_cell(cell)
        if not (0 <= cell.row < self.DIMENSION and 0 <= cell.col < self.DIMENSION):
            raise ValueError(f"Invalid cell {cell} (choose row/col 0 - {self.DIMENSION - 1})")
        return cell


# * * * * * * * * * * * * * *  INVENTORY  * * * * * * * * * * * * * * * * * * *

    """ 0.    INSERT / COPY """

    @classmethod
    def from_grid(cls, grid: Union[SequenceLike, Grid]) -> Grid:
        """
        Class method to instantiate a Grid object from a given sequence/array.

        Parameters
        ----------
        grid : SequenceLike
            9 x 9 nested sequence, flat sequence of 81 values, numpy array,
            or an 81-character string ('0' or '.' for empty cells), or another
            Grid (copied).

        Returns
        -------
        Grid
            A new instance holding `grid`.

        Raises
        ------
        ValueError
            If the input does not describe 81 integer values in 0 - 9.
        """
        return cls(grid)


    def insert(self, seq: SequenceLike) -> None:
        """
        Replaces all values of this grid with `seq` (same formats as
        `from_grid`); the input is validated before anything is overwritten.
        """
        self._arrayGrid = _to_gridArray(seq, self.DIMENSION)


    def copy(self) -> Grid:
        """ independent clone of this grid """
        clone = Grid.__new__(Grid)
        clone._arrayGrid = self._arrayGrid.copy()
        return clone


    def grid_toArray(self, shape=(81,)) -> np.ndarray:
        """
        returns a copy of the current grid as a numpy array;

        Parameter
        ----------
        shape : Tuple[int]
            must be reshapeable in accordance with self.SIZE.
        """
        return self._arrayGrid.copy().reshape(shape)


    def grid_toString(self) -> str:
        """ the 81 values row-wise as one string, '0' for empty cells """
        return "".join(map(str, self._arrayGrid.flatten().tolist()))


    def to_list(self) -> List[List[int]]:
        """ the rows as nested lists of plain ints """
        return self._arrayGrid.tolist()



    """ A.    GEOMETRY """

    def gridRow(self, r: int) -> np.ndarray:
        """ returns the values in row r as array """
        if r < 0 or r >= self.DIMENSION:
            raise ValueError(f"Invalid row number (choose 0 - {self.DIMENSION - 1})")
        return self._arrayGrid[r, :].copy()


    def gridCol(self, c: int) -> np.ndarray:
        """ returns the values in column c as array """
        if c < 0 or c >= self.DIMENSION:
            raise ValueError(f"Invalid column number (choose 0 - {self.DIMENSION - 1})")
        return self._arrayGrid[:, c].copy()


    def gridBox(self, bounds: SubgridBounds) -> np.ndarray:
        """
        Returns the values of the subgrid spanned by `bounds` as (flattened)
        array, row-wise; in order to re-box-ify: .reshape(3, 3)
        """
        row_start, col_start, row_end, col_end = bounds
        if (row_start % self.BASE_NUMBER or col_start % self.BASE_NUMBER
                or row_end - row_start != self.BASE_NUMBER
                or col_end - col_start != self.BASE_NUMBER
                or not 0 <= row_start < self.DIMENSION
                or not 0 <= col_start < self.DIMENSION):
            raise ValueError(f"Invalid subgrid bounds: {tuple(bounds)}")
        return self._arrayGrid[row_start:row_end, col_start:col_end].flatten()


    def units_of(self, cell: CellLike) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """ row, column and subgrid values of `cell` """
        cell = self._checked(cell)
        return (self.gridRow(cell.row),
                self.gridCol(cell.col),
                self.gridBox(subgrid_bounds(cell)))



    """ B.    CHECK the GRID """

    def is_cellValid(self, cell: CellLike) -> bool:
        """
        True iff row, column and subgrid of `cell` are each free of duplicate
        non-zero values. Meant as a legality check right after a tentative
        placement; it does not inspect the rest of the grid.
        """
        return not any(_has_duplicateNonZero(unit) for unit in self.units_of(cell))


    def candidates(self, cell: CellLike) -> List[int]:
        """
        Values that could legally occupy `cell` right now: the intersection
        of the values missing from its row, column and subgrid (ascending).
        """
        row, col, box = self.units_of(cell)
        in_col = set(_missing_values(col))
        in_box = set(_missing_values(box))
        return [v for v in _missing_values(row) if v in in_col and v in in_box]


    def emptyCells(self) -> List[Cell]:
        """
        All empty cells in row-major order (row outer, column inner); the
        backtracking solver depends on this order.
        """
        return [Cell(row=int(r), col=int(c))
                for r, c in np.argwhere(self._arrayGrid == 0)]


    def count_empty(self) -> int:
        return int(np.count_nonzero(self._arrayGrid == 0))


    def gridCheckZero(self) -> bool:
        """
        Checks whether the current grid is still consistent:
        - No digit appears more than once in any row, column, or box.
        - Zeros (empty cells) are ignored.
        Returns
        -------
        bool
            True if no violations are found; False otherwise.
        """
        for i in range(self.DIMENSION):
            if _has_duplicateNonZero(self._arrayGrid[i, :]):
                return False
            if _has_duplicateNonZero(self._arrayGrid[:, i]):
                return False

        for box_row in range(0, self.DIMENSION, self.BASE_NUMBER):
            for box_col in range(0, self.DIMENSION, self.BASE_NUMBER):
                box = self._arrayGrid[box_row:box_row + self.BASE_NUMBER,
                                      box_col:box_col + self.BASE_NUMBER].flatten()
                if _has_duplicateNonZero(box):
                    return False
        return True


    def is_solved(self) -> bool:
        """
        True iff the grid has no empty cell and every row, column and subgrid
        contains each of 1 - 9 exactly once.
        """
        if self.emptyCells():
            return False
        return _is_validgrid(self._arrayGrid, basenumber=self.BASE_NUMBER)


    @classmethod
    def is_validGrid(cls, grid: SequenceLike) -> bool:
        """ solved-check for any grid-like input """
        return cls.from_grid(grid).is_solved()



# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

#     Test grids for illustration and testing

grd_solved = (2, 6, 4, 3, 8, 9, 5, 1, 7,
              5, 1, 7, 6, 4, 2, 9, 8, 3,
              3, 8, 9, 7, 5, 1, 4, 6, 2,
              4, 2, 6, 5, 1, 7, 3, 9, 8,
              9, 3, 8, 2, 6, 4, 1, 7, 5,
              1, 7, 5, 8, 9, 3, 6, 2, 4,
              6, 4, 2, 1, 3, 8, 7, 5, 9,
              7, 5, 3, 9, 2, 6, 8, 4, 1,
              8, 9, 1, 4, 7, 5, 2, 3, 6)

grd_puzzle = ((5, 3, 0, 0, 7, 0, 0, 0, 0),
              (6, 0, 0, 1, 9, 5, 0, 0, 0),
              (0, 9, 8, 0, 0, 0, 0, 6, 0),
              (8, 0, 0, 0, 6, 0, 0, 0, 3),
              (4, 0, 0, 8, 0, 3, 0, 0, 1),
              (7, 0, 0, 0, 2, 0, 0, 0, 6),
              (0, 6, 0, 0, 0, 0, 2, 8, 0),
              (0, 0, 0, 4, 1, 9, 0, 0, 5),
              (0, 0, 0, 0, 8, 0, 0, 7, 9))
