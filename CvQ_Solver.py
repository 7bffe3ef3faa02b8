#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CarveQ_Solver

Created in October 2026

@author: CarveQ contributors

Hybrid solver: naked-single propagation followed by depth-first
backtracking over an explicit stack of (cell, value) frames.

The solver never touches the grid it is given; it works on a clone and
reports a verdict (plus the worked clone) in a SolveResult.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from CvQ_Grid import Grid, Cell



@dataclass
class SolveResult:
    """
    Outcome of one solve:
        solved     -- verdict; True iff `grid` holds a complete valid solution
        grid       -- the worked clone; search garbage when solved is False
        propagated -- cells filled by naked-single propagation
        steps      -- backtracking steps (one per value tried or frame popped)
        aborted    -- the step cap was hit before the search finished
    """
    solved: bool
    grid: Grid
    propagated: int = 0
    steps: int = 0
    aborted: bool = False

    def __bool__(self) -> bool:
        return self.solved

    def __str__(self) -> str:
        return (
            f"SolveResult[\n"
            f"  solved      : {self.solved}\n"
            f"  propagated  : {self.propagated}\n"
            f"  steps       : {self.steps}\n"
            f"  aborted     : {self.aborted}\n"
            f"]"
        )



class _UnitLedger:
    """
    aux-class
    Values present per row, column and subgrid, kept in step with the
    backtracking placements so that legality is a set lookup instead of a
    rescan of three units.
    """

    def __init__(self, grid: Grid) -> None:
        self.rows: List[Set[int]] = [set(grid.gridRow(i).tolist()) - {0} for i in range(9)]
        self.cols: List[Set[int]] = [set(grid.gridCol(i).tolist()) - {0} for i in range(9)]
        self.boxes: List[Set[int]] = [set() for _ in range(9)]
        for r in range(9):
            for c in range(9):
                if grid[r, c]:
                    self.boxes[(r // 3) * 3 + c // 3].add(grid[r, c])

    def fits(self, cell: Cell, value: int) -> bool:
        """ equivalent to placing `value` and asking Grid.is_cellValid on a consistent grid """
        return (value not in self.rows[cell.row]
                and value not in self.cols[cell.col]
                and value not in self.boxes[cell.box])

    def place(self, cell: Cell, value: int) -> None:
        self.rows[cell.row].add(value)
        self.cols[cell.col].add(value)
        self.boxes[cell.box].add(value)

    def release(self, cell: Cell, value: int) -> None:
        self.rows[cell.row].discard(value)
        self.cols[cell.col].discard(value)
        self.boxes[cell.box].discard(value)



class GridSolver:
    """
    Solves 9 x 9 grids; doubles as the solvability oracle of the carver.

    Parameters
    ----------
    reset_origin : bool, default=False
        If True, cell (row 0, col 0) is blanked after propagation, before
        the backtracking list is built, whether or not it was a given. This
        reproduces the behaviour of the classic generator: propagation
        skips cells without candidates instead of giving up, and the
        consistency check only looks at the grid once the origin is blank.
        A given at that cell may thus be overwritten by the search, and a
        conflict involving it does not make the grid unsolvable.
    max_steps : int, optional
        Upper bound on backtracking steps; None (default) searches until
        the space is exhausted.
    """

    def __init__(self, reset_origin: bool = False, max_steps: Optional[int] = None) -> None:
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must not be negative; submitted: {max_steps}")
        self.reset_origin: bool = reset_origin
        self.max_steps: Optional[int] = max_steps


    def solve(self, grid: Grid) -> SolveResult:
        """
        Attempts to solve a clone of `grid`.

        Returns
        -------
        SolveResult
            `.solved` is the verdict, `.grid` the worked clone.
        """
        work = grid.copy()

        if not self.reset_origin and not work.gridCheckZero():
            return SolveResult(solved=False, grid=work)

        propagated, dead_end = self._propagate(work, halt_on_deadEnd=not self.reset_origin)
        if dead_end:
            return SolveResult(solved=False, grid=work, propagated=propagated)

        if self.reset_origin:
            work[0, 0] = 0
            # duplicates left among the remaining values cannot be searched away
            if not work.gridCheckZero():
                return SolveResult(solved=False, grid=work, propagated=propagated)

        steps, aborted = 0, False
        if work.count_empty():
            steps, aborted = self._backtrack(work)

        return SolveResult(solved=(not aborted) and work.is_solved(),
                           grid=work,
                           propagated=propagated,
                           steps=steps,
                           aborted=aborted)


    def is_solvable(self, grid: Grid) -> bool:
        """ oracle form of solve(): the verdict only, `grid` stays untouched """
        return self.solve(grid).solved


    """ Phase 1: PROPAGATION """

    @staticmethod
    def _propagate(work: Grid, halt_on_deadEnd: bool = True) -> Tuple[int, bool]:
        """
        Fills naked singles until a full pass changes nothing.

        Parameters
        ----------
        halt_on_deadEnd : bool, default=True
            If False, empty cells without candidates are skipped and
            propagation carries on.

        Returns
        -------
        (filled, dead_end)
            number of cells filled; dead_end is True if some empty cell has
            no candidate left, in which case no solution exists.
        """
        filled = 0
        found = True
        while found:
            found = False
            for cell in work.emptyCells():
                options = work.candidates(cell)
                if not options:
                    if halt_on_deadEnd:
                        return filled, True
                    continue
                if len(options) == 1:
                    work[cell] = options[0]
                    filled += 1
                    found = True
        return filled, False


    """ Phase 2: BACKTRACKING """

    def _backtrack(self, work: Grid) -> Tuple[int, bool]:
        """
        Depth-first search over the empty cells of `work`, in row-major
        order. The stack holds one (cell, value) frame per placed cell;
        frame k always belongs to empties[k].

        Each step tries the next legal value above the last one tried for
        the current cell. A hit pushes a frame and moves on; running past 9
        pops the previous frame and resumes that cell above its value. An
        empty stack with nothing left to try means the space is exhausted.
        The frames are written into `work` once the loop ends.

        Returns
        -------
        (steps, aborted)
        """
        empties: List[Cell] = work.emptyCells()
        ledger = _UnitLedger(work)
        stack: List[Tuple[Cell, int]] = []
        last_tried: int = 0
        steps: int = 0

        while len(stack) < len(empties):
            if self.max_steps is not None and steps >= self.max_steps:
                return steps, True
            steps += 1

            cell = empties[len(stack)]
            value = self._next_value(ledger, cell, last_tried)

            if value is None:
                if not stack:
                    break
                cell, last_tried = stack.pop()
                ledger.release(cell, last_tried)
                continue

            ledger.place(cell, value)
            stack.append((cell, value))
            last_tried = 0

        for cell, value in stack:
            work[cell] = value
        return steps, False


    @staticmethod
    def _next_value(ledger: _UnitLedger, cell: Cell, last_tried: int) -> Optional[int]:
        for value in range(last_tried + 1, 10):
            if ledger.fits(cell, value):
                return value
        return None



def solve_grid(grid: Grid) -> Optional[Grid]:
    """ convenience wrapper: the solved clone of `grid`, or None if there is no solution """
    result = GridSolver().solve(grid)
    return result.grid if result.solved else None
