#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CarveQ_Display

Created in October 2026

@author: CarveQ contributors

Console rendering of grids and the command line entry point: generate one
full grid, print it, carve a puzzle from it, print that too.
"""

from __future__ import annotations
import argparse
from typing import List, Optional, Sequence

from CvQ_Grid import Grid
from CvQ_Generator import GridGenerator
from CvQ_Carver import PuzzleCarver



def render_grid(grid: Grid, framed: bool = False) -> str:
    """
    Human-readable rendering of `grid`, one line per row; empty cells are
    blank.

    Parameters
    ----------
    framed : bool, default=False
        False: every cell in a 4-wide field, no borders.
        True:  3 x 3 boxes separated by '|' and dashed lines.
    """
    if framed:
        return _render_framed(grid)
    lines: List[str] = []
    for row in grid:
        lines.append("".join(f"{' ' if v == 0 else v:>4}" for v in row.tolist()))
    return "\n".join(lines)


def _render_framed(grid: Grid) -> str:
    grdLen: int = (grid.DIMENSION * 2 + grid.BASE_NUMBER * 2 + 1)
    lines: List[str] = ["-" * grdLen]
    for i, row in enumerate(grid):
        out = "| "
        for u, v in enumerate(row.tolist()):
            out += ("." if v == 0 else str(v)) + " "
            if u % grid.BASE_NUMBER == grid.BASE_NUMBER - 1:
                out += "| "
        lines.append(out.rstrip())
        if (i + 1) % grid.BASE_NUMBER == 0:
            lines.append("-" * grdLen)
    return "\n".join(lines)


def showGrid(grid: Grid, framed: bool = False) -> None:
    """ prints out the grid """
    print(render_grid(grid, framed=framed))
    print()



def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate a full Sudoku grid and carve a solvable puzzle from it.")
    ap.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    ap.add_argument("--blanks", type=int, default=50,
                    help=f"cells to blank (0 - {PuzzleCarver.max_blanks()})")
    ap.add_argument("--framed", action="store_true", help="draw box borders")
    args = ap.parse_args(argv)

    if not 0 <= args.blanks <= PuzzleCarver.max_blanks():
        ap.error(f"--blanks must lie in 0 - {PuzzleCarver.max_blanks()}")

    generator = GridGenerator(seed=args.seed)
    sudoku = generator.generate()
    print("Filled sudoku")
    showGrid(sudoku, framed=args.framed)

    result = PuzzleCarver(rng=generator.rng).carve(sudoku, args.blanks)
    print("To Solve Sudoku")
    showGrid(result.puzzle, framed=args.framed)
    return 0 if result.complete else 1



if __name__ == '__main__':
    raise SystemExit(main())
