"""
Tactics over rails: immediate wins and blocks.

A rail "completes" for a mark when two of its cells hold that mark and the
third is empty. Scans follow the fixed rail order.
"""
from typing import Iterable, List, Optional

from .board import CENTER, CORNERS, Board, Mark
from .rails import Rail


def completing_cells(rails: Iterable[Rail], mark: Mark) -> List[int]:
    cells: List[int] = []
    for rail in rails:
        c = rail.completing_cell(mark)
        if c is not None and c not in cells:
            cells.append(c)
    return cells


def first_completing_cell(rails: Iterable[Rail], mark: Mark) -> Optional[int]:
    for rail in rails:
        c = rail.completing_cell(mark)
        if c is not None:
            return c
    return None


def open_center(board: Board) -> Optional[int]:
    return CENTER if board.cell_at(CENTER) is Mark.EMPTY else None


def first_open_corner(board: Board) -> Optional[int]:
    for c in CORNERS:
        if board.cell_at(c) is Mark.EMPTY:
            return c
    return None
