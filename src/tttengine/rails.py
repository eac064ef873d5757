"""
Rails: the eight winning lines of the board, as index triples.

Order matters: rows, then columns, then diagonals. Every scan that
returns "the first" rail (winner detection, completing cells) uses it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .board import Board, Mark

RAIL_INDICES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)

RAIL_NAMES = ("row1", "row2", "row3", "col1", "col2", "col3", "diag_main", "diag_anti")


def winner_of(cells: Sequence[Mark]) -> Optional[Mark]:
    """First winning mark over RAIL_INDICES, or None."""
    for a, b, c in RAIL_INDICES:
        v = cells[a]
        if v is not Mark.EMPTY and v is cells[b] and v is cells[c]:
            return v
    return None


@dataclass(frozen=True, eq=False)
class Rail:
    board: Board
    indices: Tuple[int, int, int]
    name: str = ""

    def marks(self) -> Tuple[Mark, Mark, Mark]:
        a, b, c = self.indices
        return (self.board.cell_at(a), self.board.cell_at(b), self.board.cell_at(c))

    def count(self, mark: Mark) -> int:
        return self.marks().count(mark)

    def empty_cells(self) -> List[int]:
        return [i for i, m in zip(self.indices, self.marks()) if m is Mark.EMPTY]

    def winning_mark(self) -> Optional[Mark]:
        first, second, third = self.marks()
        if first is not Mark.EMPTY and first is second and first is third:
            return first
        return None

    def is_winner(self) -> bool:
        return self.winning_mark() is not None

    def completing_cell(self, mark: Mark) -> Optional[int]:
        """The empty cell when two cells hold ``mark`` and the third is empty."""
        empties = self.empty_cells()
        if self.count(mark) == 2 and len(empties) == 1:
            return empties[0]
        return None


class RailSet:
    """The eight rails of one board, derived once per game."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self._rails = tuple(
            Rail(board, idx, name) for idx, name in zip(RAIL_INDICES, RAIL_NAMES)
        )

    def __iter__(self) -> Iterator[Rail]:
        return iter(self._rails)

    def __len__(self) -> int:
        return len(self._rails)

    def __getitem__(self, i: int) -> Rail:
        return self._rails[i]
