"""
Win/draw detection over a board and its rails.

Callers must ask is_draw() before acting on a win; the two are exclusive.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from .board import Board, Mark
from .rails import Rail, RailSet


class Outcome(str, Enum):
    NONE = "none"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"


class OutcomeDetector:
    def __init__(self, board: Board, rails: Optional[RailSet] = None) -> None:
        self.board = board
        self.rails = rails if rails is not None else RailSet(board)

    def winning_rail(self) -> Optional[Rail]:
        for rail in self.rails:
            if rail.is_winner():
                return rail
        return None

    def find_winning_mark(self) -> Optional[Mark]:
        rail = self.winning_rail()
        return rail.winning_mark() if rail is not None else None

    def is_draw(self) -> bool:
        return self.find_winning_mark() is None and self.board.is_full()

    def outcome(self) -> Outcome:
        if self.is_draw():
            return Outcome.DRAW
        w = self.find_winning_mark()
        if w is Mark.X:
            return Outcome.X_WINS
        if w is Mark.O:
            return Outcome.O_WINS
        return Outcome.NONE
