"""
Move strategies for the three tiers.

Strategies are stateless apart from the random generator they are handed;
they read the board on every call and never mark it.
"""
from __future__ import annotations

import random
from typing import Optional

from .board import Board, Mark
from .rails import RailSet
from .solver import best_move
from .tactics import first_completing_cell, first_open_corner, open_center

WIN_CHANCE = 0.3


class Strategy:
    def __init__(self, computer: Mark, rng: random.Random) -> None:
        self.computer = computer
        self.opponent = computer.opponent()
        self.rng = rng

    def choose(self, board: Board, rails: RailSet) -> int:
        raise NotImplementedError

    def random_empty(self, board: Board) -> int:
        return self.rng.choice(board.empty_cells())


class GeniusStrategy(Strategy):
    """Full minimax; wins when the opponent errs, otherwise draws."""

    def choose(self, board: Board, rails: RailSet) -> int:
        idx, _ = best_move(board.snapshot(), self.computer)
        return idx


class SmartStrategy(Strategy):
    """Win, else block, else center, else a corner, else anything."""

    def choose(self, board: Board, rails: RailSet) -> int:
        for pick in (
            first_completing_cell(rails, self.computer),
            first_completing_cell(rails, self.opponent),
            open_center(board),
            first_open_corner(board),
        ):
            if pick is not None:
                return pick
        return self.random_empty(board)


class EasyStrategy(Strategy):
    """Random, with a WIN_CHANCE shot at spotting its own winning cell."""

    def choose(self, board: Board, rails: RailSet) -> int:
        win: Optional[int] = None
        if self.rng.random() < WIN_CHANCE:
            win = first_completing_cell(rails, self.computer)
        if win is not None:
            return win
        return self.random_empty(board)
