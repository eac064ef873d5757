"""
Move selection: dispatch on the difficulty tier.
"""
from __future__ import annotations

import logging
import random
import time
from typing import Dict, Optional

from .board import Board, Mark
from .difficulty import Tier, validate_smarts
from .errors import NoMoveAvailableError
from .rails import RailSet
from .strategies import EasyStrategy, GeniusStrategy, SmartStrategy, Strategy


class MoveSelector:
    """Picks the computer's cell; never marks the board itself.

    Each selector owns its random generator, seeded from a high-resolution
    clock unless ``seed`` (or an explicit ``rng``) is given.
    """

    def __init__(
        self,
        computer_mark: Mark = Mark.O,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        if computer_mark is Mark.EMPTY:
            raise ValueError("Computer must play X or O")
        if rng is None:
            rng = random.Random(time.perf_counter_ns() if seed is None else seed)
        self.computer_mark = computer_mark
        self.rng = rng
        self._strategies: Dict[Tier, Strategy] = {
            Tier.EASY: EasyStrategy(computer_mark, rng),
            Tier.SMART: SmartStrategy(computer_mark, rng),
            Tier.GENIUS: GeniusStrategy(computer_mark, rng),
        }

    def strategy_for(self, smarts: int) -> Strategy:
        return self._strategies[Tier.from_smarts(smarts)]

    def select_move(self, board: Board, smarts: int, rails: Optional[RailSet] = None) -> int:
        validate_smarts(smarts)
        if board.is_full():
            raise NoMoveAvailableError(
                "No empty cell left; check for a draw or win before asking for a move"
            )
        if rails is None:
            rails = RailSet(board)
        tier = Tier.from_smarts(smarts)
        idx = self._strategies[tier].choose(board, rails)
        logging.debug("tier=%s smarts=%d mark=%s move=%d board=%s",
                      tier.value, smarts, self.computer_mark.value, idx, board.to_string())
        return idx
