"""
GameEngine: the object a view talks to.

Turn protocol expected from the caller (a console, a GUI, a test):

    engine.mark_cell(i, human)          # OccupiedCellError -> "tile taken"
    engine.increment_tiles_played()
    if engine.check_for_draw(): ...     # always before check_for_win()
    elif engine.check_for_win(): ...
    else:
        j = engine.select_computer_move()
        engine.mark_cell(j, engine.computer_mark)
        engine.increment_tiles_played()
        ...

The engine never marks cells on its own and never derives the move count
from the board; keeping ``tiles_played`` in step is the caller's job.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from .board import CELL_COUNT, Board, Mark
from .config import EngineConfig
from .difficulty import validate_smarts
from .outcome import OutcomeDetector
from .rails import Rail, RailSet
from .scores import ScoreTracker
from .selector import MoveSelector


class GameStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class GameEngine:
    def __init__(
        self,
        cells: Optional[List[Mark]] = None,
        *,
        computer_mark: Optional[Mark] = None,
        smarts: Optional[int] = None,
        seed: Optional[int] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        cfg = config if config is not None else EngineConfig()
        self.computer_mark = computer_mark if computer_mark is not None else cfg.computer_mark
        self._smarts = validate_smarts(smarts if smarts is not None else cfg.smarts)
        self.selector = MoveSelector(
            self.computer_mark, seed=seed if seed is not None else cfg.seed
        )
        self.scores = ScoreTracker()
        self.init_new_game(cells)

    def init_new_game(self, cells: Optional[List[Mark]] = None) -> Board:
        """Bind a fresh board and rails; running totals are kept.

        Every game, the first one included, starts at NOT_STARTED and
        enters IN_PROGRESS with its first counted tile.
        """
        self.board = Board(cells)
        self.rails = RailSet(self.board)
        self.detector = OutcomeDetector(self.board, self.rails)
        self._tiles_played = 0
        self._winning_player = Mark.EMPTY
        self._winning_rail: Optional[Rail] = None
        self._status = GameStatus.NOT_STARTED
        logging.debug("new game: board=%s smarts=%d", self.board.to_string(), self._smarts)
        return self.board

    @property
    def human_mark(self) -> Mark:
        return self.computer_mark.opponent()

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def tiles_played(self) -> int:
        return self._tiles_played

    def increment_tiles_played(self) -> None:
        self._tiles_played += 1
        if self._status is GameStatus.NOT_STARTED:
            self._status = GameStatus.IN_PROGRESS

    def mark_cell(self, index: int, mark: Mark) -> None:
        self.board.mark(index, mark)

    @property
    def smarts(self) -> int:
        return self._smarts

    @smarts.setter
    def smarts(self, value: int) -> None:
        self._smarts = validate_smarts(value)
        logging.debug("smarts=%d", self._smarts)

    def check_for_draw(self) -> bool:
        """Call before check_for_win(). Counts the draw once per game."""
        if self._status is GameStatus.DRAWN:
            return True
        if self._status is GameStatus.WON:
            return False
        if self.detector.winning_rail() is not None:
            return False
        if self._tiles_played < CELL_COUNT:
            return False
        self._status = GameStatus.DRAWN
        self.scores.record_draw()
        logging.info("draw after %d tiles", self._tiles_played)
        return True

    def check_for_win(self) -> bool:
        """True once a rail is complete. Counts the win once per game."""
        if self._status is GameStatus.WON:
            return True
        if self._status is GameStatus.DRAWN:
            return False
        rail = self.detector.winning_rail()
        if rail is None:
            return False
        winner = rail.winning_mark()
        self._winning_rail = rail
        self._winning_player = winner
        self._status = GameStatus.WON
        self.scores.record_win(winner)
        logging.info("%s wins on %s", winner.value, rail.name)
        return True

    @property
    def winning_player(self) -> Mark:
        """Mark of the winner, EMPTY while nobody has won."""
        return self._winning_player

    @property
    def winning_rail(self) -> Optional[Rail]:
        return self._winning_rail

    def select_computer_move(self) -> int:
        return self.selector.select_move(self.board, self._smarts, self.rails)

    @property
    def x_wins(self) -> int:
        return self.scores.x_wins

    @property
    def o_wins(self) -> int:
        return self.scores.o_wins

    @property
    def draws(self) -> int:
        return self.scores.draws
