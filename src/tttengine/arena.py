"""
Arena: whole games between two tiers, driven through the engine's turn
protocol exactly as a view would drive it.

The engine plays O at ``o_smarts``; a second selector plays X at
``x_smarts``. Openers alternate so neither side always moves first.
"""
from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from .board import Mark
from .engine import GameEngine
from .outcome import Outcome
from .selector import MoveSelector


@dataclass
class MatchReport:
    games: int
    x_smarts: int
    o_smarts: int
    x_wins: int
    o_wins: int
    draws: int
    elapsed_s: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _take_turn(engine: GameEngine, mover: Mark, opponent: MoveSelector, opponent_smarts: int) -> Optional[Outcome]:
    if mover is engine.computer_mark:
        idx = engine.select_computer_move()
    else:
        idx = opponent.select_move(engine.board, opponent_smarts, engine.rails)
    engine.mark_cell(idx, mover)
    engine.increment_tiles_played()
    if engine.check_for_draw():
        return Outcome.DRAW
    if engine.check_for_win():
        return Outcome.X_WINS if engine.winning_player is Mark.X else Outcome.O_WINS
    return None


def play_game(engine: GameEngine, opponent: MoveSelector, opponent_smarts: int,
              opener: Mark = Mark.X) -> Outcome:
    """Play one game on a fresh board; scores accumulate on ``engine``."""
    engine.init_new_game()
    mover = opener
    while True:
        result = _take_turn(engine, mover, opponent, opponent_smarts)
        if result is not None:
            return result
        mover = mover.opponent()


def run_matches(games: int, x_smarts: int, o_smarts: int, seed: Optional[int] = None,
                alternate: bool = True) -> MatchReport:
    if games < 1:
        raise ValueError(f"games must be positive: {games}")
    engine = GameEngine(computer_mark=Mark.O, smarts=o_smarts, seed=seed)
    opponent = MoveSelector(Mark.X, seed=None if seed is None else seed + 1)
    t0 = time.perf_counter()
    for g in range(games):
        opener = Mark.O if alternate and g % 2 else Mark.X
        result = play_game(engine, opponent, x_smarts, opener)
        logging.debug("game=%d opener=%s result=%s", g, opener.value, result.value)
    elapsed = time.perf_counter() - t0
    report = MatchReport(
        games=games,
        x_smarts=x_smarts,
        o_smarts=o_smarts,
        x_wins=engine.x_wins,
        o_wins=engine.o_wins,
        draws=engine.draws,
        elapsed_s=elapsed,
    )
    logging.info("X(%d) vs O(%d): x_wins=%d o_wins=%d draws=%d in %.3fs",
                 x_smarts, o_smarts, report.x_wins, report.o_wins, report.draws, elapsed)
    return report
