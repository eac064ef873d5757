"""Running win/draw totals for the lifetime of one engine."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

from .board import Mark


@dataclass
class ScoreTracker:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record_win(self, mark: Mark) -> None:
        if mark is Mark.X:
            self.x_wins += 1
        elif mark is Mark.O:
            self.o_wins += 1
        else:
            raise ValueError(f"Only X or O can win, got {mark!r}")

    def record_draw(self) -> None:
        self.draws += 1

    @property
    def total_games(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
