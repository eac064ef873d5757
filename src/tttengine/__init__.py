"""tttengine package.

Move selection and win/draw detection for 3x3 tic-tac-toe, with three
computer strength tiers (easy, smart, genius), a text view and a CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board, Mark
from .difficulty import Tier
from .engine import GameEngine, GameStatus
from .errors import EngineError, InvalidDifficultyError, NoMoveAvailableError, OccupiedCellError
from .outcome import Outcome, OutcomeDetector
from .rails import Rail, RailSet
from .scores import ScoreTracker
from .selector import MoveSelector

__all__ = [
    "Board",
    "Mark",
    "Tier",
    "GameEngine",
    "GameStatus",
    "EngineError",
    "InvalidDifficultyError",
    "NoMoveAvailableError",
    "OccupiedCellError",
    "Outcome",
    "OutcomeDetector",
    "Rail",
    "RailSet",
    "ScoreTracker",
    "MoveSelector",
]
