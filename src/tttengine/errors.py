"""
Error taxonomy for the engine.

All errors are re-derivable from board state, so callers are expected to
pre-check (is the cell empty? is the board full?) rather than rely on them
for control flow.
"""
from __future__ import annotations


class EngineError(Exception):
    """Base class for every error raised by tttengine."""


class OccupiedCellError(EngineError, ValueError):
    """A mark was placed on a cell that already holds one."""

    def __init__(self, index: int, current: object) -> None:
        super().__init__(f"Cell {index} is already taken by {current}")
        self.index = index
        self.current = current


class NoMoveAvailableError(EngineError, RuntimeError):
    """A computer move was requested on a full board."""


class InvalidDifficultyError(EngineError, ValueError):
    """Smarts value outside [0, 100] or not an integer."""
