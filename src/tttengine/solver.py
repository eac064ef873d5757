"""
Exact minimax search (Genius tier), from the computer's perspective.

Scoring policy:
- +10 when the computer's mark holds a winning rail, -10 for the opponent,
  0 for a full board with no winner.
- Scores are NOT depth-adjusted.
- At the root, ties go to the first best cell in index order 0..8.

Positions are immutable tuples of marks (copy-on-recurse), so no recursive
call ever sees another call's provisional mark. Results are memoised per
(cells, side to move, computer mark).
"""
from functools import lru_cache
from typing import Dict, Sequence, Tuple

from .board import CELL_COUNT, Mark
from .errors import NoMoveAvailableError
from .rails import winner_of

WIN_SCORE = 10
LOSS_SCORE = -WIN_SCORE
DRAW_SCORE = 0

Cells = Tuple[Mark, ...]


def legal_moves(cells: Cells) -> Tuple[int, ...]:
    return tuple(i for i, v in enumerate(cells) if v is Mark.EMPTY)


def apply_move(cells: Cells, idx: int, mark: Mark) -> Cells:
    lst = list(cells)
    lst[idx] = mark
    return tuple(lst)


def terminal_score(cells: Cells, computer: Mark):
    """Score of a finished position, or None while play can continue."""
    w = winner_of(cells)
    if w is computer:
        return WIN_SCORE
    if w is not None:
        return LOSS_SCORE
    if Mark.EMPTY not in cells:
        return DRAW_SCORE
    return None


@lru_cache(maxsize=None)
def minimax_score(cells: Cells, to_move: Mark, computer: Mark) -> int:
    t = terminal_score(cells, computer)
    if t is not None:
        return t
    maximizing = to_move is computer
    best = None
    for mv in legal_moves(cells):
        child = apply_move(cells, mv, to_move)
        score = minimax_score(child, to_move.opponent(), computer)
        if best is None or (score > best if maximizing else score < best):
            best = score
    return best


def move_scores(cells: Sequence[Mark], computer: Mark) -> Dict[int, int]:
    """Minimax score of each empty cell, if the computer plays there now."""
    cells = tuple(cells)
    opponent = computer.opponent()
    return {
        mv: minimax_score(apply_move(cells, mv, computer), opponent, computer)
        for mv in legal_moves(cells)
    }


def best_move(cells: Sequence[Mark], computer: Mark) -> Tuple[int, int]:
    """Return ``(cell, score)`` of the computer's best reply."""
    cells = tuple(cells)
    if len(cells) != CELL_COUNT:
        raise ValueError(f"Expected {CELL_COUNT} cells, got {len(cells)}")
    best_idx = None
    best_score = None
    for mv, score in move_scores(cells, computer).items():
        # strict '>' keeps the first cell among equal scores
        if best_score is None or score > best_score:
            best_idx, best_score = mv, score
    if best_idx is None:
        raise NoMoveAvailableError("Board is full; no move to search")
    return best_idx, best_score


def cache_info():
    return minimax_score.cache_info()


def clear_cache() -> None:
    minimax_score.cache_clear()
