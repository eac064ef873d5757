from typing import List, Set

import pytest

try:
    from hypothesis import given, settings, strategies as st  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - test infra
    pytest.skip("Hypothesis not installed", allow_module_level=True)

from tttengine.board import Board, Mark
from tttengine.outcome import OutcomeDetector
from tttengine.rails import RailSet, winner_of
from tttengine.selector import MoveSelector
from tttengine.solver import apply_move, best_move, legal_moves
from tttengine.tactics import first_completing_cell


def play_sequence(order: List[int], plies: int) -> Board:
    """Alternate X/O over ``order`` for up to ``plies`` moves, stopping at a win."""
    b = Board()
    mark = Mark.X
    for mv in order[:plies]:
        if winner_of(b.cells) is not None:
            break
        b.mark(mv, mark)
        mark = mark.opponent()
    return b


def side_to_move(b: Board) -> Mark:
    return Mark.X if b.count(Mark.X) == b.count(Mark.O) else Mark.O


reachable = st.builds(play_sequence, st.permutations(list(range(9))), st.integers(0, 9))
open_positions = reachable.filter(lambda b: not b.is_full() and winner_of(b.cells) is None)


@settings(deadline=None)
@given(open_positions, st.integers(0, 100), st.integers())
def test_selected_cell_is_always_empty(board: Board, smarts: int, seed: int):
    before = board.to_string()
    sel = MoveSelector(side_to_move(board), seed=seed)
    idx = sel.select_move(board, smarts)
    assert board.cell_at(idx) is Mark.EMPTY
    assert board.to_string() == before


@given(reachable)
def test_draw_and_win_are_exclusive(board: Board):
    d = OutcomeDetector(board)
    w = d.find_winning_mark()
    assert d.is_draw() == (board.is_full() and w is None)
    assert not (d.is_draw() and w is not None)


@given(open_positions, st.integers())
def test_smart_never_misses_win_or_block(board: Board, seed: int):
    me = side_to_move(board)
    rails = RailSet(board)
    idx = MoveSelector(me, seed=seed).select_move(board, 50)
    win = first_completing_cell(rails, me)
    block = first_completing_cell(rails, me.opponent())
    if win is not None:
        assert idx == win
        child = board.copy()
        child.mark(idx, me)
        assert winner_of(child.cells) is me
    elif block is not None:
        assert idx == block


def _finishers(cells, to_move: Mark, computer: Mark) -> Set[object]:
    """Every result reachable when the computer plays best_move and the
    opponent tries all replies."""
    w = winner_of(cells)
    if w is not None:
        return {w}
    if Mark.EMPTY not in cells:
        return {None}
    if to_move is computer:
        idx, _ = best_move(cells, computer)
        return _finishers(apply_move(cells, idx, computer), to_move.opponent(), computer)
    results: Set[object] = set()
    for mv in legal_moves(cells):
        results |= _finishers(apply_move(cells, mv, to_move), to_move.opponent(), computer)
    return results


@pytest.mark.parametrize("computer,first", [
    (Mark.X, Mark.X),  # genius opens
    (Mark.O, Mark.X),  # opponent opens
    (Mark.O, Mark.O),
    (Mark.X, Mark.O),
])
def test_genius_never_loses_against_any_opponent(computer: Mark, first: Mark):
    results = _finishers((Mark.EMPTY,) * 9, first, computer)
    assert computer.opponent() not in results


@settings(max_examples=50, deadline=None)
@given(st.lists(st.integers(0, 8), min_size=9, max_size=9), st.booleans())
def test_genius_beats_or_draws_scripted_opponent(prefs: List[int], genius_first: bool):
    # opponent takes its preferred cells in order, falling back to the lowest empty
    b = Board()
    genius = Mark.X if genius_first else Mark.O
    sel = MoveSelector(genius, seed=0)
    mover = Mark.X
    turn = 0
    while winner_of(b.cells) is None and not b.is_full():
        if mover is genius:
            idx = sel.select_move(b, 100)
        else:
            idx = prefs[turn] if b.cell_at(prefs[turn]) is Mark.EMPTY else b.empty_cells()[0]
            turn += 1
        b.mark(idx, mover)
        mover = mover.opponent()
    assert winner_of(b.cells) is not genius.opponent()
