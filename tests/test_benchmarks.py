import pytest

from tttengine.arena import run_matches
from tttengine.board import Mark
from tttengine.solver import best_move, clear_cache

pytest.importorskip("pytest_benchmark")


def test_benchmark_cold_genius_search(benchmark):
    def _search():
        clear_cache()
        return best_move((Mark.EMPTY,) * 9, Mark.X)

    idx, score = benchmark(_search)
    assert idx == 0 and score == 0


def test_benchmark_arena(benchmark):
    report = benchmark(lambda: run_matches(20, x_smarts=0, o_smarts=100, seed=1))
    assert report.x_wins == 0
