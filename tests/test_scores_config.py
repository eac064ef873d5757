import pytest

from tttengine.board import Mark
from tttengine.config import EngineConfig
from tttengine.errors import InvalidDifficultyError
from tttengine.scores import ScoreTracker


def test_tracker_counts():
    s = ScoreTracker()
    s.record_win(Mark.X)
    s.record_win(Mark.X)
    s.record_draw()
    assert s.as_dict() == {"x_wins": 2, "o_wins": 0, "draws": 1}
    assert s.total_games == 3


def test_tracker_rejects_empty_winner():
    with pytest.raises(ValueError):
        ScoreTracker().record_win(Mark.EMPTY)


def test_config_defaults_without_env():
    cfg = EngineConfig.from_env({})
    assert cfg.smarts == 100
    assert cfg.seed is None
    assert cfg.computer_mark is Mark.O
    assert cfg.human_mark is Mark.X


def test_config_from_env_values():
    cfg = EngineConfig.from_env({"TTT_SMARTS": "smart", "TTT_SEED": "12", "TTT_COMPUTER_MARK": "x"})
    assert cfg.smarts == 50
    assert cfg.seed == 12
    assert cfg.computer_mark is Mark.X


def test_config_reads_process_env(monkeypatch):
    monkeypatch.setenv("TTT_SMARTS", "25")
    monkeypatch.delenv("TTT_SEED", raising=False)
    monkeypatch.delenv("TTT_COMPUTER_MARK", raising=False)
    assert EngineConfig.from_env().smarts == 25


@pytest.mark.parametrize("env,exc", [
    ({"TTT_SMARTS": "101"}, InvalidDifficultyError),
    ({"TTT_SMARTS": "hard"}, InvalidDifficultyError),
    ({"TTT_SEED": "abc"}, ValueError),
    ({"TTT_COMPUTER_MARK": "Z"}, ValueError),
    ({"TTT_COMPUTER_MARK": "-"}, ValueError),
])
def test_config_rejects_bad_env(env, exc):
    with pytest.raises(exc):
        EngineConfig.from_env(env)
