import os
import subprocess
import sys
from pathlib import Path

import pytest

from tttengine.cli import main

SRC = Path(__file__).resolve().parents[1] / "src"


def _run_cli(args: list[str], cwd: Path, **env) -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "tttengine.cli"]
    full_env = dict(os.environ)
    full_env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), full_env.get("PYTHONPATH")]))
    for k in ("TTT_SMARTS", "TTT_SEED", "TTT_COMPUTER_MARK"):
        full_env.pop(k, None)
    full_env.update(env)
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True, env=full_env)


def test_cli_move_blocks(tmp_path: Path):
    r = _run_cli(["move", "--board", "XX..O...."], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "tier=genius" in s and "move=2" in s


def test_cli_move_smart_takes_center_with_explain(tmp_path: Path):
    r = _run_cli(["move", "--board", ".........", "--smarts", "smart", "--explain"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "move=4" in s
    assert "scores=" in s


def test_cli_move_reads_env(tmp_path: Path):
    r = _run_cli(["move", "--board", "OO.XX...."], cwd=tmp_path, TTT_COMPUTER_MARK="X", TTT_SMARTS="50")
    assert r.returncode == 0
    assert "move=5" in r.stdout + r.stderr


def test_cli_outcome(tmp_path: Path):
    r = _run_cli(["outcome", "--board", "XOXOXOOXO"], cwd=tmp_path)
    assert r.returncode == 0
    assert "outcome=draw" in r.stdout + r.stderr
    r = _run_cli(["outcome", "--board", "OOOXX...."], cwd=tmp_path)
    s = r.stdout + r.stderr
    assert "winner=O" in s and "rail=row1" in s


@pytest.mark.parametrize("bad", ["abc", "XXXXXXXXXX", "XO.X...Z."])
def test_cli_error_invalid_boards(tmp_path: Path, bad: str):
    r = _run_cli(["outcome", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2
    r = _run_cli(["move", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_error_finished_game_and_bad_smarts(tmp_path: Path):
    assert _run_cli(["move", "--board", "XXXOO...."], cwd=tmp_path).returncode == 2
    assert _run_cli(["move", "--board", ".........", "--smarts", "101"], cwd=tmp_path).returncode == 2
    assert _run_cli(["move", "--board", "........."], cwd=tmp_path, TTT_SEED="x").returncode == 2


def test_cli_simulate(tmp_path: Path):
    r = _run_cli(["--seed", "3", "simulate", "--games", "6", "--x-smarts", "easy"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "games=6 x_wins=0" in s


def test_cli_play_quits_on_eof(tmp_path: Path):
    r = subprocess.run(
        [sys.executable, "-m", "tttengine.cli", "play", "--smarts", "easy"],
        cwd=tmp_path, input="5\nq\n", capture_output=True, text=True,
        env={**os.environ, "PYTHONPATH": str(SRC)},
    )
    assert r.returncode == 0
    assert "Good move!" in r.stdout


def test_main_in_process(capsys):
    assert main(["outcome", "--board", "XXX......"]) == 0
    assert main(["simulate", "--games", "0"]) == 2
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_cli_help_smoke(tmp_path: Path):
    for args in (["--help"], ["play", "--help"], ["move", "--help"],
                 ["outcome", "--help"], ["simulate", "--help"]):
        r = _run_cli(args, cwd=tmp_path)
        assert r.returncode == 0
        assert r.stdout or r.stderr
