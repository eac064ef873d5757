from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .arena import run_matches
from .board import Board, Mark
from .config import EngineConfig
from .console import ConsoleGame
from .difficulty import Tier, parse_smarts
from .engine import GameEngine
from .errors import EngineError
from .outcome import OutcomeDetector
from .selector import MoveSelector
from .solver import move_scores
from .tracking import log_metrics, log_params, maybe_mlflow_run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe engine CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for the random tiers (default: TTT_SEED or the clock)")

    p_play = sub.add_parser("play", help="Play against the computer in the terminal")
    p_play.add_argument("--smarts", help="0-100 or easy|smart|genius (default: TTT_SMARTS or 100)")
    p_play.add_argument("--computer-mark", choices=["X", "O"], default=None,
                        help="Mark the computer plays (default: TTT_COMPUTER_MARK or O)")

    p_move = sub.add_parser("move", help="Pick the computer's move for a board")
    p_move.add_argument("--board", required=True,
                        help="9 chars, X/O for marks and . for empty, e.g. XX..O....")
    p_move.add_argument("--smarts", help="0-100 or easy|smart|genius")
    p_move.add_argument("--mark", choices=["X", "O"], default=None,
                        help="Mark the computer plays (default: TTT_COMPUTER_MARK or O)")
    p_move.add_argument("--explain", action="store_true",
                        help="Also print the minimax score of every empty cell")

    p_out = sub.add_parser("outcome", help="Report winner/draw for a board")
    p_out.add_argument("--board", required=True, help="9 chars, X/O for marks and . for empty")

    p_sim = sub.add_parser("simulate", help="Play tiers against each other and report totals")
    p_sim.add_argument("--games", type=int, default=100, help="Number of games (default: 100)")
    p_sim.add_argument("--x-smarts", default="easy", help="Smarts of the X side (default: easy)")
    p_sim.add_argument("--o-smarts", default="genius", help="Smarts of the O side (default: genius)")
    p_sim.add_argument("--no-alternate", dest="alternate", action="store_false",
                       help="X opens every game instead of alternating")
    p_sim.add_argument("--tracking", choices=["none", "mlflow"], default="none",
                       help="Experiment tracking backend")
    p_sim.add_argument("--log-dir", type=Path, default=Path("runs"),
                       help="Directory for tracking logs (mlflow local backend)")

    return p


def _load_config(ns: argparse.Namespace) -> EngineConfig:
    cfg = EngineConfig.from_env()
    if getattr(ns, "smarts", None):
        cfg.smarts = parse_smarts(ns.smarts)
    if ns.seed is not None:
        cfg.seed = ns.seed
    mark = getattr(ns, "computer_mark", None) or getattr(ns, "mark", None)
    if mark:
        cfg.computer_mark = Mark(mark)
    return cfg


def _parse_board(raw: str) -> Optional[Board]:
    try:
        return Board.from_string(raw)
    except ValueError:
        logging.error("Invalid board string. Must be 9 chars of X, O or '.'")
        return None


def _cmd_move(ns: argparse.Namespace, cfg: EngineConfig) -> int:
    board = _parse_board(ns.board)
    if board is None:
        return 2
    detector = OutcomeDetector(board)
    if detector.find_winning_mark() is not None or board.is_full():
        logging.error("Game is already over: %s", detector.outcome().value)
        return 2
    selector = MoveSelector(cfg.computer_mark, seed=cfg.seed)
    idx = selector.select_move(board, cfg.smarts)
    logging.info("tier=%s mark=%s move=%d", Tier.from_smarts(cfg.smarts).value,
                 cfg.computer_mark.value, idx)
    if ns.explain:
        scores = move_scores(board.snapshot(), cfg.computer_mark)
        logging.info("scores=%s", " ".join(f"{i}:{s:+d}" for i, s in scores.items()))
    return 0


def _cmd_outcome(ns: argparse.Namespace) -> int:
    board = _parse_board(ns.board)
    if board is None:
        return 2
    detector = OutcomeDetector(board)
    winner = detector.find_winning_mark()
    rail = detector.winning_rail()
    logging.info(
        "outcome=%s winner=%s draw=%s rail=%s",
        detector.outcome().value,
        winner.value if winner is not None else "-",
        detector.is_draw(),
        rail.name if rail is not None else "-",
    )
    return 0


def _cmd_simulate(ns: argparse.Namespace, cfg: EngineConfig) -> int:
    if ns.games < 1:
        logging.error("--games must be positive: %s", ns.games)
        return 2
    x_smarts = parse_smarts(ns.x_smarts)
    o_smarts = parse_smarts(ns.o_smarts)
    with maybe_mlflow_run(ns.tracking == "mlflow", run_name="simulate", log_dir=ns.log_dir):
        log_params({"games": ns.games, "x_smarts": x_smarts, "o_smarts": o_smarts,
                    "alternate": ns.alternate, "seed": cfg.seed})
        report = run_matches(ns.games, x_smarts, o_smarts, seed=cfg.seed, alternate=ns.alternate)
        log_metrics({"x_wins": report.x_wins, "o_wins": report.o_wins,
                     "draws": report.draws, "elapsed_s": report.elapsed_s})
    logging.info("games=%d x_wins=%d o_wins=%d draws=%d",
                 report.games, report.x_wins, report.o_wins, report.draws)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import PackageNotFoundError, version as _ver

            print(_ver("tttengine"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    try:
        cfg = _load_config(ns)
    except (EngineError, ValueError) as e:
        logging.error("%s", e)
        return 2

    try:
        if ns.cmd == "play":
            return ConsoleGame(GameEngine(config=cfg)).run()
        if ns.cmd == "move":
            return _cmd_move(ns, cfg)
        if ns.cmd == "outcome":
            return _cmd_outcome(ns)
        if ns.cmd == "simulate":
            return _cmd_simulate(ns, cfg)
    except EngineError as e:
        logging.error("%s", e)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
