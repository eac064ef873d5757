#!/usr/bin/env python3
"""Time the cold Genius search and an Easy-vs-Genius arena, per seed."""
from __future__ import annotations

import argparse
import logging
import statistics
import time
from pathlib import Path
from typing import List, Tuple

from tttengine.arena import run_matches
from tttengine.board import CELL_COUNT, Mark
from tttengine.solver import best_move, clear_cache
from tttengine.tracking import log_metrics, log_params, maybe_mlflow_run


def mean_and_half_width(values: List[float]) -> Tuple[float, float]:
    """Mean and 95% normal-approximation half-width."""
    if len(values) < 2:
        return (values[0] if values else float("nan"), 0.0)
    return statistics.fmean(values), 1.96 * statistics.stdev(values) / len(values) ** 0.5


def cold_search_seconds() -> float:
    clear_cache()
    t0 = time.perf_counter()
    best_move((Mark.EMPTY,) * CELL_COUNT, Mark.X)
    return time.perf_counter() - t0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="tttengine timings")
    p.add_argument("--seeds", type=int, default=10)
    p.add_argument("--games", type=int, default=200)
    p.add_argument("--tracking", choices=["none", "mlflow"], default="none")
    p.add_argument("--log-dir", type=Path, default=Path("runs"))
    ns = p.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    with maybe_mlflow_run(ns.tracking == "mlflow", run_name="benchmarks", log_dir=ns.log_dir):
        log_params({"seeds": ns.seeds, "games": ns.games})
        cold: List[float] = []
        arena: List[float] = []
        genius_losses = 0
        for seed in range(ns.seeds):
            cold.append(cold_search_seconds())
            report = run_matches(ns.games, x_smarts=0, o_smarts=100, seed=seed)
            arena.append(report.elapsed_s)
            genius_losses += report.x_wins
        m_cold, h_cold = mean_and_half_width(cold)
        m_arena, h_arena = mean_and_half_width(arena)
        log_metrics({
            "cold_search_mean_s": m_cold,
            "cold_search_ci95_half_s": h_cold,
            "arena_mean_s": m_arena,
            "arena_ci95_half_s": h_arena,
            "genius_losses": float(genius_losses),
        })
    logging.info("cold search %.4fs +/- %.4fs", m_cold, h_cold)
    logging.info("arena (%d games) %.4fs +/- %.4fs", ns.games, m_arena, h_arena)
    logging.info("genius losses: %d", genius_losses)
    return 1 if genius_losses else 0


if __name__ == "__main__":
    raise SystemExit(main())
