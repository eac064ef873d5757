"""Engine configuration.

Environment-first, with explicit arguments (and CLI flags) taking priority:

    TTT_SMARTS          0..100 or easy|smart|genius (default 100)
    TTT_SEED            integer seed for the random tiers (default: clock)
    TTT_COMPUTER_MARK   X or O (default O; the human plays the other mark)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .board import Mark
from .difficulty import DEFAULT_SMARTS, parse_smarts, validate_smarts


@dataclass
class EngineConfig:
    smarts: int = DEFAULT_SMARTS
    seed: Optional[int] = None
    computer_mark: Mark = Mark.O

    def __post_init__(self) -> None:
        validate_smarts(self.smarts)
        if self.computer_mark is Mark.EMPTY:
            raise ValueError("computer_mark must be X or O")

    @property
    def human_mark(self) -> Mark:
        return self.computer_mark.opponent()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ
        smarts = DEFAULT_SMARTS
        raw = env.get("TTT_SMARTS")
        if raw:
            smarts = parse_smarts(raw)
        seed = None
        raw = env.get("TTT_SEED")
        if raw:
            try:
                seed = int(raw)
            except ValueError:
                raise ValueError(f"TTT_SEED must be an integer: {raw!r}") from None
        mark = Mark.O
        raw = env.get("TTT_COMPUTER_MARK")
        if raw:
            mark = Mark.parse(raw)
        return cls(smarts=smarts, seed=seed, computer_mark=mark)
